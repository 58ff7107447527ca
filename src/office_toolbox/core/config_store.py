"""Global configuration data structures, loading and saving.

Provides immutable global config data loaded from ~/.office-toolbox/config.toml.
The file is optional: when it does not exist every field takes its default.
"""

import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

import tomlkit

CONFIG_KEYS = ("sideloading_root", "open_generated_documents", "powershell_executable")


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in ToolboxContext.
    All fields are read-only after construction.
    """

    sideloading_root: Path = field(default_factory=Path.home)
    open_generated_documents: bool = True
    powershell_executable: str = "powershell.exe"


def parse_boolean(value: str, field_name: str) -> bool:
    """Parse "true"/"false" (case-insensitive).

    Raises:
        ValueError: If the value is neither
    """
    if value.lower() not in ("true", "false"):
        raise ValueError(f"Invalid boolean value for {field_name}: {value}")
    return value.lower() == "true"


def update_config_field(config: GlobalConfig, field_name: str, value: str) -> GlobalConfig:
    """Return a copy of config with one field set from its string form.

    Raises:
        ValueError: If the field is unknown or the value is invalid
    """
    match field_name:
        case "sideloading_root":
            return GlobalConfig(
                sideloading_root=Path(value).expanduser().resolve(),
                open_generated_documents=config.open_generated_documents,
                powershell_executable=config.powershell_executable,
            )
        case "open_generated_documents":
            return GlobalConfig(
                sideloading_root=config.sideloading_root,
                open_generated_documents=parse_boolean(value, field_name),
                powershell_executable=config.powershell_executable,
            )
        case "powershell_executable":
            if not value:
                raise ValueError("powershell_executable cannot be empty")
            return GlobalConfig(
                sideloading_root=config.sideloading_root,
                open_generated_documents=config.open_generated_documents,
                powershell_executable=value,
            )
        case _:
            raise ValueError(f"Invalid config key: {field_name}")


def format_config_value(config: GlobalConfig, field_name: str) -> str:
    """Render a config field the way it is written in config.toml."""
    match field_name:
        case "sideloading_root":
            return str(config.sideloading_root)
        case "open_generated_documents":
            return str(config.open_generated_documents).lower()
        case "powershell_executable":
            return config.powershell_executable
        case _:
            raise ValueError(f"Invalid config key: {field_name}")


class ConfigStore(ABC):
    """Abstract interface for global config operations.

    Provides dependency injection for global config access, enabling
    in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if global config exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config, using defaults for absent keys.

        Raises:
            ValueError: If a value has the wrong type
        """
        ...

    @abstractmethod
    def save(self, config: GlobalConfig) -> None:
        """Save global config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the global config file (for messages)."""
        ...


class RealConfigStore(ConfigStore):
    """Production implementation that reads/writes ~/.office-toolbox/config.toml."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GlobalConfig:
        config_path = self.path()
        if not config_path.exists():
            return GlobalConfig()

        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        defaults = GlobalConfig()

        root = data.get("sideloading_root")
        if root is not None and not isinstance(root, str):
            raise ValueError(f"'sideloading_root' must be a string in {config_path}")

        open_documents = data.get("open_generated_documents", defaults.open_generated_documents)
        if not isinstance(open_documents, bool):
            raise ValueError(f"'open_generated_documents' must be a boolean in {config_path}")

        executable = data.get("powershell_executable", defaults.powershell_executable)
        if not isinstance(executable, str) or not executable:
            raise ValueError(f"'powershell_executable' must be a non-empty string in {config_path}")

        return GlobalConfig(
            sideloading_root=(
                Path(root).expanduser().resolve() if root else defaults.sideloading_root
            ),
            open_generated_documents=open_documents,
            powershell_executable=executable,
        )

    def save(self, config: GlobalConfig) -> None:
        """Write config, preserving comments and unknown keys already in the file."""
        config_path = self.path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if config_path.exists():
            with config_path.open("r", encoding="utf-8") as f:
                doc = tomlkit.load(f)
        else:
            doc = tomlkit.document()
            doc.add(tomlkit.comment("Global office-toolbox configuration"))

        doc["sideloading_root"] = str(config.sideloading_root)
        doc["open_generated_documents"] = config.open_generated_documents
        doc["powershell_executable"] = config.powershell_executable

        with config_path.open("w", encoding="utf-8") as f:
            tomlkit.dump(doc, f)

    def path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        return Path.home() / ".office-toolbox" / "config.toml"


class FakeConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        if self._config is None:
            return GlobalConfig()
        return self._config

    def save(self, config: GlobalConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/office-toolbox/config.toml")
