"""Application context with dependency injection."""

import sys
from dataclasses import dataclass
from pathlib import Path

import click

from office_toolbox.cli.output import user_output
from office_toolbox.core.config_store import ConfigStore, GlobalConfig, RealConfigStore
from office_toolbox.core.opener import DocumentOpener, RealDocumentOpener
from office_toolbox.core.registration import (
    DryRunManifestRegistry,
    ManifestRegistry,
    create_registry,
)
from office_toolbox.core.templates import bundled_templates_dir
from office_toolbox.core.user_feedback import InteractiveFeedback, UserFeedback
from office_toolbox.core.validator import ManifestValidator, RealManifestValidator


@dataclass(frozen=True)
class ToolboxContext:
    """Immutable context holding all dependencies for office-toolbox operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    registry: ManifestRegistry
    validator: ManifestValidator
    opener: DocumentOpener
    feedback: UserFeedback
    config_store: ConfigStore
    global_config: GlobalConfig
    templates_dir: Path
    cwd: Path  # Current working directory at CLI invocation
    dry_run: bool

    @staticmethod
    def for_test(
        registry: ManifestRegistry | None = None,
        validator: ManifestValidator | None = None,
        opener: DocumentOpener | None = None,
        feedback: UserFeedback | None = None,
        config_store: ConfigStore | None = None,
        global_config: GlobalConfig | None = None,
        templates_dir: Path | None = None,
        cwd: Path | None = None,
        dry_run: bool = False,
    ) -> "ToolboxContext":
        """Create test context with optional pre-configured integration classes.

        Any dependency left as None is replaced by its fake, so tests only build
        the pieces they assert on.

        Example:
            >>> registry = FakeManifestRegistry()
            >>> ctx = ToolboxContext.for_test(registry=registry, cwd=tmp_path)
            >>> result = runner.invoke(cli, ["list"], obj=ctx)
        """
        from tests.fakes.opener import FakeDocumentOpener
        from tests.fakes.registry import FakeManifestRegistry
        from tests.fakes.user_feedback import FakeUserFeedback
        from tests.fakes.validator import FakeManifestValidator

        from office_toolbox.core.config_store import FakeConfigStore

        if registry is None:
            registry = FakeManifestRegistry()

        if validator is None:
            validator = FakeManifestValidator()

        if opener is None:
            opener = FakeDocumentOpener()

        if feedback is None:
            feedback = FakeUserFeedback()

        if global_config is None:
            global_config = GlobalConfig(sideloading_root=Path("/test/home"))

        if config_store is None:
            config_store = FakeConfigStore(config=global_config)

        if dry_run:
            registry = DryRunManifestRegistry(registry)

        return ToolboxContext(
            registry=registry,
            validator=validator,
            opener=opener,
            feedback=feedback,
            config_store=config_store,
            global_config=global_config,
            templates_dir=templates_dir if templates_dir is not None else bundled_templates_dir(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            dry_run=dry_run,
        )


def safe_cwd() -> Path | None:
    """Get current working directory, or None if it no longer exists."""
    try:
        return Path.cwd()
    except (FileNotFoundError, OSError):
        return None


def create_context(*, dry_run: bool, platform: str = sys.platform) -> ToolboxContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap the registry so that add/remove do nothing
        platform: Platform identifier used to pick the registry strategy

    Returns:
        ToolboxContext with real implementations
    """
    cwd = safe_cwd()
    if cwd is None:
        user_output(click.style("Error: ", fg="red") + "Current working directory no longer exists")
        user_output("Please change to a valid directory and try again.")
        raise SystemExit(1)

    config_store = RealConfigStore()
    try:
        global_config = config_store.load()
    except ValueError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from None

    registry = create_registry(
        sideloading_root=global_config.sideloading_root,
        powershell_executable=global_config.powershell_executable,
        platform=platform,
    )
    if dry_run:
        registry = DryRunManifestRegistry(registry)

    return ToolboxContext(
        registry=registry,
        validator=RealManifestValidator(),
        opener=RealDocumentOpener(),
        feedback=InteractiveFeedback(),
        config_store=config_store,
        global_config=global_config,
        templates_dir=bundled_templates_dir(),
        cwd=cwd,
        dry_run=dry_run,
    )
