"""Registry-backed manifest registry used on Windows.

Office reads developer manifests from values under
``HKCU:\\Software\\Microsoft\\Office\\16.0\\WEF\\Developer``. Each manifest we
register is stored as a value whose name and data are both the manifest path;
that equality is how our registrations are told apart from anything else living
under the key.
"""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from office_toolbox.core.errors import (
    BackingStoreError,
    HostNotInstalledError,
    MissingArgumentError,
)
from office_toolbox.core.powershell.abc import PowerShell
from office_toolbox.core.registration.abc import ManifestRegistry, RegistrationEntry

logger = logging.getLogger(__name__)

OFFICE16_REGISTRY_PATH = "HKCU:\\Software\\Microsoft\\Office\\16.0"
WEF_FOLDER = "\\WEF"
DEVELOPER_FOLDER = "\\Developer"
DEVELOPER_REGISTRY_PATH = OFFICE16_REGISTRY_PATH + WEF_FOLDER + DEVELOPER_FOLDER

HOST_NOT_INSTALLED_MARKER = "NO-OFFICE-16"


def _quote(value: str) -> str:
    """Single-quote a value for PowerShell, where quotes are escaped by doubling."""
    return "'" + value.replace("'", "''") + "'"


def ensure_key_commands() -> list[str]:
    """Commands verifying Office is installed and creating WEF\\Developer if needed."""
    return [
        f"$RegistryPath = {_quote(OFFICE16_REGISTRY_PATH)}",
        f'if(!(Test-Path $RegistryPath)) {{ Throw "{HOST_NOT_INSTALLED_MARKER}" }}',
        f"$RegistryPath = {_quote(OFFICE16_REGISTRY_PATH + WEF_FOLDER)}",
        "if(!(Test-Path $RegistryPath)) { New-Item -Path $RegistryPath | Out-Null }",
        f"$RegistryPath = {_quote(DEVELOPER_REGISTRY_PATH)}",
        "if(!(Test-Path $RegistryPath)) { New-Item -Path $RegistryPath | Out-Null }",
    ]


class RegistryManifestRegistry(ManifestRegistry):
    """Registers manifests as name==data values under the WEF Developer key."""

    def __init__(self, powershell: PowerShell) -> None:
        self._powershell = powershell

    @property
    def is_per_application(self) -> bool:
        return False

    def _query_store(self, commands: Sequence[str]) -> str:
        """Ensure the Developer key exists, then run commands against it.

        Two separate host invocations are used: one to prepare the key, one
        with ``$RegistryPath`` bound to the Developer key for the commands.

        Raises:
            HostNotInstalledError: If the Office 16.0 key is absent
            BackingStoreError: If PowerShell fails for any other reason
        """
        try:
            self._powershell.invoke(ensure_key_commands())
            return self._powershell.invoke(
                [f"$RegistryPath = {_quote(DEVELOPER_REGISTRY_PATH)}", *commands]
            )
        except RuntimeError as e:
            diagnostic = str(e)
            if HOST_NOT_INSTALLED_MARKER in diagnostic:
                raise HostNotInstalledError(
                    f"{OFFICE16_REGISTRY_PATH} could not be found in the registry. "
                    "Make sure Microsoft Office is installed"
                ) from e
            raise BackingStoreError(diagnostic) from e

    def add(self, application: str, manifest_path: Path) -> None:
        path_text = _quote(str(manifest_path))
        self._query_store(
            [f"Set-ItemProperty -LiteralPath $RegistryPath -Name {path_text} -Value {path_text}"]
        )
        logger.debug("Registered %s in %s", manifest_path, DEVELOPER_REGISTRY_PATH)

    def list_manifests(self, application: str | None) -> list[RegistrationEntry]:
        output = self._query_store(
            ["Get-ItemProperty -LiteralPath $RegistryPath | ConvertTo-Json -Compress"]
        )
        if not output or "{" not in output:
            return []

        try:
            values = json.loads(output[output.index("{") :])
        except json.JSONDecodeError as e:
            raise BackingStoreError(f"Unexpected registry output: {output.strip()}") from e
        if not isinstance(values, dict):
            return []

        entries: list[RegistrationEntry] = []
        for name, data in values.items():
            # Registered manifests have matching name and value
            if str(data).lower() == name.lower():
                entries.append(RegistrationEntry(application=None, manifest_path=Path(name)))
        return entries

    def remove(self, application: str | None, manifest_path: Path | None) -> list[RegistrationEntry]:
        """Delete the value named after the manifest path.

        Removing a path that is not registered succeeds silently, so the
        returned list always holds the requested entry.
        """
        if manifest_path is None:
            raise MissingArgumentError("No manifest was specified")

        self._query_store(
            [
                "Remove-ItemProperty -LiteralPath $RegistryPath "
                f"-Name {_quote(str(manifest_path))} -ErrorAction SilentlyContinue"
            ]
        )
        return [RegistrationEntry(application=None, manifest_path=manifest_path)]
