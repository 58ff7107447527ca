"""Manifest registration store and its platform strategies."""

import sys
from pathlib import Path

from office_toolbox.core.powershell import RealPowerShell
from office_toolbox.core.registration.abc import ManifestRegistry, RegistrationEntry
from office_toolbox.core.registration.directory import DirectoryManifestRegistry
from office_toolbox.core.registration.dry_run import DryRunManifestRegistry
from office_toolbox.core.registration.windows import RegistryManifestRegistry


def create_registry(
    *,
    sideloading_root: Path,
    powershell_executable: str,
    platform: str = sys.platform,
) -> ManifestRegistry:
    """Select the registration strategy for the running platform.

    Windows keeps manifests in the registry; every other platform uses the
    per-application sideloading directories.
    """
    if platform == "win32":
        return RegistryManifestRegistry(RealPowerShell(powershell_executable))
    return DirectoryManifestRegistry(sideloading_root)


__all__ = [
    "DirectoryManifestRegistry",
    "DryRunManifestRegistry",
    "ManifestRegistry",
    "RegistrationEntry",
    "RegistryManifestRegistry",
    "create_registry",
]
