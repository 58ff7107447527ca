"""Directory-backed manifest registry used where there is no Windows registry.

Each sideloadable application watches its own ``wef`` directory. A manifest is
registered by hard-linking it into that directory under its own file name, so
later edits to the source manifest are picked up without registering again.
"""

import logging
import os
import re
from pathlib import Path

from office_toolbox.core.applications import APPLICATION_PROFILES, get_profile
from office_toolbox.core.errors import (
    BackingStoreError,
    ConflictError,
    MissingArgumentError,
    NothingRemovedError,
    UnsupportedApplicationError,
)
from office_toolbox.core.registration.abc import ManifestRegistry, RegistrationEntry

logger = logging.getLogger(__name__)

# Filesystem noise dropped by operating systems and editors
_JUNK_PATTERN = re.compile(
    r"^npm-debug\.log$"
    r"|^\..*\.swp$"
    r"|^\.DS_Store$"
    r"|^\.AppleDouble$"
    r"|^\.LSOverride$"
    r"|^Icon\r$"
    r"|^\._.*"
    r"|^\.Spotlight-V100$"
    r"|\.Trashes"
    r"|^__MACOSX$"
    r"|~$"
    r"|^Thumbs\.db$"
    r"|^ehthumbs\.db$"
    r"|^Desktop\.ini$"
    r"|@eaDir$"
)


def is_junk(file_name: str) -> bool:
    """Return True for OS/editor noise files that are never manifests."""
    return _JUNK_PATTERN.search(file_name) is not None


def _same_file(first: Path, second: Path) -> bool:
    """Device and inode equality; False if either path is missing."""
    if not first.exists() or not second.exists():
        return False
    first_stat = first.stat()
    second_stat = second.stat()
    return first_stat.st_dev == second_stat.st_dev and first_stat.st_ino == second_stat.st_ino


class DirectoryManifestRegistry(ManifestRegistry):
    """Registers manifests as hard links under ``<sideloading_root>/<app wef dir>``."""

    def __init__(self, sideloading_root: Path) -> None:
        """Initialize the registry.

        Args:
            sideloading_root: Base directory for the per-application directories,
                normally the user's home directory
        """
        self._sideloading_root = sideloading_root

    @property
    def is_per_application(self) -> bool:
        return True

    def sideloading_directory(self, application: str) -> Path:
        """Directory watched by the application for sideloaded manifests.

        Raises:
            UnsupportedApplicationError: If the application has no such directory
        """
        profile = get_profile(application)
        directory = (
            profile.sideloading_directory(self._sideloading_root) if profile is not None else None
        )
        if profile is None or not profile.can_sideload or directory is None:
            raise UnsupportedApplicationError(
                "Automatic sideloading is not available for this application", application
            )
        return directory

    def add(self, application: str, manifest_path: Path) -> None:
        directory = self.sideloading_directory(application)
        directory.mkdir(parents=True, exist_ok=True)

        destination = directory / manifest_path.name
        if destination.exists():
            if not _same_file(manifest_path, destination):
                raise ConflictError(
                    "Remove the manifest with matching name before adding this one",
                    str(destination.resolve()),
                )
            logger.debug("Manifest already linked at %s", destination)
            return

        try:
            destination.hardlink_to(manifest_path)
        except OSError as e:
            raise BackingStoreError(
                "Failed to link the manifest into the sideloading directory", str(destination)
            ) from e
        logger.debug("Linked %s -> %s", destination, manifest_path)

    def _scanned_applications(self, application: str | None) -> list[tuple[str, Path]]:
        if application is not None:
            return [(application.lower(), self.sideloading_directory(application))]

        scanned: list[tuple[str, Path]] = []
        for name, profile in APPLICATION_PROFILES.items():
            directory = profile.sideloading_directory(self._sideloading_root)
            if directory is not None:
                scanned.append((name, directory))
        return scanned

    def list_manifests(self, application: str | None) -> list[RegistrationEntry]:
        entries: list[RegistrationEntry] = []
        for name, directory in self._scanned_applications(application):
            if not directory.is_dir():
                continue
            for item in sorted(directory.iterdir()):
                if is_junk(item.name):
                    continue
                entries.append(RegistrationEntry(application=name, manifest_path=item.resolve()))
        return entries

    def remove(self, application: str | None, manifest_path: Path | None) -> list[RegistrationEntry]:
        if manifest_path is None:
            raise MissingArgumentError("No manifest was specified")

        target = manifest_path.resolve() if manifest_path.exists() else manifest_path

        removed: list[RegistrationEntry] = []
        for name, directory in self._scanned_applications(application):
            if not directory.is_dir():
                continue
            for item in sorted(directory.iterdir()):
                real_path = item.resolve()
                if real_path != target and not _same_file(item, target):
                    continue
                logger.debug("Unlinking %s for application %s", item, name)
                os.unlink(item)
                removed.append(RegistrationEntry(application=name, manifest_path=real_path))

        if not removed:
            raise NothingRemovedError(
                'No manifests were found to remove. Use "list" to show manifests that have been added'
            )
        return removed
