"""Abstract interface for the sideloaded-manifest registration store.

Architecture:
- ManifestRegistry: Abstract base class defining add/list/remove
- DirectoryManifestRegistry: hard links in per-application directories
- RegistryManifestRegistry: values under the Office WEF\\Developer registry key
- DryRunManifestRegistry: wrapper that skips writes
- FakeManifestRegistry: in-memory implementation for tests
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RegistrationEntry:
    """One registered manifest.

    ``application`` is None for stores that are not partitioned by application.
    """

    application: str | None
    manifest_path: Path


class ManifestRegistry(ABC):
    """Abstract interface for registering developer manifests.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @property
    @abstractmethod
    def is_per_application(self) -> bool:
        """Whether registrations are kept separately for each application."""
        ...

    @abstractmethod
    def add(self, application: str, manifest_path: Path) -> None:
        """Register a manifest for an application.

        Args:
            application: Lower-case application name (ignored if not per-application)
            manifest_path: Absolute, resolved path of the manifest file

        Raises:
            ConflictError: If a different manifest with the same name is registered
            UnsupportedApplicationError: If the application cannot be sideloaded
            HostNotInstalledError: If the store requires Office and it is missing
            BackingStoreError: If the store fails for any other reason
        """
        ...

    @abstractmethod
    def list_manifests(self, application: str | None) -> list[RegistrationEntry]:
        """List registered manifests.

        Args:
            application: Restrict to this application, or None for all

        Returns:
            Registered entries, each tagged with its owning application
        """
        ...

    @abstractmethod
    def remove(self, application: str | None, manifest_path: Path | None) -> list[RegistrationEntry]:
        """Unregister a manifest.

        Args:
            application: Restrict removal to this application, or None for all
            manifest_path: Manifest to remove

        Returns:
            The entries that were removed

        Raises:
            NothingRemovedError: If no registered manifest matched
            MissingArgumentError: If manifest_path is None
        """
        ...
