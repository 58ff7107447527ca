"""No-op wrapper for manifest registry operations."""

from pathlib import Path

from office_toolbox.core.registration.abc import ManifestRegistry, RegistrationEntry


class DryRunManifestRegistry(ManifestRegistry):
    """No-op wrapper for manifest registry operations.

    Read operations are delegated to the wrapped implementation.
    Write operations return without executing (no-op behavior).
    """

    def __init__(self, wrapped: ManifestRegistry) -> None:
        """Initialize dry-run wrapper with a real implementation.

        Args:
            wrapped: The real registry implementation to wrap
        """
        self._wrapped = wrapped

    @property
    def is_per_application(self) -> bool:
        return self._wrapped.is_per_application

    def add(self, application: str, manifest_path: Path) -> None:
        """No-op for registering a manifest in dry-run mode."""
        pass

    def list_manifests(self, application: str | None) -> list[RegistrationEntry]:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.list_manifests(application)

    def remove(self, application: str | None, manifest_path: Path | None) -> list[RegistrationEntry]:
        """No-op for removing a manifest in dry-run mode."""
        return []
