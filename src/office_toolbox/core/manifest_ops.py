"""Sideload, list, remove and validate operations over a ToolboxContext.

These functions combine the parser, the registration store and the template
generator. They raise ToolboxError subclasses and leave rendering to the CLI.
A sideload that registers the manifest but then fails to generate the document
leaves the registration in place.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from office_toolbox.core.context import ToolboxContext
from office_toolbox.core.errors import ManifestNotFoundError, ToolboxError
from office_toolbox.core.manifest import parse_manifest
from office_toolbox.core.registration.abc import RegistrationEntry
from office_toolbox.core.templates import generate_template_file
from office_toolbox.core.validator import ValidationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredManifest:
    """A registered manifest with its add-in id, when the manifest still parses."""

    application: str | None
    manifest_id: str | None
    manifest_path: Path


def sideload_manifest(ctx: ToolboxContext, application: str, manifest_path: Path) -> Path:
    """Register a manifest and generate a document that loads the add-in.

    Args:
        ctx: Toolbox context
        application: Target application name, e.g. "excel"
        manifest_path: Path to the manifest file (may be relative to ctx.cwd)

    Returns:
        Path of the generated document
    """
    candidate = manifest_path if manifest_path.is_absolute() else ctx.cwd / manifest_path
    if not candidate.is_file():
        raise ManifestNotFoundError("The manifest to sideload could not be found", str(manifest_path))
    resolved = candidate.resolve()

    descriptor = parse_manifest(resolved)
    logger.debug("Parsed manifest: kind=%s id=%s", descriptor.kind.value, descriptor.id)

    ctx.registry.add(application, resolved)

    if ctx.dry_run:
        ctx.feedback.info(f"[DRY RUN] Would generate a {application} document for {resolved}")
        return resolved

    document_path = generate_template_file(
        application,
        descriptor.kind,
        descriptor.id,
        descriptor.version,
        cwd=ctx.cwd,
        templates_dir=ctx.templates_dir,
    )
    ctx.feedback.info(f"Generating file {document_path}")

    if ctx.global_config.open_generated_documents:
        ctx.feedback.info(f"Opening file {document_path}")
        ctx.opener.open(document_path)

    return document_path


def list_registered_manifests(ctx: ToolboxContext) -> list[RegisteredManifest]:
    """List every registered manifest across applications, with its id."""
    manifests: list[RegisteredManifest] = []
    for entry in ctx.registry.list_manifests(None):
        manifest_id: str | None
        try:
            manifest_id = parse_manifest(entry.manifest_path).id
        except ToolboxError as e:
            logger.debug("Could not read id of registered manifest: %s", e.message)
            manifest_id = None
        manifests.append(
            RegisteredManifest(
                application=entry.application,
                manifest_id=manifest_id,
                manifest_path=entry.manifest_path,
            )
        )
    return manifests


def list_manifest_paths(ctx: ToolboxContext, application: str | None) -> list[Path]:
    """Registered manifest paths, optionally for one application only."""
    if not ctx.registry.is_per_application:
        application = None
    return [entry.manifest_path for entry in ctx.registry.list_manifests(application)]


def remove_manifest(
    ctx: ToolboxContext, application: str | None, manifest_path: Path | None
) -> list[RegistrationEntry]:
    """Unregister a manifest. The application is ignored by application-agnostic stores."""
    if not ctx.registry.is_per_application:
        application = None
    if manifest_path is not None:
        if not manifest_path.is_absolute():
            manifest_path = ctx.cwd / manifest_path
        # Registrations are keyed by the resolved path recorded at sideload time
        if manifest_path.exists():
            manifest_path = manifest_path.resolve()
    return ctx.registry.remove(application, manifest_path)


def validate_manifest(ctx: ToolboxContext, manifest_path: Path) -> ValidationResult:
    """Run the external validator against an existing manifest file."""
    candidate = manifest_path if manifest_path.is_absolute() else ctx.cwd / manifest_path
    if not candidate.exists():
        raise ManifestNotFoundError("The manifest to validate could not be found", str(manifest_path))
    return ctx.validator.validate(candidate)
