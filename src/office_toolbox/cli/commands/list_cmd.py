"""List registered developer manifests."""

import click

from office_toolbox.cli.error_boundary import cli_error_boundary
from office_toolbox.cli.output import machine_output, user_output
from office_toolbox.core.context import ToolboxContext
from office_toolbox.core.manifest_ops import RegisteredManifest, list_registered_manifests

# Width of a hyphenated GUID, so paths line up whether or not the id is known
_ID_COLUMN_WIDTH = 36


def format_manifest_row(manifest: RegisteredManifest) -> str:
    """Render ``<application> <id or unknown> <path>``; application omitted when untagged."""
    parts: list[str] = []
    if manifest.application:
        parts.append(manifest.application)
    parts.append((manifest.manifest_id or "unknown").ljust(_ID_COLUMN_WIDTH))
    parts.append(str(manifest.manifest_path))
    return " ".join(parts)


@click.command("list")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: ToolboxContext) -> None:
    """List registered developer manifests.

    Each row shows the application, the add-in id ("unknown" if the manifest
    can no longer be parsed) and the manifest path.
    """
    manifests = list_registered_manifests(ctx)
    if not manifests:
        user_output("No manifests were found.")
        return

    for manifest in manifests:
        machine_output(format_manifest_row(manifest))
