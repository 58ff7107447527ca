"""Remove a registered manifest."""

from pathlib import Path

import click

from office_toolbox.cli.error_boundary import cli_error_boundary
from office_toolbox.cli.prompts import ensure_application, prompt_for_registered_manifest
from office_toolbox.core.context import ToolboxContext
from office_toolbox.core.manifest_ops import remove_manifest


@click.command("remove")
@click.option(
    "-a",
    "--application",
    help=(
        "The Office application. Word, PowerPoint, and Excel are currently supported. "
        "This parameter is ignored on Windows."
    ),
)
@click.option(
    "-m",
    "--manifest_path",
    "manifest_path",
    help="The path of the manifest file to remove.",
)
@click.pass_obj
@cli_error_boundary
def remove_cmd(ctx: ToolboxContext, application: str | None, manifest_path: str | None) -> None:
    """Unregister a developer manifest."""
    if ctx.registry.is_per_application:
        application = ensure_application(application)
    else:
        application = None

    path = (
        Path(manifest_path)
        if manifest_path
        else prompt_for_registered_manifest(ctx, application)
    )

    for entry in remove_manifest(ctx, application, path):
        if entry.application:
            ctx.feedback.info(f"Removing {entry.manifest_path} for application {entry.application}")
        else:
            ctx.feedback.info(f"Removing {entry.manifest_path}")
