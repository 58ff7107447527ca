"""Validate a manifest with the Office add-in validator."""

import click

from office_toolbox.cli.error_boundary import cli_error_boundary
from office_toolbox.cli.output import machine_output
from office_toolbox.cli.prompts import check_and_prompt_for_path
from office_toolbox.core.context import ToolboxContext
from office_toolbox.core.manifest_ops import validate_manifest


@click.command("validate")
@click.option(
    "-m",
    "--manifest_path",
    "manifest_path",
    help="The path of the manifest file to validate.",
)
@click.pass_obj
@cli_error_boundary
def validate_cmd(ctx: ToolboxContext, manifest_path: str | None) -> None:
    """Validate a manifest against the add-in publishing rules."""
    path = check_and_prompt_for_path(ctx, None, manifest_path)
    result = validate_manifest(ctx, path)

    if result.output:
        machine_output(result.output)

    if not result.is_valid:
        ctx.feedback.error("The manifest is not valid.")
        raise SystemExit(1)
    ctx.feedback.success("The manifest is valid.")
