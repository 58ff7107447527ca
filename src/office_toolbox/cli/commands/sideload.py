"""Sideload a manifest and open a document that loads the add-in."""

import click

from office_toolbox.cli.ensure import Ensure
from office_toolbox.cli.error_boundary import cli_error_boundary
from office_toolbox.cli.prompts import check_and_prompt_for_path, ensure_application
from office_toolbox.core.applications import get_profile
from office_toolbox.core.context import ToolboxContext
from office_toolbox.core.manifest_ops import sideload_manifest


@click.command("sideload")
@click.option(
    "-a",
    "--application",
    help="The Office application. Word, Excel, and PowerPoint are currently supported.",
)
@click.option(
    "-m",
    "--manifest_path",
    "manifest_path",
    help="The path of the manifest file to sideload and launch.",
)
@click.pass_obj
@cli_error_boundary
def sideload_cmd(ctx: ToolboxContext, application: str | None, manifest_path: str | None) -> None:
    """Register a manifest and open a new document with the add-in inserted.

    Examples:
        office-toolbox sideload -a excel -m manifest.xml
        office-toolbox sideload              # prompts for anything missing
    """
    application = ensure_application(application)
    profile = Ensure.not_none(get_profile(application), f"Unknown application: {application}")

    if not profile.can_sideload:
        ctx.feedback.info(
            "Automatic sideloading is not available for this app, please follow the "
            f"instructions in the following link: {profile.documentation_link}"
        )
        return

    path = check_and_prompt_for_path(ctx, application, manifest_path)
    sideload_manifest(ctx, application, path)
    ctx.feedback.info(
        "For more information about how to sideload Office Add-ins, visit the following link: "
        f"{profile.documentation_link}"
    )
