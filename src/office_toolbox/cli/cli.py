import logging
import os

import click

from office_toolbox.cli.commands.config import config_group
from office_toolbox.cli.commands.list_cmd import list_cmd
from office_toolbox.cli.commands.remove import remove_cmd
from office_toolbox.cli.commands.sideload import sideload_cmd
from office_toolbox.cli.commands.validate import validate_cmd
from office_toolbox.cli.prompts import prompt_for_command
from office_toolbox.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

# Enable debug logging if OFFICE_TOOLBOX_DEBUG environment variable is set
if os.getenv("OFFICE_TOOLBOX_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

_COMMANDS_BY_NAME = {
    "list": list_cmd,
    "sideload": sideload_cmd,
    "remove": remove_cmd,
    "validate": validate_cmd,
}


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="office-toolbox")
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Show what would happen without registering or removing manifests.",
)
@click.pass_context
def cli(ctx: click.Context, dry_run: bool) -> None:
    """Sideload, list, remove and validate Office add-in manifests."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run)

    if ctx.invoked_subcommand is None:
        ctx.invoke(_COMMANDS_BY_NAME[prompt_for_command()])


cli.add_command(config_group)
cli.add_command(list_cmd)
cli.add_command(remove_cmd)
cli.add_command(sideload_cmd)
cli.add_command(validate_cmd)


def main() -> None:
    """CLI entry point used by the `office-toolbox` console script."""
    cli()
