"""Inspect and edit the global office-toolbox configuration."""

import click

from office_toolbox.cli.error_boundary import cli_error_boundary
from office_toolbox.cli.output import machine_output
from office_toolbox.core.config_store import CONFIG_KEYS, format_config_value, update_config_field
from office_toolbox.core.context import ToolboxContext


@click.group("config")
def config_group() -> None:
    """Manage office-toolbox configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: ToolboxContext) -> None:
    """Print a list of configuration keys and values."""
    machine_output(click.style("Global configuration:", bold=True))
    if not ctx.config_store.exists():
        machine_output(f"  (using defaults - {ctx.config_store.path()} does not exist)")
    for key in CONFIG_KEYS:
        machine_output(f"  {key}={format_config_value(ctx.global_config, key)}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
@cli_error_boundary
def config_get(ctx: ToolboxContext, key: str) -> None:
    """Print the value of a given configuration key."""
    machine_output(format_config_value(ctx.global_config, key))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
@cli_error_boundary
def config_set(ctx: ToolboxContext, key: str, value: str) -> None:
    """Set the value of a configuration key."""
    new_config = update_config_field(ctx.global_config, key, value)
    ctx.config_store.save(new_config)
    ctx.feedback.success(f"Set {key}={format_config_value(new_config, key)}")
