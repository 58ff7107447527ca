"""Output utilities for CLI commands with clear intent.

user_output() is for messages meant for the person at the terminal and goes to
stderr. machine_output() is for results (such as the rows printed by ``list``)
and goes to stdout so it can be piped.
"""

import click


def user_output(message: str = "") -> None:
    """Write a user-facing message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Write a result line to stdout."""
    click.echo(message)
