"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from typing import TypeVar

import click

from office_toolbox.cli.output import user_output

T = TypeVar("T")
S = TypeVar("S", str, list, dict)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Provides type narrowing from ``T | None`` to ``T``.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def not_empty(value: S, error_message: str) -> S:
        """Ensure value is a non-empty string, list or dict, otherwise exit.

        Example:
            >>> paths = Ensure.not_empty(paths, "There are no registered manifests to choose from.")

        Raises:
            SystemExit: If value is empty (with exit code 1)
        """
        if not value:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return value
