"""User-facing diagnostic output."""

from abc import ABC, abstractmethod

import click

from office_toolbox.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing progress and status messages.

    Core operations report what they are doing ("Generating file ...") through
    ctx.feedback instead of printing, so tests can capture the messages and the
    CLI decides where they go.
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to stderr for an interactive terminal."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))
