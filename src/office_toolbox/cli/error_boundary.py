"""Error boundary handling for CLI commands.

Catches well-known exceptions at CLI entry points and displays clean error
messages without stack traces. Only the generic part of a ToolboxError is
recorded in the debug log; the detail (usually a user path) is shown on the
terminal but never logged.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

import click

from office_toolbox.cli.output import user_output
from office_toolbox.core.errors import ToolboxError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def _fail(message: str) -> NoReturn:
    user_output(click.style("Error: ", fg="red") + message)
    raise SystemExit(1)


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - ToolboxError: every expected failure raised by office-toolbox itself
        - OSError: filesystem problems such as missing files or denied access
        - ValueError: invalid input or configuration

    All other exceptions bubble up normally with full stack traces.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ToolboxError as e:
            logger.debug("%s failed: %s: %s", func.__name__, type(e).__name__, e.message)
            _fail(str(e))
        except OSError as e:
            logger.debug("%s failed: %s", func.__name__, type(e).__name__)
            _fail(str(e))
        except ValueError as e:
            logger.debug("%s failed: %s", func.__name__, type(e).__name__)
            _fail(str(e))

    return wrapper  # type: ignore[return-value]
