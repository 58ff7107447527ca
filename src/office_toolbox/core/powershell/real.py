"""Production PowerShell implementation using a subprocess per invocation."""

import logging
from collections.abc import Sequence

from office_toolbox.core.powershell.abc import PowerShell
from office_toolbox.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealPowerShell(PowerShell):
    """Runs scripts through ``powershell.exe -Command``."""

    def __init__(self, executable: str = "powershell.exe") -> None:
        self._executable = executable

    def invoke(self, commands: Sequence[str]) -> str:
        script = "\n".join(commands)
        logger.debug("Invoking %s with %d command(s)", self._executable, len(commands))
        result = run_subprocess_with_context(
            [self._executable, "-NoProfile", "-NonInteractive", "-Command", script],
            operation_context="run PowerShell registry script",
        )
        return result.stdout
