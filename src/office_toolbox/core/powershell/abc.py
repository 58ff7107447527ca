"""Abstract interface for running PowerShell scripts out of process."""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class PowerShell(ABC):
    """Runs a batch of PowerShell commands in one host process.

    Implementations must not leave a host process running after invoke()
    returns or raises.
    """

    @abstractmethod
    def invoke(self, commands: Sequence[str]) -> str:
        """Run the commands in order as a single script.

        Args:
            commands: PowerShell statements, executed in one session

        Returns:
            Captured standard output of the script

        Raises:
            RuntimeError: If the script fails; the message carries the host's
                diagnostic output
        """
        ...
