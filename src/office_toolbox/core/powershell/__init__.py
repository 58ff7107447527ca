"""PowerShell integration used by the registry-backed manifest store."""

from office_toolbox.core.powershell.abc import PowerShell
from office_toolbox.core.powershell.real import RealPowerShell

__all__ = ["PowerShell", "RealPowerShell"]
