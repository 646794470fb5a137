from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import CommandRejectedError
from ..validation import validate_command
from ._base import Platform, check_action, current_system
from ._sanitize import sanitize_for_powershell

logger = logging.getLogger(__name__)

TITLE = "Claude Code"


@dataclass(frozen=True)
class WindowsPlatform:
    """Balloon-tip notifications through a PowerShell ``NotifyIcon``. No sound."""

    system: str | None = None
    supports_sound: bool = False
    sound_marker: str | None = None

    def is_supported(self) -> bool:
        return (self.system or current_system()) == "win32"

    def platform_id(self) -> Platform:
        return Platform.WINDOWS

    def create_command(self, action: str, with_sound: bool = False) -> str:
        check_action(action)
        message = f"Claude Task {sanitize_for_powershell(action)}!"
        script = "; ".join(
            [
                "Add-Type -AssemblyName System.Windows.Forms",
                "$balloon = New-Object System.Windows.Forms.NotifyIcon",
                "$path = (Get-Process -Id $pid).Path",
                "$balloon.Icon = [System.Drawing.Icon]::ExtractAssociatedIcon($path)",
                "$balloon.BalloonTipIcon = [System.Windows.Forms.ToolTipIcon]::Warning",
                f"$balloon.BalloonTipText = '{sanitize_for_powershell(message)}'",
                f"$balloon.BalloonTipTitle = '{sanitize_for_powershell(TITLE)}'",
                "$balloon.Visible = $true",
                "$balloon.ShowBalloonTip(5000)",
            ]
        )
        command = f'powershell -NoProfile -Command "{script}"'
        if not validate_command(command, self.platform_id().value):
            raise CommandRejectedError(command, self.platform_id().value)
        logger.debug("Built Windows command for %r", message)
        return command
