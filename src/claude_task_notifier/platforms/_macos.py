from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import CommandRejectedError
from ..validation import validate_command
from ._base import Platform, check_action, current_system
from ._sanitize import sanitize_for_applescript, sanitize_input

logger = logging.getLogger(__name__)

TITLE = "Claude Code"
SOUND_NAME = "Ping"


@dataclass(frozen=True)
class MacOSPlatform:
    """Notifications through ``osascript`` ``display notification``.

    Attributes:
        system: OS identifier to match against; None reads sys.platform at call time.
    """

    system: str | None = None
    supports_sound: bool = True
    sound_marker: str | None = "sound name"

    def is_supported(self) -> bool:
        return (self.system or current_system()) == "darwin"

    def platform_id(self) -> Platform:
        return Platform.MACOS

    def create_command(self, action: str, with_sound: bool = False) -> str:
        check_action(action)
        label = sanitize_for_applescript(sanitize_input(action))
        sound = f' sound name "{SOUND_NAME}"' if with_sound and self.supports_sound else ""
        command = (
            f"osascript -e 'display notification \"Claude Task {label}!\" "
            f'with title "{TITLE}"{sound}\''
        )
        if not validate_command(command, self.platform_id().value):
            raise CommandRejectedError(command, self.platform_id().value)
        logger.debug("Built macOS command for %r (sound=%s)", label, bool(sound))
        return command
