from __future__ import annotations

import sys
from enum import Enum
from typing import Protocol

from ..errors import CommandBuildError

MAX_ACTION_LENGTH = 50


class Platform(str, Enum):
    MACOS = "macos"
    WINDOWS = "windows"


class NotificationPlatform(Protocol):
    """Capability every per-OS command builder provides."""

    supports_sound: bool
    sound_marker: str | None

    def is_supported(self) -> bool: ...
    def platform_id(self) -> Platform: ...
    def create_command(self, action: str, with_sound: bool = False) -> str: ...


def current_system() -> str:
    return sys.platform


def check_action(action: object) -> str:
    """Reject anything that is not a usable, non-empty event label."""
    if not isinstance(action, str) or not action:
        raise CommandBuildError("Action must be a non-empty string", action=action)
    if len(action) > MAX_ACTION_LENGTH:
        raise CommandBuildError(
            f"Action string is too long (maximum {MAX_ACTION_LENGTH} characters)",
            action=action,
        )
    return action
