from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HookSelection(str, Enum):
    """Raw values a front end collects when the user picks notifications."""

    ON_NOTIFICATION = "onNotification"
    ON_NOTIFICATION_SOUND = "onNotificationSound"
    ON_STOP = "onStop"
    ON_STOP_SOUND = "onStopSound"


@dataclass(frozen=True)
class HookPreference:
    """Which notifications to install, and with or without sound.

    Attributes:
        notification_enabled: Notify when a task completes.
        notification_with_sound: Play a sound with the completion notification.
        stop_enabled: Notify when a task is stopped.
        stop_with_sound: Play a sound with the stop notification.
    """

    notification_enabled: bool = False
    notification_with_sound: bool = False
    stop_enabled: bool = False
    stop_with_sound: bool = False
