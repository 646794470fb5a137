"""Per-OS notification command builders and the registry that picks one."""

from __future__ import annotations

from ._base import MAX_ACTION_LENGTH, NotificationPlatform, Platform
from ._macos import MacOSPlatform
from ._registry import PlatformRegistry, default_registry
from ._sanitize import sanitize_for_applescript, sanitize_for_powershell, sanitize_input
from ._windows import WindowsPlatform


def create_notification_command(
    action: str,
    with_sound: bool = False,
    registry: PlatformRegistry | None = None,
) -> str:
    """Build the notification command for the running OS.

    Raises UnsupportedPlatformError if no platform matches.
    """
    platform = (registry or default_registry()).resolve()
    return platform.create_command(action, with_sound)


def is_notification_supported(registry: PlatformRegistry | None = None) -> bool:
    return (registry or default_registry()).is_any_supported()


def is_sound_supported(registry: PlatformRegistry | None = None) -> bool:
    registry = registry or default_registry()
    if not registry.is_any_supported():
        return False
    return registry.resolve().supports_sound


__all__ = [
    "MAX_ACTION_LENGTH",
    "MacOSPlatform",
    "NotificationPlatform",
    "Platform",
    "PlatformRegistry",
    "WindowsPlatform",
    "create_notification_command",
    "default_registry",
    "is_notification_supported",
    "is_sound_supported",
    "sanitize_for_applescript",
    "sanitize_for_powershell",
    "sanitize_input",
]
