from __future__ import annotations

from dataclasses import dataclass

from ..errors import UnsupportedPlatformError
from ._base import NotificationPlatform, Platform
from ._macos import MacOSPlatform
from ._windows import WindowsPlatform


@dataclass(frozen=True)
class PlatformRegistry:
    """Fixed-order table of notification platforms.

    The first platform whose is_supported() is true wins. Build a registry with
    fake platforms to simulate other operating systems in tests.
    """

    platforms: tuple[NotificationPlatform, ...]

    def resolve(self) -> NotificationPlatform:
        for platform in self.platforms:
            if platform.is_supported():
                return platform
        raise UnsupportedPlatformError()

    def is_any_supported(self) -> bool:
        try:
            self.resolve()
        except UnsupportedPlatformError:
            return False
        return True

    def get(self, platform_id: Platform | str) -> NotificationPlatform | None:
        for platform in self.platforms:
            if platform.platform_id() == platform_id:
                return platform
        return None

    def supported_ids(self) -> list[Platform]:
        return [p.platform_id() for p in self.platforms if p.is_supported()]


def default_registry(system: str | None = None) -> PlatformRegistry:
    """Build the standard registry (macOS, then Windows).

    system: OS identifier in sys.platform form; defaults to the running OS.
    """
    return PlatformRegistry(
        platforms=(MacOSPlatform(system=system), WindowsPlatform(system=system)),
    )
