from __future__ import annotations

from dataclasses import dataclass, field

from ..platforms import Platform


@dataclass
class HookStatus:
    installed: bool = False
    has_sound: bool = False


@dataclass
class PlatformInfo:
    id: Platform | None
    supported: bool
    sound_supported: bool


@dataclass
class ConfigurationAnalysis:
    """Installed notification hooks and what the running OS can do.

    Attributes:
        events: Known event name -> status (installed, sound detected).
        platform: The platform resolved for the running OS.
    """

    events: dict[str, HookStatus] = field(default_factory=dict)
    platform: PlatformInfo = field(
        default_factory=lambda: PlatformInfo(id=None, supported=False, sound_supported=False)
    )

    @property
    def has_hooks(self) -> bool:
        return any(s.installed for s in self.events.values())

    @property
    def notification(self) -> HookStatus:
        return self.events.get("Notification", HookStatus())

    @property
    def stop(self) -> HookStatus:
        return self.events.get("Stop", HookStatus())
