from .hook import HookAction, HookEntry, HookEvent, HookGroup, HooksMapping
from .preference import HookPreference, HookSelection

__all__ = [
    "HookAction",
    "HookEntry",
    "HookEvent",
    "HookGroup",
    "HookPreference",
    "HookSelection",
    "HooksMapping",
]
