"""Turn a user's notification preference into hook groups and install them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .errors import InvalidSelectionError
from .models.hook import HookAction, HookEntry, HookEvent, HookGroup, HooksMapping
from .models.preference import HookPreference, HookSelection
from .platforms import default_registry
from .validation import validate_hook_selection

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .platforms import PlatformRegistry
    from .settings import SettingsStore

logger = logging.getLogger(__name__)


def parse_hook_selection(selected: Iterable[HookSelection | str]) -> HookPreference:
    values = {s.value if isinstance(s, HookSelection) else s for s in selected}
    return HookPreference(
        notification_enabled=HookSelection.ON_NOTIFICATION.value in values,
        notification_with_sound=HookSelection.ON_NOTIFICATION_SOUND.value in values,
        stop_enabled=HookSelection.ON_STOP.value in values,
        stop_with_sound=HookSelection.ON_STOP_SOUND.value in values,
    )


def preference_from_selection(selected: Any) -> HookPreference:
    """Validate raw selection values and parse them into a HookPreference.

    Raises InvalidSelectionError listing every problem found.
    """
    result = validate_hook_selection(selected)
    if not result.valid:
        raise InvalidSelectionError(result.messages)
    return parse_hook_selection(selected)


def generate_hooks(
    preference: HookPreference,
    registry: PlatformRegistry | None = None,
) -> HooksMapping:
    """Build one hook group per enabled event for the running OS.

    Raises UnsupportedPlatformError if an event is enabled but no platform
    matches the running OS.
    """
    wanted: list[tuple[HookEvent, HookAction, bool]] = []
    if preference.notification_enabled:
        wanted.append(
            (HookEvent.NOTIFICATION, HookAction.COMPLETED, preference.notification_with_sound)
        )
    if preference.stop_enabled:
        wanted.append((HookEvent.STOP, HookAction.STOPPED, preference.stop_with_sound))
    if not wanted:
        return {}

    platform = (registry or default_registry()).resolve()
    new_hooks: HooksMapping = {}
    for event, action, with_sound in wanted:
        command = platform.create_command(action.value, with_sound)
        new_hooks[event.value] = [HookGroup(hooks=[HookEntry(command=command)])]
    return new_hooks


def install_hooks(
    store: SettingsStore,
    preference: HookPreference,
    registry: PlatformRegistry | None = None,
) -> HooksMapping:
    """Generate hooks for preference, merge them into store, and save.

    Returns the hooks that were written.
    """
    new_hooks = generate_hooks(preference, registry)
    store.load()
    store.merge_hooks(new_hooks)
    store.save()
    logger.info("Installed hooks %s into %s", ", ".join(new_hooks) or "(none)", store.path)
    return new_hooks
