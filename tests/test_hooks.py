import json

import pytest

from claude_task_notifier import (
    HookGroup,
    HookPreference,
    HookSelection,
    InvalidSelectionError,
    SettingsStore,
    UnsupportedPlatformError,
    default_registry,
    generate_hooks,
    install_hooks,
    parse_hook_selection,
    preference_from_selection,
)

MAC = default_registry(system="darwin")
WIN = default_registry(system="win32")


def test_parse_hook_selection():
    pref = parse_hook_selection(
        [HookSelection.ON_NOTIFICATION, HookSelection.ON_NOTIFICATION_SOUND, "onStop"]
    )
    assert pref == HookPreference(
        notification_enabled=True,
        notification_with_sound=True,
        stop_enabled=True,
        stop_with_sound=False,
    )


def test_preference_from_invalid_selection():
    with pytest.raises(InvalidSelectionError) as exc_info:
        preference_from_selection(["onStopSound", "onBoom"])
    assert len(exc_info.value.errors) == 2
    assert "onBoom" in str(exc_info.value)


def test_generate_hooks_both_events():
    pref = HookPreference(notification_enabled=True, stop_enabled=True, stop_with_sound=True)
    hooks = generate_hooks(pref, MAC)
    assert list(hooks) == ["Notification", "Stop"]

    notification = hooks["Notification"][0].hooks[0].command
    stop = hooks["Stop"][0].hooks[0].command
    assert "Claude Task Completed!" in notification
    assert "sound name" not in notification
    assert "Claude Task Stopped!" in stop
    assert 'sound name "Ping"' in stop


def test_generate_hooks_windows():
    hooks = generate_hooks(HookPreference(stop_enabled=True, stop_with_sound=True), WIN)
    (group,) = hooks["Stop"]
    assert isinstance(group, HookGroup)
    assert group.hooks[0].type == "command"
    assert group.hooks[0].command.startswith("powershell -NoProfile")


def test_generate_nothing_needs_no_platform():
    assert generate_hooks(HookPreference(), default_registry(system="linux")) == {}


def test_generate_on_unsupported_platform():
    with pytest.raises(UnsupportedPlatformError):
        generate_hooks(HookPreference(stop_enabled=True), default_registry(system="linux"))


def test_install_hooks_writes_settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"model": "opus", "hooks": {"Stop": [{"hooks": []}]}}))
    store = SettingsStore(path, registry=MAC)

    written = install_hooks(store, HookPreference(notification_enabled=True), MAC)

    data = json.loads(path.read_text())
    assert data["model"] == "opus"
    assert data["hooks"]["Stop"] == [{"hooks": []}]
    assert data["hooks"]["Notification"] == [
        {"hooks": [{"type": "command", "command": written["Notification"][0].hooks[0].command}]}
    ]
    assert store.analyze_configuration().notification.installed
