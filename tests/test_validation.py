import json

from claude_task_notifier import (
    HookSelection,
    ValidationIssue,
    ValidationResult,
    validate_hook_selection,
    validate_settings,
    validate_settings_file,
)


def _group(command="echo hi"):
    return {"hooks": [{"type": "command", "command": command}]}


# --- settings structure ---


def test_settings_empty_object_valid():
    assert validate_settings({}).valid


def test_settings_without_hooks_keeps_other_keys_valid():
    assert validate_settings({"model": "opus", "permissions": {"allow": []}}).valid


def test_settings_valid_hooks():
    data = {"hooks": {"Notification": [_group()], "Stop": [_group(), _group()]}}
    result = validate_settings(data)
    assert result.valid
    assert result.issues == []


def test_settings_not_object():
    result = validate_settings(["hooks"])
    assert not result.valid
    assert result.errors[0].message == "Settings data must be an object"


def test_settings_hooks_not_object():
    result = validate_settings({"hooks": []})
    assert not result.valid
    assert result.errors[0].path == "hooks"


def test_settings_event_not_array_names_event():
    result = validate_settings({"hooks": {"Notification": {"hooks": []}}})
    assert not result.valid
    assert result.errors[0].path == "hooks.Notification"
    assert "Notification" in result.errors[0].message


def test_settings_group_without_hooks_list():
    data = {"hooks": {"Stop": [{"matcher": "x"}, {"hooks": "not-a-list"}, "string"]}}
    result = validate_settings(data)
    assert len(result.errors) == 3
    assert [i.path for i in result.errors] == [
        "hooks.Stop[0].hooks",
        "hooks.Stop[1].hooks",
        "hooks.Stop[2].hooks",
    ]


def test_settings_collects_every_violation():
    data = {"hooks": {"Notification": {}, "Stop": "x", "PreToolUse": [_group()]}}
    result = validate_settings(data)
    assert len(result.errors) == 2
    assert result.messages == [
        "Hook 'Notification' must be an array",
        "Hook 'Stop' must be an array",
    ]


def test_settings_issue_carries_event_key_and_value():
    result = validate_settings({"hooks": {"Ev[1]": {"bad": True}, "Stop": ["x"]}})
    assert [(i.key, i.value) for i in result.errors] == [
        ("Ev[1]", {"bad": True}),
        ("Stop", "x"),
    ]


def test_settings_event_name_must_be_string():
    result = validate_settings({"hooks": {2: [_group()]}})
    assert result.messages == ["Hook event names must be strings"]
    assert result.errors[0].value == 2


def test_settings_command_contents_not_checked():
    assert validate_settings({"hooks": {"Stop": [{"hooks": [{"type": "other"}]}]}}).valid


def test_validate_settings_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"hooks": {"Stop": [_group()]}}))
    assert validate_settings_file(path).valid


# --- hook selection ---


def test_selection_valid():
    result = validate_hook_selection(
        [HookSelection.ON_NOTIFICATION, HookSelection.ON_NOTIFICATION_SOUND, "onStop"]
    )
    assert result.valid


def test_selection_empty():
    result = validate_hook_selection([])
    assert result.messages == ["No hooks selected"]


def test_selection_not_a_list():
    assert validate_hook_selection("onStop").messages == ["Selected hooks must be an array"]


def test_selection_unknown_values():
    result = validate_hook_selection(["onStop", "onBoom"])
    assert result.messages == ["Invalid hook values: onBoom"]


def test_selection_sound_requires_base():
    result = validate_hook_selection(["onNotificationSound", "onStopSound"])
    assert len(result.errors) == 2
    assert result.errors[0].path == "onNotificationSound"
    assert "completion notification" in result.errors[0].message
    assert "stop notification" in result.errors[1].message


def test_validation_result_properties():
    issues = [
        ValidationIssue("error", "hooks", "hooks must be an object"),
        ValidationIssue("warning", "hooks.Stop", "empty"),
    ]
    result = ValidationResult(issues=issues)
    assert result.valid is False
    assert len(result.errors) == 1
    assert len(result.warnings) == 1
    assert result.messages == ["hooks must be an object"]

    assert ValidationResult().valid is True
