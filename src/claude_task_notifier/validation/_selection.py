from __future__ import annotations

from typing import Any

from ..models.preference import HookSelection
from ._result import ValidationIssue, ValidationResult

_SOUND_REQUIRES = {
    HookSelection.ON_NOTIFICATION_SOUND: (
        HookSelection.ON_NOTIFICATION,
        "Sound for completion notification requires base notification to be enabled",
    ),
    HookSelection.ON_STOP_SOUND: (
        HookSelection.ON_STOP,
        "Sound for stop notification requires base notification to be enabled",
    ),
}


def validate_hook_selection(selected: Any) -> ValidationResult:
    issues: list[ValidationIssue] = []

    if not isinstance(selected, (list, tuple)):
        issues.append(ValidationIssue("error", "", "Selected hooks must be an array"))
        return ValidationResult(issues=issues)
    if not selected:
        issues.append(ValidationIssue("error", "", "No hooks selected"))
        return ValidationResult(issues=issues)

    known = {s.value for s in HookSelection}
    invalid = [str(s) for s in selected if _value(s) not in known]
    if invalid:
        issues.append(
            ValidationIssue("error", "", f"Invalid hook values: {', '.join(invalid)}")
        )

    values = {_value(s) for s in selected}
    for sound, (base, message) in _SOUND_REQUIRES.items():
        if sound.value in values and base.value not in values:
            issues.append(ValidationIssue("error", sound.value, message))

    return ValidationResult(issues=issues)


def _value(item: Any) -> Any:
    return item.value if isinstance(item, HookSelection) else item
