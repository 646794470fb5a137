from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

from ._command import validate_command
from ._result import ValidationIssue, ValidationResult
from ._selection import validate_hook_selection as _validate_hook_selection
from ._settings import validate_settings as _validate_settings


def validate_settings(data: Any) -> ValidationResult:
    """Validate the hooks structure of a settings dict (e.g. from settings.json).

    Checks that hooks is an object of event name -> list of groups, and that
    every group has a 'hooks' list.
    """
    return _validate_settings(data)


def validate_hook_selection(selected: Any) -> ValidationResult:
    """Validate raw HookSelection values collected from a user."""
    return _validate_hook_selection(selected)


def validate_settings_file(path: Path) -> ValidationResult:
    """Load and validate a settings.json file from disk."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return _validate_settings(data)


__all__ = [
    "ValidationIssue",
    "ValidationResult",
    "validate_command",
    "validate_hook_selection",
    "validate_settings",
    "validate_settings_file",
]
