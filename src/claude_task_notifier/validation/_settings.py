from __future__ import annotations

from typing import Any

from ._result import ValidationIssue, ValidationResult


def validate_settings(data: Any) -> ValidationResult:
    """Check the hooks structure of a settings document.

    Only the shape is checked; command strings are the producing platform's
    responsibility. Each issue carries the offending event name and value.
    """
    issues: list[ValidationIssue] = []

    if not isinstance(data, dict):
        issues.append(
            ValidationIssue("error", "", "Settings data must be an object", value=data)
        )
        return ValidationResult(issues=issues)

    hooks = data.get("hooks")
    if hooks is None:
        return ValidationResult(issues=issues)

    if not isinstance(hooks, dict):
        issues.append(
            ValidationIssue("error", "hooks", "hooks must be an object", key="hooks", value=hooks)
        )
        return ValidationResult(issues=issues)

    for name, groups in hooks.items():
        path = f"hooks.{name}"
        if not isinstance(name, str):
            issues.append(
                ValidationIssue("error", path, "Hook event names must be strings", value=name)
            )
            continue
        if not isinstance(groups, list):
            issues.append(
                ValidationIssue(
                    "error", path, f"Hook '{name}' must be an array", key=name, value=groups
                )
            )
            continue
        for i, group in enumerate(groups):
            if not isinstance(group, dict) or not isinstance(group.get("hooks"), list):
                issues.append(
                    ValidationIssue(
                        "error",
                        f"{path}[{i}].hooks",
                        f"Hook '{name}' items must have a 'hooks' array",
                        key=name,
                        value=group,
                    )
                )

    return ValidationResult(issues=issues)
