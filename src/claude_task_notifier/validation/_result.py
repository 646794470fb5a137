from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal


@dataclass
class ValidationIssue:
    """A single validation finding (error or warning)."""

    level: Literal["error", "warning"]
    path: str  # JSON path or field name where the issue was found
    message: str
    key: str | None = None  # offending event name, when there is one
    value: Any = field(default=None, repr=False)


@dataclass
class ValidationResult:
    """Result of validating a settings document or a hook selection.

    Every violation is collected instead of stopping at the first, so a caller
    can report all problems at once.

    Attributes:
        issues: All errors and warnings. Use .errors and .warnings for filtered views.
        valid: True if there are no errors (warnings are allowed).
    """

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not any(i.level == "error" for i in self.issues)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "warning"]

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "error"]

    @property
    def messages(self) -> list[str]:
        return [i.message for i in self.errors]
