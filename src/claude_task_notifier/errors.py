from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

    from .validation import ValidationResult


class ErrorKind(str, Enum):
    PARSE = "parse"
    IO = "io"
    VALIDATE = "validate"
    NOT_LOADED = "not_loaded"
    UNSUPPORTED_PLATFORM = "unsupported_platform"
    COMMAND_BUILD = "command_build"
    COMMAND_REJECTED = "command_rejected"
    INVALID_SELECTION = "invalid_selection"


class SettingsOperation(str, Enum):
    """Settings store operation that was running when an error occurred."""

    READ = "read"
    WRITE = "write"
    PARSE = "parse"
    VALIDATE = "validate"
    MERGE_HOOKS = "merge_hooks"
    REMOVE_HOOKS = "remove_hooks"
    GET_DATA = "get_data"
    GET_HOOKS = "get_hooks"


class NotifierError(Exception):
    """Base class for every error raised by this package.

    Attributes:
        kind: Machine-readable error kind; match on it instead of the class.
        details: Extra context (paths, offending values, nested messages).
    """

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind, details: dict[str, Any] | None = None) -> None:
        self.kind = kind
        self.details = dict(details or {})
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": type(self).__name__,
            "kind": self.kind.value,
            "message": str(self),
            "details": self.details,
        }


class SettingsError(NotifierError):
    """Raised when a settings file operation fails.

    Attributes:
        operation: The store operation that failed.
        path: The settings file involved, if applicable.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        operation: SettingsOperation,
        path: Path | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.operation = operation
        self.path = path
        merged = {"operation": operation.value, "path": str(path) if path else None}
        merged.update(details or {})
        super().__init__(message, kind, merged)


class ParseError(SettingsError):
    """Raised when the settings file is not valid JSON."""

    def __init__(self, path: Path, parser_message: str) -> None:
        super().__init__(
            f"Invalid JSON in settings file {path}: {parser_message}",
            ErrorKind.PARSE,
            SettingsOperation.PARSE,
            path,
            {"parse_error": parser_message},
        )


class SettingsIOError(SettingsError):
    """Raised when reading, writing, or creating the settings directory fails."""

    def __init__(self, message: str, operation: SettingsOperation, path: Path) -> None:
        super().__init__(message, ErrorKind.IO, operation, path)


class ValidateError(SettingsError):
    """Raised when the settings document violates the hooks structure.

    Attributes:
        key: The offending event name, or None for top-level violations.
        value: The malformed value.
        result: Every issue found, not only the first.
    """

    def __init__(
        self,
        message: str,
        operation: SettingsOperation,
        path: Path | None = None,
        key: str | None = None,
        value: Any = None,
        result: ValidationResult | None = None,
    ) -> None:
        self.key = key
        self.value = value
        self.result = result
        details: dict[str, Any] = {"key": key, "value": value}
        if result is not None:
            details["errors"] = [i.message for i in result.errors]
        super().__init__(message, ErrorKind.VALIDATE, operation, path, details)


class NotLoadedError(SettingsError):
    """Raised when querying or saving before the settings were loaded."""

    def __init__(self, operation: SettingsOperation, path: Path | None = None) -> None:
        super().__init__(
            "Settings not loaded. Call load() first.",
            ErrorKind.NOT_LOADED,
            operation,
            path,
        )


class UnsupportedPlatformError(NotifierError):
    """Raised when no notification platform matches the running OS."""

    def __init__(self, platform: str | None = None) -> None:
        self.platform = platform
        if platform:
            message = f"Platform '{platform}' is not supported"
        else:
            message = "No supported notification platform found for this operating system"
        super().__init__(message, ErrorKind.UNSUPPORTED_PLATFORM, {"platform": platform})


class CommandBuildError(NotifierError):
    """Raised when create_command gets an unusable event action."""

    def __init__(self, message: str, action: Any = None) -> None:
        self.action = action
        super().__init__(message, ErrorKind.COMMAND_BUILD, {"action": action})


class CommandRejectedError(NotifierError):
    """Raised when a built command fails the command validator."""

    def __init__(self, command: str, platform: str) -> None:
        self.command = command
        self.platform = platform
        super().__init__(
            f"Generated {platform} command failed validation",
            ErrorKind.COMMAND_REJECTED,
            {"command": command, "platform": platform},
        )


class InvalidSelectionError(NotifierError):
    """Raised when a raw hook selection does not validate."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors), ErrorKind.INVALID_SELECTION, {"errors": errors})
