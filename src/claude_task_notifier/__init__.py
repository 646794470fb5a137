from .errors import (
    CommandBuildError,
    CommandRejectedError,
    ErrorKind,
    InvalidSelectionError,
    NotifierError,
    NotLoadedError,
    ParseError,
    SettingsError,
    SettingsIOError,
    SettingsOperation,
    UnsupportedPlatformError,
    ValidateError,
)
from .hooks import generate_hooks, install_hooks, parse_hook_selection, preference_from_selection
from .models import (
    HookAction,
    HookEntry,
    HookEvent,
    HookGroup,
    HookPreference,
    HookSelection,
    HooksMapping,
)
from .platforms import (
    MacOSPlatform,
    NotificationPlatform,
    Platform,
    PlatformRegistry,
    WindowsPlatform,
    create_notification_command,
    default_registry,
    is_notification_supported,
    is_sound_supported,
    sanitize_for_applescript,
    sanitize_for_powershell,
    sanitize_input,
)
from .settings import (
    ConfigurationAnalysis,
    HookStatus,
    PlatformInfo,
    SettingsStore,
    default_settings_path,
    make_settings_store,
)
from .validation import (
    ValidationIssue,
    ValidationResult,
    validate_command,
    validate_hook_selection,
    validate_settings,
    validate_settings_file,
)

__all__ = [
    "CommandBuildError",
    "CommandRejectedError",
    "ConfigurationAnalysis",
    "ErrorKind",
    "HookAction",
    "HookEntry",
    "HookEvent",
    "HookGroup",
    "HookPreference",
    "HookSelection",
    "HookStatus",
    "HooksMapping",
    "InvalidSelectionError",
    "MacOSPlatform",
    "NotLoadedError",
    "NotificationPlatform",
    "NotifierError",
    "ParseError",
    "Platform",
    "PlatformInfo",
    "PlatformRegistry",
    "SettingsError",
    "SettingsIOError",
    "SettingsOperation",
    "SettingsStore",
    "UnsupportedPlatformError",
    "ValidateError",
    "ValidationIssue",
    "ValidationResult",
    "WindowsPlatform",
    "create_notification_command",
    "default_registry",
    "default_settings_path",
    "generate_hooks",
    "install_hooks",
    "is_notification_supported",
    "is_sound_supported",
    "make_settings_store",
    "parse_hook_selection",
    "preference_from_selection",
    "sanitize_for_applescript",
    "sanitize_for_powershell",
    "sanitize_input",
    "validate_command",
    "validate_hook_selection",
    "validate_settings",
    "validate_settings_file",
]
