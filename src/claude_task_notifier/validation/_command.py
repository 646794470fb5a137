"""Independent safety check for fully built notification commands."""

from __future__ import annotations

import re

MACOS_PREFIX = "osascript -e 'display notification"
MACOS_SUFFIXES = ("'", "'\"")
WINDOWS_PREFIX = 'powershell -NoProfile -Command "'
WINDOWS_SUFFIX = '"'
NOTIFY_ICON_TYPE = "System.Windows.Forms.NotifyIcon"

# A chaining operator followed by something that looks like a command name.
_CHAINING = re.compile(r"(?:;|\|\||&&|\|)\s*[A-Za-z_]")

_APPLESCRIPT_DENYLIST = [
    re.compile(p, re.IGNORECASE)
    for p in (
        r"do\s+shell\s+script",
        r"system\s+events",
        r"tell\s+application",
        r"run\s+script",
    )
]

_POWERSHELL_DENYLIST = [
    re.compile(p, re.IGNORECASE)
    for p in (
        r"Invoke-Expression",
        r"\bIEX\s",
        r"Invoke-Command",
        r"Invoke-WebRequest",
        r"Invoke-RestMethod",
        r"Download",
        r"WebClient",
        r"Start-Process",
        r"\$env:",
        r"registry",
        r"Get-Credential",
        r"ConvertTo-SecureString",
        r"Export-",
        r"Import-Module",
        r"Remove-",
        r"Stop-",
        r"Restart-",
    )
]

_NEW_OBJECT = re.compile(r"New-Object\s+([\w.]+)", re.IGNORECASE)


def validate_command(command: object, platform: str) -> bool:
    """Return True if command is a well-formed, safe notification command for platform.

    Runs regardless of how the command was built: the builder is not the only
    guard. Unknown platforms are always rejected.
    """
    if not isinstance(command, str) or not command:
        return False
    if _CHAINING.search(command):
        return False
    if platform == "macos":
        return _validate_macos(command)
    if platform == "windows":
        return _validate_windows(command)
    return False


def _validate_macos(command: str) -> bool:
    if not command.startswith(MACOS_PREFIX):
        return False
    if not command.endswith(MACOS_SUFFIXES):
        return False
    return not any(p.search(command) for p in _APPLESCRIPT_DENYLIST)


def _validate_windows(command: str) -> bool:
    if not command.startswith(WINDOWS_PREFIX):
        return False
    if not command.endswith(WINDOWS_SUFFIX) or len(command) <= len(WINDOWS_PREFIX):
        return False
    if any(p.search(command) for p in _POWERSHELL_DENYLIST):
        return False
    # The notification icon is the only object the command may create.
    return all(t == NOTIFY_ICON_TYPE for t in _NEW_OBJECT.findall(command))
