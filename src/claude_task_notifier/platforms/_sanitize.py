"""Pure string transforms that make a label safe for a target command grammar.

All functions are total: non-string input gives an empty string.
"""

from __future__ import annotations

import re

_SHELL_SPECIAL = re.compile(r"[`$\"\\]")
_UNSAFE = re.compile(r"[^\w\s!?.-]", re.ASCII)
_APPLESCRIPT_SPECIAL = re.compile(r"(['\"\\])")
_LINE_BREAK = re.compile(r"[\r\n]")


def sanitize_input(value: object) -> str:
    """Keep only word characters, whitespace, and ``! ? . -``."""
    if not isinstance(value, str):
        return ""
    value = _SHELL_SPECIAL.sub("", value)
    return _UNSAFE.sub("", value).strip()


def sanitize_for_applescript(value: object) -> str:
    """Backslash-escape quotes and backslashes; AppleScript strings are single-line."""
    if not isinstance(value, str):
        return ""
    value = _APPLESCRIPT_SPECIAL.sub(r"\\\1", value)
    return _LINE_BREAK.sub(" ", value).strip()


def sanitize_for_powershell(value: object) -> str:
    if not isinstance(value, str):
        return ""
    value = value.replace("'", "''")
    value = _SHELL_SPECIAL.sub("", value)
    return _UNSAFE.sub("", value).strip()
