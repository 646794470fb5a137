"""Settings file management: load, merge, remove, and save notification hooks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._analysis import ConfigurationAnalysis, HookStatus, PlatformInfo
from ._store import BACKUP_SUFFIX, CONFIG_DIR_ENV, SettingsStore, default_settings_path

if TYPE_CHECKING:
    from pathlib import Path

    from ..platforms import PlatformRegistry


def make_settings_store(
    path: Path | None = None,
    registry: PlatformRegistry | None = None,
) -> SettingsStore:
    """Build a SettingsStore wired to the default path and platform registry.

    path: defaults to ~/.claude/settings.json ($CLAUDE_CONFIG_DIR overrides the directory)
    registry: defaults to the macOS/Windows registry for the running OS
    """
    return SettingsStore(path=path or default_settings_path(), registry=registry)


__all__ = [
    "BACKUP_SUFFIX",
    "CONFIG_DIR_ENV",
    "ConfigurationAnalysis",
    "HookStatus",
    "PlatformInfo",
    "SettingsStore",
    "default_settings_path",
    "make_settings_store",
]
