"""SettingsStore: load, validate, merge, remove, and save the settings document."""

from __future__ import annotations

import copy
import json
import logging
import os
import shutil
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from ..errors import (
    NotLoadedError,
    ParseError,
    SettingsIOError,
    SettingsOperation,
    UnsupportedPlatformError,
    ValidateError,
)
from ..models.hook import HookEvent
from ..platforms import PlatformRegistry, default_registry
from ..validation import validate_settings
from ._analysis import ConfigurationAnalysis, HookStatus, PlatformInfo

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "CLAUDE_CONFIG_DIR"
SETTINGS_FILENAME = "settings.json"
BACKUP_SUFFIX = ".backup"


def default_settings_path() -> Path:
    """~/.claude/settings.json, or settings.json inside $CLAUDE_CONFIG_DIR when set."""
    config_dir = os.environ.get(CONFIG_DIR_ENV)
    base = Path(config_dir).expanduser() if config_dir else Path.home() / ".claude"
    return base / SETTINGS_FILENAME


def _atomic_write(path: Path, data: str) -> None:
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(data, encoding="utf-8")
        tmp.replace(path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


def _plain(value: Any) -> Any:
    """Deep copy of value with pydantic models dumped to JSON-ready dicts."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return copy.deepcopy(value)


class SettingsStore:
    """Owns the in-memory settings document for one session.

    Nothing else mutates the document; callers get copies. There is no
    cross-process locking: concurrent invocations race and the last save wins.
    """

    def __init__(self, path: Path | None = None, registry: PlatformRegistry | None = None) -> None:
        self._path = Path(path) if path is not None else default_settings_path()
        self._registry = registry or default_registry()
        self._data: Any = None
        self._loaded = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def backup_path(self) -> Path:
        return self._path.with_name(self._path.name + BACKUP_SUFFIX)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> dict[str, Any]:
        """Read the settings file. A missing or blank file gives an empty document."""
        try:
            content = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            content = ""
        except OSError as e:
            raise SettingsIOError(
                f"Failed to read settings file {self._path}: {e}",
                SettingsOperation.READ,
                self._path,
            ) from e
        except UnicodeDecodeError as e:
            raise ParseError(self._path, str(e)) from e

        if not content.strip():
            data: Any = {}
        else:
            try:
                data = json.loads(content)
            except json.JSONDecodeError as e:
                raise ParseError(self._path, str(e)) from e

        self._data = data
        self._loaded = True
        logger.debug("Loaded settings from %s", self._path)
        return copy.deepcopy(data)

    def save(self, document: Mapping[str, Any] | None = None) -> None:
        """Validate and write the document, backing up the previous file first.

        document: replaces the in-memory document if given.
        """
        if document is not None:
            candidate = _plain(document)
        elif self._loaded:
            candidate = self._data
        else:
            raise NotLoadedError(SettingsOperation.WRITE, self._path)

        self._ensure_valid(candidate, SettingsOperation.VALIDATE)
        try:
            text = json.dumps(candidate, indent=2)
        except (TypeError, ValueError) as e:
            raise ValidateError(
                f"Settings data is not JSON serializable: {e}",
                SettingsOperation.VALIDATE,
                self._path,
            ) from e

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SettingsIOError(
                f"Failed to create settings directory {self._path.parent}: {e}",
                SettingsOperation.WRITE,
                self._path,
            ) from e

        self._backup()
        try:
            _atomic_write(self._path, text)
        except OSError as e:
            raise SettingsIOError(
                f"Failed to write settings file {self._path}: {e}",
                SettingsOperation.WRITE,
                self._path,
            ) from e

        self._data = candidate
        self._loaded = True
        logger.info("Saved settings to %s", self._path)

    def merge_hooks(self, new_hooks: Mapping[str, Any]) -> None:
        """Replace each event in new_hooks wholesale; other events are untouched."""
        if not self._loaded:
            self.load()
        if not isinstance(new_hooks, Mapping):
            raise ValidateError(
                "new_hooks must be an object",
                SettingsOperation.MERGE_HOOKS,
                self._path,
                value=new_hooks,
            )

        data, hooks = self._split(SettingsOperation.MERGE_HOOKS)
        merged = {**hooks, **_plain(new_hooks)}
        candidate = dict(data)
        if merged or "hooks" in data:
            candidate["hooks"] = merged
        self._ensure_valid(candidate, SettingsOperation.MERGE_HOOKS)
        logger.debug("Merged hooks: %s", list(new_hooks))
        self._data = candidate

    def remove_hooks(self, names: Iterable[str]) -> None:
        """Delete the named events; absent names are ignored.

        The hooks key itself is dropped once it is empty.
        """
        if not self._loaded:
            self.load()
        if isinstance(names, str):
            names = [names]
        targets = set(names)

        data, hooks = self._split(SettingsOperation.REMOVE_HOOKS)
        if "hooks" not in data:
            return
        remaining = {k: v for k, v in hooks.items() if k not in targets}
        candidate = {k: v for k, v in data.items() if k != "hooks"}
        if remaining:
            candidate["hooks"] = remaining
        self._ensure_valid(candidate, SettingsOperation.REMOVE_HOOKS)
        logger.debug("Removed hooks: %s", list(targets))
        self._data = candidate

    def remove_all_hooks(self) -> None:
        if not self._loaded:
            self.load()
        if isinstance(self._data, dict) and "hooks" in self._data:
            self._data = {k: v for k, v in self._data.items() if k != "hooks"}
            logger.debug("Removed all hooks")

    @property
    def data(self) -> dict[str, Any]:
        if not self._loaded:
            raise NotLoadedError(SettingsOperation.GET_DATA, self._path)
        return copy.deepcopy(self._data)

    def get_hooks(self) -> dict[str, Any]:
        return copy.deepcopy(self._current_hooks())

    def has_hooks(self) -> bool:
        return bool(self.get_installed_hook_names())

    def has_hook(self, name: str) -> bool:
        return name in self._current_hooks()

    def get_installed_hook_names(self) -> list[str]:
        """Known notification events present in the document, in HookEvent order."""
        hooks = self._current_hooks()
        return [e.value for e in HookEvent if e.value in hooks]

    def analyze_configuration(self) -> ConfigurationAnalysis:
        """Report installed events, sound use, and current platform capabilities.

        Sound is detected by looking for each platform's sound marker inside the
        stored command strings.
        """
        if not self._loaded:
            self.load()
        hooks = self._current_hooks()
        markers = [p.sound_marker for p in self._registry.platforms if p.sound_marker]

        events: dict[str, HookStatus] = {}
        for event in HookEvent:
            commands = list(_commands(hooks.get(event.value)))
            events[event.value] = HookStatus(
                installed=event.value in hooks,
                has_sound=any(m in c for c in commands for m in markers),
            )

        try:
            platform = self._registry.resolve()
        except UnsupportedPlatformError:
            info = PlatformInfo(id=None, supported=False, sound_supported=False)
        else:
            info = PlatformInfo(
                id=platform.platform_id(),
                supported=True,
                sound_supported=platform.supports_sound,
            )
        return ConfigurationAnalysis(events=events, platform=info)

    # --- internal helpers ---

    def _current_hooks(self) -> dict[str, Any]:
        if not self._loaded:
            raise NotLoadedError(SettingsOperation.GET_HOOKS, self._path)
        if not isinstance(self._data, dict):
            return {}
        hooks = self._data.get("hooks")
        return hooks if isinstance(hooks, dict) else {}

    def _split(self, operation: SettingsOperation) -> tuple[dict[str, Any], dict[str, Any]]:
        """Return (document, hooks) or raise if they cannot be updated in place."""
        data = self._data
        if not isinstance(data, dict):
            raise ValidateError(
                "Settings data must be an object", operation, self._path, value=data
            )
        hooks = data.get("hooks")
        if hooks is None:
            return data, {}
        if not isinstance(hooks, dict):
            raise ValidateError(
                "hooks must be an object", operation, self._path, key="hooks", value=hooks
            )
        return data, hooks

    def _ensure_valid(self, data: Any, operation: SettingsOperation) -> None:
        result = validate_settings(data)
        if result.valid:
            return
        first = result.errors[0]
        raise ValidateError(
            first.message, operation, self._path, key=first.key, value=first.value, result=result
        )

    def _backup(self) -> None:
        if not self._path.exists():
            return
        try:
            shutil.copyfile(self._path, self.backup_path)
        except OSError as e:
            logger.warning("Could not create backup %s: %s", self.backup_path, e)


def _commands(groups: Any) -> Iterable[str]:
    if not isinstance(groups, list):
        return
    for group in groups:
        if not isinstance(group, dict) or not isinstance(group.get("hooks"), list):
            continue
        for entry in group["hooks"]:
            if isinstance(entry, dict) and isinstance(entry.get("command"), str):
                yield entry["command"]

