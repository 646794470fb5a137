from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HookEvent(str, Enum):
    """Event names this package writes under settings["hooks"]."""

    NOTIFICATION = "Notification"  # task completed / needs attention
    STOP = "Stop"


class HookAction(str, Enum):
    """Label shown in the notification text for each event."""

    COMPLETED = "Completed"
    STOPPED = "Stopped"


class HookEntry(BaseModel):
    """Single command hook: the shell command the task runner invokes."""

    model_config = ConfigDict(extra="allow", frozen=True)
    type: Literal["command"] = "command"
    command: str = Field(min_length=1)


class HookGroup(BaseModel):
    """One element of an event's list: a group of hook entries."""

    model_config = ConfigDict(extra="allow", frozen=True)
    hooks: list[HookEntry] = Field(min_length=1)


# Event name -> hook groups, as accepted by SettingsStore.merge_hooks.
HooksMapping = dict[str, list[HookGroup]]
