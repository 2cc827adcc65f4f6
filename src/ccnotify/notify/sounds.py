"""Notification sounds and what each one is meant for."""

from enum import Enum
from typing import Dict, Optional


class Sound(Enum):
    """Sound categories a notification can carry."""
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    PROGRESS = "progress"
    REMINDER = "reminder"
    DEFAULT = "default"
    SILENT = "silent"


# macOS system sounds (/System/Library/Sounds)
MAC_SOUND_NAMES: Dict[Sound, str] = {
    Sound.SUCCESS: "Glass",
    Sound.INFO: "Blow",
    Sound.WARNING: "Sosumi",
    Sound.ERROR: "Basso",
    Sound.PROGRESS: "Tink",
    Sound.REMINDER: "Ping",
    Sound.DEFAULT: "default",
    Sound.SILENT: "",
}

# freedesktop sound theme names
FREEDESKTOP_SOUND_NAMES: Dict[Sound, str] = {
    Sound.SUCCESS: "complete",
    Sound.INFO: "message",
    Sound.WARNING: "dialog-warning",
    Sound.ERROR: "dialog-error",
    Sound.PROGRESS: "message",
    Sound.REMINDER: "bell",
    Sound.DEFAULT: "message-new-instant",
    Sound.SILENT: "",
}

SOUND_DESCRIPTIONS: Dict[Sound, str] = {
    Sound.SUCCESS: "Success notification - task completion, successful operations",
    Sound.INFO: "Information notification - status updates, general information",
    Sound.WARNING: "Warning notification - attention needed, caution required",
    Sound.ERROR: "Error notification - failures, critical issues",
    Sound.PROGRESS: "Progress notification - ongoing work, updates",
    Sound.REMINDER: "Reminder notification - prompts, scheduled alerts",
    Sound.DEFAULT: "Default system notification sound",
    Sound.SILENT: "No sound - silent notification",
}


def mac_sound_name(sound: Sound) -> Optional[str]:
    """Get the macOS sound name, or None for a silent notification."""
    return MAC_SOUND_NAMES[sound] or None


def describe(sound: Sound) -> str:
    """Get the human-readable purpose of a sound."""
    return SOUND_DESCRIPTIONS[sound]
