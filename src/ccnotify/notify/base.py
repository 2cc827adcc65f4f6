"""Notification request/result types and the backend interface."""

import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .sounds import Sound


class NotifierError(Exception):
    """A backend failed to display a notification, play audio or open a target."""


@dataclass
class NotificationRequest:
    """A single notification to display."""
    title: str
    message: str
    sound: Sound = Sound.DEFAULT
    subtitle: Optional[str] = None
    timeout: Optional[float] = None
    open: Optional[str] = None
    wait: bool = False
    audio_file: Optional[Path] = None


@dataclass
class NotificationResult:
    """Outcome of a dispatch. Callers decide whether and how to log it."""
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None
    sound_error: Optional[str] = None

    @classmethod
    def ok(cls, message: str = "Notification sent successfully") -> "NotificationResult":
        return cls(success=True, message=message)

    @classmethod
    def failed(cls, error: str) -> "NotificationResult":
        return cls(success=False, error=error)


def escape_quotes(text: str) -> str:
    """Escape text for use inside a double-quoted AppleScript string."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def opener_command(target: str, platform: str = sys.platform) -> List[str]:
    """Get the command that opens a file or URL with its default handler."""
    if platform == "darwin":
        return ["open", target]
    if platform == "win32":
        return ["cmd", "/c", "start", "", target]
    return ["xdg-open", target]


def run_command(command: List[str], what: str) -> None:
    """Run a helper command, turning any failure into NotifierError.

    Args:
        command: argv to execute
        what: Short description used in the error message
    """
    try:
        subprocess.run(command, check=True, capture_output=True)
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or b"").decode("utf-8", "replace").strip()
        detail = f": {stderr}" if stderr else ""
        raise NotifierError(f"Failed to {what} (exit {e.returncode}){detail}") from e
    except FileNotFoundError as e:
        raise NotifierError(f"Failed to {what}: {command[0]} not found") from e


class Notifier:
    """Base class for platform notification backends."""

    name = "base"

    def __init__(self, app_name: str = "Claude Code", platform: str = sys.platform):
        self.app_name = app_name
        self.platform = platform

    def show(self, request: NotificationRequest) -> None:
        """Display a notification. Raises NotifierError on failure."""
        raise NotImplementedError

    def play(self, audio_file: Path) -> None:
        """Play an audio clip after the notification. No-op by default."""

    def open(self, target: str) -> None:
        """Open a file or URL with the platform's default handler."""
        run_command(opener_command(target, self.platform), f"open {target}")
