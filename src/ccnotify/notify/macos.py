"""macOS notifications via osascript, audio via afplay."""

from pathlib import Path

from .base import Notifier, NotificationRequest, NotifierError, escape_quotes, run_command
from .sounds import mac_sound_name


def build_script(request: NotificationRequest) -> str:
    """
    Build the AppleScript `display notification` statement.

    The system sound clause is left out for silent requests and for
    requests that carry their own audio clip.

    Args:
        request: Notification to display

    Returns:
        AppleScript source for osascript -e
    """
    script = (
        f'display notification "{escape_quotes(request.message)}" '
        f'with title "{escape_quotes(request.title)}"'
    )

    if request.subtitle:
        script += f' subtitle "{escape_quotes(request.subtitle)}"'

    sound_name = mac_sound_name(request.sound)
    if sound_name and request.audio_file is None:
        script += f' sound name "{sound_name}"'

    return script


class MacNotifier(Notifier):
    """Notification Center backend."""

    name = "macos"

    def show(self, request: NotificationRequest) -> None:
        run_command(["osascript", "-e", build_script(request)], "send macOS notification")

    def play(self, audio_file: Path) -> None:
        if not Path(audio_file).is_file():
            raise NotifierError(f"Sound file not found: {audio_file}")
        run_command(["afplay", str(audio_file)], "play sound")
