"""Linux desktop notifications using D-Bus."""

from pathlib import Path

try:
    import dbus
except ImportError:
    dbus = None  # Will fail at runtime if actually used

from .base import Notifier, NotificationRequest, NotifierError
from .sounds import FREEDESKTOP_SOUND_NAMES, Sound


# org.freedesktop.Notifications urgency levels
URGENCY_LOW = 0
URGENCY_NORMAL = 1
URGENCY_CRITICAL = 2

SOUND_URGENCY = {
    Sound.ERROR: URGENCY_CRITICAL,
    Sound.WARNING: URGENCY_CRITICAL,
    Sound.PROGRESS: URGENCY_LOW,
    Sound.SILENT: URGENCY_LOW,
}

SOUND_ICONS = {
    Sound.ERROR: "dialog-error",
    Sound.WARNING: "dialog-warning",
}

DEFAULT_TIMEOUT_MS = -1  # Let the notification server decide


class GnomeNotifier(Notifier):
    """Sends notifications through org.freedesktop.Notifications."""

    name = "gnome"

    def __init__(self, app_name: str = "Claude Code", platform: str = "linux"):
        super().__init__(app_name, platform)
        if dbus is None:
            raise RuntimeError("dbus-python not installed")

        self._bus = dbus.SessionBus()
        self._notify_obj = self._bus.get_object(
            "org.freedesktop.Notifications",
            "/org/freedesktop/Notifications",
        )
        self._notify_interface = dbus.Interface(
            self._notify_obj,
            "org.freedesktop.Notifications",
        )

    def _hints(self, request: NotificationRequest) -> dict:
        hints = {
            "urgency": dbus.Byte(SOUND_URGENCY.get(request.sound, URGENCY_NORMAL)),
            "desktop-entry": dbus.String("ccnotify"),
        }

        if request.sound == Sound.SILENT:
            hints["suppress-sound"] = dbus.Boolean(True)
        elif request.audio_file is not None:
            hints["sound-file"] = dbus.String(str(request.audio_file))
        else:
            hints["sound-name"] = dbus.String(FREEDESKTOP_SOUND_NAMES[request.sound])

        return hints

    def show(self, request: NotificationRequest) -> None:
        body = request.message
        if request.subtitle:
            body = f"{request.subtitle}\n{body}"

        timeout_ms = DEFAULT_TIMEOUT_MS
        if request.timeout:
            timeout_ms = int(request.timeout * 1000)

        try:
            self._notify_interface.Notify(
                self.app_name,  # app_name
                0,              # replaces_id (always a new notification)
                SOUND_ICONS.get(request.sound, "dialog-information"),
                request.title,  # summary
                body,           # body
                [],             # actions
                self._hints(request),
                timeout_ms,
            )
        except dbus.DBusException as e:
            raise NotifierError(f"Failed to send D-Bus notification: {e}") from e

    def play(self, audio_file: Path) -> None:
        # The notification server plays the clip from the sound-file hint.
        if not Path(audio_file).is_file():
            raise NotifierError(f"Sound file not found: {audio_file}")
