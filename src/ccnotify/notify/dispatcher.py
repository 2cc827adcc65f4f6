"""Drive a notification backend for a single request."""

import logging
import sys
import time
from dataclasses import replace
from typing import Callable

from .base import Notifier, NotificationRequest, NotificationResult, NotifierError
from .sounds import Sound

logger = logging.getLogger(__name__)


class Dispatcher:
    """Sends notification requests through a backend and reports the outcome."""

    def __init__(
        self,
        notifier: Notifier,
        enable_sounds: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.notifier = notifier
        self.enable_sounds = enable_sounds
        self._sleep = sleep

    def send(self, request: NotificationRequest) -> NotificationResult:
        """
        Display a notification, play its audio clip, open its target and wait.

        Args:
            request: The notification to send

        Returns:
            NotificationResult; audio failures are reported in sound_error
            without failing the send
        """
        if not request.title or not request.message:
            return NotificationResult.failed("Title and message are required")

        if not self.enable_sounds:
            request = replace(request, sound=Sound.SILENT, audio_file=None)

        try:
            self.notifier.show(request)
        except NotifierError as e:
            return NotificationResult.failed(str(e))

        result = NotificationResult.ok()

        if request.audio_file is not None:
            try:
                self.notifier.play(request.audio_file)
            except NotifierError as e:
                result.sound_error = str(e)

        if request.open:
            try:
                self.notifier.open(request.open)
            except NotifierError as e:
                return NotificationResult.failed(str(e))

        if request.wait and request.timeout:
            self._sleep(request.timeout)

        return result


def get_notifier(app_name: str = "Claude Code", platform: str = sys.platform) -> Notifier:
    """
    Pick the notification backend for a platform.

    macOS uses Notification Center, Linux uses D-Bus when it is reachable,
    everything else goes through plyer.
    """
    if platform == "darwin":
        from .macos import MacNotifier
        return MacNotifier(app_name, platform)

    if platform.startswith("linux"):
        from .gnome import GnomeNotifier
        try:
            return GnomeNotifier(app_name, platform)
        except Exception as e:
            logger.debug(f"D-Bus notifications unavailable, using plyer: {e}")

    from .crossplatform import PlyerNotifier
    return PlyerNotifier(app_name, platform)


def create_dispatcher(settings) -> Dispatcher:
    """Build a dispatcher for the current platform from Settings."""
    return Dispatcher(
        get_notifier(settings.app_name),
        enable_sounds=settings.enable_sounds,
    )
