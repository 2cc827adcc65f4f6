"""Cross-platform notifications through plyer."""

from plyer import notification

from .base import Notifier, NotificationRequest, NotifierError

DEFAULT_TIMEOUT = 5


class PlyerNotifier(Notifier):
    """Generic backend for platforms without a native integration."""

    name = "plyer"

    def show(self, request: NotificationRequest) -> None:
        message = request.message
        if request.subtitle:
            message = f"{request.subtitle}\n{message}"

        try:
            notification.notify(
                title=request.title,
                message=message,
                app_name=self.app_name,
                timeout=int(request.timeout or DEFAULT_TIMEOUT),
            )
        except Exception as e:
            raise NotifierError(f"Failed to send notification: {e}") from e
