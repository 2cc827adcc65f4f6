"""Notification and Stop hook entry points."""

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from ccnotify.config import Settings
from ccnotify.logs import configure_debug_logging
from ccnotify.notify import Dispatcher, NotificationRequest, NotificationResult, Sound, create_dispatcher

from .classifier import classify
from .input import read_hook_input
from .style import enhance_title, should_skip

logger = logging.getLogger(__name__)

STOP_TITLE_PREFIX = "\U0001f431"  # 🐱
STOP_MESSAGE_PREFIX = "Session ended"


def _report(result: NotificationResult, request: NotificationRequest, what: str) -> None:
    """Log a dispatch result; fall back to a console line on failure."""
    if not result.success:
        print(f"Failed to send {what.lower()}: {result.error}", file=sys.stderr)
        logger.debug(f"{what} error: {result.error}")
        print(f"{request.title}: {request.message}")
        return

    logger.debug(f"{what} sent: {request.title} - {request.message}")
    if result.sound_error:
        logger.debug(f"Failed to play custom sound: {result.sound_error}")
    elif request.audio_file is not None:
        logger.debug(f"Custom sound played: {request.audio_file}")


def run_notification_hook(
    stdin_data: str,
    args: Sequence[str],
    settings: Settings,
    dispatcher: Dispatcher,
) -> int:
    """
    Classify a Claude Code notification and show it with a sound.

    Args:
        stdin_data: Raw JSON from Claude Code
        args: Positional fallback arguments (title, message, level)
        settings: Runtime settings
        dispatcher: Dispatcher used to show the notification

    Returns:
        Exit code (always 0)
    """
    logger.debug(f'Raw stdin input: "{stdin_data}"')
    hook_input = read_hook_input(stdin_data, args, empty_title_is_absent=True)

    logger.debug(f'Hook triggered - Title: "{hook_input.title}"')
    logger.debug(f'Hook triggered - Message: "{hook_input.message}"')
    logger.debug(f'Hook triggered - Level: "{hook_input.level}"')
    logger.debug(f"Hook triggered - Data: {json.dumps(hook_input.data, ensure_ascii=False)}")
    logger.debug(f"Hook triggered - Input method: {hook_input.source}")

    if hook_input.is_empty:
        logger.debug("No notification data, exiting")
        return 0

    if should_skip(hook_input.title, hook_input.message):
        logger.debug("Notification skipped")
        return 0

    category = classify(hook_input.title, hook_input.message)
    title = enhance_title(hook_input.title, category)
    logger.debug(f"Classified as {category.value}")

    request = NotificationRequest(
        title=title,
        message=hook_input.message,
        sound=category,
        audio_file=settings.sound_file,
    )
    result = dispatcher.send(request)
    _report(result, request, "Enhanced notification")
    return 0


def run_stop_hook(
    stdin_data: str,
    args: Sequence[str],
    settings: Settings,
    dispatcher: Dispatcher,
) -> int:
    """
    Show the end-of-session notification.

    Args:
        stdin_data: Raw JSON from Claude Code
        args: Positional fallback arguments (title, message)
        settings: Runtime settings
        dispatcher: Dispatcher used to show the notification

    Returns:
        Exit code (always 0)
    """
    logger.debug("=== STOP HOOK TRIGGERED ===")
    logger.debug(f'Raw stdin input: "{stdin_data}"')

    hook_input = read_hook_input(
        stdin_data,
        args,
        json_defaults=("Claude Code Session", "Session Stopped"),
        arg_defaults=("Claude Code", "Stop Event"),
    )

    logger.debug(f'Stop Title: "{hook_input.title}"')
    logger.debug(f'Stop Message: "{hook_input.message}"')
    logger.debug(f"Stop Data: {json.dumps(hook_input.data, ensure_ascii=False)}")

    if hook_input.is_empty:
        logger.debug("No stop data, exiting")
        return 0

    title = f"{STOP_TITLE_PREFIX} {hook_input.title}"
    message = f"{STOP_MESSAGE_PREFIX}: {hook_input.message}"

    request = NotificationRequest(
        title=title,
        message=message,
        sound=Sound.DEFAULT,
        audio_file=settings.sound_file,
    )
    result = dispatcher.send(request)
    _report(result, request, "Stop notification")
    return 0


def parse_hook_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse `[--debug] [title] [message] [level]`."""
    parser = argparse.ArgumentParser(description="Claude Code notification hook")
    parser.add_argument("--debug", action="store_true", help="Append debug output to the hook log")
    parser.add_argument("title", nargs="?", default="")
    parser.add_argument("message", nargs="?", default="")
    parser.add_argument("level", nargs="?", default="")
    args, _ = parser.parse_known_args(argv)
    return args


def _run(hook, log_name: str, prefix: str = "") -> None:
    args = parse_hook_args()
    settings = Settings.from_env(debug=args.debug)
    configure_debug_logging(settings, log_name, prefix)

    try:
        stdin_data = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Error reading stdin: {e}")
        stdin_data = ""

    try:
        exit_code = hook(
            stdin_data,
            [args.title, args.message, args.level],
            settings,
            create_dispatcher(settings),
        )
    except Exception as e:
        print(f"Notification hook error: {e}", file=sys.stderr)
        logger.debug(f"Hook error: {e}")
        exit_code = 0
    sys.exit(exit_code)


def notification_main() -> None:
    """Entry point for ccnotify-notification-hook command."""
    _run(run_notification_hook, "notification-hook")


def stop_main() -> None:
    """Entry point for ccnotify-stop-hook command."""
    _run(run_stop_hook, "stop-hook", prefix="STOP HOOK: ")


if __name__ == "__main__":
    notification_main()
