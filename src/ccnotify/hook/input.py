"""Read a hook's notification from stdin JSON or positional arguments."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Sequence, Tuple

logger = logging.getLogger(__name__)

DEFAULT_LEVEL = "info"


@dataclass
class HookInput:
    """Title and message extracted from a hook invocation."""
    title: str
    message: str
    level: str = DEFAULT_LEVEL
    data: Dict[str, Any] = field(default_factory=dict)
    source: str = "json"

    @property
    def is_empty(self) -> bool:
        return not self.title.strip() and not self.message.strip()


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _from_args(args: Sequence[str], defaults: Tuple[str, str]) -> HookInput:
    title = args[0] if len(args) > 0 and args[0] else defaults[0]
    message = args[1] if len(args) > 1 and args[1] else defaults[1]
    level = args[2] if len(args) > 2 and args[2] else DEFAULT_LEVEL
    return HookInput(title=title, message=message, level=level, source="args")


def read_hook_input(
    stdin_data: str,
    args: Sequence[str] = (),
    json_defaults: Tuple[str, str] = ("Claude Code", ""),
    arg_defaults: Tuple[str, str] = ("", ""),
    empty_title_is_absent: bool = False,
) -> HookInput:
    """
    Extract (title, message, level) from a hook invocation.

    Args:
        stdin_data: Raw stdin from Claude Code
        args: Positional arguments (title, message, level)
        json_defaults: Title/message used when a JSON key is absent or null
        arg_defaults: Title/message used when stdin is malformed and the
            argument is missing
        empty_title_is_absent: Also use the default title for an empty one

    Returns:
        HookInput; never raises
    """
    if not stdin_data or not stdin_data.strip():
        return _from_args(args, ("", ""))

    try:
        data = json.loads(stdin_data)
    except (json.JSONDecodeError, ValueError) as e:
        logger.debug(f"Error reading stdin: {e}")
        return _from_args(args, arg_defaults)

    if not isinstance(data, dict):
        logger.debug(f"Error reading stdin: expected a JSON object, got {type(data).__name__}")
        return _from_args(args, arg_defaults)

    title = data.get("title")
    if title is None or (empty_title_is_absent and title == ""):
        title = json_defaults[0]
    message = data.get("message")
    if message is None:
        message = json_defaults[1]

    return HookInput(title=_text(title), message=_text(message), data=data, source="json")
