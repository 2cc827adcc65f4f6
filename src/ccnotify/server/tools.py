"""Notification tools exposed over MCP."""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from ccnotify.notify import Dispatcher, NotificationRequest, NotificationResult, Sound, describe

logger = logging.getLogger(__name__)

SOUND_NAMES = [s.value for s in Sound]
URGENCY_LEVELS = ["low", "medium", "high", "critical"]

# urgency -> (sound, wait for user interaction)
URGENCY_DISPATCH: Dict[str, Tuple[Sound, bool]] = {
    "low": (Sound.INFO, False),
    "medium": (Sound.REMINDER, False),
    "high": (Sound.WARNING, True),
    "critical": (Sound.ERROR, True),
}

DEFAULT_WAIT_TIMEOUT = 10

TASK_COMPLETE_TITLE = "✅ Task Complete"
ERROR_TITLE = "❌ Error Occurred"
PROGRESS_TITLE = "⏳ Progress Update"
ACTION_NEEDED_TITLE = "🔔 Action Needed"
ACTION_REQUIRED_TITLE = "🚨 Action Required"

ToolResult = Dict[str, Any]


class ToolError(Exception):
    """Invalid arguments or unknown tool."""


def text_result(text: str, is_error: bool = False) -> ToolResult:
    """Build an MCP tool result with a single text block."""
    return {"content": [{"type": "text", "text": text}], "isError": is_error}


def _details_schema(description: str) -> Dict[str, Any]:
    return {"type": "string", "description": description, "maxLength": 300}


TOOL_DEFINITIONS: List[Dict[str, Any]] = [
    {
        "name": "send_notification",
        "description": "Send a desktop notification with customizable sound for different use cases",
        "inputSchema": {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "The notification title", "maxLength": 100},
                "message": {"type": "string", "description": "The notification message content", "maxLength": 500},
                "sound": {
                    "type": "string",
                    "enum": SOUND_NAMES,
                    "description": (
                        "Sound type for the notification context: success (task completion), "
                        "info (status updates), warning (attention needed), error (failures), "
                        "progress (ongoing work), reminder (prompts), default (system sound), "
                        "silent (no sound)"
                    ),
                    "default": "default",
                },
                "subtitle": {"type": "string", "description": "Optional subtitle for the notification", "maxLength": 100},
                "timeout": {
                    "type": "number",
                    "description": "Timeout in seconds",
                    "minimum": 1,
                    "maximum": 60,
                    "default": 5,
                },
                "open": {"type": "string", "description": "URL or file path to open with the notification"},
                "wait": {"type": "boolean", "description": "Whether to wait for user interaction", "default": False},
            },
            "required": ["title", "message"],
            "additionalProperties": False,
        },
    },
    {
        "name": "list_notification_sounds",
        "description": "List available notification sounds and their intended use cases",
        "inputSchema": {"type": "object", "properties": {}, "additionalProperties": False},
    },
    {
        "name": "send_task_complete_notification",
        "description": "Send a task completion notification with success sound",
        "inputSchema": {
            "type": "object",
            "properties": {
                "task": {"type": "string", "description": "Description of the completed task", "maxLength": 200},
                "details": _details_schema("Optional additional details about the completion"),
            },
            "required": ["task"],
            "additionalProperties": False,
        },
    },
    {
        "name": "send_error_notification",
        "description": "Send an error notification with error sound",
        "inputSchema": {
            "type": "object",
            "properties": {
                "error": {"type": "string", "description": "Description of the error", "maxLength": 200},
                "details": _details_schema("Optional additional error details"),
            },
            "required": ["error"],
            "additionalProperties": False,
        },
    },
    {
        "name": "send_progress_notification",
        "description": "Send a progress update notification with progress sound",
        "inputSchema": {
            "type": "object",
            "properties": {
                "status": {"type": "string", "description": "Current progress status", "maxLength": 200},
                "details": _details_schema("Optional progress details"),
            },
            "required": ["status"],
            "additionalProperties": False,
        },
    },
    {
        "name": "send_user_action_needed_notification",
        "description": (
            "Tell the user their input is needed. High and critical urgency keep the "
            "notification up until the timeout expires"
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "action_needed": {"type": "string", "description": "What the user needs to do", "maxLength": 200},
                "context": _details_schema("Optional context for the request"),
                "urgency": {
                    "type": "string",
                    "enum": URGENCY_LEVELS,
                    "description": "low (info), medium (reminder), high (warning, waits), critical (error, waits)",
                    "default": "medium",
                },
                "timeout": {
                    "type": "number",
                    "description": "Seconds to wait for high and critical urgency",
                    "minimum": 1,
                    "maximum": 60,
                    "default": DEFAULT_WAIT_TIMEOUT,
                },
            },
            "required": ["action_needed"],
            "additionalProperties": False,
        },
    },
    {
        "name": "auto_notify_if_appropriate",
        "description": (
            "Decide whether the current situation deserves a notification: errors first, "
            "then permission requests, then completed todos; otherwise do nothing"
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "context": {"type": "string", "description": "What just happened", "maxLength": 200},
                "todos_completed": {"type": "boolean", "description": "All todos were completed", "default": False},
                "error_occurred": {"type": "boolean", "description": "An error occurred", "default": False},
                "permission_required": {
                    "type": "boolean",
                    "description": "The user must grant a permission",
                    "default": False,
                },
                "details": _details_schema("Optional details passed on to the notification"),
            },
            "required": ["context"],
            "additionalProperties": False,
        },
    },
]

_JSON_TYPES: Dict[str, Callable[[Any], bool]] = {
    "string": lambda v: isinstance(v, str),
    "number": lambda v: isinstance(v, (int, float)) and not isinstance(v, bool),
    "boolean": lambda v: isinstance(v, bool),
}


def validate_arguments(schema: Dict[str, Any], arguments: Any) -> Dict[str, Any]:
    """
    Check tool arguments against a tool's input schema.

    Covers the subset of JSON Schema the tool definitions use: required
    keys, additionalProperties, type, enum, maxLength, minimum, maximum.

    Raises:
        ToolError: describing the first problem found
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise ToolError("arguments must be an object")

    properties = schema.get("properties", {})

    for key in schema.get("required", []):
        if key not in arguments:
            raise ToolError(f"Missing required argument: {key}")

    if schema.get("additionalProperties") is False:
        unknown = sorted(set(arguments) - set(properties))
        if unknown:
            raise ToolError(f"Unknown argument: {', '.join(unknown)}")

    for key, value in arguments.items():
        prop = properties.get(key)
        if prop is None:
            continue

        if not _JSON_TYPES[prop["type"]](value):
            raise ToolError(f"Argument {key} must be a {prop['type']}")
        if "enum" in prop and value not in prop["enum"]:
            raise ToolError(f"Argument {key} must be one of: {', '.join(prop['enum'])}")
        if "maxLength" in prop and len(value) > prop["maxLength"]:
            raise ToolError(f"Argument {key} must be at most {prop['maxLength']} characters")
        if "minimum" in prop and value < prop["minimum"]:
            raise ToolError(f"Argument {key} must be >= {prop['minimum']}")
        if "maximum" in prop and value > prop["maximum"]:
            raise ToolError(f"Argument {key} must be <= {prop['maximum']}")

    return arguments


class NotificationTools:
    """The MCP tool set, bound to a dispatcher."""

    def __init__(self, dispatcher: Dispatcher, default_sound: Sound = Sound.DEFAULT):
        self.dispatcher = dispatcher
        self.default_sound = default_sound
        self._schemas = {t["name"]: t["inputSchema"] for t in TOOL_DEFINITIONS}
        self._handlers: Dict[str, Callable[..., ToolResult]] = {
            "send_notification": self.send_notification,
            "list_notification_sounds": self.list_notification_sounds,
            "send_task_complete_notification": self.send_task_complete_notification,
            "send_error_notification": self.send_error_notification,
            "send_progress_notification": self.send_progress_notification,
            "send_user_action_needed_notification": self.send_user_action_needed_notification,
            "auto_notify_if_appropriate": self.auto_notify_if_appropriate,
        }

    def definitions(self) -> List[Dict[str, Any]]:
        """Tool list for tools/list."""
        return TOOL_DEFINITIONS

    def call(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Run a tool by name.

        Never raises: unknown tools, bad arguments and failures inside a
        tool all come back as a result with isError set.
        """
        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise ToolError(f"Unknown tool: {name}")
            arguments = validate_arguments(self._schemas[name], arguments)
            return handler(**arguments)
        except Exception as e:
            logger.warning(f"Tool {name} failed: {e}")
            return text_result(f"Error: {e}", is_error=True)

    def _send(self, request: NotificationRequest) -> NotificationResult:
        result = self.dispatcher.send(request)
        if result.sound_error:
            logger.warning(f"Failed to play sound: {result.sound_error}")
        if not result.success:
            logger.warning(f"Notification failed: {result.error}")
        return result

    def send_notification(
        self,
        title: str,
        message: str,
        sound: Optional[str] = None,
        subtitle: Optional[str] = None,
        timeout: Optional[float] = None,
        open: Optional[str] = None,
        wait: bool = False,
    ) -> ToolResult:
        chosen = Sound(sound) if sound else self.default_sound
        result = self._send(NotificationRequest(
            title=title,
            message=message,
            sound=chosen,
            subtitle=subtitle,
            timeout=timeout,
            open=open,
            wait=wait,
        ))
        if result.success:
            return text_result(f'✅ Notification sent: "{title}" with {chosen.value} sound')
        return text_result(f"❌ Failed to send notification: {result.error}", is_error=True)

    def list_notification_sounds(self) -> ToolResult:
        lines = [f"• **{s.value}**: {describe(s)}" for s in Sound]
        return text_result("## Available Notification Sounds\n\n" + "\n".join(lines))

    def send_task_complete_notification(self, task: str, details: Optional[str] = None) -> ToolResult:
        result = self._send(NotificationRequest(
            title=TASK_COMPLETE_TITLE,
            message=task,
            subtitle=details,
            sound=Sound.SUCCESS,
        ))
        if result.success:
            return text_result(f'✅ Task completion notification sent: "{task}"')
        return text_result(f"❌ Failed to send task completion notification: {result.error}", is_error=True)

    def send_error_notification(self, error: str, details: Optional[str] = None) -> ToolResult:
        result = self._send(NotificationRequest(
            title=ERROR_TITLE,
            message=error,
            subtitle=details,
            sound=Sound.ERROR,
        ))
        if result.success:
            return text_result(f'❌ Error notification sent: "{error}"')
        return text_result(f"❌ Failed to send error notification: {result.error}", is_error=True)

    def send_progress_notification(self, status: str, details: Optional[str] = None) -> ToolResult:
        result = self._send(NotificationRequest(
            title=PROGRESS_TITLE,
            message=status,
            subtitle=details,
            sound=Sound.PROGRESS,
        ))
        if result.success:
            return text_result(f'⏳ Progress notification sent: "{status}"')
        return text_result(f"❌ Failed to send progress notification: {result.error}", is_error=True)

    def send_user_action_needed_notification(
        self,
        action_needed: str,
        context: Optional[str] = None,
        urgency: str = "medium",
        timeout: Optional[float] = None,
    ) -> ToolResult:
        sound, wait = URGENCY_DISPATCH[urgency]
        title = ACTION_REQUIRED_TITLE if urgency == "critical" else ACTION_NEEDED_TITLE
        if wait and timeout is None:
            timeout = DEFAULT_WAIT_TIMEOUT

        result = self._send(NotificationRequest(
            title=title,
            message=action_needed,
            subtitle=context,
            sound=sound,
            timeout=timeout,
            wait=wait,
        ))
        if result.success:
            return text_result(f'🔔 Action needed notification sent ({urgency}): "{action_needed}"')
        return text_result(f"❌ Failed to send action needed notification: {result.error}", is_error=True)

    def auto_notify_if_appropriate(
        self,
        context: str,
        todos_completed: bool = False,
        error_occurred: bool = False,
        permission_required: bool = False,
        details: Optional[str] = None,
    ) -> ToolResult:
        if error_occurred:
            return self.send_error_notification(context, details)
        if permission_required:
            return self.send_user_action_needed_notification(context, details, urgency="high")
        if todos_completed:
            return self.send_task_complete_notification(context, details)
        return text_result(f'No notification needed: "{context}"')
