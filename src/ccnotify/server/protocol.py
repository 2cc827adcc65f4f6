"""JSON-RPC 2.0 framing for the MCP stdio transport (one message per line)."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

JSONRPC_VERSION = "2.0"
MCP_PROTOCOL_VERSION = "2024-11-05"
SUPPORTED_PROTOCOL_VERSIONS = ("2024-11-05", "2025-03-26", "2025-06-18")

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

RequestId = Union[str, int, None]


class ProtocolError(Exception):
    """A line that is not a valid JSON-RPC request."""

    def __init__(self, code: int, message: str, request_id: RequestId = None):
        super().__init__(message)
        self.code = code
        self.request_id = request_id


@dataclass
class Request:
    """Decoded JSON-RPC request or notification."""
    method: str
    id: RequestId = None
    params: Dict[str, Any] = field(default_factory=dict)
    is_notification: bool = False


def decode_request(line: str) -> Request:
    """
    Decode one line of input.

    Args:
        line: A single JSON-RPC message

    Returns:
        Request (is_notification is True when the message has no id)

    Raises:
        ProtocolError: The line is not JSON or not a request object
    """
    try:
        data = json.loads(line)
    except json.JSONDecodeError as e:
        raise ProtocolError(PARSE_ERROR, f"Parse error: {e}") from e

    if not isinstance(data, dict):
        raise ProtocolError(INVALID_REQUEST, "Invalid Request")

    request_id = data.get("id")
    method = data.get("method")
    if not isinstance(method, str):
        raise ProtocolError(INVALID_REQUEST, "Invalid Request", request_id)

    params = data.get("params") or {}
    if not isinstance(params, dict):
        raise ProtocolError(INVALID_PARAMS, "params must be an object", request_id)

    return Request(
        method=method,
        id=request_id,
        params=params,
        is_notification="id" not in data,
    )


def negotiate_protocol_version(requested: Any) -> str:
    """Echo the client's protocol version if supported, else offer our own."""
    if requested in SUPPORTED_PROTOCOL_VERSIONS:
        return requested
    return MCP_PROTOCOL_VERSION


def encode_result(request_id: RequestId, result: Dict[str, Any]) -> str:
    """Encode a successful response as a single line."""
    return json.dumps(
        {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result},
        separators=(",", ":"),
        ensure_ascii=False,
    )


def encode_error(request_id: RequestId, code: int, message: str, data: Optional[Any] = None) -> str:
    """Encode an error response as a single line."""
    error: Dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return json.dumps(
        {"jsonrpc": JSONRPC_VERSION, "id": request_id, "error": error},
        separators=(",", ":"),
        ensure_ascii=False,
    )
