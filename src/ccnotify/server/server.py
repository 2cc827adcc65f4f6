"""Line-oriented MCP server over a pair of text streams."""

import logging
from typing import Optional, TextIO

from ccnotify import __version__

from .protocol import (
    INTERNAL_ERROR,
    METHOD_NOT_FOUND,
    ProtocolError,
    Request,
    decode_request,
    encode_error,
    encode_result,
    negotiate_protocol_version,
)
from .tools import NotificationTools

logger = logging.getLogger(__name__)

SERVER_NAME = "ccnotify"


class McpServer:
    """Reads JSON-RPC requests from one stream and writes responses to another."""

    def __init__(self, tools: NotificationTools, reader: TextIO, writer: TextIO):
        self._tools = tools
        self._reader = reader
        self._writer = writer
        self._running = False

    def handle_request(self, request: Request) -> Optional[str]:
        """
        Handle one decoded request.

        Args:
            request: Decoded JSON-RPC message

        Returns:
            Encoded response line, or None for notifications
        """
        if request.is_notification:
            logger.debug(f"Notification received: {request.method}")
            return None

        if request.method == "initialize":
            return encode_result(request.id, {
                "protocolVersion": negotiate_protocol_version(request.params.get("protocolVersion")),
                "capabilities": {"tools": {"listChanged": False}},
                "serverInfo": {"name": SERVER_NAME, "version": __version__},
            })

        if request.method == "ping":
            return encode_result(request.id, {})

        if request.method == "tools/list":
            return encode_result(request.id, {"tools": self._tools.definitions()})

        if request.method == "tools/call":
            name = request.params.get("name", "")
            logger.info(f"TOOL_CALL name={name}")
            result = self._tools.call(name, request.params.get("arguments"))
            return encode_result(request.id, result)

        return encode_error(request.id, METHOD_NOT_FOUND, f"Method not found: {request.method}")

    def handle_line(self, line: str) -> Optional[str]:
        """Decode and handle one input line."""
        line = line.strip()
        if not line:
            return None

        try:
            request = decode_request(line)
        except ProtocolError as e:
            logger.warning(f"Invalid message: {e}")
            return encode_error(e.request_id, e.code, str(e))

        try:
            return self.handle_request(request)
        except Exception as e:
            logger.error(f"Error handling {request.method}: {e}")
            if request.is_notification:
                return None
            return encode_error(request.id, INTERNAL_ERROR, str(e))

    def _write(self, response: str) -> None:
        self._writer.write(response + "\n")
        self._writer.flush()

    def serve_forever(self) -> None:
        """Handle requests until the input stream closes or shutdown is called."""
        self._running = True
        logger.info("MCP server running on stdio")

        for line in self._reader:
            response = self.handle_line(line)
            if response is not None:
                self._write(response)
            if not self._running:
                break

        self._running = False
        logger.info("MCP server stopped")

    def shutdown(self) -> None:
        """Stop after the current request."""
        self._running = False
