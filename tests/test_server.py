"""Tests for the MCP stdio server."""

import io
import json
from unittest.mock import MagicMock, patch

import pytest

from ccnotify import __version__
from ccnotify.server.main import build_server
from ccnotify.server.protocol import METHOD_NOT_FOUND, PARSE_ERROR
from ccnotify.server.server import McpServer
from ccnotify.server.tools import NotificationTools


def _line(**message):
    return json.dumps({"jsonrpc": "2.0", **message})


@pytest.fixture
def server(dispatcher):
    return McpServer(NotificationTools(dispatcher), io.StringIO(), io.StringIO())


def test_initialize(server):
    """initialize reports the server and its tool capability."""
    response = json.loads(server.handle_line(_line(
        id=1,
        method="initialize",
        params={"protocolVersion": "2025-03-26", "capabilities": {}},
    )))

    result = response["result"]
    assert response["id"] == 1
    assert result["protocolVersion"] == "2025-03-26"
    assert result["capabilities"] == {"tools": {"listChanged": False}}
    assert result["serverInfo"] == {"name": "ccnotify", "version": __version__}


def test_initialize_default_protocol_version(server):
    """Without a client version, the server's own is used."""
    response = json.loads(server.handle_line(_line(id=1, method="initialize")))
    assert response["result"]["protocolVersion"] == "2024-11-05"


def test_initialize_unsupported_protocol_version(server):
    """An unknown client version is answered with the server's own."""
    response = json.loads(server.handle_line(_line(
        id=1,
        method="initialize",
        params={"protocolVersion": "1999-01-01"},
    )))
    assert response["result"]["protocolVersion"] == "2024-11-05"


def test_ping(server):
    """ping returns an empty result."""
    assert json.loads(server.handle_line(_line(id="a", method="ping")))["result"] == {}


def test_notifications_get_no_response(server):
    """Messages without an id are not answered."""
    assert server.handle_line(_line(method="notifications/initialized")) is None


def test_blank_line_is_ignored(server):
    """Blank lines are skipped."""
    assert server.handle_line("   \n") is None


def test_tools_list(server):
    """tools/list returns the tool definitions."""
    response = json.loads(server.handle_line(_line(id=2, method="tools/list")))
    assert len(response["result"]["tools"]) == 7


def test_tools_call(server, notifier):
    """tools/call runs the tool and returns its content."""
    response = json.loads(server.handle_line(_line(
        id=3,
        method="tools/call",
        params={"name": "send_error_notification", "arguments": {"error": "Oops"}},
    )))

    result = response["result"]
    assert result["isError"] is False
    assert result["content"][0]["text"] == '❌ Error notification sent: "Oops"'
    assert notifier.shown[0].message == "Oops"


def test_tools_call_without_arguments(server):
    """Missing arguments are validated like an empty object."""
    response = json.loads(server.handle_line(_line(
        id=4,
        method="tools/call",
        params={"name": "list_notification_sounds"},
    )))
    assert response["result"]["isError"] is False


def test_unknown_method(server):
    """Unknown methods get METHOD_NOT_FOUND."""
    response = json.loads(server.handle_line(_line(id=5, method="resources/list")))
    assert response["error"]["code"] == METHOD_NOT_FOUND


def test_parse_error(server):
    """Garbage input gets a parse error with a null id."""
    response = json.loads(server.handle_line("{not json"))
    assert response["id"] is None
    assert response["error"]["code"] == PARSE_ERROR


def test_internal_error():
    """A crash inside a handler is returned as an internal error."""
    tools = MagicMock()
    tools.definitions.side_effect = RuntimeError("boom")
    server = McpServer(tools, io.StringIO(), io.StringIO())

    response = json.loads(server.handle_line(_line(id=6, method="tools/list")))

    assert response["error"]["code"] == -32603
    assert response["error"]["message"] == "boom"


def test_serve_forever(dispatcher):
    """The server answers each request line until input ends."""
    reader = io.StringIO("\n".join([
        _line(id=1, method="initialize"),
        _line(method="notifications/initialized"),
        _line(id=2, method="ping"),
        "",
    ]))
    writer = io.StringIO()

    McpServer(NotificationTools(dispatcher), reader, writer).serve_forever()

    lines = writer.getvalue().splitlines()
    assert [json.loads(line)["id"] for line in lines] == [1, 2]


def test_shutdown_stops_after_current_request(dispatcher):
    """shutdown() ends the loop after the request in progress."""
    reader = io.StringIO("\n".join([_line(id=1, method="ping"), _line(id=2, method="ping")]))
    writer = io.StringIO()
    server = McpServer(NotificationTools(dispatcher), reader, writer)

    original = server.handle_line

    def handle_and_stop(line):
        server.shutdown()
        return original(line)

    server.handle_line = handle_and_stop
    server.serve_forever()

    assert len(writer.getvalue().splitlines()) == 1


def test_build_server(settings):
    """build_server wires the platform dispatcher to the given streams."""
    reader, writer = io.StringIO(), io.StringIO()

    with patch("ccnotify.server.main.create_dispatcher") as mock_create:
        server = build_server(settings, reader, writer)

    mock_create.assert_called_once_with(settings)
    assert isinstance(server, McpServer)
