"""MCP server main entry point."""

import argparse
import logging
import signal
import sys

from ccnotify.config import Settings
from ccnotify.logs import configure_debug_logging
from ccnotify.notify import create_dispatcher

from .server import McpServer
from .tools import NotificationTools

logger = logging.getLogger(__name__)


def build_server(settings: Settings, reader=None, writer=None) -> McpServer:
    """Wire the tools to a dispatcher for this platform."""
    tools = NotificationTools(create_dispatcher(settings), default_sound=settings.default_sound)
    return McpServer(tools, reader or sys.stdin, writer or sys.stdout)


def main() -> None:
    """Entry point for ccnotify-mcp command."""
    parser = argparse.ArgumentParser(description="ccnotify MCP server (stdio)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Also append debug output to the mcp-server log",
    )

    args = parser.parse_args()

    # stdout carries the protocol
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    settings = Settings.from_env(debug=args.debug)
    configure_debug_logging(settings, "mcp-server")

    server = build_server(settings)

    def handle_shutdown(signum, frame):
        logger.info("Shutting down...")
        server.shutdown()
        sys.exit(0)

    signal.signal(signal.SIGTERM, handle_shutdown)
    signal.signal(signal.SIGINT, handle_shutdown)

    server.serve_forever()


if __name__ == "__main__":
    main()
