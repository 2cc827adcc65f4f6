"""Desktop notifications for Claude Code hooks and MCP tools."""

__version__ = "0.3.0"
