"""Claude Code hook entry points and notification classification."""
