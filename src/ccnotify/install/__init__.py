"""Register the ccnotify hooks with Claude Code."""
