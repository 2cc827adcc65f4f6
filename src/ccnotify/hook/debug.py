"""Hook that records everything about its invocation, for troubleshooting."""

import json
import logging
import os
import sys
import time
from typing import Dict, List

from ccnotify.config import Settings

logger = logging.getLogger("ccnotify.debug")

DEBUG_LOG_NAME = "debug-detailed"


def claude_environment(environ=None) -> Dict[str, str]:
    """Environment variables whose name mentions claude."""
    environ = os.environ if environ is None else environ
    return {k: v for k, v in environ.items() if "claude" in k.lower()}


def describe_invocation(stdin_data: str, argv: List[str], environ=None) -> List[str]:
    """
    Describe a hook invocation as log lines.

    Args:
        stdin_data: Raw stdin
        argv: Command line
        environ: Environment mapping (default: os.environ)

    Returns:
        Lines to append to the debug log
    """
    lines = [
        "=== HOOK INVOCATION START ===",
        f"Process ID: {os.getpid()}",
        f"Working Directory: {os.getcwd()}",
        f"Command Line Args: {json.dumps(argv)}",
        f"Args Count: {len(argv)}",
        f"Claude Environment Variables: {json.dumps(claude_environment(environ))}",
        f"STDIN Raw Length: {len(stdin_data)}",
        f'STDIN Raw Content: "{stdin_data}"',
        f"STDIN Hex Dump: {stdin_data.encode('utf-8').hex()}",
    ]

    if stdin_data.strip():
        try:
            parsed = json.loads(stdin_data)
            lines.append(f"STDIN Parsed JSON: {json.dumps(parsed, indent=2, ensure_ascii=False)}")
        except json.JSONDecodeError as e:
            lines.append(f"STDIN JSON Parse Error: {e}")
    else:
        lines.append("STDIN is empty")

    lines.append(f"Invocation Timestamp: {int(time.time() * 1000)}")
    lines.append("=== HOOK INVOCATION END ===")
    lines.append("")
    return lines


def main() -> None:
    """Entry point for ccnotify-debug-hook command."""
    settings = Settings.from_env(debug=True)

    try:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(settings.log_file(DEBUG_LOG_NAME), mode="a", encoding="utf-8")
    except OSError as e:
        print(f"Logging failed: {e}", file=sys.stderr)
        sys.exit(0)

    handler.setFormatter(logging.Formatter("[%(asctime)s] %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    try:
        stdin_data = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"STDIN Read Error: {e}")
        stdin_data = ""

    for line in describe_invocation(stdin_data, sys.argv):
        logger.debug(line)
    sys.exit(0)


if __name__ == "__main__":
    main()
