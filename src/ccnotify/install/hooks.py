"""Claude Code hooks.json management."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

NOTIFICATION_KEY = "notification"
STOP_KEY = "stop"
HOOK_KEYS = [NOTIFICATION_KEY, STOP_KEY]


def read_config(path: Path) -> dict[str, Any]:
    """Read hooks.json, returning empty dict if missing or unreadable."""
    if not path.exists():
        return {}
    try:
        config = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Could not parse existing hooks config: {e}")
        return {}

    if not isinstance(config, dict):
        logger.warning("Existing hooks config is not a JSON object, ignoring it")
        return {}
    return config


def write_config(path: Path, config: dict[str, Any]) -> None:
    """Write hooks.json atomically."""
    path.parent.mkdir(parents=True, exist_ok=True)

    # Write to temp file first, then rename (atomic on POSIX)
    temp_path = path.with_suffix(".json.tmp")
    temp_path.write_text(json.dumps(config, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    temp_path.replace(path)


def add_hooks(config: dict[str, Any], notification_path: str, stop_path: str) -> dict[str, Any]:
    """Register our hook scripts, preserving every other key.

    Args:
        config: Current hooks config
        notification_path: Absolute path of the notification hook script
        stop_path: Absolute path of the stop hook script

    Returns:
        Updated config dict
    """
    config = config.copy()
    config[NOTIFICATION_KEY] = notification_path
    config[STOP_KEY] = stop_path
    return config


def remove_hooks(config: dict[str, Any]) -> dict[str, Any]:
    """Remove our hook entries, preserving every other key.

    Args:
        config: Current hooks config

    Returns:
        Updated config dict
    """
    return {k: v for k, v in config.items() if k not in HOOK_KEYS}


def is_hook_installed(config: dict[str, Any]) -> bool:
    """Check if either of our hooks is registered."""
    return any(key in config for key in HOOK_KEYS)
