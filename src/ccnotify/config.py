"""Runtime settings shared by the hooks, the MCP server and the installer."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ccnotify.notify.sounds import Sound

DEBUG_ENV_VAR = "CAT_CCNOTIFY_DEBUG"
SOUND_ENV_VAR = "CAT_CCNOTIFY_SOUND"
SOUNDS_ENABLED_ENV_VAR = "CAT_CCNOTIFY_SOUNDS"
DEFAULT_SOUND_ENV_VAR = "CAT_CCNOTIFY_DEFAULT_SOUND"
HOOKS_CONFIG_ENV_VAR = "CAT_CCNOTIFY_HOOKS_CONFIG"

DATA_DIR_NAME = "cat-ccnotify"
HOOKS_CONFIG_NAME = "hooks.json"
BUNDLED_SOUND = Path(__file__).parent / "sounds" / "chime.wav"


def get_claude_dir() -> Path:
    """Get the Claude Code configuration directory (~/.claude)."""
    return Path.home() / ".claude"


def get_hooks_config_path(claude_dir: Optional[Path] = None) -> Path:
    """Get the path to Claude Code hooks.json."""
    return (claude_dir or get_claude_dir()) / HOOKS_CONFIG_NAME


def default_sound_file() -> Optional[Path]:
    """Return the bundled audio clip, or None when it is not installed."""
    if BUNDLED_SOUND.is_file():
        return BUNDLED_SOUND
    return None


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Paths and toggles passed explicitly to every component."""

    claude_dir: Path = field(default_factory=get_claude_dir)
    hooks_config_path: Optional[Path] = None
    sound_file: Optional[Path] = field(default_factory=default_sound_file)
    debug: bool = False
    enable_sounds: bool = True
    default_sound: Sound = Sound.DEFAULT
    app_name: str = "Claude Code"

    def __post_init__(self):
        if self.hooks_config_path is None:
            self.hooks_config_path = get_hooks_config_path(self.claude_dir)

    @property
    def data_dir(self) -> Path:
        """Directory holding log files (~/.claude/cat-ccnotify)."""
        return self.claude_dir / DATA_DIR_NAME

    def log_file(self, name: str) -> Path:
        """Path of the append-only log file for a hook."""
        return self.data_dir / f"{name}.log"

    @classmethod
    def from_env(cls, debug: bool = False) -> "Settings":
        """
        Build settings from the environment.

        Args:
            debug: Force debug logging on (the --debug flag)

        Returns:
            Settings with environment overrides applied
        """
        settings = cls(
            debug=debug or os.environ.get(DEBUG_ENV_VAR) == "true",
            enable_sounds=_env_flag(SOUNDS_ENABLED_ENV_VAR, True),
        )

        hooks_config = os.environ.get(HOOKS_CONFIG_ENV_VAR)
        if hooks_config:
            settings.hooks_config_path = Path(hooks_config).expanduser()

        sound_file = os.environ.get(SOUND_ENV_VAR)
        if sound_file:
            settings.sound_file = Path(sound_file).expanduser()

        default_sound = os.environ.get(DEFAULT_SOUND_ENV_VAR)
        if default_sound:
            try:
                settings.default_sound = Sound(default_sound)
            except ValueError:
                pass  # Unknown name - keep the built-in default

        return settings
