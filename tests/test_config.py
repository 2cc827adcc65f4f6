"""Tests for runtime settings."""

from pathlib import Path
from unittest import mock

from ccnotify.config import BUNDLED_SOUND, Settings, default_sound_file, get_hooks_config_path
from ccnotify.notify import Sound


def test_defaults(tmp_path):
    """Paths derive from the Claude directory."""
    settings = Settings(claude_dir=tmp_path)

    assert settings.hooks_config_path == tmp_path / "hooks.json"
    assert settings.data_dir == tmp_path / "cat-ccnotify"
    assert settings.log_file("stop-hook") == tmp_path / "cat-ccnotify" / "stop-hook.log"
    assert settings.debug is False
    assert settings.enable_sounds is True
    assert settings.default_sound == Sound.DEFAULT


def test_default_sound_file_when_not_bundled():
    """Without the bundled clip there is no default sound file."""
    with mock.patch.object(Path, "is_file", return_value=False):
        assert default_sound_file() is None
    with mock.patch.object(Path, "is_file", return_value=True):
        assert default_sound_file() == BUNDLED_SOUND


def test_from_env_reads_home():
    """The Claude directory is ~/.claude."""
    with mock.patch.dict("os.environ", {"HOME": "/home/testuser"}, clear=True):
        settings = Settings.from_env()
    assert settings.claude_dir == Path("/home/testuser/.claude")
    assert settings.hooks_config_path == Path("/home/testuser/.claude/hooks.json")


def test_debug_env_var():
    """CAT_CCNOTIFY_DEBUG=true turns on debug logging; other values do not."""
    with mock.patch.dict("os.environ", {"CAT_CCNOTIFY_DEBUG": "true"}):
        assert Settings.from_env().debug is True
    with mock.patch.dict("os.environ", {"CAT_CCNOTIFY_DEBUG": "1"}):
        assert Settings.from_env().debug is False
    with mock.patch.dict("os.environ", {"CAT_CCNOTIFY_DEBUG": "false"}):
        assert Settings.from_env(debug=True).debug is True


def test_env_overrides(tmp_path):
    """Environment variables override sound, hooks file and sound toggle."""
    env = {
        "CAT_CCNOTIFY_SOUND": str(tmp_path / "bell.wav"),
        "CAT_CCNOTIFY_SOUNDS": "off",
        "CAT_CCNOTIFY_DEFAULT_SOUND": "reminder",
        "CAT_CCNOTIFY_HOOKS_CONFIG": str(tmp_path / "custom.json"),
    }
    with mock.patch.dict("os.environ", env):
        settings = Settings.from_env()

    assert settings.sound_file == tmp_path / "bell.wav"
    assert settings.enable_sounds is False
    assert settings.default_sound == Sound.REMINDER
    assert settings.hooks_config_path == tmp_path / "custom.json"


def test_unknown_default_sound_is_ignored():
    """An unknown default sound name keeps the built-in default."""
    with mock.patch.dict("os.environ", {"CAT_CCNOTIFY_DEFAULT_SOUND": "meow"}):
        assert Settings.from_env().default_sound == Sound.DEFAULT


def test_get_hooks_config_path():
    """Returns ~/.claude/hooks.json, or hooks.json under a given directory."""
    with mock.patch.dict("os.environ", {"HOME": "/home/testuser"}):
        assert get_hooks_config_path() == Path("/home/testuser/.claude/hooks.json")
    assert get_hooks_config_path(Path("/tmp/claude")) == Path("/tmp/claude/hooks.json")


def test_bundled_sound_is_shipped():
    """The default clip is part of the package."""
    assert BUNDLED_SOUND.is_file()
    assert BUNDLED_SOUND.read_bytes()[:4] == b"RIFF"
    assert Settings(claude_dir=Path("/tmp")).sound_file == BUNDLED_SOUND
