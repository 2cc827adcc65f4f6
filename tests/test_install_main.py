"""Tests for the install/uninstall/test CLI."""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from ccnotify.install import main as install_main
from ccnotify.install.main import (
    InstallError,
    check_claude_cli,
    check_platform,
    get_hook_paths,
    install,
    run_hook_tests,
    uninstall,
)

HOOK_PATHS = {
    "notification": Path("/venv/bin/ccnotify-notification-hook"),
    "stop": Path("/venv/bin/ccnotify-stop-hook"),
}


class TestPreflight:
    """Tests for the pre-flight checks."""

    def test_supported_platforms(self):
        """macOS, Linux and Windows are supported."""
        for platform in ("darwin", "linux", "win32"):
            check_platform(platform)

    def test_unsupported_platform(self):
        """Anything else is refused."""
        with pytest.raises(InstallError, match="Unsupported platform: sunos5"):
            check_platform("sunos5")

    @patch("ccnotify.install.main.shutil.which", return_value=None)
    def test_missing_claude_cli(self, mock_which):
        """A missing claude CLI is refused with a pointer to the docs."""
        with pytest.raises(InstallError, match="Claude Code CLI not found"):
            check_claude_cli()
        mock_which.assert_called_once_with("claude")

    @patch("ccnotify.install.main.find_hook_script", return_value=None)
    def test_missing_hook_script(self, mock_find):
        """Hook scripts must be installed."""
        with pytest.raises(InstallError, match="ccnotify-notification-hook"):
            get_hook_paths()

    @patch("ccnotify.install.main.find_hook_script")
    def test_hook_paths(self, mock_find):
        """Both scripts are resolved by name."""
        mock_find.side_effect = lambda name: Path("/venv/bin") / name
        assert get_hook_paths() == HOOK_PATHS


@patch("ccnotify.install.main.get_hook_paths", return_value=HOOK_PATHS)
@patch("ccnotify.install.main.check_claude_cli")
@patch("ccnotify.install.main.check_platform")
class TestInstall:
    """Tests for install and uninstall."""

    def test_install_writes_hooks(self, mock_platform, mock_cli, mock_paths, settings, capsys):
        """install registers both scripts in hooks.json."""
        assert install(settings) == 0

        config = json.loads(settings.hooks_config_path.read_text())
        assert config == {
            "notification": "/venv/bin/ccnotify-notification-hook",
            "stop": "/venv/bin/ccnotify-stop-hook",
        }
        assert "installed successfully" in capsys.readouterr().out

    def test_install_preserves_other_hooks(self, mock_platform, mock_cli, mock_paths, settings):
        """Other entries in hooks.json survive install and uninstall."""
        settings.hooks_config_path.parent.mkdir(parents=True)
        settings.hooks_config_path.write_text('{"preToolUse": "/usr/bin/other"}')

        install(settings)
        assert json.loads(settings.hooks_config_path.read_text())["preToolUse"] == "/usr/bin/other"

        assert uninstall(settings) == 0
        assert json.loads(settings.hooks_config_path.read_text()) == {"preToolUse": "/usr/bin/other"}

    def test_install_is_idempotent(self, mock_platform, mock_cli, mock_paths, settings, capsys):
        """Installing twice updates the existing entries."""
        install(settings)
        first = settings.hooks_config_path.read_text()

        install(settings)

        assert settings.hooks_config_path.read_text() == first
        assert "already installed" in capsys.readouterr().out

    def test_install_preflight_failure(self, mock_platform, mock_cli, mock_paths, settings, capsys):
        """Pre-flight failures exit 1 without writing anything."""
        mock_cli.side_effect = InstallError("Claude Code CLI not found")

        assert install(settings) == 1
        assert not settings.hooks_config_path.exists()
        assert "Installation failed: Claude Code CLI not found" in capsys.readouterr().err

    def test_uninstall_without_config(self, mock_platform, mock_cli, mock_paths, settings, capsys):
        """Uninstalling with no hooks.json is a no-op."""
        assert uninstall(settings) == 0
        assert "Nothing to uninstall" in capsys.readouterr().out
        assert not settings.hooks_config_path.exists()


@patch("ccnotify.install.main.get_hook_paths", return_value=HOOK_PATHS)
class TestRunHookTests:
    """Tests for the test subcommand."""

    @patch("ccnotify.install.main.subprocess.run")
    def test_runs_both_hooks(self, mock_run, mock_paths, settings):
        """Both hooks are fed a sample payload with a pause in between."""
        mock_run.return_value = MagicMock(returncode=0)
        sleeps = []

        assert run_hook_tests(settings, sleep=sleeps.append) == 0

        assert sleeps == [2]
        first, second = mock_run.call_args_list
        assert first[0][0] == [str(HOOK_PATHS["notification"])]
        assert json.loads(first[1]["input"])["title"] == "Test Notification"
        assert second[0][0] == [str(HOOK_PATHS["stop"])]
        assert json.loads(second[1]["input"]) == {"title": "Test Session", "message": "Test stop notification"}

    @patch("ccnotify.install.main.subprocess.run")
    def test_debug_is_forwarded(self, mock_run, mock_paths, settings):
        """With debug on, the hooks are run with --debug."""
        mock_run.return_value = MagicMock(returncode=0)
        settings.debug = True

        run_hook_tests(settings, sleep=lambda s: None)

        assert mock_run.call_args_list[0][0][0][-1] == "--debug"

    @patch("ccnotify.install.main.subprocess.run")
    def test_failing_hook_exit_code(self, mock_run, mock_paths, settings, capsys):
        """The first failing hook's exit code is returned."""
        mock_run.side_effect = [MagicMock(returncode=0), MagicMock(returncode=3)]

        assert run_hook_tests(settings, sleep=lambda s: None) == 3
        assert "Stop hook test failed: exit code 3" in capsys.readouterr().err

    @patch("ccnotify.install.main.subprocess.run", side_effect=OSError("exec format error"))
    def test_unrunnable_hook(self, mock_run, mock_paths, settings):
        """A hook that cannot be executed counts as a failure."""
        assert run_hook_tests(settings, sleep=lambda s: None) == 1


class TestMain:
    """Tests for argument dispatch."""

    def test_no_command_prints_help(self, capsys):
        """Without a subcommand, help is shown and the exit code is 1."""
        with patch.object(sys, "argv", ["ccnotify"]):
            assert install_main.main() == 1
        assert "install" in capsys.readouterr().out

    @pytest.mark.parametrize("command,target", [
        ("install", "install"),
        ("uninstall", "uninstall"),
        ("test", "run_hook_tests"),
    ])
    def test_dispatch(self, command, target):
        """Each subcommand runs its handler with settings from the environment."""
        with patch.object(sys, "argv", ["ccnotify", "--debug", command]), \
             patch.object(install_main, target, return_value=0) as mock_handler:
            assert install_main.main() == 0

        settings = mock_handler.call_args[0][0]
        assert settings.debug is True
