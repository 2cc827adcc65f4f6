"""Installation CLI for ccnotify."""

import argparse
import json
import logging
import shutil
import subprocess
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ccnotify.config import Settings
from ccnotify.install.hooks import (
    NOTIFICATION_KEY,
    STOP_KEY,
    read_config,
    write_config,
    add_hooks,
    remove_hooks,
    is_hook_installed,
)

logger = logging.getLogger(__name__)

SUPPORTED_PLATFORMS = ("darwin", "linux", "win32")

HOOK_SCRIPTS = {
    NOTIFICATION_KEY: "ccnotify-notification-hook",
    STOP_KEY: "ccnotify-stop-hook",
}

TEST_PAYLOADS = {
    NOTIFICATION_KEY: {
        "title": "Test Notification",
        "message": "This is a test notification with cat sound! \U0001f431",
    },
    STOP_KEY: {
        "title": "Test Session",
        "message": "Test stop notification",
    },
}

TEST_PAUSE_SECONDS = 2


class InstallError(Exception):
    """Pre-flight or installation failure."""


def check_platform(platform: str = sys.platform) -> None:
    """Fail unless there is a notification backend for this platform."""
    if not platform.startswith(SUPPORTED_PLATFORMS):
        raise InstallError(f"Unsupported platform: {platform}")


def check_claude_cli() -> None:
    """Fail unless the Claude Code CLI is on PATH."""
    if shutil.which("claude") is None:
        raise InstallError(
            "Claude Code CLI not found. Please install Claude Code first.\n"
            "Visit: https://docs.anthropic.com/claude/claude-code"
        )


def find_hook_script(name: str) -> Optional[Path]:
    """Locate an installed console script, preferring the running interpreter's bin dir."""
    bin_dir = Path(sys.executable).parent
    found = shutil.which(name, path=str(bin_dir)) or shutil.which(name)
    if found is None:
        return None
    return Path(found).absolute()


def get_hook_paths() -> Dict[str, Path]:
    """Absolute paths of both hook scripts.

    Raises:
        InstallError: If a hook script is not installed
    """
    paths = {}
    for key, name in HOOK_SCRIPTS.items():
        path = find_hook_script(name)
        if path is None:
            raise InstallError(f"Hook script not found: {name} (is ccnotify installed?)")
        logger.debug(f"Resolved {name} -> {path}")
        paths[key] = path
    return paths


def install(settings: Settings) -> int:
    """Register the hooks in hooks.json.

    Returns:
        Exit code (0 for success)
    """
    print("\U0001f431 ccnotify installer")
    print("=" * 32)

    try:
        check_platform()
        check_claude_cli()
        hook_paths = get_hook_paths()

        config_path = settings.hooks_config_path
        config = read_config(config_path)
        if is_hook_installed(config):
            print("   Hooks already installed, updating...")

        config = add_hooks(
            config,
            str(hook_paths[NOTIFICATION_KEY]),
            str(hook_paths[STOP_KEY]),
        )
        write_config(config_path, config)
    except (InstallError, OSError) as e:
        print(f"❌ Installation failed: {e}", file=sys.stderr)
        return 1

    print("✅ Notification hooks installed successfully!")
    print(f"   Configuration saved to: {config_path}")
    print(f"   notification -> {hook_paths[NOTIFICATION_KEY]}")
    print(f"   stop         -> {hook_paths[STOP_KEY]}")
    print("\nTo test your installation:")
    print("  ccnotify test")
    return 0


def uninstall(settings: Settings) -> int:
    """Remove the hooks from hooks.json.

    Returns:
        Exit code (0 for success)
    """
    print("\U0001f431 ccnotify uninstaller")
    print("=" * 32)

    config_path = settings.hooks_config_path
    if not config_path.exists():
        print("   No hooks configuration found. Nothing to uninstall.")
        return 0

    try:
        config = remove_hooks(read_config(config_path))
        write_config(config_path, config)
    except OSError as e:
        print(f"❌ Uninstallation failed: {e}", file=sys.stderr)
        return 1

    print("✅ Notification hooks uninstalled successfully!")
    print(f"   Configuration updated: {config_path}")
    return 0


def run_hook_script(path: Path, payload: dict, extra_args: List[str]) -> int:
    """Feed a sample payload to a hook script and return its exit code."""
    proc = subprocess.run(
        [str(path), *extra_args],
        input=json.dumps(payload),
        text=True,
    )
    return proc.returncode


def run_hook_tests(
    settings: Settings,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Fire sample events through both hooks.

    Returns:
        Exit code (the first failing hook's exit code, else 0)
    """
    print("\U0001f431 ccnotify tester")
    print("=" * 32)
    print("You should see/hear notifications in a few seconds.\n")

    try:
        hook_paths = get_hook_paths()
    except InstallError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    extra_args = ["--debug"] if settings.debug else []
    exit_code = 0

    for i, key in enumerate([NOTIFICATION_KEY, STOP_KEY]):
        if i:
            sleep(TEST_PAUSE_SECONDS)

        print(f"Testing {key} hook...")
        try:
            code = run_hook_script(hook_paths[key], TEST_PAYLOADS[key], extra_args)
        except OSError as e:
            print(f"❌ {key.capitalize()} hook test failed: {e}", file=sys.stderr)
            code = 1

        if code == 0:
            print(f"✅ {key.capitalize()} hook test completed!")
        else:
            print(f"❌ {key.capitalize()} hook test failed: exit code {code}", file=sys.stderr)
            exit_code = exit_code or code

    if exit_code == 0:
        print("\n✅ All tests completed! If you saw notifications and heard sounds, everything is working!")
    return exit_code


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Install, uninstall or test the ccnotify Claude Code hooks"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging for the hooks",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    subparsers.add_parser("install", help="Register hooks in ~/.claude/hooks.json")
    subparsers.add_parser("uninstall", help="Remove hooks from ~/.claude/hooks.json")
    subparsers.add_parser("test", help="Send test notifications through the installed hooks")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    settings = Settings.from_env(debug=args.debug)

    if args.command == "install":
        return install(settings)
    elif args.command == "uninstall":
        return uninstall(settings)
    elif args.command == "test":
        return run_hook_tests(settings)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
