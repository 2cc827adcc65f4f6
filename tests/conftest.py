"""Shared fixtures."""

from pathlib import Path
from typing import List, Optional

import pytest

from ccnotify.config import Settings
from ccnotify.notify import Dispatcher, NotificationRequest, Notifier, NotifierError


class RecordingNotifier(Notifier):
    """Notifier that remembers what it was asked to do."""

    name = "recording"

    def __init__(self, fail_show: Optional[str] = None, fail_play: Optional[str] = None):
        super().__init__("Test", "test")
        self.shown: List[NotificationRequest] = []
        self.played: List[Path] = []
        self.opened: List[str] = []
        self.fail_show = fail_show
        self.fail_play = fail_play

    def show(self, request: NotificationRequest) -> None:
        if self.fail_show:
            raise NotifierError(self.fail_show)
        self.shown.append(request)

    def play(self, audio_file: Path) -> None:
        if self.fail_play:
            raise NotifierError(self.fail_play)
        self.played.append(audio_file)

    def open(self, target: str) -> None:
        self.opened.append(target)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def sleeps() -> List[float]:
    return []


@pytest.fixture
def dispatcher(notifier: RecordingNotifier, sleeps: List[float]) -> Dispatcher:
    return Dispatcher(notifier, sleep=sleeps.append)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(claude_dir=tmp_path / ".claude", sound_file=tmp_path / "meow.mp3")
