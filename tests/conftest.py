"""Shared fixtures: an in-memory audio backend and small catalogs."""

from __future__ import annotations

from pathlib import Path

import pytest

from models.track import Track
from services.errors import DecodeError, DeviceError, PlaybackError
from services.player_controller import PlayerController


class FakeHandle:
    def __init__(self, file_path: Path) -> None:
        self.file_path = file_path
        self.playing = False
        self.paused = False
        self.stopped = False


class FakeBackend:
    """Records backend calls and counts live handles."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []
        self.fail_decode: set[str] = set()
        self.fail_session = False
        self.fail_play = False
        self.fail_pause: PlaybackError | None = None
        self.fail_stop = False
        self.fail_open = False
        self.live: list[FakeHandle] = []
        self.outputs_opened = 0
        self.output_closed = False

    def open_output(self) -> str:
        if self.fail_open:
            raise DeviceError("no device")
        self.outputs_opened += 1
        self.calls.append(("open_output", None))
        return "output"

    def close_output(self, output) -> None:
        self.calls.append(("close_output", output))
        self.output_closed = True

    def decode(self, file_path: Path) -> Path:
        self.calls.append(("decode", file_path))
        if Path(file_path).name in self.fail_decode:
            raise DecodeError(f"Cannot decode {file_path}", file_path)
        return file_path

    def create_session(self, output, source) -> FakeHandle:
        self.calls.append(("create_session", source))
        if self.fail_session:
            raise DeviceError("device busy")
        assert not self.live, "a second handle was created while one is live"
        handle = FakeHandle(source)
        self.live.append(handle)
        return handle

    def play(self, handle: FakeHandle) -> None:
        self.calls.append(("play", handle.file_path))
        if self.fail_play:
            raise DeviceError("cannot start output")
        handle.playing = True

    def pause(self, handle: FakeHandle) -> None:
        self.calls.append(("pause", handle.file_path))
        if self.fail_pause is not None:
            raise self.fail_pause
        handle.paused = True

    def resume(self, handle: FakeHandle) -> None:
        self.calls.append(("resume", handle.file_path))
        if self.fail_pause is not None:
            raise self.fail_pause
        handle.paused = False

    def stop(self, handle: FakeHandle) -> None:
        self.calls.append(("stop", handle.file_path))
        handle.stopped = True
        if handle in self.live:
            self.live.remove(handle)
        if self.fail_stop:
            raise DeviceError("stop failed")

    def is_active(self, handle: FakeHandle) -> bool:
        return handle.playing and not handle.stopped

    def finish(self) -> None:
        """Simulate the live track reaching its end."""
        for handle in self.live:
            handle.playing = False

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]


def make_catalog(*names: str) -> list[Track]:
    return [Track.from_file(Path("/music") / name) for name in names]


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def controller(backend: FakeBackend) -> PlayerController:
    """Controller over a two-track catalog."""
    return PlayerController(backend, make_catalog("a.mp3", "b.mp3"))


@pytest.fixture
def empty_controller(backend: FakeBackend) -> PlayerController:
    return PlayerController(backend, [])
