"""Error types for playback.

Raised by the audio backend and surfaced by PlayerController.play().
"""

from __future__ import annotations

from pathlib import Path


class PlaybackError(Exception):
    """Base exception for playback failures."""

    pass


class DeviceError(PlaybackError):
    """Raised when no output device is available or allocation fails."""

    pass


class DecodeError(PlaybackError):
    """Raised when a track cannot be read or decoded."""

    def __init__(self, message: str, file_path: Path | None = None) -> None:
        """Initialize decode error.

        Args:
            message: Error message.
            file_path: Track that failed to decode, if known.
        """
        super().__init__(message)
        self.file_path = file_path


__all__ = [
    "DecodeError",
    "DeviceError",
    "PlaybackError",
]
