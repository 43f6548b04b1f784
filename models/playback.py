from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PlaybackState(Enum):
    """Playback state of the controller."""
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


@dataclass(frozen=True)
class NowPlaying:
    """Snapshot of the selected track and playback state.

    ``display_name`` is None when nothing is selected.
    """
    display_name: str | None
    state: PlaybackState

    @property
    def has_selection(self) -> bool:
        return self.display_name is not None

    def status_line(self) -> str:
        if self.display_name is None:
            return "No song selected"
        return f"Now Playing: {self.display_name} [{self.state.value.capitalize()}]"


NOTHING_SELECTED = NowPlaying(display_name=None, state=PlaybackState.STOPPED)
