from textual.widgets import Static
from textual.reactive import reactive
from textual.containers import Vertical
from textual.app import ComposeResult
from rich.text import Text

from models.playback import PlaybackState
from styles import COLOR_PRIMARY, COLOR_HIGHLIGHT, COLOR_MUTED, COLOR_DIM

TERMPLAY_ASCII = """
 ▀█▀ █▀▀ █▀█ █▀▄▀█ █▀█ █   ▄▀█ █▄█
  █  ██▄ █▀▄ █ ▀ █ █▀▀ █▄▄ █▀█  █ 
"""

STATE_ICONS = {
    PlaybackState.PLAYING: "▶",
    PlaybackState.PAUSED: "⏸",
    PlaybackState.STOPPED: "■",
}


class Header(Vertical):
    track_count: reactive[int] = reactive(0)
    playback_state: reactive[PlaybackState] = reactive(PlaybackState.STOPPED)

    def compose(self) -> ComposeResult:
        yield Static(TERMPLAY_ASCII, id="header-logo")
        yield Static(self._render_summary(), id="header-summary")

    def _render_summary(self) -> Text:
        result = Text()
        result.append(f"{STATE_ICONS[self.playback_state]} ", style=f"{COLOR_PRIMARY} bold")
        result.append(self.playback_state.value.capitalize(), style=COLOR_HIGHLIGHT)
        result.append("    │    Tracks ", style=COLOR_MUTED)
        if self.track_count:
            result.append(str(self.track_count), style=f"{COLOR_PRIMARY} bold")
        else:
            result.append("none", style=COLOR_DIM)
        return result

    def _refresh_summary(self) -> None:
        # Watchers can fire before compose has mounted the summary.
        summaries = self.query("#header-summary")
        if summaries:
            summaries.first(Static).update(self._render_summary())

    def watch_track_count(self, new_value: int) -> None:
        self._refresh_summary()

    def watch_playback_state(self, new_value: PlaybackState) -> None:
        self._refresh_summary()
