from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Static
from rich.text import Text

from models.playback import PlaybackState
from services.player_controller import PlayerController
from styles import COLOR_PRIMARY, COLOR_HIGHLIGHT, COLOR_MUTED

STATE_COLORS = {
    PlaybackState.PLAYING: COLOR_PRIMARY,
    PlaybackState.PAUSED: COLOR_HIGHLIGHT,
    PlaybackState.STOPPED: COLOR_MUTED,
}


class NowPlayingView(Container):
    """Status line showing the selected track and playback state."""

    DEFAULT_CSS = """
    NowPlayingView {
        height: 3;
        border: solid #cc5500;
        padding: 0 1;
    }
    """

    def __init__(self, controller: PlayerController, **kwargs):
        super().__init__(**kwargs)
        self.controller = controller
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Static("No song selected", id="np-status")

    def on_mount(self) -> None:
        self._status_widget = self.query_one("#np-status", Static)
        self.update_status()

    def render_status(self) -> Text:
        """Render the status line from the controller snapshot."""
        snapshot = self.controller.now_playing_snapshot()
        result = Text()
        if not snapshot.has_selection:
            result.append("No song selected", style=COLOR_MUTED)
            return result

        result.append("Now Playing: ", style=COLOR_MUTED)
        result.append(snapshot.display_name, style="bold")
        result.append(f" [{snapshot.state.value.capitalize()}]", style=STATE_COLORS[snapshot.state])
        return result

    def update_status(self) -> None:
        if self._status_widget is not None:
            self._status_widget.update(self.render_status())
