from __future__ import annotations

import logging
from textual.app import ComposeResult
from textual.containers import Container
from textual.message import Message
from textual.widgets import ListView, ListItem, Label

from models.playback import PlaybackState
from models.track import format_time
from services.player_controller import PlayerController

logger = logging.getLogger(__name__)


class PlaylistView(Container):
    """Playlist of catalog tracks with the selected row marked."""

    DEFAULT_CSS = """
    PlaylistView {
        background: #1a1a1a;
        border: solid #ff8c00;
        padding: 0 1;
    }

    PlaylistView > Label {
        color: #ff8c00;
        text-style: bold;
        padding: 0 0 1 0;
    }
    """

    BINDINGS = [
        ("j", "move_down", "Move down"),
        ("k", "move_up", "Move up"),
    ]

    class PlayRequested(Message):
        """Sent when a row is chosen with Enter or a click."""

        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, controller: PlayerController, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.controller = controller

    def compose(self) -> ComposeResult:
        """Compose the playlist with one row per track."""
        yield Label("🎵 Playlist")
        yield ListView(
            *[ListItem(Label(self._row_text(i))) for i in range(len(self.controller.catalog))],
            id="track-list",
        )

    def on_mount(self) -> None:
        self.refresh_rows()

    def _row_text(self, index: int) -> str:
        track = self.controller.catalog[index]
        selected = index == self.controller.selection
        marker = "▶ " if selected else "  "
        duration = f" [{format_time(track.duration_seconds)}]" if track.duration_seconds else ""
        return f"{marker}{track.display_name}{duration}"

    def refresh_rows(self) -> None:
        """Redraw row markers and move the cursor to the selection."""
        list_view = self.query_one("#track-list", ListView)
        for i, item in enumerate(list_view.children):
            if not isinstance(item, ListItem):
                continue
            label = item.query_one(Label)
            label.update(self._row_text(i))
            if i == self.controller.selection:
                label.set_class(self.controller.state != PlaybackState.STOPPED, "active-track")
            else:
                label.remove_class("active-track")

        selection = self.controller.selection
        if selection is not None and list_view.index != selection:
            list_view.index = selection

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        """Follow the cursor with the controller selection."""
        index = event.list_view.index
        if index is None or index == self.controller.selection:
            return
        self.controller.select(index)
        logger.debug(f"Selected track {index}")
        self.refresh_rows()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        index = event.list_view.index
        if index is None:
            return
        event.stop()
        self.post_message(self.PlayRequested(index))

    def action_move_down(self) -> None:
        """Move selection down in the list (j key)."""
        list_view = self.query_one("#track-list", ListView)
        list_view.action_cursor_down()

    def action_move_up(self) -> None:
        """Move selection up in the list (k key)."""
        list_view = self.query_one("#track-list", ListView)
        list_view.action_cursor_up()
