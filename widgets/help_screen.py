from __future__ import annotations

from textual.screen import ModalScreen
from textual.widgets import Static, Button
from textual.containers import Container, VerticalScroll
from textual.app import ComposeResult

HELP_TEXT = """[bold #ff8c00]🎵 TERMPLAY - Terminal Audio Player[/bold #ff8c00]

[bold]NAVIGATION[/bold]
  j/k, ↑/↓    Move selection down/up
  Enter       Play selected track

[bold]PLAYBACK CONTROLS[/bold]
  →/n         Next track and play
  ←/p         Previous track and play
  Space       Pause/Resume current track
  s           Stop playback

[bold]OTHER[/bold]
  h/?         Show this help
  q           Quit application

[bold]PLAYLIST[/bold]
  • Tracks come from the paths given on the command line,
    or from ~/Music (TERMPLAY_MUSIC_DIR) when none are given
  • Supported formats: MP3, WAV, OGG, FLAC
  • ▶ marks the selected track
  • Tracks that fail to decode are reported; playback stops"""


class HelpScreen(ModalScreen[None]):
    """Modal screen displaying key bindings."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    #help-container {
        width: 70;
        height: 80%;
        background: #1a1a1a;
        border: thick #cc5500;
        padding: 1 2;
    }

    #help-scroll {
        width: 100%;
        height: 1fr;
        margin-bottom: 1;
    }

    #help-content {
        width: 100%;
        height: auto;
    }

    #help-close-button {
        width: 100%;
        height: auto;
        background: #2d2d2d;
        color: #ff8c00;
        border: solid #ff8c00;
        text-style: bold;
    }

    #help-close-button:focus {
        border: solid #ffb347;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the help screen."""
        with Container(id="help-container"):
            with VerticalScroll(id="help-scroll"):
                yield Static(HELP_TEXT, id="help-content")

            yield Button("Close (Esc)", id="help-close-button", variant="primary")

    def on_mount(self) -> None:
        """Focus the button when screen mounts."""
        self.call_after_refresh(self._focus_button)

    def _focus_button(self) -> None:
        buttons = self.query("#help-close-button")
        if buttons:
            buttons.first(Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle close button press."""
        if event.button.id == "help-close-button":
            self.dismiss()

    async def on_key(self, event) -> None:
        """Handle key events."""
        if event.key == "escape":
            self.dismiss()
            event.prevent_default()
            event.stop()
        elif event.key == "j":
            scroll = self.query_one("#help-scroll", VerticalScroll)
            scroll.scroll_down()
            event.prevent_default()
            event.stop()
        elif event.key == "k":
            scroll = self.query_one("#help-scroll", VerticalScroll)
            scroll.scroll_up()
            event.prevent_default()
            event.stop()
