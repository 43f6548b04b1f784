from textual.app import App, ComposeResult
from textual.widgets import Footer
from textual.containers import Vertical
from textual.binding import Binding
import argparse
import logging
import sys
from pathlib import Path

from models.settings import PlayerSettings
from widgets import Header, HelpScreen
from views import PlaylistView, NowPlayingView
from services.audio_backend import AudioBackend, PygameAudioBackend
from services.errors import DeviceError, PlaybackError
from services.music_library import MusicLibrary
from services.player_controller import PlayerController

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


class MainViewContainer(Vertical):
    """Container for the status line and playlist."""

    def __init__(self, controller: PlayerController, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.controller = controller

    def compose(self) -> ComposeResult:
        """Compose the main view layout."""
        yield NowPlayingView(self.controller, id="now_playing")
        yield PlaylistView(self.controller, id="playlist")


class TermplayApp(App):
    """A terminal audio player built with Textual."""

    CSS_PATH = "styles/app.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        Binding("space", "play_pause", "Play/Pause"),
        Binding("enter", "play_selected", "Play", show=False),
        Binding("s", "stop", "Stop", priority=True),
        Binding("right", "next_track", "Next", priority=True),
        Binding("n", "next_track", "Next", show=False, priority=True),
        Binding("left", "previous_track", "Prev", priority=True),
        Binding("p", "previous_track", "Prev", show=False, priority=True),
        Binding("h", "show_help", "Help"),
        Binding("?", "show_help", "Help", show=False),
    ]

    def __init__(self, controller: PlayerController, poll_interval: float = 0.5, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.controller = controller
        self.poll_interval = poll_interval

    def compose(self) -> ComposeResult:
        """Compose the main application layout."""
        yield Header()
        yield MainViewContainer(self.controller, id="main-view")
        yield Footer()

    def on_mount(self) -> None:
        """Initialize the application."""
        self.controller.select_first()

        header = self.query_one(Header)
        header.track_count = len(self.controller.catalog)

        self.query_one("#track-list").focus()
        self.refresh_display()
        self.set_interval(self.poll_interval, self._check_track_end)

        if not self.controller.catalog:
            self.notify(
                "No music files found\n\nPass files or folders on the command line.",
                severity="warning",
                timeout=8
            )

    def refresh_display(self) -> None:
        """Redraw every view from the controller state."""
        self.query_one("#playlist", PlaylistView).refresh_rows()
        self.query_one("#now_playing", NowPlayingView).update_status()
        self.query_one(Header).playback_state = self.controller.state

    def _check_track_end(self) -> None:
        """Move to stopped when the current track finished on its own."""
        if self.controller.poll():
            logger.debug("Track ended naturally")
            self.refresh_display()

    def _play_selected(self) -> None:
        """Play the selection, reporting failures without leaving the loop."""
        track = self.controller.selected_track
        try:
            self.controller.play()
        except PlaybackError as e:
            logger.error(f"Error playing track: {e}")
            name = track.display_name if track else "track"
            self.notify(
                f"❌ Cannot play {name}\n\n{e}",
                severity="error",
                timeout=5
            )
        finally:
            self.refresh_display()

    def on_playlist_view_play_requested(self, message: PlaylistView.PlayRequested) -> None:
        self.controller.select(message.index)
        self._play_selected()

    def action_quit(self) -> None:
        """Stop playback before exiting."""
        self.controller.shutdown()
        self.exit()

    def action_play_pause(self) -> None:
        """Toggle play/pause state."""
        self.controller.toggle_pause()
        self.refresh_display()

    def action_play_selected(self) -> None:
        self._play_selected()

    def action_stop(self) -> None:
        """Stop playback."""
        self.controller.stop()
        self.refresh_display()

    def action_next_track(self) -> None:
        """Select the next track and play it."""
        self.controller.next()
        self._play_selected()

    def action_previous_track(self) -> None:
        """Select the previous track and play it."""
        self.controller.previous()
        self._play_selected()

    def action_show_help(self) -> None:
        self.push_screen(HelpScreen())


def setup_logging(settings: PlayerSettings) -> None:
    """Send log output to a file; the terminal belongs to the UI."""
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(settings.log_file)
        ]
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="termplay",
        description="Terminal audio player",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  TERMPLAY_MUSIC_DIR       Folder scanned when no paths are given (default ~/Music)
  TERMPLAY_LOG_DIR         Folder for termplay.log
  TERMPLAY_LOG_LEVEL       Logging level (default INFO)
  TERMPLAY_POLL_INTERVAL   Seconds between end-of-track checks (default 0.5)
""",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Audio files or folders, played in the given order",
        metavar="PATH",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override TERMPLAY_LOG_LEVEL",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_controller(settings: PlayerSettings, backend: AudioBackend | None = None) -> PlayerController:
    """Load the catalog and open the audio output.

    Raises:
        DeviceError: If no output device can be opened.
    """
    library = MusicLibrary(settings.music_dir)
    tracks = library.load(settings.paths)
    return PlayerController(backend or PygameAudioBackend(), tracks)


def main(argv: list[str] | None = None) -> None:
    """Entry point for termplay.

    Handles initialization errors and provides user-friendly error messages.
    """
    args = parse_args(argv)
    settings = PlayerSettings.from_env().with_overrides(paths=args.paths, log_level=args.log_level)
    setup_logging(settings)

    try:
        logger.info("=" * 60)
        logger.info("termplay starting up")
        logger.info("=" * 60)

        controller = build_controller(settings)
        app = TermplayApp(controller, poll_interval=settings.poll_interval)
        try:
            app.run()
        finally:
            controller.shutdown()

        logger.info("termplay shut down cleanly")

    except DeviceError as e:
        logger.critical(f"Fatal error during startup: {e}")
        print("\n❌ termplay cannot start\n")
        print(f"{e}\n")
        print(f"Check {settings.log_file} for more details.\n")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("termplay interrupted by user")
        print("\n\nGoodbye! 👋\n")
        sys.exit(0)
    except Exception as e:
        logger.critical(f"Unexpected fatal error: {type(e).__name__}: {e}", exc_info=True)
        print("\n❌ termplay encountered an unexpected error\n")
        print(f"{type(e).__name__}: {e}\n")
        print(f"Check {settings.log_file} for more details.\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
