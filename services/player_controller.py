from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from models.playback import NOTHING_SELECTED, NowPlaying, PlaybackState
from models.track import Track
from services.audio_backend import AudioBackend
from services.errors import PlaybackError

logger = logging.getLogger(__name__)


class PlayerController:
    """Owns the selection, the playback state and the single live playback handle.

    The audio output is opened once at construction and shared by every
    session. All operations run to completion on the caller's thread; callers
    on more than one thread must serialize access.
    """

    def __init__(self, backend: AudioBackend, catalog: Sequence[Track]):
        """Open the audio output and start with nothing selected.

        Args:
            backend: Audio capability used to decode and play tracks.
            catalog: Ordered tracks for the session.

        Raises:
            DeviceError: If the output device cannot be opened.
        """
        self._backend = backend
        self._catalog: tuple[Track, ...] = tuple(catalog)
        self._selection: Optional[int] = None
        self._state: PlaybackState = PlaybackState.STOPPED
        self._handle: Any = None
        self._output: Any = backend.open_output()
        self._closed = False
        logger.info(f"Player controller ready with {len(self._catalog)} tracks")

    @property
    def catalog(self) -> tuple[Track, ...]:
        return self._catalog

    @property
    def selection(self) -> Optional[int]:
        return self._selection

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def has_handle(self) -> bool:
        return self._handle is not None

    @property
    def selected_track(self) -> Optional[Track]:
        """Return the selected track, or None when nothing valid is selected."""
        if self._selection is None or not 0 <= self._selection < len(self._catalog):
            return None
        return self._catalog[self._selection]

    def select_first(self) -> None:
        if self._selection is None and self._catalog:
            self._selection = 0

    def select(self, index: int) -> None:
        """Select the track at index; out-of-range indices are ignored."""
        if 0 <= index < len(self._catalog):
            self._selection = index

    def next(self) -> None:
        """Move the selection forward, wrapping to the first track.

        With nothing selected this selects the first track.
        """
        if not self._catalog:
            return
        if self._selection is None:
            self._selection = 0
        else:
            self._selection = (self._selection + 1) % len(self._catalog)
        logger.debug(f"Selection moved to {self._selection}")

    def previous(self) -> None:
        """Move the selection backward, wrapping to the last track."""
        if not self._catalog:
            return
        if self._selection is None:
            self._selection = 0
        else:
            self._selection = (self._selection - 1) % len(self._catalog)
        logger.debug(f"Selection moved to {self._selection}")

    def play(self) -> None:
        """Start the selected track from the beginning.

        Any live handle is stopped first, whatever the current state. Does
        nothing when there is no valid selection.

        Raises:
            DecodeError: If the track cannot be decoded.
            DeviceError: If the output session cannot be created or started.
        """
        track = self.selected_track
        if track is None:
            return

        self._release_handle()

        try:
            source = self._backend.decode(track.file_path)
            handle = self._backend.create_session(self._output, source)
        except PlaybackError as e:
            logger.error(f"Failed to open {track.file_path}: {e}")
            raise

        self._handle = handle
        try:
            self._backend.play(handle)
        except PlaybackError as e:
            logger.error(f"Failed to start {track.file_path}: {e}")
            self._release_handle()
            raise

        self._state = PlaybackState.PLAYING
        logger.info(f"Playing {track.display_name}")

    def toggle_pause(self) -> None:
        """Pause when playing, resume when paused; no-op without a handle."""
        if self._handle is None:
            return
        try:
            if self._state == PlaybackState.PLAYING:
                self._backend.pause(self._handle)
                self._state = PlaybackState.PAUSED
            elif self._state == PlaybackState.PAUSED:
                self._backend.resume(self._handle)
                self._state = PlaybackState.PLAYING
        except PlaybackError as e:
            logger.warning(f"Pause toggle failed, state left {self._state.value}: {e}")
            return
        logger.debug(f"Playback {self._state.value}")

    def stop(self) -> None:
        if self._handle is None:
            return
        self._release_handle()
        logger.info("Playback stopped")

    def poll(self) -> bool:
        """Detect a track that finished on its own.

        Returns:
            True if the state changed to stopped during this call.
        """
        if self._handle is None or self._state != PlaybackState.PLAYING:
            return False
        if self._backend.is_active(self._handle):
            return False
        logger.debug("Track finished")
        self._release_handle()
        return True

    def now_playing_snapshot(self) -> NowPlaying:
        track = self.selected_track
        if track is None:
            return NOTHING_SELECTED
        return NowPlaying(display_name=track.display_name, state=self._state)

    def shutdown(self) -> None:
        """Stop the live handle and close the shared output. Safe to call twice."""
        if self._closed:
            return
        self._release_handle()
        self._closed = True
        try:
            self._backend.close_output(self._output)
        except PlaybackError as e:
            logger.warning(f"Error closing audio output: {e}")

    def _release_handle(self) -> None:
        """Drop ownership of the live handle, then stop it.

        Stop failures are logged and never propagated.
        """
        handle, self._handle = self._handle, None
        self._state = PlaybackState.STOPPED
        if handle is None:
            return
        try:
            self._backend.stop(handle)
        except PlaybackError as e:
            logger.warning(f"Error stopping previous playback: {e}")
