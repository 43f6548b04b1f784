from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

import pygame

from services.errors import DecodeError, DeviceError

logger = logging.getLogger(__name__)

MIXER_FREQUENCY = 44100
MIXER_SIZE = -16
MIXER_CHANNELS = 2
MIXER_BUFFER = 512


class AudioBackend(Protocol):
    """Capability the controller uses to produce sound.

    ``open_output`` is called once per process; the returned output is shared
    by every session created afterwards.
    """

    def open_output(self) -> Any: ...

    def close_output(self, output: Any) -> None: ...

    def decode(self, file_path: Path) -> Any: ...

    def create_session(self, output: Any, source: Any) -> Any: ...

    def play(self, handle: Any) -> None: ...

    def pause(self, handle: Any) -> None: ...

    def resume(self, handle: Any) -> None: ...

    def stop(self, handle: Any) -> None: ...

    def is_active(self, handle: Any) -> bool: ...


@dataclass
class MixerOutput:
    """Initialized pygame mixer with one reserved playback channel."""
    channel_id: int = 0


@dataclass
class MixerSession:
    """A decoded sound bound to the reserved mixer channel."""
    sound: Any
    channel: Any


class PygameAudioBackend:
    """AudioBackend implemented on pygame.mixer."""

    def open_output(self) -> MixerOutput:
        try:
            pygame.mixer.init(
                frequency=MIXER_FREQUENCY,
                size=MIXER_SIZE,
                channels=MIXER_CHANNELS,
                buffer=MIXER_BUFFER,
            )
            pygame.mixer.set_num_channels(1)
            pygame.mixer.set_reserved(1)
        except pygame.error as e:
            raise DeviceError(f"No audio output device available: {e}") from e
        logger.info(f"Audio output opened: {pygame.mixer.get_init()}")
        return MixerOutput(channel_id=0)

    def close_output(self, output: MixerOutput) -> None:
        pygame.mixer.quit()
        logger.info("Audio output closed")

    def decode(self, file_path: Path) -> Any:
        """Load and decode a whole audio file into memory.

        Raises:
            DecodeError: If the file is missing, unreadable or unsupported.
        """
        try:
            return pygame.mixer.Sound(str(file_path))
        except FileNotFoundError as e:
            raise DecodeError(f"File not found: {file_path}", file_path) from e
        except (pygame.error, OSError) as e:
            raise DecodeError(f"Cannot decode {file_path}: {e}", file_path) from e

    def create_session(self, output: MixerOutput, source: Any) -> MixerSession:
        try:
            channel = pygame.mixer.Channel(output.channel_id)
            busy = channel.get_busy()
        except (pygame.error, IndexError) as e:
            raise DeviceError(f"Cannot allocate output channel: {e}") from e
        if busy:
            raise DeviceError("Output channel is still in use")
        return MixerSession(sound=source, channel=channel)

    def play(self, handle: MixerSession) -> None:
        try:
            handle.channel.play(handle.sound)
        except pygame.error as e:
            raise DeviceError(f"Cannot start playback: {e}") from e

    def pause(self, handle: MixerSession) -> None:
        try:
            handle.channel.pause()
        except pygame.error as e:
            raise DeviceError(f"Cannot pause playback: {e}") from e

    def resume(self, handle: MixerSession) -> None:
        try:
            handle.channel.unpause()
        except pygame.error as e:
            raise DeviceError(f"Cannot resume playback: {e}") from e

    def stop(self, handle: MixerSession) -> None:
        try:
            handle.channel.stop()
        except pygame.error as e:
            raise DeviceError(f"Cannot stop playback: {e}") from e

    def is_active(self, handle: MixerSession) -> bool:
        try:
            return bool(handle.channel.get_busy())
        except pygame.error:
            return False
