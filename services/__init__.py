from .music_library import MusicLibrary
from .audio_backend import AudioBackend, PygameAudioBackend
from .player_controller import PlayerController
from .errors import PlaybackError, DeviceError, DecodeError

__all__ = [
    'MusicLibrary',
    'AudioBackend',
    'PygameAudioBackend',
    'PlayerController',
    'PlaybackError',
    'DeviceError',
    'DecodeError',
]
