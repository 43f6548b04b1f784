from .track import Track
from .playback import PlaybackState, NowPlaying, NOTHING_SELECTED
from .settings import PlayerSettings

__all__ = ["Track", "PlaybackState", "NowPlaying", "NOTHING_SELECTED", "PlayerSettings"]
