from .playlist import PlaylistView
from .now_playing import NowPlayingView

__all__ = ["PlaylistView", "NowPlayingView"]
