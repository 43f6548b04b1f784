"""Unit tests for MusicLibrary and Track."""

from pathlib import Path
from unittest import mock

from mutagen import MutagenError

from models.track import Track, format_time
from services.music_library import MusicLibrary


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


class TestTrack:
    """Tests for the Track model."""

    def test_display_name_is_file_name(self) -> None:
        track = Track.from_file(Path("/music/Mixdown_toska(6).mp3"))
        assert track.display_name == "Mixdown_toska(6).mp3"

    def test_title_falls_back_to_stem(self) -> None:
        track = Track.from_file(Path("/music/song.ogg"), {"artist": "Someone"})
        assert track.title == "song"
        assert track.artist == "Someone"
        assert track.duration_seconds == 0.0

    def test_format_time(self) -> None:
        assert format_time(0) == "0:00"
        assert format_time(65.7) == "1:05"
        assert format_time(600) == "10:00"


class TestMusicLibrary:
    """Tests for catalog loading."""

    def test_explicit_files_keep_order(self, tmp_path: Path) -> None:
        b = _touch(tmp_path / "b.mp3")
        a = _touch(tmp_path / "a.mp3")

        with mock.patch("services.music_library.MutagenFile", return_value=None):
            tracks = MusicLibrary(tmp_path).load([b, a])

        assert [t.file_path for t in tracks] == [b, a]

    def test_directory_scan_is_sorted_and_filtered(self, tmp_path: Path) -> None:
        _touch(tmp_path / "z.flac")
        _touch(tmp_path / "sub" / "a.ogg")
        _touch(tmp_path / "cover.jpg")
        _touch(tmp_path / "m.WAV")

        with mock.patch("services.music_library.MutagenFile", return_value=None):
            tracks = MusicLibrary(tmp_path).load()

        assert [t.display_name for t in tracks] == ["m.WAV", "a.ogg", "z.flac"]

    def test_missing_music_dir_gives_empty_catalog(self, tmp_path: Path) -> None:
        library = MusicLibrary(tmp_path / "nope")
        assert library.load() == []
        assert library.get_tracks() == []

    def test_missing_music_dir_is_not_a_track(self, tmp_path: Path) -> None:
        """Test the default folder never becomes a catalog entry itself."""
        music_dir = tmp_path / "Music"

        tracks = MusicLibrary(music_dir).load()

        assert music_dir not in [t.file_path for t in tracks]
        assert tracks == []

    def test_missing_file_is_kept(self, tmp_path: Path) -> None:
        missing = tmp_path / "gone.mp3"

        tracks = MusicLibrary(tmp_path).load([missing])

        assert [t.file_path for t in tracks] == [missing]

    def test_tags_are_read(self, tmp_path: Path) -> None:
        path = _touch(tmp_path / "tagged.mp3")
        audio = mock.Mock()
        audio.tags = {"title": ["Forlorad"], "artist": ["Band"]}
        audio.info.length = 201.5

        with mock.patch("services.music_library.MutagenFile", return_value=audio):
            (track,) = MusicLibrary(tmp_path).load([path])

        assert track.title == "Forlorad"
        assert track.artist == "Band"
        assert track.duration_seconds == 201.5
        assert track.display_name == "tagged.mp3"

    def test_unreadable_tags_keep_track(self, tmp_path: Path) -> None:
        path = _touch(tmp_path / "broken.mp3")

        with mock.patch("services.music_library.MutagenFile", side_effect=MutagenError("bad")):
            (track,) = MusicLibrary(tmp_path).load([path])

        assert track.title == "broken"
        assert track.duration_seconds == 0.0
