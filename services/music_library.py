import logging
from pathlib import Path
from typing import Dict, Any, Iterable, List, Optional

from mutagen import File as MutagenFile
from mutagen import MutagenError

from models.track import Track

logger = logging.getLogger(__name__)


class MusicLibrary:
    """Service for building the ordered track catalog from files and directories."""

    SUPPORTED_EXTENSIONS = {'.mp3', '.ogg', '.wav', '.flac'}
    DEFAULT_MUSIC_DIR = Path.home() / "Music"

    def __init__(self, music_dir: Optional[Path] = None):
        """Initialize MusicLibrary with optional custom music directory.

        Args:
            music_dir: Directory scanned when no explicit paths are given.
                Defaults to ~/Music if not provided.
        """
        self.music_dir = music_dir or self.DEFAULT_MUSIC_DIR
        self._tracks: List[Track] = []

    def load(self, paths: Iterable[Path] = ()) -> List[Track]:
        """Build the catalog from paths in the order given.

        Files become one track each. Directories are scanned recursively and
        their files sorted by path. With no paths the music directory is scanned.

        Args:
            paths: Files or directories to include.

        Returns:
            List of Track objects in catalog order.
        """
        paths = [Path(p) for p in paths]
        self._tracks = []

        if not paths:
            if not self.music_dir.is_dir():
                logger.warning(f"Music directory not found: {self.music_dir}")
                return self._tracks
            self._tracks.extend(self._scan_directory(self.music_dir))
            logger.info(f"Loaded {len(self._tracks)} tracks")
            return self._tracks

        for path in paths:
            if path.is_dir():
                self._tracks.extend(self._scan_directory(path))
            else:
                # Missing files stay in the catalog; play() reports them.
                if not path.exists():
                    logger.warning(f"Track path does not exist: {path}")
                self._tracks.append(Track.from_file(path, self._extract_metadata(path)))

        logger.info(f"Loaded {len(self._tracks)} tracks")
        return self._tracks

    def get_tracks(self) -> List[Track]:
        """Return cached track list.

        Returns:
            List of Track objects from last load.
        """
        return self._tracks

    def _scan_directory(self, directory: Path) -> List[Track]:
        audio_files = sorted(
            p for p in directory.rglob("*")
            if p.is_file() and p.suffix.lower() in self.SUPPORTED_EXTENSIONS
        )
        logger.debug(f"Found {len(audio_files)} audio files in {directory}")
        return [Track.from_file(p, self._extract_metadata(p)) for p in audio_files]

    @staticmethod
    def _extract_metadata(file_path: Path) -> Dict[str, Any]:
        """Extract metadata from audio file using mutagen.

        Args:
            file_path: Path to audio file.

        Returns:
            Dictionary containing title, artist, and duration. Empty when the
            file has no readable tags; the track is still kept.
        """
        try:
            audio = MutagenFile(file_path, easy=True)
        except (MutagenError, OSError) as e:
            logger.debug(f"Could not read tags from {file_path}: {e}")
            return {}

        if audio is None:
            return {}

        metadata: Dict[str, Any] = {}
        tags = audio.tags or {}
        for key in ('title', 'artist'):
            if key in tags:
                value = tags[key]
                metadata[key] = str(value[0]) if isinstance(value, list) else str(value)

        if audio.info and hasattr(audio.info, 'length'):
            metadata['duration'] = float(audio.info.length)

        return metadata
