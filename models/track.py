from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Track:
    """A playable audio item identified by its file path."""
    file_path: Path
    title: str = ""
    artist: str = ""
    duration_seconds: float = 0.0

    @property
    def display_name(self) -> str:
        """File name shown in the status line and playlist."""
        return self.file_path.name

    @classmethod
    def from_file(cls, file_path: Path, metadata: dict | None = None) -> Track:
        """Create a Track from a path and optional tag metadata.

        Args:
            file_path: Location of the audio file.
            metadata: Dictionary with optional title, artist and duration keys.

        Returns:
            Track with tag values falling back to the file stem.
        """
        metadata = metadata or {}
        return cls(
            file_path=Path(file_path),
            title=metadata.get("title") or Path(file_path).stem,
            artist=metadata.get("artist") or "",
            duration_seconds=float(metadata.get("duration") or 0.0),
        )


def format_time(seconds: float) -> str:
    """Format seconds as M:SS."""
    if seconds <= 0:
        return "0:00"
    total = int(seconds)
    return f"{total // 60}:{total % 60:02d}"
