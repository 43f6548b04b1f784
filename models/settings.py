from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

DEFAULT_MUSIC_DIR = Path.home() / "Music"
DEFAULT_LOG_DIR = Path.home() / ".local" / "share" / "termplay"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_POLL_INTERVAL = 0.5


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class PlayerSettings:
    """Runtime configuration for termplay.

    Attributes:
        music_dir: Directory scanned when no paths are given on the command line.
        log_dir: Directory holding termplay.log.
        log_level: Name of the logging level.
        poll_interval: Seconds between checks for a track finishing on its own.
        paths: Files or directories given on the command line, in order.
    """
    music_dir: Path = DEFAULT_MUSIC_DIR
    log_dir: Path = DEFAULT_LOG_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    poll_interval: float = DEFAULT_POLL_INTERVAL
    paths: tuple[Path, ...] = field(default_factory=tuple)

    @property
    def log_file(self) -> Path:
        return self.log_dir / "termplay.log"

    @classmethod
    def from_env(cls) -> PlayerSettings:
        """Build settings from TERMPLAY_* environment variables."""
        music_dir = os.environ.get("TERMPLAY_MUSIC_DIR")
        log_dir = os.environ.get("TERMPLAY_LOG_DIR")
        return cls(
            music_dir=Path(music_dir).expanduser() if music_dir else DEFAULT_MUSIC_DIR,
            log_dir=Path(log_dir).expanduser() if log_dir else DEFAULT_LOG_DIR,
            log_level=os.environ.get("TERMPLAY_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            poll_interval=_env_float("TERMPLAY_POLL_INTERVAL", DEFAULT_POLL_INTERVAL),
        )

    def with_overrides(
        self,
        paths: list[Path] | None = None,
        log_level: str | None = None,
    ) -> PlayerSettings:
        """Return a copy with command line values applied."""
        settings = self
        if paths:
            settings = replace(settings, paths=tuple(Path(p).expanduser() for p in paths))
        if log_level:
            settings = replace(settings, log_level=log_level.upper())
        return settings
