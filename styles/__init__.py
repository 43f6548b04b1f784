"""Shared style constants for termplay."""

COLORS = {
    "primary": "#ff8c00",
    "highlight": "#ffb347",
    "muted": "#888888",
    "dim": "#555555",
}

COLOR_PRIMARY = COLORS["primary"]
COLOR_HIGHLIGHT = COLORS["highlight"]
COLOR_MUTED = COLORS["muted"]
COLOR_DIM = COLORS["dim"]
