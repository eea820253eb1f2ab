"""Organize a folder of songs into per-artist folders, or copy them in shuffled order."""

from .config import AppConfig, OperationMode
from .organizer import MusicOrganizer, organize_songs, run, shuffle_songs

__version__ = "0.2.0"

__all__ = [
    "AppConfig",
    "MusicOrganizer",
    "OperationMode",
    "organize_songs",
    "run",
    "shuffle_songs",
]
