"""Grouping of songs by artist."""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ..metadata import UNKNOWN_ARTIST, ArtistReader
from ..organizers.naming import sanitize_name

logger = logging.getLogger("music_organizer.artist_grouper")

SongList = List[Path]
GroupedSongs = Dict[str, SongList]
ArtistLookup = Callable[[Path], Optional[str]]

# Labels that would not name a subdirectory of the output directory
NON_DIRECTORY_LABELS = {"", ".", ".."}


class ArtistGrouper:
    """Buckets songs under their sanitized artist label."""

    def __init__(self, read_artist: Optional[ArtistLookup] = None):
        """Initialize the grouper.

        Args:
            read_artist: Callable returning the artist of a song, or None when
                it has none. Defaults to reading the embedded tags.
        """
        self.read_artist = read_artist or ArtistReader()

    def artist_label(self, song: Path) -> str:
        """Resolve the directory-safe artist label of a song."""
        label = sanitize_name(self.read_artist(song) or "")
        if label in NON_DIRECTORY_LABELS:
            return UNKNOWN_ARTIST
        return label

    def group(self, songs: SongList) -> GroupedSongs:
        """Group songs by artist label, keeping their order inside each group.

        Args:
            songs: Song paths in listing order

        Returns:
            Mapping of artist label to the songs of that artist
        """
        grouped: GroupedSongs = {}
        for song in songs:
            label = self.artist_label(song)
            grouped.setdefault(label, []).append(song)

        logger.info(f"Grouped {len(songs)} songs under {len(grouped)} artists")
        return grouped
