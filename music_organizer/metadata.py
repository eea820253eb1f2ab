"""Artist tag extraction for music files."""
import logging
from pathlib import Path
from typing import Any, List, Optional
import mutagen
from mutagen.id3 import ID3

logger = logging.getLogger("music_organizer.metadata")

UNKNOWN_ARTIST = "Unknown"


class ArtistReader:
    """Read the artist field embedded in an audio file."""

    # ID3 (mp3), Vorbis comments (flac/ogg/opus), MP4 atoms (m4a)
    ARTIST_KEYS = ['TPE1', 'ARTIST', '\xa9ART']

    def read_artist(self, file_path: Path) -> Optional[str]:
        """Return the artist tag of a file.

        Args:
            file_path: Path to the music file

        Returns:
            The artist string, or None when the file has no usable artist tag.
            Files that cannot be parsed are treated the same as untagged ones.
        """
        tags = self._load_tags(file_path)
        if not tags:
            return None
        return self._get_tag(tags, self.ARTIST_KEYS)

    def __call__(self, file_path: Path) -> Optional[str]:
        return self.read_artist(file_path)

    def _load_tags(self, file_path: Path) -> Any:
        """Load the tag container of a file, or None if there is none."""
        try:
            audio = mutagen.File(file_path)
        except Exception as e:
            logger.debug(f"Could not parse {file_path.name}: {e}")
            audio = None

        if audio is not None and audio.tags:
            return audio.tags

        # mutagen.File rejects mp3s whose audio frames it cannot sync to,
        # even when the ID3 tag in front of them is intact
        try:
            return ID3(file_path)
        except Exception as e:
            logger.debug(f"No ID3 tag in {file_path.name}: {e}")
            return None

    def _get_tag(self, tags: Any, keys: List[str]) -> Optional[str]:
        """Get the first non-empty tag from a list of possible keys."""
        for key in keys:
            if key in tags:
                value = tags[key]
                if isinstance(value, list):
                    value = value[0] if value else None
                if value is not None and str(value):
                    return str(value)
        return None
