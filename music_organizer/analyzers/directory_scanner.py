"""Directory scanning for music files."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger("music_organizer.directory_scanner")

DEFAULT_EXTENSIONS = ("mp3",)


def file_extension(name: str) -> Optional[str]:
    """Return the text after the last dot of a file name, or None if there is no dot."""
    _, dot, extension = name.rpartition(".")
    if not dot:
        return None
    return extension


class DirectoryScanner:
    """Lists the music files sitting directly in a directory."""

    def __init__(self, extensions: Iterable[str] = DEFAULT_EXTENSIONS):
        """Initialize the scanner.

        Args:
            extensions: Recognized extensions without the leading dot, matched
                case-sensitively against the final extension of each name
        """
        self.extensions = frozenset(extensions)

    def is_song(self, path: Path) -> bool:
        """Check whether a path is a regular file with a recognized extension."""
        if not path.is_file():
            return False
        return file_extension(path.name) in self.extensions

    def scan(self, input_dir: Path) -> List[Path]:
        """Scan a directory (not recursively) for songs.

        Args:
            input_dir: Directory to scan

        Returns:
            Song paths sorted by file name

        Raises:
            OSError: If the directory cannot be listed
        """
        songs = sorted(
            (entry for entry in input_dir.iterdir() if self.is_song(entry)),
            key=lambda p: p.name,
        )
        logger.info(f"Found {len(songs)} songs in {input_dir}")
        return songs
