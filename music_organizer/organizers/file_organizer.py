"""File copying operations for organized and shuffled output."""

import enum
import logging
import shutil
from pathlib import Path
from typing import Dict, List, Optional

from ..trackers import ProgressTracker
from ..ui import ConsoleUI

logger = logging.getLogger("music_organizer.file_organizer")


class CopyOutcome(enum.Enum):
    COPIED = "copied"
    REPLACED = "replaced"
    SKIPPED = "skipped"


def shuffled_file_name(index: int, file_name: str) -> str:
    """Name of the song at ``index`` of a shuffled run."""
    return f"{index} - {file_name}"


class FileOrganizer:
    """Handles directory creation and file copying into the output directory."""

    def __init__(
        self,
        output_dir: Path,
        overwrite: bool = False,
        ui: Optional[ConsoleUI] = None,
        progress_tracker: Optional[ProgressTracker] = None,
    ):
        """Initialize the file organizer.

        Args:
            output_dir: Root directory that receives the copies
            overwrite: Replace destination files that already exist
            ui: Console for user-visible notices
            progress_tracker: Tracker updated once per handled song
        """
        self.output_dir = output_dir
        self.overwrite = overwrite
        self.ui = ui or ConsoleUI()
        self.progress_tracker = progress_tracker or ProgressTracker()

    def prepare_output_dir(self) -> Path:
        """Create the output directory, tolerating one that already exists.

        Raises:
            OSError: If the directory cannot be created for another reason
        """
        try:
            self.output_dir.mkdir(parents=True)
        except FileExistsError:
            self.ui.notify_output_dir_exists(self.output_dir)
        else:
            logger.info(f"Created output directory {self.output_dir}")
        return self.output_dir

    def ensure_artist_dir(self, artist: str) -> Path:
        """Create the subdirectory for an artist label.

        Args:
            artist: Sanitized artist label

        Returns:
            Path of the artist directory

        Raises:
            OSError: If the directory cannot be created for a reason other
                than already existing
        """
        artist_dir = self.output_dir / artist
        try:
            artist_dir.mkdir()
        except FileExistsError:
            self.ui.notify_artist_dir_exists(artist)
        return artist_dir

    def place_song(self, source: Path, destination: Path) -> CopyOutcome:
        """Copy a song to its destination, applying the overwrite policy.

        Args:
            source: Song in the input directory
            destination: Target file path

        Returns:
            What happened to the destination

        Raises:
            OSError: If deleting the old destination or copying fails
        """
        if destination.exists():
            if not self.overwrite:
                self.ui.notify_file_exists(destination)
                self.progress_tracker.increment_skipped()
                return CopyOutcome.SKIPPED

            destination.unlink()
            shutil.copy2(source, destination)
            logger.debug(f"Replaced {destination}")
            self.progress_tracker.increment_replaced()
            return CopyOutcome.REPLACED

        shutil.copy2(source, destination)
        logger.debug(f"Copied {source} -> {destination}")
        self.progress_tracker.increment_copied()
        return CopyOutcome.COPIED

    def output_grouped_songs(self, grouped_songs: Dict[str, List[Path]]) -> Dict:
        """Copy every song into the directory of its artist.

        Args:
            grouped_songs: Mapping of artist label to songs

        Returns:
            Progress statistics
        """
        self.prepare_output_dir()

        for artist, songs in grouped_songs.items():
            artist_dir = self.ensure_artist_dir(artist)
            for song in songs:
                self.ui.display_processing(song.name)
                self.place_song(song, artist_dir / song.name)

        logger.info(
            f"Organized {self.progress_tracker.processed} songs into {len(grouped_songs)} artist directories"
        )
        return self.progress_tracker.get_stats()

    def output_shuffled_songs(self, shuffled_songs: List[Path]) -> Dict:
        """Copy songs into the flat output directory with their position as a prefix.

        Args:
            shuffled_songs: Songs in the order they should be numbered

        Returns:
            Progress statistics
        """
        self.prepare_output_dir()

        for index, song in enumerate(shuffled_songs):
            self.ui.display_processing(song.name)
            self.place_song(song, self.output_dir / shuffled_file_name(index, song.name))

        logger.info(f"Shuffled {self.progress_tracker.processed} songs into {self.output_dir}")
        return self.progress_tracker.get_stats()
