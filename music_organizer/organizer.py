"""Main music organization orchestrator."""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .analyzers import ArtistGrouper, DirectoryScanner
from .config import AppConfig, OperationMode
from .organizers import FileOrganizer
from .shuffler import Shuffler
from .trackers import ProgressTracker
from .ui import ConsoleUI

logger = logging.getLogger("music_organizer.organizer")


class MusicOrganizer:
    """Orchestrates a single organize or shuffle run using specialized components."""

    def __init__(
        self,
        config: AppConfig,
        ui: Optional[ConsoleUI] = None,
        read_artist: Optional[Callable[[Path], Optional[str]]] = None,
        shuffler: Optional[Shuffler] = None,
    ):
        """Initialize the music organizer.

        Args:
            config: Directories and overwrite policy for this run
            ui: Console for user-visible notices
            read_artist: Artist lookup used for grouping, defaults to the tag reader
            shuffler: Permutation source for shuffle mode
        """
        self.config = config
        self.ui = ui or ConsoleUI()

        self.directory_scanner = DirectoryScanner(config.extensions)
        self.artist_grouper = ArtistGrouper(read_artist)
        self.shuffler = shuffler or Shuffler()
        self.progress_tracker = ProgressTracker()
        self.file_organizer = FileOrganizer(
            config.output_dir, config.overwrite, self.ui, self.progress_tracker
        )

    def _scan(self) -> List[Path]:
        songs = self.directory_scanner.scan(self.config.input_dir)
        self.progress_tracker.set_found(len(songs))
        self.ui.display_found(len(songs))
        return songs

    def organize(self) -> Dict:
        """Copy songs from the input directory into per-artist directories.

        Returns:
            Progress statistics

        Raises:
            OSError: On the first filesystem failure; remaining songs are not copied
        """
        logger.info(f"Organizing {self.config.input_dir} into {self.config.output_dir}")
        songs = self._scan()
        grouped_songs = self.artist_grouper.group(songs)
        stats = self.file_organizer.output_grouped_songs(grouped_songs)
        self.ui.display_completion_summary(stats)
        return stats

    def shuffle(self) -> Dict:
        """Copy songs into the output directory in random order, numbered from 0.

        Returns:
            Progress statistics

        Raises:
            OSError: On the first filesystem failure; remaining songs are not copied
        """
        logger.info(f"Shuffling {self.config.input_dir} into {self.config.output_dir}")
        songs = self._scan()
        shuffled = self.shuffler.shuffle(songs)
        stats = self.file_organizer.output_shuffled_songs(shuffled)
        self.ui.display_completion_summary(stats, title="🔀 Shuffle Complete!")
        return stats

    def run(self, mode: OperationMode) -> Dict:
        """Run the pipeline for the selected mode."""
        if mode is OperationMode.SHUFFLE:
            return self.shuffle()
        return self.organize()


def organize_songs(config: AppConfig, **components) -> Dict:
    """Organize songs from the input directory into per-artist output directories."""
    return MusicOrganizer(config, **components).organize()


def shuffle_songs(config: AppConfig, **components) -> Dict:
    """Copy songs into the output directory in random, numbered order."""
    return MusicOrganizer(config, **components).shuffle()


def run(config: AppConfig, mode: OperationMode = OperationMode.ORGANIZE, **components) -> Dict:
    return MusicOrganizer(config, **components).run(mode)
