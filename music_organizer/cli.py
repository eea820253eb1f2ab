"""Main CLI entry point for music-organizer.

Copy songs from an input directory into an output directory:
- Organize mode (default) puts each song in a folder named after its artist tag
- Shuffle mode (--shuffle) copies songs flat, in random order, prefixed with their position
- Input defaults to the current directory, output to <input>/output
"""

import click
from pathlib import Path
import logging
import os

from . import __version__
from .config import AppConfig, OperationMode
from .organizer import MusicOrganizer
from .shuffler import Shuffler
from .ui import ConsoleUI, displayable


def configure_logging(verbose: bool) -> None:
    """Configure root logging once per invocation.

    MUSIC_ORGANIZER_LOG_LEVEL (e.g. INFO) wins over the default level; --verbose wins over both.
    """
    level_name = os.getenv("MUSIC_ORGANIZER_LOG_LEVEL", "WARNING").upper()
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--input-dir",
    "-i",
    required=False,
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    help="Input directory to process (default: current directory)",
)
@click.option(
    "--output-dir",
    "-o",
    required=False,
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    help="Output directory to save organized files to (default: <input>/output)",
)
@click.option("--overwrite", "-O", is_flag=True, default=False, help="Overwrite files that already exist in the output directory")
@click.option("--shuffle", "-S", is_flag=True, default=False, help="Enable shuffle mode")
@click.option(
    "--extension",
    "-e",
    "extensions",
    multiple=True,
    help="Audio file extension to pick up, without the dot (repeatable, default: mp3)",
)
@click.option("--seed", type=int, default=None, help="Seed for a repeatable shuffle order")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.version_option(__version__, prog_name="music-organizer")
def main_cli(
    input_dir: Path | None,
    output_dir: Path | None,
    overwrite: bool,
    shuffle: bool,
    extensions: tuple[str, ...],
    seed: int | None,
    verbose: bool,
):
    """Organize songs from INPUT_DIR into per-artist folders in OUTPUT_DIR.

    With --shuffle, copy them into OUTPUT_DIR in random order instead.
    """
    configure_logging(verbose)

    config = AppConfig.from_dirs(input_dir, output_dir, overwrite, extensions)
    mode = OperationMode.from_flag(shuffle)

    ui = ConsoleUI()
    organizer = MusicOrganizer(config, ui=ui, shuffler=Shuffler.seeded(seed))
    try:
        organizer.run(mode)
    except OSError as e:
        # Report what was done before the failure
        stats = organizer.progress_tracker.get_stats()
        if organizer.progress_tracker.processed:
            ui.display_completion_summary(stats, title="Stopped early")
        raise click.ClickException(displayable(str(e)))


def main():
    """Main entry point."""
    main_cli()


if __name__ == "__main__":
    main()
