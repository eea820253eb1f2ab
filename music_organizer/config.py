"""Run configuration for music-organizer."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .analyzers.directory_scanner import DEFAULT_EXTENSIONS

DEFAULT_OUTPUT_NAME = "output"


class OperationMode(enum.Enum):
    ORGANIZE = "organize"
    SHUFFLE = "shuffle"

    @classmethod
    def from_flag(cls, shuffle: bool) -> "OperationMode":
        return cls.SHUFFLE if shuffle else cls.ORGANIZE


@dataclass(frozen=True)
class AppConfig:
    """Directories and copy policy for a single run."""

    input_dir: Path
    output_dir: Path
    overwrite: bool = False
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS

    @classmethod
    def from_dirs(
        cls,
        input_dir: Path | None = None,
        output_dir: Path | None = None,
        overwrite: bool = False,
        extensions: Iterable[str] | None = None,
    ) -> "AppConfig":
        """Build a config, filling in defaults for anything not given.

        The input directory defaults to the current working directory and the
        output directory to ``output/`` inside the input directory. A leading
        dot on an extension is dropped, so ``.mp3`` and ``mp3`` are the same.
        """
        if input_dir is None:
            input_dir = Path.cwd()
        if output_dir is None:
            output_dir = input_dir / DEFAULT_OUTPUT_NAME
        if extensions:
            extensions = tuple(ext[1:] if ext.startswith(".") else ext for ext in extensions)
        else:
            extensions = DEFAULT_EXTENSIONS
        return cls(Path(input_dir), Path(output_dir), overwrite, extensions)

    @classmethod
    def default(cls) -> "AppConfig":
        return cls.from_dirs()
