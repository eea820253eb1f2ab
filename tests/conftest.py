"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Dict, Optional

import pytest
from rich.console import Console

from music_organizer.ui import ConsoleUI


@pytest.fixture
def recording_ui():
    """A ConsoleUI whose output can be read back with ``ui.console.export_text()``."""
    return ConsoleUI(Console(record=True, width=200, soft_wrap=True, force_terminal=False))


@pytest.fixture
def input_dir(tmp_path):
    """An empty input directory."""
    path = tmp_path / "input"
    path.mkdir()
    return path


@pytest.fixture
def make_song(input_dir):
    """Create a fake song in the input directory with the given content."""

    def _make(name: str, content: bytes = b"fake mp3 data") -> Path:
        song = input_dir / name
        song.write_bytes(content)
        return song

    return _make


class FakeArtistReader:
    """Artist lookup backed by a file name -> artist mapping."""

    def __init__(self, artists: Dict[str, Optional[str]]):
        self.artists = artists
        self.calls = []

    def __call__(self, path: Path) -> Optional[str]:
        self.calls.append(path)
        return self.artists.get(path.name)


@pytest.fixture
def fake_reader():
    return FakeArtistReader
