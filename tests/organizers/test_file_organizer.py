"""Tests for the FileOrganizer class."""

import pytest
from pathlib import Path
from unittest.mock import patch

from music_organizer.organizers.file_organizer import CopyOutcome, FileOrganizer, shuffled_file_name


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "output"


@pytest.fixture
def organizer(output_dir, recording_ui):
    return FileOrganizer(output_dir, overwrite=False, ui=recording_ui)


class TestPrepareDirectories:
    def test_creates_output_dir(self, organizer, output_dir):
        organizer.prepare_output_dir()
        assert output_dir.is_dir()

    def test_creates_missing_parents(self, tmp_path, recording_ui):
        nested = tmp_path / "a" / "b" / "output"
        FileOrganizer(nested, ui=recording_ui).prepare_output_dir()
        assert nested.is_dir()

    def test_existing_output_dir_is_a_notice(self, organizer, output_dir, recording_ui):
        output_dir.mkdir()

        organizer.prepare_output_dir()

        assert "already exists... Continuing." in recording_ui.console.export_text()

    def test_output_dir_creation_failure_propagates(self, organizer):
        with patch.object(Path, "mkdir", side_effect=PermissionError("denied")):
            with pytest.raises(PermissionError):
                organizer.prepare_output_dir()

    def test_existing_artist_dir_is_a_notice(self, organizer, output_dir, recording_ui):
        (output_dir / "Foo").mkdir(parents=True)

        assert organizer.ensure_artist_dir("Foo") == output_dir / "Foo"
        assert "Directory for artist Foo already exists" in recording_ui.console.export_text()

    def test_artist_dir_without_output_dir_fails(self, organizer):
        """Only the output root is created with parents."""
        with pytest.raises(FileNotFoundError):
            organizer.ensure_artist_dir("Foo")


class TestPlaceSong:
    """Test the overwrite policy for a single file."""

    def test_copies_new_file(self, organizer, output_dir, make_song):
        source = make_song("a.mp3", b"new")
        output_dir.mkdir()

        outcome = organizer.place_song(source, output_dir / "a.mp3")

        assert outcome is CopyOutcome.COPIED
        assert (output_dir / "a.mp3").read_bytes() == b"new"
        assert source.read_bytes() == b"new"
        assert organizer.progress_tracker.get_stats()["copied"] == 1

    def test_existing_file_is_skipped_without_overwrite(self, organizer, output_dir, make_song, recording_ui):
        source = make_song("a.mp3", b"new")
        output_dir.mkdir()
        destination = output_dir / "a.mp3"
        destination.write_bytes(b"old")

        outcome = organizer.place_song(source, destination)

        assert outcome is CopyOutcome.SKIPPED
        assert destination.read_bytes() == b"old"
        output = recording_ui.console.export_text()
        assert "already exists! Use --overwrite to permit overwriting." in output
        assert organizer.progress_tracker.get_stats()["skipped"] == 1

    def test_existing_file_is_replaced_with_overwrite(self, output_dir, make_song, recording_ui):
        organizer = FileOrganizer(output_dir, overwrite=True, ui=recording_ui)
        source = make_song("a.mp3", b"new")
        output_dir.mkdir()
        destination = output_dir / "a.mp3"
        destination.write_bytes(b"old")

        outcome = organizer.place_song(source, destination)

        assert outcome is CopyOutcome.REPLACED
        assert destination.read_bytes() == b"new"
        assert source.read_bytes() == b"new"
        assert organizer.progress_tracker.get_stats()["replaced"] == 1

    def test_copy_failure_propagates(self, organizer, output_dir, input_dir):
        output_dir.mkdir()
        with pytest.raises(OSError):
            organizer.place_song(input_dir / "missing.mp3", output_dir / "missing.mp3")


class TestOutputGroupedSongs:
    def test_copies_into_artist_dirs(self, organizer, output_dir, make_song):
        foo = make_song("foo.mp3", b"foo")
        bar = make_song("bar.mp3", b"bar")

        stats = organizer.output_grouped_songs({"Foo": [foo], "Bar": [bar]})

        assert (output_dir / "Foo" / "foo.mp3").read_bytes() == b"foo"
        assert (output_dir / "Bar" / "bar.mp3").read_bytes() == b"bar"
        assert stats["copied"] == 2

    def test_first_failure_aborts_remaining_songs(self, organizer, output_dir, input_dir, make_song):
        missing = input_dir / "gone.mp3"
        later = make_song("later.mp3")

        with pytest.raises(OSError):
            organizer.output_grouped_songs({"Foo": [missing, later]})

        assert not (output_dir / "Foo" / "later.mp3").exists()

    def test_prints_processing_lines(self, organizer, make_song, recording_ui):
        organizer.output_grouped_songs({"Foo": [make_song("[live] song.mp3")]})

        assert "processing: [live] song.mp3" in recording_ui.console.export_text()


class TestOutputShuffledSongs:
    def test_flat_numbered_copies(self, organizer, output_dir, make_song):
        songs = [make_song("b.mp3", b"b"), make_song("a.mp3", b"a")]

        stats = organizer.output_shuffled_songs(songs)

        assert sorted(p.name for p in output_dir.iterdir()) == ["0 - b.mp3", "1 - a.mp3"]
        assert (output_dir / "0 - b.mp3").read_bytes() == b"b"
        assert stats["copied"] == 2

    def test_overwrite_policy_applies(self, organizer, output_dir, make_song):
        output_dir.mkdir()
        (output_dir / "0 - a.mp3").write_bytes(b"old")

        stats = organizer.output_shuffled_songs([make_song("a.mp3", b"new")])

        assert (output_dir / "0 - a.mp3").read_bytes() == b"old"
        assert stats["skipped"] == 1

    def test_shuffled_file_name(self):
        assert shuffled_file_name(0, "song.mp3") == "0 - song.mp3"
        assert shuffled_file_name(12, "x - y.mp3") == "12 - x - y.mp3"
