"""Organizer components for music organization."""

from .file_organizer import CopyOutcome, FileOrganizer
from .naming import sanitize_name

__all__ = ["CopyOutcome", "FileOrganizer", "sanitize_name"]
