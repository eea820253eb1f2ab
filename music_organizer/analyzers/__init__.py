"""Analyzer components for music organization."""

from .artist_grouper import ArtistGrouper
from .directory_scanner import DirectoryScanner

__all__ = ["ArtistGrouper", "DirectoryScanner"]
