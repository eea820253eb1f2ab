"""Tracker components for music organization."""

from .progress_tracker import ProgressTracker

__all__ = ["ProgressTracker"]
