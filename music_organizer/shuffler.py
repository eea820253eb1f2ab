"""Random ordering of songs for shuffle mode."""

import random
from pathlib import Path
from typing import List, Optional, Protocol, Sequence


class PermutationSource(Protocol):
    """Anything that can draw a ``k``-sized random sample, like ``random.Random``."""

    def sample(self, population: Sequence, k: int) -> list: ...


class Shuffler:
    """Produces a uniformly random permutation of a song list."""

    def __init__(self, rng: Optional[PermutationSource] = None):
        """Initialize the shuffler.

        Args:
            rng: Source of randomness. Defaults to a generator seeded from
                OS entropy, so orders differ from run to run.
        """
        self.rng = rng if rng is not None else random.Random()

    @classmethod
    def seeded(cls, seed: Optional[int]) -> "Shuffler":
        """Build a shuffler whose order is repeatable for a given seed."""
        if seed is None:
            return cls()
        return cls(random.Random(seed))

    def shuffle(self, songs: Sequence[Path]) -> List[Path]:
        """Return the songs in random order, leaving the input untouched."""
        return list(self.rng.sample(list(songs), len(songs)))
