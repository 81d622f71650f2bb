from __future__ import annotations

from typing import Protocol


class RandomSource(Protocol):
    """The slice of `random.Random` the game draws from.

    Any `random.Random` instance satisfies it; tests pass scripted sources.
    """

    def random(self) -> float:  # returns in [0.0, 1.0)
        ...

    def randint(self, a: int, b: int) -> int:  # inclusive on both ends
        ...
