"""A fair die with a configurable number of faces."""

from __future__ import annotations

import random


class Dice:
    """A die that rolls a value between 1 and ``sides`` inclusive."""

    def __init__(self, sides: int = 6, rng: random.Random | None = None) -> None:
        if sides < 1:
            raise ValueError(f"a die needs at least one side, got {sides}")
        self.sides = sides
        self._rng = rng if rng is not None else random.Random()

    def roll(self) -> int:
        """Roll the die once."""
        return 1 + self._rng.randrange(self.sides)

    def __repr__(self) -> str:
        return f"Dice(sides={self.sides})"