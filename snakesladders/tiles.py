"""Board tiles: normal squares, snakes that push a player back and ladders that lift one up."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TileKind(str, Enum):
    """The kind of a tile, identified by its one-letter symbol."""

    NORMAL = "N"
    SNAKE = "S"
    LADDER = "L"


@dataclass(frozen=True)
class Tile:
    """A square on the board. A normal tile leaves a player where they stand."""

    kind: TileKind = TileKind.NORMAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", TileKind(self.kind))

    def shift(self, position: int) -> int:
        """Return the position a player on this tile ends up at."""
        return position

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class SnakeTile(Tile):
    """A snake: moves the player back by the size of the penalty."""

    penalty: int = 0
    kind: TileKind = field(default=TileKind.SNAKE, init=False)

    def shift(self, position: int) -> int:
        return position - abs(self.penalty)


@dataclass(frozen=True)
class LadderTile(Tile):
    """A ladder: moves the player forward by the size of the reward."""

    reward: int = 0
    kind: TileKind = field(default=TileKind.LADDER, init=False)

    def shift(self, position: int) -> int:
        return position + abs(self.reward)