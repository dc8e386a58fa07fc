"""A record of one player's move during a turn."""

from __future__ import annotations

from dataclasses import dataclass

from snakesladders.tiles import TileKind


@dataclass(frozen=True)
class Turn:
    """What happened to one player in one turn."""

    number: int
    player: int
    start: int
    roll: int
    tile_kind: TileKind
    result: int
    penalty: int = 0
    reward: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "tile_kind", TileKind(self.tile_kind))

    def _head(self) -> str:
        return f"{self.player} {self.start} dado: {self.roll} {self.tile_kind.value}"

    def __str__(self) -> str:
        text = self._head()
        if self.reward > 0:
            text += f" (+{self.reward})"
        if self.penalty > 0:
            text += f" (-{self.penalty})"
        return f"{text} Now at tile {self.result}"

    def verbose(self) -> str:
        """Return the move with the reward and penalty spelled out."""
        text = self._head()
        if self.reward > 0:
            text += f" recompensa: {self.reward}"
        if self.penalty > 0:
            text += f" penalidad: {self.penalty}"
        return f"{text} Now at tile {self.result}"