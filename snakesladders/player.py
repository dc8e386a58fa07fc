"""A player and their position on the board."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    """A numbered player standing on a tile (tiles count from 1)."""

    number: int = 1
    tile: int = 1

    def move_to(self, tile: int, max_tile: int) -> None:
        """Move to ``tile``, clamped to the range 1..``max_tile``."""
        if tile < 1:
            self.tile = 1
        elif tile > max_tile:
            self.tile = max_tile
        else:
            self.tile = tile

    def draw(self) -> str:
        """Return the player's number and tile as text."""
        return f"{self.number} {self.tile}"