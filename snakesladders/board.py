"""The board: a row of tiles with snakes and ladders placed at random."""

from __future__ import annotations

import random
from collections.abc import Iterator

from snakesladders.tiles import LadderTile, SnakeTile, Tile


class Board:
    """A board of ``tiles`` squares holding ``snakes`` snakes and ``ladders`` ladders."""

    def __init__(
        self,
        tiles: int = 30,
        snakes: int = 3,
        ladders: int = 3,
        penalty: int = 0,
        reward: int = 0,
        rng: random.Random | None = None,
    ) -> None:
        if tiles < 1:
            raise ValueError(f"a board needs at least one tile, got {tiles}")
        if snakes < 0 or ladders < 0:
            raise ValueError("the number of snakes and ladders cannot be negative")
        if snakes + ladders > tiles:
            raise ValueError(
                f"{snakes} snakes and {ladders} ladders do not fit on {tiles} tiles"
            )
        rng = rng if rng is not None else random.Random()
        squares: list[Tile] = [Tile() for _ in range(tiles)]
        special = rng.sample(range(tiles), snakes + ladders)
        for index in special[:snakes]:
            squares[index] = SnakeTile(penalty=penalty)
        for index in special[snakes:]:
            squares[index] = LadderTile(reward=reward)
        self._tiles = tuple(squares)
        self.snakes = snakes
        self.ladders = ladders

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return self._tiles

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def draw(self) -> str:
        """Return each tile's symbol followed by a space."""
        return "".join(f"{tile.kind.value} " for tile in self._tiles)

    def tile_at(self, index: int) -> Tile:
        """Return the tile at zero-based ``index``."""
        if not 0 <= index < len(self._tiles):
            raise IndexError(f"tile index out of bounds: {index}")
        return self._tiles[index]