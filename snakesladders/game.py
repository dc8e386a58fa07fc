"""A game of snakes and ladders for any number of players."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable
from enum import Enum
from typing import TextIO

from snakesladders.board import Board
from snakesladders.dice import Dice
from snakesladders.player import Player
from snakesladders.tiles import TileKind
from snakesladders.turn import Turn

CONTINUE = "C"
END = "E"


class GameType(str, Enum):
    """How turns advance: on the user's command or on their own."""

    MANUAL = "M"
    AUTOMATIC = "A"


class Game:
    """A board, a die and players taking turns until one reaches the last tile."""

    def __init__(
        self,
        tiles: int = 30,
        snakes: int = 3,
        ladders: int = 3,
        players: int = 2,
        turns: int = 30,
        penalty: int = 3,
        reward: int = 3,
        game_type: GameType | str = GameType.MANUAL,
        rng: random.Random | None = None,
        out: TextIO | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self._out = out if out is not None else sys.stdout
        self.board = Board(tiles, snakes, ladders, penalty=penalty, reward=reward, rng=rng)
        self.max_tiles = tiles
        self.max_turns = turns
        self.penalty = penalty
        self.reward = reward
        self.game_type = GameType(game_type)
        self.players = [Player(number) for number in range(1, players + 1)]
        self.dice = Dice(rng=rng)
        self.turn = 1
        self.history: list[Turn] = []
        self._say(f"Board Iniciali: {self.board.draw()}")

    def _say(self, text: str) -> None:
        print(text, file=self._out)

    def _reset_positions(self) -> None:
        for player in self.players:
            player.move_to(1, self.max_tiles)

    def _play_round(self) -> int | None:
        """Move every player once; return the winner's number if someone won."""
        self._say(f"Turn {self.turn}")
        for player in self.players:
            start = player.tile
            roll = self.dice.roll()
            player.move_to(start + roll, self.max_tiles)
            tile = self.board.tile_at(player.tile - 1)
            player.move_to(tile.shift(player.tile), self.max_tiles)

            record = Turn(
                number=self.turn,
                player=player.number,
                start=start,
                roll=roll,
                tile_kind=tile.kind,
                result=player.tile,
                penalty=self.penalty if tile.kind is TileKind.SNAKE else 0,
                reward=self.reward if tile.kind is TileKind.LADDER else 0,
            )
            self.history.append(record)
            self._say(str(record))

            if player.tile >= len(self.board):
                self._say(f"Player {player.number} is the winner!!!")
                self._say("<<< GAME OVER >>>")
                return player.number
        self.turn += 1
        return None

    def _finish(self, banner: str) -> None:
        self._say(banner)
        if self.turn > self.max_turns:
            self._say("The maximum number of turns has been reached...")
        else:
            self._say("Thanks for playing!!!")

    def play_manual(self, options: Iterable[str]) -> int | None:
        """Play a round for every "C" in ``options`` until "E", a win or the turn limit.

        Running out of options ends the game as "E" does. Returns the winner's
        number, or None when nobody won.
        """
        self._say("Game Type: Manual")
        self._reset_positions()
        self._say("Press C to continue next turn, or E to end the game:")
        commands = iter(options)
        while self.turn <= self.max_turns:
            option = next(commands, END).strip()
            if option == END:
                break
            if option == CONTINUE:
                winner = self._play_round()
                if winner is not None:
                    return winner
            else:
                self._say(
                    "Invalid option, please press C to continue next turn "
                    "or E to end the game"
                )
        self._finish("<<< GAME OVER >>>")
        return None

    def play_automatic(self) -> int | None:
        """Play rounds until a player wins or the turn limit is reached."""
        self._say("Game Type: Automatic")
        self._reset_positions()
        while self.turn <= self.max_turns:
            winner = self._play_round()
            if winner is not None:
                return winner
        self._finish("-- GAME OVER --")
        return None