"""Command line entry point: asks for the game's settings and plays it."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterator, TextIO

from snakesladders.game import Game, GameType


class _Scanner:
    """Reads whitespace-separated integers and single characters from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._line = ""
        self._pos = 0

    def _fill(self) -> bool:
        while self._pos >= len(self._line):
            line = self._stream.readline()
            if not line:
                return False
            self._line, self._pos = line, 0
        return True

    def _skip_space(self) -> bool:
        while self._fill():
            if not self._line[self._pos].isspace():
                return True
            self._pos += 1
        return False

    def next_char(self) -> str | None:
        if not self._skip_space():
            return None
        char = self._line[self._pos]
        self._pos += 1
        return char

    def next_int(self) -> int:
        if not self._skip_space():
            raise ValueError("expected a number, reached end of input")
        start = self._pos
        if self._line[self._pos] in "+-":
            self._pos += 1
        while self._pos < len(self._line) and self._line[self._pos].isdigit():
            self._pos += 1
        text = self._line[start:self._pos]
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"expected a number, got {self._line[start:].split()[0]!r}") from None

    def chars(self) -> Iterator[str]:
        while (char := self.next_char()) is not None:
            yield char


def _ask(prompt: str) -> None:
    print(prompt, end="", flush=True)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play snakes and ladders.")
    parser.add_argument(
        "--random-seed", type=int, default=None, help="seed for the board and the die"
    )
    args = parser.parse_args(argv)
    rng = random.Random(args.random_seed)
    scanner = _Scanner(sys.stdin)

    print("Welcome to the Snakes and Ladders Game")
    _ask("Select the seed for the game (0 for default values, 1 to customize): ")
    try:
        choice = scanner.next_int()
        if choice == 0:
            Game(rng=rng).play_manual(scanner.chars())
            return 0

        print("Insert the parameters for the game: ")
        values = {}
        for label in ("Tiles", "Snakes", "Ladders", "Players", "Turns", "Penalty", "Reward"):
            _ask(f"{label}: ")
            values[label.lower()] = scanner.next_int()
        _ask("Game Type (A/M): ")
        type_char = scanner.next_char()
    except ValueError as error:
        print(f"\nError: {error}", file=sys.stderr)
        return 1

    if type_char not in {kind.value for kind in GameType}:
        return 0
    try:
        game = Game(
            tiles=values["tiles"],
            snakes=values["snakes"],
            ladders=values["ladders"],
            players=values["players"],
            turns=values["turns"],
            penalty=values["penalty"],
            reward=values["reward"],
            game_type=type_char,
            rng=rng,
        )
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    if game.game_type is GameType.MANUAL:
        game.play_manual(scanner.chars())
    else:
        game.play_automatic()
    return 0


if __name__ == "__main__":
    sys.exit(main())