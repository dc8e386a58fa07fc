# snakesladders

A console game of snakes and ladders for any number of players.

The board is a row of tiles. Some tiles are snakes and some are ladders. They
are placed at random when the game is created. Each turn, every player in
order rolls a six-sided die and moves forward. A player can never move past
the last tile. A player who lands on a snake goes back by the penalty, but
never below tile 1. A player who lands on a ladder goes forward by the reward.
The first player to reach the last tile wins. If nobody has won when the turn
limit is reached, the game ends with no winner.

## Installation

```
pip install .
```

## Playing

```
snakesladders
snakesladders --random-seed 42
```

`--random-seed` seeds the random generator, which places the snakes and
ladders and rolls the die. The same seed gives the same game.

The game first asks you to make a choice:

- `0` plays the default game. The board has 30 tiles, 3 snakes and 3 ladders.
  There are 2 players and 30 turns. The penalty and the reward are both 3.
  You play it manually.
- `1` asks for each setting in turn: tiles, snakes, ladders, players, turns,
  penalty, reward, and game type. The game type is `M` for manual or `A` for
  automatic. If you give any other game type, the program exits without
  playing.

The settings are read as whitespace-separated values. If a setting is not a
number, or the snakes and ladders do not fit on the board, the program prints
an error and exits with status 1.

When the game starts, it prints the board, one letter per tile. In a manual
game, enter `C` to play the next turn or `E` to end the game. The game reads
your input one character at a time, so `CCC` plays three turns. Any other
character prints a reminder of the valid options. The game also ends when the
input runs out. An automatic game plays every turn without stopping.

Each move is printed like this:

```
1 4 dado: 3 L (+3) Now at tile 10
```

That line shows the player number, the starting tile and the die roll. Next
comes the kind of tile landed on: `N` for normal, `S` for snake, `L` for
ladder. A reward appears as `(+n)` and a penalty as `(-n)`. The line ends
with the tile the player finished on.

## Using it from Python

```python
import io
import random

from snakesladders.game import Game, GameType

out = io.StringIO()
game = Game(tiles=20, players=3, game_type=GameType.AUTOMATIC,
            rng=random.Random(1), out=out)
winner = game.play_automatic()   # a player's number, or None
for turn in game.history:
    print(turn)                  # same format as the printed moves
```

`Game.play_manual(options)` takes an iterable of the options a player would
type, such as `"C"` or `"E"`. It returns the winner's number, or `None`.

These are the other parts of the package:

- `snakesladders.board.Board` holds the tiles. `draw()` returns the tiles as
  text, and `tile_at(index)` returns one tile. A bad index raises
  `IndexError`.
- `snakesladders.tiles` has the tile types: `Tile`, `SnakeTile`, `LadderTile`
  and `TileKind`. Each type's `shift(position)` gives the position after
  landing on it.
- `snakesladders.dice.Dice` is a die. You set the number of sides when you
  create it.
- `snakesladders.player.Player` is a player. `move_to(tile, max_tile)` moves
  the player and keeps the position between 1 and the last tile.
- `snakesladders.turn.Turn` records one move. `verbose()` returns the move
  with the reward and penalty spelled out.