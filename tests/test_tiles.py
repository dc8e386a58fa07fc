import pytest

from snakesladders.tiles import LadderTile, SnakeTile, Tile, TileKind


@pytest.mark.parametrize("position", [1, 5, 30])
def test_normal_tile_leaves_position(position):
    assert Tile().shift(position) == position


def test_default_tile_is_normal():
    assert Tile().kind is TileKind.NORMAL


def test_tile_accepts_symbol():
    assert Tile("S").kind is TileKind.SNAKE


def test_tile_rejects_unknown_symbol():
    with pytest.raises(ValueError):
        Tile("X")


def test_snake_kind_and_symbol():
    tile = SnakeTile(penalty=3)
    assert tile.kind is TileKind.SNAKE
    assert str(tile) == "S"


def test_ladder_kind_and_symbol():
    tile = LadderTile(reward=3)
    assert tile.kind is TileKind.LADDER
    assert str(tile) == "L"


def test_snake_moves_back():
    assert SnakeTile(penalty=3).shift(10) == 7


def test_ladder_moves_forward():
    assert LadderTile(reward=3).shift(10) > 10


def test_snake_uses_absolute_penalty():
    assert SnakeTile(penalty=-4).shift(12) == SnakeTile(penalty=4).shift(12)


def test_ladder_uses_absolute_reward():
    assert LadderTile(reward=-4).shift(12) == LadderTile(reward=4).shift(12)


def test_zero_modifiers_leave_position():
    assert SnakeTile().shift(9) == 9
    assert LadderTile().shift(9) == 9


def test_snake_and_ladder_cancel():
    snake = SnakeTile(penalty=5)
    ladder = LadderTile(reward=5)
    assert ladder.shift(snake.shift(20)) == 20