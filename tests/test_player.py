import pytest

from snakesladders.player import Player


def test_defaults():
    player = Player()
    assert (player.number, player.tile) == (1, 1)


def test_new_player_starts_on_first_tile():
    assert Player(4).tile == 1


def test_move_within_range():
    player = Player(2)
    player.move_to(17, 30)
    assert player.tile == 17


@pytest.mark.parametrize("target", [0, -5])
def test_move_below_start_clamps_to_first_tile(target):
    player = Player()
    player.move_to(target, 30)
    assert player.tile == 1


def test_move_past_end_clamps_to_last_tile():
    player = Player()
    player.move_to(45, 30)
    assert player.tile == 30


def test_move_to_exact_end():
    player = Player()
    player.move_to(30, 30)
    assert player.tile == 30


def test_draw_shows_number_and_tile():
    player = Player(3)
    player.move_to(7, 30)
    assert player.draw() == "3 7"


def test_draw_after_clamp():
    player = Player(2)
    player.move_to(99, 10)
    assert player.draw().split() == ["2", "10"]