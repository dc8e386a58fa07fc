"""Snakes and ladders: board, tiles, dice, players and a console game."""

__version__ = "0.1.0"