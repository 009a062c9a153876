"""Gomoku_Console package exports."""

from .Mark import Mark, DRAW_LABEL, EMPTY_GLYPH
from .Board import Board
from .GameSession import GameSession, SessionState
from .Gomokugame import Gomokugame
from .Player import Player, HumanPlayer, RandomPlayer

# Subpackages for move checks, storage, console views, and helpers
from . import engine, storage, ui, utils

__all__ = [
    "Mark",
    "DRAW_LABEL",
    "EMPTY_GLYPH",
    "Board",
    "GameSession",
    "SessionState",
    "Gomokugame",
    "Player",
    "HumanPlayer",
    "RandomPlayer",
    "engine",
    "storage",
    "ui",
    "utils",
]
