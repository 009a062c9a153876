"""Coordinate parsing, board rendering, and text-input players."""

import random

import pytest

from Gomoku_Console.Board import Board
from Gomoku_Console.Mark import Mark, glyph_of
from Gomoku_Console.Player import HumanPlayer, RandomPlayer
from Gomoku_Console.ui.console_view import ConsoleView, parse_coordinates, render_board


def test_parse_coordinates_is_one_based():
    assert parse_coordinates(" 3   4 ") == (2, 3)
    assert parse_coordinates("0 0") == (-1, -1)


@pytest.mark.parametrize("raw", ["q", "QUIT", " exit "])
def test_parse_quit_words(raw):
    assert parse_coordinates(raw) is None


def test_parse_wrong_token_count():
    with pytest.raises(ValueError, match="two numbers"):
        parse_coordinates("3")
    with pytest.raises(ValueError, match="two numbers"):
        parse_coordinates("1 2 3")


def test_parse_non_numeric():
    with pytest.raises(ValueError, match="valid numbers"):
        parse_coordinates("a b")


def test_glyphs():
    assert glyph_of(None) == " "
    assert glyph_of(Mark.FIRST) == "X"
    assert glyph_of(Mark.SECOND) == "O"
    assert Mark.FIRST.other() is Mark.SECOND
    assert Mark.SECOND.label == "Computer"


def test_render_board_layout_and_last_move():
    b = Board(size=3)
    b.place(0, 0, Mark.FIRST)
    b.place(2, 1, Mark.SECOND)
    text = render_board(b, last_move=(2, 1))
    assert text.splitlines() == [
        "    1  2  3 ",
        "   ---------",
        " 1| X       ",
        " 2|         ",
        " 3|   [O]   ",
    ]


def test_show_history_empty_and_filled():
    out = []
    view = ConsoleView(output_fn=out.append)
    view.show_history([])
    assert "No game history found." in out
    out.clear()
    view.show_history(["Winner: Human | Board: 7x7 | Moves: 9 | now"])
    assert "Winner: Human | Board: 7x7 | Moves: 9 | now" in out
    assert "No game history found." not in out


def test_human_player_reprompts_on_bad_input():
    lines = iter(["a b", "1", "2 5"])
    out = []
    human = HumanPlayer(Mark.FIRST, input_fn=lambda prompt: next(lines), output_fn=out.append)
    assert human.next_move(Board(size=7)) == (1, 4)
    assert out == ["Please enter valid numbers.", "Please enter two numbers separated by space."]


def test_random_player_picks_only_empty_cells():
    b = Board(size=3)
    for r in range(3):
        for c in range(3):
            if (r, c) != (1, 2):
                b.place(r, c, Mark.FIRST)
    player = RandomPlayer(Mark.SECOND, rng=random.Random(7))
    assert player.next_move(b) == (1, 2)


def test_random_player_full_board_returns_none():
    b = Board(size=1)
    b.place(0, 0, Mark.FIRST)
    assert RandomPlayer(Mark.SECOND).next_move(b) is None


def test_random_player_covers_every_empty_cell():
    b = Board(size=3)
    player = RandomPlayer(Mark.SECOND, rng=random.Random(1))
    seen = {player.next_move(b) for _ in range(500)}
    assert seen == set(b.empty_cells())
