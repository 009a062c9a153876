"""Player controllers for the human and the computer opponent."""

import random

try:
    from .ui.console_view import parse_coordinates
except ImportError:
    from ui.console_view import parse_coordinates


class Player:
    def __init__(self, mark):
        self.mark = mark

    def next_move(self, board):
        """Return (row, col) for the next move, or None if there is none."""
        raise NotImplementedError


class HumanPlayer(Player):
    PROMPT = "Enter row and column (e.g., '3 4'): "

    def __init__(self, mark, input_fn=input, output_fn=print):
        super().__init__(mark)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def next_move(self, board):
        """Text-input player; re-prompts until it gets two numbers or a quit word."""
        while True:
            raw = self.input_fn(self.PROMPT)
            try:
                return parse_coordinates(raw)
            except ValueError as exc:
                self.output_fn(str(exc))


class RandomPlayer(Player):
    """Uniform random choice among the currently empty cells."""

    def __init__(self, mark, rng=None):
        super().__init__(mark)
        self.rng = rng or random

    def next_move(self, board):
        empty = board.empty_cells()
        if not empty:
            return None
        return self.rng.choice(empty)
