"""Console rendering for the board, menu and game history."""

from __future__ import annotations

try:
    from ..Mark import DRAW_LABEL, glyph_of
except ImportError:
    from Mark import DRAW_LABEL, glyph_of

QUIT_WORDS = {"q", "quit", "exit"}


def parse_coordinates(raw: str) -> tuple[int, int] | None:
    """Parse a 1-based 'row col' pair into 0-based coordinates.

    Returns None for a quit word. Range checking is left to the board.
    """
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None
    parts = s.split()
    if len(parts) != 2:
        raise ValueError("Please enter two numbers separated by space.")
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ValueError("Please enter valid numbers.") from exc
    return row - 1, col - 1


def render_board(board, last_move: tuple[int, int] | None = None) -> str:
    size = board.size
    lines = ["   " + "".join(f"{i:2d} " for i in range(1, size + 1))]
    lines.append("   " + "---" * size)
    for row in range(size):
        parts = []
        for col in range(size):
            glyph = glyph_of(board.cell_at(row, col))
            if (row, col) == last_move:
                parts.append(f"[{glyph}]")
            else:
                parts.append(f" {glyph} ")
        lines.append(f"{row + 1:2d}|" + "".join(parts))
    return "\n".join(lines) + "\n"


class ConsoleView:
    def __init__(self, output_fn=print):
        self.output_fn = output_fn

    def show_board(self, board, last_move=None):
        self.output_fn(render_board(board, last_move))

    def show_menu(self):
        self.output_fn("\n--- Gomoku Menu ---")
        self.output_fn("1. New Game")
        self.output_fn("2. View Game History")
        self.output_fn("3. Exit")

    def show_history(self, entries):
        self.output_fn("\n--- Game History ---")
        if not entries:
            self.output_fn("No game history found.")
        for entry in entries:
            self.output_fn(entry)
        self.output_fn("------------------\n")

    def show_result(self, winner):
        self.output_fn("Game Over!")
        if winner == DRAW_LABEL:
            self.output_fn("It's a draw!")
        else:
            self.output_fn(f"Winner: {winner}")

    def show_message(self, message):
        self.output_fn(message)
