"""Turn management and end-of-game detection for one human-vs-computer session."""

import random
from enum import Enum

try:
    from .Board import Board
    from .Mark import DRAW_LABEL, Mark
    from .Player import RandomPlayer
    from .utils.logger import log_error
except ImportError:
    from Board import Board
    from Mark import DRAW_LABEL, Mark
    from Player import RandomPlayer
    from utils.logger import log_error


class SessionState(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class GameSession:
    def __init__(self, board_size=7, result_sink=None, computer=None, logger=None):
        self.board = Board(size=board_size)
        self.result_sink = result_sink
        self.computer = computer or RandomPlayer(Mark.SECOND)
        self.logger = logger
        self.reset()

    def reset(self):
        """Clear the board and start a new game with the human to move."""
        self.board.clear()
        self.current_player = Mark.FIRST
        self.state = SessionState.IN_PROGRESS
        self.winner = None
        self.winning_mark = None
        self.move_count = 0

    def is_game_over(self):
        return self.state is not SessionState.IN_PROGRESS

    @property
    def board_size(self):
        return self.board.size

    @property
    def last_move(self):
        return self.board.last_move

    def cell_at(self, row, col):
        return self.board.cell_at(row, col)

    def make_move(self, row, col):
        """
        Play (row, col) for the current player.
        Returns False, leaving everything untouched, if the game is over or the board refuses the move.
        """
        if self.is_game_over() or not self.board.place(row, col, self.current_player):
            return False
        self._after_move(row, col, self.current_player)
        return True

    def make_computer_move(self):
        """Let the computer pick an empty cell. Returns the move played, or None."""
        if self.is_game_over():
            return None
        move = self.computer.next_move(self.board)
        if move is not None and not self.board.is_empty(*move):
            # Refused cell; pick for the computer so its turn still ends.
            empty = self.board.empty_cells()
            move = random.choice(empty) if empty else None
        if move is None:
            # Nothing left to play; close the game instead of waiting forever.
            self._finish_draw()
            return None
        row, col = move
        self.board.place(row, col, Mark.SECOND)
        self._after_move(row, col, Mark.SECOND)
        return move

    def _after_move(self, row, col, mark):
        self.move_count += 1
        self._log(f"Move {self.move_count}: {mark.glyph} ({row + 1}, {col + 1})")

        if self.board.has_winning_line_through(row, col, mark):
            self.state = SessionState.WON
            self.winning_mark = mark
            self.winner = mark.label
            self._log(f"Winner: {self.winner}")
            self._report()
        elif self.board.is_full():
            self._finish_draw()
        else:
            self.current_player = mark.other()

    def _finish_draw(self):
        self.state = SessionState.DRAW
        self.winner = DRAW_LABEL
        self._log("Result: Draw (board full)")
        self._report()

    def _report(self):
        if self.result_sink is None:
            return
        try:
            self.result_sink.record_result(self.winner, self.board.size, self.move_count)
        except Exception as exc:
            # The game is already decided; a failed save must not undo that.
            log_error(f"Could not record result: {exc}")

    def _log(self, message):
        if self.logger:
            self.logger(message)
