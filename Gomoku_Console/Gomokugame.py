"""Console game loop: alternate human input and computer moves until the game ends."""

try:
    from .engine import referee
    from .Mark import Mark
except ImportError:
    from engine import referee
    from Mark import Mark


class Gomokugame:
    def __init__(self, session, human, view):
        self.session = session
        self.human = human
        self.view = view

    def play(self):
        """Run a single game. Returns the winner label, or None if the human quit."""
        session = self.session
        session.reset()
        self.view.show_board(session.board)

        while not session.is_game_over():
            if session.current_player is Mark.FIRST:
                if not self._human_turn():
                    self.view.show_message("Game abandoned.")
                    return None
            else:
                session.make_computer_move()
            self.view.show_board(session.board, session.last_move)

        self.view.show_result(session.winner)
        return session.winner

    def _human_turn(self):
        """Ask until the session accepts a move. False means the human quit."""
        while True:
            move = self.human.next_move(self.session.board)
            if move is None:
                return False
            row, col = move
            if self.session.make_move(row, col):
                return True
            reason = referee.rejection_reason(self.session.board, row, col) or "Move rejected"
            self.view.show_message(f"Invalid move: {reason}. Try again.")
