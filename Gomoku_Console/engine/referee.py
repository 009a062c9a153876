"""Explain why a move would be rejected."""


def rejection_reason(board, row, col):
    """
    Return a short reason the move is illegal, or None if the board would accept it.
    Mirrors the checks done by Board.place so the driver can report them.
    """
    if not board.in_bounds(row, col):
        return "Move out of bounds"
    if not board.is_empty(row, col):
        return "Cell already occupied"
    return None
