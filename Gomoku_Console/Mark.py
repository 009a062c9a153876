"""Player marks and their display glyphs."""

from enum import Enum

EMPTY_GLYPH = " "
DRAW_LABEL = "Draw"


class Mark(Enum):
    # Human moves first as X, computer answers as O
    FIRST = "X"
    SECOND = "O"

    @property
    def glyph(self):
        return self.value

    @property
    def label(self):
        return "Human" if self is Mark.FIRST else "Computer"

    def other(self):
        return Mark.SECOND if self is Mark.FIRST else Mark.FIRST


def glyph_of(cell):
    """Render a cell (None or Mark) as a single character."""
    return EMPTY_GLYPH if cell is None else cell.glyph
