"""Board state container and five-in-a-row checking."""

try:
    from .Mark import Mark
except ImportError:
    from Mark import Mark

WIN_LENGTH = 5
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


class Board:
    def __init__(self, size=7):
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"board size must be a positive integer, got {size!r}")
        # Cells hold None (empty) or a Mark
        self.size = size
        self.cells = [[None] * size for _ in range(size)]
        self.move_count = 0
        self.history = []

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] is None

    def place(self, row, col, mark):
        """Place a mark; return False if out of bounds or occupied."""
        if not isinstance(mark, Mark):
            raise ValueError(f"mark must be a Mark, got {mark!r}")
        if not self.is_empty(row, col):
            return False
        self.cells[row][col] = mark
        self.move_count += 1
        self.history.append((row, col))
        return True

    def is_full(self):
        return self.move_count == self.size * self.size

    def cell_at(self, row, col):
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside a {self.size}x{self.size} board")
        return self.cells[row][col]

    def empty_cells(self):
        """Return empty coordinates in row-major order."""
        return [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if self.cells[row][col] is None
        ]

    @property
    def last_move(self):
        return self.history[-1] if self.history else None

    def clear(self):
        for row in self.cells:
            for col in range(self.size):
                row[col] = None
        self.move_count = 0
        self.history.clear()

    def has_winning_line_through(self, row, col, mark):
        """Check for 5+ marks in any direction through (row, col).

        Only lines containing (row, col) are inspected, so call this with the
        coordinates of the placement that was just made.
        """
        for dr, dc in DIRECTIONS:
            forward = self._count_dir(row, col, dr, dc, mark)
            backward = self._count_dir(row, col, -dr, -dc, mark)
            if 1 + forward + backward >= WIN_LENGTH:
                return True
        return False

    def _count_dir(self, row, col, dr, dc, mark):
        """Count contiguous marks from (row, col) (exclusive) in (dr, dc)."""
        count = 0
        r, c = row + dr, col + dc
        while self.in_bounds(r, c) and self.cells[r][c] == mark:
            count += 1
            r += dr
            c += dc
        return count
