"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from dataclasses import dataclass

# This variant is played on 8 rows and 10 columns. Row 0 is the top row (black's side), row 7 is white's back rank.
BOARD_DIMENSIONS = (8, 10)


@dataclass(frozen=True, order=True)
class Square:
    row: int
    col: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_col: int) -> "Square":
        return Square(self.row + d_row, self.col + d_col)
