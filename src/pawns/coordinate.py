"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from src.core.exceptions import InvalidCoordinateError

# Board is always 8x8: (rows, columns)
BOARD_DIMENSIONS = (8, 8)
COORDINATE_PATTERN = re.compile(r"[a-h][1-8]")


@dataclass(frozen=True)
class Coordinate:
    row: int
    column: int

    @classmethod
    def parse(cls, text: str) -> Coordinate:
        """Square name: 'a1' - 'h8' get converted to (row 1, column 1) - (row 8, column 8)"""
        if not COORDINATE_PATTERN.fullmatch(text):
            raise InvalidCoordinateError(
                f"Cannot interpret {text!r} as a square. Expected format: {COORDINATE_PATTERN.pattern}"
            )
        column = ord(text[0]) - ord("a") + 1
        row = int(text[1])
        return cls(row, column)

    def to_text(self) -> str:
        return f"{chr(self.column + ord('a') - 1)}{self.row}"

    def is_within_bounds(self) -> bool:
        return (1 <= self.row <= BOARD_DIMENSIONS[0]) and (
            1 <= self.column <= BOARD_DIMENSIONS[1]
        )

    def shifted(self, d_row: int, d_column: int) -> Coordinate:
        """Neighbouring square. NOTE: may fall off the board, check with is_within_bounds()"""
        return Coordinate(self.row + d_row, self.column + d_column)

    def __str__(self) -> str:
        return self.to_text()


def all_coordinates() -> list[Coordinate]:
    """Every square of the board, row by row starting at a1"""
    num_rows, num_columns = BOARD_DIMENSIONS
    return [
        Coordinate(row, column)
        for row in range(1, num_rows + 1)
        for column in range(1, num_columns + 1)
    ]
