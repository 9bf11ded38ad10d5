"""
Text picture of the board, white at the bottom:

  +---+---+---+---+---+---+---+---+
8 |   |   |   |   |   |   |   |   |
  +---+---+---+---+---+---+---+---+
7 | B | B | B | B | B | B | B | B |
...
  +---+---+---+---+---+---+---+---+
    a   b   c   d   e   f   g   h
"""

from string import ascii_lowercase

from src.core.shared_types import Color
from src.pawns.board import Board
from src.pawns.coordinate import BOARD_DIMENSIONS
from src.pawns.pieces import Piece

PIECE_SYMBOLS: dict[Color, str] = {Color.WHITE: "W", Color.BLACK: "B"}


def render_board(board: Board) -> str:
    num_rows, num_columns = BOARD_DIMENSIONS
    border = "  " + "+---" * num_columns + "+"

    lines: list[str] = []
    for row in range(num_rows, 0, -1):
        cells = "".join(f"| {_symbol(piece)} " for _, piece in board.row_pieces(row))
        lines.append(border)
        lines.append(f"{row} {cells}|")
    lines.append(border)
    lines.append(_column_header(num_columns))
    return "\n".join(lines) + "\n"


def _symbol(piece: Piece) -> str:
    if piece.is_empty or piece.color is None:
        return " "
    return PIECE_SYMBOLS[piece.color]


def _column_header(num_columns: int) -> str:
    return ("    " + "   ".join(ascii_lowercase[:num_columns])).rstrip()
