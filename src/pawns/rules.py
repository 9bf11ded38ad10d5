"""
End of game checks.

Plain functions over a board: they only read it, so they can be asked as often as needed.
"""

from src.core.shared_types import Color
from src.pawns.board import Board
from src.pawns.coordinate import BOARD_DIMENSIONS
from src.pawns.moves import available_destinations

PROMOTION_ROWS = (1, BOARD_DIMENSIONS[0])


def has_promoted(board: Board) -> bool:
    """A pawn on the first or last rank wins the game on the spot (for whoever just moved)"""
    return any(
        not piece.is_empty
        for row in PROMOTION_ROWS
        for _, piece in board.row_pieces(row)
    )


def is_one_color_eliminated(board: Board) -> bool:
    """Only one color has pieces left"""
    return len({piece.color for piece in board.all_pieces()}) == 1


def is_stalemated(board: Board, color: Color) -> bool:
    """
    The player with `color` pieces cannot make any move.

    For every piece: generate the candidate destinations, then check each one for real with can_move.
    """
    for piece in (piece for piece in board.all_pieces() if piece.color == color):
        origin = board.locate(piece)
        for destination in available_destinations(piece, board, origin):
            if board.can_move(origin, destination):
                return False
    return True
