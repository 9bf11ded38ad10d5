"""
Pawns-only position strings.

We borrow the first field of a FEN string (the piece placement) and only allow pawns in it:
* ranks are written from the 8th down to the 1st, separated by slashes
* 'P' is a white pawn, 'p' a black pawn
* a digit denotes that many empty squares in a row

ex) the starting position of this variant: 8/pppppppp/8/8/8/8/PPPPPPPP/8
"""

from src.pawns.coordinate import BOARD_DIMENSIONS

STARTING_POSITION = "8/pppppppp/8/8/8/8/PPPPPPPP/8"
EMPTY_POSITION = "/".join(["8"] * BOARD_DIMENSIONS[0])
PAWN_CHARACTERS = {"P", "p"}
# counts of empty squares: ASCII only (str.isdigit also accepts e.g. "²")
EMPTY_RUN_DIGITS = set("12345678")


def is_valid_position(position: str) -> bool:
    """Check the shape: 8 ranks, each adding up to 8 squares, and nothing but pawns."""
    num_rows, num_columns = BOARD_DIMENSIONS
    rank_fens = position.split("/")
    if len(rank_fens) != num_rows:
        return False

    for rank_fen in rank_fens:
        column_count = 0
        for character in rank_fen:
            # make sure every character is valid
            if character in EMPTY_RUN_DIGITS:
                column_count += int(character)
            elif character in PAWN_CHARACTERS:
                column_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if column_count != num_columns:
            return False
    return True
