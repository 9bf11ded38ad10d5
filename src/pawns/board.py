"""The Game board implements all rules that effect the `position` (the configuration of pawns on the board)"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Self

from src.core.exceptions import InvalidFENError, PieceNotFoundError
from src.core.shared_types import Color
from src.pawns.coordinate import BOARD_DIMENSIONS, Coordinate, all_coordinates
from src.pawns.fen import EMPTY_RUN_DIGITS, is_valid_position
from src.pawns.move_log import MoveLog, MoveRecord
from src.pawns.moves import can_move, en_passant_victim_square, is_en_passant
from src.pawns.pieces import EMPTY, HOME_RANK, Piece, PieceFactory

_LOGGER = logging.getLogger(__name__)

Initializer = Callable[[], dict[Coordinate, Piece]]


def starting_pawns() -> dict[Coordinate, Piece]:
    """Default set-up: a row of white pawns on rank 2 and a row of black pawns on rank 7"""
    factory = PieceFactory()
    return {
        Coordinate(HOME_RANK[color], column): factory.pawn(color)
        for color in (Color.WHITE, Color.BLACK)
        for column in range(1, BOARD_DIMENSIONS[1] + 1)
    }


@dataclass
class Board:
    """
    Every one of the 64 squares is always in `position`. Unoccupied squares hold EMPTY.

    The board also keeps the log of all moves made on it (the en passant rule needs it).
    """

    position: dict[Coordinate, Piece]
    log: MoveLog = field(default_factory=MoveLog)

    @classmethod
    def from_initializer(cls, initializer: Initializer) -> Self:
        """The initializer tells where the pieces stand. All other squares get filled up with EMPTY."""
        occupied = initializer()
        position = {square: occupied.get(square, EMPTY) for square in all_coordinates()}
        return cls(position)

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_initializer(starting_pawns)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board from a pawns-only position string (see fen.py)

        ex. starting position:
        8/pppppppp/8/8/8/8/PPPPPPPP/8
        means:
        * the 8th rank is empty
        * black pawns cover the 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        """
        if not is_valid_position(fen_str):
            raise InvalidFENError(f"Not a valid pawns-only position: {fen_str!r}")

        def _initializer() -> dict[Coordinate, Piece]:
            factory = PieceFactory()
            occupied: dict[Coordinate, Piece] = {}
            for rank_idx, fen_one_rank in enumerate(fen_str.split("/")):
                # read from top rank (8th) to bottom rank (1st)
                row = BOARD_DIMENSIONS[0] - rank_idx
                # ... but the first character is the a-file, so reads in normal direction
                column = 1
                for character in fen_one_rank:
                    if character in EMPTY_RUN_DIGITS:
                        column += int(character)
                    else:
                        occupied[Coordinate(row, column)] = factory.from_fen(character)
                        column += 1
            return occupied

        return cls.from_initializer(_initializer)

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._row_to_fen(row) for row in range(BOARD_DIMENSIONS[0], 0, -1)
        )

    def _row_to_fen(self, row: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for _, piece in self.row_pieces(row):
            if not piece.is_empty:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    # --- QUERIES ---
    def piece(self, coordinate: Coordinate) -> Piece:
        return self.position[coordinate]

    def is_empty(self, coordinate: Coordinate) -> bool:
        return self.piece(coordinate).is_empty

    def locate(self, piece: Piece) -> Coordinate:
        """Where does this very piece stand? Handles are unique, so there is at most one answer."""
        for square, placed in self.position.items():
            if placed == piece and not placed.is_empty:
                return square
        raise PieceNotFoundError(f"{piece} is not on the board.")

    def all_pieces(self) -> set[Piece]:
        return {piece for piece in self.position.values() if not piece.is_empty}

    def pieces_of(self, color: Color) -> list[tuple[Coordinate, Piece]]:
        return [
            (square, piece)
            for square, piece in self.position.items()
            if not piece.is_empty and piece.color == color
        ]

    def row_pieces(self, row: int) -> list[tuple[Coordinate, Piece]]:
        """All squares of a row from the a-file to the h-file"""
        squares = [
            Coordinate(row, column) for column in range(1, BOARD_DIMENSIONS[1] + 1)
        ]
        return [(square, self.piece(square)) for square in squares]

    def can_move(self, origin: Coordinate, destination: Coordinate) -> bool:
        """Ask the piece on origin, with this board's move log at hand"""
        return can_move(self.piece(origin), self, origin, destination, self.log)

    # --- UPDATES ---
    def place_piece(self, piece: Piece, coordinate: Coordinate) -> None:
        """Overwrite whatever stands there. No rules are checked."""
        self.position[coordinate] = piece

    def remove_piece(self, coordinate: Coordinate) -> None:
        self.position[coordinate] = EMPTY

    def apply_move(self, origin: Coordinate, destination: Coordinate) -> MoveRecord:
        """
        Update the position on the board and record the move.
        ---

        1. Move the piece, origin becomes empty
        2. If it was an en passant capture, remove the pawn that got taken

        NOTE legality is the caller's job (Game checks can_move before calling this).
        """
        moving_piece = self.piece(origin)
        # decide before the log gets the new entry: the victim's double step must still be the last move
        takes_en_passant = not moving_piece.is_empty and is_en_passant(
            moving_piece, self, origin, destination, self.log
        )

        self.place_piece(moving_piece, destination)
        self.remove_piece(origin)

        if takes_en_passant:
            victim_square = en_passant_victim_square(moving_piece, destination)
            _LOGGER.debug(
                "%s takes en passant on %s", moving_piece, victim_square.to_text()
            )
            self.remove_piece(victim_square)

        return self.log.add(moving_piece, origin, destination)
