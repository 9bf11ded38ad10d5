"""Defines the pieces: pawns, and the marker for an empty square"""

from dataclasses import dataclass
from enum import Enum, auto
from itertools import count
from typing import Optional, Self

from src.core.shared_types import Color


class PieceType(Enum):
    EMPTY = auto()
    PAWN = auto()


# Home rank: where the pawns start (and the only rank a pawn may advance two squares from)
HOME_RANK: dict[Color, int] = {Color.WHITE: 2, Color.BLACK: 7}

# A pawn on this rank can take en passant
EN_PASSANT_RANK: dict[Color, int] = {Color.WHITE: 5, Color.BLACK: 4}


@dataclass(frozen=True)
class Piece:
    """
    A piece is identified by its handle, not just by type and color.
    ---

    Two white pawns are otherwise indistinguishable, but the move log must be able to tell which
    one of them made a move. Handles are handed out by a PieceFactory and never reused on a board.
    The empty square has handle 0 and no color.
    """

    type: PieceType
    color: Optional[Color] = None
    handle: int = 0

    @classmethod
    def from_fen(cls, character: str, handle: int) -> Self:
        # upper case: White pawn, lower case: Black pawn
        color = Color.WHITE if character.isupper() else Color.BLACK
        return cls(PieceType.PAWN, color, handle)

    def to_fen(self) -> str:
        return "P" if self.color == Color.WHITE else "p"

    @property
    def is_empty(self) -> bool:
        return self.type == PieceType.EMPTY

    def is_opponent_of(self, color: Color) -> bool:
        return not self.is_empty and self.color != color

    def __str__(self) -> str:
        if self.is_empty:
            return "empty"
        return f"{self.color} {self.type.name.lower()} #{self.handle}"


EMPTY = Piece(PieceType.EMPTY)


class PieceFactory:
    """Hands out pawns with fresh handles (1, 2, 3, ...)"""

    def __init__(self) -> None:
        self._handles = count(1)

    def pawn(self, color: Color) -> Piece:
        return Piece(PieceType.PAWN, color, next(self._handles))

    def from_fen(self, character: str) -> Piece:
        return Piece.from_fen(character, next(self._handles))
