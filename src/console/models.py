"""Requests and Response models"""

from typing import Optional, Self

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidCoordinateError, InvalidRequestError
from src.core.shared_types import Color, Status
from src.pawns.coordinate import Coordinate
from src.pawns.fen import is_valid_position
from src.pawns.moves import Move

PieceColor = str
PlayerName = str


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    white_player: str
    black_player: str
    starting_position: Optional[str] = None

    @field_validator("white_player", "black_player")
    @classmethod
    def validate_player_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise InvalidRequestError("Player name cannot be empty.")
        return name

    @field_validator("starting_position")
    @classmethod
    def validate_starting_position(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        if not is_valid_position(value.strip()):
            raise InvalidRequestError(
                f"Cannot use {value!r} as starting position. Expected 8 ranks of 'P', 'p' and digits, like 8/pppppppp/8/8/8/8/PPPPPPPP/8."
            )
        return value.strip()


class MoveRequest(BaseModel):
    player_name: str
    from_square: str
    to_square: str

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        try:
            Coordinate.parse(value)
        except InvalidCoordinateError as exc:
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            ) from exc
        return value

    @classmethod
    def from_text(cls, player_name: str, text: str) -> Self:
        """What the player typed, e.g. ' E2e4 '. Case and surrounding whitespace do not matter."""
        move_text = text.strip().lower()
        if len(move_text) != 4:
            raise InvalidRequestError(
                f"Cannot interpret {text!r} as a move. Expected two squares, like 'e2e4'."
            )
        return cls(
            player_name=player_name, from_square=move_text[:2], to_square=move_text[2:]
        )

    def to_move(self) -> Move:
        return Move.from_text(f"{self.from_square}{self.to_square}")


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    players: dict[PieceColor, PlayerName]
    position: str
    move_history: list[str]
    status: Status
    color_to_move: Optional[Color] = None
    winner: Optional[PlayerName] = None
    winning_color: Optional[Color] = None


class LegalMovesResponse(BaseModel):
    player_name: str
    color: Color
    legal_moves: list[str]
