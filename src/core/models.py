"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The console layer (higher) and the domain layer (lower) only exchange this model through the Service
(Decouples the console specific request/response models from the domain objects like Board and Game)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PieceColor = str
PlayerName = str


@dataclass
class GameModel:
    """Transport-safe snapshot of a pawns-only game used between Console, Service, and Game layers."""

    current_position: str
    moves: list[str]
    registered_players: dict[PieceColor, PlayerName]
    status: str
    color_to_move: Optional[PieceColor] = None
    winner: Optional[PlayerName] = None
    winning_color: Optional[PieceColor] = None
