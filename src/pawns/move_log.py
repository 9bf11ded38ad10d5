"""
Record of the moves played so far.

Only the en passant rule needs it ("did that pawn just make its first move, and was it a double step?")
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from src.pawns.coordinate import Coordinate
from src.pawns.pieces import Piece

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    move_id: int
    piece: Piece
    origin: Coordinate
    destination: Coordinate

    @property
    def rows_moved(self) -> int:
        return abs(self.destination.row - self.origin.row)

    def to_text(self) -> str:
        """Same notation as the player types in: 'e2e4'"""
        return f"{self.origin.to_text()}{self.destination.to_text()}"


class MoveLog:
    """Append-only. Ids start at 1 and go up by one per move, in the order the moves were played."""

    def __init__(self) -> None:
        self._records: list[MoveRecord] = []

    def add(
        self, piece: Piece, origin: Coordinate, destination: Coordinate
    ) -> MoveRecord:
        record = MoveRecord(len(self._records) + 1, piece, origin, destination)
        self._records.append(record)
        _LOGGER.debug("Move %d: %s %s", record.move_id, piece, record.to_text())
        return record

    def moves_of(self, piece: Piece) -> list[MoveRecord]:
        """All moves made by this particular piece (matched by handle), oldest first"""
        return [record for record in self._records if record.piece == piece]

    @property
    def latest(self) -> Optional[MoveRecord]:
        return self._records[-1] if self._records else None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[MoveRecord]:
        return iter(self._records)
