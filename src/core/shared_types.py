"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    PROMOTION = "won by promotion"
    ELIMINATION = "won by elimination"
    STALEMATE = "stalemate"
    ABORTED = "aborted"


# Empty squares have no color: pieces use Optional[Color] instead of an extra NONE member.
class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        """White moves UP the board (increasing row), black moves DOWN"""
        return 1 if self == Color.WHITE else -1
