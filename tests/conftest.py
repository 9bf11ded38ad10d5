"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.core.shared_types import Color
from src.pawns.board import Board
from src.pawns.coordinate import Coordinate
from src.pawns.fen import EMPTY_POSITION
from src.pawns.pieces import PieceFactory

PawnLayout = dict[str, Color]


@pytest.fixture
def board_with_pawns() -> Callable[[PawnLayout], Board]:
    """Call the inner function with {square name: color}. Every pawn gets its own handle."""

    def _create_board(layout: PawnLayout) -> Board:
        board = Board.from_fen(EMPTY_POSITION)
        factory = PieceFactory()
        for square_name, color in layout.items():
            board.place_piece(factory.pawn(color), Coordinate.parse(square_name))
        return board

    return _create_board


@pytest.fixture
def starting_board() -> Board:
    return Board.starting_position()


class ScriptedConsole:
    """Stands in for input() / print(): replays the given lines, then behaves like a closed stdin."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = iter(lines)
        self.output: list[str] = []

    def read(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    def write(self, text: str) -> None:
        self.output.append(text)


@pytest.fixture
def scripted_console() -> Callable[[list[str]], ScriptedConsole]:
    return ScriptedConsole
