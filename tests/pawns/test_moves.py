"""Unit tests for /src/pawns/moves.py"""

from typing import Callable

import pytest

from src.core.exceptions import InvalidCoordinateError, OperationOnEmptyError
from src.core.shared_types import Color
from src.pawns.board import Board
from src.pawns.coordinate import Coordinate
from src.pawns.moves import (
    Direction,
    Move,
    available_capture_directions,
    available_destinations,
    available_move_directions,
    can_move,
    is_en_passant,
    pawn_track,
)
from src.pawns.pieces import EMPTY, PieceFactory

BoardFactory = Callable[[dict[str, Color]], Board]


def sq(name: str) -> Coordinate:
    return Coordinate.parse(name)


def legal(board: Board, origin: str, destination: str) -> bool:
    """Ask the piece on origin, using the board's own move log"""
    piece = board.piece(sq(origin))
    return can_move(piece, board, sq(origin), sq(destination), board.log)


# --- MOVE NOTATION ---
@pytest.mark.parametrize(
    "text, origin, destination",
    [("e2e4", "e2", "e4"), ("d7d5", "d7", "d5"), ("e5d6", "e5", "d6")],
)
def test_creating_move_from_text(text: str, origin: str, destination: str) -> None:
    move = Move.from_text(text)
    assert move.origin == sq(origin)
    assert move.destination == sq(destination)
    assert move.to_text() == text


@pytest.mark.parametrize("text", ["e2", "e2e", "e2e4e", "e2x4", "i2e4", "e0e4", ""])
def test_invalid_move_text(text: str) -> None:
    with pytest.raises(InvalidCoordinateError):
        _ = Move.from_text(text)


# --- DIRECTION SETS ---
def test_pawn_move_directions() -> None:
    pawn = PieceFactory().pawn(Color.WHITE)
    assert available_move_directions(pawn) == [(Direction.FORWARD, 2)]


def test_pawn_capture_directions() -> None:
    """Left first, then right"""
    pawn = PieceFactory().pawn(Color.BLACK)
    assert available_capture_directions(pawn) == [
        (Direction.DIAGONAL_FORWARD_LEFT, 1),
        (Direction.DIAGONAL_FORWARD_RIGHT, 1),
    ]


def test_empty_square_has_no_directions() -> None:
    with pytest.raises(OperationOnEmptyError):
        available_move_directions(EMPTY)
    with pytest.raises(OperationOnEmptyError):
        available_capture_directions(EMPTY)


def test_empty_square_cannot_be_asked_to_move(starting_board: Board) -> None:
    """Asking an empty square is a programming error, not a 'no'"""
    with pytest.raises(OperationOnEmptyError):
        can_move(EMPTY, starting_board, sq("e4"), sq("e5"), starting_board.log)
    with pytest.raises(OperationOnEmptyError):
        available_destinations(EMPTY, starting_board, sq("e4"))


# --- PAWN TRACK ---
def test_pawn_track_white() -> None:
    pawn = PieceFactory().pawn(Color.WHITE)
    assert pawn_track(pawn, sq("e2"), sq("e4")) == [sq("e3"), sq("e4")]
    assert pawn_track(pawn, sq("e2"), sq("e3")) == [sq("e3")]


def test_pawn_track_black() -> None:
    pawn = PieceFactory().pawn(Color.BLACK)
    assert pawn_track(pawn, sq("d7"), sq("d5")) == [sq("d6"), sq("d5")]


@pytest.mark.parametrize(
    "color, origin, destination",
    [
        (Color.WHITE, "e4", "e3"),  # backwards
        (Color.BLACK, "d5", "d6"),  # backwards
        (Color.WHITE, "e4", "f5"),  # other column
        (Color.WHITE, "e4", "e4"),  # not moving
    ],
)
def test_pawn_track_impossible(color: Color, origin: str, destination: str) -> None:
    pawn = PieceFactory().pawn(color)
    assert pawn_track(pawn, sq(origin), sq(destination)) == []


# --- PLAIN ADVANCE ---
@pytest.mark.parametrize("destination", ["e3", "e4"])
def test_white_pawn_advance_from_home_rank(
    board_with_pawns: BoardFactory, destination: str
) -> None:
    board = board_with_pawns({"e2": Color.WHITE})
    assert legal(board, "e2", destination)


@pytest.mark.parametrize("destination", ["d6", "d5"])
def test_black_pawn_advance_from_home_rank(
    board_with_pawns: BoardFactory, destination: str
) -> None:
    board = board_with_pawns({"d7": Color.BLACK})
    assert legal(board, "d7", destination)


def test_no_double_step_after_leaving_home_rank(board_with_pawns: BoardFactory) -> None:
    board = board_with_pawns({"e3": Color.WHITE, "d6": Color.BLACK})
    assert legal(board, "e3", "e4")
    assert not legal(board, "e3", "e5")
    assert legal(board, "d6", "d5")
    assert not legal(board, "d6", "d4")


def test_no_triple_step(board_with_pawns: BoardFactory) -> None:
    board = board_with_pawns({"e2": Color.WHITE})
    assert not legal(board, "e2", "e5")


@pytest.mark.parametrize("blocker", ["e3", "e4"])
@pytest.mark.parametrize("blocker_color", [Color.WHITE, Color.BLACK])
def test_double_step_blocked(
    board_with_pawns: BoardFactory, blocker: str, blocker_color: Color
) -> None:
    """Cannot jump over a piece, and cannot land on one"""
    board = board_with_pawns({"e2": Color.WHITE, blocker: blocker_color})
    assert not legal(board, "e2", "e4")


@pytest.mark.parametrize("blocker_color", [Color.WHITE, Color.BLACK])
def test_single_step_blocked(board_with_pawns: BoardFactory, blocker_color: Color) -> None:
    """e4 -> e5 with anything on e5: no straight move, and no capture straight ahead either"""
    board = board_with_pawns({"e4": Color.WHITE, "e5": blocker_color})
    assert not legal(board, "e4", "e5")


def test_no_backward_or_sideways_moves(board_with_pawns: BoardFactory) -> None:
    board = board_with_pawns({"e4": Color.WHITE, "d5": Color.BLACK})
    assert not legal(board, "e4", "e3")
    assert not legal(board, "e4", "f4")
    assert not legal(board, "e4", "e4")
    assert not legal(board, "d5", "d6")
    assert not legal(board, "d5", "c5")


def test_no_move_off_the_board(board_with_pawns: BoardFactory) -> None:
    board = board_with_pawns({"e8": Color.WHITE, "d1": Color.BLACK})
    assert not can_move(board.piece(sq("e8")), board, sq("e8"), Coordinate(9, 5), board.log)
    assert not can_move(board.piece(sq("d1")), board, sq("d1"), Coordinate(0, 4), board.log)


# --- CAPTURES ---
@pytest.mark.parametrize("target", ["d5", "f5"])
def test_white_pawn_takes(board_with_pawns: BoardFactory, target: str) -> None:
    board = board_with_pawns({"e4": Color.WHITE, target: Color.BLACK})
    assert legal(board, "e4", target)


@pytest.mark.parametrize("target", ["d4", "f4"])
def test_black_pawn_takes(board_with_pawns: BoardFactory, target: str) -> None:
    board = board_with_pawns({"e5": Color.BLACK, target: Color.WHITE})
    assert legal(board, "e5", target)


def test_no_capture_of_own_pawn(board_with_pawns: BoardFactory) -> None:
    board = board_with_pawns({"e4": Color.WHITE, "f5": Color.WHITE})
    assert not legal(board, "e4", "f5")


def test_no_diagonal_move_onto_empty_square(board_with_pawns: BoardFactory) -> None:
    board = board_with_pawns({"e4": Color.WHITE})
    assert not legal(board, "e4", "d5")
    assert not legal(board, "e4", "f5")


def test_no_backward_capture(board_with_pawns: BoardFactory) -> None:
    board = board_with_pawns({"e4": Color.WHITE, "d3": Color.BLACK, "f3": Color.BLACK})
    assert not legal(board, "e4", "d3")
    assert not legal(board, "e4", "f3")


def test_no_capture_two_squares_away(board_with_pawns: BoardFactory) -> None:
    board = board_with_pawns({"e4": Color.WHITE, "g6": Color.BLACK})
    assert not legal(board, "e4", "g6")


def test_capture_on_the_edge(board_with_pawns: BoardFactory) -> None:
    """a-file pawn only has one diagonal"""
    board = board_with_pawns({"a4": Color.WHITE, "b5": Color.BLACK})
    assert legal(board, "a4", "b5")


# --- EN PASSANT ---
def test_white_en_passant(board_with_pawns: BoardFactory) -> None:
    """Black d7-d5 passes the white pawn on e5. White may take on d6 right away."""
    board = board_with_pawns({"e5": Color.WHITE, "d7": Color.BLACK})
    board.apply_move(sq("d7"), sq("d5"))

    pawn = board.piece(sq("e5"))
    assert is_en_passant(pawn, board, sq("e5"), sq("d6"), board.log)
    assert legal(board, "e5", "d6")


def test_black_en_passant(board_with_pawns: BoardFactory) -> None:
    board = board_with_pawns({"e4": Color.BLACK, "d2": Color.WHITE})
    board.apply_move(sq("d2"), sq("d4"))
    assert legal(board, "e4", "d3")


def test_en_passant_only_right_away(board_with_pawns: BoardFactory) -> None:
    """Any move made after the double step (by anyone) takes the chance away"""
    board = board_with_pawns({"e5": Color.WHITE, "d7": Color.BLACK, "a7": Color.BLACK})
    board.apply_move(sq("d7"), sq("d5"))
    board.apply_move(sq("a7"), sq("a6"))
    assert not legal(board, "e5", "d6")


def test_no_en_passant_after_two_single_steps(board_with_pawns: BoardFactory) -> None:
    """The pawn arrived next to ours, but not with a double step"""
    board = board_with_pawns({"e5": Color.WHITE, "d7": Color.BLACK, "h2": Color.WHITE})
    board.apply_move(sq("d7"), sq("d6"))
    board.apply_move(sq("h2"), sq("h3"))
    board.apply_move(sq("d6"), sq("d5"))
    assert not legal(board, "e5", "d6")


def test_no_en_passant_from_the_wrong_rank(board_with_pawns: BoardFactory) -> None:
    """A white pawn can only take en passant from the 5th rank, even right after a black double step"""
    board = board_with_pawns({"e4": Color.WHITE, "d7": Color.BLACK})
    board.apply_move(sq("d7"), sq("d5"))
    board.place_piece(board.piece(sq("d5")), sq("d4"))
    board.remove_piece(sq("d5"))
    pawn = board.piece(sq("e4"))
    assert not is_en_passant(pawn, board, sq("e4"), sq("d5"), board.log)
    assert not legal(board, "e4", "d5")


def test_no_en_passant_of_a_pawn_placed_without_moving(board_with_pawns: BoardFactory) -> None:
    """The log has no move of the pawn next to ours"""
    board = board_with_pawns({"e5": Color.WHITE, "d5": Color.BLACK})
    assert not legal(board, "e5", "d6")


# --- CANDIDATE DESTINATIONS ---
def test_candidate_destinations_from_home_rank(starting_board: Board) -> None:
    pawn = starting_board.piece(sq("e2"))
    assert available_destinations(pawn, starting_board, sq("e2")) == {
        sq("e3"),
        sq("e4"),
        sq("d3"),
        sq("f3"),
    }


def test_candidate_destinations_black(starting_board: Board) -> None:
    pawn = starting_board.piece(sq("h7"))
    assert available_destinations(pawn, starting_board, sq("h7")) == {
        sq("h6"),
        sq("h5"),
        sq("g6"),
    }


def test_candidates_include_blocked_squares(board_with_pawns: BoardFactory) -> None:
    """Enumeration only looks at geometry. can_move() does the filtering."""
    board = board_with_pawns({"e4": Color.WHITE, "e5": Color.BLACK})
    pawn = board.piece(sq("e4"))
    candidates = available_destinations(pawn, board, sq("e4"))
    assert candidates == {sq("e5"), sq("e6"), sq("d5"), sq("f5")}
    assert not any(legal(board, "e4", square.to_text()) for square in candidates)


def test_no_candidates_off_the_board(board_with_pawns: BoardFactory) -> None:
    board = board_with_pawns({"e8": Color.WHITE, "a7": Color.WHITE})
    assert available_destinations(board.piece(sq("e8")), board, sq("e8")) == set()
    assert available_destinations(board.piece(sq("a7")), board, sq("a7")) == {
        sq("a8"),
        sq("b8"),
    }
