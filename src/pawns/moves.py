"""
Movement and capturing rules

Key idea: Use strategy pattern to define the (direction, distance) sets for each piece type.
Every direction has a rule function that answers "can the piece on `origin` get to `destination` this way?"

Whether it is your turn / your piece is checked later by Game
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Protocol, Self

from src.core.exceptions import InvalidCoordinateError, OperationOnEmptyError
from src.pawns.coordinate import Coordinate
from src.pawns.move_log import MoveLog
from src.pawns.pieces import EN_PASSANT_RANK, HOME_RANK, Piece, PieceType


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, coordinate: Coordinate) -> Piece: ...


Vector = tuple[int, int]


class Direction(Enum):
    FORWARD = auto()
    DIAGONAL_FORWARD_LEFT = auto()
    DIAGONAL_FORWARD_RIGHT = auto()


# (row, column) steps as seen by white. Black looks at the board from the other side, so the whole vector flips.
DIRECTION_VECTORS: dict[Direction, Vector] = {
    Direction.FORWARD: (1, 0),
    Direction.DIAGONAL_FORWARD_LEFT: (1, -1),
    Direction.DIAGONAL_FORWARD_RIGHT: (1, 1),
}

DirectionRule = tuple[Direction, int]


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    origin: Coordinate
    destination: Coordinate

    @classmethod
    def from_text(cls, text: str) -> Self:
        """
        Two square names glued together
        ---

        examples:
        * "e2e4": move the pawn on e2 to e4
        * "e5d6": (white) pawn on e5 takes on d6
        """
        if len(text) != 4:
            raise InvalidCoordinateError(
                f"Cannot interpret {text!r} as a move. Expected two squares, like 'e2e4'."
            )
        return cls(Coordinate.parse(text[:2]), Coordinate.parse(text[2:]))

    def to_text(self) -> str:
        return f"{self.origin.to_text()}{self.destination.to_text()}"


def _require_piece(piece: Piece) -> None:
    if piece.is_empty:
        raise OperationOnEmptyError(
            "An empty square has no moves. Check if the square is occupied first."
        )


def oriented(piece: Piece, direction: Direction) -> Vector:
    """Step vector for this piece's color"""
    assert piece.color is not None
    d_row, d_column = DIRECTION_VECTORS[direction]
    return d_row * piece.color.forward, d_column * piece.color.forward


# --- DIRECTION SETS ---
MOVE_DIRECTIONS: dict[PieceType, list[DirectionRule]] = {
    PieceType.PAWN: [(Direction.FORWARD, 2)],
}

CAPTURE_DIRECTIONS: dict[PieceType, list[DirectionRule]] = {
    PieceType.PAWN: [
        (Direction.DIAGONAL_FORWARD_LEFT, 1),
        (Direction.DIAGONAL_FORWARD_RIGHT, 1),
    ],
}


def available_move_directions(piece: Piece) -> list[DirectionRule]:
    """All directions (and the max distance) a piece can move along without taking"""
    _require_piece(piece)
    return list(MOVE_DIRECTIONS[piece.type])


def available_capture_directions(piece: Piece) -> list[DirectionRule]:
    """All directions (and the max distance) a piece can take along"""
    _require_piece(piece)
    return list(CAPTURE_DIRECTIONS[piece.type])


# --- PAWN RULES ---
def pawn_track(piece: Piece, origin: Coordinate, destination: Coordinate) -> list[Coordinate]:
    """
    Squares a pawn walks over to get from origin to destination (origin itself excluded, destination included)

    Empty list if the pawn could never walk there: other column, backwards, or not moving at all.
    """
    assert piece.color is not None
    if origin.column != destination.column:
        # pawn cannot move diagonally
        return []

    step = piece.color.forward
    if (destination.row - origin.row) * step <= 0:
        # pawn cannot move back (or stay put)
        return []

    return [
        Coordinate(row, origin.column)
        for row in range(origin.row + step, destination.row + step, step)
    ]


def can_advance_pawn(
    piece: Piece,
    board: Board,
    rule: DirectionRule,
    origin: Coordinate,
    destination: Coordinate,
) -> bool:
    """
    Plain pawn advance
    ----

    - moves straight forward onto an empty square.
    - cannot jump over pieces.
    - may advance two squares, but only from its home rank.
    """
    direction, max_distance = rule
    if direction != Direction.FORWARD:
        raise ValueError(f"Pawn can only advance forward. Got {direction}")

    if not destination.is_within_bounds():
        return False

    track = pawn_track(piece, origin, destination)
    if not track:
        return False

    if len(track) > max_distance or any(not board.piece(sq).is_empty for sq in track):
        # pawn cannot advance more than 2 squares, or walk through / onto a piece
        return False

    assert piece.color is not None
    if len(track) == 2 and origin.row != HOME_RANK[piece.color]:
        # double step only as the first move
        return False

    return True


def can_capture_pawn(
    piece: Piece,
    board: Board,
    rule: DirectionRule,
    origin: Coordinate,
    destination: Coordinate,
    log: MoveLog,
) -> bool:
    """Pawns take diagonally: either an opponent's piece standing there, or en passant"""
    target = diagonal_target(piece, rule, origin)
    if target is None or target != destination:
        return False

    assert piece.color is not None
    occupant = board.piece(target)
    return occupant.is_opponent_of(piece.color) or is_en_passant(
        piece, board, origin, destination, log
    )


def diagonal_target(
    piece: Piece, rule: DirectionRule, origin: Coordinate
) -> Optional[Coordinate]:
    """The square a capture along this direction lands on. None if it is off the board."""
    direction, distance = rule
    if direction not in (
        Direction.DIAGONAL_FORWARD_LEFT,
        Direction.DIAGONAL_FORWARD_RIGHT,
    ):
        raise ValueError(f"Pawn can only take diagonally forward. Got {direction}")

    d_row, d_column = oriented(piece, direction)
    target = origin.shifted(d_row * distance, d_column * distance)
    return target if target.is_within_bounds() else None


def en_passant_victim_square(piece: Piece, destination: Coordinate) -> Coordinate:
    """The pawn taken en passant stands right behind the destination square (seen from the taking pawn)"""
    assert piece.color is not None
    return destination.shifted(-piece.color.forward, 0)


def is_en_passant(
    piece: Piece,
    board: Board,
    origin: Coordinate,
    destination: Coordinate,
    log: MoveLog,
) -> bool:
    """
    En passant
    ----

    **you are allowed to take en passant if**

    * Your pawn stands on the en passant rank (5th for white, 4th for black).
    * Right behind the destination square stands a pawn of your opponent.
    * That pawn made exactly one move, it was a double step, and it was the very last move of the game.
    """
    if piece.type != PieceType.PAWN:
        return False

    assert piece.color is not None
    if origin.row != EN_PASSANT_RANK[piece.color]:
        return False

    victim_square = en_passant_victim_square(piece, destination)
    if not victim_square.is_within_bounds():
        return False

    victim = board.piece(victim_square)
    if victim.type != PieceType.PAWN or not victim.is_opponent_of(piece.color):
        return False

    victim_moves = log.moves_of(victim)
    if len(victim_moves) != 1:
        return False

    only_move = victim_moves[0]
    if log.latest != only_move:
        # somebody moved after the double step: too late
        return False

    return only_move.rows_moved == 2


def pawn_advance_destinations(
    piece: Piece, rule: DirectionRule, origin: Coordinate
) -> list[Coordinate]:
    """Every square along the direction up to max distance. No look at the board."""
    direction, max_distance = rule
    if direction != Direction.FORWARD:
        raise ValueError(f"Pawn can only advance forward. Got {direction}")

    d_row, d_column = oriented(piece, direction)
    squares = [
        origin.shifted(d_row * distance, d_column * distance)
        for distance in range(1, max_distance + 1)
    ]
    return [square for square in squares if square.is_within_bounds()]


def pawn_capture_destinations(
    piece: Piece, rule: DirectionRule, origin: Coordinate
) -> list[Coordinate]:
    target = diagonal_target(piece, rule, origin)
    return [target] if target is not None else []


# -- STRATEGY PATTERN: RULES PER PIECE TYPE ---
AdvanceFn = Callable[[Piece, Board, DirectionRule, Coordinate, Coordinate], bool]
CaptureFn = Callable[
    [Piece, Board, DirectionRule, Coordinate, Coordinate, MoveLog], bool
]
DestinationsFn = Callable[[Piece, DirectionRule, Coordinate], list[Coordinate]]

ADVANCE_RULES: dict[PieceType, AdvanceFn] = {
    PieceType.PAWN: can_advance_pawn,
}
CAPTURE_RULES: dict[PieceType, CaptureFn] = {
    PieceType.PAWN: can_capture_pawn,
}
ADVANCE_DESTINATIONS: dict[PieceType, DestinationsFn] = {
    PieceType.PAWN: pawn_advance_destinations,
}
CAPTURE_DESTINATIONS: dict[PieceType, DestinationsFn] = {
    PieceType.PAWN: pawn_capture_destinations,
}


# --- PIECE CONTRACT ---
def can_move(
    piece: Piece,
    board: Board,
    origin: Coordinate,
    destination: Coordinate,
    log: MoveLog,
) -> bool:
    """
    Can the piece standing on origin go to destination?

    Plain moves are tried first, then captures. The first rule that allows the move wins.
    """
    _require_piece(piece)
    advance_rule = ADVANCE_RULES[piece.type]
    for rule in available_move_directions(piece):
        if advance_rule(piece, board, rule, origin, destination):
            return True

    capture_rule = CAPTURE_RULES[piece.type]
    return any(
        capture_rule(piece, board, rule, origin, destination, log)
        for rule in available_capture_directions(piece)
    )


def available_destinations(
    piece: Piece, board: Board, origin: Coordinate
) -> set[Coordinate]:
    """
    Candidate destinations: every square some direction points at (within the board).

    NOTE: these are NOT all legal, e.g. a blocked square or an empty diagonal is included.
    Filter with can_move() before offering one as a move.
    """
    destinations: set[Coordinate] = set()
    for rule in available_move_directions(piece):
        destinations.update(ADVANCE_DESTINATIONS[piece.type](piece, rule, origin))

    for rule in available_capture_directions(piece):
        destinations.update(CAPTURE_DESTINATIONS[piece.type](piece, rule, origin))
    return destinations
