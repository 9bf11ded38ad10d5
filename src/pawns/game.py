"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of pawns-only chess -->
passes this information to the service layer, which can then pass it onwards to the console.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    NotYourTurnError,
)
from src.core.models import GameModel
from src.core.shared_types import Color, Status
from src.pawns.board import Board
from src.pawns.moves import Move, available_destinations
from src.pawns.rules import has_promoted, is_one_color_eliminated, is_stalemated

_LOGGER = logging.getLogger(__name__)

WINNING_STATUSES = (Status.PROMOTION, Status.ELIMINATION)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    players: dict[Color, str]
    color_to_move: Color
    status: Status
    winning_color: Optional[Color] = None

    @classmethod
    def new_game(
        cls, white_player: str, black_player: str, starting_position: Optional[str] = None
    ) -> Self:
        """
        Start a new game. White moves first.

        A custom starting position may already be decided (a pawn on the last rank, no moves for white, ...).
        We check it as if black just made the last move.
        """
        board = (
            Board.from_fen(starting_position)
            if starting_position
            else Board.starting_position()
        )
        game = cls(
            board=board,
            players={Color.WHITE: white_player, Color.BLACK: black_player},
            color_to_move=Color.WHITE,
            status=Status.IN_PROGRESS,
        )
        game._update_game_status(last_mover=Color.BLACK)
        return game

    def to_model(self) -> GameModel:
        """Encode into a format the Service layer uses"""
        return GameModel(
            current_position=self.board.to_fen(),
            moves=[record.to_text() for record in self.board.log],
            registered_players={
                color.value: name for color, name in self.players.items()
            },
            status=self.status.value,
            color_to_move=(
                self.color_to_move.value if self.status == Status.IN_PROGRESS else None
            ),
            winner=self.winner,
            winning_color=self.winning_color.value if self.winning_color else None,
        )

    @property
    def winner(self) -> Optional[str]:
        """Name of the player that won. None while playing, after a stalemate, or when aborted."""
        if self.winning_color is None:
            return None
        return self.players[self.winning_color]

    @property
    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    def legal_moves(self, player: str) -> list[str]:
        """
        All moves the player could make right now.
        ----

        1. Check if it is your turn
        2. Yes? For each of your pawns, take the candidate destinations and keep those that pass can_move.
        """
        self._assert_in_progress()
        self._assert_your_turn(player)

        moves: list[str] = []
        for origin, piece in self.board.pieces_of(self.color_to_move):
            destinations = available_destinations(piece, self.board, origin)
            for destination in sorted(destinations, key=lambda sq: (sq.row, sq.column)):
                if self.board.can_move(origin, destination):
                    moves.append(Move(origin, destination).to_text())
        return moves

    def make_move(self, move: Move, player: str) -> None:
        """
        Attempt to make a move
        -----

        1. make sure the game is still going and it is your turn
        2. there must be one of your pawns on the origin square
        3. the pawn must be able to go to the destination
        4. update the board (the board records the move)
        5. update game status / whose turn it is
        """
        self._assert_in_progress()
        self._assert_your_turn(player)

        mover = self.color_to_move
        piece = self.board.piece(move.origin)
        if piece.is_empty or piece.color != mover:
            _LOGGER.debug("Rejected %s by %s: no own pawn", move.to_text(), player)
            raise IllegalMoveError(f"No {mover} pawn at {move.origin}")

        if not self.board.can_move(move.origin, move.destination):
            _LOGGER.debug("Rejected %s by %s: not allowed", move.to_text(), player)
            raise IllegalMoveError("Invalid Input")

        self.board.apply_move(move.origin, move.destination)
        self._update_game_status(last_mover=mover)

    def abort(self) -> None:
        """A player quits. Nobody wins."""
        self._assert_in_progress()
        self._change_status(Status.ABORTED)

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _assert_your_turn(self, player: str) -> None:
        """You must wait for your turn before calculating legal moves / making a move."""
        player_to_move = self.players[self.color_to_move]
        if player != player_to_move:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {player_to_move} to make a move first."
            )

    def _update_game_status(self, last_mover: Color) -> None:
        """Performs checks to see if game has ended and changes status accordingly.

        1. Pawn reached the last rank, or the opponent has no pawns left --> the last mover wins.
        2. Otherwise it is the opponent's turn. No move available for them? --> stalemate.
        """
        if has_promoted(self.board):
            self._declare_winner(last_mover, Status.PROMOTION)
            return

        if is_one_color_eliminated(self.board):
            self._declare_winner(last_mover, Status.ELIMINATION)
            return

        self.color_to_move = last_mover.opponent
        if is_stalemated(self.board, self.color_to_move):
            self._change_status(Status.STALEMATE)

    def _declare_winner(self, color: Color, status: Status) -> None:
        self.winning_color = color
        self._change_status(status)

    def _change_status(self, new_status: Status) -> None:
        _LOGGER.info("Game status: %s -> %s", self.status, new_status)
        self.status = new_status
