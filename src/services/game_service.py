"""Orchestration of communication from the console to the business logic (and the reverse direction)."""

import logging
from typing import Optional

from src.console.models import (
    GameResponse,
    LegalMovesResponse,
    MoveRequest,
    NewGameRequest,
)
from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.core.shared_types import Color, Status
from src.pawns.game import Game

_LOGGER = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for one pawns-only game session."""

    def __init__(self) -> None:
        self.game: Optional[Game] = None

    # -- Console requests ---
    def create_game(self, request: NewGameRequest) -> GameResponse:
        """Both players are known: set up the board and start."""
        self.game = Game.new_game(
            white_player=request.white_player,
            black_player=request.black_player,
            starting_position=request.starting_position,
        )
        _LOGGER.info(
            "New game: %s (white) vs %s (black)",
            request.white_player,
            request.black_player,
        )
        return self._create_game_response(self.game.to_model())

    def get_game_state(self) -> GameResponse:
        """Current state of the game (used before every turn to render the board)."""
        game = self._fetch_game()
        return self._create_game_response(game.to_model())

    def legal_moves(self, player_name: str) -> LegalMovesResponse:
        """retrieve set of legal moves."""
        game = self._fetch_game()
        legal_moves = game.legal_moves(player_name)
        return LegalMovesResponse(
            player_name=player_name,
            color=game.color_to_move,
            legal_moves=legal_moves,
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt."""
        game = self._fetch_game()
        game.make_move(request.to_move(), request.player_name)
        after_move = game.to_model()
        if game.is_over:
            _LOGGER.info("Game over: %s (winner: %s)", game.status, game.winner)
        return self._create_game_response(after_move)

    def abort_game(self) -> GameResponse:
        """A player typed 'exit'."""
        game = self._fetch_game()
        game.abort()
        _LOGGER.info("Game aborted after %d moves", len(game.board.log))
        return self._create_game_response(game.to_model())

    # -- Internal helpers --
    def _create_game_response(self, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse."""
        return GameResponse(
            players=model.registered_players,
            position=model.current_position,
            move_history=model.moves,
            status=Status(model.status),
            color_to_move=Color(model.color_to_move) if model.color_to_move else None,
            winner=model.winner,
            winning_color=Color(model.winning_color) if model.winning_color else None,
        )

    def _fetch_game(self) -> Game:
        """Raise an error if no game was created yet."""
        if self.game is None:
            raise GameStateError("No game has been created yet.")
        return self.game
