"""
Console front end: two humans share one terminal.

Every turn: show the board --> game over? announce and stop --> ask the player to move --> apply.
Mistakes by the player (bad text, illegal move) are printed and the same player is asked again.
"""

import argparse
import logging
from typing import Optional, Sequence

from pydantic import ValidationError

from src.console.models import GameResponse, NewGameRequest
from src.console.player import HumanPlayer, ListMovesFn, ReadFn, WriteFn
from src.console.renderer import render_board
from src.core.config import Settings, configure_logging
from src.core.exceptions import GameError
from src.core.shared_types import Color, Status
from src.pawns.board import Board
from src.services.game_service import GameService

_LOGGER = logging.getLogger(__name__)

TITLE = "Pawns-Only Chess"
FAREWELL = "Bye!"


class ConsoleSession:
    def __init__(
        self,
        settings: Settings,
        read: Optional[ReadFn] = None,
        write: Optional[WriteFn] = None,
        service: Optional[GameService] = None,
    ) -> None:
        self.settings = settings
        self.service = service or GameService()
        self._read = read or input
        self._write = write or print

    def run(self) -> Optional[GameResponse]:
        """Play one game. Returns the final state (None if the game could not be set up)."""
        self._write(TITLE)
        try:
            state = self._play()
        except GameError as exc:
            # only set-up problems get here, turn level errors are handled in _play_turn
            self._write(str(exc))
            state = None
        except EOFError:
            # input closed before both names were given
            state = None
        self._write(FAREWELL)
        return state

    def _play(self) -> GameResponse:
        white = self.settings.white_player or self._ask_name("First Player's name:")
        black = self.settings.black_player or self._ask_name("Second Player's name:")
        state = self.service.create_game(
            NewGameRequest(
                white_player=white,
                black_player=black,
                starting_position=self.settings.starting_position,
            )
        )
        players = {
            color: HumanPlayer(
                name, color, self._read, self._write, self._legal_moves_of(name)
            )
            for color, name in ((Color.WHITE, white), (Color.BLACK, black))
        }

        while True:
            self._write(render_board(Board.from_fen(state.position)).rstrip("\n"))
            if state.status != Status.IN_PROGRESS:
                self._write(self._outcome(state))
                return state

            assert state.color_to_move is not None
            state = self._play_turn(players[state.color_to_move])
            if state.status == Status.ABORTED:
                return state

    def _play_turn(self, player: HumanPlayer) -> GameResponse:
        """Keep asking the same player until a move gets accepted (or they give up)"""
        while True:
            request = player.request_move()
            if request is None:
                return self.service.abort_game()
            try:
                return self.service.make_move(request)
            except GameError as exc:
                _LOGGER.debug("Move %s rejected: %s", request, exc)
                self._write(str(exc))

    def _legal_moves_of(self, name: str) -> ListMovesFn:
        return lambda: self.service.legal_moves(name).legal_moves

    def _ask_name(self, prompt: str) -> str:
        while True:
            self._write(prompt)
            name = self._read().strip()
            if name:
                return name

    @staticmethod
    def _outcome(state: GameResponse) -> str:
        if state.winning_color is not None:
            return f"{state.winning_color.value.capitalize()} Wins!"
        return "Stalemate!"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play pawns-only chess in the terminal")
    parser.add_argument("--white", help="Name of the white player (asked if not given)")
    parser.add_argument("--black", help="Name of the black player (asked if not given)")
    parser.add_argument(
        "--position",
        help="Starting position, e.g. 8/pppppppp/8/8/8/8/PPPPPPPP/8 (the default)",
    )
    parser.add_argument(
        "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings.from_env().with_overrides(
            log_level=args.log_level,
            starting_position=args.position,
            white_player=args.white,
            black_player=args.black,
        )
    except ValidationError as exc:
        parser.error(str(exc))

    configure_logging(settings)
    state = ConsoleSession(settings).run()
    return 0 if state is not None else 1


if __name__ == "__main__":
    raise SystemExit(main())
