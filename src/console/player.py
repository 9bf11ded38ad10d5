"""A human sitting at the console"""

from typing import Callable, Optional

from src.console.models import MoveRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color

EXIT_COMMAND = "exit"
MOVES_COMMAND = "moves"
INVALID_INPUT = "Invalid Input"

ReadFn = Callable[[], str]
WriteFn = Callable[[str], None]
ListMovesFn = Callable[[], list[str]]


class HumanPlayer:
    """
    Asks for moves until the text looks like a move.

    Typing 'exit' gives up the game, 'moves' lists the legal moves (if the player was given a way to look them up).
    """

    def __init__(
        self,
        name: str,
        color: Color,
        read: Optional[ReadFn] = None,
        write: Optional[WriteFn] = None,
        list_moves: Optional[ListMovesFn] = None,
    ) -> None:
        self.name = name
        self.color = color
        self._read = read or input
        self._write = write or print
        self._list_moves = list_moves

    def request_move(self) -> Optional[MoveRequest]:
        """None means the player wants to stop."""
        while True:
            self._write(f"{self.name}'s turn:")
            try:
                text = self._read().strip().lower()
            except EOFError:
                # input closed (Ctrl-D / end of a piped script): same as typing exit
                return None
            if text == EXIT_COMMAND:
                return None
            if text == MOVES_COMMAND and self._list_moves is not None:
                self._write(" ".join(self._list_moves()))
                continue
            try:
                return MoveRequest.from_text(self.name, text)
            except InvalidRequestError:
                self._write(INVALID_INPUT)
