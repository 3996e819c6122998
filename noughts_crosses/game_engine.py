import logging
from collections.abc import Callable

from noughts_crosses.exception import InvalidMoveError, LogicError
from noughts_crosses.game import Game, GameMode
from noughts_crosses.move_chooser import MoveChooser
from noughts_crosses.player import Player

logger = logging.getLogger(__name__)

# Seat the move chooser plays in single-player mode.
COMPUTER_SEAT = 2


class GameEngine:
    def __init__(self, game: Game | None = None) -> None:
        self._game = game if game is not None else Game()
        self._board_updated_cbs: list[Callable[[], None]] = []
        self._enable_input_cbs: list[Callable[[], None]] = []
        self._on_error_cbs: list[Callable[[Exception], None]] = []
        self._move_chooser: MoveChooser | None = None

    @property
    def game(self) -> Game:
        return self._game

    @property
    def current_player(self) -> Player:
        return self._game.current_player

    def set_move_chooser(self, move_chooser: MoveChooser) -> None:
        self._move_chooser = move_chooser

    def add_board_updated_cb(self, callback: Callable[[], None]) -> None:
        self._board_updated_cbs.append(callback)

    def add_enable_input_cb(self, callback: Callable[[], None]) -> None:
        self._enable_input_cbs.append(callback)

    def add_on_error_cb(self, callback: Callable[[Exception], None]) -> None:
        self._on_error_cbs.append(callback)

    def start(self) -> None:
        if self._game.game_mode is GameMode.SINGLE_PLAYER and self._move_chooser is None:
            raise LogicError("Single-player mode needs a move chooser for the computer's seat.")
        logger.info("Starting %s game", self._game.game_mode.value)
        self._notify_board_updated()
        self._request_move()

    def apply_move(self, x: int, y: int) -> bool:
        """Play (x, y) for the current player. Rejected moves are reported to the error callbacks."""
        try:
            self._game.play(x, y)
        except InvalidMoveError as e:
            logger.debug("Move (%d, %d) rejected: %s", x, y, e)
            self._notify_on_error(e)
            self._notify_enable_input()
            return False

        self._on_move_applied()
        return True

    def _on_move_applied(self) -> None:
        self._notify_board_updated()
        if self._game.game_over:
            logger.info("Game over, winner: %s", self._game.winner())
            return
        self._request_move()

    def _request_move(self) -> None:
        move_chooser = self._computer_move_chooser()
        if move_chooser is None:
            self._notify_enable_input()
            return

        x, y = move_chooser.choose_move(self._game.board, self.current_player.symbol)
        try:
            self._game.play(x, y)
        except InvalidMoveError as e:
            # No human seat to hand the turn back to, so the UIs stop.
            error = LogicError(f"Move chooser picked an illegal move ({x}, {y}): {e}")
            logger.error("%s", error)
            self._notify_on_error(error)
            return
        self._on_move_applied()

    def _computer_move_chooser(self) -> MoveChooser | None:
        if self._game.game_mode is not GameMode.SINGLE_PLAYER:
            return None
        if self.current_player.seat_number != COMPUTER_SEAT:
            return None
        return self._move_chooser

    def _notify_board_updated(self) -> None:
        for callback in list(self._board_updated_cbs):
            callback()

    def _notify_enable_input(self) -> None:
        for callback in list(self._enable_input_cbs):
            callback()

    def _notify_on_error(self, exception: Exception) -> None:
        for callback in list(self._on_error_cbs):
            callback(exception)
