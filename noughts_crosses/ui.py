from abc import ABC, abstractmethod

from noughts_crosses.exception import LogicError
from noughts_crosses.game_engine import GameEngine


class Ui(ABC):
    def __init__(self, game_engine: GameEngine) -> None:
        self._game_engine = game_engine
        self._running = False
        self._input_enabled = False

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True

    def _stop(self) -> None:
        self._running = False

    def _apply_move(self, x: int, y: int) -> None:
        # Disable own input first so a second move can't be sent while this one is processed.
        # The engine re-enables it on a rejected move or when the next turn starts.
        self._disable_input()
        self._game_engine.apply_move(x, y)

    def enable_input(self) -> None:
        if not self._running:
            return
        self._input_enabled = True

    def _disable_input(self) -> None:
        self._input_enabled = False

    def on_board_updated(self) -> None:
        if not self._running:
            return
        self._render_board()
        game = self._game_engine.game
        if not game.game_over:
            return
        winner = game.winner()
        if winner is not None:
            self._show_end_message(f"Player {winner} wins!")
        else:
            self._show_end_message("It's a draw!")

    def on_error(self, exception: Exception) -> None:
        if not self._running:
            return
        # Rejected moves are retried. Anything else means the game can't go on.
        if isinstance(exception, LogicError):
            self._disable_input()
            self._on_error(exception)
            self._stop()
            return
        self._on_error(exception)

    @abstractmethod
    def _render_board(self) -> None:
        pass

    @abstractmethod
    def _show_end_message(self, message: str) -> None:
        pass

    @abstractmethod
    def _on_error(self, exception: Exception) -> None:
        pass
