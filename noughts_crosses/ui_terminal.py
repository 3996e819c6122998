# ruff: noqa: T201

from typing import Final

from noughts_crosses.exception import InputError
from noughts_crosses.game_engine import GameEngine
from noughts_crosses.input_parser import parse_coordinates
from noughts_crosses.ui import Ui


class TerminalUi(Ui):
    TITLE: Final = "Noughts and Crosses"
    QUIT_PREFIX: Final = "q"

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)

    def run(self) -> None:
        print(f"{self.TITLE}\n", flush=True)
        print("Enter coordinates in the format x,y.", flush=True)
        super().run()
        while self._running:
            self._get_input()

    def enable_input(self) -> None:
        super().enable_input()
        if not self._running:
            return
        self._ask_for_move()

    def _ask_for_move(self) -> None:
        print(f"Player {self._game_engine.current_player}'s turn: ", end="", flush=True)

    def _get_input(self) -> None:
        try:
            input_str = input()
        except (KeyboardInterrupt, EOFError):
            self._stop()
            return

        if input_str.strip().startswith(self.QUIT_PREFIX):
            self._stop()
            return

        if not self._input_enabled or not self._running:
            return

        try:
            x, y = parse_coordinates(input_str)
        except InputError as e:
            print(str(e), flush=True)
            self._ask_for_move()
            return

        self._apply_move(x, y)

    def _render_board(self) -> None:
        print(f"\n{self._game_engine.game.board}", flush=True)

    def _show_end_message(self, msg: str) -> None:
        print(msg, flush=True)
        self._stop()

    def _on_error(self, exception: Exception) -> None:
        print(str(exception), flush=True)
