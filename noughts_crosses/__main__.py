import argparse
import logging
import threading
import time
from collections.abc import Iterable
from typing import TYPE_CHECKING

from noughts_crosses.game import Game, GameMode
from noughts_crosses.game_engine import GameEngine
from noughts_crosses.symbol import PlayerSymbol
from noughts_crosses.ui_pygame import PygameUi
from noughts_crosses.ui_terminal import TerminalUi

if TYPE_CHECKING:
    from noughts_crosses.ui import Ui

logger = logging.getLogger(__name__)


def main() -> None:
    ui_choices: dict[str, type[Ui]] = {"terminal": TerminalUi, "pygame": PygameUi}

    parser, args = _parse_args(ui_choices.keys())

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Build game components

    game_engine = GameEngine()
    game = game_engine.game
    game.game_mode = GameMode(args.mode)

    if game.game_mode is GameMode.SINGLE_PLAYER:
        parser.error("single-player mode has no computer opponent yet, use --mode two")

    symbol = PlayerSymbol.from_char(args.symbol)
    player1 = game.players[0]
    if player1.symbol is not symbol:
        game.set_player_symbol(player1, symbol)
    logger.debug("Players: %s", ", ".join(repr(player) for player in game.players))

    uis: list[Ui] = [ui_choices[ui](game_engine) for ui in dict.fromkeys(args.ui)]
    for ui in uis:
        game_engine.add_board_updated_cb(ui.on_board_updated)
        game_engine.add_enable_input_cb(ui.enable_input)
        game_engine.add_on_error_cb(ui.on_error)

    # -----------------------------
    # UI
    # -----------------------------
    ui_threads = [threading.Thread(target=ui.run, daemon=True) for ui in uis]

    for ui_thread in ui_threads:
        ui_thread.start()

    while not all(ui.running for ui in uis):
        time.sleep(0.1)

    game_engine.start()

    while not _should_exit(game, uis):
        time.sleep(0.1)


def _should_exit(game: Game, uis: "Iterable[Ui]") -> bool:
    """Once the game is over, wait for every UI to be closed so each can show the result.

    A UI stopping earlier (quit sentinel, window closed, engine failure) ends the program at once.
    """
    running = [ui.running for ui in uis]
    if game.game_over:
        return not any(running)
    return not all(running)


def _parse_args(ui_choices: Iterable[str]) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(prog="noughts_crosses", description="Noughts and crosses on the console.")

    parser.add_argument("--mode", choices=[mode.value for mode in GameMode], default=GameMode.TWO_PLAYER.value)
    parser.add_argument("--symbol", choices=("X", "O"), type=str.upper, default="X", help="symbol for player 1")
    parser.add_argument("--ui", nargs="+", choices=ui_choices, default=["terminal"])
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
        default="WARNING",
    )

    args = parser.parse_args()
    return parser, args


if __name__ == "__main__":
    main()
