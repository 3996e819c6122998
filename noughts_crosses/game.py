import copy
import logging
from enum import Enum

from noughts_crosses.board import Board
from noughts_crosses.exception import GameOverError, LogicError, NoPlayersAvailableError, SymbolUnchangedError
from noughts_crosses.player import Player
from noughts_crosses.symbol import PlayerSymbol

logger = logging.getLogger(__name__)


class GameMode(Enum):
    SINGLE_PLAYER = "single"
    TWO_PLAYER = "two"


class Game:
    def __init__(self) -> None:
        self._board = Board()
        self._players: list[Player] = [Player(PlayerSymbol.CROSS, 1), Player(PlayerSymbol.NOUGHT, 2)]
        self._current_player_index = 0
        self._game_mode = GameMode.TWO_PLAYER
        self._game_over = False

    @property
    def board(self) -> Board:
        return self._board

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    def game_mode(self) -> GameMode:
        return self._game_mode

    @game_mode.setter
    def game_mode(self, game_mode: GameMode) -> None:
        self._game_mode = game_mode

    @property
    def current_player_index(self) -> int:
        return self._current_player_index

    @property
    def current_player(self) -> Player:
        """A copy of the player whose turn it is. Changing it does not affect the game."""
        if not self._players:
            raise NoPlayersAvailableError("No players available.")
        return copy.copy(self._players[self._current_player_index])

    @property
    def game_over(self) -> bool:
        return self._game_over

    def advance_turn(self) -> None:
        if not self._players:
            raise NoPlayersAvailableError("No players available.")
        self._current_player_index = (self._current_player_index + 1) % len(self._players)
        logger.debug("Turn passed to player %d", self._players[self._current_player_index].seat_number)

    def set_player_symbol(self, target: Player, symbol: PlayerSymbol) -> None:
        """Give `target` a new symbol and the other player the opposite one."""
        if not self._players:
            raise NoPlayersAvailableError("No players available.")

        if target.symbol is symbol:
            msg = f"Player {target.seat_number} already has symbol {symbol}."
            raise SymbolUnchangedError(msg)

        seated = [player for player in self._players if player.seat_number == target.seat_number]
        if not seated:
            msg = f"Player {target.seat_number} is not seated in this game."
            raise LogicError(msg)

        for player in self._players:
            player.symbol = symbol if player.seat_number == target.seat_number else symbol.opposite()
        # The caller's object may be a copy from current_player.
        target.symbol = symbol

    def winner(self) -> PlayerSymbol | None:
        return self._board.get_winner()

    def is_over(self) -> bool:
        if self._board.evaluate_terminal_state():
            self._game_over = True
        return self._game_over

    def play(self, x: int, y: int) -> bool:
        """Place the current player's symbol at (x, y) and pass the turn.

        The turn only passes when the placement succeeds and the game goes on.
        Returns whether the game is over.
        """
        if self.is_over():
            raise GameOverError("Game over.")

        self._board.place(x, y, self.current_player.symbol)
        if self.is_over():
            return True

        self.advance_turn()
        return False
