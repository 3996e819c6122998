from abc import ABC, abstractmethod

from noughts_crosses.board import Board, Coordinate
from noughts_crosses.symbol import PlayerSymbol


class MoveChooser(ABC):
    """Picks moves for the seat the computer plays in single-player mode.

    No strategy ships with the game. Register one with GameEngine.set_move_chooser().
    """

    @abstractmethod
    def choose_move(self, board: Board, symbol: PlayerSymbol) -> Coordinate:
        pass
