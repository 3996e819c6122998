import logging
from collections.abc import Sequence
from enum import Enum, auto
from typing import Final, TypeAlias

from noughts_crosses.exception import CellOccupiedError, OutOfBoundsError
from noughts_crosses.symbol import PlayerSymbol

logger = logging.getLogger(__name__)

BOARD_SIZE: Final = 3

Coordinate: TypeAlias = tuple[int, int]

# Scan order decides the winner if more than one line is complete.
LINES: Final[tuple[tuple[Coordinate, Coordinate, Coordinate], ...]] = (
    *(((0, y), (1, y), (2, y)) for y in range(BOARD_SIZE)),  # Rows, top to bottom
    *(((x, 0), (x, 1), (x, 2)) for x in range(BOARD_SIZE)),  # Columns, left to right
    ((0, 0), (1, 1), (2, 2)),  # First diagonal
    ((2, 0), (1, 1), (0, 2)),  # Second diagonal
)


class CellState(Enum):
    EMPTY = auto()
    OCCUPIED = auto()
    OUT_OF_BOUNDS = auto()


class Board:
    """A 3x3 grid addressed by zero-based (x, y), x being the column and y the row.

    Cells are only ever written through place(), and an occupied cell is never overwritten.
    """

    def __init__(self) -> None:
        self._width = BOARD_SIZE
        self._height = BOARD_SIZE
        self._board: list[list[PlayerSymbol | None]] = [[None] * self._width for _ in range(self._height)]
        self._winner: PlayerSymbol | None = None

    def __str__(self) -> str:
        header = "  " + "   ".join(str(x + 1) for x in range(self._width))
        separator = " " + "+".join(["---"] * self._width)

        rows = []
        for y in range(self._height):
            cells = " | ".join(str(cell) if cell is not None else "." for cell in self._board[y])
            rows.append(f"{y + 1} {cells}")

        return f"{header}\n" + f"\n{separator}\n".join(rows) + "\n"

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def board(self) -> list[list[PlayerSymbol | None]]:
        return self._board

    @property
    def winner(self) -> PlayerSymbol | None:
        """Winner cached by the last evaluate_terminal_state() call."""
        return self._winner

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def place(self, x: int, y: int, symbol: PlayerSymbol) -> None:
        if not self._in_bounds(x, y):
            raise OutOfBoundsError("Position out of bounds.")

        if self._board[y][x] is not None:
            raise CellOccupiedError("Position already taken.")

        self._board[y][x] = symbol
        logger.debug("Placed %s at (%d, %d)", symbol, x, y)

    def get(self, x: int, y: int) -> PlayerSymbol | None:
        if not self._in_bounds(x, y):
            return None
        return self._board[y][x]

    def cell_state(self, x: int, y: int) -> CellState:
        if not self._in_bounds(x, y):
            return CellState.OUT_OF_BOUNDS
        return CellState.EMPTY if self._board[y][x] is None else CellState.OCCUPIED

    def is_full(self) -> bool:
        return all(all(cell is not None for cell in row) for row in self._board)

    def available_positions(self) -> list[Coordinate]:
        return [(x, y) for y in range(self._height) for x in range(self._width) if self._board[y][x] is None]

    def _is_line_uniform(self, cells: Sequence[Coordinate]) -> bool:
        symbols = [self.get(x, y) for x, y in cells]
        return symbols[0] is not None and all(symbol is symbols[0] for symbol in symbols[1:])

    def _find_terminal_state(self) -> tuple[bool, PlayerSymbol | None]:
        for line in LINES:
            if self._is_line_uniform(line):
                x, y = line[0]
                return True, self.get(x, y)
        return self.is_full(), None

    def evaluate_terminal_state(self) -> bool:
        """Check whether the game has ended and cache the winner, if any.

        Lines are scanned rows first, then columns, then the two diagonals. The first
        complete line decides the winner. A full board with no complete line is a draw.
        """
        is_over, winner = self._find_terminal_state()
        if winner is not None:
            self._winner = winner
        if is_over:
            logger.debug("Terminal state reached, winner: %s", winner)
        return is_over

    def get_winner(self) -> PlayerSymbol | None:
        _is_over, winner = self._find_terminal_state()
        return winner
