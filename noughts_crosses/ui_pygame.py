from typing import Final

import pygame

from noughts_crosses.board import BOARD_SIZE, CellState, Coordinate
from noughts_crosses.game_engine import GameEngine
from noughts_crosses.symbol import PlayerSymbol
from noughts_crosses.ui import Ui


class PygameUi(Ui):
    """Window front-end laid out like the console board: 1-based labels above and left of the grid.

    A status line under the grid shows whose turn it is, the last rejected move or the result.
    """

    TITLE: Final = "Noughts and Crosses"
    CELL_SIZE: Final = 140
    LABEL_SIZE: Final = 40
    STATUS_HEIGHT: Final = 48
    GRID_SIZE: Final = CELL_SIZE * BOARD_SIZE
    WINDOW_SIZE: Final = (LABEL_SIZE + GRID_SIZE, LABEL_SIZE + GRID_SIZE + STATUS_HEIGHT)
    LINE_WIDTH: Final = 4

    BG_COLOR: Final = (20, 20, 20)
    LINE_COLOR: Final = (127, 127, 127)
    LABEL_COLOR: Final = (160, 160, 160)
    SYMBOL_COLORS: Final = {PlayerSymbol.CROSS: (191, 63, 63), PlayerSymbol.NOUGHT: (63, 63, 191)}
    TEXT_COLOR: Final = (255, 255, 255)

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._cells: list[list[PlayerSymbol | None]] = []
        self._turn_message = ""
        self._error_message = ""
        self._end_message = ""
        self._render_board()

    @property
    def status(self) -> str:
        if self._end_message:
            return f"{self._end_message} Click to exit."
        return self._error_message or self._turn_message

    def run(self) -> None:
        self._open_window()
        super().run()
        self._main_loop()

    def _open_window(self) -> None:
        pygame.init()
        pygame.display.set_caption(self.TITLE)
        self._screen = pygame.display.set_mode(self.WINDOW_SIZE)
        self._mark_font = pygame.font.SysFont(None, 120)
        self._text_font = pygame.font.SysFont(None, 32)

    def enable_input(self) -> None:
        super().enable_input()
        if not self._running:
            return
        self._turn_message = f"Player {self._game_engine.current_player}'s turn"

    def _disable_input(self) -> None:
        super()._disable_input()
        self._error_message = ""

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(30)
            for event in pygame.event.get():
                self._handle_event(event)
            self._draw()
        pygame.quit()

    def _handle_event(self, event: pygame.event.Event) -> None:
        match event.type:
            case pygame.QUIT:
                self._stop()
            case pygame.MOUSEBUTTONDOWN:
                if self._end_message:
                    self._stop()
                elif self._input_enabled:
                    self._on_click(event.pos)

    def _cell_at(self, pos: tuple[int, int]) -> Coordinate | None:
        px, py = pos
        # Floor division keeps clicks on the labels negative, hence out of bounds.
        x = (px - self.LABEL_SIZE) // self.CELL_SIZE
        y = (py - self.LABEL_SIZE) // self.CELL_SIZE
        if self._game_engine.game.board.cell_state(x, y) is CellState.OUT_OF_BOUNDS:
            return None
        return x, y

    def _on_click(self, pos: tuple[int, int]) -> None:
        cell = self._cell_at(pos)
        if cell is None:
            return
        self._apply_move(*cell)

    def _render_board(self) -> None:
        self._cells = [row.copy() for row in self._game_engine.game.board.board]

    def _show_end_message(self, msg: str) -> None:
        self._end_message = msg

    def _on_error(self, exception: Exception) -> None:
        self._error_message = str(exception)

    # -----------------------------
    # Drawing
    # -----------------------------

    def _draw(self) -> None:
        self._screen.fill(self.BG_COLOR)
        self._draw_labels()
        self._draw_grid()
        self._draw_marks()
        self._draw_text(self.status, (self.WINDOW_SIZE[0] // 2, self.WINDOW_SIZE[1] - self.STATUS_HEIGHT // 2))
        pygame.display.flip()

    def _cell_center(self, x: int, y: int) -> tuple[int, int]:
        half = self.CELL_SIZE // 2
        return self.LABEL_SIZE + x * self.CELL_SIZE + half, self.LABEL_SIZE + y * self.CELL_SIZE + half

    def _draw_text(self, text: str, center: tuple[int, int], color: tuple[int, int, int] = TEXT_COLOR) -> None:
        if not text:
            return
        surface = self._text_font.render(text, True, color)  # noqa: FBT003
        self._screen.blit(surface, surface.get_rect(center=center))

    def _draw_labels(self) -> None:
        offset = self.LABEL_SIZE // 2
        for i in range(BOARD_SIZE):
            center_x, center_y = self._cell_center(i, i)
            self._draw_text(str(i + 1), (center_x, offset), self.LABEL_COLOR)
            self._draw_text(str(i + 1), (offset, center_y), self.LABEL_COLOR)

    def _draw_grid(self) -> None:
        start = self.LABEL_SIZE
        end = self.LABEL_SIZE + self.GRID_SIZE
        for i in range(1, BOARD_SIZE):
            pos = start + i * self.CELL_SIZE
            pygame.draw.line(self._screen, self.LINE_COLOR, (start, pos), (end, pos), self.LINE_WIDTH)
            pygame.draw.line(self._screen, self.LINE_COLOR, (pos, start), (pos, end), self.LINE_WIDTH)

    def _draw_marks(self) -> None:
        for y, row in enumerate(self._cells):
            for x, symbol in enumerate(row):
                if symbol is None:
                    continue
                surface = self._mark_font.render(str(symbol), True, self.SYMBOL_COLORS[symbol])  # noqa: FBT003
                self._screen.blit(surface, surface.get_rect(center=self._cell_center(x, y)))
