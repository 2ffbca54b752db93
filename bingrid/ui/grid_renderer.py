from __future__ import annotations

from typing import Protocol


class CellTerminal(Protocol):
    def write_colored_cell(self, intensity: int) -> None: ...

    def write_newline(self) -> None: ...

    def flush(self) -> None: ...


class GridRenderer:
    """Отрисовка ячеек построчно, с переносом каждые `width` ячеек.

    Светлые ячейки соответствуют малым значениям байтов: `intensity = 255 - average`.
    """

    def __init__(self, terminal: CellTerminal, width: int) -> None:
        self._terminal = terminal
        self._width = width
        self._rendered = 0

    @property
    def rendered(self) -> int:
        return self._rendered

    def render(self, average: int) -> None:
        self._terminal.write_colored_cell(255 - average)
        self._rendered += 1
        if self._rendered % self._width == 0:
            self._terminal.write_newline()
        # после каждой ячейки, чтобы большие файлы отображались по ходу чтения
        self._terminal.flush()

    def finish(self) -> None:
        self._terminal.write_newline()
        self._terminal.flush()
