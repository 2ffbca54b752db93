from __future__ import annotations

import os
import sys
from typing import Optional, TextIO, Tuple

from bingrid.config import CELL_GLYPH
from bingrid.models.errors import TerminalQueryError

# ANSI truecolor escapes
ESC = "\x1b["
FG_RESET = f"{ESC}39m"
BG_RESET = f"{ESC}49m"


def ansi_fg(r: int, g: int, b: int) -> str:
    return f"{ESC}38;2;{r};{g};{b}m"


def ansi_bg(r: int, g: int, b: int) -> str:
    return f"{ESC}48;2;{r};{g};{b}m"


class AnsiTerminal:
    """Вывод цветных ячеек в текстовый поток (по умолчанию stdout)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    @property
    def stream(self) -> TextIO:
        return self._stream

    # public API
    def query_size(self) -> Tuple[int, int]:
        """Возвращает `(columns, rows)` терминала, к которому подключён поток.

        Raises:
            TerminalQueryError: поток не является терминалом.
        """
        try:
            size = os.get_terminal_size(self._stream.fileno())
        except (OSError, ValueError) as exc:
            # io.UnsupportedOperation наследует и OSError, и ValueError
            raise TerminalQueryError(
                "не удалось определить размер терминала; задайте --width и --height"
            ) from exc
        return size.columns, size.lines

    def write_colored_cell(self, intensity: int) -> None:
        color = (intensity, intensity, intensity)
        self._stream.write(f"{ansi_fg(*color)}{ansi_bg(*color)}{CELL_GLYPH}{FG_RESET}{BG_RESET}")

    def write_newline(self) -> None:
        self._stream.write("\n")

    def flush(self) -> None:
        self._stream.flush()
