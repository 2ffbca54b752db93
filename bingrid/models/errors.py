"""Ошибки, которые завершают отрисовку.

Ни одна из них не обрабатывается внутри конвейера: все поднимаются до `main`,
который печатает сообщение и завершает процесс с ненулевым кодом.
"""
from __future__ import annotations


class BinGridError(Exception):
    """Базовая ошибка приложения."""


class ConfigurationError(BinGridError):
    """Запрошенная сетка содержит больше ячеек, чем байт в файле."""

    def __init__(self, grid_size: int, file_size: int) -> None:
        super().__init__(f"размер сетки ({grid_size}) больше размера файла ({file_size})")
        self.grid_size = grid_size
        self.file_size = file_size


class TerminalQueryError(BinGridError):
    """Размер терминала недоступен (например, вывод перенаправлен)."""


class FileAccessError(BinGridError):
    """Файл не удалось открыть или узнать его размер."""


class StreamReadError(BinGridError):
    """Ошибка ввода-вывода во время чтения файла."""
