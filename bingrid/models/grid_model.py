"""Модели данных для построения сетки.

Принципы:
- SRP: только структуры данных, без логики чтения и отрисовки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional


@dataclass(frozen=True)
class RunConfig:
    """Параметры запуска, полученные из командной строки.

    Fields:
        file_path: Путь к отображаемому файлу.
        explicit_width: Ширина сетки в ячейках, если задана явно.
        explicit_height: Высота сетки в ячейках, если задана явно.
    """
    file_path: Path
    explicit_width: Optional[int] = None
    explicit_height: Optional[int] = None


@dataclass(frozen=True)
class GridDimensions:
    """Размеры сетки в ячейках."""
    width: int
    height: int

    @property
    def cells(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class ChunkPlan:
    """Разбиение файла на куски одинакового размера.

    Fields:
        chunk_size: Байт на одну ячейку (>= 1).
        file_size: Размер файла, байт.
        cells: Число ячеек сетки.
    """
    chunk_size: int
    file_size: int
    cells: int

    @property
    def expected_cells(self) -> int:
        # неполный последний кусок не отрисовывается
        return self.file_size // self.chunk_size


@dataclass(frozen=True)
class BinarySource:
    """Открытый на чтение файл и его размер."""
    path: Path
    size: int
    stream: BinaryIO
