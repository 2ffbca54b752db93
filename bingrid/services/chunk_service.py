"""Разбиение файла на куски и потоковое усреднение байтов.

Принципы:
- Один проход по файлу, буферами фиксированного размера.
- Сетка не хранится в памяти: средние отдаются генератором по мере готовности.
- Границы кусков определяются только числом байтов, а не границами буферов.
"""
from __future__ import annotations

import logging
from typing import BinaryIO, Iterator, List, Optional

import numpy as np

from bingrid.config import READ_BUFFER_SIZE
from bingrid.models.errors import StreamReadError
from bingrid.models.grid_model import ChunkPlan, GridDimensions

logger = logging.getLogger(__name__)


class ChunkAccumulator:
    """Сумма и счётчик байтов текущего куска; сбрасываются после закрытия куска."""

    def __init__(self, chunk_size: int) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size должен быть положительным, получено {chunk_size}")
        self.chunk_size = chunk_size
        self.sum = 0
        self.count = 0

    def reset(self) -> None:
        self.sum = 0
        self.count = 0

    def add(self, byte: int) -> Optional[int]:
        """Добавляет один байт. Возвращает среднее, если кусок закрылся."""
        self.sum += byte
        self.count += 1
        if self.count == self.chunk_size:
            average = self.sum // self.count
            self.reset()
            return average
        return None

    def feed(self, buffer: bytes) -> List[int]:
        """Добавляет целый буфер; эквивалентно `add` для каждого байта.

        Returns:
            Средние всех кусков, закрытых внутри буфера, по порядку.
        """
        data = np.frombuffer(buffer, dtype=np.uint8)
        averages: List[int] = []

        # дозаполняем кусок, начатый в предыдущем буфере
        if self.count:
            head = data[: self.chunk_size - self.count]
            data = data[head.size:]
            self.sum += int(head.sum(dtype=np.uint64))
            self.count += int(head.size)
            if self.count < self.chunk_size:
                return averages
            averages.append(self.sum // self.count)
            self.reset()

        full = data.size // self.chunk_size
        if full:
            blocks = data[: full * self.chunk_size].reshape(full, self.chunk_size)
            sums = blocks.sum(axis=1, dtype=np.uint64)
            averages.extend((sums // np.uint64(self.chunk_size)).tolist())

        tail = data[full * self.chunk_size:]
        self.sum = int(tail.sum(dtype=np.uint64))
        self.count = int(tail.size)
        return averages


class ChunkService:
    def plan(self, file_size: int, dimensions: GridDimensions) -> ChunkPlan:
        """Размер куска: `max(1, file_size // (width * height))`."""
        cells = dimensions.cells
        chunk_size = max(1, file_size // cells)
        logger.debug("chunk size: %d (%d / %d)", chunk_size, file_size, cells)
        return ChunkPlan(chunk_size=chunk_size, file_size=file_size, cells=cells)

    def iter_averages(
        self,
        stream: BinaryIO,
        plan: ChunkPlan,
        buffer_size: int = READ_BUFFER_SIZE,
    ) -> Iterator[int]:
        """Читает поток до конца и отдаёт среднее значение каждого полного куска.

        Неполный кусок в конце файла отбрасывается.

        Raises:
            StreamReadError: при ошибке чтения. Уже отданные значения остаются у потребителя.
        """
        accumulator = ChunkAccumulator(plan.chunk_size)
        while True:
            try:
                buffer = stream.read(buffer_size)
            except OSError as exc:
                raise StreamReadError(f"ошибка чтения файла: {exc.strerror or exc}") from exc
            if not buffer:
                break
            yield from accumulator.feed(buffer)

        if accumulator.count:
            logger.debug("dropped trailing partial chunk of %d bytes", accumulator.count)
