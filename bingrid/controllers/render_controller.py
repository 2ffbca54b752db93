"""Контроллер отрисовки: оркестрация сервисов и вывода.

SOLID:
- SRP: класс связывает шаги конвейера, не реализуя ни один из них.
- DIP: терминал передаётся снаружи; сервисы заменяемы в тестах.
Clean Code:
- Ошибки не перехватываются: они поднимаются до точки входа.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bingrid.models.grid_model import RunConfig
from bingrid.services.chunk_service import ChunkService
from bingrid.services.dimension_service import DimensionService
from bingrid.services.file_service import FileService
from bingrid.ui.grid_renderer import GridRenderer
from bingrid.ui.terminal import AnsiTerminal

logger = logging.getLogger(__name__)


@dataclass
class RenderController:
    """Проводит один запуск: файл -> размеры -> куски -> средние -> ячейки.

    Ответственности:
    - Открытие файла через `FileService`.
    - Выбор размеров сетки через `DimensionService` (до любого вывода).
    - Потоковое усреднение через `ChunkService` и отрисовка через `GridRenderer`.
    """
    terminal: AnsiTerminal

    _file_service: FileService = field(default_factory=FileService)
    _dimension_service: DimensionService = field(default_factory=DimensionService)
    _chunk_service: ChunkService = field(default_factory=ChunkService)

    def run(self, config: RunConfig) -> int:
        """Отрисовывает файл и возвращает число выведенных ячеек."""
        with self._file_service.open(config.file_path) as source:
            dims = self._dimension_service.resolve(config, source.size, self.terminal.query_size)
            plan = self._chunk_service.plan(source.size, dims)

            renderer = GridRenderer(self.terminal, dims.width)
            for average in self._chunk_service.iter_averages(source.stream, plan):
                renderer.render(average)
            renderer.finish()

        logger.debug("rendered %d cells (%d x %d grid)", renderer.rendered, dims.width, dims.height)
        return renderer.rendered
