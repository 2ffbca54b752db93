"""Выбор размеров сетки: явные флаги, размер терминала и значения по умолчанию."""
from __future__ import annotations

import logging
import math
from typing import Callable, Tuple

from bingrid.config import CELL_COLUMNS, HEIGHT_MARGIN
from bingrid.models.errors import ConfigurationError
from bingrid.models.grid_model import GridDimensions, RunConfig

logger = logging.getLogger(__name__)

SizeQuery = Callable[[], Tuple[int, int]]


class DimensionService:
    def resolve(self, config: RunConfig, file_size: int, query_size: SizeQuery) -> GridDimensions:
        """Определяет ширину и высоту сетки.

        Если заданы обе величины, они берутся как есть и проверяются против
        размера файла; терминал не опрашивается. Иначе недостающее берётся из
        размера терминала.

        Raises:
            ConfigurationError: явная сетка содержит больше ячеек, чем байт в файле.
            TerminalQueryError: размер терминала недоступен (пробрасывается из `query_size`).
        """
        width, height = config.explicit_width, config.explicit_height

        if width is not None and height is not None:
            if width * height > file_size:
                raise ConfigurationError(width * height, file_size)
            dims = GridDimensions(width=width, height=height)
        else:
            default_width, default_height = self.defaults(*query_size())
            dims = GridDimensions(
                width=default_width if width is None else width,
                height=default_height if height is None else height,
            )

        logger.debug("grid width: %d, height: %d", dims.width, dims.height)
        return dims

    def defaults(self, columns: int, rows: int) -> Tuple[int, int]:
        """Размер сетки по умолчанию для терминала `columns` x `rows`."""
        width = max(1, columns // CELL_COLUMNS)
        height = max(1, math.ceil(rows / HEIGHT_MARGIN))
        return width, height
