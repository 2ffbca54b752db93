"""Константы и настройка логирования."""
from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional

# размер буфера чтения; на результат не влияет
READ_BUFFER_SIZE = 8096

# запас по высоте под приглашение оболочки
HEIGHT_MARGIN = 1.1

# каждая ячейка занимает две колонки терминала
CELL_GLYPH = "  "
CELL_COLUMNS = len(CELL_GLYPH)

LOG_ENV_VAR = "BINGRID_LOG"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "[%(levelname)s %(name)s] %(message)s"


def configure_logging(environ: Optional[Mapping[str, str]] = None) -> int:
    """Настраивает корневой логгер по переменной окружения `BINGRID_LOG`.

    Значение: имя уровня (`debug`, `info`, ...). Неизвестное имя трактуется
    как уровень по умолчанию. Записи идут в stderr, чтобы не смешиваться с сеткой.

    Returns:
        Установленный уровень логирования.
    """
    env = os.environ if environ is None else environ
    name = env.get(LOG_ENV_VAR, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)
    return level
