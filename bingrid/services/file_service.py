"""Открытие файла с диска и получение его размера.

Принципы:
- SRP: класс отвечает только за доступ к файлу, без разбора содержимого.
- Ресурсы: файл закрывается на любом пути выхода, включая ошибки.
"""
from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from bingrid.models.errors import FileAccessError
from bingrid.models.grid_model import BinarySource

logger = logging.getLogger(__name__)


class FileService:
    @contextmanager
    def open(self, file_path: str | Path) -> Iterator[BinarySource]:
        """Открывает файл на чтение и отдаёт его вместе с размером.

        Args:
            file_path: Путь до файла.

        Yields:
            `BinarySource` с открытым бинарным потоком и размером файла в байтах.

        Raises:
            FileAccessError: если файл не открывается или его размер недоступен.
        """
        path = Path(file_path)
        try:
            handle = path.open("rb")
        except OSError as exc:
            raise FileAccessError(f"не удалось открыть файл {path}: {exc.strerror or exc}") from exc

        try:
            try:
                size = os.fstat(handle.fileno()).st_size
            except OSError as exc:
                raise FileAccessError(f"не удалось получить размер файла {path}: {exc.strerror or exc}") from exc

            logger.debug("file: %s, size: %d", path, size)
            yield BinarySource(path=path, size=size, stream=handle)
        finally:
            handle.close()
