"""Точка входа в приложение."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from bingrid.app import BinGridApp
from bingrid.config import configure_logging
from bingrid.models.errors import BinGridError
from bingrid.models.grid_model import RunConfig


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"ожидается целое число, получено {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"ожидается положительное число, получено {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    # -h занят высотой, поэтому справка только через --help
    ap = argparse.ArgumentParser(
        prog="bingrid",
        description="Показывает бинарный файл как сетку серых блоков в терминале",
        add_help=False,
    )
    ap.add_argument("file", type=Path, help="файл для отображения")
    ap.add_argument("-w", "--width", type=positive_int, default=None, help="ширина сетки в ячейках")
    ap.add_argument("-h", "--height", type=positive_int, default=None, help="высота сетки в ячейках")
    ap.add_argument("--help", action="help", help="показать справку и выйти")
    return ap


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Разбирает аргументы, отрисовывает файл и возвращает код выхода."""
    args = build_parser().parse_args(argv)
    configure_logging()

    config = RunConfig(file_path=args.file, explicit_width=args.width, explicit_height=args.height)
    try:
        BinGridApp().run(config)
    except BinGridError as exc:
        sys.stdout.flush()
        print(f"bingrid: ошибка: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Запускает приложение и завершает процесс с кодом выхода."""
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
