from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Tuple

import pytest


def _cell(intensity: int) -> str:
    i = intensity
    return f"\x1b[38;2;{i};{i};{i}m\x1b[48;2;{i};{i};{i}m  \x1b[39m\x1b[49m"


class RecordingTerminal:
    """Запоминает вызовы вместо вывода escape-последовательностей."""

    def __init__(self, size: Tuple[int, int] = (80, 24)) -> None:
        self.size = size
        self.events: List[str] = []
        self.flushes = 0

    def query_size(self) -> Tuple[int, int]:
        return self.size

    def write_colored_cell(self, intensity: int) -> None:
        self.events.append(f"cell:{intensity}")

    def write_newline(self) -> None:
        self.events.append("nl")

    def flush(self) -> None:
        self.flushes += 1

    @property
    def intensities(self) -> List[int]:
        return [int(e.split(":")[1]) for e in self.events if e.startswith("cell:")]


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[[bytes], Path]:
    def _make(data: bytes, name: str = "input.bin") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make


@pytest.fixture
def cell() -> Callable[[int], str]:
    """Ожидаемый вывод одной ячейки с заданной яркостью."""
    return _cell


@pytest.fixture
def recording_terminal() -> RecordingTerminal:
    return RecordingTerminal()
