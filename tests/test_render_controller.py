from __future__ import annotations

import io
import random
from pathlib import Path

import pytest

from bingrid.app import BinGridApp
from bingrid.controllers.render_controller import RenderController
from bingrid.models.errors import ConfigurationError, FileAccessError, TerminalQueryError
from bingrid.models.grid_model import RunConfig
from bingrid.services.file_service import FileService
from bingrid.ui.terminal import AnsiTerminal


def _render(path: Path, width=None, height=None) -> str:
    out = io.StringIO()
    BinGridApp(out).run(RunConfig(file_path=path, explicit_width=width, explicit_height=height))
    return out.getvalue()


def test_hundred_zero_bytes_ten_by_ten(make_file, cell):
    path = make_file(bytes(100))
    expected = (cell(255) * 10 + "\n") * 10 + "\n"
    assert _render(path, 10, 10) == expected


def test_four_bytes_two_by_two(make_file, cell):
    path = make_file(bytes([0, 85, 170, 255]))
    expected = cell(255) + cell(170) + "\n" + cell(85) + cell(0) + "\n" + "\n"
    assert _render(path, 2, 2) == expected


def test_chunk_intensity_is_inverted_floor_mean(make_file, cell):
    path = make_file(bytes([10, 20, 31]))
    assert _render(path, 1, 1) == cell(255 - 20) + "\n" + "\n"


def test_exact_fit_and_remainder_render_same_cells(make_file):
    exact = make_file(bytes(range(1, 13)), name="exact.bin")
    with_rest = make_file(bytes(range(1, 13)) + bytes([250, 250]), name="rest.bin")
    assert _render(exact, 2, 2) == _render(with_rest, 2, 2)
    assert _render(exact, 2, 2).count("\x1b[48;2;") == 4


def test_grid_larger_than_file_writes_nothing(make_file):
    path = make_file(bytes(50))
    out = io.StringIO()
    with pytest.raises(ConfigurationError):
        BinGridApp(out).run(RunConfig(file_path=path, explicit_width=10, explicit_height=10))
    assert out.getvalue() == ""


def test_output_is_idempotent(make_file):
    rng = random.Random(99)
    path = make_file(bytes(rng.randrange(256) for _ in range(4321)))
    assert _render(path, 13, 7) == _render(path, 13, 7)


def test_missing_file(tmp_path):
    with pytest.raises(FileAccessError):
        _render(tmp_path / "missing.bin", 1, 1)


def test_terminal_defaults_used_when_dimension_missing(make_file, recording_terminal):
    recording_terminal.size = (8, 2)  # -> 4 x 2 grid
    path = make_file(bytes(16))
    count = RenderController(terminal=recording_terminal).run(RunConfig(file_path=path))
    assert count == 8
    assert recording_terminal.events.count("nl") == 3


def test_no_terminal_and_no_dimensions(make_file):
    out = io.StringIO()
    controller = RenderController(terminal=AnsiTerminal(out))
    with pytest.raises(TerminalQueryError):
        controller.run(RunConfig(file_path=make_file(bytes(10)), explicit_width=3))
    assert out.getvalue() == ""


class TestFileService:
    def test_reports_size_and_closes(self, make_file):
        path = make_file(b"abcdef")
        with FileService().open(path) as source:
            assert source.size == 6
            assert source.path == path
            stream = source.stream
        assert stream.closed

    def test_directory_is_not_readable(self, tmp_path):
        with pytest.raises(FileAccessError):
            with FileService().open(tmp_path):
                pass

    def test_closes_on_error(self, make_file):
        with pytest.raises(RuntimeError):
            with FileService().open(make_file(b"x")) as source:
                stream = source.stream
                raise RuntimeError("boom")
        assert stream.closed
