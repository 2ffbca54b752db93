from __future__ import annotations

from typing import Optional, TextIO

from bingrid.controllers.render_controller import RenderController
from bingrid.models.grid_model import RunConfig
from bingrid.ui.terminal import AnsiTerminal


class BinGridApp:
    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._terminal = AnsiTerminal(stream)
        self._controller = RenderController(terminal=self._terminal)

    def run(self, config: RunConfig) -> int:
        return self._controller.run(config)
