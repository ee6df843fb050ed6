"""Build timing and output size report."""

import time
from datetime import datetime
from pathlib import Path
from typing import List, Tuple

from ..artifacts.models import BuildState
from ..utils.console import (
    _create_files_table,
    _get_console,
    _rich_blank_line,
    _rich_echo,
    _rich_success,
)
from ..utils.helpers import format_size
from .base import BuildPlugin, BuildResult, PluginBuild


class BuildInfoPlugin(BuildPlugin):
    """Prints when the build finished, the size of every output and the elapsed time."""

    name = "build-info"

    def __init__(self, state: BuildState):
        self.state = state
        self.start_time = None

    def output_sizes(self) -> List[Tuple[str, str]]:
        """(path, human readable size) of every artifact present on disk."""
        rows = []
        for file in self.state.files:
            path = Path(file.dst_path)
            if path.is_file():
                rows.append((file.dst_path, format_size(path.stat().st_size)))
        return rows

    def setup(self, build: PluginBuild) -> None:
        def start():
            self.start_time = time.perf_counter()
            _rich_blank_line()

        def end(result: BuildResult):
            now = datetime.now()
            _rich_echo(f"build time: {now.strftime('%x')} {now.strftime('%X')}", symbol="clock")
            rows = self.output_sizes()
            if rows:
                _get_console().print(_create_files_table(rows, title="Output"))
            if self.start_time is not None:
                elapsed_ms = int((time.perf_counter() - self.start_time) * 1000)
                _rich_success(f"{elapsed_ms} ms")

        build.on_start(start)
        build.on_end(end)
