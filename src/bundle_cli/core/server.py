"""Development server: serves the output directory and rebuilds on change."""

import functools
import threading
import time
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Optional

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from ..plugins import BuildResult
from ..utils.console import _rich_error, _rich_info, _rich_success, _rich_warning
from .context import BuildContext

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8000


def report_result(result: BuildResult) -> None:
    """Print the errors and warnings of a build cycle."""
    for warning in result.warnings:
        _rich_warning(warning, symbol="warning")
    for error in result.errors:
        _rich_error(error, symbol="error")


class QuietRequestHandler(SimpleHTTPRequestHandler):
    """Static file handler that keeps request logging off the console."""

    def log_message(self, format, *args):
        pass


class RebuildHandler(FileSystemEventHandler):
    """Rebuilds the context when a watched source file changes.

    Events on tracked output files are ignored. The whole output directory is
    ignored too, unless it contains the watched tree (an ``outfile`` in the
    project root, for instance).
    """

    def __init__(self, context: BuildContext, output_dir: Path, debounce_delay: float = 1.0,
                 watch_dir: Optional[Path] = None):
        self.context = context
        self.output_dir = output_dir.resolve()
        self.debounce_delay = debounce_delay
        self.last_build = 0.0
        self._lock = threading.Lock()

        watched = (watch_dir or Path(".")).resolve()
        self._ignore_output_dir = not (watched == self.output_dir or self.output_dir in watched.parents)

    def _is_output(self, path: str) -> bool:
        resolved = Path(path).resolve()
        if any(resolved == Path(file.dst_path).resolve() for file in self.context.state.files):
            return True
        if not self._ignore_output_dir:
            return False
        return resolved == self.output_dir or self.output_dir in resolved.parents

    def on_any_event(self, event):
        if event.is_directory or self._is_output(event.src_path):
            return

        with self._lock:
            # Debounce rapid changes
            current_time = time.time()
            if current_time - self.last_build < self.debounce_delay:
                return
            self.last_build = current_time

            _rich_info(f"File changed: {event.src_path}", symbol="eyes")
            report_result(self.context.rebuild())


class DevServer:
    """Serves the build output over HTTP while watching the sources."""

    def __init__(self, context: BuildContext, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT):
        self.context = context
        self.host = host
        self.port = port
        self.output_dir = Path(context.config.outdir or Path(context.config.outfile or ".").parent)
        self.watch_dir = Path(context.config.outbase or ".")

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}/"

    def serve_forever(self) -> None:
        """Build once, then serve and rebuild until interrupted with Ctrl+C."""
        report_result(self.context.rebuild())
        self.output_dir.mkdir(parents=True, exist_ok=True)

        handler = functools.partial(QuietRequestHandler, directory=str(self.output_dir))
        httpd = ThreadingHTTPServer((self.host, self.port), handler)
        server_thread = threading.Thread(target=httpd.serve_forever, daemon=True)

        observer = Observer()
        observer.schedule(RebuildHandler(self.context, self.output_dir, watch_dir=self.watch_dir),
                          str(self.watch_dir), recursive=True)

        server_thread.start()
        observer.start()
        _rich_success(f"serve: {self.url}", symbol="globe")
        _rich_info("Press Ctrl+C to stop the server...", symbol="info")

        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            _rich_info("interrupt signal received, closing server...")
        finally:
            observer.stop()
            httpd.shutdown()
            httpd.server_close()
            observer.join()
