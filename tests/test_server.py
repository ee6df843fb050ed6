"""Tests for serve mode rebuild handling."""

import threading
import time
from pathlib import Path

from watchdog.events import DirModifiedEvent, FileModifiedEvent

from bundle_cli.artifacts import BuildFile, BuildState
from bundle_cli.config import BuildConfig
from bundle_cli.core import DevServer
from bundle_cli.core.server import RebuildHandler
from bundle_cli.plugins import BuildResult


class CountingContext:
    def __init__(self, config=None, build_time=0.0):
        self.config = config or BuildConfig()
        self.state = BuildState()
        self.build_time = build_time
        self.calls = 0

    def rebuild(self):
        self.calls += 1
        time.sleep(self.build_time)
        return BuildResult()


def test_source_change_triggers_rebuild(tmp_path):
    context = CountingContext()
    handler = RebuildHandler(context, tmp_path / "out", debounce_delay=0)

    handler.on_any_event(FileModifiedEvent(str(tmp_path / "src" / "index.ts")))
    handler.on_any_event(FileModifiedEvent(str(tmp_path / "src" / "index.html")))

    assert context.calls == 2


def test_output_and_directory_events_are_ignored(tmp_path):
    context = CountingContext()
    handler = RebuildHandler(context, tmp_path / "out", debounce_delay=0)

    handler.on_any_event(FileModifiedEvent(str(tmp_path / "out" / "index.js")))
    handler.on_any_event(DirModifiedEvent(str(tmp_path / "src")))

    assert context.calls == 0


def test_rapid_changes_are_debounced(tmp_path):
    context = CountingContext()
    handler = RebuildHandler(context, tmp_path / "out", debounce_delay=60)

    handler.on_any_event(FileModifiedEvent(str(tmp_path / "src" / "a.ts")))
    handler.on_any_event(FileModifiedEvent(str(tmp_path / "src" / "b.ts")))

    assert context.calls == 1


def test_concurrent_changes_rebuild_once(tmp_path):
    context = CountingContext(build_time=0.2)
    handler = RebuildHandler(context, tmp_path / "out", debounce_delay=60)

    threads = [
        threading.Thread(target=handler.on_any_event,
                         args=(FileModifiedEvent(str(tmp_path / "src" / f"{name}.ts")),))
        for name in ("a", "b", "c")
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert context.calls == 1


def test_root_outfile_still_rebuilds_on_source_change(tmp_path):
    context = CountingContext(BuildConfig(outdir="", outfile=str(tmp_path / "bundle.js"), outbase=str(tmp_path)))
    context.state.files = [BuildFile(str(tmp_path / "index.ts"), str(tmp_path / "bundle.js"))]
    server = DevServer(context)
    handler = RebuildHandler(context, server.output_dir, debounce_delay=0, watch_dir=server.watch_dir)

    handler.on_any_event(FileModifiedEvent(str(tmp_path / "bundle.js")))
    assert context.calls == 0

    handler.on_any_event(FileModifiedEvent(str(tmp_path / "src" / "index.ts")))
    assert context.calls == 1


def test_outfile_in_working_directory_rebuilds(tmp_path):
    context = CountingContext(BuildConfig(outdir="", outfile="bundle.js"))
    server = DevServer(context)
    assert server.output_dir == Path(".")

    handler = RebuildHandler(context, server.output_dir, debounce_delay=0, watch_dir=server.watch_dir)
    handler.on_any_event(FileModifiedEvent(str(Path("src") / "index.ts")))

    assert context.calls == 1


def test_server_directories():
    server = DevServer(CountingContext(), host="127.0.0.1", port=9000)
    assert server.url == "http://127.0.0.1:9000/"
    assert server.output_dir == Path("out/")
    assert server.watch_dir == Path("src/")

    single_file = DevServer(CountingContext(BuildConfig(outdir="", outfile="dist/app.js")))
    assert single_file.output_dir == Path("dist")
