"""Plugins that collect, delete, read and write the artifacts of a build."""

from pathlib import Path

from ..artifacts.builder import derive_artifact_set
from ..artifacts.models import BuildState
from ..config import BuildConfig
from ..injection import BODY_END_MARKER, inject_script_tags
from .base import BuildPlugin, PluginBuild


class CollectFilesPlugin(BuildPlugin):
    """Rebuilds the artifact set from the configuration at every build start."""

    name = "collect-files"

    def __init__(self, config: BuildConfig, state: BuildState):
        self.config = config
        self.state = state

    def setup(self, build: PluginBuild) -> None:
        def collect():
            self.state.files = derive_artifact_set(self.config)
        build.on_start(collect)


class DeleteFilesPlugin(BuildPlugin):
    """Removes outputs of the previous build."""

    name = "delete-files"

    def __init__(self, state: BuildState):
        self.state = state

    def setup(self, build: PluginBuild) -> None:
        def delete():
            for file in self.state.files:
                path = Path(file.dst_path)
                if path.is_file():
                    path.unlink()
        build.on_start(delete)


class ReadFilesPlugin(BuildPlugin):
    """Fills every artifact's content from its source path."""

    name = "read-files"

    def __init__(self, state: BuildState):
        self.state = state

    def setup(self, build: PluginBuild) -> None:
        def read():
            for file in self.state.files:
                path = Path(file.src_path)
                file.content = path.read_text(encoding="utf-8") if path.is_file() else ""
        build.on_start(read)


class WriteFilesPlugin(BuildPlugin):
    """Links bundled scripts into HTML files and writes all artifacts out.

    Must be registered after every plugin that changes artifact content.
    """

    name = "write-files"

    def __init__(self, state: BuildState):
        self.state = state

    def setup(self, build: PluginBuild) -> None:
        def write():
            scripts = [file.basename for file in self.state.script_files()]
            for file in self.state.files:
                if file.is_html:
                    file.content = inject_script_tags(file.content, BODY_END_MARKER, scripts)
                path = Path(file.dst_path)
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(file.content, encoding="utf-8")
        build.on_start(write)
