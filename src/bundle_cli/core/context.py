"""Build context driving the plugin pipeline around the bundler."""

from typing import List, Optional

from ..artifacts.models import BuildState
from ..config import BuildConfig
from ..errors import BuildError
from ..plugins import BuildPlugin, BuildResult, PluginBuild, create_plugins
from .bundler import EsbuildBundler


class BuildContext:
    """Owns the plugins of a build and runs build cycles.

    A context is created once and may rebuild many times (serve mode). Each
    cycle runs the start hooks, the bundler and then the end hooks. The first
    failing start hook aborts the cycle, so nothing is written after an error.
    """

    def __init__(self, config: BuildConfig, bundler=None, plugins: Optional[List[BuildPlugin]] = None):
        self.config = config
        self.state = BuildState()
        self.bundler = bundler or EsbuildBundler()
        self.plugins = plugins if plugins is not None else create_plugins(config, self.state)
        self.build = PluginBuild()
        for plugin in self.plugins:
            plugin.setup(self.build)

    def rebuild(self) -> BuildResult:
        """Run one build cycle and return its result."""
        result = BuildResult()
        try:
            self.build.run_start()
            result.warnings.extend(self.bundler.bundle(self.config, self.build) or [])
        except BuildError as e:
            result.errors.append(str(e))
        self.build.run_end(result)
        return result
