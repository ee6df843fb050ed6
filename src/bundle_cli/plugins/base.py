"""Plugin interface and lifecycle hook registry."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Pattern, Tuple, Union

FILE_NAMESPACE = "file"


@dataclass
class OnResolveArgs:
    path: str
    importer: str = ""
    namespace: str = FILE_NAMESPACE


@dataclass
class OnResolveResult:
    path: str
    namespace: str = FILE_NAMESPACE


@dataclass
class OnLoadArgs:
    path: str
    namespace: str = FILE_NAMESPACE


@dataclass
class OnLoadResult:
    contents: str
    loader: str = "js"


@dataclass
class BuildResult:
    """Outcome of one build cycle, handed to end hooks."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors


StartCallback = Callable[[], None]
EndCallback = Callable[[BuildResult], None]
ResolveCallback = Callable[[OnResolveArgs], Optional[OnResolveResult]]
LoadCallback = Callable[[OnLoadArgs], Optional[OnLoadResult]]


def _compile(filter: Union[str, Pattern]) -> Pattern:
    return filter if isinstance(filter, re.Pattern) else re.compile(filter)


class PluginBuild:
    """Registry of lifecycle callbacks, handed to every plugin's ``setup``.

    The host calls the ``run_*``, ``resolve`` and ``load`` methods at the
    matching points of a build cycle. Callbacks run in registration order.
    """

    def __init__(self):
        self._start: List[StartCallback] = []
        self._end: List[EndCallback] = []
        self._resolve: List[Tuple[Pattern, ResolveCallback]] = []
        self._load: List[Tuple[Pattern, str, LoadCallback]] = []

    def on_start(self, callback: StartCallback) -> None:
        self._start.append(callback)

    def on_end(self, callback: EndCallback) -> None:
        self._end.append(callback)

    def on_resolve(self, filter: Union[str, Pattern], callback: ResolveCallback) -> None:
        self._resolve.append((_compile(filter), callback))

    def on_load(self, filter: Union[str, Pattern], callback: LoadCallback,
                namespace: str = FILE_NAMESPACE) -> None:
        self._load.append((_compile(filter), namespace, callback))

    def run_start(self) -> None:
        """Run start callbacks; the first exception aborts the remaining ones."""
        for callback in self._start:
            callback()

    def run_end(self, result: BuildResult) -> None:
        for callback in self._end:
            callback(result)

    def resolve(self, path: str, importer: str = "") -> Optional[OnResolveResult]:
        """Resolve ``path`` through the first matching callback that returns a result."""
        args = OnResolveArgs(path=path, importer=importer)
        for pattern, callback in self._resolve:
            if pattern.search(path):
                result = callback(args)
                if result is not None:
                    return result
        return None

    def load(self, path: str, namespace: str = FILE_NAMESPACE) -> Optional[OnLoadResult]:
        """Load ``path`` through the first matching callback of ``namespace``."""
        args = OnLoadArgs(path=path, namespace=namespace)
        for pattern, callback_namespace, callback in self._load:
            if callback_namespace == namespace and pattern.search(path):
                result = callback(args)
                if result is not None:
                    return result
        return None


class BuildPlugin(ABC):
    """Base class for build plugins."""

    name: str = ""

    @abstractmethod
    def setup(self, build: PluginBuild) -> None:
        """Register the plugin's callbacks on ``build``."""
        pass
