"""Externalization of imports that are provided as browser globals.

Imports listed in the import table are not bundled. Each one resolves into
a virtual namespace whose only module body re-exports the global, and the
script defining that global is linked into every HTML artifact.
"""

import re
from typing import Iterable, Pattern

from ..artifacts.models import BuildState
from ..config import ImportTable
from ..errors import UnknownImportError
from ..injection import HEAD_END_MARKER, inject_script_tags
from ..utils.console import _rich_echo, _rich_info
from .base import (
    BuildPlugin,
    OnLoadArgs,
    OnLoadResult,
    OnResolveArgs,
    OnResolveResult,
    PluginBuild,
)

GLOBAL_NAMESPACE = "global-ns"
NEVER_MATCH = "(?!)"


def build_import_filter(paths: Iterable[str]) -> Pattern:
    """Compile an anchored alternation matching exactly the given import paths.

    With no paths the pattern matches nothing at all.
    """
    alternatives = [f"^{re.escape(path)}$" for path in paths]
    return re.compile("|".join(alternatives) if alternatives else NEVER_MATCH)


def render_global_module(name: str) -> str:
    """Module body re-exporting the global ``name``."""
    return f"module.exports = {name};"


class ImportGlobalsPlugin(BuildPlugin):
    """Serves configured imports from globals when ``extern`` is enabled."""

    name = "import-globals"

    def __init__(self, state: BuildState, imports: ImportTable, extern: bool = False):
        self.state = state
        self.imports = imports
        self.extern = extern
        self.filter = build_import_filter(self.imports.keys() if self.extern else [])

    def resolve(self, args: OnResolveArgs) -> OnResolveResult:
        entry = self.imports.get(args.path)
        if entry is None or not entry.name:
            raise UnknownImportError(args.path)
        return OnResolveResult(path=args.path, namespace=GLOBAL_NAMESPACE)

    def load(self, args: OnLoadArgs) -> OnLoadResult:
        entry = self.imports.get(args.path)
        if entry is None or not entry.name:
            raise UnknownImportError(args.path)
        return OnLoadResult(contents=render_global_module(entry.name), loader="js")

    def inject_scripts(self) -> None:
        if not self.extern:
            return
        sources = [entry.src for entry in self.imports.values()]
        for file in self.state.html_files():
            file.content = inject_script_tags(file.content, HEAD_END_MARKER, sources)

    def print_summary(self) -> None:
        _rich_info(f"[{self.name}]")
        _rich_echo(f"extern = {str(self.extern).lower()}")
        _rich_echo("import = {")
        if self.imports:
            _rich_echo(",\n".join(
                f"    {entry.name}: {path} [{entry.src}]" for path, entry in self.imports.items()
            ))
        _rich_echo("}")

    def setup(self, build: PluginBuild) -> None:
        self.print_summary()
        build.on_start(self.inject_scripts)
        build.on_resolve(self.filter, self.resolve)
        build.on_load(self.filter, self.load, namespace=GLOBAL_NAMESPACE)
