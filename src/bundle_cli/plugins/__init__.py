"""Build plugins and the ordered pipeline they form."""

from typing import List

from ..artifacts.models import BuildState
from ..config import BuildConfig
from .base import (
    BuildPlugin,
    BuildResult,
    OnLoadArgs,
    OnLoadResult,
    OnResolveArgs,
    OnResolveResult,
    PluginBuild,
    FILE_NAMESPACE
)
from .build_info import BuildInfoPlugin
from .check_types import CheckTypesPlugin
from .files import CollectFilesPlugin, DeleteFilesPlugin, ReadFilesPlugin, WriteFilesPlugin
from .import_globals import ImportGlobalsPlugin, GLOBAL_NAMESPACE, build_import_filter


def create_plugins(config: BuildConfig, state: BuildState) -> List[BuildPlugin]:
    """Create the plugin pipeline in the order its start hooks must run.

    Files are collected first, read before any transform, and written last;
    stale outputs are deleted before anything is written.
    """
    return [
        CollectFilesPlugin(config, state),
        CheckTypesPlugin(enabled=config.check_types),
        DeleteFilesPlugin(state),
        ReadFilesPlugin(state),
        BuildInfoPlugin(state),
        ImportGlobalsPlugin(state, config.imports, extern=config.extern),
        WriteFilesPlugin(state)
    ]


__all__ = [
    'BuildPlugin',
    'BuildResult',
    'OnLoadArgs',
    'OnLoadResult',
    'OnResolveArgs',
    'OnResolveResult',
    'PluginBuild',
    'FILE_NAMESPACE',
    'GLOBAL_NAMESPACE',
    'BuildInfoPlugin',
    'CheckTypesPlugin',
    'CollectFilesPlugin',
    'DeleteFilesPlugin',
    'ReadFilesPlugin',
    'WriteFilesPlugin',
    'ImportGlobalsPlugin',
    'build_import_filter',
    'create_plugins'
]
