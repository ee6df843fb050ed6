"""Artifact set derivation for bundler builds."""

from .models import BuildFile, BuildState, EntryPoint
from .paths import trailing_slash, common_path_prefix
from .builder import derive_artifact_set, normalize_entry_points, sourcemaps_enabled

__all__ = [
    'BuildFile',
    'BuildState',
    'EntryPoint',
    'trailing_slash',
    'common_path_prefix',
    'derive_artifact_set',
    'normalize_entry_points',
    'sourcemaps_enabled'
]
