"""Derivation of the expected artifact set from the bundler configuration."""
from __future__ import annotations

import os
import re
from typing import TYPE_CHECKING, Iterable, Iterator, List, Mapping, Union

from ..errors import ConfigurationError
from .models import BuildFile, EntryPoint, EntryPointSpec
from .paths import common_path_prefix, trailing_slash

if TYPE_CHECKING:
    from ..config import BuildConfig


TYPESCRIPT_EXTENSION = re.compile(r'\.tsx?$')
SOURCEMAP_DISABLED = (None, False, 'none')
STATIC_EXTENSION = '.html'


def normalize_entry_points(
    entry_points: Union[Iterable[EntryPointSpec], Mapping[str, EntryPointSpec], None]
) -> List[str]:
    """Flatten entry points to the ordered list of paths that decide outputs.

    A mapping contributes its values in insertion order. Object entries
    contribute their declared output path, bare strings contribute themselves.
    """
    if entry_points is None:
        return []
    if isinstance(entry_points, Mapping):
        entry_points = entry_points.values()

    paths = []
    for entry_point in entry_points:
        if isinstance(entry_point, EntryPoint):
            paths.append(entry_point.out)
        elif isinstance(entry_point, Mapping):
            paths.append(EntryPoint.from_dict(dict(entry_point)).out)
        else:
            paths.append(str(entry_point))
    return paths


def sourcemaps_enabled(sourcemap) -> bool:
    """Whether the sourcemap mode makes the bundler emit ``.map`` artifacts."""
    return sourcemap not in SOURCEMAP_DISABLED


def find_static_files(outbase: str, outdir: str = '') -> Iterator[str]:
    """Yield every ``.html`` file below ``outbase`` in sorted order.

    Paths are yielded with ``outbase`` as their literal prefix. The output
    directory is not descended into when it lives below ``outbase``.
    """
    root = outbase.rstrip('/') or '.'
    if not os.path.isdir(root):
        return
    skip_dir = os.path.normpath(outdir) if outdir else None

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(
            d for d in dirnames
            if os.path.normpath(os.path.join(dirpath, d)) != skip_dir
        )
        for filename in sorted(filenames):
            if not filename.endswith(STATIC_EXTENSION):
                continue
            relative = os.path.relpath(os.path.join(dirpath, filename), root)
            yield outbase + relative.replace(os.sep, '/')


def derive_artifact_set(config: 'BuildConfig') -> List[BuildFile]:
    """Compute the ordered artifact set for one build cycle.

    Order: primary outputs in entry point order, each directly followed by
    its sourcemap when sourcemaps are enabled, then the discovered HTML
    files. Nothing is cached; every call reads the configuration and the
    file system afresh.

    Args:
        config: Bundler configuration.

    Returns:
        List[BuildFile]: Artifacts with empty content.

    Raises:
        ConfigurationError: If neither ``outdir`` nor ``outfile`` is set.
    """
    entry_points = normalize_entry_points(config.resolved_entry_points())
    outbase = config.outbase or ''
    outdir = config.outdir or ''

    if outbase:
        outbase = trailing_slash(outbase)
    else:
        outbase = common_path_prefix(entry_points)

    if outdir:
        outdir = trailing_slash(outdir)
        paths = [entry_point.replace(outbase, outdir, 1) for entry_point in entry_points]
    elif config.outfile:
        paths = [config.outfile]
        outdir = common_path_prefix(paths)
    else:
        raise ConfigurationError("Either 'outdir' or 'outfile' must be configured")

    with_maps = sourcemaps_enabled(config.sourcemap)
    build_files: List[BuildFile] = []
    for path in paths:
        primary = BuildFile(src_path=path, dst_path=TYPESCRIPT_EXTENSION.sub('.js', path))
        build_files.append(primary)
        if with_maps:
            build_files.append(BuildFile(src_path=primary.src_path, dst_path=primary.dst_path + '.map'))

    for static_path in find_static_files(outbase, outdir):
        build_files.append(BuildFile(
            src_path=static_path,
            dst_path=static_path.replace(outbase, outdir, 1)
        ))

    return build_files
