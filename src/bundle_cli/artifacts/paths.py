"""Path helpers for mapping entry points to output locations.

All paths are handled as forward-slash strings, the way the bundler
configuration spells them, rather than as ``Path`` objects.
"""

from itertools import takewhile
from typing import List, Sequence


def trailing_slash(path: str) -> str:
    """Return ``path`` with exactly one trailing slash appended if missing."""
    return path if path.endswith('/') else path + '/'


def common_path_prefix(paths: Sequence[str]) -> str:
    """Compute the longest common directory ancestor of ``paths``.

    The last segment of every path is treated as a file name and ignored.
    Segments are compared whole, so ``/foo/bar/x`` and ``/foo/baz2/y`` share
    ``/foo/`` and never a partial segment like ``/foo/ba``.

    Args:
        paths: Slash separated file paths.

    Returns:
        str: The common directory with a trailing slash, or an empty string
        when ``paths`` is empty or no directory is shared.
    """
    if not paths:
        return ''

    split_paths: List[List[str]] = [path.split('/')[:-1] for path in paths]
    common = split_paths[0]
    for split_path in split_paths[1:]:
        common = [
            segment for segment, _ in takewhile(
                lambda pair: pair[0] == pair[1],
                zip(common, split_path)
            )
        ]

    if not common:
        return ''
    return '/'.join(common + [''])
