"""Helper utility functions for bundle-hooks."""

import shutil
from pathlib import Path
from typing import List, Optional

SIZE_UNITS = (
    ('GB', 1024 ** 3),
    ('MB', 1024 ** 2),
    ('kB', 1024),
)


def is_tool_available(tool_name):
    """Check if a command-line tool is available on PATH.

    Args:
        tool_name (str): Name of the tool to check.

    Returns:
        bool: True if the tool is available, False otherwise.
    """
    return shutil.which(tool_name) is not None


def resolve_tool_command(tool_name: str) -> Optional[List[str]]:
    """Get the command prefix that runs a Node tool.

    Prefers a binary on PATH and falls back to ``npx --no-install``, which
    picks up a project-local ``node_modules/.bin`` install.

    Returns:
        Optional[List[str]]: Command prefix, or None if the tool cannot be run.
    """
    if is_tool_available(tool_name):
        return [tool_name]
    if is_tool_available("npx"):
        return ["npx", "--no-install", tool_name]
    return None


def find_upwards(filename: str, start: str = ".") -> Optional[Path]:
    """Find ``filename`` in ``start`` or the closest parent directory containing it."""
    current = Path(start).resolve()
    for directory in [current, *current.parents]:
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None


def format_size(size: int) -> str:
    """Format a byte count with the largest unit it exceeds (e.g. ``1.50kB``)."""
    for unit, factor in SIZE_UNITS:
        if size > factor:
            return f"{size / factor:.2f}{unit}"
    return f"{size}bytes"
