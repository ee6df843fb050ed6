"""Version management for bundle-hooks."""

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION_NAME = "bundle-hooks"


def get_version() -> str:
    """
    Get the current version.

    Uses the installed distribution metadata and falls back to parsing
    pyproject.toml when running from a source checkout.

    Returns:
        str: Version string
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        pass

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        # Simple regex parsing instead of full TOML library
        content = pyproject_path.read_text(encoding="utf-8")
        match = re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
        if match:
            return match.group(1)

    return "unknown"


__version__ = get_version()
