"""Script tag injection into HTML artifacts."""

from typing import Iterable

from .constants import SCRIPT_TAG_TEMPLATE
from .insertion import InsertionMode, string_insertion


def render_script_tag(src: str) -> str:
    """Render a ``<script>`` tag loading ``src``."""
    return SCRIPT_TAG_TEMPLATE.format(src=src)


def inject_script_tags(content: str, marker: str, sources: Iterable[str]) -> str:
    """Insert one script tag per source before ``marker``, in order.

    Content without the marker is returned unchanged.
    """
    for src in sources:
        content = string_insertion(content, marker, render_script_tag(src), InsertionMode.BEFORE)
    return content
