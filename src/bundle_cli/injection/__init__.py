"""Text injection helpers used to splice script tags into HTML."""

from .insertion import InsertionMode, string_insertion
from .injector import inject_script_tags, render_script_tag
from .constants import HEAD_END_MARKER, BODY_END_MARKER

__all__ = [
    'InsertionMode',
    'string_insertion',
    'inject_script_tags',
    'render_script_tag',
    'HEAD_END_MARKER',
    'BODY_END_MARKER'
]
