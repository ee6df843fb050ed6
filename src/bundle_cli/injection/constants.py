"""Markers and templates for HTML script injection."""

HEAD_END_MARKER = "</head>"
BODY_END_MARKER = "</body>"

SCRIPT_TAG_TEMPLATE = '<script src="{src}"></script>'
