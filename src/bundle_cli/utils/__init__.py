"""Utility modules for bundle-hooks."""

from .console import (
    _rich_success,
    _rich_error,
    _rich_warning,
    _rich_info,
    _rich_echo,
    _rich_blank_line,
    _create_files_table,
    _get_console,
    STATUS_SYMBOLS
)
from .helpers import is_tool_available, resolve_tool_command, find_upwards, format_size

__all__ = [
    '_rich_success',
    '_rich_error',
    '_rich_warning',
    '_rich_info',
    '_rich_echo',
    '_rich_blank_line',
    '_create_files_table',
    '_get_console',
    'STATUS_SYMBOLS',
    'is_tool_available',
    'resolve_tool_command',
    'find_upwards',
    'format_size'
]
