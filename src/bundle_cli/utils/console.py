"""Console utility functions for formatting and output."""

from typing import Iterable, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.theme import Theme


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✨',
    'running': '🚀',
    'gear': '⚙️',
    'info': '💡',
    'warning': '⚠️',
    'error': '❌',
    'list': '📋',
    'eyes': '👀',
    'globe': '🌐',
    'clock': '⏱️'
}

_THEME = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "muted": "dim",
    "size": "blue",
})

_console = None


def _get_console() -> Console:
    """Get the shared Rich console, creating it on first use."""
    global _console
    if _console is None:
        _console = Console(theme=_THEME, highlight=False)
    return _console


def _rich_echo(message: str, color: str = "white", bold: bool = False, symbol: Optional[str] = None):
    """Echo message with Rich formatting."""
    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    style = f"bold {color}" if bold else color
    _get_console().print(message, style=style, markup=False)


def _rich_success(message: str, symbol: str = None):
    """Display success message with green color and bold styling."""
    _rich_echo(message, color="green", symbol=symbol, bold=True)


def _rich_error(message: str, symbol: str = None):
    """Display error message with red color."""
    _rich_echo(message, color="red", symbol=symbol)


def _rich_warning(message: str, symbol: str = None):
    """Display warning message with yellow color."""
    _rich_echo(message, color="yellow", symbol=symbol)


def _rich_info(message: str, symbol: str = None):
    """Display info message with blue color."""
    _rich_echo(message, color="blue", symbol=symbol)


def _rich_blank_line():
    _get_console().print()


def _create_files_table(rows: Iterable[Tuple[str, str]], title: str = "Files",
                        value_header: str = "Size") -> Table:
    """Create a Rich table of file paths with one value column."""
    table = Table(title=f"{STATUS_SYMBOLS['list']} {title}", show_header=True, header_style="bold cyan")
    table.add_column("File", style="muted")
    table.add_column(value_header, style="size", justify="right")
    for path, value in rows:
        table.add_row(path, value)
    return table
