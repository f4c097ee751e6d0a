"""Console utility functions for formatting and output."""

import click
from typing import Optional, Any

from rich.console import Console
from colorama import Fore, Style, init

init(autoreset=True)


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✅',
    'running': '🔄',
    'info': '💡',
    'warning': '⚠️',
    'error': '❌',
    'arrow': '↳',
}


# Set by the CLI when --quiet is passed; warnings and errors still print
_QUIET = False


def set_quiet(quiet: bool):
    """Suppress informational output."""
    global _QUIET
    _QUIET = quiet


def is_quiet() -> bool:
    return _QUIET


def _get_console(stderr: bool = False) -> Optional[Any]:
    """Get Rich console instance."""
    try:
        return Console(stderr=stderr)
    except Exception:
        return None


def _rich_echo(message: str, color: str = "white", style: str = None, bold: bool = False,
               symbol: str = None, err: bool = False):
    """Echo message with Rich formatting or colorama fallback."""
    if style is not None:
        color = style

    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    console = _get_console(stderr=err)
    if console:
        try:
            style_str = f"bold {color}" if bold else color
            # Values and paths are printed verbatim, never as rich markup
            console.print(message, style=style_str, markup=False, highlight=False, emoji=False,
                          soft_wrap=True)
            return
        except Exception:
            pass

    color_map = {
        'red': Fore.RED,
        'green': Fore.GREEN,
        'yellow': Fore.YELLOW,
        'blue': Fore.BLUE,
        'cyan': Fore.CYAN,
        'white': Fore.WHITE,
        'muted': Fore.WHITE,
        'dim': Fore.WHITE,
    }
    color_code = color_map.get(color, Fore.WHITE)
    style_code = Style.BRIGHT if bold else ""
    click.echo(f"{color_code}{style_code}{message}{Style.RESET_ALL}", err=err)


def _rich_success(message: str, symbol: str = None):
    """Display success message with green color and bold styling."""
    if _QUIET:
        return
    _rich_echo(message, color="green", symbol=symbol, bold=True)


def _rich_error(message: str, symbol: str = None):
    """Display error message with red color on stderr."""
    _rich_echo(message, color="red", symbol=symbol, err=True)


def _rich_warning(message: str, symbol: str = None):
    """Display warning message with yellow color."""
    _rich_echo(message, color="yellow", symbol=symbol)


def _rich_info(message: str, symbol: str = None):
    """Display info message with blue color."""
    if _QUIET:
        return
    _rich_echo(message, color="blue", symbol=symbol)


def _rich_muted(message: str, symbol: str = None):
    """Display secondary detail in dim text."""
    if _QUIET:
        return
    _rich_echo(message, color="dim", symbol=symbol)
