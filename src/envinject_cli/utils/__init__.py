"""Utility modules for envinject."""

from .console import (
    _rich_success,
    _rich_error,
    _rich_warning,
    _rich_info,
    _rich_muted,
    _rich_echo,
    _get_console,
    set_quiet,
    is_quiet,
    STATUS_SYMBOLS
)

__all__ = [
    '_rich_success',
    '_rich_error',
    '_rich_warning',
    '_rich_info',
    '_rich_muted',
    '_rich_echo',
    '_get_console',
    'set_quiet',
    'is_quiet',
    'STATUS_SYMBOLS'
]
