"""Core injection logic. The injector itself is in envinject_cli.core.injector."""

from .errors import (
    InjectorError,
    ConfigError,
    IOFailure,
    UnresolvedToken,
    UnresolvedTokensError,
)
from .substitution import placeholder_for, substitute
from .artifacts import find_artifacts, DEFAULT_EXTENSIONS

__all__ = [
    'InjectorError',
    'ConfigError',
    'IOFailure',
    'UnresolvedToken',
    'UnresolvedTokensError',
    'placeholder_for',
    'substitute',
    'find_artifacts',
    'DEFAULT_EXTENSIONS',
]
