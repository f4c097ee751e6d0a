"""Error taxonomy for runtime injection."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union


class InjectorError(Exception):
    """Base class for errors that abort an injection run."""


class ConfigError(InjectorError):
    """Invalid configuration (bad token name, unreadable config file, ...)."""


class IOFailure(InjectorError):
    """Fatal filesystem error: missing root or an artifact that cannot be read or written."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{message}: {self.path}"
        super().__init__(message)


class UnresolvedTokensError(InjectorError):
    """Raised in strict mode when declared tokens have no binding."""

    def __init__(self, tokens: Iterable[str]):
        self.tokens: List[str] = list(tokens)
        super().__init__(f"Unresolved tokens in strict mode: {', '.join(self.tokens)}")


@dataclass(frozen=True)
class UnresolvedToken:
    """Warning record for a declared token with no runtime binding."""
    name: str
    placeholder: str

    def __str__(self) -> str:
        return f"{self.name} not set"
