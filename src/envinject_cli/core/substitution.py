"""Pure placeholder handling.

Placeholders are baked into build output as ``__<TOKEN>__``. Replacement is a
literal substring replace: values are inserted verbatim, so characters such as
``|``, ``&`` or ``\\1`` that would break a sed-style substitution are safe.
"""

import re
from typing import Iterable, List, Tuple

from .errors import ConfigError

PLACEHOLDER_PREFIX = "__"
PLACEHOLDER_SUFFIX = "__"

TOKEN_NAME_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


def placeholder_for(token: str) -> str:
    """Return the placeholder string baked in for ``token``."""
    return f"{PLACEHOLDER_PREFIX}{token}{PLACEHOLDER_SUFFIX}"


def validate_token_name(token: str) -> str:
    if not isinstance(token, str) or not TOKEN_NAME_PATTERN.match(token):
        raise ConfigError(f"Invalid token name: {token!r}")
    return token


def normalize_tokens(tokens: Iterable[str]) -> List[str]:
    """Validate token names and drop duplicates, keeping declaration order."""
    seen = set()
    result = []
    for token in tokens:
        token = validate_token_name(token.strip() if isinstance(token, str) else token)
        if token not in seen:
            seen.add(token)
            result.append(token)
    return result


def substitute(content: str, placeholder: str, value: str) -> Tuple[str, int]:
    """Replace every literal occurrence of ``placeholder`` in ``content``.

    Args:
        content: File content.
        placeholder: Literal marker to replace.
        value: Replacement text, inserted verbatim.

    Returns:
        (new_content, replacement_count)
    """
    if not placeholder:
        return content, 0
    count = content.count(placeholder)
    if count == 0:
        return content, 0
    return content.replace(placeholder, value), count
