"""Configuration management for envinject.

Values are layered, lowest priority first: built-in defaults, the
``injection`` section of ``envinject.yml``, ``ENVINJECT_*`` environment
variables, then command-line overrides.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .core.artifacts import DEFAULT_EXTENSIONS, normalize_extensions
from .core.errors import ConfigError
from .core.substitution import normalize_tokens


CONFIG_FILE = "envinject.yml"
CONFIG_SECTION = "injection"
ENV_PREFIX = "ENVINJECT_"

DEFAULT_ROOT = ".next"
DEFAULT_TOKENS = [
    "NEXT_PUBLIC_REDIRECT_URL",
    "NEXT_PUBLIC_CW_LOGIN_URL",
    "NEXT_PUBLIC_CW_APP_URL",
    "NEXT_PUBLIC_CW_DOMAIN",
]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _split_list(value: Any, key: str) -> List[str]:
    """Accept a YAML list or a comma/space separated string."""
    if isinstance(value, str):
        return [item for item in value.replace(",", " ").split() if item]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    raise ConfigError(f"'{key}' must be a list or a comma-separated string")


def _parse_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"'{key}' must be a boolean, got {value!r}")


def _parse_workers(value: Any, key: str) -> int:
    try:
        workers = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"'{key}' must be an integer, got {value!r}")
    if workers < 1:
        raise ConfigError(f"'{key}' must be at least 1, got {workers}")
    return workers


@dataclass
class InjectorConfig:
    """Configuration for a runtime injection run."""
    root: str = DEFAULT_ROOT
    tokens: List[str] = field(default_factory=lambda: list(DEFAULT_TOKENS))
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    strict: bool = False
    dry_run: bool = False
    workers: int = 1
    quiet: bool = False
    source: Optional[str] = None  # config file that was applied, if any

    def __post_init__(self):
        self.tokens = normalize_tokens(self.tokens)
        self.extensions = normalize_extensions(self.extensions)
        if not self.extensions:
            raise ConfigError("At least one artifact extension is required")

    @classmethod
    def from_sources(cls, config_path: Optional[str] = None,
                     environ: Optional[Mapping[str, str]] = None,
                     **overrides) -> 'InjectorConfig':
        """Create configuration from file and environment with command-line overrides.

        Args:
            config_path: YAML file to load. When omitted, ``envinject.yml`` in the
                current directory is used if it exists.
            environ: Environment mapping; defaults to ``os.environ``.
            **overrides: Command-line values; ``None`` means "not given".

        Returns:
            InjectorConfig: Configuration with all layers applied.

        Raises:
            ConfigError: If the file is unreadable or a value is invalid.
        """
        values: Dict[str, Any] = {}
        source = None

        file_values = cls._load_file(config_path)
        if file_values is not None:
            source = str(config_path or CONFIG_FILE)
            values.update(file_values)

        values.update(cls._from_environ(os.environ if environ is None else environ))

        for key, value in overrides.items():
            if value is not None:  # Only override if explicitly provided
                values[key] = value

        return cls(source=source, **values)

    @staticmethod
    def _load_file(config_path: Optional[str]) -> Optional[Dict[str, Any]]:
        path = Path(config_path) if config_path else Path(CONFIG_FILE)
        if not path.exists():
            if config_path:
                raise ConfigError(f"Config file not found: {path}")
            return None

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load config file {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        section = data.get(CONFIG_SECTION, {}) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"'{CONFIG_SECTION}' in {path} must be a mapping")

        values: Dict[str, Any] = {}
        if 'root' in section:
            values['root'] = str(section['root'])
        if 'tokens' in section:
            values['tokens'] = _split_list(section['tokens'], 'tokens')
        if 'extensions' in section:
            values['extensions'] = _split_list(section['extensions'], 'extensions')
        if 'strict' in section:
            values['strict'] = _parse_bool(section['strict'], 'strict')
        if 'workers' in section:
            values['workers'] = _parse_workers(section['workers'], 'workers')
        return values

    @staticmethod
    def _from_environ(environ: Mapping[str, str]) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        if environ.get(f"{ENV_PREFIX}ROOT"):
            values['root'] = environ[f"{ENV_PREFIX}ROOT"]
        if environ.get(f"{ENV_PREFIX}TOKENS"):
            values['tokens'] = _split_list(environ[f"{ENV_PREFIX}TOKENS"], f"{ENV_PREFIX}TOKENS")
        if environ.get(f"{ENV_PREFIX}EXTENSIONS"):
            values['extensions'] = _split_list(environ[f"{ENV_PREFIX}EXTENSIONS"],
                                               f"{ENV_PREFIX}EXTENSIONS")
        if f"{ENV_PREFIX}STRICT" in environ:
            values['strict'] = _parse_bool(environ[f"{ENV_PREFIX}STRICT"], f"{ENV_PREFIX}STRICT")
        if environ.get(f"{ENV_PREFIX}WORKERS"):
            values['workers'] = _parse_workers(environ[f"{ENV_PREFIX}WORKERS"],
                                               f"{ENV_PREFIX}WORKERS")
        return values
