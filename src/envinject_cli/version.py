"""Version management for envinject."""

import re
from importlib.metadata import version, PackageNotFoundError
from pathlib import Path

# Set by release builds; source checkouts fall back to pyproject.toml
__BUILD_VERSION__ = None


def get_version() -> str:
    """
    Get the current version.

    Tries the build-time constant, then installed package metadata, then
    pyproject.toml next to the source tree.

    Returns:
        str: Version string
    """
    if __BUILD_VERSION__:
        return __BUILD_VERSION__

    try:
        return version("envinject")
    except PackageNotFoundError:
        pass

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    try:
        if pyproject_path.exists():
            content = pyproject_path.read_text(encoding='utf-8')
            match = re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
            if match and re.match(r'^\d+\.\d+\.\d+(a\d+|b\d+|rc\d+)?$', match.group(1)):
                return match.group(1)
    except OSError:
        pass

    return "unknown"


__version__ = get_version()
