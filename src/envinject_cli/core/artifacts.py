"""Discovery of build artifacts eligible for substitution."""

import os
from pathlib import Path
from typing import Iterable, List

from .errors import IOFailure

DEFAULT_EXTENSIONS = ('.js', '.css', '.html')


def normalize_extensions(extensions: Iterable[str]) -> List[str]:
    """Lower-case extensions and give each a leading dot (``"JS"`` -> ``".js"``)."""
    result = []
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        if not ext.startswith('.'):
            ext = f'.{ext}'
        if ext not in result:
            result.append(ext)
    return result


def validate_root(root: Path) -> Path:
    """Ensure ``root`` is an existing, readable directory.

    Raises:
        IOFailure: If the root is missing, not a directory, or unreadable.
    """
    if not root.exists():
        raise IOFailure("Root directory does not exist", root)
    if not root.is_dir():
        raise IOFailure("Root path is not a directory", root)
    if not os.access(root, os.R_OK | os.X_OK):
        raise IOFailure("Root directory is not readable", root)
    return root


def find_artifacts(root: Path, extensions: Iterable[str]) -> List[Path]:
    """Find files under ``root`` whose extension is allow-listed.

    Symlinks are skipped, so nothing outside ``root`` is ever rewritten.
    Results are sorted by their path relative to ``root`` so every run visits
    files in the same order.

    Args:
        root (Path): Directory to scan recursively.
        extensions (Iterable[str]): Allowed extensions, e.g. ``[".js", ".css"]``.

    Returns:
        List[Path]: Matching artifact files.
    """
    allowed = set(normalize_extensions(extensions))
    validate_root(root)

    def _on_error(error: OSError):
        raise IOFailure("Cannot read directory", error.filename or root) from error

    found = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error, followlinks=False):
        dirnames.sort()
        for filename in filenames:
            path = Path(dirpath) / filename
            if path.is_symlink():
                continue
            if path.suffix.lower() in allowed and path.is_file():
                found.append(path)

    return sorted(found, key=lambda p: p.relative_to(root).as_posix())
