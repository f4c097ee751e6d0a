"""Hand control over to the main application process."""

import os
import sys
from typing import Callable, List, Optional, Sequence

# Shell conventions for "found but not executable" and "not found"
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127

Exec = Callable[[str, List[str]], None]


def exec_command(command: Sequence[str], exec_fn: Optional[Exec] = None) -> int:
    """Replace the current process with ``command``.

    Only returns when the command cannot be started, or when ``exec_fn`` is a
    test double that returns.

    Args:
        command: Program and arguments, e.g. ``["node", "server.js"]``.
        exec_fn: Replacement for :func:`os.execvp`.

    Returns:
        int: Exit status to use when the process was not replaced.
    """
    if not command:
        return 0

    argv = list(command)
    exec_fn = exec_fn or os.execvp

    # Buffered output would be lost once the process image is replaced
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        exec_fn(argv[0], argv)
    except FileNotFoundError:
        return EXIT_NOT_FOUND
    except OSError:
        return EXIT_NOT_EXECUTABLE
    return 0
