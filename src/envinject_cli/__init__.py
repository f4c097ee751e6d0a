"""envinject: runtime environment injection for pre-built static front-ends."""

from .version import __version__

__all__ = ['__version__']
