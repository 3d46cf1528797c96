"""Combat simulation core for a top-down zombie survival shooter."""

from .__about__ import __version__

__all__ = ["__version__"]
