"""multihasher — multi-level hash-repetition engine."""

from multihasher.version import __version__

__all__ = ["__version__"]
