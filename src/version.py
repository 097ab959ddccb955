# src/version.py — v1
"""Package version."""

__version__ = "1.8.0"
