# src/bridge/file_loader.py — v1
"""File-to-text bridge: fold a loaded file into the intention text.

The file's bytes are decoded as UTF-8 and digested once with digest512;
the digest is appended to the intention on a new line. This happens
before, and independently of, any cascade run.
"""

from __future__ import annotations

import logging
from pathlib import Path

from multihasher.core.digests import digest_bytes512

logger = logging.getLogger(__name__)


def digest_file(path: str | Path) -> str:
    """Return digest512 of a file's contents read as UTF-8 text.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    file_path = Path(path).expanduser()
    data = file_path.read_bytes()
    digest = digest_bytes512(data)
    logger.info("Digested %s (%d bytes)", file_path.name, len(data))
    return digest


def append_file_digest(intention: str, path: str | Path) -> str:
    """Append the file's digest to the intention, separated by a newline."""
    return f"{intention}\n{digest_file(path)}"
