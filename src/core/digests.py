# src/core/digests.py — v1
"""Fixed-width uppercase hex digests used by the cascade engine.

digest512 and digest256 are plain SHA-512 / SHA-256 over the UTF-8 bytes
of the input. digest64 is a lossy condensation of digest512, not a distinct
hash family: the eight 64-bit words are summed and the sum's leading
16 hex digits are kept.
"""

from __future__ import annotations

import hashlib

from multihasher.core.models import Encoding

REQUIRED_ALGORITHMS = ("sha512", "sha256")

CHUNK_WIDTH = 64
WORD_HEX_WIDTH = 16


class DigestUnavailableError(RuntimeError):
    """Raised when the runtime lacks a required hash algorithm."""


def ensure_algorithms() -> None:
    """Fail fast if hashlib cannot provide SHA-512 and SHA-256.

    Raises:
        DigestUnavailableError: If any required algorithm is missing.
    """
    missing = [a for a in REQUIRED_ALGORITHMS if a not in hashlib.algorithms_available]
    if missing:
        raise DigestUnavailableError(
            f"Required hash algorithm(s) unavailable: {', '.join(missing)}"
        )


def digest512(text: str) -> str:
    """SHA-512 of text as 128 uppercase hex characters."""
    return hashlib.sha512(text.encode("utf-8")).hexdigest().upper()


def digest256(text: str) -> str:
    """SHA-256 of text as 64 uppercase hex characters."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest().upper()


def digest64(text: str) -> str:
    """Sum of the eight 64-bit words of digest512(text), as 16 hex characters.

    The sum can exceed 64 bits; its hex form is left-padded to 16 digits and
    then cut to the first 16, so an overflowing sum keeps its high digits.
    """
    full = digest512(text)
    total = sum(
        int(full[i : i + WORD_HEX_WIDTH], 16)
        for i in range(0, len(full), WORD_HEX_WIDTH)
    )
    return format(total, "X").zfill(WORD_HEX_WIDTH)[:WORD_HEX_WIDTH]


def digest_bytes512(data: bytes) -> str:
    """digest512 of raw bytes decoded as UTF-8 (invalid sequences replaced)."""
    return digest512(data.decode("utf-8", errors="replace"))


def encode_hash(hash512: str, encoding: Encoding | str) -> str:
    """Render a 512-bit hex hash in the requested output encoding."""
    if encoding == "64-Bit":
        return digest64(hash512)
    if encoding == "256-Bit":
        return digest256(hash512)
    if encoding == "512-Bit":
        return hash512
    chunks = [hash512[i : i + CHUNK_WIDTH] for i in range(0, len(hash512), CHUNK_WIDTH)]
    return "".join(chunks)
