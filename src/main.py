# src/main.py — v3
"""CLI entry point — hash, digest, file commands.

Usage:
    multihasher hash <text> [-l LEVELS] [-r REPS] [-e ENCODING] [--file PATH]
    multihasher digest <text> [-e ENCODING]
    multihasher file <path>
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import signal
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from multihasher.version import __version__

if TYPE_CHECKING:
    from multihasher.engine.cancellation import CancellationToken

logger = logging.getLogger(__name__)

EXIT_STOPPED = 130


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return asyncio.run(args.func(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_STOPPED
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="multihasher",
        description=f"multihasher v{__version__} - Multi-level intention hasher",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- hash ---
    p_hash = subparsers.add_parser(
        "hash", help="Run the multi-level hash cascade on an intention",
    )
    p_hash.add_argument("text", help="Intention text")
    p_hash.add_argument(
        "-l", "--levels", default=None,
        help="Hash levels [1-1000] (default: from settings)",
    )
    p_hash.add_argument(
        "-r", "--repetitions", default=None,
        help="Repetitions per level [1-100k], K/M suffixes allowed",
    )
    p_hash.add_argument(
        "-e", "--encoding", default=None,
        help="Output encoding: 64, 256, 512 (default: from settings)",
    )
    p_hash.add_argument(
        "--file", type=Path, default=None,
        help="Append the digest of this file to the intention first",
    )
    p_hash.add_argument(
        "-q", "--quiet", action="store_true",
        help="Only print the final hash",
    )
    p_hash.set_defaults(func=_cmd_hash)

    # --- digest ---
    p_digest = subparsers.add_parser(
        "digest", help="Single digest of a text, no cascade",
    )
    p_digest.add_argument("text", help="Text to digest")
    p_digest.add_argument(
        "-e", "--encoding", default="512",
        help="Digest width: 64, 256 or 512 (default: 512)",
    )
    p_digest.set_defaults(func=_cmd_digest)

    # --- file ---
    p_file = subparsers.add_parser(
        "file", help="Digest a file's text with SHA-512",
    )
    p_file.add_argument("path", type=Path, help="Path to file")
    p_file.set_defaults(func=_cmd_file)

    return parser


async def _cmd_hash(args: argparse.Namespace) -> int:
    """Execute a cascade run, printing status lines to stderr."""
    from multihasher.api.facade import start_hashing
    from multihasher.bridge.file_loader import append_file_digest
    from multihasher.config.settings import Settings
    from multihasher.core.normalizer import (
        accept_levels_input,
        sanitize_repetitions_input,
    )
    from multihasher.engine.cancellation import CancellationToken

    settings = Settings()
    levels = settings.default_levels
    if args.levels is not None:
        levels = accept_levels_input(
            args.levels, settings.default_levels, settings.max_levels
        )
    repetitions = settings.default_repetitions
    if args.repetitions is not None:
        repetitions = sanitize_repetitions_input(args.repetitions)

    text: str = args.text
    if args.file is not None:
        if not args.file.is_file():
            logger.error("File not found: %s", args.file)
            return 1
        text = append_file_digest(text, args.file)

    if not text.strip():
        logger.error("Intention text is empty")
        return 1

    token = CancellationToken()
    _install_stop_handler(token)

    def _status(message: str) -> None:
        if not args.quiet:
            print(message, file=sys.stderr)

    outcome = await start_hashing(
        text,
        levels,
        repetitions,
        args.encoding or settings.default_encoding,
        on_status=_status,
        cancel_token=token,
        settings=settings,
    )

    if outcome.result is None:
        return EXIT_STOPPED
    print(outcome.result.encoded_hash)
    return 0


async def _cmd_digest(args: argparse.Namespace) -> int:
    """Print a single digest of the given text."""
    from multihasher.core.digests import digest64, digest256, digest512
    from multihasher.core.models import resolve_encoding

    digests = {"64-Bit": digest64, "256-Bit": digest256, "512-Bit": digest512}
    encoding = resolve_encoding(args.encoding)
    if encoding not in digests:
        logger.error("Unsupported digest width: %s", args.encoding)
        return 1
    print(digests[encoding](args.text))
    return 0


async def _cmd_file(args: argparse.Namespace) -> int:
    """Print digest512 of a file's text."""
    from multihasher.bridge.file_loader import digest_file

    path: Path = args.path
    if not path.is_file():
        logger.error("File not found: %s", path)
        return 1
    print(digest_file(path))
    return 0


def _install_stop_handler(token: CancellationToken) -> None:
    """Route Ctrl-C to the cancellation token where the loop supports it."""
    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(signal.SIGINT, token.cancel)
    except (NotImplementedError, RuntimeError, ValueError):
        # No signal handlers on this platform; KeyboardInterrupt still applies
        pass


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage from settings."""
    from multihasher.config.settings import Settings
    from multihasher.logging.logger import setup_logging

    settings = Settings()
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=str(settings.log_file) if settings.log_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
