"""Command line that loads a '.lex' file into a morphology store."""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
from collections.abc import Sequence
from pathlib import Path

from sblex.kv_morphology import KvMorphology
from sblex.morphology import MorphologyBuilderError, build_from_path
from sblex.trie import TrieBuilder

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the lexicon path and the kind of morphology to build."""
    parser = argparse.ArgumentParser(
        prog="morph-builder", description="Build a morphology from a '.lex' file."
    )
    parser.add_argument("path", type=Path, help="Path to '.lex' file")
    commands = parser.add_subparsers(dest="command", required=True)

    kv = commands.add_parser("fjall", help="Use the key-value morphology")
    kv.add_argument("--db", dest="db_path", type=Path, required=True, help="Path to database")

    commands.add_parser("trie", help="Use the original trie morphology")
    return parser.parse_args(argv)


def _build_trie(path: Path) -> None:
    builder = TrieBuilder()
    build_from_path(builder, path)
    builder.finish()


def _build_kv(path: Path, db_path: Path) -> None:
    with KvMorphology(db_path) as morphology:
        build_from_path(morphology, path)
        morphology.finish()


def main(argv: Sequence[str] | None = None) -> int:
    """Build the chosen morphology; return the exit status."""
    args = parse_args(argv)
    logger.debug("arguments: %r", args)
    try:
        if args.command == "trie":
            _build_trie(args.path)
        else:
            _build_kv(args.path, args.db_path)
    except MorphologyBuilderError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    except (OSError, sqlite3.Error) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())