"""Command line for the morphology server: serve it or build its database."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sqlite3
import sys
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv

from sblex.fm_config import Settings
from sblex.fm_http import HttpServer, HttpServerConfig
from sblex.kv_morphology import KvMorphology
from sblex.morphology import MorphologyBuilderError, build_from_path


def _port(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 65535:
        raise argparse.ArgumentTypeError(f"{value} is not in 0..=65535")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line; defaults for host and port come from the environment."""
    parser = argparse.ArgumentParser(prog="fm-server", description="Saldo morphology server.")
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="run the server")
    serve.add_argument(
        "--host",
        default=os.environ.get("FM_SERVER_APP_HOST", "127.0.0.1"),
        help="The host to bind the server to.",
    )
    serve.add_argument(
        "--port",
        type=_port,
        default=os.environ.get("FM_SERVER_APP_PORT", "8765"),
        help="The port to bind the server to.",
    )

    db = commands.add_parser("db", help="build the database from saldo.lex file")
    db.add_argument("path", type=Path, help="Path to '.lex' file")
    return parser.parse_args(argv)


def _fail(message: str) -> int:
    print(f"error: {message}", file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server or build its database; return the exit status."""
    load_dotenv(".env")
    service_name = os.environ.get("FM_SERVER__OTEL_SERVICE_NAME")
    if service_name is None:
        return _fail("environment variable 'FM_SERVER__OTEL_SERVICE_NAME' is not set")
    os.environ["OTEL_SERVICE_NAME"] = service_name

    try:
        settings = Settings.from_env()
    except ValueError as error:
        return _fail(str(error))
    logging.basicConfig(level=logging.INFO)

    args = parse_args(argv)
    path = settings.morphology_path
    try:
        with KvMorphology(path) as morphology:
            if args.command == "serve":
                server = HttpServer(morphology, HttpServerConfig(port=args.port, host=args.host))
                asyncio.run(server.run())
            else:
                build_from_path(morphology, args.path)
                morphology.finish()
    except MorphologyBuilderError as error:
        return _fail(str(error))
    except (OSError, sqlite3.Error) as error:
        return _fail(f"morphology_path: {path}: {error}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())