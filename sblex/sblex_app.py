"""The lexicon web service: health, version and lexical identifier routes."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence

import uvicorn
from dotenv import load_dotenv
from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response
from starlette.routing import Route

from sblex.lids import Lemma, Lexeme, parse_lid

logger = logging.getLogger(__name__)

VERSION = "26005"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3003


async def health(request: Request) -> JSONResponse:
    """Report that the service is up."""
    return JSONResponse({"status": "UP"})


async def version(request: Request) -> JSONResponse:
    """Report the service version."""
    return JSONResponse({"version": VERSION})


def _lid_from(request: Request) -> Lexeme | Lemma:
    text = request.path_params["lid"]
    try:
        return parse_lid(text)
    except ValueError as error:
        raise HTTPException(status_code=400, detail=f"Invalid URL: {error}") from error


def _lid_json(lid: Lexeme | Lemma) -> dict[str, str]:
    return {type(lid).__name__: lid.value}


async def lookup_lid_json(request: Request) -> JSONResponse:
    """Return the parsed identifier as JSON."""
    lid = _lid_from(request)
    return JSONResponse({"lid": _lid_json(lid)})


async def lookup_lid_xml(request: Request) -> Response:
    """Return the identifier's entry as XML."""
    _lid_from(request)
    return Response("<r></r>", media_type="text/xml")


async def lookup_lid_html(request: Request) -> HTMLResponse:
    """Return the identifier's entry as HTML."""
    _lid_from(request)
    return HTMLResponse("<r></r>")


def create_app() -> Starlette:
    """Return the web application."""
    return Starlette(
        routes=[
            Route("/lid/json/{lid}", lookup_lid_json, methods=["GET"]),
            Route("/lid/xml/{lid}", lookup_lid_xml, methods=["GET"]),
            Route("/lid/html/{lid}", lookup_lid_html, methods=["GET"]),
            Route("/health", health, methods=["GET"]),
            Route("/version/json", version, methods=["GET"]),
        ]
    )


def run(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Serve the application until interrupted."""
    logger.warning("listening on %s:%s", host, port)
    uvicorn.run(create_app(), host=host, port=port, log_level="info")


def main(argv: Sequence[str] | None = None) -> int:
    """Start the service; return the exit status."""
    argparse.ArgumentParser(prog="sblex-server", description="Lexicon web service.").parse_args(
        argv
    )
    load_dotenv(".env")
    service_name = os.environ.get("SALDO_WS__OTEL_SERVICE_NAME")
    if service_name is None:
        print(
            "error: environment variable 'SALDO_WS__OTEL_SERVICE_NAME' is not set",
            file=sys.stderr,
        )
        return 1
    os.environ["OTEL_SERVICE_NAME"] = service_name
    logging.basicConfig(level=logging.INFO)
    run(DEFAULT_HOST, DEFAULT_PORT)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())