"""The HTTP server answering morphology lookups."""

from __future__ import annotations

import asyncio
import logging
import socket
from collections.abc import Callable
from dataclasses import dataclass
from http import HTTPStatus

import uvicorn
from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from sblex.morphology import Morphology, MorphologyLookupError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10.0


@dataclass(frozen=True)
class HttpServerConfig:
    """Where the server listens."""

    port: int
    host: str


class ApiError(Exception):
    """An error that is answered with a JSON body and an HTTP status."""

    status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def _public_message(self) -> str:
        return self.message

    def to_response(self) -> JSONResponse:
        """Return the error as a JSON response."""
        body = {"status_code": int(self.status_code), "data": {"message": self._public_message()}}
        return JSONResponse(body, status_code=int(self.status_code))


class NotFoundError(ApiError):
    """Nothing is stored for the requested fragment."""

    status_code = HTTPStatus.NOT_FOUND


class InternalServerError(ApiError):
    """The lookup failed; details are logged, not returned."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)

    def _public_message(self) -> str:
        return "Internal server error"

    def to_response(self) -> JSONResponse:
        logger.error("%s", self.message)
        return super().to_response()


def error_source_chain(error: BaseException) -> str:
    """Return one "- cause" line for every cause behind ``error``."""
    lines = []
    source = _source(error)
    while source is not None:
        lines.append(f"- {source}\n")
        source = _source(source)
    return "".join(lines)


def _source(error: BaseException) -> BaseException | None:
    if error.__cause__ is not None:
        return error.__cause__
    return None if error.__suppress_context__ else error.__context__


def _from_lookup_error(error: MorphologyLookupError) -> InternalServerError:
    logger.error(
        "An error occurred during request handling: %s (%r)\n%s",
        error,
        error,
        error_source_chain(error),
    )
    return InternalServerError("Internal server error")


async def _run_lookup(
    request: Request, lookup: Callable[[Morphology, str], bytes | None]
) -> bytes | None | Response:
    fragment = request.path_params["fragment"]
    morphology: Morphology = request.app.state.morphology
    try:
        return await asyncio.wait_for(
            run_in_threadpool(lookup, morphology, fragment), REQUEST_TIMEOUT
        )
    except asyncio.TimeoutError:
        return Response(status_code=HTTPStatus.REQUEST_TIMEOUT)
    except MorphologyLookupError as error:
        raise _from_lookup_error(error) from error


def _success(data: bytes) -> Response:
    return Response(content=data, status_code=HTTPStatus.OK, media_type="application/json")


async def _get_saldo_morph(request: Request) -> Response:
    fragment = request.path_params["fragment"]
    logger.debug("get_saldo_morph called with %r", fragment)
    data = await _run_lookup(request, lambda morph, text: morph.lookup(text))
    if isinstance(data, Response):
        return data
    if data is None:
        raise NotFoundError(fragment)
    return _success(data)


async def _get_saldo_morph_w_cont(request: Request) -> Response:
    logger.debug("get_saldo_morph_w_cont called with %r", request.path_params["fragment"])
    data = await _run_lookup(request, lambda morph, text: morph.lookup_with_cont(text))
    if isinstance(data, Response):
        return data
    return _success(data)


async def _handle_api_error(request: Request, error: Exception) -> Response:
    assert isinstance(error, ApiError)
    return error.to_response()


def create_app(morphology: Morphology) -> Starlette:
    """Return the web application serving ``morphology``."""
    app = Starlette(
        routes=[
            Route("/morph/{fragment}", _get_saldo_morph, methods=["GET"]),
            Route("/morph-w-cont/{fragment}", _get_saldo_morph_w_cont, methods=["GET"]),
        ],
        exception_handlers={ApiError: _handle_api_error},
    )
    app.state.morphology = morphology
    return app


class HttpServer:
    """A bound listening socket together with the application it serves."""

    def __init__(self, morphology: Morphology, config: HttpServerConfig) -> None:
        self.app = create_app(morphology)
        family = socket.getaddrinfo(config.host, config.port, type=socket.SOCK_STREAM)[0][0]
        self._socket = socket.create_server((config.host, config.port), family=family)

    def local_addr(self) -> tuple[str, int]:
        """Return the host and port actually bound."""
        host, port = self._socket.getsockname()[:2]
        return host, port

    async def run(self) -> None:
        """Serve until a shutdown signal arrives."""
        host, port = self.local_addr()
        logger.info("Starting server at 'http://%s:%s'", host, port)
        config = uvicorn.Config(self.app, log_level="warning", lifespan="off")
        server = uvicorn.Server(config)
        await server.serve(sockets=[self._socket])
        logger.warning("signal received, starting graceful shutdown")