"""The default error body for API errors."""

from __future__ import annotations

import dataclasses
import uuid
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any

from starlette.responses import JSONResponse


@dataclass(frozen=True)
class AppError:
    """An error message with a unique id, an HTTP status and optional details."""

    error: str
    error_id: uuid.UUID = field(default_factory=uuid.uuid4)
    status: HTTPStatus = HTTPStatus.BAD_REQUEST
    error_details: Any = None

    def with_status(self, status: int) -> AppError:
        """Return a copy with another HTTP status."""
        return dataclasses.replace(self, status=HTTPStatus(status))

    def with_details(self, details: Any) -> AppError:
        """Return a copy carrying additional details."""
        return dataclasses.replace(self, error_details=details)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body; the status is not part of it."""
        body: dict[str, Any] = {"error": self.error, "error_id": str(self.error_id)}
        if self.error_details is not None:
            body["error_details"] = self.error_details
        return body

    def to_response(self) -> JSONResponse:
        """Return the error as a JSON response with its status."""
        return JSONResponse(self.to_dict(), status_code=int(self.status))