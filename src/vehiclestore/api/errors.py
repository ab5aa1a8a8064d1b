"""Mapping from store errors to HTTP responses."""

from __future__ import annotations

from http import HTTPStatus

from fastapi import Request
from fastapi.responses import JSONResponse

from vehiclestore.exceptions import (
    VehicleAlreadyExistsError,
    VehicleError,
    VehicleInvalidError,
    VehicleNotFoundError,
)


class ParameterError(VehicleInvalidError):
    """Raised when a path, query or body parameter cannot be parsed."""

    default_message = "invalid request parameter"


def status_for(exc: VehicleError) -> int:
    """Return the HTTP status code for a store error."""
    if isinstance(exc, VehicleAlreadyExistsError):
        return HTTPStatus.CONFLICT
    if isinstance(exc, VehicleNotFoundError):
        return HTTPStatus.NOT_FOUND
    if isinstance(exc, VehicleInvalidError):
        return HTTPStatus.BAD_REQUEST
    return HTTPStatus.INTERNAL_SERVER_ERROR


def error_body(status_code: int, message: str) -> dict[str, str]:
    return {"status": HTTPStatus(status_code).phrase, "message": message}


async def vehicle_error_handler(request: Request, exc: VehicleError) -> JSONResponse:
    status_code = status_for(exc)
    message = exc.message if status_code != HTTPStatus.INTERNAL_SERVER_ERROR else "internal server error"
    return JSONResponse(status_code=status_code, content=error_body(status_code, message))
