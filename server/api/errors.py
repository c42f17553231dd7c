"""API error types and their HTTP rendering."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class NotAuthenticatedError(Exception):
    """Raised when a protected endpoint is reached without a resolved user."""

    status_code = 401
    message = "Unauthorized"


async def not_authenticated_handler(
    request: Request, exc: NotAuthenticatedError
) -> JSONResponse:
    return JSONResponse({"message": exc.message}, status_code=exc.status_code)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render unparseable or mistyped requests as 400, like the routers' own checks."""

    return JSONResponse(
        {"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())},
        status_code=400,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the API exception handlers to the given app."""

    app.add_exception_handler(NotAuthenticatedError, not_authenticated_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)


__all__ = ["NotAuthenticatedError", "register_error_handlers"]
