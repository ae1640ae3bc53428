"""Centralized exception handlers for the FastAPI application.

Service failures are mapped to HTTP responses with a consistent error
format, one status code per failure kind.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Usage:
    from wobo.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from typing import TypeVar

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from wobo_identity.application import ErrorKind, Failure, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"

ERROR_KIND_TO_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
}


class ServiceFailureError(Exception):
    """Carries a service ``Failure`` out of a route to its handler."""

    def __init__(self, failure: Failure):
        self.failure = failure
        super().__init__(failure.message)


def unwrap(result: Result[T]) -> T:
    """Return the success value or raise ServiceFailureError."""
    if isinstance(result, Failure):
        raise ServiceFailureError(result)
    return result.value


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(ServiceFailureError)
    async def service_failure_handler(
        request: Request,
        exc: ServiceFailureError,
    ) -> JSONResponse:
        failure = exc.failure
        status_code = ERROR_KIND_TO_STATUS.get(
            failure.kind,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

        logger.info(
            "Request failed on %s %s: %s",
            request.method,
            request.url.path,
            failure.kind.value,
        )

        return _create_error_response(
            status_code=status_code,
            message=failure.message,
            code=failure.kind.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format.

        Internals are logged, never returned to the client.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=INTERNAL_ERROR_CODE,
        )
