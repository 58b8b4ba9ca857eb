"""Error taxonomy and the handlers that turn it into HTTP responses.

Every repository operation raises one of the three kinds below; the handlers
registered by ``register_exception_handlers`` render them as ``{"message": ...}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class GuesthouseError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(GuesthouseError):
    """Required input is missing or malformed"""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class NotFound(GuesthouseError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class StorageError(GuesthouseError):
    """The store failed; the underlying fault is logged, never returned"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "A database error occurred"


def _describe(errors) -> str:
    parts = []
    for error in errors:
        loc = [str(p) for p in error.get("loc", ()) if p not in ("body", "path", "query")]
        field = ".".join(loc)
        parts.append(f"{field}: {error.get('msg')}" if field else error.get("msg", ""))
    return "; ".join(parts) or ValidationError.message


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(GuesthouseError)
    async def handle_guesthouse_error(request: Request, exc: GuesthouseError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        message = _describe(exc.errors())
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": StorageError.message},
        )
