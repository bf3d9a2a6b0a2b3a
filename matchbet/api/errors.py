"""
Translation of service exceptions into HTTP responses.
"""

from collections.abc import Awaitable, Callable

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


def error_body(exc: Exception) -> dict[str, str]:
    return {"error": exc.__class__.__name__, "message": str(exc)}


def _json_handler(status_code: int) -> Callable[[Request, Exception], Awaitable[JSONResponse]]:
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        logger.info(
            "Request failed",
            path=request.url.path,
            error=exc.__class__.__name__,
            status_code=status_code,
        )
        return JSONResponse(status_code=status_code, content=error_body(exc))

    return handler


def register_error_handlers(app: FastAPI, status_codes: dict[type[Exception], int]) -> None:
    """
    Register one JSON exception handler per service exception.

    Args:
        app: Application to register on
        status_codes: Exception class -> HTTP status code
    """
    for exc_class, status_code in status_codes.items():
        app.add_exception_handler(exc_class, _json_handler(status_code))
