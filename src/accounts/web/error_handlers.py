from typing import cast

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse, Response

from accounts.errors import ErrorKind, InternalError, UserError

logger = structlog.get_logger(__name__)

STATUS_BY_KIND = {
    ErrorKind.DUPLICATE_ACCOUNT: 400,
    ErrorKind.INVALID_CREDENTIALS: 401,
    ErrorKind.INTERNAL_FAILURE: 500,
}


def create_json_error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle UserError subclasses; their messages are safe to show."""
    kind = cast(UserError, exc).kind
    return create_json_error_response(status_code=STATUS_BY_KIND[kind], message=str(exc))


async def internal_error_handler(_: Request, exc: Exception) -> Response:
    """Handle InternalError (500). The cause was already logged where it was caught."""
    return create_json_error_response(status_code=500, message=str(InternalError()))


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors that escaped the App facade (500)."""
    logger.exception("unexpected_error", error=str(exc))
    return create_json_error_response(status_code=500, message=str(InternalError()))
