"""Error translation for the HTTP layer

Use cases return ``Error`` values; routes raise ``ClientError`` and a single
handler renders the response envelope.
"""

import logging
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from libs.result import Error

logger = logging.getLogger(__name__)

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
INTERNAL_ERROR_MESSAGE = "Internal server error"

VALIDATION_CODES = (
    "VALIDATION_ERROR",
    "INVALID_TICKET_RANGE",
    "INVALID_TICKET_NUMBER",
    "MANAGER_EMAIL_REQUIRED",
    "EMAIL_REQUIRED",
)
AUTHENTICATION_CODES = (
    "AUTHENTICATION_REQUIRED",
    "INVALID_TOKEN",
    "ACCOUNT_INACTIVE",
)
AUTHORIZATION_CODES = (
    "FORBIDDEN",
    "SALE_NOT_OWNED",
)
NOT_FOUND_CODES = (
    "USER_NOT_FOUND",
    "MANAGER_NOT_FOUND",
    "SALE_NOT_FOUND",
    "TICKET_NOT_FOUND",
)
CONFLICT_CODES = (
    "ROLE_NOT_ALLOWED",
    "TICKET_NUMBER_IN_USE",
    "TICKET_NUMBER_ASSIGNED",
    "TICKET_ALREADY_EXISTS",
    "TICKET_STATUS_CONFLICT",
)

STATUS_BY_CODE = {
    **{code: status.HTTP_400_BAD_REQUEST for code in VALIDATION_CODES},
    **{code: status.HTTP_401_UNAUTHORIZED for code in AUTHENTICATION_CODES},
    **{code: status.HTTP_403_FORBIDDEN for code in AUTHORIZATION_CODES},
    **{code: status.HTTP_404_NOT_FOUND for code in NOT_FOUND_CODES},
    **{code: status.HTTP_400_BAD_REQUEST for code in CONFLICT_CODES},
}


def status_for(code: str) -> int:
    """HTTP status of an error code; unknown codes are internal errors"""
    return STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)


class ClientError(Exception):
    """
    Error raised by routes and the access gate

    Args:
        error: Business error returned by a use case
        status_code: Explicit status, derived from the error code when omitted
    """

    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code or status_for(error.code)


def error_body(code: str, message: str) -> dict:
    return {"success": False, "data": None, "error": message, "code": code}


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            f"{request.method} {request.url.path} failed: "
            f"code={exc.error.code} message={exc.error.message} reason={exc.error.reason}"
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(INTERNAL_ERROR_CODE, INTERNAL_ERROR_MESSAGE),
        )

    if exc.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN):
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.error.code}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.error.code, exc.error.message),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request parameters"

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VALIDATION_ERROR", message),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(INTERNAL_ERROR_CODE, INTERNAL_ERROR_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
