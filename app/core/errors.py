from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

ERROR_CODE_BY_STATUS: dict[int, str] = {
    404: "not_found",
    405: "method_not_allowed",
    500: "internal_error",
}


class InvalidSettingsError(Exception):
    """Raised when settings are invalid."""

    def __init__(self, invalid_fields: list[tuple[str, str]]) -> None:
        """Initialize with list of invalid field names and messages."""
        self.invalid_fields = invalid_fields
        summary = ", ".join(f"{field}: {message}" for field, message in invalid_fields)
        super().__init__(f"Invalid environment variables: {summary}")


class ErrorResponse(BaseModel):
    """Standardized error response payload."""

    error: str
    message: str


def _map_status_to_error(status_code: int) -> str:
    return ERROR_CODE_BY_STATUS.get(status_code, "error")


def _internal_error_response() -> JSONResponse:
    payload = ErrorResponse(
        error=_map_status_to_error(HTTP_500_INTERNAL_SERVER_ERROR),
        message=HTTPStatus(HTTP_500_INTERNAL_SERVER_ERROR).phrase,
    ).model_dump(exclude_none=True)
    return JSONResponse(status_code=HTTP_500_INTERNAL_SERVER_ERROR, content=payload)


def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    payload = ErrorResponse(
        error=_map_status_to_error(exc.status_code),
        message=str(exc.detail),
    ).model_dump(exclude_none=True)
    return JSONResponse(
        status_code=exc.status_code,
        content=payload,
        headers=exc.headers,
    )


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.exception("Unhandled exception", exc_info=exc)
    return _internal_error_response()
