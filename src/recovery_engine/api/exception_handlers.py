"""Map engine and validation errors onto the `{"error": {...}}` JSON envelope."""

from typing import Any, Dict, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ErrorCode, RecoveryEngineError
from .schemas import ErrorDetail, ErrorResponse


logger = logging.getLogger(__name__)


def error_json(
    status_code: int,
    code: ErrorCode,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code.value, message=message, details=details or None))
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def handle_engine_error(request: Request, exc: RecoveryEngineError) -> JSONResponse:
    # 5xx here means a sample source failed upstream
    if exc.status_code >= 500:
        logger.warning(f"{request.method} {request.url.path} -> {exc!r}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_invalid_body(
    request: Request,
    exc: RequestValidationError | PydanticValidationError,
) -> JSONResponse:
    """422 with one entry per failing field, dotted location first."""
    fields = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    return error_json(
        422,
        ErrorCode.VALIDATION_ERROR,
        "Request validation failed",
        {"errors": fields},
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_json(500, ErrorCode.INTERNAL_ERROR, "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``; the catch-all Exception handler goes last."""
    app.add_exception_handler(RecoveryEngineError, handle_engine_error)
    app.add_exception_handler(RequestValidationError, handle_invalid_body)
    app.add_exception_handler(PydanticValidationError, handle_invalid_body)
    app.add_exception_handler(Exception, handle_unexpected)
