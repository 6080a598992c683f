from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from reuse_architect.core.domain.exceptions import (
    ConfigurationError,
    DomainError,
    InputValidationError,
    MalformedResultError,
    MissingAudioError,
    OperationInFlightError,
    ProviderError,
)
from reuse_architect.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("error_handlers")

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (InputValidationError, status.HTTP_400_BAD_REQUEST),
    (OperationInFlightError, status.HTTP_409_CONFLICT),
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (MalformedResultError, status.HTTP_502_BAD_GATEWAY),
    (MissingAudioError, status.HTTP_502_BAD_GATEWAY),
    (ProviderError, status.HTTP_502_BAD_GATEWAY),
]


def status_for(exc: DomainError) -> int:
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.error("Validation error", context_endpoint=str(request.url), error_details=exc.errors())
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.errors()},
        )

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        code = status_for(exc)
        logger.warning(
            "Request failed",
            processing_status="ERROR",
            error_type=type(exc).__name__,
            error_code=code,
            error_details=str(exc),
        )
        return JSONResponse(
            status_code=code,
            content={"status": "error", "error": type(exc).__name__, "message": str(exc)},
        )
