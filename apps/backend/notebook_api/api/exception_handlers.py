"""
===============================================================================
TARJETA CRC — notebook_api/api/exception_handlers.py (Manejo Centralizado)
===============================================================================

Responsabilidades:
  - Traducir excepciones de la aplicación a respuestas HTTP RFC7807.
  - Centralizar logging de errores con request_id + error_id.
  - Evitar filtrar detalles internos (mensajes de AWS, stacktraces).

Patrones aplicados:
  - Exception Mapping (Presentation Layer).
  - Fail-safe: cualquier excepción no tipada -> INTERNAL_ERROR (con logging).
  - Observabilidad: correlación por request_id y error_id.

Colaboradores:
  - crosscutting.error_responses: AppHTTPException, ErrorCode, app_exception_handler
  - crosscutting.exceptions: NotebookApiError, DependencyError
===============================================================================
"""

from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..crosscutting.error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
    generic_exception_handler,
)
from ..crosscutting.exceptions import DependencyError, NotebookApiError
from ..crosscutting.logger import logger

_GENERIC_DETAIL = "Internal server error"


def _request_id_from(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "request_id", None)


async def dependency_error_handler(
    request: Request, exc: DependencyError
) -> JSONResponse:
    """Falla de Cognito / Verified Permissions / DynamoDB -> 500 genérico."""
    request_id = _request_id_from(request)

    logger.error(
        "Dependency failure",
        extra={
            "code": ErrorCode.DEPENDENCY_ERROR.value,
            "error_id": exc.error_id,
            "service": exc.service,
            "operation": exc.operation,
            "error_message": exc.message,
            "request_id": request_id,
        },
    )

    app_exc = AppHTTPException(
        status_code=500,
        code=ErrorCode.DEPENDENCY_ERROR,
        detail=_GENERIC_DETAIL,
        errors=[{"error_id": exc.error_id}],
    )
    return await app_exception_handler(request, app_exc)


async def notebook_api_error_handler(
    request: Request, exc: NotebookApiError
) -> JSONResponse:
    request_id = _request_id_from(request)

    logger.error(
        "Service error",
        extra={
            "code": ErrorCode.INTERNAL_ERROR.value,
            "error_id": exc.error_id,
            "error_message": exc.message,
            "request_id": request_id,
        },
    )

    app_exc = AppHTTPException(
        status_code=500,
        code=ErrorCode.INTERNAL_ERROR,
        detail=_GENERIC_DETAIL,
        errors=[{"error_id": exc.error_id}],
    )
    return await app_exception_handler(request, app_exc)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Body/params malformados -> 400 INVALID_REQUEST (mismo contrato que el share)."""
    errors = [
        {
            "loc": ".".join(str(part) for part in err.get("loc", ())),
            "msg": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    app_exc = AppHTTPException(
        status_code=400,
        code=ErrorCode.INVALID_REQUEST,
        detail="Invalid request.",
        errors=errors or None,
    )
    return await app_exception_handler(request, app_exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler para excepciones no tipadas.

    - Log completo (stacktrace).
    - Respuesta genérica, también fuera de producción.
    """
    logger.error(
        "Unhandled exception",
        exc_info=True,
        extra={"request_id": _request_id_from(request), "error": str(exc)},
    )
    return await generic_exception_handler(request, exc)


def register_exception_handlers(app) -> None:
    """
    Registra handlers en la app FastAPI.

    Importante:
      - DependencyError antes que NotebookApiError (más específico).
      - Exception genérica se registra al final como fallback.
    """
    app.add_exception_handler(DependencyError, dependency_error_handler)
    app.add_exception_handler(NotebookApiError, notebook_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
