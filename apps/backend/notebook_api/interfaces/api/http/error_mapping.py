"""
===============================================================================
TARJETA CRC — error_mapping.py (UseCase Error -> HTTP RFC7807)
===============================================================================

Responsabilidades:
  - Traducir códigos de error de casos de uso a HTTP Exceptions RFC7807.
  - Centralizar el mapeo para evitar duplicación en routers.
  - Mantener el dominio libre de HTTP.

Reglas:
  - Los use cases devuelven errores tipados (code + message).
  - DependencyError NO pasa por acá: lo traduce api/exception_handlers.py.

Colaboradores:
  - application.usecases.* (SharingErrorCode, NotebookErrorCode)
  - crosscutting.error_responses (invalid_request, forbidden, not_found...)
===============================================================================
"""

from __future__ import annotations

from notebook_api.application.usecases.notebooks import NotebookError, NotebookErrorCode
from notebook_api.application.usecases.sharing import SharingError, SharingErrorCode
from notebook_api.crosscutting.error_responses import (
    forbidden,
    internal_error,
    invalid_request,
    not_found,
)


def raise_sharing_error(error: SharingError, *, resource_id: str | None = None) -> None:
    if error.code == SharingErrorCode.INVALID_REQUEST:
        raise invalid_request(error.message)
    if error.code == SharingErrorCode.NOT_FOUND:
        raise not_found("Notebook", resource_id or "-")
    if error.code == SharingErrorCode.FORBIDDEN:
        raise forbidden(error.message)
    raise internal_error()


def raise_notebook_error(error: NotebookError, *, notebook_id: str | None = None) -> None:
    if error.code == NotebookErrorCode.VALIDATION_ERROR:
        raise invalid_request(error.message)
    if error.code == NotebookErrorCode.NOT_FOUND:
        raise not_found("Notebook", notebook_id or "-")
    if error.code == NotebookErrorCode.FORBIDDEN:
        raise forbidden(error.message)
    raise internal_error()
