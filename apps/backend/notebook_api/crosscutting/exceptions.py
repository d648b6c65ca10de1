# apps/backend/notebook_api/crosscutting/exceptions.py
"""
===============================================================================
MÓDULO: Excepciones tipadas del backend (errores internos)
===============================================================================

Objetivo
--------
Tener excepciones internas coherentes, con:
- error_code estable
- error_id para correlación con logs
- message “humana” (sin filtrar detalles del proveedor)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  NotebookApiError + subclases

Responsabilidades:
  - Estandarizar errores internos que luego se mapean a HTTP
  - Generar error_id para rastreo

Colaboradores:
  - api/exception_handlers.py (mapea a AppHTTPException)
  - infrastructure/identity, infrastructure/policies, infrastructure/repositories
    (envuelven errores de boto3/botocore en DependencyError)
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class NotebookApiError(Exception):
    """Base para errores internos del sistema (error_code + error_id + message)."""

    error_code: str = "NOTEBOOK_API_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class DependencyError(NotebookApiError):
    """
    Falla de un servicio externo (directorio de identidades, policy store,
    storage): caído, timeout o error del SDK.

    No se reintenta internamente; el caller puede reintentar la operación
    completa.
    """

    error_code: str = "DEPENDENCY_ERROR"

    def __init__(
        self,
        message: str,
        *,
        service: str,
        operation: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, error_id=error_id, original_error=original_error)
        self.service = service
        self.operation = operation
