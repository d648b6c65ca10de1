"""
===============================================================================
CRC CARD — infrastructure/aws/errors.py
===============================================================================

Componente:
  Mapeo de errores del SDK de AWS -> DependencyError

Responsabilidades:
  - Evitar que excepciones de boto3/botocore se filtren a capas superiores.
  - Clasificar la falla (timeout/conexión vs error del servicio) solo para logs.
  - Nunca decidir status codes ni mensajes para el cliente.

Colaboradores:
  - infrastructure/identity/cognito_directory.py
  - infrastructure/policies/verified_permissions.py
  - infrastructure/repositories/dynamodb/notebook.py
===============================================================================
"""

from __future__ import annotations

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

from ...crosscutting.exceptions import DependencyError
from ...crosscutting.logger import logger

_UNAVAILABLE = (EndpointConnectionError, ConnectTimeoutError, ReadTimeoutError)


def map_aws_error(exc: Exception, *, service: str, operation: str) -> DependencyError:
    """
    Traduce errores del SDK a DependencyError.

    Regla:
      - Infra (boto3) queda encapsulada; el original viaja en original_error.
      - El caller hace `raise map_aws_error(...) from exc`.
    """
    if isinstance(exc, _UNAVAILABLE):
        logger.warning(
            "aws dependency unavailable",
            extra={"service": service, "operation": operation, "kind": "timeout"},
        )
        return DependencyError(
            f"{service} unavailable during {operation} (timeout/connection).",
            service=service,
            operation=operation,
            original_error=exc,
        )

    if isinstance(exc, ClientError):
        code = str((exc.response.get("Error") or {}).get("Code") or "")
        logger.error(
            "aws client error",
            extra={"service": service, "operation": operation, "code": code},
        )
        return DependencyError(
            f"{service} failed during {operation}. code={code}",
            service=service,
            operation=operation,
            original_error=exc,
        )

    if isinstance(exc, BotoCoreError):
        logger.error(
            "aws sdk error",
            extra={"service": service, "operation": operation, "kind": type(exc).__name__},
        )
        return DependencyError(
            f"{service} failed during {operation}.",
            service=service,
            operation=operation,
            original_error=exc,
        )

    logger.exception(
        "unexpected aws adapter error",
        extra={"service": service, "operation": operation},
    )
    return DependencyError(
        f"{service} failed during {operation}.",
        service=service,
        operation=operation,
        original_error=exc,
    )
