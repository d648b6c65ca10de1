"""
===============================================================================
CRC CARD — infrastructure/identity/cognito_directory.py
===============================================================================

Clase:
  CognitoIdentityDirectory (Adapter)

Responsabilidades:
  - Implementar IdentityDirectory contra un Cognito User Pool.
  - resolve(email): ListUsers con filtro por email, Limit=1.
  - lookup_by_identifier(sub): ListUsers con filtro por sub, Limit=1.
  - Encapsular boto3 (NO filtrar ClientError): todo error -> DependencyError.

Colaboradores:
  - domain.services.IdentityDirectory (port)
  - infrastructure.aws.errors.map_aws_error
  - boto3 cognito-idp client (inyectable para tests)

Notas:
  - Varios usuarios con el mismo email: se toma el primero (Limit=1).
  - Usuario sin sub o sin email: se trata como no encontrado (None).
  - Sin reintentos internos; timeouts vienen de la config del cliente.
===============================================================================
"""

from __future__ import annotations

from typing import Any

from ...domain.entities import Identity
from ...domain.services import IdentityDirectory
from ..aws.errors import map_aws_error

_SERVICE = "cognito-idp"


def _filter_value(value: str) -> str:
    # El valor va entre comillas dobles dentro del filtro de ListUsers.
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _attribute(user: dict[str, Any], name: str) -> str | None:
    for attr in user.get("Attributes") or []:
        if attr.get("Name") == name:
            return attr.get("Value")
    return None


class CognitoIdentityDirectory(IdentityDirectory):
    def __init__(self, user_pool_id: str, *, client) -> None:
        if not (user_pool_id or "").strip():
            raise ValueError("user_pool_id is required")
        self._user_pool_id = user_pool_id.strip()
        self._client = client

    @property
    def directory_id(self) -> str:
        return self._user_pool_id

    def resolve(self, email: str) -> Identity | None:
        return self._find_one(f'email = "{_filter_value(email)}"', operation="resolve")

    def lookup_by_identifier(self, subject_id: str) -> Identity | None:
        return self._find_one(
            f'sub = "{_filter_value(subject_id)}"', operation="lookup_by_identifier"
        )

    # =========================================================================
    # Helpers privados
    # =========================================================================

    def _find_one(self, filter_expr: str, *, operation: str) -> Identity | None:
        try:
            response = self._client.list_users(
                UserPoolId=self._user_pool_id,
                Filter=filter_expr,
                Limit=1,
            )
        except Exception as exc:
            raise map_aws_error(exc, service=_SERVICE, operation=operation) from exc

        users = response.get("Users") or []
        if not users:
            return None

        user = users[0]
        subject_id = _attribute(user, "sub")
        email = _attribute(user, "email")
        if not subject_id or not email:
            return None
        return Identity(subject_id=subject_id, email=email)
