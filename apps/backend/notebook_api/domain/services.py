"""
===============================================================================
TARJETA CRC — domain/services.py
===============================================================================

Módulo:
    Puertos de Servicios Externos (Protocols)

Responsabilidades:
    - Definir contratos para el directorio de identidades, el policy store y
      el motor de autorización.
    - Proteger a application de detalles del proveedor (Cognito, Verified
      Permissions).
    - Mantener el dominio independiente de SDKs.

Colaboradores:
    - infrastructure/identity, infrastructure/policies: implementaciones.
    - application/usecases: consumen estos puertos.

Reglas:
    - SOLO interfaces: nada de implementación.
    - Fallas del proveedor -> crosscutting.exceptions.DependencyError.
===============================================================================
"""

from __future__ import annotations

from typing import Protocol

from .entities import Grant, Identity, Notebook
from .value_objects import NotebookAction, PrincipalRef


class IdentityDirectory(Protocol):
    """Contrato del directorio de usuarios."""

    @property
    def directory_id(self) -> str:
        """Id del directorio (primera parte de PrincipalRef)."""
        ...

    def resolve(self, email: str) -> Identity | None:
        """Email -> identidad. None si no existe; si hay varias, la primera."""
        ...

    def lookup_by_identifier(self, subject_id: str) -> Identity | None:
        """Subject id -> identidad (lookup inverso para armar el ACL)."""
        ...


class PolicyStore(Protocol):
    """Contrato del policy store (grants persistidos)."""

    def find_grants(
        self,
        *,
        principal: PrincipalRef | None = None,
        resource_id: str | None = None,
    ) -> list[Grant]:
        """Grants filtrados por principal y/o recurso (al menos uno)."""
        ...

    def create_grant(
        self,
        principal: PrincipalRef,
        resource_id: str,
        action: NotebookAction = NotebookAction.READ,
    ) -> Grant:
        """Crea un grant. No es idempotente."""
        ...


class AuthorizationEngine(Protocol):
    """Contrato del motor que decide permisos sobre un notebook."""

    def is_authorized(
        self,
        principal: PrincipalRef,
        action: NotebookAction,
        notebook: Notebook,
    ) -> bool: ...
