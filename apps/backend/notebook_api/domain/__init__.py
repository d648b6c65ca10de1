"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exportaciones de la Capa de Dominio (API pública del dominio)

Responsabilidades:
    - Centralizar exports para imports limpios en application/interfaces.
    - Mantener estable el “surface area” del dominio.

Colaboradores:
    - domain.entities: Notebook, Identity, Grant, AclView, Caller
    - domain.repositories: Puerto de persistencia de notebooks
    - domain.services: Puertos de directorio / policy store / autorización
    - domain.value_objects: PrincipalRef, NotebookAction

Reglas:
    - Solo re-exporta contratos/entidades del dominio.
    - No importar infraestructura aquí.
===============================================================================
"""

from .entities import (
    AclEntry,
    AclView,
    Caller,
    Grant,
    Identity,
    Notebook,
    NotebookVisibility,
)
from .repositories import NotebookRepository
from .services import AuthorizationEngine, IdentityDirectory, PolicyStore
from .value_objects import (
    NotebookAction,
    PrincipalRef,
    is_plausible_email,
    normalize_email,
)

__all__ = [
    # Entities
    "Notebook",
    "NotebookVisibility",
    "Identity",
    "Caller",
    "Grant",
    "AclEntry",
    "AclView",
    # Ports
    "NotebookRepository",
    "IdentityDirectory",
    "PolicyStore",
    "AuthorizationEngine",
    # Value Objects
    "PrincipalRef",
    "NotebookAction",
    "normalize_email",
    "is_plausible_email",
]
