"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (Notebook, Identity, Grant, AclView, Caller)

Responsabilidades:
    - Definir estructuras centrales del negocio (sin infraestructura).
    - Brindar helpers mínimos (métodos) para mantener invariantes simples.
    - Mantener tipos claros para casos de uso y adapters.

Colaboradores:
    - domain.repositories / domain.services: persisten/consultan estas entidades.
    - application/usecases: construyen/consumen estas entidades.
    - interfaces/api: serializan DTOs basados en estas entidades.

Principios:
    - Sin dependencias a boto3/FastAPI.
    - Datos + comportamiento mínimo.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from .value_objects import NotebookAction, PrincipalRef


def _utcnow() -> datetime:
    """Fecha/hora UTC (helper interno)."""
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Notebook
# ---------------------------------------------------------------------------


class NotebookVisibility(str, Enum):
    """Visibilidad del notebook."""

    PRIVATE = "private"
    PUBLIC = "public"


@dataclass
class Notebook:
    """
    Notebook: el recurso que se comparte.

    El core de sharing solo lee id, owner_id y visibility; el resto es
    contenido del usuario.
    """

    id: str
    owner_id: str
    name: str
    content: str = ""
    visibility: NotebookVisibility = NotebookVisibility.PRIVATE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_public(self) -> bool:
        return self.visibility == NotebookVisibility.PUBLIC

    def is_owned_by(self, subject_id: str | None) -> bool:
        return bool(subject_id) and self.owner_id == subject_id

    def apply_changes(
        self,
        *,
        name: str | None = None,
        content: str | None = None,
        visibility: NotebookVisibility | None = None,
        at: datetime | None = None,
    ) -> None:
        """Aplica cambios parciales (None = sin cambio) y actualiza updated_at."""
        if name is not None:
            self.name = name
        if content is not None:
            self.content = content
        if visibility is not None:
            self.visibility = visibility
        self.updated_at = at or _utcnow()


# ---------------------------------------------------------------------------
# Identity / Caller
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Identity:
    """Usuario del directorio externo. Este servicio nunca lo crea ni borra."""

    subject_id: str
    email: str


@dataclass(frozen=True)
class Caller:
    """Usuario autenticado que invoca la API."""

    subject_id: str
    email: str | None
    principal: PrincipalRef


# ---------------------------------------------------------------------------
# Grant
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Grant:
    """
    Permiso persistido en el policy store (una policy estática).

    Invariante buscada: a lo sumo un Grant por (principal, resource, action).
    Se aproxima con check-then-create; un duplicado por carrera es inocuo.
    """

    principal: PrincipalRef
    resource_id: str
    action: NotebookAction = NotebookAction.READ
    statement: str = ""
    grant_id: str = ""


# ---------------------------------------------------------------------------
# ACL
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AclEntry:
    """Entrada del ACL. provisional=True nunca viene del store."""

    email: str
    provisional: bool = False


@dataclass
class AclView:
    """Vista del ACL de un notebook (confirmadas + provisoria opcional)."""

    resource_id: str
    entries: List[AclEntry] = field(default_factory=list)

    @property
    def emails(self) -> List[str]:
        return [entry.email for entry in self.entries]
