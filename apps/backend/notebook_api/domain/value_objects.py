# =============================================================================
# FILE: domain/value_objects.py
# =============================================================================
"""
===============================================================================
DOMAIN: Value Objects (Immutable Domain Primitives)
===============================================================================

Name:
    Domain Value Objects

Qué es:
    Objetos de valor inmutables que representan conceptos del dominio
    sin identidad propia. Son iguales si sus atributos son iguales.

Contenido:
    - PrincipalRef: identificador compuesto "<directoryId>|<subjectId>" que
      usa el policy store para referirse a un usuario
    - NotebookAction: catálogo de acciones autorizables sobre un notebook
    - normalize_email / is_plausible_email: validación mínima de emails

Principios:
    - Inmutabilidad (frozen dataclasses)
    - Validación en constructor
    - Sin side effects
    - Equality por valor

===============================================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------
PRINCIPAL_SEPARATOR: Final[str] = "|"

# Suficiente para descartar basura; la fuente de verdad es el directorio.
# Comillas y backslash quedan afuera porque terminan en un filtro de ListUsers.
_EMAIL_RE: Final[re.Pattern[str]] = re.compile(r"^[^@\s\"\\]+@[^@\s\"\\]+\.[^@\s\"\\]+$")
_MAX_EMAIL_LEN: Final[int] = 254


# -----------------------------------------------------------------------------
# Principal Reference (compound policy-store identifier)
# -----------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class PrincipalRef:
    """
    Referencia a un usuario dentro del policy store.

    El policy store identifica principals como "<directoryId>|<subjectId>".
    parse() y format() son el único lugar donde se maneja el separador: todo
    adapter que escribe o lee un principal pasa por acá.

    Attributes:
        directory_id: Id del directorio de identidades (user pool)
        subject_id: Id estable del usuario dentro del directorio (sub)
    """

    directory_id: str
    subject_id: str

    def __post_init__(self) -> None:
        for name in ("directory_id", "subject_id"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValueError(f"{name} must be a non-empty string")
            if PRINCIPAL_SEPARATOR in value:
                raise ValueError(f"{name} must not contain '{PRINCIPAL_SEPARATOR}'")

    @classmethod
    def parse(cls, text: str) -> "PrincipalRef":
        """Parsea "<directoryId>|<subjectId>"; ValueError si no hay exactamente dos partes."""
        if not isinstance(text, str):
            raise ValueError("principal reference must be a string")
        parts = text.split(PRINCIPAL_SEPARATOR)
        if len(parts) != 2:
            raise ValueError(f"malformed principal reference: {text!r}")
        return cls(directory_id=parts[0], subject_id=parts[1])

    def format(self) -> str:
        return f"{self.directory_id}{PRINCIPAL_SEPARATOR}{self.subject_id}"

    def __str__(self) -> str:
        return self.format()


# -----------------------------------------------------------------------------
# Actions
# -----------------------------------------------------------------------------
class NotebookAction(str, Enum):
    """Acciones del policy store (ids de NotebooksApp::Action)."""

    READ = "getNotebookById"
    UPDATE = "putNotebook"
    DELETE = "deleteNotebook"
    SHARE = "shareNotebook"


# -----------------------------------------------------------------------------
# Email helpers
# -----------------------------------------------------------------------------
def normalize_email(value: str | None) -> str:
    """Trim; None -> ""."""
    return (value or "").strip()


def is_plausible_email(value: str) -> bool:
    """True si parece un email usable como filtro del directorio."""
    if not value or len(value) > _MAX_EMAIL_LEN:
        return False
    return _EMAIL_RE.match(value) is not None
