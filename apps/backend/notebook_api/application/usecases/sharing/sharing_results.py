"""
===============================================================================
SHARING USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    Sharing Use Case Results

Business Goal:
    Proveer modelos compartidos de resultados y errores para los casos de uso
    de sharing (compartir notebook, ver ACL, listar compartidos conmigo).

Why (Context / Intención):
    - Los fallos esperables (input inválido, notebook inexistente, no-owner)
      vuelven como resultado tipado; el router los mapea a status codes.
    - Los fallos de dependencias externas NO son resultados: se propagan como
      DependencyError y los traduce el exception handler.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    sharing_results models (module)

Responsibilities:
    - Definir SharingErrorCode (set chico y estable).
    - Representar SharingError (code + message).
    - Representar resultados ShareResult / AclResult / SharedWithMeResult.

Collaborators:
    - domain.entities.AclView, Notebook
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import AclView, Notebook


class SharingErrorCode(str, Enum):
    """
    Códigos:
      - INVALID_REQUEST: campos faltantes, email inválido o grantee inexistente.
      - NOT_FOUND: el notebook no existe.
      - FORBIDDEN: el actor no es owner del notebook.
    """

    INVALID_REQUEST = "INVALID_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"


@dataclass(frozen=True)
class SharingError:
    code: SharingErrorCode
    message: str


@dataclass
class ShareResult:
    """
    Resultado de compartir.

    Contrato:
      - error is None => already_shared es True (no se creó grant) o False
        (se creó exactamente uno).
    """

    already_shared: bool | None = None
    error: SharingError | None = None

    @property
    def message(self) -> str:
        if self.error is not None:
            return self.error.message
        if self.already_shared:
            return "Notebook already shared with user"
        return "Notebook shared successfully"


@dataclass
class AclResult:
    acl: AclView | None = None
    error: SharingError | None = None


@dataclass
class SharedWithMeResult:
    notebooks: List[Notebook] = field(default_factory=list)
