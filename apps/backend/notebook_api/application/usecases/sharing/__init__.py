"""
===============================================================================
SHARING USE CASES PACKAGE (Public API / Exports)
===============================================================================

Responsibilities:
    - Re-exportar los casos de uso de sharing y sus resultados.
    - Definir __all__ como contrato de API pública del paquete.

Collaborators:
    - share_notebook, get_acl, list_shared_with_me, sharing_results
===============================================================================
"""

from __future__ import annotations

from .get_acl import GetAclUseCase
from .list_shared_with_me import ListSharedWithMeUseCase
from .share_notebook import ShareNotebookUseCase, ShareState
from .sharing_results import (
    AclResult,
    SharedWithMeResult,
    ShareResult,
    SharingError,
    SharingErrorCode,
)

__all__ = [
    # Use Cases
    "ShareNotebookUseCase",
    "GetAclUseCase",
    "ListSharedWithMeUseCase",
    "ShareState",
    # Results
    "ShareResult",
    "AclResult",
    "SharedWithMeResult",
    "SharingError",
    "SharingErrorCode",
]
