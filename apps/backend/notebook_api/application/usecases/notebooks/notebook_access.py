"""
===============================================================================
NOTEBOOK ACCESS HELPER (Existence + Authorization)
===============================================================================
Name:
    Notebook Access Helper

Business Goal:
    Centralizar "cargar notebook + preguntarle al motor de autorización" para
    get/update/delete, con errores uniformes.

Responsibilities:
    - Retornar (Notebook | None, NotebookError | None) como contrato estable.
    - NOT_FOUND si no existe; FORBIDDEN si el motor niega la acción.

Collaborators:
    - NotebookRepository.find_by_id
    - AuthorizationEngine.is_authorized
===============================================================================
"""

from __future__ import annotations

from typing import Final, Tuple

from ....domain.entities import Caller, Notebook
from ....domain.repositories import NotebookRepository
from ....domain.services import AuthorizationEngine
from ....domain.value_objects import NotebookAction
from .notebook_results import NotebookError, NotebookErrorCode

_MSG_NOT_FOUND: Final[str] = "Notebook not found."
_MSG_FORBIDDEN: Final[str] = "Access denied."


def resolve_notebook_for_action(
    *,
    notebook_id: str,
    actor: Caller,
    action: NotebookAction,
    notebook_repository: NotebookRepository,
    authorization_engine: AuthorizationEngine,
) -> Tuple[Notebook | None, NotebookError | None]:
    notebook = notebook_repository.find_by_id(notebook_id)
    if notebook is None:
        return None, NotebookError(
            code=NotebookErrorCode.NOT_FOUND, message=_MSG_NOT_FOUND
        )

    if not authorization_engine.is_authorized(actor.principal, action, notebook):
        return None, NotebookError(
            code=NotebookErrorCode.FORBIDDEN, message=_MSG_FORBIDDEN
        )

    return notebook, None
