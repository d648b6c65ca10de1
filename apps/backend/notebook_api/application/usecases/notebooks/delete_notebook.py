"""
===============================================================================
USE CASE: Delete Notebook
===============================================================================

Business Goal:
    Borrar un notebook si el motor de autorización permite deleteNotebook.

Nota:
    Los grants del policy store que apuntan al notebook no se borran; quedan
    huérfanos y shared-with-me los ignora.
===============================================================================
"""

from __future__ import annotations

from ....domain.entities import Caller
from ....domain.repositories import NotebookRepository
from ....domain.services import AuthorizationEngine
from ....domain.value_objects import NotebookAction
from .notebook_access import resolve_notebook_for_action
from .notebook_results import DeleteNotebookResult, NotebookError, NotebookErrorCode


class DeleteNotebookUseCase:
    def __init__(
        self,
        repository: NotebookRepository,
        authorization_engine: AuthorizationEngine,
    ) -> None:
        self._notebooks = repository
        self._authz = authorization_engine

    def execute(self, notebook_id: str, *, actor: Caller) -> DeleteNotebookResult:
        _, error = resolve_notebook_for_action(
            notebook_id=notebook_id,
            actor=actor,
            action=NotebookAction.DELETE,
            notebook_repository=self._notebooks,
            authorization_engine=self._authz,
        )
        if error is not None:
            return DeleteNotebookResult(deleted=False, error=error)

        if not self._notebooks.delete(notebook_id):
            # Race: pudo desaparecer entre el read y el delete.
            return DeleteNotebookResult(
                deleted=False,
                error=NotebookError(
                    code=NotebookErrorCode.NOT_FOUND, message="Notebook not found."
                ),
            )
        return DeleteNotebookResult(deleted=True)
