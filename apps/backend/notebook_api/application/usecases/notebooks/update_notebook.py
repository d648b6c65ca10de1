"""
===============================================================================
USE CASE: Update Notebook
===============================================================================

Business Goal:
    Actualizar name / content / visibility de un notebook.

Reglas:
    - Debe proveerse al menos un campo.
    - name, si se provee, no puede quedar vacío.
    - El motor de autorización debe permitir putNotebook.
===============================================================================
"""

from __future__ import annotations

from ....domain.entities import Caller, NotebookVisibility
from ....domain.repositories import NotebookRepository
from ....domain.services import AuthorizationEngine
from ....domain.value_objects import NotebookAction
from .notebook_access import resolve_notebook_for_action
from .notebook_results import NotebookError, NotebookErrorCode, NotebookResult


class UpdateNotebookUseCase:
    def __init__(
        self,
        repository: NotebookRepository,
        authorization_engine: AuthorizationEngine,
    ) -> None:
        self._notebooks = repository
        self._authz = authorization_engine

    def execute(
        self,
        notebook_id: str,
        *,
        actor: Caller,
        name: str | None = None,
        content: str | None = None,
        visibility: NotebookVisibility | None = None,
    ) -> NotebookResult:
        if name is None and content is None and visibility is None:
            return self._validation_error("No fields provided to update.")

        normalized_name = name.strip() if name is not None else None
        if name is not None and not normalized_name:
            return self._validation_error("Notebook name cannot be empty.")

        notebook, error = resolve_notebook_for_action(
            notebook_id=notebook_id,
            actor=actor,
            action=NotebookAction.UPDATE,
            notebook_repository=self._notebooks,
            authorization_engine=self._authz,
        )
        if error is not None:
            return NotebookResult(error=error)

        notebook.apply_changes(
            name=normalized_name, content=content, visibility=visibility
        )
        return NotebookResult(notebook=self._notebooks.save(notebook))

    @staticmethod
    def _validation_error(message: str) -> NotebookResult:
        return NotebookResult(
            error=NotebookError(
                code=NotebookErrorCode.VALIDATION_ERROR, message=message
            )
        )
