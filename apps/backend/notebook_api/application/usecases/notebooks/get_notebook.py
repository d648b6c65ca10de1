"""
===============================================================================
USE CASE: Get Notebook
===============================================================================

Business Goal:
    Devolver un notebook si el motor de autorización permite leerlo
    (owner, público o grant explícito de lectura).
===============================================================================
"""

from __future__ import annotations

from ....domain.entities import Caller
from ....domain.repositories import NotebookRepository
from ....domain.services import AuthorizationEngine
from ....domain.value_objects import NotebookAction
from .notebook_access import resolve_notebook_for_action
from .notebook_results import NotebookResult


class GetNotebookUseCase:
    def __init__(
        self,
        repository: NotebookRepository,
        authorization_engine: AuthorizationEngine,
    ) -> None:
        self._notebooks = repository
        self._authz = authorization_engine

    def execute(self, notebook_id: str, *, actor: Caller) -> NotebookResult:
        notebook, error = resolve_notebook_for_action(
            notebook_id=notebook_id,
            actor=actor,
            action=NotebookAction.READ,
            notebook_repository=self._notebooks,
            authorization_engine=self._authz,
        )
        if error is not None:
            return NotebookResult(error=error)
        return NotebookResult(notebook=notebook)
