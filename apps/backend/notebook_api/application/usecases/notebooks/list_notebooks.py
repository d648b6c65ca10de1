"""
===============================================================================
USE CASE: List Notebooks
===============================================================================

Business Goal:
    Listar los notebooks visibles "por defecto" para el caller: los propios
    más los públicos. Los compartidos explícitamente van por shared-with-me.
===============================================================================
"""

from __future__ import annotations

from ....domain.entities import Caller
from ....domain.repositories import NotebookRepository
from .notebook_results import NotebookListResult


class ListNotebooksUseCase:
    def __init__(self, repository: NotebookRepository) -> None:
        self._notebooks = repository

    def execute(self, *, actor: Caller) -> NotebookListResult:
        return NotebookListResult(
            notebooks=self._notebooks.find_by_owner(actor.subject_id)
        )
