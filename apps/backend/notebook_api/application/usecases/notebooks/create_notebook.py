"""
===============================================================================
USE CASE: Create Notebook
===============================================================================

Business Goal:
    Crear un notebook nuevo cuyo owner es el caller.

Reglas:
    - name no puede quedar vacío luego de normalizar.
    - id generado por el sistema (uuid4 como string opaco).
    - No requiere autorización externa: cualquier caller autenticado crea.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from ....domain.entities import Caller, Notebook, NotebookVisibility
from ....domain.repositories import NotebookRepository
from .notebook_results import NotebookError, NotebookErrorCode, NotebookResult


@dataclass(frozen=True)
class CreateNotebookInput:
    name: str
    actor: Caller
    content: str = ""
    visibility: NotebookVisibility = NotebookVisibility.PRIVATE


class CreateNotebookUseCase:
    def __init__(self, repository: NotebookRepository) -> None:
        self._notebooks = repository

    def execute(self, input_data: CreateNotebookInput) -> NotebookResult:
        name = (input_data.name or "").strip()
        if not name:
            return NotebookResult(
                error=NotebookError(
                    code=NotebookErrorCode.VALIDATION_ERROR,
                    message="Notebook name is required.",
                )
            )

        now = datetime.now(timezone.utc)
        notebook = Notebook(
            id=str(uuid4()),
            owner_id=input_data.actor.subject_id,
            name=name,
            content=input_data.content or "",
            visibility=input_data.visibility,
            created_at=now,
            updated_at=now,
        )
        return NotebookResult(notebook=self._notebooks.save(notebook))
