"""
===============================================================================
NOTEBOOK USE CASES PACKAGE (Public API / Exports)
===============================================================================

Responsibilities:
    - Re-exportar los casos de uso del CRUD de notebooks y sus resultados.
    - Definir __all__ como contrato de API pública del paquete.
===============================================================================
"""

from __future__ import annotations

from .create_notebook import CreateNotebookInput, CreateNotebookUseCase
from .delete_notebook import DeleteNotebookUseCase
from .get_notebook import GetNotebookUseCase
from .list_notebooks import ListNotebooksUseCase
from .notebook_access import resolve_notebook_for_action
from .notebook_results import (
    DeleteNotebookResult,
    NotebookError,
    NotebookErrorCode,
    NotebookListResult,
    NotebookResult,
)
from .update_notebook import UpdateNotebookUseCase

__all__ = [
    # Use Cases
    "CreateNotebookInput",
    "CreateNotebookUseCase",
    "GetNotebookUseCase",
    "ListNotebooksUseCase",
    "UpdateNotebookUseCase",
    "DeleteNotebookUseCase",
    # Helpers
    "resolve_notebook_for_action",
    # Results
    "NotebookResult",
    "NotebookListResult",
    "DeleteNotebookResult",
    "NotebookError",
    "NotebookErrorCode",
]
