"""
===============================================================================
NOTEBOOK USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    Notebook Use Case Results

Business Goal:
    Modelos compartidos de resultados y errores para el CRUD de notebooks.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    notebook_results models (module)

Responsibilities:
    - Definir NotebookErrorCode.
    - Representar NotebookError (code + message).
    - Representar NotebookResult / NotebookListResult / DeleteNotebookResult.

Collaborators:
    - domain.entities.Notebook
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from ....domain.entities import Notebook


class NotebookErrorCode(str, Enum):
    """
    Códigos:
      - VALIDATION_ERROR: inputs inválidos o incompletos.
      - FORBIDDEN: el motor de autorización negó la acción.
      - NOT_FOUND: el notebook no existe.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class NotebookError:
    code: NotebookErrorCode
    message: str


@dataclass
class NotebookResult:
    """
    Contrato:
      - Si error is None => notebook presente (éxito)
      - Si error != None => notebook None (fallo)
    """

    notebook: Notebook | None = None
    error: NotebookError | None = None


@dataclass
class NotebookListResult:
    notebooks: List[Notebook]
    error: NotebookError | None = None


@dataclass
class DeleteNotebookResult:
    deleted: bool
    error: NotebookError | None = None
