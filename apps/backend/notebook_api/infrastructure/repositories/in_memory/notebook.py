"""
CRC — infrastructure/repositories/in_memory/notebook.py

Name
- InMemoryNotebookRepository

Responsibilities
- Store notebooks in memory (tests/local dev).
- find_by_owner returns owned + public notebooks.

Collaborators
- domain.entities.Notebook
- domain.repositories.NotebookRepository

Constraints / Notes
- Thread-safe access (Lock).
- Copies on read/write so callers never alias internal state.
- Deterministic ordering: insertion order.
"""

from __future__ import annotations

from dataclasses import replace
from threading import Lock
from typing import Dict, Iterable, List, Optional

from ....domain.entities import Notebook
from ....domain.repositories import NotebookRepository


class InMemoryNotebookRepository(NotebookRepository):
    """R: Thread-safe in-memory notebook repository."""

    def __init__(self, notebooks: Iterable[Notebook] = ()) -> None:
        self._lock = Lock()
        self._notebooks: Dict[str, Notebook] = {}
        for notebook in notebooks:
            self._notebooks[notebook.id] = replace(notebook)

    def find_by_id(self, notebook_id: str) -> Optional[Notebook]:
        with self._lock:
            notebook = self._notebooks.get(notebook_id)
            return replace(notebook) if notebook is not None else None

    def find_by_owner(self, owner_id: str) -> List[Notebook]:
        with self._lock:
            return [
                replace(n)
                for n in self._notebooks.values()
                if n.is_public or n.owner_id == owner_id
            ]

    def save(self, notebook: Notebook) -> Notebook:
        with self._lock:
            self._notebooks[notebook.id] = replace(notebook)
        return notebook

    def delete(self, notebook_id: str) -> bool:
        with self._lock:
            return self._notebooks.pop(notebook_id, None) is not None
