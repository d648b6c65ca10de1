"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define the notebook persistence contract (port).
- Keep the application/domain independent from infrastructure (DynamoDB, in-memory).
- Enable dependency inversion and straightforward unit testing (fake repositories).

Collaborators
- domain.entities: Notebook
- infrastructure.repositories: in_memory, dynamodb implementations

Constraints
- Pure interfaces only: no side effects, no infrastructure imports.
- Implementations MUST match method signatures exactly.

Notes
- Storage failures surface as crosscutting.exceptions.DependencyError.
"""

from typing import List, Optional, Protocol

from .entities import Notebook


class NotebookRepository(Protocol):
    """
    R: Interface for notebook persistence.

    The sharing core only needs find_by_id (existence + owner); the CRUD
    use cases use the rest.
    """

    def find_by_id(self, notebook_id: str) -> Optional[Notebook]:
        """R: Get a notebook by id (None if absent)."""
        ...

    def find_by_owner(self, owner_id: str) -> List[Notebook]:
        """R: Notebooks owned by owner_id plus every public notebook."""
        ...

    def save(self, notebook: Notebook) -> Notebook:
        """R: Insert or replace a notebook."""
        ...

    def delete(self, notebook_id: str) -> bool:
        """R: Delete a notebook. Returns False if it did not exist."""
        ...
