"""
===============================================================================
TARJETA CRC — schemas/notebooks.py
===============================================================================

Módulo:
    Schemas HTTP para Notebooks

Responsabilidades:
    - Definir DTOs de request/response para el CRUD de notebooks.
    - Mantener el shape del cliente web: {id, name, owner, content, public}.
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field

from notebook_api.domain.entities import Notebook, NotebookVisibility

_MAX_NAME_CHARS = 200
_MAX_CONTENT_CHARS = 100_000


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class CreateNotebookReq(BaseModel):
    name: Annotated[str, Field(..., min_length=1, max_length=_MAX_NAME_CHARS)]
    content: str = Field(default="", max_length=_MAX_CONTENT_CHARS)
    public: bool = False


class UpdateNotebookReq(BaseModel):
    name: str | None = Field(default=None, max_length=_MAX_NAME_CHARS)
    content: str | None = Field(default=None, max_length=_MAX_CONTENT_CHARS)
    public: bool | None = None

    def visibility(self) -> NotebookVisibility | None:
        if self.public is None:
            return None
        return NotebookVisibility.PUBLIC if self.public else NotebookVisibility.PRIVATE


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class NotebookRes(BaseModel):
    id: str
    name: str
    owner: str
    content: str
    public: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, notebook: Notebook) -> "NotebookRes":
        return cls(
            id=notebook.id,
            name=notebook.name,
            owner=notebook.owner_id,
            content=notebook.content,
            public=notebook.is_public,
            created_at=notebook.created_at,
            updated_at=notebook.updated_at,
        )
