"""
Use Cases Layer (Business Operations)

This package exposes entry points for business logic, organized by feature.

Structure
---------
usecases/
├── notebooks/      # Notebook CRUD (authorization delegated to the engine)
└── sharing/        # Share by email, ACL view, shared-with-me

Usage
-----
    from notebook_api.application.usecases.sharing import ShareNotebookUseCase
    from notebook_api.application.usecases import GetAclUseCase
"""

from .notebooks import (
    CreateNotebookInput,
    CreateNotebookUseCase,
    DeleteNotebookUseCase,
    GetNotebookUseCase,
    ListNotebooksUseCase,
    UpdateNotebookUseCase,
)
from .sharing import (
    GetAclUseCase,
    ListSharedWithMeUseCase,
    ShareNotebookUseCase,
)

__all__ = [
    # Notebooks
    "CreateNotebookInput",
    "CreateNotebookUseCase",
    "GetNotebookUseCase",
    "ListNotebooksUseCase",
    "UpdateNotebookUseCase",
    "DeleteNotebookUseCase",
    # Sharing
    "ShareNotebookUseCase",
    "GetAclUseCase",
    "ListSharedWithMeUseCase",
]
