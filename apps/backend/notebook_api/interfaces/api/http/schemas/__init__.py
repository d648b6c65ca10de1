"""DTOs HTTP (Pydantic) por feature."""

from .notebooks import CreateNotebookReq, NotebookRes, UpdateNotebookReq
from .sharing import AclEntryRes, AclRes, ShareNotebookReq, ShareNotebookRes

__all__ = [
    "CreateNotebookReq",
    "UpdateNotebookReq",
    "NotebookRes",
    "ShareNotebookReq",
    "ShareNotebookRes",
    "AclEntryRes",
    "AclRes",
]
