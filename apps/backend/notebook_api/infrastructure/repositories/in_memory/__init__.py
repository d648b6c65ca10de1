from .notebook import InMemoryNotebookRepository

__all__ = ["InMemoryNotebookRepository"]
