from .notebook import DynamoNotebookRepository

__all__ = ["DynamoNotebookRepository"]
