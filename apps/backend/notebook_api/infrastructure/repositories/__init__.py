# infrastructure/repositories/__init__.py
"""
============================================================
TARJETA CRC — infrastructure/repositories/__init__.py
============================================================
Module: infrastructure.repositories (Public Export Surface)

Responsibilities:
  - Exponer una API pública y estable de repositorios de infraestructura.
  - Centralizar imports/exports para evitar paths largos.

Policy:
  - Este archivo NO contiene lógica de negocio.
  - Solo re-exporta símbolos; no debe tener side effects.
============================================================
"""

# ------------------------------------------------------------
# DynamoDB implementation (production)
# ------------------------------------------------------------
from .dynamodb import DynamoNotebookRepository

# ------------------------------------------------------------
# In-memory implementation (tests / local dev)
# ------------------------------------------------------------
from .in_memory import InMemoryNotebookRepository

__all__ = [
    "DynamoNotebookRepository",
    "InMemoryNotebookRepository",
]
