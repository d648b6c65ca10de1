"""
===============================================================================
APPLICATION LAYER (Public API / Exports)
===============================================================================

Expone los puntos de entrada estables de la capa de aplicación:
  - dev_seed_notebooks: datos demo para correr localmente

Nota:
  - Los casos de uso se importan desde `usecases/` subdirectories.
===============================================================================
"""

from .dev_seed_notebooks import DEMO_USERS, ensure_demo_notebooks, ensure_demo_users

__all__ = ["DEMO_USERS", "ensure_demo_notebooks", "ensure_demo_users"]
