"""
===============================================================================
TARJETA CRC — router.py (Router raíz / Composición)
===============================================================================

Responsabilidades:
  - Definir el APIRouter raíz que se incluye en FastAPI (app.include_router).
  - Centralizar responses RFC7807 para OpenAPI.
  - Componer routers por feature (notebooks / sharing).

Notas:
  - Sin prefijo de versión: el cliente web usa /share-notebook, /get-acl/...
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from notebook_api.crosscutting.error_responses import OPENAPI_ERROR_RESPONSES
from notebook_api.interfaces.api.http.routers import notebooks_router, sharing_router


def build_router() -> APIRouter:
    """Construye el router raíz (factory: testeable y sin side effects al importar)."""
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)

    api_router.include_router(notebooks_router)
    api_router.include_router(sharing_router)

    return api_router


router = build_router()

__all__ = ["router", "build_router"]
