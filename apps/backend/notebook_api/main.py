"""
Name: Backend ASGI Entrypoint (notebook_api.main)

Responsibilities:
  - Re-export the FastAPI app for ASGI servers and tooling
  - Keep this module side-effect free beyond importing notebook_api.api.main

Notes/Constraints:
  - uvicorn notebook_api.main:app
  - No configuration or IO should live here
"""

from notebook_api.api.main import app

__all__ = ["app"]
