"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context)
  - Mount notebook and sharing routers (no version prefix)
  - Expose health check and metrics endpoints

Collaborators:
  - FastAPI: ASGI web framework
  - CORSMiddleware: Cross-Origin Resource Sharing handler
  - RequestContextMiddleware: Request ID and logging context
  - interfaces.api.http.router: notebooks + sharing endpoints

Constraints:
  - CORS configurable via ALLOWED_ORIGINS env var (comma-separated)
  - Every business endpoint requires a Cognito bearer token

Notes:
  - Middleware order matters: RequestContext → CORS → routes
  - /healthz follows Kubernetes health check convention
  - /metrics exposes Prometheus metrics
  - Env validation enforced at startup (via lifespan, not import time)
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from ..application.dev_seed_notebooks import ensure_demo_notebooks, ensure_demo_users
from ..container import get_identity_directory, get_notebook_repository
from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.metrics import get_metrics_response
from ..crosscutting.middleware import RequestContextMiddleware
from ..infrastructure.identity import InMemoryIdentityDirectory
from ..interfaces.api.http.router import router
from .exception_handlers import register_exception_handlers


def _run_dev_seed(settings) -> None:
    created = ensure_demo_notebooks(
        repository=get_notebook_repository(), settings=settings
    )
    directory = get_identity_directory()
    added = 0
    if isinstance(directory, InMemoryIdentityDirectory):
        added = ensure_demo_users(directory=directory, settings=settings)
    logger.info(
        "Dev seed finished",
        extra={"notebooks_created": created, "users_added": added},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Settings validate on first load."""
    settings = get_settings()

    try:
        if settings.dev_seed_notebooks:
            _run_dev_seed(settings)
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise

    logger.info(
        "Notebooks API starting up",
        extra={
            "app_env": settings.app_env,
            "identity_backend": settings.identity_backend,
            "policy_backend": settings.policy_backend,
            "storage_backend": settings.storage_backend,
            "aws_region": settings.aws_region,
        },
    )

    yield

    logger.info("Notebooks API shutting down")


# R: Create FastAPI application instance with API metadata
app = FastAPI(
    title="Notebooks API",
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "notebooks", "description": "Notebook CRUD (owner or grantee)"},
        {"name": "sharing", "description": "Share notebooks and read their ACL"},
    ],
)

# R: Middleware order (bottom = first to execute):
# 1. CORSMiddleware - handles preflight
# 2. RequestContextMiddleware - sets request_id
app.add_middleware(RequestContextMiddleware)

_settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.get_allowed_origins_list(),
    allow_credentials=_settings.cors_allow_credentials,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Request-Id"],
    expose_headers=["X-Request-Id"],
)

app.include_router(router)

# R: Register exception handlers for structured error responses
register_exception_handlers(app)


@app.get("/healthz")
def healthz(request: Request):
    """
    R: Liveness check. No llama a AWS: solo reporta los backends activos.

    Returns:
        ok: True while the process is serving
        backends: identity/policy/storage selected by settings
        request_id: Correlation ID for this request
    """
    settings = get_settings()
    return {
        "ok": True,
        "backends": {
            "identity": settings.identity_backend,
            "policy": settings.policy_backend,
            "storage": settings.storage_backend,
        },
        "request_id": getattr(request.state, "request_id", None),
    }


@app.get("/metrics")
def metrics():
    """R: Expose Prometheus metrics (text format)."""
    body, content_type = get_metrics_response()
    return Response(content=body, media_type=content_type)
