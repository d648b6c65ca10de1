"""
===============================================================================
ARCHIVO: crosscutting/metrics.py
===============================================================================

CRC CARD (Módulo)
-------------------------------------------------------------------------------
Nombre:
    Métricas (Prometheus) — Observabilidad de bajo acoplamiento

Responsabilidades:
    - Definir métricas Prometheus en un registry propio.
    - Proveer funciones pequeñas y estables para registrar eventos/duraciones.
    - Cuidar cardinalidad (NO emails, NO notebook ids, NO ids dinámicos).
    - Exponer helpers para generar la respuesta /metrics.

Colaboradores:
    - crosscutting.middleware: registra latencia y conteo HTTP.
    - application/usecases/sharing: cuenta resultados de share y lookups
      descartados al armar el ACL.
===============================================================================
"""

from __future__ import annotations

import re

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

_registry = CollectorRegistry()

# ------------------------
# HTTP
# ------------------------
_requests_total = Counter(
    "notebooks_requests_total",
    "Total de requests HTTP",
    ["endpoint", "method", "status"],
    registry=_registry,
)

_request_latency = Histogram(
    "notebooks_request_latency_seconds",
    "Latencia de requests HTTP (segundos)",
    ["endpoint", "method"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
    registry=_registry,
)

# ------------------------
# Sharing
# ------------------------
SHARE_OUTCOMES = (
    "grant_created",
    "already_shared",
    "invalid_request",
    "not_found",
    "forbidden",
    "failed",
)

_share_total = Counter(
    "notebooks_share_total",
    "Resultados del flujo de share por outcome",
    ["outcome"],
    registry=_registry,
)

_acl_lookup_dropped_total = Counter(
    "notebooks_acl_lookup_dropped_total",
    "Grants omitidos del ACL porque la identidad no pudo resolverse",
    registry=_registry,
)


def record_request_metrics(
    *, endpoint: str, method: str, status_code: int, latency_seconds: float
) -> None:
    """Registra conteo y latencia de un request HTTP."""
    normalized = _normalize_endpoint(endpoint)
    _requests_total.labels(
        endpoint=normalized, method=method, status=_status_bucket(status_code)
    ).inc()
    _request_latency.labels(endpoint=normalized, method=method).observe(
        latency_seconds
    )


def record_share_outcome(outcome: str) -> None:
    """Cuenta el resultado final de un share (ver SHARE_OUTCOMES)."""
    if outcome not in SHARE_OUTCOMES:
        raise ValueError(f"unknown share outcome: {outcome}")
    _share_total.labels(outcome=outcome).inc()


def record_acl_lookup_dropped(count: int = 1) -> None:
    """Cuenta entradas del ACL descartadas por lookup fallido."""
    _acl_lookup_dropped_total.inc(count)


# -----------------------------------------------------------------------------
# Helpers internos
# -----------------------------------------------------------------------------


def _normalize_endpoint(path: str) -> str:
    """Normaliza paths para evitar cardinalidad alta.

    Reemplaza ids de notebook (segmento dinámico) por `{id}`.
    """
    path = re.sub(r"^/get-acl/[^/]+", "/get-acl/{id}", path)
    path = re.sub(r"^/notebooks/[^/]+", "/notebooks/{id}", path)
    # IDs numéricos
    path = re.sub(r"/\d+", "/{id}", path)
    return path


def _status_bucket(code: int) -> str:
    """Agrupa status code para baja cardinalidad."""
    if 200 <= code < 300:
        return "2xx"
    if 400 <= code < 500:
        return "4xx"
    if 500 <= code < 600:
        return "5xx"
    return "other"


# -----------------------------------------------------------------------------
# Exposición del endpoint /metrics
# -----------------------------------------------------------------------------


def get_metrics_response() -> tuple[bytes, str]:
    """Genera el body y content-type para /metrics."""
    return generate_latest(_registry), CONTENT_TYPE_LATEST


def get_sample_value(name: str, labels: dict[str, str] | None = None) -> float | None:
    """Lee el valor actual de una muestra (útil para diagnósticos y tests)."""
    return _registry.get_sample_value(name, labels or {})
