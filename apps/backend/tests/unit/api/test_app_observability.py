"""
Name: App Observability Tests

Responsibilities:
  - /healthz and /metrics on the real app
  - X-Request-Id propagation and RFC7807 error bodies
  - Metric helpers keep label cardinality low
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from notebook_api.api.exception_handlers import register_exception_handlers
from notebook_api.crosscutting.error_responses import (
    OPENAPI_ERROR_RESPONSES,
    PROBLEM_JSON_MEDIA_TYPE,
)
from notebook_api.crosscutting.exceptions import NotebookApiError
from notebook_api.crosscutting.metrics import (
    _normalize_endpoint,
    _status_bucket,
    get_sample_value,
    record_share_outcome,
)
from notebook_api.crosscutting.middleware import RequestContextMiddleware

pytestmark = pytest.mark.unit


@pytest.fixture(scope="module")
def app_client():
    from notebook_api.api.main import app

    with TestClient(app) as client:
        yield client


def test_healthz_reports_backends(app_client):
    res = app_client.get("/healthz")

    assert res.status_code == 200
    body = res.json()
    assert body["ok"] is True
    assert set(body["backends"]) == {"identity", "policy", "storage"}
    assert body["request_id"] == res.headers["X-Request-Id"]


def test_incoming_request_id_is_echoed(app_client):
    res = app_client.get("/healthz", headers={"X-Request-Id": "req-abc"})

    assert res.headers["X-Request-Id"] == "req-abc"
    assert res.json()["request_id"] == "req-abc"


def test_metrics_endpoint_exposes_prometheus_text(app_client):
    app_client.get("/healthz")

    res = app_client.get("/metrics")

    assert res.status_code == 200
    assert "notebooks_requests_total" in res.text


def test_protected_route_without_token_is_problem_json(app_client):
    res = app_client.get("/shared-with-me")

    assert res.status_code == 401
    assert res.headers["content-type"].startswith(PROBLEM_JSON_MEDIA_TYPE)
    body = res.json()
    assert body["code"] == "UNAUTHORIZED"
    assert {"request_id": res.headers["X-Request-Id"]} in body["errors"]


def _failing_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)

    @app.get("/boom")
    def boom():
        raise RuntimeError("secret stack detail")

    @app.get("/service-error")
    def service_error():
        raise NotebookApiError("internal detail")

    return app


def test_unhandled_exception_is_generic_500():
    client = TestClient(_failing_app(), raise_server_exceptions=False)

    res = client.get("/boom")

    assert res.status_code == 500
    assert res.json()["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text


def test_service_error_hides_message():
    client = TestClient(_failing_app(), raise_server_exceptions=False)

    res = client.get("/service-error")

    assert res.status_code == 500
    assert res.json()["detail"] == "Internal server error"
    assert "internal detail" not in res.text


def test_documented_error_statuses_match_handlers():
    assert set(OPENAPI_ERROR_RESPONSES) == {"400", "401", "403", "404", "500"}


def test_unhandled_exception_carries_request_id():
    client = TestClient(_failing_app(), raise_server_exceptions=False)

    res = client.get("/boom", headers={"X-Request-Id": "req-500"})

    assert res.headers["content-type"].startswith(PROBLEM_JSON_MEDIA_TYPE)
    assert res.json()["errors"] == [{"request_id": "req-500"}]


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/get-acl/abc-123", "/get-acl/{id}"),
        ("/notebooks/nb-1", "/notebooks/{id}"),
        ("/shared-with-me", "/shared-with-me"),
        ("/notebooks", "/notebooks"),
    ],
)
def test_endpoint_normalization(path, expected):
    assert _normalize_endpoint(path) == expected


def test_status_buckets():
    assert _status_bucket(204) == "2xx"
    assert _status_bucket(404) == "4xx"
    assert _status_bucket(503) == "5xx"
    assert _status_bucket(301) == "other"


def test_share_outcome_counter():
    before = get_sample_value("notebooks_share_total", {"outcome": "forbidden"}) or 0.0

    record_share_outcome("forbidden")

    assert get_sample_value("notebooks_share_total", {"outcome": "forbidden"}) == (
        before + 1
    )


def test_unknown_share_outcome_is_rejected():
    with pytest.raises(ValueError):
        record_share_outcome("exploded")
