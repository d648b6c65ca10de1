"""
Name: Notebook Endpoint Tests

Responsibilities:
  - CRUD routes map use case results to HTTP (201/200/204/400/403/404)
  - Shared notebooks become readable by the grantee
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from notebook_api import container
from notebook_api.api.exception_handlers import register_exception_handlers
from notebook_api.application.usecases.notebooks import (
    CreateNotebookUseCase,
    DeleteNotebookUseCase,
    GetNotebookUseCase,
    ListNotebooksUseCase,
    UpdateNotebookUseCase,
)
from notebook_api.domain.value_objects import PrincipalRef
from notebook_api.identity.cognito_auth import require_caller
from notebook_api.interfaces.api.http.router import build_router

from conftest import GRANTEE_SUB, OWNER_SUB, POOL_ID, make_caller

pytestmark = pytest.mark.unit


def _provide(use_case):
    return lambda: use_case


def _client(notebook_repository, policy_store, caller) -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(build_router())

    overrides = {
        container.get_list_notebooks_use_case: ListNotebooksUseCase(notebook_repository),
        container.get_create_notebook_use_case: CreateNotebookUseCase(
            notebook_repository
        ),
        container.get_get_notebook_use_case: GetNotebookUseCase(
            notebook_repository, policy_store
        ),
        container.get_update_notebook_use_case: UpdateNotebookUseCase(
            notebook_repository, policy_store
        ),
        container.get_delete_notebook_use_case: DeleteNotebookUseCase(
            notebook_repository, policy_store
        ),
    }
    for getter, use_case in overrides.items():
        app.dependency_overrides[getter] = _provide(use_case)
    app.dependency_overrides[require_caller] = lambda: caller
    return TestClient(app)


@pytest.fixture
def owner_client(notebook_repository, policy_store) -> TestClient:
    return _client(notebook_repository, policy_store, make_caller(OWNER_SUB))


@pytest.fixture
def grantee_client(notebook_repository, policy_store) -> TestClient:
    return _client(notebook_repository, policy_store, make_caller(GRANTEE_SUB))


def test_create_returns_201(owner_client):
    res = owner_client.post("/notebooks", json={"name": "Ideas", "public": True})

    assert res.status_code == 201
    body = res.json()
    assert body["name"] == "Ideas"
    assert body["owner"] == OWNER_SUB
    assert body["public"] is True


def test_create_without_name_is_400(owner_client):
    res = owner_client.post("/notebooks", json={"content": "x"})

    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_REQUEST"


def test_list_notebooks(owner_client):
    res = owner_client.get("/notebooks")

    assert res.status_code == 200
    assert [n["id"] for n in res.json()] == ["nb-1"]


def test_get_own_notebook(owner_client):
    res = owner_client.get("/notebooks/nb-1")

    assert res.status_code == 200
    assert res.json()["content"] == "hello"


def test_get_missing_notebook_is_404(owner_client):
    res = owner_client.get("/notebooks/nope")

    assert res.status_code == 404
    assert res.json()["detail"] == "Notebook 'nope' not found"


def test_grantee_reads_only_after_grant(grantee_client, policy_store):
    assert grantee_client.get("/notebooks/nb-1").status_code == 403

    policy_store.create_grant(PrincipalRef(POOL_ID, GRANTEE_SUB), "nb-1")

    assert grantee_client.get("/notebooks/nb-1").status_code == 200


def test_update_by_owner(owner_client):
    res = owner_client.put("/notebooks/nb-1", json={"content": "updated"})

    assert res.status_code == 200
    assert res.json()["content"] == "updated"


def test_update_with_empty_body_is_400(owner_client):
    res = owner_client.put("/notebooks/nb-1", json={})

    assert res.status_code == 400


def test_update_by_grantee_is_403(grantee_client, policy_store):
    policy_store.create_grant(PrincipalRef(POOL_ID, GRANTEE_SUB), "nb-1")

    res = grantee_client.put("/notebooks/nb-1", json={"content": "nope"})

    assert res.status_code == 403


def test_delete_returns_204(owner_client, notebook_repository):
    res = owner_client.delete("/notebooks/nb-1")

    assert res.status_code == 204
    assert notebook_repository.find_by_id("nb-1") is None


def test_delete_missing_is_404(owner_client):
    assert owner_client.delete("/notebooks/nope").status_code == 404
