"""
Name: Sharing Endpoint Tests

Responsibilities:
  - PUT /share-notebook status codes and body ({message, alreadyShared})
  - GET /get-acl/{id} with and without ?pending=
  - GET /shared-with-me
  - Dependency failures surface as a generic 500 (no AWS details leaked)
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from notebook_api import container
from notebook_api.api.exception_handlers import register_exception_handlers
from notebook_api.application.usecases.sharing import (
    GetAclUseCase,
    ListSharedWithMeUseCase,
    ShareNotebookUseCase,
)
from notebook_api.crosscutting.exceptions import DependencyError
from notebook_api.identity.cognito_auth import require_caller
from notebook_api.interfaces.api.http.router import build_router

from conftest import make_caller, OWNER_SUB, GRANTEE_SUB

pytestmark = pytest.mark.unit


def _build_app(notebook_repository, directory, policy_store, caller) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(build_router())

    share = ShareNotebookUseCase(notebook_repository, directory, policy_store)
    acl = GetAclUseCase(notebook_repository, directory, policy_store)
    shared = ListSharedWithMeUseCase(notebook_repository, policy_store)

    app.dependency_overrides[container.get_share_notebook_use_case] = lambda: share
    app.dependency_overrides[container.get_acl_use_case] = lambda: acl
    app.dependency_overrides[container.get_list_shared_with_me_use_case] = (
        lambda: shared
    )
    app.dependency_overrides[require_caller] = lambda: caller
    return app


@pytest.fixture
def owner_client(notebook_repository, directory, policy_store, owner) -> TestClient:
    return TestClient(
        _build_app(notebook_repository, directory, policy_store, owner),
        raise_server_exceptions=False,
    )


def test_share_then_share_again(owner_client, policy_store):
    body = {"resourceId": "nb-1", "email": "grantee@example.com"}

    first = owner_client.put("/share-notebook", json=body)
    second = owner_client.put("/share-notebook", json=body)

    assert first.status_code == 200
    assert first.json() == {
        "message": "Notebook shared successfully",
        "alreadyShared": False,
    }
    assert second.status_code == 200
    assert second.json() == {
        "message": "Notebook already shared with user",
        "alreadyShared": True,
    }
    assert policy_store.count() == 1


def test_share_accepts_notebook_id_alias(owner_client):
    res = owner_client.put(
        "/share-notebook", json={"notebookId": "nb-1", "email": "grantee@example.com"}
    )

    assert res.status_code == 200


@pytest.mark.parametrize(
    "body",
    [
        {"resourceId": "nb-1"},
        {"email": "grantee@example.com"},
        {"resourceId": "", "email": ""},
        {},
    ],
)
def test_share_missing_fields_is_400(owner_client, policy_store, body):
    res = owner_client.put("/share-notebook", json=body)

    assert res.status_code == 400
    payload = res.json()
    assert payload["code"] == "INVALID_REQUEST"
    assert payload["detail"] == "Missing required fields: resourceId and email."
    assert policy_store.count() == 0


def test_share_malformed_body_is_400(owner_client):
    res = owner_client.put(
        "/share-notebook",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_REQUEST"


def test_share_unknown_user_is_400(owner_client, policy_store):
    res = owner_client.put(
        "/share-notebook", json={"resourceId": "nb-1", "email": "ghost@example.com"}
    )

    assert res.status_code == 400
    assert res.json()["detail"] == "User not found."
    assert policy_store.count() == 0


def test_share_unknown_notebook_is_404(owner_client):
    res = owner_client.put(
        "/share-notebook", json={"resourceId": "nope", "email": "grantee@example.com"}
    )

    assert res.status_code == 404
    assert res.json()["code"] == "NOT_FOUND"


def test_share_by_non_owner_is_403(notebook_repository, directory, policy_store):
    client = TestClient(
        _build_app(
            notebook_repository, directory, policy_store, make_caller(GRANTEE_SUB)
        )
    )

    res = client.put(
        "/share-notebook", json={"resourceId": "nb-1", "email": "stranger@example.com"}
    )

    assert res.status_code == 403
    assert policy_store.count() == 0


def test_share_dependency_failure_is_generic_500(notebook_repository, policy_store):
    directory = MagicMock()
    directory.resolve.side_effect = DependencyError(
        "cognito-idp failed during resolve. code=AccessDeniedException",
        service="cognito-idp",
        operation="resolve",
    )
    client = TestClient(
        _build_app(notebook_repository, directory, policy_store, make_caller(OWNER_SUB)),
        raise_server_exceptions=False,
    )

    res = client.put(
        "/share-notebook", json={"resourceId": "nb-1", "email": "grantee@example.com"}
    )

    assert res.status_code == 500
    payload = res.json()
    assert payload["code"] == "DEPENDENCY_ERROR"
    assert payload["detail"] == "Internal server error"
    assert "AccessDenied" not in res.text
    assert "cognito" not in res.text


def test_acl_after_share(owner_client):
    owner_client.put(
        "/share-notebook", json={"resourceId": "nb-1", "email": "grantee@example.com"}
    )

    res = owner_client.get("/get-acl/nb-1")

    assert res.status_code == 200
    assert res.json() == {
        "acl": ["grantee@example.com"],
        "entries": [{"email": "grantee@example.com", "provisional": False}],
    }


def test_acl_with_pending_email(owner_client):
    res = owner_client.get("/get-acl/nb-1", params={"pending": "new@example.com"})

    assert res.status_code == 200
    assert res.json()["acl"] == ["new@example.com"]
    assert res.json()["entries"][0]["provisional"] is True


def test_acl_unknown_notebook_is_404(owner_client):
    assert owner_client.get("/get-acl/missing").status_code == 404


def test_acl_requires_owner(notebook_repository, directory, policy_store):
    client = TestClient(
        _build_app(
            notebook_repository, directory, policy_store, make_caller(GRANTEE_SUB)
        )
    )

    assert client.get("/get-acl/nb-1").status_code == 403


def test_shared_with_me_after_share(notebook_repository, directory, policy_store, owner):
    owner_client = TestClient(
        _build_app(notebook_repository, directory, policy_store, owner)
    )
    owner_client.put(
        "/share-notebook", json={"resourceId": "nb-1", "email": "grantee@example.com"}
    )
    grantee_client = TestClient(
        _build_app(
            notebook_repository, directory, policy_store, make_caller(GRANTEE_SUB)
        )
    )

    res = grantee_client.get("/shared-with-me")

    assert res.status_code == 200
    assert [n["id"] for n in res.json()] == ["nb-1"]
    assert res.json()[0]["owner"] == OWNER_SUB


def test_endpoints_require_authentication(notebook_repository, directory, policy_store):
    app = _build_app(notebook_repository, directory, policy_store, None)
    app.dependency_overrides.pop(require_caller)
    client = TestClient(app)

    assert client.get("/shared-with-me").status_code == 401
    assert (
        client.put(
            "/share-notebook", json={"resourceId": "nb-1", "email": "a@b.io"}
        ).status_code
        == 401
    )
