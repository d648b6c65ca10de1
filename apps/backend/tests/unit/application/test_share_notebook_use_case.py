"""
Name: Share Notebook Use Case Tests

Responsibilities:
  - Share creates exactly one read grant; re-share is idempotent
  - Input errors short-circuit without touching directory / policy store
  - Dependency failures propagate unchanged
  - Concurrent shares of the same pair end with one or two grants
"""

from __future__ import annotations

import threading
from unittest.mock import MagicMock

import pytest

from notebook_api.application.usecases.sharing import (
    ShareNotebookUseCase,
    SharingErrorCode,
)
from notebook_api.crosscutting.exceptions import DependencyError
from notebook_api.crosscutting.metrics import get_sample_value
from notebook_api.domain.value_objects import NotebookAction, PrincipalRef

from conftest import GRANTEE_SUB, POOL_ID

pytestmark = pytest.mark.unit


def _share_count(outcome: str) -> float:
    return get_sample_value("notebooks_share_total", {"outcome": outcome}) or 0.0


@pytest.fixture
def use_case(notebook_repository, directory, policy_store) -> ShareNotebookUseCase:
    return ShareNotebookUseCase(
        notebook_repository=notebook_repository,
        identity_directory=directory,
        policy_store=policy_store,
    )


def test_share_creates_single_read_grant(use_case, policy_store, owner):
    result = use_case.execute("nb-1", "grantee@example.com", actor=owner)

    assert result.error is None
    assert result.already_shared is False
    assert result.message == "Notebook shared successfully"

    grants = policy_store.find_grants(resource_id="nb-1")
    assert len(grants) == 1
    assert grants[0].principal == PrincipalRef(POOL_ID, GRANTEE_SUB)
    assert grants[0].action == NotebookAction.READ


def test_share_twice_is_idempotent(use_case, policy_store, owner):
    first = use_case.execute("nb-1", "grantee@example.com", actor=owner)
    second = use_case.execute("nb-1", "grantee@example.com", actor=owner)

    assert first.already_shared is False
    assert second.error is None
    assert second.already_shared is True
    assert second.message == "Notebook already shared with user"
    assert policy_store.count() == 1


def test_share_trims_surrounding_whitespace(use_case, policy_store, owner):
    result = use_case.execute(" nb-1 ", "  grantee@example.com ", actor=owner)

    assert result.error is None
    assert policy_store.count() == 1


def test_share_counts_outcomes(use_case, owner):
    created_before = _share_count("grant_created")
    already_before = _share_count("already_shared")

    use_case.execute("nb-1", "grantee@example.com", actor=owner)
    use_case.execute("nb-1", "grantee@example.com", actor=owner)

    assert _share_count("grant_created") == created_before + 1
    assert _share_count("already_shared") == already_before + 1


def test_unknown_grantee_is_invalid_request(use_case, policy_store, owner):
    result = use_case.execute("nb-1", "nobody@example.com", actor=owner)

    assert result.error is not None
    assert result.error.code == SharingErrorCode.INVALID_REQUEST
    assert result.error.message == "User not found."
    assert policy_store.count() == 0


@pytest.mark.parametrize(
    "resource_id, email",
    [("", "grantee@example.com"), ("nb-1", ""), (None, None), ("   ", "   ")],
)
def test_missing_fields_have_no_side_effects(owner, resource_id, email):
    notebooks = MagicMock()
    directory = MagicMock()
    policies = MagicMock()
    use_case = ShareNotebookUseCase(notebooks, directory, policies)

    result = use_case.execute(resource_id, email, actor=owner)

    assert result.error.code == SharingErrorCode.INVALID_REQUEST
    assert result.error.message == "Missing required fields: resourceId and email."
    notebooks.find_by_id.assert_not_called()
    directory.resolve.assert_not_called()
    policies.find_grants.assert_not_called()
    policies.create_grant.assert_not_called()


def test_implausible_email_is_rejected_before_directory(owner):
    directory = MagicMock()
    policies = MagicMock()
    use_case = ShareNotebookUseCase(MagicMock(), directory, policies)

    result = use_case.execute("nb-1", 'x" or "1', actor=owner)

    assert result.error.code == SharingErrorCode.INVALID_REQUEST
    assert result.error.message == "Invalid email address."
    directory.resolve.assert_not_called()
    policies.create_grant.assert_not_called()


def test_unknown_notebook_is_not_found(use_case, policy_store, owner):
    result = use_case.execute("missing", "grantee@example.com", actor=owner)

    assert result.error.code == SharingErrorCode.NOT_FOUND
    assert policy_store.count() == 0


def test_non_owner_cannot_share(use_case, policy_store, stranger):
    result = use_case.execute("nb-1", "grantee@example.com", actor=stranger)

    assert result.error.code == SharingErrorCode.FORBIDDEN
    assert policy_store.count() == 0


def test_directory_failure_propagates(notebook_repository, owner):
    directory = MagicMock()
    directory.directory_id = POOL_ID
    directory.resolve.side_effect = DependencyError(
        "cognito down", service="cognito-idp", operation="resolve"
    )
    policies = MagicMock()
    use_case = ShareNotebookUseCase(notebook_repository, directory, policies)
    failed_before = _share_count("failed")

    with pytest.raises(DependencyError) as exc_info:
        use_case.execute("nb-1", "grantee@example.com", actor=owner)

    assert exc_info.value.service == "cognito-idp"
    policies.find_grants.assert_not_called()
    policies.create_grant.assert_not_called()
    assert _share_count("failed") == failed_before + 1


def test_policy_lookup_failure_skips_create(notebook_repository, directory, owner):
    policies = MagicMock()
    policies.find_grants.side_effect = DependencyError(
        "vp timeout", service="verifiedpermissions", operation="find_grants"
    )
    use_case = ShareNotebookUseCase(notebook_repository, directory, policies)

    with pytest.raises(DependencyError):
        use_case.execute("nb-1", "grantee@example.com", actor=owner)

    policies.create_grant.assert_not_called()


def test_retry_after_create_failure_creates_grant(
    notebook_repository, directory, policy_store, owner
):
    failing = MagicMock()
    failing.find_grants.return_value = []
    failing.create_grant.side_effect = DependencyError(
        "boom", service="verifiedpermissions", operation="create_grant"
    )
    use_case = ShareNotebookUseCase(notebook_repository, directory, failing)

    with pytest.raises(DependencyError):
        use_case.execute("nb-1", "grantee@example.com", actor=owner)
    failing.create_grant.assert_called_once_with(
        PrincipalRef(POOL_ID, GRANTEE_SUB), "nb-1", NotebookAction.READ
    )

    retry = ShareNotebookUseCase(notebook_repository, directory, policy_store)
    result = retry.execute("nb-1", "grantee@example.com", actor=owner)

    assert result.error is None
    assert result.already_shared is False
    assert policy_store.count() == 1


def test_concurrent_shares_end_with_one_or_two_grants(use_case, policy_store, owner):
    barrier = threading.Barrier(2)
    results = []

    def _run():
        barrier.wait()
        results.append(use_case.execute("nb-1", "grantee@example.com", actor=owner))

    threads = [threading.Thread(target=_run) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(r.error is None for r in results)
    assert policy_store.count() in (1, 2)
