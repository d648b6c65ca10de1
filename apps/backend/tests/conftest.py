"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure test environment (APP_ENV=test, no .env file)
  - Provide in-memory adapters and caller factories
  - Reset metric-free singletons between tests

Collaborators:
  - pytest: Test framework
  - notebook_api.infrastructure: in-memory directory / policy store / repo
  - notebook_api.domain: entities and value objects

Notes:
  - Fixtures are auto-discovered by pytest
  - Use @pytest.fixture(scope="function") for per-test isolation
"""

import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")

from notebook_api.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from notebook_api.domain.entities import (  # noqa: E402
    Caller,
    Identity,
    Notebook,
    NotebookVisibility,
)
from notebook_api.domain.value_objects import PrincipalRef  # noqa: E402
from notebook_api.infrastructure.identity import (  # noqa: E402
    InMemoryIdentityDirectory,
)
from notebook_api.infrastructure.policies import InMemoryPolicyStore  # noqa: E402
from notebook_api.infrastructure.repositories import (  # noqa: E402
    InMemoryNotebookRepository,
)

POOL_ID = "us-east-1_TestPool"

OWNER_SUB = "owner-sub-0001"
GRANTEE_SUB = "grantee-sub-0002"
STRANGER_SUB = "stranger-sub-0003"


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


# ============================================================================
# Factories
# ============================================================================


def make_caller(subject_id: str, email: str | None = None) -> Caller:
    """R: Build an authenticated caller inside the test pool."""
    return Caller(
        subject_id=subject_id,
        email=email,
        principal=PrincipalRef(directory_id=POOL_ID, subject_id=subject_id),
    )


def make_notebook(
    notebook_id: str = "nb-1",
    *,
    owner_id: str = OWNER_SUB,
    public: bool = False,
    name: str = "Notes",
) -> Notebook:
    return Notebook(
        id=notebook_id,
        owner_id=owner_id,
        name=name,
        content="hello",
        visibility=NotebookVisibility.PUBLIC if public else NotebookVisibility.PRIVATE,
    )


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def owner() -> Caller:
    return make_caller(OWNER_SUB, "owner@example.com")


@pytest.fixture
def grantee() -> Caller:
    return make_caller(GRANTEE_SUB, "grantee@example.com")


@pytest.fixture
def stranger() -> Caller:
    return make_caller(STRANGER_SUB, "stranger@example.com")


@pytest.fixture
def directory() -> InMemoryIdentityDirectory:
    """R: Directory with owner, grantee and stranger registered."""
    return InMemoryIdentityDirectory(
        directory_id=POOL_ID,
        users=[
            Identity(subject_id=OWNER_SUB, email="owner@example.com"),
            Identity(subject_id=GRANTEE_SUB, email="grantee@example.com"),
            Identity(subject_id=STRANGER_SUB, email="stranger@example.com"),
        ],
    )


@pytest.fixture
def policy_store() -> InMemoryPolicyStore:
    return InMemoryPolicyStore()


@pytest.fixture
def notebook_repository() -> InMemoryNotebookRepository:
    """R: Repository seeded with one private notebook owned by OWNER_SUB."""
    return InMemoryNotebookRepository([make_notebook("nb-1")])
