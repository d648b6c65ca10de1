"""
===============================================================================
TARJETA CRC — notebook_api/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer dependencias (repositorio, directorio, policy store, use cases)
    siguiendo DIP.
  - Exponer factories para FastAPI (Depends).
  - Mantener singletons con caching (lru_cache) para clientes AWS.
  - Centralizar decisiones runtime basadas en Settings (backends).

Colaboradores:
  - crosscutting.config.get_settings
  - domain.repositories / domain.services (puertos)
  - infrastructure.* (implementaciones AWS e in-memory)
  - application.usecases.* (casos de uso)

Notas:
  - Este archivo NO contiene lógica de negocio.
  - En test (app_env test/testing/ci) se fuerzan los backends in-memory.
  - Con backend in-memory, el mismo InMemoryPolicyStore es policy store y
    motor de autorización (los grants creados se respetan al leer).
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases import (
    CreateNotebookUseCase,
    DeleteNotebookUseCase,
    GetAclUseCase,
    GetNotebookUseCase,
    ListNotebooksUseCase,
    ListSharedWithMeUseCase,
    ShareNotebookUseCase,
    UpdateNotebookUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import NotebookRepository
from .domain.services import AuthorizationEngine, IdentityDirectory, PolicyStore
from .identity.cognito_auth import CognitoTokenVerifier
from .infrastructure.aws import build_client, build_dynamodb_table
from .infrastructure.identity import CognitoIdentityDirectory, InMemoryIdentityDirectory
from .infrastructure.policies import InMemoryPolicyStore, VerifiedPermissionsPolicyStore
from .infrastructure.repositories import (
    DynamoNotebookRepository,
    InMemoryNotebookRepository,
)

# =============================================================================
# Helpers internos
# =============================================================================


def _is_test_env() -> bool:
    """app_env ∈ {"test", "testing", "ci"} => se fuerzan in-memory adapters."""
    return get_settings().is_test()


def _use_memory(backend: str) -> bool:
    return _is_test_env() or backend == "memory"


# =============================================================================
# Adapters (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_notebook_repository() -> NotebookRepository:
    """Repositorio de notebooks (in-memory por defecto; DynamoDB opcional)."""
    settings = get_settings()
    if _use_memory(settings.storage_backend):
        return InMemoryNotebookRepository()
    return DynamoNotebookRepository(table=build_dynamodb_table(settings))


@lru_cache(maxsize=1)
def get_identity_directory() -> IdentityDirectory:
    """Directorio de identidades (Cognito en runtime; in-memory en test)."""
    settings = get_settings()
    if _use_memory(settings.identity_backend):
        return InMemoryIdentityDirectory(directory_id=settings.user_pool_id or "local-pool")
    return CognitoIdentityDirectory(
        settings.user_pool_id, client=build_client("cognito-idp", settings)
    )


@lru_cache(maxsize=1)
def _get_policy_adapter() -> VerifiedPermissionsPolicyStore | InMemoryPolicyStore:
    settings = get_settings()
    if _use_memory(settings.policy_backend):
        return InMemoryPolicyStore()
    return VerifiedPermissionsPolicyStore(
        settings.policy_store_id,
        client=build_client("verifiedpermissions", settings),
        directory_id=get_identity_directory().directory_id,
        page_size=settings.policy_page_size,
        max_results=settings.policy_max_results,
    )


def get_policy_store() -> PolicyStore:
    return _get_policy_adapter()


def get_authorization_engine() -> AuthorizationEngine:
    return _get_policy_adapter()


@lru_cache(maxsize=1)
def get_token_verifier() -> CognitoTokenVerifier:
    settings = get_settings()
    return CognitoTokenVerifier(
        user_pool_id=settings.user_pool_id,
        issuer=settings.cognito_issuer,
        client_id=settings.user_pool_client_id,
    )


# =============================================================================
# Use cases (factories)
# =============================================================================


def get_share_notebook_use_case() -> ShareNotebookUseCase:
    return ShareNotebookUseCase(
        notebook_repository=get_notebook_repository(),
        identity_directory=get_identity_directory(),
        policy_store=get_policy_store(),
    )


def get_acl_use_case() -> GetAclUseCase:
    return GetAclUseCase(
        notebook_repository=get_notebook_repository(),
        identity_directory=get_identity_directory(),
        policy_store=get_policy_store(),
    )


def get_list_shared_with_me_use_case() -> ListSharedWithMeUseCase:
    return ListSharedWithMeUseCase(
        notebook_repository=get_notebook_repository(),
        policy_store=get_policy_store(),
    )


def get_list_notebooks_use_case() -> ListNotebooksUseCase:
    return ListNotebooksUseCase(repository=get_notebook_repository())


def get_create_notebook_use_case() -> CreateNotebookUseCase:
    return CreateNotebookUseCase(repository=get_notebook_repository())


def get_get_notebook_use_case() -> GetNotebookUseCase:
    return GetNotebookUseCase(
        repository=get_notebook_repository(),
        authorization_engine=get_authorization_engine(),
    )


def get_update_notebook_use_case() -> UpdateNotebookUseCase:
    return UpdateNotebookUseCase(
        repository=get_notebook_repository(),
        authorization_engine=get_authorization_engine(),
    )


def get_delete_notebook_use_case() -> DeleteNotebookUseCase:
    return DeleteNotebookUseCase(
        repository=get_notebook_repository(),
        authorization_engine=get_authorization_engine(),
    )
