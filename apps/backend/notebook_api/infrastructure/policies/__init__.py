"""Adapters de infraestructura: policy store + motor de autorización."""

from .in_memory_policy_store import InMemoryPolicyStore
from .verified_permissions import (
    ACTION_ENTITY_TYPE,
    NOTEBOOK_ENTITY_TYPE,
    USER_ENTITY_TYPE,
    VerifiedPermissionsPolicyStore,
    build_grant_statement,
)

__all__ = [
    "InMemoryPolicyStore",
    "VerifiedPermissionsPolicyStore",
    "build_grant_statement",
    "USER_ENTITY_TYPE",
    "NOTEBOOK_ENTITY_TYPE",
    "ACTION_ENTITY_TYPE",
]
