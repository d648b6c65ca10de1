"""
============================================================
TARJETA CRC — infrastructure/policies/in_memory_policy_store.py
============================================================
Class: InMemoryPolicyStore

Responsibilities:
  - Policy store en memoria (tests / local dev) con el mismo contrato que
    Verified Permissions: find_grants, create_grant, is_authorized.
  - is_authorized aplica domain.notebook_policy (mismas reglas que el
    policy set Cedar).

Constraints / Notes:
  - Thread-safe: Lock protege la lista de grants.
  - create_grant NO deduplica (igual que CreatePolicy): la unicidad es
    responsabilidad del caller.
  - Orden determinístico: insertion order.
============================================================
"""

from __future__ import annotations

from threading import Lock
from typing import List
from uuid import uuid4

from ...domain.entities import Grant, Notebook
from ...domain.notebook_policy import can_access_notebook
from ...domain.services import AuthorizationEngine, PolicyStore
from ...domain.value_objects import NotebookAction, PrincipalRef
from .verified_permissions import build_grant_statement


class InMemoryPolicyStore(PolicyStore, AuthorizationEngine):
    def __init__(self) -> None:
        self._lock = Lock()
        self._grants: List[Grant] = []

    def find_grants(
        self,
        *,
        principal: PrincipalRef | None = None,
        resource_id: str | None = None,
    ) -> list[Grant]:
        if principal is None and not resource_id:
            raise ValueError("find_grants requires principal and/or resource_id")

        with self._lock:
            grants = list(self._grants)

        return [
            g
            for g in grants
            if (principal is None or g.principal == principal)
            and (not resource_id or g.resource_id == resource_id)
        ]

    def create_grant(
        self,
        principal: PrincipalRef,
        resource_id: str,
        action: NotebookAction = NotebookAction.READ,
    ) -> Grant:
        grant = Grant(
            principal=principal,
            resource_id=resource_id,
            action=action,
            statement=build_grant_statement(principal, resource_id, action),
            grant_id=str(uuid4()),
        )
        with self._lock:
            self._grants.append(grant)
        return grant

    def is_authorized(
        self,
        principal: PrincipalRef,
        action: NotebookAction,
        notebook: Notebook,
    ) -> bool:
        grants = self.find_grants(principal=principal, resource_id=notebook.id)
        return can_access_notebook(notebook, principal, action, grants=grants)

    def count(self) -> int:
        with self._lock:
            return len(self._grants)
