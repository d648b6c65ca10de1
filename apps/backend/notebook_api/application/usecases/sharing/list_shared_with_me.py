"""
===============================================================================
USE CASE: List Notebooks Shared With Me
===============================================================================

Name:
    List Shared With Me Use Case

Business Goal:
    Listar los notebooks que otros usuarios compartieron con el caller.

Flow:
    1) find_grants(principal=actor.principal)
    2) por cada resource_id distinto (en orden de grant) -> find_by_id
    3) se omiten notebooks que ya no existen (grant huérfano)

Collaborators:
    - PolicyStore.find_grants
    - NotebookRepository.find_by_id
===============================================================================
"""

from __future__ import annotations

import logging

from ....domain.entities import Caller, Notebook
from ....domain.repositories import NotebookRepository
from ....domain.services import PolicyStore
from .sharing_results import SharedWithMeResult

logger = logging.getLogger(__name__)


class ListSharedWithMeUseCase:
    def __init__(
        self, notebook_repository: NotebookRepository, policy_store: PolicyStore
    ) -> None:
        self._notebooks = notebook_repository
        self._policies = policy_store

    def execute(self, *, actor: Caller) -> SharedWithMeResult:
        grants = self._policies.find_grants(principal=actor.principal)

        notebooks: list[Notebook] = []
        seen: set[str] = set()
        for grant in grants:
            if grant.resource_id in seen:
                continue
            seen.add(grant.resource_id)

            notebook = self._notebooks.find_by_id(grant.resource_id)
            if notebook is None:
                logger.debug("grant points to missing notebook %s", grant.resource_id)
                continue
            notebooks.append(notebook)

        return SharedWithMeResult(notebooks=notebooks)
