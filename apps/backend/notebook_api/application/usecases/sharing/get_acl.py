"""
===============================================================================
USE CASE: Get Notebook ACL (grants -> emails)
===============================================================================

Name:
    Get ACL Use Case

Business Goal:
    Mostrar con quién está compartido un notebook, como lista de emails.

Why (Context / Intención):
    - El policy store solo guarda PrincipalRef; el email sale de un lookup
      inverso en el directorio, uno por grant.
    - Un lookup que falla no debe tirar la vista entera: esa entrada se omite
      y se deja registro (log + métrica).
    - El policy store es eventualmente consistente. Justo después de
      compartir, el caller puede pasar el email recién compartido y se
      antepone como entrada provisoria si todavía no aparece. Nada se persiste.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    GetAclUseCase

Responsibilities:
    - Validar existencia del notebook y ownership del actor.
    - Listar grants por recurso y resolver cada principal a email
      (solo principals del mismo directorio; el resto se omite).
    - Deduplicar emails preservando el orden.
    - Anteponer la entrada provisoria cuando corresponde.

Collaborators:
    - NotebookRepository.find_by_id
    - PolicyStore.find_grants(resource_id=...)
    - IdentityDirectory.lookup_by_identifier
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.exceptions import DependencyError
from ....crosscutting.logger import logger
from ....crosscutting.metrics import record_acl_lookup_dropped
from ....domain.entities import AclEntry, AclView, Caller
from ....domain.notebook_policy import can_manage_sharing
from ....domain.repositories import NotebookRepository
from ....domain.services import IdentityDirectory, PolicyStore
from ....domain.value_objects import PrincipalRef, normalize_email
from .sharing_results import AclResult, SharingError, SharingErrorCode


class GetAclUseCase:
    def __init__(
        self,
        notebook_repository: NotebookRepository,
        identity_directory: IdentityDirectory,
        policy_store: PolicyStore,
    ) -> None:
        self._notebooks = notebook_repository
        self._directory = identity_directory
        self._policies = policy_store

    def execute(
        self,
        resource_id: str,
        *,
        actor: Caller,
        provisional_email: str | None = None,
    ) -> AclResult:
        resource_id = (resource_id or "").strip()
        if not resource_id:
            return AclResult(
                error=SharingError(
                    code=SharingErrorCode.INVALID_REQUEST,
                    message="Missing required field: resourceId.",
                )
            )

        notebook = self._notebooks.find_by_id(resource_id)
        if notebook is None:
            return AclResult(
                error=SharingError(
                    code=SharingErrorCode.NOT_FOUND, message="Notebook not found."
                )
            )
        if not can_manage_sharing(notebook, actor.principal):
            return AclResult(
                error=SharingError(
                    code=SharingErrorCode.FORBIDDEN, message="Access denied."
                )
            )

        # Una falla acá sí se propaga: sin grants no hay vista posible.
        grants = self._policies.find_grants(resource_id=resource_id)

        entries: list[AclEntry] = []
        seen: set[str] = set()
        dropped = 0
        for grant in grants:
            email = self._lookup_email(grant.principal, resource_id)
            if email is None:
                dropped += 1
                continue
            if email in seen:
                continue
            seen.add(email)
            entries.append(AclEntry(email=email))

        if dropped:
            record_acl_lookup_dropped(dropped)

        pending = normalize_email(provisional_email)
        if pending and pending not in seen:
            entries.insert(0, AclEntry(email=pending, provisional=True))

        return AclResult(acl=AclView(resource_id=resource_id, entries=entries))

    def _lookup_email(self, principal: PrincipalRef, resource_id: str) -> str | None:
        subject_id = principal.subject_id
        # El sub solo es único dentro de su user pool.
        if principal.directory_id != self._directory.directory_id:
            logger.warning(
                "acl principal from another directory, entry dropped",
                extra={"resource_id": resource_id, "principal": principal.format()},
            )
            return None

        try:
            identity = self._directory.lookup_by_identifier(subject_id)
        except DependencyError as exc:
            logger.warning(
                "acl lookup failed, entry dropped",
                extra={
                    "resource_id": resource_id,
                    "subject_id": subject_id,
                    "error_id": exc.error_id,
                },
            )
            return None

        if identity is None:
            logger.warning(
                "acl principal not in directory, entry dropped",
                extra={"resource_id": resource_id, "subject_id": subject_id},
            )
            return None
        return identity.email
