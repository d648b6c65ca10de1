"""
===============================================================================
USE CASE: Share Notebook (email -> identity -> policy grant)
===============================================================================

Name:
    Share Notebook Use Case

Business Goal:
    Compartir un notebook con otro usuario a partir de su email, dejando en el
    policy store exactamente un permiso de lectura para ese usuario.

Why (Context / Intención):
    - El policy store no sabe de emails: hay que resolver la identidad en el
      directorio y construir el PrincipalRef compuesto.
    - El policy store no tiene "create if absent": se consulta primero y se
      crea solo si no hay grant previo (check-then-create).
    - La única llamada que muta es la última, así que reintentar la operación
      completa es seguro.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    ShareNotebookUseCase

Responsibilities:
    - Validar inputs sin side effects (campos vacíos, email no plausible).
    - Validar que el notebook existe y que el actor es owner.
    - Resolver el email del grantee en el directorio.
    - Consultar grants existentes y crear uno solo si no hay.
    - Loguear cada transición de estado y contar el outcome final.

Collaborators:
    - NotebookRepository.find_by_id
    - IdentityDirectory.resolve / directory_id
    - PolicyStore.find_grants / create_grant
    - notebook_policy.can_manage_sharing
    - crosscutting.metrics.record_share_outcome

-------------------------------------------------------------------------------
STATES
-------------------------------------------------------------------------------
START -> IDENTITY_RESOLVED -> EXISTING_GRANT_CHECKED
      -> GRANT_CREATED | ALREADY_SHARED -> DONE
Cualquier DependencyError -> FAILED (se propaga sin cambios).

Concurrencia:
    Dos shares simultáneos del mismo par pueden crear dos grants. Es inocuo:
    ambos callers ven éxito y el ACL deduplica por email.
===============================================================================
"""

from __future__ import annotations

from enum import Enum

from ....crosscutting.exceptions import DependencyError
from ....crosscutting.logger import logger
from ....crosscutting.metrics import record_share_outcome
from ....domain.entities import Caller
from ....domain.notebook_policy import can_manage_sharing
from ....domain.repositories import NotebookRepository
from ....domain.services import IdentityDirectory, PolicyStore
from ....domain.value_objects import (
    NotebookAction,
    PrincipalRef,
    is_plausible_email,
    normalize_email,
)
from .sharing_results import ShareResult, SharingError, SharingErrorCode


class ShareState(str, Enum):
    START = "START"
    IDENTITY_RESOLVED = "IDENTITY_RESOLVED"
    EXISTING_GRANT_CHECKED = "EXISTING_GRANT_CHECKED"
    GRANT_CREATED = "GRANT_CREATED"
    ALREADY_SHARED = "ALREADY_SHARED"
    DONE = "DONE"
    FAILED = "FAILED"


class ShareNotebookUseCase:
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
        resource_id: str | None,
        grantee_email: str | None,
        *,
        actor: Caller,
    ) -> ShareResult:
        resource_id = (resource_id or "").strip()
        email = normalize_email(grantee_email)

        # ---------------------------------------------------------------------
        # 1) Validar entrada (sin tocar directorio ni policy store).
        # ---------------------------------------------------------------------
        if not resource_id or not email:
            return self._invalid("Missing required fields: resourceId and email.")
        if not is_plausible_email(email):
            return self._invalid("Invalid email address.")

        # ---------------------------------------------------------------------
        # 2) Precondición: notebook existente y actor owner.
        # ---------------------------------------------------------------------
        notebook = self._notebooks.find_by_id(resource_id)
        if notebook is None:
            return self._finish_with_error(
                SharingErrorCode.NOT_FOUND, "Notebook not found.", "not_found"
            )
        if not can_manage_sharing(notebook, actor.principal):
            return self._finish_with_error(
                SharingErrorCode.FORBIDDEN, "Access denied.", "forbidden"
            )

        self._transition(ShareState.START, resource_id)
        try:
            return self._share(resource_id, email)
        except DependencyError as exc:
            self._transition(
                ShareState.FAILED,
                resource_id,
                service=exc.service,
                operation=exc.operation,
                error_id=exc.error_id,
            )
            record_share_outcome("failed")
            raise

    def _share(self, resource_id: str, email: str) -> ShareResult:
        # ---------------------------------------------------------------------
        # 3) Resolver grantee.
        # ---------------------------------------------------------------------
        identity = self._directory.resolve(email)
        if identity is None:
            return self._invalid("User not found.")

        principal = PrincipalRef(
            directory_id=self._directory.directory_id,
            subject_id=identity.subject_id,
        )
        self._transition(ShareState.IDENTITY_RESOLVED, resource_id)

        # ---------------------------------------------------------------------
        # 4) ¿Ya existe un grant para (principal, resource)?
        # ---------------------------------------------------------------------
        existing = self._policies.find_grants(
            principal=principal, resource_id=resource_id
        )
        self._transition(
            ShareState.EXISTING_GRANT_CHECKED, resource_id, existing=len(existing)
        )
        if existing:
            self._transition(ShareState.ALREADY_SHARED, resource_id)
            self._transition(ShareState.DONE, resource_id)
            record_share_outcome("already_shared")
            return ShareResult(already_shared=True)

        # ---------------------------------------------------------------------
        # 5) Única mutación: crear el grant de lectura.
        # ---------------------------------------------------------------------
        grant = self._policies.create_grant(
            principal, resource_id, NotebookAction.READ
        )
        self._transition(ShareState.GRANT_CREATED, resource_id, grant_id=grant.grant_id)
        self._transition(ShareState.DONE, resource_id)
        record_share_outcome("grant_created")
        return ShareResult(already_shared=False)

    # =========================================================================
    # Helpers privados
    # =========================================================================

    @staticmethod
    def _transition(state: ShareState, resource_id: str, **extra) -> None:
        level = logger.warning if state == ShareState.FAILED else logger.info
        level(
            "share state",
            extra={"share_state": state.value, "resource_id": resource_id, **extra},
        )

    @classmethod
    def _invalid(cls, message: str) -> ShareResult:
        return cls._finish_with_error(
            SharingErrorCode.INVALID_REQUEST, message, "invalid_request"
        )

    @staticmethod
    def _finish_with_error(
        code: SharingErrorCode, message: str, outcome: str
    ) -> ShareResult:
        record_share_outcome(outcome)
        return ShareResult(error=SharingError(code=code, message=message))
