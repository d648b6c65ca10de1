"""
===============================================================================
CRC CARD — infrastructure/policies/verified_permissions.py
===============================================================================

Clase:
  VerifiedPermissionsPolicyStore (Adapter)

Responsabilidades:
  - Implementar PolicyStore y AuthorizationEngine contra Amazon Verified
    Permissions (policy store Cedar).
  - find_grants: ListPolicies filtrado por principal y/o recurso, siguiendo
    nextToken hasta agotar o llegar al tope configurado.
  - create_grant: CreatePolicy con una policy estática de permit.
  - is_authorized: IsAuthorized con la entidad notebook (owner + public).
  - Encapsular boto3: todo error del SDK -> DependencyError.

Colaboradores:
  - domain.services.PolicyStore / AuthorizationEngine (ports)
  - domain.value_objects.PrincipalRef (único formato de principal)
  - infrastructure.aws.errors.map_aws_error
  - boto3 verifiedpermissions client (inyectable para tests)

Naming Cedar:
  - NotebooksApp::User      id = PrincipalRef.format()
  - NotebooksApp::Notebook  id = notebook id
  - NotebooksApp::Action    id = NotebookAction.value
===============================================================================
"""

from __future__ import annotations

from typing import Any, Final

from ...crosscutting.logger import logger
from ...domain.entities import Grant, Notebook
from ...domain.services import AuthorizationEngine, PolicyStore
from ...domain.value_objects import NotebookAction, PrincipalRef
from ..aws.errors import map_aws_error

_SERVICE: Final[str] = "verifiedpermissions"

USER_ENTITY_TYPE: Final[str] = "NotebooksApp::User"
NOTEBOOK_ENTITY_TYPE: Final[str] = "NotebooksApp::Notebook"
ACTION_ENTITY_TYPE: Final[str] = "NotebooksApp::Action"


def build_grant_statement(
    principal: PrincipalRef, resource_id: str, action: NotebookAction
) -> str:
    return (
        f'permit(principal == {USER_ENTITY_TYPE}::"{principal.format()}", '
        f'action == {ACTION_ENTITY_TYPE}::"{action.value}", '
        f'resource == {NOTEBOOK_ENTITY_TYPE}::"{resource_id}");'
    )


def _user_identifier(principal: PrincipalRef) -> dict[str, str]:
    return {"entityType": USER_ENTITY_TYPE, "entityId": principal.format()}


def _notebook_identifier(resource_id: str) -> dict[str, str]:
    return {"entityType": NOTEBOOK_ENTITY_TYPE, "entityId": resource_id}


class VerifiedPermissionsPolicyStore(PolicyStore, AuthorizationEngine):
    def __init__(
        self,
        policy_store_id: str,
        *,
        client,
        directory_id: str,
        page_size: int = 20,
        max_results: int = 200,
    ) -> None:
        if not (policy_store_id or "").strip():
            raise ValueError("policy_store_id is required")
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        if max_results < 1:
            raise ValueError("max_results must be >= 1")

        self._policy_store_id = policy_store_id.strip()
        self._client = client
        self._directory_id = directory_id
        self._page_size = page_size
        self._max_results = max_results

    # =========================================================================
    # PolicyStore
    # =========================================================================

    def find_grants(
        self,
        *,
        principal: PrincipalRef | None = None,
        resource_id: str | None = None,
    ) -> list[Grant]:
        if principal is None and not resource_id:
            raise ValueError("find_grants requires principal and/or resource_id")

        policy_filter: dict[str, Any] = {}
        if principal is not None:
            policy_filter["principal"] = {"identifier": _user_identifier(principal)}
        if resource_id:
            policy_filter["resource"] = {"identifier": _notebook_identifier(resource_id)}

        grants: list[Grant] = []
        next_token: str | None = None
        while True:
            request: dict[str, Any] = {
                "policyStoreId": self._policy_store_id,
                "filter": policy_filter,
                "maxResults": self._page_size,
            }
            if next_token:
                request["nextToken"] = next_token

            try:
                response = self._client.list_policies(**request)
            except Exception as exc:
                raise map_aws_error(
                    exc, service=_SERVICE, operation="find_grants"
                ) from exc

            for item in response.get("policies") or []:
                grant = self._to_grant(item)
                if grant is not None:
                    grants.append(grant)

            next_token = response.get("nextToken")
            if not next_token or len(grants) >= self._max_results:
                break

        if next_token:
            logger.warning(
                "grant listing truncated",
                extra={"max_results": self._max_results, "resource_id": resource_id},
            )
        return grants[: self._max_results]

    def create_grant(
        self,
        principal: PrincipalRef,
        resource_id: str,
        action: NotebookAction = NotebookAction.READ,
    ) -> Grant:
        statement = build_grant_statement(principal, resource_id, action)
        try:
            response = self._client.create_policy(
                policyStoreId=self._policy_store_id,
                definition={
                    "static": {
                        "description": f"{action.value} on {resource_id}",
                        "statement": statement,
                    }
                },
            )
        except Exception as exc:
            raise map_aws_error(exc, service=_SERVICE, operation="create_grant") from exc

        return Grant(
            principal=principal,
            resource_id=resource_id,
            action=action,
            statement=statement,
            grant_id=str(response.get("policyId") or ""),
        )

    # =========================================================================
    # AuthorizationEngine
    # =========================================================================

    def is_authorized(
        self,
        principal: PrincipalRef,
        action: NotebookAction,
        notebook: Notebook,
    ) -> bool:
        owner = PrincipalRef(directory_id=self._directory_id, subject_id=notebook.owner_id)
        try:
            response = self._client.is_authorized(
                policyStoreId=self._policy_store_id,
                principal=_user_identifier(principal),
                action={"actionType": ACTION_ENTITY_TYPE, "actionId": action.value},
                resource=_notebook_identifier(notebook.id),
                entities={
                    "entityList": [
                        {
                            "identifier": _notebook_identifier(notebook.id),
                            "attributes": {
                                "owner": {"entityIdentifier": _user_identifier(owner)},
                                "public": {"boolean": notebook.is_public},
                            },
                        }
                    ]
                },
            )
        except Exception as exc:
            raise map_aws_error(exc, service=_SERVICE, operation="is_authorized") from exc

        return response.get("decision") == "ALLOW"

    # =========================================================================
    # Helpers privados
    # =========================================================================

    @staticmethod
    def _to_grant(item: dict[str, Any]) -> Grant | None:
        principal_id = ((item.get("principal") or {}).get("entityId")) or ""
        resource_id = ((item.get("resource") or {}).get("entityId")) or ""
        if not principal_id or not resource_id:
            # Policies sin principal/recurso concretos (templates, wildcards).
            return None

        try:
            principal = PrincipalRef.parse(principal_id)
        except ValueError:
            logger.warning(
                "skipping policy with non-compound principal",
                extra={"policy_id": item.get("policyId")},
            )
            return None

        action = NotebookAction.READ
        for entry in item.get("actions") or []:
            try:
                action = NotebookAction(entry.get("actionId"))
                break
            except ValueError:
                continue

        static = (item.get("definition") or {}).get("static") or {}
        return Grant(
            principal=principal,
            resource_id=resource_id,
            action=action,
            statement=static.get("statement", ""),
            grant_id=str(item.get("policyId") or ""),
        )
