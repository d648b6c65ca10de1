"""
===============================================================================
CRC CARD — infrastructure/repositories/dynamodb/notebook.py
===============================================================================

Clase:
  DynamoNotebookRepository (Adapter)

Responsabilidades:
  - Implementar NotebookRepository sobre una tabla DynamoDB (pk = id).
  - Mapear items <-> Notebook.
  - find_by_owner: scan con FilterExpression (owner == x OR public == true),
    paginando por LastEvaluatedKey.
  - Encapsular boto3: todo error del SDK -> DependencyError.

Colaboradores:
  - domain.repositories.NotebookRepository (port)
  - infrastructure.aws.errors.map_aws_error
  - boto3 dynamodb Table resource (inyectable para tests)

Notas:
  - El scan es aceptable para el volumen de la app; un GSI por owner es el
    paso siguiente si crece.
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from boto3.dynamodb.conditions import Attr

from ....domain.entities import Notebook, NotebookVisibility
from ....domain.repositories import NotebookRepository
from ...aws.errors import map_aws_error

_SERVICE = "dynamodb"


def _to_item(notebook: Notebook) -> Dict[str, Any]:
    item: Dict[str, Any] = {
        "id": notebook.id,
        "owner": notebook.owner_id,
        "name": notebook.name,
        "content": notebook.content,
        "public": notebook.is_public,
    }
    if notebook.created_at is not None:
        item["created_at"] = notebook.created_at.isoformat()
    if notebook.updated_at is not None:
        item["updated_at"] = notebook.updated_at.isoformat()
    return item


def _parse_dt(value: Any) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(str(value))


def _from_item(item: Dict[str, Any]) -> Notebook:
    return Notebook(
        id=str(item["id"]),
        owner_id=str(item.get("owner") or ""),
        name=str(item.get("name") or ""),
        content=str(item.get("content") or ""),
        visibility=(
            NotebookVisibility.PUBLIC
            if item.get("public")
            else NotebookVisibility.PRIVATE
        ),
        created_at=_parse_dt(item.get("created_at")),
        updated_at=_parse_dt(item.get("updated_at")),
    )


class DynamoNotebookRepository(NotebookRepository):
    def __init__(self, *, table) -> None:
        self._table = table

    def find_by_id(self, notebook_id: str) -> Optional[Notebook]:
        try:
            response = self._table.get_item(Key={"id": notebook_id})
        except Exception as exc:
            raise map_aws_error(exc, service=_SERVICE, operation="find_by_id") from exc

        item = response.get("Item")
        return _from_item(item) if item else None

    def find_by_owner(self, owner_id: str) -> List[Notebook]:
        scan_kwargs: Dict[str, Any] = {
            "FilterExpression": Attr("owner").eq(owner_id) | Attr("public").eq(True)
        }
        notebooks: List[Notebook] = []
        try:
            while True:
                response = self._table.scan(**scan_kwargs)
                notebooks.extend(_from_item(i) for i in response.get("Items") or [])
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        except Exception as exc:
            raise map_aws_error(exc, service=_SERVICE, operation="find_by_owner") from exc
        return notebooks

    def save(self, notebook: Notebook) -> Notebook:
        try:
            self._table.put_item(Item=_to_item(notebook))
        except Exception as exc:
            raise map_aws_error(exc, service=_SERVICE, operation="save") from exc
        return notebook

    def delete(self, notebook_id: str) -> bool:
        try:
            response = self._table.delete_item(
                Key={"id": notebook_id}, ReturnValues="ALL_OLD"
            )
        except Exception as exc:
            raise map_aws_error(exc, service=_SERVICE, operation="delete") from exc
        return bool(response.get("Attributes"))
