"""
Name: DynamoDB Notebook Repository Tests

Responsibilities:
  - Validate adapter uses the boto3 Table resource correctly
  - Avoid real network calls (mocked table)
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from notebook_api.crosscutting.exceptions import DependencyError
from notebook_api.domain.entities import Notebook, NotebookVisibility
from notebook_api.infrastructure.aws import build_client_config
from notebook_api.infrastructure.repositories import DynamoNotebookRepository

pytestmark = pytest.mark.unit


def _item(**overrides) -> dict:
    item = {
        "id": "nb-1",
        "owner": "sub-1",
        "name": "Notes",
        "content": "hi",
        "public": False,
        "created_at": "2024-01-02T03:04:05+00:00",
    }
    item.update(overrides)
    return item


def test_find_by_id_uses_get_item():
    table = MagicMock()
    table.get_item.return_value = {"Item": _item(public=True)}

    notebook = DynamoNotebookRepository(table=table).find_by_id("nb-1")

    table.get_item.assert_called_once_with(Key={"id": "nb-1"})
    assert notebook.owner_id == "sub-1"
    assert notebook.visibility == NotebookVisibility.PUBLIC
    assert notebook.created_at == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert notebook.updated_at is None


def test_find_by_id_missing_item():
    table = MagicMock()
    table.get_item.return_value = {}

    assert DynamoNotebookRepository(table=table).find_by_id("nb-x") is None


def test_find_by_owner_paginates_scan():
    table = MagicMock()
    table.scan.side_effect = [
        {"Items": [_item(id="a")], "LastEvaluatedKey": {"id": "a"}},
        {"Items": [_item(id="b", public=True, owner="other")]},
    ]

    notebooks = DynamoNotebookRepository(table=table).find_by_owner("sub-1")

    assert [n.id for n in notebooks] == ["a", "b"]
    assert table.scan.call_count == 2
    assert table.scan.call_args_list[1].kwargs["ExclusiveStartKey"] == {"id": "a"}
    assert "FilterExpression" in table.scan.call_args_list[0].kwargs


def test_save_uses_put_item():
    table = MagicMock()
    created = datetime(2024, 5, 6, tzinfo=timezone.utc)
    notebook = Notebook(
        id="nb-1",
        owner_id="sub-1",
        name="Notes",
        content="c",
        visibility=NotebookVisibility.PUBLIC,
        created_at=created,
    )

    DynamoNotebookRepository(table=table).save(notebook)

    table.put_item.assert_called_once_with(
        Item={
            "id": "nb-1",
            "owner": "sub-1",
            "name": "Notes",
            "content": "c",
            "public": True,
            "created_at": created.isoformat(),
        }
    )


def test_delete_reports_whether_item_existed():
    table = MagicMock()
    table.delete_item.side_effect = [{"Attributes": _item()}, {}]
    repo = DynamoNotebookRepository(table=table)

    assert repo.delete("nb-1") is True
    assert repo.delete("nb-1") is False
    table.delete_item.assert_called_with(Key={"id": "nb-1"}, ReturnValues="ALL_OLD")


def test_client_error_maps_to_dependency_error():
    table = MagicMock()
    table.get_item.side_effect = ClientError(
        {"Error": {"Code": "ProvisionedThroughputExceededException", "Message": "x"}},
        "GetItem",
    )

    with pytest.raises(DependencyError) as exc_info:
        DynamoNotebookRepository(table=table).find_by_id("nb-1")

    assert exc_info.value.service == "dynamodb"


def test_client_config_disables_sdk_retries():
    settings = MagicMock(
        aws_region="eu-west-1",
        aws_connect_timeout_seconds=1.5,
        aws_read_timeout_seconds=2.5,
    )

    config = build_client_config(settings)

    assert config.region_name == "eu-west-1"
    assert config.connect_timeout == 1.5
    assert config.read_timeout == 2.5
    assert config.retries["total_max_attempts"] == 1
