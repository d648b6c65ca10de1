"""
Name: Cognito Identity Directory Tests

Responsibilities:
  - Validate ListUsers request shape (exact filter, Limit=1)
  - Map SDK errors to DependencyError
  - Avoid real network calls (mocked client)
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, ReadTimeoutError

from notebook_api.crosscutting.exceptions import DependencyError
from notebook_api.infrastructure.identity import CognitoIdentityDirectory

pytestmark = pytest.mark.unit

POOL = "us-east-1_Pool"


def _user(sub: str, email: str) -> dict:
    return {
        "Username": sub,
        "Attributes": [
            {"Name": "email", "Value": email},
            {"Name": "sub", "Value": sub},
        ],
    }


def test_resolve_uses_exact_email_filter():
    client = MagicMock()
    client.list_users.return_value = {"Users": [_user("sub-1", "bob@example.com")]}
    directory = CognitoIdentityDirectory(POOL, client=client)

    identity = directory.resolve("bob@example.com")

    assert identity.subject_id == "sub-1"
    assert identity.email == "bob@example.com"
    client.list_users.assert_called_once_with(
        UserPoolId=POOL, Filter='email = "bob@example.com"', Limit=1
    )


def test_resolve_returns_none_when_no_user():
    client = MagicMock()
    client.list_users.return_value = {"Users": []}

    assert CognitoIdentityDirectory(POOL, client=client).resolve("x@y.io") is None


def test_resolve_escapes_quotes_in_filter():
    client = MagicMock()
    client.list_users.return_value = {"Users": []}

    CognitoIdentityDirectory(POOL, client=client).resolve('a"b@example.com')

    kwargs = client.list_users.call_args.kwargs
    assert kwargs["Filter"] == 'email = "a\\"b@example.com"'


def test_lookup_by_identifier_filters_on_sub():
    client = MagicMock()
    client.list_users.return_value = {"Users": [_user("sub-9", "carol@example.com")]}
    directory = CognitoIdentityDirectory(POOL, client=client)

    identity = directory.lookup_by_identifier("sub-9")

    assert identity.email == "carol@example.com"
    client.list_users.assert_called_once_with(
        UserPoolId=POOL, Filter='sub = "sub-9"', Limit=1
    )


def test_user_without_sub_attribute_is_ignored():
    client = MagicMock()
    client.list_users.return_value = {
        "Users": [{"Attributes": [{"Name": "email", "Value": "a@b.io"}]}]
    }

    assert CognitoIdentityDirectory(POOL, client=client).resolve("a@b.io") is None


def test_user_without_email_attribute_is_ignored():
    client = MagicMock()
    client.list_users.return_value = {
        "Users": [{"Attributes": [{"Name": "sub", "Value": "sub-9"}]}]
    }

    directory = CognitoIdentityDirectory(POOL, client=client)

    assert directory.lookup_by_identifier("sub-9") is None


def test_directory_id_is_user_pool_id():
    assert CognitoIdentityDirectory(POOL, client=MagicMock()).directory_id == POOL


def test_client_error_maps_to_dependency_error():
    client = MagicMock()
    client.list_users.side_effect = ClientError(
        {"Error": {"Code": "TooManyRequestsException", "Message": "slow down"}},
        "ListUsers",
    )

    with pytest.raises(DependencyError) as exc_info:
        CognitoIdentityDirectory(POOL, client=client).resolve("a@b.io")

    err = exc_info.value
    assert err.service == "cognito-idp"
    assert err.operation == "resolve"
    assert "TooManyRequestsException" in err.message
    assert isinstance(err.original_error, ClientError)


def test_timeout_maps_to_dependency_error():
    client = MagicMock()
    client.list_users.side_effect = ReadTimeoutError(endpoint_url="https://cognito")

    with pytest.raises(DependencyError) as exc_info:
        CognitoIdentityDirectory(POOL, client=client).lookup_by_identifier("s")

    assert exc_info.value.operation == "lookup_by_identifier"


def test_requires_user_pool_id():
    with pytest.raises(ValueError):
        CognitoIdentityDirectory("  ", client=MagicMock())
