"""Tests for the Pipedrive facade."""

import pytest
import httpx
from unittest.mock import Mock

from pipedrive_client import Pipedrive, Credentials, RemoteError
from pipedrive_client.core.session import Session
from pipedrive_client.library import (
    Activities,
    DealFields,
    Deals,
    Filters,
    Notes,
    Organizations,
    Persons,
    Products,
    SearchResults,
    Stages,
)

ACCESSORS = [
    ("persons", Persons),
    ("deals", Deals),
    ("activities", Activities),
    ("notes", Notes),
    ("deal_fields", DealFields),
    ("organizations", Organizations),
    ("products", Products),
    ("search_results", SearchResults),
    ("filters", Filters),
    ("stages", Stages),
]


@pytest.fixture
def mock_http_client():
    return Mock(spec=httpx.Client)


@pytest.fixture
def pipedrive(mock_http_client):
    return Pipedrive("test_token", http_client=mock_http_client)


def test_defaults_build_base_url(pipedrive):
    assert pipedrive.base_url == "https://api.pipedrive.com/v1"
    assert pipedrive.credentials == Credentials(api_key="test_token")


def test_overrides_build_base_url(mock_http_client):
    pipedrive = Pipedrive("k", protocol="http", host="pipedrive.local", version="v2", http_client=mock_http_client)

    assert pipedrive.base_url == "http://pipedrive.local/v2"
    assert pipedrive.session().build_url("deals") == "http://pipedrive.local/v2/deals"


@pytest.mark.parametrize("accessor,cls", ACCESSORS)
def test_accessor_returns_same_instance(pipedrive, accessor, cls):
    first = getattr(pipedrive, accessor)()
    second = getattr(pipedrive, accessor)()

    assert isinstance(first, cls)
    assert first is second


@pytest.mark.parametrize("accessor,cls", ACCESSORS)
def test_resource_clients_share_session(pipedrive, accessor, cls):
    resource = getattr(pipedrive, accessor)()

    assert resource._requests.session is pipedrive.session()


def test_session_accessor_is_stable(pipedrive):
    assert isinstance(pipedrive.session(), Session)
    assert pipedrive.session() is pipedrive.session()


def test_from_credentials(mock_http_client):
    creds = Credentials(api_key="k", host="eu.pipedrive.com")

    pipedrive = Pipedrive.from_credentials(creds, http_client=mock_http_client)

    assert pipedrive.credentials == creds
    assert pipedrive.session().http_client is mock_http_client


def test_close_closes_owned_client():
    pipedrive = Pipedrive("k")
    pipedrive.session().http_client = Mock()

    pipedrive.close()

    pipedrive.session().http_client.close.assert_called_once()


def test_context_manager(mock_http_client):
    with Pipedrive("k", http_client=mock_http_client) as pipedrive:
        assert pipedrive.organizations() is not None

    mock_http_client.close.assert_not_called()


def test_end_to_end_add_organization(pipedrive, mock_http_client):
    response = Mock()
    response.status_code = 201
    response.content = b'{"success": true}'
    response.json.return_value = {"success": True, "data": {"id": 10, "name": "Acme"}}
    mock_http_client.request.return_value = response

    result = pipedrive.organizations().add({"name": "Acme"})

    assert result == {"id": 10, "name": "Acme"}
    mock_http_client.request.assert_called_once_with(
        method="POST",
        url="https://api.pipedrive.com/v1/organizations",
        headers={"x-api-token": "test_token", "Accept": "application/json"},
        params={},
        json={"name": "Acme"},
    )


def test_end_to_end_remote_error(pipedrive, mock_http_client):
    response = Mock()
    response.status_code = 404
    response.content = b'{"success": false}'
    response.json.return_value = {"success": False, "error": "Deal not found"}
    mock_http_client.request.return_value = response

    with pytest.raises(RemoteError) as exc_info:
        pipedrive.deals().get_by_id(404)

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Deal not found"
