"""Tests for core data models and errors."""

import dataclasses

import pytest

from pipedrive_client.core.models import (
    Credentials,
    PipedriveError,
    MissingFieldError,
    RemoteError,
    TransportError,
    ConfigError,
)


def test_credentials_defaults():
    creds = Credentials(api_key="abc")

    assert creds.protocol == "https"
    assert creds.host == "api.pipedrive.com"
    assert creds.version == "v1"
    assert creds.base_url == "https://api.pipedrive.com/v1"


def test_credentials_are_immutable():
    creds = Credentials(api_key="abc")

    with pytest.raises(dataclasses.FrozenInstanceError):
        creds.api_key = "other"


def test_credentials_round_trip_dict():
    creds = Credentials(api_key="abc", protocol="http", host="localhost", version="v2")

    data = creds.to_dict()

    assert data == {"api_key": "abc", "protocol": "http", "host": "localhost", "version": "v2"}
    assert Credentials.from_dict(data) == creds


def test_credentials_from_dict_applies_defaults():
    creds = Credentials.from_dict({"api_key": "abc"})

    assert creds.base_url == "https://api.pipedrive.com/v1"


def test_credentials_from_dict_requires_api_key():
    with pytest.raises(KeyError):
        Credentials.from_dict({"host": "x"})


def test_credentials_repr_hides_api_key():
    assert "secret" not in repr(Credentials(api_key="secret"))


def test_error_hierarchy():
    for cls in (MissingFieldError, RemoteError, TransportError, ConfigError):
        assert issubclass(cls, PipedriveError)


def test_missing_field_error():
    error = MissingFieldError("name", 'You must include a "name" field')

    assert error.field == "name"
    assert error.message == 'You must include a "name" field'


def test_remote_error_to_dict():
    error = RemoteError("Not found", status_code=404, error_code="not_found")

    assert error.to_dict() == {"error": "Not found", "status": 404, "code": "not_found"}


def test_transport_error_defaults():
    error = TransportError("Request failed: boom")

    assert error.status_code is None
    assert error.to_dict() == {"error": "Request failed: boom"}
