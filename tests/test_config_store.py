"""Tests for the configuration store."""

import json
import stat
import pytest

from pipedrive_client.core.models import Credentials, ConfigError
from pipedrive_client.core.config_store import (
    get_base_dir,
    config_path,
    save_json,
    load_json,
    save_credentials,
    load_credentials,
    credentials_from_env,
)


@pytest.fixture
def temp_home(tmp_path, monkeypatch):
    """Set up a temporary home directory for config storage."""
    monkeypatch.setenv("PIPEDRIVE_CLIENT_HOME", str(tmp_path))
    return tmp_path


def test_get_base_dir_with_env_var(temp_home):
    base_dir = get_base_dir()
    assert base_dir == temp_home
    assert base_dir.exists()


def test_get_base_dir_creates_directory(temp_home):
    temp_home.rmdir()
    assert not temp_home.exists()

    base_dir = get_base_dir()
    assert base_dir.is_dir()


def test_config_path(temp_home):
    assert config_path("credentials") == temp_home / "credentials.json"


def test_save_and_load_json(temp_home):
    data = {"key1": "value1", "key2": 42}

    path = save_json("settings", data)

    assert path == temp_home / "settings.json"
    assert load_json("settings") == data


def test_load_json_missing_file(temp_home):
    with pytest.raises(ConfigError) as exc_info:
        load_json("nope")

    assert "not found" in str(exc_info.value)


def test_load_json_invalid_json(temp_home):
    (temp_home / "broken.json").write_text("{not json")

    with pytest.raises(ConfigError) as exc_info:
        load_json("broken")

    assert "Invalid JSON" in str(exc_info.value)


def test_load_json_rejects_non_object(temp_home):
    (temp_home / "list.json").write_text("[1, 2]")

    with pytest.raises(ConfigError):
        load_json("list")


def test_save_and_load_credentials(temp_home):
    creds = Credentials(api_key="abc", host="eu.pipedrive.com")

    path = save_credentials(creds)

    assert json.loads(path.read_text())["host"] == "eu.pipedrive.com"
    assert load_credentials() == creds


def test_save_credentials_is_owner_only(temp_home):
    path = save_credentials(Credentials(api_key="secret-token"))

    assert stat.S_IMODE(path.stat().st_mode) & 0o077 == 0


def test_save_json_tightens_existing_file(temp_home):
    existing = temp_home / "credentials.json"
    existing.write_text("{}")
    existing.chmod(0o644)

    save_credentials(Credentials(api_key="secret-token"))

    assert stat.S_IMODE(existing.stat().st_mode) == 0o600


def test_load_credentials_without_api_key(temp_home):
    (temp_home / "credentials.json").write_text('{"host": "x"}')

    with pytest.raises(ConfigError) as exc_info:
        load_credentials()

    assert "api_key" in str(exc_info.value)


def test_credentials_from_env():
    creds = credentials_from_env({"PIPEDRIVE_API_TOKEN": "abc", "PIPEDRIVE_HOST": "eu.pipedrive.com"})

    assert creds == Credentials(api_key="abc", host="eu.pipedrive.com")


def test_credentials_from_env_reads_os_environ(monkeypatch):
    monkeypatch.setenv("PIPEDRIVE_API_TOKEN", "from-env")
    monkeypatch.delenv("PIPEDRIVE_HOST", raising=False)
    monkeypatch.delenv("PIPEDRIVE_PROTOCOL", raising=False)
    monkeypatch.delenv("PIPEDRIVE_API_VERSION", raising=False)

    assert credentials_from_env().base_url == "https://api.pipedrive.com/v1"
    assert credentials_from_env().api_key == "from-env"


def test_credentials_from_env_missing_token():
    with pytest.raises(ConfigError):
        credentials_from_env({})
