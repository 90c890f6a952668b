"""Configuration and persistence for client credentials."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import Credentials, ConfigError, DEFAULT_PROTOCOL, DEFAULT_HOST, DEFAULT_VERSION

logger = logging.getLogger(__name__)

CREDENTIALS_NAME = "credentials"


def get_base_dir() -> Path:
    """
    Get the base directory for storing configuration.

    The directory is determined by:
    1. Environment variable PIPEDRIVE_CLIENT_HOME if set
    2. Otherwise, ~/.pipedrive_client

    The directory is created if it does not exist.

    Returns:
        Path to the base directory
    """
    env_home = os.environ.get("PIPEDRIVE_CLIENT_HOME")
    if env_home:
        base_dir = Path(env_home)
    else:
        base_dir = Path.home() / ".pipedrive_client"

    base_dir.mkdir(parents=True, exist_ok=True)
    return base_dir


def config_path(name: str) -> Path:
    """
    Get the path for a named configuration file.

    Args:
        name: File stem (e.g., "credentials")

    Returns:
        Path to the configuration file
    """
    return get_base_dir() / f"{name}.json"


def save_json(name: str, data: dict) -> Path:
    """
    Save a dictionary as JSON to a configuration file.

    Args:
        name: File stem
        data: Dictionary to save

    Returns:
        Path to the saved file
    """
    path = config_path(name)
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        # Owner-only: credentials.json holds the API token
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as f:
            json.dump(data, f, indent=2)
        path.chmod(0o600)
    except OSError as e:
        raise ConfigError(f"Failed to save JSON to {path}: {e}") from e
    logger.debug(f"Saved JSON to {path}")
    return path


def load_json(name: str) -> dict:
    """
    Load a dictionary from a configuration file.

    Raises:
        ConfigError: If the file does not exist or JSON is invalid
    """
    path = config_path(name)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to load JSON from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {path}")
    logger.debug(f"Loaded JSON from {path}")
    return data


def save_credentials(credentials: Credentials) -> Path:
    """Save Credentials to disk."""
    return save_json(CREDENTIALS_NAME, credentials.to_dict())


def load_credentials() -> Credentials:
    """
    Load Credentials from disk.

    Raises:
        ConfigError: If the file does not exist or is invalid
    """
    data = load_json(CREDENTIALS_NAME)
    try:
        return Credentials.from_dict(data)
    except (KeyError, TypeError) as e:
        raise ConfigError(f"Failed to parse credentials: missing {e}") from e


def credentials_from_env(environ: dict[str, Any] | None = None) -> Credentials:
    """
    Build Credentials from environment variables.

    Reads PIPEDRIVE_API_TOKEN (required) and PIPEDRIVE_PROTOCOL,
    PIPEDRIVE_HOST, PIPEDRIVE_API_VERSION (optional).

    Raises:
        ConfigError: If PIPEDRIVE_API_TOKEN is not set
    """
    env = os.environ if environ is None else environ
    api_key = env.get("PIPEDRIVE_API_TOKEN")
    if not api_key:
        raise ConfigError("PIPEDRIVE_API_TOKEN environment variable not set")

    return Credentials(
        api_key=api_key,
        protocol=env.get("PIPEDRIVE_PROTOCOL") or DEFAULT_PROTOCOL,
        host=env.get("PIPEDRIVE_HOST") or DEFAULT_HOST,
        version=env.get("PIPEDRIVE_API_VERSION") or DEFAULT_VERSION,
    )
