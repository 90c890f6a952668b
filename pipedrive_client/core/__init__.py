"""Core components: credentials, errors, the HTTP session and request building."""

from .models import (
    Credentials,
    PipedriveError,
    MissingFieldError,
    RemoteError,
    TransportError,
    ConfigError,
)
from .session import Session
from .resource import ResourceRequests, require_field
from .config_store import (
    get_base_dir,
    config_path,
    save_json,
    load_json,
    save_credentials,
    load_credentials,
    credentials_from_env,
)

__all__ = [
    "Credentials",
    "PipedriveError",
    "MissingFieldError",
    "RemoteError",
    "TransportError",
    "ConfigError",
    "Session",
    "ResourceRequests",
    "require_field",
    "get_base_dir",
    "config_path",
    "save_json",
    "load_json",
    "save_credentials",
    "load_credentials",
    "credentials_from_env",
]
