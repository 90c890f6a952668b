"""
Pipedrive client - thin wrapper over the Pipedrive REST API.

Layers:
- core: credentials, errors, the shared HTTP session
- library: one client per resource (organizations, persons, deals, ...)
- Pipedrive: facade wiring them together
"""

from .core import (
    Credentials,
    PipedriveError,
    MissingFieldError,
    RemoteError,
    TransportError,
    ConfigError,
    Session,
    load_credentials,
    save_credentials,
    credentials_from_env,
)
from .pipedrive import Pipedrive

__version__ = "0.1.0"
__all__ = [
    "Pipedrive",
    "Credentials",
    "PipedriveError",
    "MissingFieldError",
    "RemoteError",
    "TransportError",
    "ConfigError",
    "Session",
    "load_credentials",
    "save_credentials",
    "credentials_from_env",
]
