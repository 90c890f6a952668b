"""Core data models and errors for the Pipedrive client."""

from dataclasses import dataclass
from typing import Any

DEFAULT_PROTOCOL = "https"
DEFAULT_HOST = "api.pipedrive.com"
DEFAULT_VERSION = "v1"


@dataclass(frozen=True)
class Credentials:
    """Connection settings shared by every request."""
    api_key: str
    protocol: str = DEFAULT_PROTOCOL
    host: str = DEFAULT_HOST
    version: str = DEFAULT_VERSION

    @property
    def base_url(self) -> str:
        """Base URL every resource path is appended to."""
        return f"{self.protocol}://{self.host}/{self.version}"

    def to_dict(self) -> dict[str, Any]:
        """Convert Credentials to a dictionary."""
        return {
            "api_key": self.api_key,
            "protocol": self.protocol,
            "host": self.host,
            "version": self.version,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Credentials":
        """Create Credentials from a dictionary."""
        return cls(
            api_key=data["api_key"],
            protocol=data.get("protocol", DEFAULT_PROTOCOL),
            host=data.get("host", DEFAULT_HOST),
            version=data.get("version", DEFAULT_VERSION),
        )

    def __repr__(self) -> str:
        return (
            f"Credentials(api_key='***', protocol={self.protocol!r}, "
            f"host={self.host!r}, version={self.version!r})"
        )


class PipedriveError(Exception):
    """Base error for everything raised by the client."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for logging or JSON output."""
        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class MissingFieldError(PipedriveError):
    """Raised before any request when a mandatory field is absent."""

    def __init__(self, field: str, message: str):
        super().__init__(message, {"field": field})
        self.field = field


class RemoteError(PipedriveError):
    """Raised when Pipedrive answers with success == false."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: str | int | None = None,
        error_info: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.error_code = error_code
        self.error_info = error_info

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.status_code:
            result["status"] = self.status_code
        if self.error_code:
            result["code"] = self.error_code
        return result


class TransportError(PipedriveError):
    """Raised when the request never produced a usable response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigError(PipedriveError):
    """Raised when there is an error loading or saving configuration."""
    pass
