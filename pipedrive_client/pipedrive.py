"""
Pipedrive facade.

Builds one authenticated Session and one client per resource on top of it.
"""

import logging

import httpx

from .core.models import Credentials, DEFAULT_PROTOCOL, DEFAULT_HOST, DEFAULT_VERSION
from .core.session import Session, DEFAULT_TIMEOUT
from .library import (
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

logger = logging.getLogger(__name__)


class Pipedrive:
    """
    Single entry point to the Pipedrive API.

    Example:
        >>> with Pipedrive("my-api-token") as pipedrive:
        ...     pipedrive.organizations().add({"name": "Acme"})
    """

    def __init__(
        self,
        api_key: str,
        protocol: str = DEFAULT_PROTOCOL,
        host: str = DEFAULT_HOST,
        version: str = DEFAULT_VERSION,
        http_client: httpx.Client | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT,
    ):
        """
        Set up the API URL and the resource clients.

        Args:
            api_key: Pipedrive API token
            protocol: URL scheme (default: https)
            host: API host (default: api.pipedrive.com)
            version: API version (default: v1)
            http_client: Optional httpx client shared by every request
            timeout_seconds: Request timeout when the client is created here
        """
        self.credentials = Credentials(api_key=api_key, protocol=protocol, host=host, version=version)
        self._session = Session(self.credentials, http_client=http_client, timeout_seconds=timeout_seconds)

        self._persons = Persons(self._session)
        self._deals = Deals(self._session)
        self._activities = Activities(self._session)
        self._notes = Notes(self._session)
        self._deal_fields = DealFields(self._session)
        self._organizations = Organizations(self._session)
        self._products = Products(self._session)
        self._search_results = SearchResults(self._session)
        self._filters = Filters(self._session)
        self._stages = Stages(self._session)

        logger.debug(f"Pipedrive client ready for {self.credentials.base_url}")

    @classmethod
    def from_credentials(cls, credentials: Credentials, **kwargs) -> "Pipedrive":
        """Build a facade from a Credentials value (e.g. from load_credentials())."""
        return cls(
            credentials.api_key,
            protocol=credentials.protocol,
            host=credentials.host,
            version=credentials.version,
            **kwargs,
        )

    @property
    def base_url(self) -> str:
        return self.credentials.base_url

    def close(self) -> None:
        """Close the underlying HTTP client if the session owns it."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # ===== ACCESSORS =====

    def session(self) -> Session:
        return self._session

    def persons(self) -> Persons:
        return self._persons

    def deals(self) -> Deals:
        return self._deals

    def activities(self) -> Activities:
        return self._activities

    def notes(self) -> Notes:
        return self._notes

    def deal_fields(self) -> DealFields:
        return self._deal_fields

    def organizations(self) -> Organizations:
        return self._organizations

    def products(self) -> Products:
        return self._products

    def search_results(self) -> SearchResults:
        return self._search_results

    def filters(self) -> Filters:
        return self._filters

    def stages(self) -> Stages:
        return self._stages
