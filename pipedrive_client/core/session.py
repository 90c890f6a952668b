"""
HTTP session shared by every resource client.

Turns a (method, path, data) triple into one authenticated request against
the Pipedrive API and unwraps the ``{success, data, error}`` envelope.
"""

import logging
from collections.abc import Iterator
from typing import Any

import httpx

from .models import Credentials, RemoteError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
TOKEN_HEADER = "x-api-token"


class Session:
    """
    Authenticated transport for the Pipedrive REST API.

    Features:
    - Base URL and API key captured once from Credentials
    - API key attached as the x-api-token header on every request
    - Query string for GET/DELETE, JSON body for POST/PUT/bulk DELETE
    - One attempt per call; failures surface as TransportError or RemoteError

    The session keeps no per-call state, so one instance can be shared by
    all resource clients.
    """

    def __init__(
        self,
        credentials: Credentials,
        http_client: httpx.Client | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the session.

        Args:
            credentials: API key and base URL settings
            http_client: Optional httpx client (created if None)
            timeout_seconds: Request timeout in seconds
        """
        self.credentials = credentials
        self.timeout_seconds = timeout_seconds

        # Track if we own the HTTP client (for cleanup)
        self._owns_client = http_client is None

        if http_client is None:
            self.http_client = httpx.Client(timeout=timeout_seconds)
        else:
            self.http_client = http_client

    @property
    def base_url(self) -> str:
        return self.credentials.base_url

    def close(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client and self.http_client:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def build_url(self, path: str) -> str:
        """
        Build full URL from the base URL and a resource path.

        Args:
            path: Resource path (e.g., "organizations/42")

        Returns:
            Full URL

        Raises:
            ValueError: If path is empty
        """
        path = path.lstrip("/")
        if not path:
            raise ValueError("Resource path must not be empty")
        return f"{self.base_url.rstrip('/')}/{path}"

    def _query(self, params: dict[str, Any] | None) -> dict[str, Any]:
        return {k: v for k, v in (params or {}).items() if v is not None}

    def _headers(self) -> dict[str, str]:
        # Request URLs (and httpx log lines) never carry the token
        return {TOKEN_HEADER: self.credentials.api_key, "Accept": "application/json"}

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Make one authenticated request and return the decoded envelope.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Resource path relative to the API version
            params: Query parameters
            body: JSON request body

        Returns:
            The full response object (success, data, additional_data, ...)

        Raises:
            TransportError: On network failure or an undecodable response
            RemoteError: When the API reports success == false
        """
        url = self.build_url(path)
        logger.debug(f"{method} {url}")

        try:
            response = self.http_client.request(
                method=method,
                url=url,
                headers=self._headers(),
                params=self._query(params),
                json=body,
            )
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(f"Request failed: {e}") from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return self._decode(response)

    def _decode(self, response: httpx.Response) -> dict[str, Any]:
        status = response.status_code
        ok = 200 <= status < 300

        if not response.content:
            if ok:
                return {"success": True, "data": None}
            raise TransportError(f"Empty response with status {status}", status_code=status)

        try:
            payload = response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON response: {e}", status_code=status) from e

        if not isinstance(payload, dict):
            raise TransportError(
                f"Unexpected response type {type(payload).__name__}, expected an object",
                status_code=status,
            )

        if not ok or payload.get("success") is False:
            raise RemoteError(
                payload.get("error") or f"Request failed with status {status}",
                status_code=status,
                error_code=payload.get("errorCode"),
                error_info=payload.get("error_info"),
                details=payload,
            )

        return payload

    # ===== VERB METHODS =====

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make a GET request and return its data."""
        return self.request("GET", path, params=params).get("data")

    def post(self, path: str, body: dict[str, Any] | None = None) -> Any:
        """Make a POST request and return its data."""
        return self.request("POST", path, body=body or {}).get("data")

    def put(self, path: str, body: dict[str, Any] | None = None) -> Any:
        """Make a PUT request and return its data."""
        return self.request("PUT", path, body=body or {}).get("data")

    def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make a DELETE request and return its data."""
        return self.request("DELETE", path, params=params).get("data")

    def bulk_delete(self, path: str, body: dict[str, Any]) -> Any:
        """
        Make a DELETE request carrying a body and return its data.

        Sequence values (e.g. ``ids``) are sent comma-separated; sets are
        sorted first.
        """
        payload = {}
        for key, value in body.items():
            if isinstance(value, (set, frozenset)):
                value = sorted(value)
            if isinstance(value, (list, tuple)):
                value = ",".join(str(v) for v in value)
            payload[key] = value
        return self.request("DELETE", path, body=payload).get("data")

    # ===== PAGINATION =====

    def paginate(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        limit: int = 100,
    ) -> Iterator[Any]:
        """
        Iterate through every page of a list endpoint.

        Args:
            path: Resource path of the list endpoint
            params: Extra query parameters (filter_id, sort, ...)
            limit: Items per page

        Yields:
            Records from all pages, in order
        """
        query = dict(params or {})
        query.setdefault("limit", limit)
        start = query.get("start") or 0

        while True:
            query["start"] = start
            envelope = self.request("GET", path, params=query)

            data = envelope.get("data") or []
            yield from data

            pagination = (envelope.get("additional_data") or {}).get("pagination") or {}
            if not data or not pagination.get("more_items_in_collection"):
                break
            start = pagination.get("next_start") or start + len(data)
