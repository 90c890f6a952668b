"""Pipedrive Filters endpoints."""

from typing import Any

from ..core.resource import ResourceRequests, require_field
from ..core.session import Session


class Filters:
    """Client for /filters."""

    def __init__(self, session: Session):
        self._requests = ResourceRequests(session, "filters")

    def get_by_id(self, filter_id: int) -> Any:
        return self._requests.get(filter_id)

    def get_all(self, data: dict[str, Any] | None = None) -> Any:
        """Return all filters, optionally of one ``type`` (deals, org, people, ...)."""
        return self._requests.get("", params=data)

    def add(self, data: dict[str, Any]) -> Any:
        """
        Add a filter.

        Args:
            data: Filter definition; must include ``name``, ``conditions`` and ``type``

        Raises:
            MissingFieldError: If any of the three is missing
        """
        for field in ("name", "conditions", "type"):
            require_field(data, field, f'You must include a "{field}" field when inserting a filter')
        return self._requests.post(body=data)

    def update(self, filter_id: int, data: dict[str, Any] | None = None) -> Any:
        return self._requests.put(filter_id, body=data)

    def delete(self, filter_id: int) -> Any:
        return self._requests.delete(filter_id)

    def bulk_delete(self, ids: list[int] | str) -> Any:
        return self._requests.bulk_delete(ids)
