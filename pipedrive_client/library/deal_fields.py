"""
Pipedrive DealFields endpoints.

Deal fields describe the built-in and custom fields available on deals,
including the 40-character hash keys used for custom fields.
"""

from typing import Any

from ..core.resource import ResourceRequests, require_field
from ..core.session import Session


class DealFields:
    """Client for /dealFields."""

    def __init__(self, session: Session):
        self._requests = ResourceRequests(session, "dealFields")

    def get_by_id(self, field_id: int) -> Any:
        return self._requests.get(field_id)

    def get_all(self, data: dict[str, Any] | None = None) -> Any:
        """Return all deal fields."""
        return self._requests.get("", params=data)

    def add(self, data: dict[str, Any]) -> Any:
        """
        Add a custom deal field.

        Args:
            data: Field definition; must include ``name`` and ``field_type``

        Raises:
            MissingFieldError: If ``name`` or ``field_type`` is missing
        """
        require_field(data, "name", 'You must include a "name" field when inserting a deal field')
        require_field(data, "field_type", 'You must include a "field_type" field when inserting a deal field')
        return self._requests.post(body=data)

    def update(self, field_id: int, data: dict[str, Any] | None = None) -> Any:
        return self._requests.put(field_id, body=data)

    def delete(self, field_id: int) -> Any:
        return self._requests.delete(field_id)

    def bulk_delete(self, ids: list[int] | str) -> Any:
        return self._requests.bulk_delete(ids)
