"""Pipedrive Notes endpoints."""

from typing import Any

from ..core.resource import ResourceRequests, require_field
from ..core.session import Session


class Notes:
    """Client for /notes."""

    def __init__(self, session: Session):
        self._requests = ResourceRequests(session, "notes")

    def get_by_id(self, note_id: int) -> Any:
        return self._requests.get(note_id)

    def get_all(self, data: dict[str, Any] | None = None) -> Any:
        """Return notes (user_id, deal_id, person_id, org_id, start, limit)."""
        return self._requests.get("", params=data)

    def add(self, data: dict[str, Any]) -> Any:
        """
        Add a note to a deal, person or organization.

        Raises:
            MissingFieldError: If ``content`` is missing
        """
        require_field(data, "content", 'You must include a "content" field when inserting a note')
        return self._requests.post(body=data)

    def update(self, note_id: int, data: dict[str, Any] | None = None) -> Any:
        return self._requests.put(note_id, body=data)

    def delete(self, note_id: int) -> Any:
        return self._requests.delete(note_id)
