"""Pipedrive Activities endpoints (calls, meetings, tasks, ...)."""

from typing import Any

from ..core.resource import ResourceRequests, require_field
from ..core.session import Session


class Activities:
    """Client for /activities."""

    def __init__(self, session: Session):
        self._requests = ResourceRequests(session, "activities")

    def get_by_id(self, activity_id: int) -> Any:
        return self._requests.get(activity_id)

    def get_all(self, data: dict[str, Any] | None = None) -> Any:
        """Return activities (user_id, filter_id, type, start, limit, done)."""
        return self._requests.get("", params=data)

    def add(self, data: dict[str, Any]) -> Any:
        """
        Add an activity.

        Args:
            data: Activity fields; must include ``subject`` and ``type``

        Raises:
            MissingFieldError: If ``subject`` or ``type`` is missing
        """
        require_field(data, "subject", 'You must include a "subject" field when inserting an activity')
        require_field(data, "type", 'You must include a "type" field when inserting an activity')
        return self._requests.post(body=data)

    def update(self, activity_id: int, data: dict[str, Any] | None = None) -> Any:
        return self._requests.put(activity_id, body=data)

    def delete(self, activity_id: int) -> Any:
        return self._requests.delete(activity_id)

    def bulk_delete(self, ids: list[int] | str) -> Any:
        return self._requests.bulk_delete(ids)
