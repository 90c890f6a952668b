"""
Pipedrive Persons endpoints.

Persons are the customers you are doing Deals with. Each Person can belong
to an Organization.
"""

from collections.abc import Iterator
from typing import Any

from ..core.resource import ResourceRequests, require_field
from ..core.session import Session


class Persons:
    """Client for /persons."""

    def __init__(self, session: Session):
        self._requests = ResourceRequests(session, "persons")

    def get_by_id(self, person_id: int) -> Any:
        """Return a single person."""
        return self._requests.get(person_id)

    def get_by_name(self, name: str, data: dict[str, Any] | None = None) -> Any:
        """
        Find persons by name.

        Args:
            name: Search term, sent as ``term``
            data: Extra query parameters (org_id, start, limit, search_by_email)
        """
        params = dict(data or {})
        params["term"] = name
        return self._requests.get("find", params=params)

    def get_all(self, data: dict[str, Any] | None = None) -> Any:
        """Return all persons."""
        return self._requests.get("", params=data)

    def iter_all(self, data: dict[str, Any] | None = None, limit: int = 100) -> Iterator[Any]:
        return self._requests.paginate(data, limit=limit)

    def deals(self, data: dict[str, Any]) -> Any:
        """
        List deals associated with a person.

        Raises:
            MissingFieldError: If ``id`` is missing
        """
        require_field(data, "id", 'You must include the "id" of the person when getting deals')
        return self._requests.get(data["id"], "deals", params=data)

    def products(self, data: dict[str, Any]) -> Any:
        """
        List products associated with a person.

        Raises:
            MissingFieldError: If ``id`` is missing
        """
        require_field(data, "id", 'You must include the "id" of the person when getting products')
        return self._requests.get(data["id"], "products", params=data)

    def update(self, person_id: int, data: dict[str, Any] | None = None) -> Any:
        return self._requests.put(person_id, body=data)

    def add(self, data: dict[str, Any]) -> Any:
        """
        Add a person.

        Raises:
            MissingFieldError: If ``name`` is missing
        """
        require_field(data, "name", 'You must include a "name" field when inserting a person')
        return self._requests.post(body=data)

    def delete(self, person_id: int) -> Any:
        return self._requests.delete(person_id)

    def bulk_delete(self, ids: list[int] | str) -> Any:
        return self._requests.bulk_delete(ids)

    def merge(self, person_id: int, merge_with_id: int) -> Any:
        """Merge person_id into merge_with_id."""
        return self._requests.put(person_id, "merge", body={"merge_with_id": merge_with_id})

    def list_followers(self, person_id: int) -> Any:
        return self._requests.get(person_id, "followers")

    def add_follower(self, person_id: int, user_id: int) -> Any:
        return self._requests.post(person_id, "followers", body={"user_id": user_id})

    def delete_follower(self, person_id: int, follower_id: int) -> Any:
        return self._requests.delete(person_id, "followers", follower_id)

    def list_activities(self, person_id: int, data: dict[str, Any] | None = None) -> Any:
        return self._requests.get(person_id, "activities", params=data)
