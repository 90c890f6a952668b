"""
Pipedrive Organizations endpoints.

Organizations are companies and other kinds of organizations you are making
Deals with. Persons can be associated with organizations so that each
organization can contain one or more Persons.
"""

from collections.abc import Iterator
from typing import Any

from ..core.resource import ResourceRequests, require_field
from ..core.session import Session


class Organizations:
    """Client for /organizations."""

    def __init__(self, session: Session):
        self._requests = ResourceRequests(session, "organizations")

    def get_by_id(self, organization_id: int) -> Any:
        """
        Return a single organization.

        Args:
            organization_id: Pipedrive organization id

        Returns:
            Organization record
        """
        return self._requests.get(organization_id)

    def get_by_name(self, name: str, data: dict[str, Any] | None = None) -> Any:
        """
        Find organizations by name.

        Args:
            name: Search term, sent as ``term``
            data: Extra query parameters (start, limit)

        Returns:
            List of matching organizations
        """
        params = dict(data or {})
        params["term"] = name
        return self._requests.get("find", params=params)

    def get_all(self, data: dict[str, Any] | None = None) -> Any:
        """
        Return all organizations.

        Args:
            data: Query parameters (filter_id, start, limit, sort)
        """
        return self._requests.get("", params=data)

    def iter_all(self, data: dict[str, Any] | None = None, limit: int = 100) -> Iterator[Any]:
        """Iterate over every organization, following pagination."""
        return self._requests.paginate(data, limit=limit)

    def deals(self, data: dict[str, Any]) -> Any:
        """
        List deals associated with an organization.

        Args:
            data: Query parameters; must include ``id`` (start, limit optional)

        Raises:
            MissingFieldError: If ``id`` is missing
        """
        require_field(data, "id", 'You must include the "id" of the organization when getting deals')
        return self._requests.get(data["id"], "deals", params=data)

    def update(self, organization_id: int, data: dict[str, Any] | None = None) -> Any:
        """Update an organization with the given fields."""
        return self._requests.put(organization_id, body=data)

    def add(self, data: dict[str, Any]) -> Any:
        """
        Add an organization.

        Args:
            data: Organization fields; must include ``name``

        Returns:
            The created organization

        Raises:
            MissingFieldError: If ``name`` is missing
        """
        require_field(data, "name", 'You must include a "name" field when inserting an organization')
        return self._requests.post(body=data)

    def delete(self, organization_id: int) -> Any:
        """Delete an organization."""
        return self._requests.delete(organization_id)

    def bulk_delete(self, ids: list[int] | str) -> Any:
        """Delete several organizations in one request."""
        return self._requests.bulk_delete(ids)

    def list_persons(self, organization_id: int) -> Any:
        """List persons belonging to an organization."""
        return self._requests.get(organization_id, "persons")

    def list_followers(self, organization_id: int) -> Any:
        return self._requests.get(organization_id, "followers")

    def add_follower(self, organization_id: int, user_id: int) -> Any:
        """Make a user follow an organization."""
        return self._requests.post(
            organization_id,
            "followers",
            body={"id": organization_id, "user_id": user_id},
        )

    def delete_follower(self, organization_id: int, user_id: int) -> Any:
        return self._requests.delete(organization_id, "followers", user_id)

    def summary(self, data: dict[str, Any] | None = None) -> Any:
        """Return a summary of all organizations."""
        return self._requests.get("summary", params=data)

    def list_activities(self, organization_id: int, data: dict[str, Any] | None = None) -> Any:
        """
        List activities associated with an organization.

        Args:
            organization_id: Pipedrive organization id
            data: Query parameters (start, limit, done, exclude)
        """
        return self._requests.get(organization_id, "activities", params=data)
