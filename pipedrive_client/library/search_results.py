"""Pipedrive SearchResults endpoints (search across all item types)."""

from typing import Any

from ..core.resource import ResourceRequests, require_field
from ..core.session import Session


class SearchResults:
    """Client for /searchResults."""

    def __init__(self, session: Session):
        self._requests = ResourceRequests(session, "searchResults")

    def search(self, term: str, data: dict[str, Any] | None = None) -> Any:
        """
        Search deals, persons, organizations, products and files.

        Args:
            term: Search term
            data: Extra query parameters (item_type, start, limit)
        """
        params = dict(data or {})
        params["term"] = term
        return self._requests.get(params=params)

    def search_from_field(
        self,
        term: str,
        field_type: str | None,
        field_key: str | None,
        data: dict[str, Any] | None = None,
    ) -> Any:
        """
        Search values of one specific field.

        Args:
            term: Search term
            field_type: Kind of field (dealField, personField, ...)
            field_key: Key of the field to search in
            data: Extra query parameters (exact_match, return_item_ids)

        Raises:
            MissingFieldError: If ``field_type`` or ``field_key`` is missing
        """
        params = dict(data or {})
        params.update(term=term, field_type=field_type, field_key=field_key)
        require_field(params, "field_type", 'You must include a "field_type" when searching from a field')
        require_field(params, "field_key", 'You must include a "field_key" when searching from a field')
        return self._requests.get("field", params=params)
