"""Pipedrive Products endpoints."""

from typing import Any

from ..core.resource import ResourceRequests, require_field
from ..core.session import Session


class Products:
    """Client for /products."""

    def __init__(self, session: Session):
        self._requests = ResourceRequests(session, "products")

    def get_by_id(self, product_id: int) -> Any:
        return self._requests.get(product_id)

    def get_by_name(self, name: str, data: dict[str, Any] | None = None) -> Any:
        """
        Find products by name.

        Args:
            name: Search term, sent as ``term``
            data: Extra query parameters (currency, start, limit)
        """
        params = dict(data or {})
        params["term"] = name
        return self._requests.get("find", params=params)

    def get_all(self, data: dict[str, Any] | None = None) -> Any:
        return self._requests.get("", params=data)

    def deals(self, product_id: int, data: dict[str, Any] | None = None) -> Any:
        """List deals a product is attached to."""
        return self._requests.get(product_id, "deals", params=data)

    def add(self, data: dict[str, Any]) -> Any:
        """
        Add a product.

        Raises:
            MissingFieldError: If ``name`` is missing
        """
        require_field(data, "name", 'You must include a "name" field when inserting a product')
        return self._requests.post(body=data)

    def update(self, product_id: int, data: dict[str, Any] | None = None) -> Any:
        return self._requests.put(product_id, body=data)

    def delete(self, product_id: int) -> Any:
        return self._requests.delete(product_id)
