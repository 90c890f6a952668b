"""
Pipedrive Deals endpoints.

Deals represent ongoing, lost or won sales to an Organization or to a
Person. Each deal has a monetary value and must be placed in a Stage.
"""

from collections.abc import Iterator
from typing import Any

from ..core.resource import ResourceRequests, require_field
from ..core.session import Session


class Deals:
    """Client for /deals."""

    def __init__(self, session: Session):
        self._requests = ResourceRequests(session, "deals")

    def get_by_id(self, deal_id: int) -> Any:
        """Return a single deal."""
        return self._requests.get(deal_id)

    def get_by_name(self, name: str, data: dict[str, Any] | None = None) -> Any:
        """
        Find deals by title.

        Args:
            name: Search term, sent as ``term``
            data: Extra query parameters (person_id, org_id)
        """
        params = dict(data or {})
        params["term"] = name
        return self._requests.get("find", params=params)

    def get_all(self, data: dict[str, Any] | None = None) -> Any:
        """Return all deals (filter_id, stage_id, status, start, limit, sort)."""
        return self._requests.get("", params=data)

    def iter_all(self, data: dict[str, Any] | None = None, limit: int = 100) -> Iterator[Any]:
        return self._requests.paginate(data, limit=limit)

    def activities(self, data: dict[str, Any]) -> Any:
        """
        List activities associated with a deal.

        Raises:
            MissingFieldError: If ``id`` is missing
        """
        require_field(data, "id", 'You must include the "id" of the deal when getting activities')
        return self._requests.get(data["id"], "activities", params=data)

    def products(self, data: dict[str, Any]) -> Any:
        """
        List products attached to a deal.

        Raises:
            MissingFieldError: If ``id`` is missing
        """
        require_field(data, "id", 'You must include the "id" of the deal when getting products')
        return self._requests.get(data["id"], "products", params=data)

    def add_product(self, deal_id: int, product_id: int, data: dict[str, Any]) -> Any:
        """
        Attach a product to a deal.

        Args:
            deal_id: Pipedrive deal id
            product_id: Pipedrive product id
            data: Line fields; must include ``item_price`` and ``quantity``

        Raises:
            MissingFieldError: If ``item_price`` or ``quantity`` is missing
        """
        require_field(data, "item_price", 'You must include an "item_price" field when adding a product to a deal')
        require_field(data, "quantity", 'You must include a "quantity" field when adding a product to a deal')
        body = dict(data)
        body["product_id"] = product_id
        return self._requests.post(deal_id, "products", body=body)

    def update_stage(self, deal_id: int, stage_id: int) -> Any:
        """Move a deal to another stage."""
        return self._requests.put(deal_id, body={"stage_id": stage_id})

    def update(self, deal_id: int, data: dict[str, Any] | None = None) -> Any:
        return self._requests.put(deal_id, body=data)

    def add(self, data: dict[str, Any]) -> Any:
        """
        Add a deal.

        Raises:
            MissingFieldError: If ``title`` is missing
        """
        require_field(data, "title", 'You must include a "title" field when inserting a deal')
        return self._requests.post(body=data)

    def delete(self, deal_id: int) -> Any:
        return self._requests.delete(deal_id)

    def bulk_delete(self, ids: list[int] | str) -> Any:
        return self._requests.bulk_delete(ids)

    def list_followers(self, deal_id: int) -> Any:
        return self._requests.get(deal_id, "followers")

    def add_follower(self, deal_id: int, user_id: int) -> Any:
        return self._requests.post(deal_id, "followers", body={"user_id": user_id})

    def delete_follower(self, deal_id: int, follower_id: int) -> Any:
        return self._requests.delete(deal_id, "followers", follower_id)

    def summary(self, data: dict[str, Any] | None = None) -> Any:
        """Return a summary of deals (status, filter_id, user_id, stage_id)."""
        return self._requests.get("summary", params=data)
