"""Request building shared by the resource clients."""

from collections.abc import Iterator
from typing import Any

from .models import MissingFieldError
from .session import Session


def require_field(data: dict[str, Any], field: str, message: str) -> None:
    """
    Reject input that lacks a field the API mandates.

    Args:
        data: Caller-supplied mapping
        field: Name of the mandatory field
        message: Human-readable message naming the field and the operation

    Raises:
        MissingFieldError: If field is absent or None
    """
    if data.get(field) is None:
        raise MissingFieldError(field, message)


class ResourceRequests:
    """
    Path templating and dispatch for one resource collection.

    Resource clients hold one of these instead of subclassing a common
    base; it turns identifier parts into a path under the collection and
    forwards to the shared session.
    """

    def __init__(self, session: Session, collection: str):
        self.session = session
        self.collection = collection

    def path(self, *parts: Any) -> str:
        """
        Build a resource path from identifier parts.

        path(42, "followers") on "organizations" gives "organizations/42/followers";
        path("") keeps the trailing slash ("organizations/").
        """
        return "/".join([self.collection, *(str(p) for p in parts)])

    def get(self, *parts: Any, params: dict[str, Any] | None = None) -> Any:
        return self.session.get(self.path(*parts), dict(params or {}))

    def post(self, *parts: Any, body: dict[str, Any] | None = None) -> Any:
        return self.session.post(self.path(*parts), dict(body or {}))

    def put(self, *parts: Any, body: dict[str, Any] | None = None) -> Any:
        return self.session.put(self.path(*parts), dict(body or {}))

    def delete(self, *parts: Any, params: dict[str, Any] | None = None) -> Any:
        return self.session.delete(self.path(*parts), dict(params or {}))

    def bulk_delete(self, ids: Any) -> Any:
        return self.session.bulk_delete(self.path(), {"ids": ids})

    def paginate(self, params: dict[str, Any] | None = None, limit: int = 100) -> Iterator[Any]:
        return self.session.paginate(self.path(), dict(params or {}), limit=limit)
