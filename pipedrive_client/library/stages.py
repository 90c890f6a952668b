"""
Pipedrive Stages endpoints.

A stage is a step in a pipeline; every deal sits in exactly one stage.
"""

from typing import Any

from ..core.resource import ResourceRequests, require_field
from ..core.session import Session


class Stages:
    """Client for /stages."""

    def __init__(self, session: Session):
        self._requests = ResourceRequests(session, "stages")

    def get_by_id(self, stage_id: int) -> Any:
        return self._requests.get(stage_id)

    def get_all(self, data: dict[str, Any] | None = None) -> Any:
        return self._requests.get("", params=data)

    def get_by_pipeline_id(self, pipeline_id: int) -> Any:
        """Return the stages of one pipeline."""
        return self._requests.get("", params={"pipeline_id": pipeline_id})

    def deals(self, stage_id: int, data: dict[str, Any] | None = None) -> Any:
        """List deals in a stage (filter_id, user_id, everyone, start, limit)."""
        return self._requests.get(stage_id, "deals", params=data)

    def add(self, data: dict[str, Any]) -> Any:
        """
        Add a stage to a pipeline.

        Raises:
            MissingFieldError: If ``name`` or ``pipeline_id`` is missing
        """
        require_field(data, "name", 'You must include a "name" field when inserting a stage')
        require_field(data, "pipeline_id", 'You must include a "pipeline_id" field when inserting a stage')
        return self._requests.post(body=data)

    def update(self, stage_id: int, data: dict[str, Any] | None = None) -> Any:
        return self._requests.put(stage_id, body=data)

    def delete(self, stage_id: int) -> Any:
        return self._requests.delete(stage_id)
