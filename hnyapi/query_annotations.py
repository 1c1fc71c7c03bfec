"""Query annotations: names and descriptions attached to queries."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from hnyapi.transport import Transport, url_encode_dataset

_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


def _parse_time(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(_EXCESS_FRACTION.sub(r"\1", value))


@dataclass
class QueryAnnotation:
    """A query annotation. Timestamps are set by the API."""

    name: str
    query_id: str
    description: str = ""
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        data["name"] = self.name
        data["description"] = self.description
        data["query_id"] = self.query_id
        if self.created_at is not None:
            data["created-at"] = self.created_at.isoformat()
        if self.updated_at is not None:
            data["updated-at"] = self.updated_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QueryAnnotation:
        return cls(
            name=data.get("name") or "",
            query_id=data.get("query_id") or "",
            description=data.get("description") or "",
            id=data.get("id") or "",
            created_at=_parse_time(data.get("created-at")),
            updated_at=_parse_time(data.get("updated-at")),
        )


class QueryAnnotations:
    """Query annotation operations of the Honeycomb API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _base(self, dataset: str) -> str:
        return f"/1/query_annotations/{url_encode_dataset(dataset)}"

    def list(self, dataset: str) -> list[QueryAnnotation]:
        """List all query annotations of a dataset."""
        data = self._transport.request("GET", self._base(dataset))
        return [QueryAnnotation.from_dict(a) for a in data or []]

    def get(self, dataset: str, annotation_id: str) -> QueryAnnotation:
        """Get a query annotation by its id; raises NotFoundError if it does not exist."""
        data = self._transport.request("GET", f"{self._base(dataset)}/{annotation_id}")
        return QueryAnnotation.from_dict(data or {})

    def create(self, dataset: str, annotation: QueryAnnotation) -> QueryAnnotation:
        """Create a query annotation; its id must not be set."""
        data = self._transport.request("POST", self._base(dataset), annotation.to_dict())
        return QueryAnnotation.from_dict(data or {})

    def update(self, dataset: str, annotation: QueryAnnotation) -> QueryAnnotation:
        """Update an existing query annotation."""
        path = f"{self._base(dataset)}/{annotation.id}"
        data = self._transport.request("PUT", path, annotation.to_dict())
        return QueryAnnotation.from_dict(data or {})

    def delete(self, dataset: str, annotation_id: str) -> None:
        """Delete a query annotation."""
        self._transport.request("DELETE", f"{self._base(dataset)}/{annotation_id}")