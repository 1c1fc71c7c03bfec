"""Honeycomb datasets."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from hnyapi.transport import Transport


def _parse_time(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


@dataclass
class Dataset:
    """A Honeycomb dataset. Timestamps are set by the API."""

    name: str
    description: str = ""
    slug: str = ""
    expand_json_depth: int = 0
    last_written_at: datetime | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.description:
            data["description"] = self.description
        if self.slug:
            data["slug"] = self.slug
        if self.expand_json_depth:
            data["expand_json_depth"] = self.expand_json_depth
        if self.last_written_at is not None:
            data["last_written_at"] = self.last_written_at.isoformat()
        if self.created_at is not None:
            data["created_at"] = self.created_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Dataset:
        return cls(
            name=data.get("name") or "",
            description=data.get("description") or "",
            slug=data.get("slug") or "",
            expand_json_depth=data.get("expand_json_depth") or 0,
            last_written_at=_parse_time(data.get("last_written_at")),
            created_at=_parse_time(data.get("created_at")),
        )


class Datasets:
    """Dataset operations of the Honeycomb API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(self) -> list[Dataset]:
        """List all datasets."""
        data = self._transport.request("GET", "/1/datasets")
        return [Dataset.from_dict(d) for d in data or []]

    def get(self, slug: str) -> Dataset:
        """Get a dataset by its slug; raises NotFoundError if it does not exist."""
        return Dataset.from_dict(self._transport.request("GET", f"/1/datasets/{slug}") or {})

    def create(self, dataset: Dataset) -> Dataset:
        """Create a dataset; only the name is taken into account."""
        data = self._transport.request("POST", "/1/datasets", dataset.to_dict())
        return Dataset.from_dict(data or {})

    def update(self, dataset: Dataset) -> Dataset:
        """Update a dataset; unset optional fields are reset to their defaults."""
        data = self._transport.request("POST", "/1/datasets", dataset.to_dict())
        return Dataset.from_dict(data or {})