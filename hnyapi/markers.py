"""Markers: annotations on the time axis of a Honeycomb dataset."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from hnyapi.transport import NotFoundError, Transport, url_encode_dataset

_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


def _parse_time(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(_EXCESS_FRACTION.sub(r"\1", value))


@dataclass
class Marker:
    """A marker. Start and end times are Unix seconds; timestamps and color are set by the API."""

    id: str = ""
    start_time: int = 0
    end_time: int = 0
    message: str = ""
    type: str = ""
    url: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    color: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for key in ("id", "start_time", "end_time", "message", "type", "url"):
            value = getattr(self, key)
            if value:
                data[key] = value
        if self.created_at is not None:
            data["created_at"] = self.created_at.isoformat()
        if self.updated_at is not None:
            data["updated_at"] = self.updated_at.isoformat()
        if self.color:
            data["color"] = self.color
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Marker:
        return cls(
            id=data.get("id") or "",
            start_time=data.get("start_time") or 0,
            end_time=data.get("end_time") or 0,
            message=data.get("message") or "",
            type=data.get("type") or "",
            url=data.get("url") or "",
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
            color=data.get("color") or "",
        )


class Markers:
    """Marker operations of the Honeycomb API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _base(self, dataset: str) -> str:
        return f"/1/markers/{url_encode_dataset(dataset)}"

    def list(self, dataset: str) -> list[Marker]:
        """List all markers in a dataset."""
        data = self._transport.request("GET", self._base(dataset))
        return [Marker.from_dict(m) for m in data or []]

    def get(self, dataset: str, marker_id: str) -> Marker:
        """Get a marker by its id; raises NotFoundError if it does not exist.

        The API has no endpoint for a single marker, so this lists them all.
        """
        for marker in self.list(dataset):
            if marker.id == marker_id:
                return marker
        raise NotFoundError()

    def create(self, dataset: str, marker: Marker) -> Marker:
        """Create a marker; its id must not be set."""
        data = self._transport.request("POST", self._base(dataset), marker.to_dict())
        return Marker.from_dict(data or {})

    def update(self, dataset: str, marker: Marker) -> Marker:
        """Update an existing marker."""
        data = self._transport.request("PUT", f"{self._base(dataset)}/{marker.id}", marker.to_dict())
        return Marker.from_dict(data or {})

    def delete(self, dataset: str, marker_id: str) -> None:
        """Delete a marker."""
        self._transport.request("DELETE", f"{self._base(dataset)}/{marker_id}")