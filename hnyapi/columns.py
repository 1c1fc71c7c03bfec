"""Columns of a Honeycomb dataset."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from hnyapi.transport import Transport, url_encode_dataset


class ColumnType(StrEnum):
    """Type of a column."""

    STRING = "string"
    FLOAT = "float"
    INTEGER = "integer"
    BOOLEAN = "boolean"


def _parse_time(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def _coerce_type(value: Any) -> ColumnType | str | None:
    if value is None:
        return None
    try:
        return ColumnType(value)
    except ValueError:
        return value


@dataclass
class Column:
    """A column in a dataset. Timestamps are set by the API."""

    key_name: str
    id: str = ""
    alias: str = ""
    hidden: bool | None = None
    description: str = ""
    type: ColumnType | str | None = None
    last_written_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        data["key_name"] = self.key_name
        if self.alias:
            data["alias"] = self.alias
        if self.hidden is not None:
            data["hidden"] = self.hidden
        if self.description:
            data["description"] = self.description
        if self.type is not None:
            data["type"] = str(self.type)
        for key, value in (
            ("last_written", self.last_written_at),
            ("created_at", self.created_at),
            ("updated_at", self.updated_at),
        ):
            if value is not None:
                data[key] = value.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Column:
        return cls(
            key_name=data.get("key_name") or "",
            id=data.get("id") or "",
            alias=data.get("alias") or "",
            hidden=data.get("hidden"),
            description=data.get("description") or "",
            type=_coerce_type(data.get("type")),
            last_written_at=_parse_time(data.get("last_written")),
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
        )


class Columns:
    """Column operations of the Honeycomb API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(self, dataset: str) -> list[Column]:
        """List all columns in a dataset."""
        data = self._transport.request("GET", f"/1/columns/{url_encode_dataset(dataset)}")
        return [Column.from_dict(c) for c in data or []]

    def get(self, dataset: str, column_id: str) -> Column:
        """Get a column by its id; raises NotFoundError if it does not exist."""
        path = f"/1/columns/{url_encode_dataset(dataset)}/{column_id}"
        return Column.from_dict(self._transport.request("GET", path) or {})

    def get_by_key_name(self, dataset: str, key_name: str) -> Column:
        """Find a column by its key name; raises NotFoundError if there is none."""
        path = f"/1/columns/{url_encode_dataset(dataset)}?key_name={key_name}"
        return Column.from_dict(self._transport.request("GET", path) or {})

    def create(self, dataset: str, column: Column) -> Column:
        """Create a column; the key name must be unique in the dataset."""
        path = f"/1/columns/{url_encode_dataset(dataset)}"
        return Column.from_dict(self._transport.request("POST", path, column.to_dict()) or {})

    def update(self, dataset: str, column: Column) -> Column:
        """Update an existing column."""
        path = f"/1/columns/{url_encode_dataset(dataset)}/{column.id}"
        return Column.from_dict(self._transport.request("PUT", path, column.to_dict()) or {})

    def delete(self, dataset: str, column_id: str) -> None:
        """Delete a column."""
        self._transport.request("DELETE", f"/1/columns/{url_encode_dataset(dataset)}/{column_id}")