"""Derived columns of a Honeycomb dataset."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote_plus

from hnyapi.transport import Transport, url_encode_dataset


@dataclass
class DerivedColumn:
    """A derived column: an alias bound to a derived column expression."""

    alias: str
    expression: str
    id: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        data["alias"] = self.alias
        data["expression"] = self.expression
        if self.description:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DerivedColumn:
        return cls(
            alias=data.get("alias") or "",
            expression=data.get("expression") or "",
            id=data.get("id") or "",
            description=data.get("description") or "",
        )


class DerivedColumns:
    """Derived column operations of the Honeycomb API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _base(self, dataset: str) -> str:
        return f"/1/derived_columns/{url_encode_dataset(dataset)}"

    def list(self, dataset: str) -> list[DerivedColumn]:
        """List all derived columns in a dataset."""
        data = self._transport.request("GET", self._base(dataset))
        return [DerivedColumn.from_dict(c) for c in data or []]

    def get(self, dataset: str, column_id: str) -> DerivedColumn:
        """Get a derived column by its id; raises NotFoundError if it does not exist."""
        data = self._transport.request("GET", f"{self._base(dataset)}/{column_id}")
        return DerivedColumn.from_dict(data or {})

    def get_by_alias(self, dataset: str, alias: str) -> DerivedColumn:
        """Find a derived column by its alias; raises NotFoundError if there is none."""
        data = self._transport.request("GET", f"{self._base(dataset)}?alias={quote_plus(alias)}")
        return DerivedColumn.from_dict(data or {})

    def create(self, dataset: str, column: DerivedColumn) -> DerivedColumn:
        """Create a derived column; the alias must be unique in the dataset."""
        data = self._transport.request("POST", self._base(dataset), column.to_dict())
        return DerivedColumn.from_dict(data or {})

    def update(self, dataset: str, column: DerivedColumn) -> DerivedColumn:
        """Update an existing derived column."""
        data = self._transport.request("PUT", f"{self._base(dataset)}/{column.id}", column.to_dict())
        return DerivedColumn.from_dict(data or {})

    def delete(self, dataset: str, column_id: str) -> None:
        """Delete a derived column."""
        self._transport.request("DELETE", f"{self._base(dataset)}/{column_id}")