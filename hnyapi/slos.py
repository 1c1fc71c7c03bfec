"""Service level objectives defined on a Honeycomb dataset."""

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
class SLO:
    """An SLO, measured by the derived column named by ``sli_alias``.

    Timestamps are set by the API.
    """

    name: str
    sli_alias: str
    time_period_days: int = 0
    target_per_million: int = 0
    description: str = ""
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        data["name"] = self.name
        if self.description:
            data["description"] = self.description
        data["time_period_days"] = self.time_period_days
        data["target_per_million"] = self.target_per_million
        data["sli"] = {"alias": self.sli_alias}
        if self.created_at is not None:
            data["created_at"] = self.created_at.isoformat()
        if self.updated_at is not None:
            data["updated_at"] = self.updated_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SLO:
        sli = data.get("sli") or {}
        return cls(
            name=data.get("name") or "",
            sli_alias=sli.get("alias") or "",
            time_period_days=data.get("time_period_days") or 0,
            target_per_million=data.get("target_per_million") or 0,
            description=data.get("description") or "",
            id=data.get("id") or "",
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
        )


class SLOs:
    """SLO operations of the Honeycomb API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _base(self, dataset: str) -> str:
        return f"/1/slos/{url_encode_dataset(dataset)}"

    def list(self, dataset: str) -> list[SLO]:
        """List all SLOs in a dataset."""
        data = self._transport.request("GET", self._base(dataset))
        return [SLO.from_dict(s) for s in data or []]

    def get(self, dataset: str, slo_id: str) -> SLO:
        """Get an SLO by its id; raises NotFoundError if it does not exist."""
        data = self._transport.request("GET", f"{self._base(dataset)}/{slo_id}")
        return SLO.from_dict(data or {})

    def create(self, dataset: str, slo: SLO) -> SLO:
        """Create an SLO; its id must not be set."""
        data = self._transport.request("POST", self._base(dataset), slo.to_dict())
        return SLO.from_dict(data or {})

    def update(self, dataset: str, slo: SLO) -> SLO:
        """Update an existing SLO."""
        data = self._transport.request("PUT", f"{self._base(dataset)}/{slo.id}", slo.to_dict())
        return SLO.from_dict(data or {})

    def delete(self, dataset: str, slo_id: str) -> None:
        """Delete an SLO."""
        self._transport.request("DELETE", f"{self._base(dataset)}/{slo_id}")