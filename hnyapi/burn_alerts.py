"""Burn alerts: notifications when an SLO's error budget runs out too fast."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from hnyapi.recipients import NotificationRecipient
from hnyapi.transport import Transport, url_encode_dataset

_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


def _parse_time(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(_EXCESS_FRACTION.sub(r"\1", value))


@dataclass
class BurnAlert:
    """A burn alert on the SLO with id ``slo_id``. Timestamps are set by the API."""

    slo_id: str
    exhaustion_minutes: int = 0
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    recipients: list[NotificationRecipient] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        data["exhaustion_minutes"] = self.exhaustion_minutes
        data["slo"] = {"id": self.slo_id}
        if self.created_at is not None:
            data["created_at"] = self.created_at.isoformat()
        if self.updated_at is not None:
            data["updated_at"] = self.updated_at.isoformat()
        if self.recipients:
            data["recipients"] = [r.to_dict() for r in self.recipients]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BurnAlert:
        slo = data.get("slo") or {}
        return cls(
            slo_id=slo.get("id") or "",
            exhaustion_minutes=data.get("exhaustion_minutes") or 0,
            id=data.get("id") or "",
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
            recipients=[NotificationRecipient.from_dict(r) for r in data.get("recipients") or []],
        )


class BurnAlerts:
    """Burn alert operations of the Honeycomb API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _base(self, dataset: str) -> str:
        return f"/1/burn_alerts/{url_encode_dataset(dataset)}"

    def list_for_slo(self, dataset: str, slo_id: str) -> list[BurnAlert]:
        """List the burn alerts of an SLO; raises NotFoundError if the SLO does not exist."""
        data = self._transport.request("GET", f"{self._base(dataset)}?slo_id={slo_id}")
        return [BurnAlert.from_dict(a) for a in data or []]

    def get(self, dataset: str, alert_id: str) -> BurnAlert:
        """Get a burn alert by its id; raises NotFoundError if it does not exist."""
        data = self._transport.request("GET", f"{self._base(dataset)}/{alert_id}")
        return BurnAlert.from_dict(data or {})

    def create(self, dataset: str, alert: BurnAlert) -> BurnAlert:
        """Create a burn alert; its id must not be set."""
        data = self._transport.request("POST", self._base(dataset), alert.to_dict())
        return BurnAlert.from_dict(data or {})

    def update(self, dataset: str, alert: BurnAlert) -> BurnAlert:
        """Update an existing burn alert."""
        data = self._transport.request("PUT", f"{self._base(dataset)}/{alert.id}", alert.to_dict())
        return BurnAlert.from_dict(data or {})

    def delete(self, dataset: str, alert_id: str) -> None:
        """Delete a burn alert."""
        self._transport.request("DELETE", f"{self._base(dataset)}/{alert_id}")