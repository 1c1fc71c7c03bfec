"""Triggers: alerts fired when a query result crosses a threshold."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from hnyapi.query_spec import CalculationOp, QuerySpec
from hnyapi.recipients import NotificationRecipient
from hnyapi.transport import Transport, url_encode_dataset


def _coerce(enum_cls: type[StrEnum], value: Any) -> Any:
    if not value:
        return ""
    try:
        return enum_cls(value)
    except ValueError:
        return value


class TriggerThresholdOp(StrEnum):
    """Operator of a trigger threshold."""

    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="


class TriggerAlertType(StrEnum):
    """Scheduling behaviour of a trigger; on_change is the API default."""

    ON_CHANGE = "on_change"
    ON_TRUE = "on_true"


@dataclass
class TriggerThreshold:
    """The threshold a trigger's query result is compared against."""

    op: TriggerThresholdOp | str
    value: float

    def to_dict(self) -> dict[str, Any]:
        return {"op": str(self.op), "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TriggerThreshold:
        return cls(
            op=_coerce(TriggerThresholdOp, data.get("op")),
            value=float(data.get("value") or 0),
        )


@dataclass
class Trigger:
    """A Honeycomb trigger.

    The query must satisfy matches_trigger_subset. Frequency is in seconds,
    a multiple of 60 between 60 and 86400; the API defaults it to 900.
    """

    name: str
    id: str = ""
    description: str = ""
    disabled: bool = False
    query: QuerySpec | None = None
    query_id: str = ""
    alert_type: TriggerAlertType | str = ""
    threshold: TriggerThreshold | None = None
    frequency: int = 0
    recipients: list[NotificationRecipient] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Encode for the API; when both a query and a query id are set, only the id is sent."""
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        data["name"] = self.name
        if self.description:
            data["description"] = self.description
        data["disabled"] = self.disabled
        if self.query is not None and not self.query_id:
            data["query"] = self.query.to_dict()
        if self.query_id:
            data["query_id"] = self.query_id
        if self.alert_type:
            data["alert_type"] = str(self.alert_type)
        data["threshold"] = None if self.threshold is None else self.threshold.to_dict()
        if self.frequency:
            data["frequency"] = self.frequency
        if self.recipients:
            data["recipients"] = [r.to_dict() for r in self.recipients]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Trigger:
        query = data.get("query")
        threshold = data.get("threshold")
        return cls(
            name=data.get("name") or "",
            id=data.get("id") or "",
            description=data.get("description") or "",
            disabled=bool(data.get("disabled")),
            query=None if query is None else QuerySpec.from_dict(query),
            query_id=data.get("query_id") or "",
            alert_type=_coerce(TriggerAlertType, data.get("alert_type")),
            threshold=None if threshold is None else TriggerThreshold.from_dict(threshold),
            frequency=data.get("frequency") or 0,
            recipients=[NotificationRecipient.from_dict(r) for r in data.get("recipients") or []],
        )


class Triggers:
    """Trigger operations of the Honeycomb API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _base(self, dataset: str) -> str:
        return f"/1/triggers/{url_encode_dataset(dataset)}"

    def list(self, dataset: str) -> list[Trigger]:
        """List all triggers in a dataset."""
        data = self._transport.request("GET", self._base(dataset))
        return [Trigger.from_dict(t) for t in data or []]

    def get(self, dataset: str, trigger_id: str) -> Trigger:
        """Get a trigger by its id; raises NotFoundError if it does not exist."""
        data = self._transport.request("GET", f"{self._base(dataset)}/{trigger_id}")
        return Trigger.from_dict(data or {})

    def create(self, dataset: str, trigger: Trigger) -> Trigger:
        """Create a trigger; its id must not be set."""
        data = self._transport.request("POST", self._base(dataset), trigger.to_dict())
        return Trigger.from_dict(data or {})

    def update(self, dataset: str, trigger: Trigger) -> Trigger:
        """Update a trigger; unset optional fields revert to defaults, except disabled."""
        data = self._transport.request("PUT", f"{self._base(dataset)}/{trigger.id}", trigger.to_dict())
        return Trigger.from_dict(data or {})

    def delete(self, dataset: str, trigger_id: str) -> None:
        """Delete a trigger."""
        self._transport.request("DELETE", f"{self._base(dataset)}/{trigger_id}")


def matches_trigger_subset(query: QuerySpec) -> None:
    """Check that a query is usable in a trigger; raises ValueError if not.

    The query must hold exactly one calculation, which is not HEATMAP, and
    may set neither orders nor a limit.
    """
    if len(query.calculations) != 1:
        raise ValueError("a trigger query should contain exactly one calculation")
    if query.calculations[0].op == CalculationOp.HEATMAP:
        raise ValueError("a trigger query may not contain a HEATMAP calculation")
    if query.orders:
        raise ValueError("orders is not allowed in a trigger query")
    if query.limit is not None:
        raise ValueError("limit is not allowed in a trigger query")