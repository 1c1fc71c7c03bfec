"""Notification recipients for triggers and burn alerts."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import StrEnum
from typing import Any

from hnyapi.transport import Transport

_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


def _parse_time(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(_EXCESS_FRACTION.sub(r"\1", value))


def _coerce(enum_cls: type[StrEnum], value: Any) -> Any:
    if not value:
        return ""
    try:
        return enum_cls(value)
    except ValueError:
        return value


class RecipientType(StrEnum):
    """Kind of recipient."""

    EMAIL = "email"
    PAGERDUTY = "pagerduty"
    SLACK = "slack"
    WEBHOOK = "webhook"
    MARKER = "marker"


class PagerDutySeverity(StrEnum):
    """Severity of a PagerDuty notification."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


def trigger_recipient_types() -> list[RecipientType]:
    """Recipient types usable with triggers."""
    return [
        RecipientType.EMAIL,
        RecipientType.PAGERDUTY,
        RecipientType.SLACK,
        RecipientType.WEBHOOK,
        RecipientType.MARKER,
    ]


def burn_alert_recipient_types() -> list[RecipientType]:
    """Recipient types usable with burn alerts."""
    return [
        RecipientType.EMAIL,
        RecipientType.PAGERDUTY,
        RecipientType.SLACK,
        RecipientType.WEBHOOK,
    ]


@dataclass
class RecipientDetails:
    """Type-specific details of a recipient; only the fields of its type are set."""

    email_address: str = ""
    marker_id: str = ""
    pagerduty_integration_key: str = ""
    pagerduty_integration_name: str = ""
    slack_channel: str = ""
    webhook_name: str = ""
    webhook_url: str = ""
    webhook_secret: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> RecipientDetails:
        data = data or {}
        return cls(**{f.name: data.get(f.name) or "" for f in fields(cls)})


@dataclass
class NotificationRecipientDetails:
    """Details of a recipient embedded in a trigger or burn alert."""

    pagerduty_severity: PagerDutySeverity | str = ""

    def to_dict(self) -> dict[str, Any]:
        if self.pagerduty_severity:
            return {"pagerduty_severity": str(self.pagerduty_severity)}
        return {}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> NotificationRecipientDetails:
        data = data or {}
        return cls(pagerduty_severity=_coerce(PagerDutySeverity, data.get("pagerduty_severity")))


@dataclass
class Recipient:
    """A team-level recipient. Timestamps are set by the API."""

    type: RecipientType | str
    details: RecipientDetails = field(default_factory=RecipientDetails)
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        data["type"] = str(self.type)
        data["details"] = self.details.to_dict()
        if self.created_at is not None:
            data["created_at"] = self.created_at.isoformat()
        if self.updated_at is not None:
            data["updated_at"] = self.updated_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Recipient:
        return cls(
            type=_coerce(RecipientType, data.get("type")),
            details=RecipientDetails.from_dict(data.get("details")),
            id=data.get("id") or "",
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
        )


@dataclass
class NotificationRecipient:
    """A recipient embedded in a trigger or burn alert."""

    type: RecipientType | str
    id: str = ""
    details: NotificationRecipientDetails | None = None
    target: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        data["type"] = str(self.type)
        if self.details is not None:
            data["details"] = self.details.to_dict()
        if self.target:
            data["target"] = self.target
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NotificationRecipient:
        details = data.get("details")
        return cls(
            type=_coerce(RecipientType, data.get("type")),
            id=data.get("id") or "",
            details=None if details is None else NotificationRecipientDetails.from_dict(details),
            target=data.get("target") or "",
        )


class Recipients:
    """Recipient operations of the Honeycomb API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(self) -> list[Recipient]:
        """List all recipients."""
        data = self._transport.request("GET", "/1/recipients")
        return [Recipient.from_dict(r) for r in data or []]

    def get(self, recipient_id: str) -> Recipient:
        """Get a recipient by its id; raises NotFoundError if it does not exist."""
        return Recipient.from_dict(self._transport.request("GET", f"/1/recipients/{recipient_id}") or {})

    def create(self, recipient: Recipient) -> Recipient:
        """Create a recipient; its id must not be set."""
        data = self._transport.request("POST", "/1/recipients", recipient.to_dict())
        return Recipient.from_dict(data or {})

    def update(self, recipient: Recipient) -> Recipient:
        """Update an existing recipient."""
        data = self._transport.request("PUT", f"/1/recipients/{recipient.id}", recipient.to_dict())
        return Recipient.from_dict(data or {})

    def delete(self, recipient_id: str) -> None:
        """Delete a recipient."""
        self._transport.request("DELETE", f"/1/recipients/{recipient_id}")