"""Query results: running queries and polling for their outcome."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from hnyapi.transport import Transport, url_encode_dataset

QUERY_RESULT_POLL_INTERVAL = 0.2

_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


def _parse_time(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(_EXCESS_FRACTION.sub(r"\1", value))


@dataclass
class QueryResultLinks:
    """Permalinks to a query result."""

    url: str = ""
    graph_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> QueryResultLinks:
        data = data or {}
        return cls(url=data.get("query_url") or "", graph_url=data.get("graph_image_url") or "")


@dataclass
class QueryResultData:
    """Data of a query result: a time series of (time, values) and summary rows."""

    series: list[tuple[datetime | None, dict[str, Any]]] = field(default_factory=list)
    results: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> QueryResultData:
        data = data or {}
        return cls(
            series=[
                (_parse_time(point.get("time")), dict(point.get("data") or {}))
                for point in data.get("series") or []
            ],
            results=[dict(row.get("data") or {}) for row in data.get("results") or []],
        )


@dataclass
class QueryResult:
    """A query result; complete is true once the data is populated."""

    id: str = ""
    complete: bool = False
    data: QueryResultData = field(default_factory=QueryResultData)
    links: QueryResultLinks = field(default_factory=QueryResultLinks)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QueryResult:
        return cls(
            id=data.get("id") or "",
            complete=bool(data.get("complete")),
            data=QueryResultData.from_dict(data.get("data")),
            links=QueryResultLinks.from_dict(data.get("links")),
        )


class QueryResults:
    """Query result operations of the Honeycomb API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def get(self, dataset: str, result_id: str, timeout: float | None = None) -> QueryResult:
        """Poll a query result until it is complete.

        Raises NotFoundError if there is no such result, and TimeoutError if it
        does not complete within ``timeout`` seconds.
        """
        path = f"/1/query_results/{url_encode_dataset(dataset)}/{result_id}"
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining < QUERY_RESULT_POLL_INTERVAL:
                    if remaining > 0:
                        time.sleep(remaining)
                    raise TimeoutError(f"query result {result_id} did not complete in time")
            time.sleep(QUERY_RESULT_POLL_INTERVAL)
            result = QueryResult.from_dict(self._transport.request("GET", path) or {})
            if result.complete:
                return result

    def create(self, dataset: str, query_id: str) -> QueryResult:
        """Start running the query with the given id."""
        path = f"/1/query_results/{url_encode_dataset(dataset)}"
        data = self._transport.request("POST", path, {"query_id": query_id})
        return QueryResult.from_dict(data or {})