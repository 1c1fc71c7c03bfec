"""Query creation and retrieval."""

from __future__ import annotations

from hnyapi.query_spec import QuerySpec
from hnyapi.transport import Transport, url_encode_dataset


class Queries:
    """Query operations of the Honeycomb API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def get(self, dataset: str, query_id: str) -> QuerySpec:
        """Get a query by its id; raises NotFoundError if it does not exist."""
        path = f"/1/queries/{url_encode_dataset(dataset)}/{query_id}"
        return QuerySpec.from_dict(self._transport.request("GET", path) or {})

    def create(self, dataset: str, query: QuerySpec) -> QuerySpec:
        """Create a query in a dataset; its id must not be set."""
        path = f"/1/queries/{url_encode_dataset(dataset)}"
        return QuerySpec.from_dict(self._transport.request("POST", path, query.to_dict()) or {})