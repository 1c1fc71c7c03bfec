"""Boards: collections of queries displayed together in the Honeycomb UI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, TypeVar

from hnyapi.transport import Transport

_E = TypeVar("_E", bound=StrEnum)


def _coerce(enum_cls: type[_E], value: Any) -> _E | Any:
    if not value:
        return value or ""
    try:
        return enum_cls(value)
    except ValueError:
        return value


class BoardStyle(StrEnum):
    """How a board is displayed in the UI."""

    LIST = "list"
    VISUAL = "visual"


class BoardColumnStyle(StrEnum):
    """Column layout of a board; list-style boards cannot set one."""

    MULTI = "multi"
    SINGLE = "single"


class BoardQueryStyle(StrEnum):
    """How a query is displayed on a board."""

    GRAPH = "graph"
    TABLE = "table"
    COMBO = "combo"


_GRAPH_SETTING_KEYS = {
    "omit_missing_values": "omit_missing_values",
    "use_stacked_graphs": "stacked_graphs",
    "use_log_scale": "log_scale",
    "use_utc_xaxis": "utc_xaxis",
    "hide_markers": "hide_markers",
}


@dataclass
class BoardGraphSettings:
    """Display settings of a single graph on a board."""

    omit_missing_values: bool = False
    use_stacked_graphs: bool = False
    use_log_scale: bool = False
    use_utc_xaxis: bool = False
    hide_markers: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {key: True for attr, key in _GRAPH_SETTING_KEYS.items() if getattr(self, attr)}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> BoardGraphSettings:
        data = data or {}
        return cls(**{attr: bool(data.get(key, False)) for attr, key in _GRAPH_SETTING_KEYS.items()})


@dataclass
class BoardQuery:
    """A query shown on a board."""

    query_id: str = ""
    caption: str = ""
    query_style: BoardQueryStyle | str = ""
    dataset: str = ""
    query_annotation_id: str = ""
    graph_settings: BoardGraphSettings = field(default_factory=BoardGraphSettings)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.caption:
            data["caption"] = self.caption
        if self.query_style:
            data["query_style"] = str(self.query_style)
        if self.dataset:
            data["dataset"] = self.dataset
        if self.query_id:
            data["query_id"] = self.query_id
        if self.query_annotation_id:
            data["query_annotation_id"] = self.query_annotation_id
        data["graph_settings"] = self.graph_settings.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BoardQuery:
        return cls(
            query_id=data.get("query_id") or "",
            caption=data.get("caption") or "",
            query_style=_coerce(BoardQueryStyle, data.get("query_style")),
            dataset=data.get("dataset") or "",
            query_annotation_id=data.get("query_annotation_id") or "",
            graph_settings=BoardGraphSettings.from_dict(data.get("graph_settings")),
        )


@dataclass
class Board:
    """A Honeycomb board. The id is assigned by the API."""

    name: str
    id: str = ""
    description: str = ""
    column_layout: BoardColumnStyle | str = ""
    style: BoardStyle | str = ""
    queries: list[BoardQuery] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        data["name"] = self.name
        if self.description:
            data["description"] = self.description
        if self.column_layout:
            data["column_layout"] = str(self.column_layout)
        if self.style:
            data["style"] = str(self.style)
        data["queries"] = [q.to_dict() for q in self.queries]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Board:
        return cls(
            name=data.get("name") or "",
            id=data.get("id") or "",
            description=data.get("description") or "",
            column_layout=_coerce(BoardColumnStyle, data.get("column_layout")),
            style=_coerce(BoardStyle, data.get("style")),
            queries=[BoardQuery.from_dict(q) for q in data.get("queries") or []],
        )


class Boards:
    """Board operations of the Honeycomb API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(self) -> list[Board]:
        """List all boards."""
        data = self._transport.request("GET", "/1/boards")
        return [Board.from_dict(b) for b in data or []]

    def get(self, board_id: str) -> Board:
        """Get a board by its id; raises NotFoundError if it does not exist."""
        return Board.from_dict(self._transport.request("GET", f"/1/boards/{board_id}") or {})

    def create(self, board: Board) -> Board:
        """Create a new board; its id must not be set."""
        return Board.from_dict(self._transport.request("POST", "/1/boards", board.to_dict()) or {})

    def update(self, board: Board) -> Board:
        """Update an existing board."""
        data = self._transport.request("PUT", f"/1/boards/{board.id}", board.to_dict())
        return Board.from_dict(data or {})

    def delete(self, board_id: str) -> None:
        """Delete a board."""
        self._transport.request("DELETE", f"/1/boards/{board_id}")