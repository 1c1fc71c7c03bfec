"""The Honeycomb API client."""

from __future__ import annotations

from hnyapi.boards import Boards
from hnyapi.burn_alerts import BurnAlerts
from hnyapi.columns import Columns
from hnyapi.datasets import Datasets
from hnyapi.derived_columns import DerivedColumns
from hnyapi.markers import Markers
from hnyapi.queries import Queries
from hnyapi.query_annotations import QueryAnnotations
from hnyapi.query_results import QueryResults
from hnyapi.recipients import Recipients
from hnyapi.slos import SLOs
from hnyapi.transport import Config, Transport
from hnyapi.triggers import Triggers


class Client:
    """Entry point to every part of the Honeycomb API.

    Raises ValueError if the API key is missing or the API URL is invalid.
    """

    def __init__(self, config: Config) -> None:
        self.transport = Transport(config)
        self.boards = Boards(self.transport)
        self.columns = Columns(self.transport)
        self.datasets = Datasets(self.transport)
        self.derived_columns = DerivedColumns(self.transport)
        self.markers = Markers(self.transport)
        self.queries = Queries(self.transport)
        self.query_annotations = QueryAnnotations(self.transport)
        self.query_results = QueryResults(self.transport)
        self.triggers = Triggers(self.transport)
        self.slos = SLOs(self.transport)
        self.burn_alerts = BurnAlerts(self.transport)
        self.recipients = Recipients(self.transport)