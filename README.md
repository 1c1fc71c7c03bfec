# hnyapi

A Python client for the Honeycomb REST API. It covers boards, columns,
datasets, derived columns, markers, queries, query annotations, query
results, recipients, SLOs, burn alerts and triggers. Every API object is a
dataclass with `to_dict()` and `from_dict()` for its JSON form.

## Installation

```
pip install hnyapi
```

## Configuration

`hnyapi.transport.Config` holds the client's settings. Blank fields take
the defaults:

- `api_key` is required.
- `api_url` defaults to `https://api.honeycomb.io`.
- `user_agent` defaults to `hnyapi`.
- `debug`, when set, logs every request and response at INFO level on the
  `hnyapi.transport` logger.

`Config.merge(other)` copies every non-blank value of `other` into the
config. `debug` ends up set if either config has it set.

`hnyapi.client.Client(config)` raises `ValueError` in two cases: the API key
is empty, or the API URL has no scheme and host.

```python
from hnyapi.client import Client
from hnyapi.transport import Config

client = Client(Config(api_key="placeholder"))

for i, board in enumerate(client.boards.list()):
    print(f"{i}| {board.name} ({len(board.queries)} queries)")
```

## Resources

Each resource is an attribute of the client:

| Attribute                  | Operations                                                        |
|----------------------------|-------------------------------------------------------------------|
| `client.boards`            | `list`, `get`, `create`, `update`, `delete`                       |
| `client.columns`           | `list`, `get`, `get_by_key_name`, `create`, `update`, `delete`    |
| `client.datasets`          | `list`, `get`, `create`, `update`                                 |
| `client.derived_columns`   | `list`, `get`, `get_by_alias`, `create`, `update`, `delete`       |
| `client.markers`           | `list`, `get`, `create`, `update`, `delete`                       |
| `client.queries`           | `get`, `create`                                                   |
| `client.query_annotations` | `list`, `get`, `create`, `update`, `delete`                       |
| `client.query_results`     | `get`, `create`                                                   |
| `client.recipients`        | `list`, `get`, `create`, `update`, `delete`                       |
| `client.slos`              | `list`, `get`, `create`, `update`, `delete`                       |
| `client.burn_alerts`       | `list_for_slo`, `get`, `create`, `update`, `delete`               |
| `client.triggers`          | `list`, `get`, `create`, `update`, `delete`                       |

Methods that work within a dataset take the dataset name as their first
argument. Before the name goes into the URL, every `/` in it is replaced by
`-`. `hnyapi.transport.url_encode_dataset` does this replacement.

Some operations behave differently from the rest:

- The API has no endpoint for a single marker. `Markers.get` therefore lists
  all markers of the dataset and picks the one with the matching id.
- `Datasets.update` sends the same request as `Datasets.create`. Any optional
  field left unset goes back to its default.
- `recipients.trigger_recipient_types()` lists the recipient types that
  triggers accept, and `recipients.burn_alert_recipient_types()` lists those
  that burn alerts accept. Burn alerts take every type except `marker`.

## Building and running a query

```python
from hnyapi.query_spec import CalculationOp, CalculationSpec, QuerySpec

spec = QuerySpec(
    calculations=[CalculationSpec(op=CalculationOp.COUNT)],
    time_range=86400,
)
query = client.queries.create("my-dataset", spec)

result = client.query_results.create("my-dataset", query.id)
result = client.query_results.get("my-dataset", result.id, timeout=30)
print(result.links.url)
for row in result.data.results:
    print(row)
```

`QueryResults.get` polls the result every 0.2 seconds until it is complete.
Without a timeout it polls indefinitely. With a timeout it raises
`TimeoutError` if the result is not complete in time.

## Triggers

`hnyapi.triggers.matches_trigger_subset(query)` checks whether a query can be
used in a trigger. It raises `ValueError` with the reason unless all of these
hold:

- the query has exactly one calculation;
- that calculation is not `HEATMAP`;
- the query has no orders;
- the query has no limit.

If a `Trigger` has both a `query_id` and an inline `query`, `Trigger.to_dict`
sends only the `query_id`.

## Errors

- `hnyapi.transport.NotFoundError` is raised when the API answers 404.
- `hnyapi.transport.HoneycombError` is raised for any other response outside
  the 2xx range. `NotFoundError` is a subclass of it.
  - Its message is the HTTP status line. If the response body carries an
    error text, that text follows the status line.
  - Its `status` attribute holds the status code.

## Scope

This is a library only. It has no command-line tool. It keeps no local state
and does not cache anything: every call is a single request, or a series of
polls, made against the API.