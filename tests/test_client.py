import pytest
import responses

from hnyapi.client import Client
from hnyapi.transport import Config, HoneycombError

BASE = "https://api.example.com"


@pytest.fixture
def api():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_list_boards(api):
    api.add(
        responses.GET,
        f"{BASE}/1/boards",
        json=[
            {"id": "b1", "name": "First", "queries": [{"query_id": "q1"}, {"query_id": "q2"}]},
            {"id": "b2", "name": "Second", "queries": []},
        ],
    )
    client = Client(Config(api_key="placeholder", api_url=BASE))

    boards = client.boards.list()

    summary = [(b.name, len(b.queries)) for b in boards]
    assert summary == [("First", 2), ("Second", 0)]
    assert api.calls[0].request.headers["X-Honeycomb-Team"] == "placeholder"


def test_default_api_url(api):
    api.add(responses.GET, "https://api.honeycomb.io/1/recipients", json=[])
    client = Client(Config(api_key="placeholder"))

    assert client.recipients.list() == []
    assert api.calls[0].request.url == "https://api.honeycomb.io/1/recipients"


def test_services_share_transport():
    client = Client(Config(api_key="placeholder", api_url=BASE))
    assert client.triggers._transport is client.transport
    assert client.slos._transport is client.transport


def test_missing_api_key():
    with pytest.raises(ValueError, match="api_key must be configured"):
        Client(Config(api_key=""))


def test_invalid_api_url():
    with pytest.raises(ValueError, match="could not parse api_url"):
        Client(Config(api_key="placeholder", api_url="cache_object:foo/bar"))


def test_error_response(api):
    api.add(
        responses.POST,
        f"{BASE}/1/boards/",
        status=400,
        json={"status": 400, "error": "request body should not be empty"},
    )
    client = Client(Config(api_key="placeholder", api_url=BASE))

    with pytest.raises(HoneycombError) as excinfo:
        client.transport.request("POST", "/1/boards/")
    assert str(excinfo.value) == "400 Bad Request: request body should not be empty"