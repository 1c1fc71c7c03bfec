import json
from datetime import datetime, timezone

import pytest
import responses

from hnyapi.query_annotations import QueryAnnotation, QueryAnnotations
from hnyapi.transport import Config, NotFoundError, Transport

BASE = "https://api.honeycomb.io/1/query_annotations/my-dataset"


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


@pytest.fixture
def annotations():
    return QueryAnnotations(Transport(Config(api_key="placeholder")))


ANNOTATION_JSON = {
    "id": "a1",
    "name": "Query created by a test",
    "description": "This derived column is created by a test",
    "query_id": "q1",
}


def test_create(rsps, annotations):
    rsps.add(responses.POST, BASE, json=ANNOTATION_JSON)
    data = QueryAnnotation(
        name="Query created by a test",
        description="This derived column is created by a test",
        query_id="q1",
    )

    result = annotations.create("my-dataset", data)

    assert json.loads(rsps.calls[0].request.body) == {
        "name": "Query created by a test",
        "description": "This derived column is created by a test",
        "query_id": "q1",
    }
    data.id = result.id
    assert result == data


def test_list(rsps, annotations):
    rsps.add(responses.GET, BASE, json=[ANNOTATION_JSON])
    assert QueryAnnotation.from_dict(ANNOTATION_JSON) in annotations.list("my-dataset")


def test_get(rsps, annotations):
    rsps.add(responses.GET, f"{BASE}/a1", json=ANNOTATION_JSON)
    assert annotations.get("my-dataset", "a1") == QueryAnnotation.from_dict(ANNOTATION_JSON)


def test_update(rsps, annotations):
    updated = dict(
        ANNOTATION_JSON,
        name="This is a new name for the query created by a test",
        description="This is a new description",
    )
    rsps.add(responses.PUT, f"{BASE}/a1", json=updated)
    data = QueryAnnotation(
        id="a1",
        name="This is a new name for the query created by a test",
        description="This is a new description",
        query_id="q1",
    )

    result = annotations.update("my-dataset", data)

    assert result == data
    assert json.loads(rsps.calls[0].request.body)["id"] == "a1"


def test_delete(rsps, annotations):
    rsps.add(responses.DELETE, f"{BASE}/a1", status=204)
    assert annotations.delete("my-dataset", "a1") is None
    assert rsps.calls[0].request.url == f"{BASE}/a1"


def test_get_not_found(rsps, annotations):
    rsps.add(responses.GET, f"{BASE}/a1", status=404)
    with pytest.raises(NotFoundError):
        annotations.get("my-dataset", "a1")


def test_timestamps_use_dashed_keys():
    annotation = QueryAnnotation.from_dict(
        dict(ANNOTATION_JSON, **{"created-at": "2022-10-05T12:00:00Z"})
    )
    assert annotation.created_at == datetime(2022, 10, 5, 12, tzinfo=timezone.utc)
    assert "created-at" in annotation.to_dict()
    assert QueryAnnotation.from_dict(annotation.to_dict()) == annotation