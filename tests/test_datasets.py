import json
from datetime import datetime, timezone

import pytest
import responses

from hnyapi.datasets import Dataset, Datasets
from hnyapi.transport import Config, NotFoundError, Transport, url_encode_dataset

API = "https://api.honeycomb.io"
STAMP = "2022-03-04T05:06:07Z"
DATASET_NAME = "team/test-dataset"


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


@pytest.fixture
def datasets():
    return Datasets(Transport(Config(api_key="placeholder")))


def _returned(**extra):
    body = {
        "name": DATASET_NAME,
        "slug": url_encode_dataset(DATASET_NAME),
        "last_written_at": STAMP,
        "created_at": STAMP,
    }
    body.update(extra)
    return body


def test_create(rsps, datasets):
    current = Dataset(name=DATASET_NAME, slug=url_encode_dataset(DATASET_NAME))
    rsps.add(responses.POST, f"{API}/1/datasets", json=_returned())

    created = datasets.create(current)

    assert json.loads(rsps.calls[0].request.body) == {
        "name": DATASET_NAME,
        "slug": "team-test-dataset",
    }
    assert created.created_at == datetime(2022, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
    current.last_written_at = created.last_written_at
    current.created_at = created.created_at
    assert created == current


def test_list(rsps, datasets):
    rsps.add(responses.GET, f"{API}/1/datasets", json=[_returned(), {"name": "other", "slug": "other"}])
    result = datasets.list()
    assert Dataset.from_dict(_returned()) in result
    assert [d.slug for d in result] == ["team-test-dataset", "other"]


def test_get(rsps, datasets):
    rsps.add(responses.GET, f"{API}/1/datasets/team-test-dataset", json=_returned())
    assert datasets.get("team-test-dataset") == Dataset.from_dict(_returned())


def test_get_not_found(rsps, datasets):
    rsps.add(responses.GET, f"{API}/1/datasets/does-not-exist", status=404)
    with pytest.raises(NotFoundError):
        datasets.get("does-not-exist")


def test_update_posts_to_collection(rsps, datasets):
    update = Dataset(
        name=DATASET_NAME,
        slug=url_encode_dataset(DATASET_NAME),
        description="buzzing with data",
        expand_json_depth=3,
    )
    rsps.add(
        responses.POST,
        f"{API}/1/datasets",
        json=_returned(description="buzzing with data", expand_json_depth=3),
    )

    result = datasets.update(update)

    sent = json.loads(rsps.calls[0].request.body)
    assert sent["description"] == "buzzing with data"
    assert sent["expand_json_depth"] == 3
    assert result.description == "buzzing with data"
    assert result.expand_json_depth == 3


def test_zero_depth_is_omitted():
    assert Dataset(name="ds").to_dict() == {"name": "ds"}


def test_round_trip():
    dataset = Dataset.from_dict(_returned(description="d", expand_json_depth=2))
    assert Dataset.from_dict(dataset.to_dict()) == dataset