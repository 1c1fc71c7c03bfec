import json
from datetime import datetime, timezone

import pytest
import responses
from responses import matchers

from hnyapi.burn_alerts import BurnAlert, BurnAlerts
from hnyapi.recipients import NotificationRecipient, RecipientType
from hnyapi.transport import Config, NotFoundError, Transport

BASE = "https://api.example.com"
DATASET = "dataset"
ALERT_URL = f"{BASE}/1/burn_alerts/dataset"


@pytest.fixture
def api():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def burn_alerts():
    return BurnAlerts(Transport(Config(api_key="placeholder", api_url=BASE)))


def _payload(**overrides):
    payload = {
        "id": "ba1",
        "exhaustion_minutes": 24 * 60,
        "slo": {"id": "slo1"},
        "created_at": "2022-10-01T12:00:00Z",
        "updated_at": "2022-10-01T12:00:00Z",
        "recipients": [
            {"id": "r1", "type": "email", "target": "testalert@example.com"}
        ],
    }
    payload.update(overrides)
    return payload


def test_create(api, burn_alerts):
    api.add(responses.POST, ALERT_URL, json=_payload())
    data = BurnAlert(
        exhaustion_minutes=24 * 60,
        slo_id="slo1",
        recipients=[NotificationRecipient(type="email", target="testalert@example.com")],
    )

    alert = burn_alerts.create(DATASET, data)

    assert json.loads(api.calls[0].request.body) == {
        "exhaustion_minutes": 1440,
        "slo": {"id": "slo1"},
        "recipients": [{"type": "email", "target": "testalert@example.com"}],
    }
    assert alert.id == "ba1"
    assert alert.created_at == datetime(2022, 10, 1, 12, tzinfo=timezone.utc)
    data.id = alert.id
    data.created_at = alert.created_at
    data.updated_at = alert.updated_at
    data.recipients[0].id = alert.recipients[0].id
    assert alert == data
    assert alert.recipients[0].type == RecipientType.EMAIL


def test_get(api, burn_alerts):
    api.add(responses.GET, f"{ALERT_URL}/ba1", json=_payload())

    alert = burn_alerts.get(DATASET, "ba1")

    assert alert == BurnAlert.from_dict(_payload())


def test_update(api, burn_alerts):
    alert = BurnAlert.from_dict(_payload())
    alert.exhaustion_minutes = 4 * 60
    api.add(
        responses.PUT,
        f"{ALERT_URL}/ba1",
        json=_payload(exhaustion_minutes=240, updated_at="2022-10-02T00:00:00Z"),
    )

    result = burn_alerts.update(DATASET, alert)

    assert json.loads(api.calls[0].request.body)["exhaustion_minutes"] == 240
    alert.updated_at = result.updated_at
    assert result == alert


def test_list_for_slo(api, burn_alerts):
    api.add(
        responses.GET,
        ALERT_URL,
        json=[_payload(recipients=[])],
        match=[matchers.query_param_matcher({"slo_id": "slo1"})],
    )

    results = burn_alerts.list_for_slo(DATASET, "slo1")

    assert len(results) == 1
    assert results[0].id == "ba1"
    assert results[0].recipients == []


def test_delete_then_not_found(api, burn_alerts):
    api.add(responses.DELETE, f"{ALERT_URL}/ba1", status=204)
    api.add(responses.GET, f"{ALERT_URL}/ba1", status=404)

    burn_alerts.delete(DATASET, "ba1")
    with pytest.raises(NotFoundError):
        burn_alerts.get(DATASET, "ba1")
    assert api.calls[0].request.method == "DELETE"


def test_round_trip():
    alert = BurnAlert.from_dict(_payload())
    assert BurnAlert.from_dict(alert.to_dict()) == alert