from __future__ import annotations

from typing import Iterable

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="session")
def api_client() -> Iterable[TestClient]:
    from sunrise_api import app

    with TestClient(app) as client:
        yield client


def test_sun_endpoint(api_client: TestClient) -> None:
    response = api_client.get("/sun", params={"lat": 40, "date": "1994-05-08"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["ok"] is True
    assert payload["status"] == "ok"
    assert payload["twilight"] == "official"
    assert payload["sunrise_minutes"] == pytest.approx(292.24, abs=0.05)
    assert payload["sunrise_hhmm"] == "04 52"
    assert payload["sunset_hhmm"] == "19 01"
    assert payload["sunrise_utc"].startswith("1994-05-08T04:52")
    assert payload["sunrise_utc"].endswith("Z")


def test_sun_endpoint_civil_twilight(api_client: TestClient) -> None:
    response = api_client.get(
        "/sun", params={"lat": 40, "date": "1994-05-08", "twilight": "civil"}
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["zenith_deg"] == 96.0
    assert payload["sunrise_minutes"] == pytest.approx(262.32, abs=0.05)


def test_sun_endpoint_previous_day(api_client: TestClient) -> None:
    response = api_client.get(
        "/sun", params={"lat": 40, "lon": 150, "date": "1994-05-08"}
    )
    payload = response.json()
    assert payload["sunrise_minutes"] < 0
    assert payload["sunrise_hhmm"] == " N/A "
    assert payload["sunrise_utc"].startswith("1994-05-07T")


def test_polar_day(api_client: TestClient) -> None:
    response = api_client.get("/sun", params={"lat": 78.2232, "date": "2012-06-21"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "polar_day"
    assert payload["sunrise_utc"] is None
    assert payload["sunset_utc"] is None
    assert payload["sunrise_hhmm"] == " N/A "


def test_polar_night(api_client: TestClient) -> None:
    response = api_client.get(
        "/sun", params={"lat": 78.2232, "date": "2012-12-21", "twilight": "civil"}
    )
    payload = response.json()
    assert payload["status"] == "polar_night"
    assert payload["sunrise_minutes"] is None


def test_validation_error(api_client: TestClient) -> None:
    response = api_client.get(
        "/sun",
        params={
            "lat": 95,  # invalid latitude
            "date": "2025-10-21",
        },
    )
    assert response.status_code == 422
    payload = response.json()
    assert payload["code"] == "validation_error"
    assert payload["ok"] is False


def test_unknown_twilight(api_client: TestClient) -> None:
    response = api_client.get(
        "/sun", params={"lat": 10, "date": "2025-10-21", "twilight": "golden"}
    )
    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"


def test_position_endpoint(api_client: TestClient) -> None:
    response = api_client.get("/position", params={"datetime": "1992-10-13T00:00:00Z"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["julian_day"] == 2448908.5
    assert payload["right_ascension"] % 360 == pytest.approx(198.38083, abs=1e-4)
    assert payload["declination"] == pytest.approx(-7.78507, abs=1e-4)
    assert payload["equation_of_time_minutes"] == pytest.approx(13.71, abs=0.02)
    assert payload["datetime_utc"] == "1992-10-13T00:00:00Z"


def test_position_requires_timezone(api_client: TestClient) -> None:
    response = api_client.get("/position", params={"datetime": "1992-10-13T00:00:00"})
    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"


def test_health_endpoint(api_client: TestClient) -> None:
    response = api_client.get("/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["ok"] is True
    assert payload["twilights"] == ["official", "civil", "nautical", "astronomical"]


@pytest.mark.parametrize(
    "params, spilled",
    [
        ({"lat": 40, "lon": 170, "date": "0001-01-01"}, "sunrise"),
        ({"lat": 40, "lon": -170, "date": "9999-12-31"}, "sunset"),
    ],
)
def test_sun_endpoint_at_calendar_limits(api_client: TestClient, params, spilled: str) -> None:
    response = api_client.get("/sun", params=params)
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload[f"{spilled}_minutes"] is not None
    assert payload[f"{spilled}_utc"] is None


def test_unknown_route_uses_error_payload(api_client: TestClient) -> None:
    response = api_client.get("/nope")
    assert response.status_code == 404
    payload = response.json()
    assert payload["ok"] is False
    assert payload["code"] == "http_404"


def test_wrong_method_uses_error_payload(api_client: TestClient) -> None:
    response = api_client.post("/sun")
    assert response.status_code == 405
    assert response.json()["code"] == "http_405"
