"""HTTP tests for the chart endpoints."""
import pytest
from fastapi.testclient import TestClient

from klinechart.main import app


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as test_client:
        yield test_client


def _bar(time, close, open_=None):
    open_ = close if open_ is None else open_
    return {
        "time": time,
        "open": open_,
        "high": max(open_, close),
        "low": min(open_, close),
        "close": close,
        "volume": 100,
    }


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["services"] == {"IndicatorService": True, "ChartService": True}

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/docs"


class TestPeriods:
    def test_lists_all_periods(self, client):
        periods = client.get("/api/v1/chart/periods").json()
        assert len(periods) == 12
        assert periods[0] == {"value": -1, "label": "Minute", "intervalMs": 60_000}
        assert periods[-1]["label"] == "1M"


class TestGetOptionList:
    def test_defaults(self, client):
        response = client.get("/api/v1/chart/option-list", params={"count": 50, "seed": 1})
        assert response.status_code == 200
        payload = response.json()
        assert len(payload["modelArray"]) == 50
        assert payload["primary"] == 1
        assert payload["second"] == 3
        assert payload["price"] == 2
        assert payload["volume"] == 0

    def test_pane_selection(self, client):
        payload = client.get(
            "/api/v1/chart/option-list",
            params={"primary": 2, "second": 6, "period": 9, "count": 30, "seed": 1},
        ).json()
        bar = payload["modelArray"][-1]
        assert "bollUp" in bar
        assert len(bar["wrList"]) == 1
        assert "maList" not in bar
        assert payload["targetList"]["wrList"][0]["selected"] is True
        assert payload["time"] == 9

    def test_seed_is_reproducible(self, client):
        params = {"count": 10, "seed": 99}
        first = client.get("/api/v1/chart/option-list", params=params).json()
        second = client.get("/api/v1/chart/option-list", params=params).json()
        first_closes = [bar["close"] for bar in first["modelArray"]]
        second_closes = [bar["close"] for bar in second["modelArray"]]
        assert first_closes == second_closes

    @pytest.mark.parametrize(
        "params", [{"primary": 9}, {"second": 1}, {"period": 0}]
    )
    def test_unknown_codes(self, client, params):
        response = client.get("/api/v1/chart/option-list", params=params)
        assert response.status_code == 400

    def test_count_out_of_range(self, client):
        response = client.get("/api/v1/chart/option-list", params={"count": 0})
        assert response.status_code == 422


class TestPostOptionList:
    def test_supplied_bars(self, client):
        body = {
            "bars": [_bar(1_700_000_000_000, 90.0, 100.0), _bar(1_700_000_060_000, 95.0, 90.0)],
            "config": {"primary": 1, "second": 5, "rsiList": [
                {"title": "1", "selected": True, "index": 0}
            ]},
        }
        response = client.post("/api/v1/chart/option-list", json=body)
        assert response.status_code == 200
        bars = response.json()["modelArray"]
        assert len(bars) == 2
        assert bars[1]["rsiList"][0]["value"] == 100 - 100 / 101
        change = bars[0]["selectedItemList"][5]
        assert change["title"] == "Change"
        assert change["detail"] == "-10.00"

    def test_empty_series(self, client):
        response = client.post("/api/v1/chart/option-list", json={"bars": []})
        assert response.status_code == 400
        assert response.json()["detail"] == {
            "service": "ChartService",
            "message": "Bar series is empty",
        }

    def test_mock_series_when_no_bars(self, client):
        response = client.post(
            "/api/v1/chart/option-list", json={"mockCount": 15, "seed": 3, "period": 4}
        )
        assert response.status_code == 200
        assert len(response.json()["modelArray"]) == 15

    def test_bad_slot_config(self, client):
        body = {
            "bars": [_bar(1, 10.0)],
            "config": {"wrList": [{"title": "14", "selected": True, "index": 3}]},
        }
        response = client.post("/api/v1/chart/option-list", json=body)
        assert response.status_code == 422

    def test_negative_volume(self, client):
        bar = _bar(1, 10.0)
        bar["volume"] = -1
        response = client.post("/api/v1/chart/option-list", json={"bars": [bar]})
        assert response.status_code == 422
