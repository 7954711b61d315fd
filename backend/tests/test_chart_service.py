"""Tests for ChartService and the OptionList payload."""
import asyncio
import json

import pytest

from klinechart.core.config import settings
from klinechart.schemas.chart import ChartPeriod, ChartRequest, ColorList, OptionList
from klinechart.schemas.indicators import IndicatorConfig, MainIndicator, SubIndicator
from klinechart.services.base import EmptySeriesError, ServiceError
from klinechart.services.chart import ChartService, get_chart_service


@pytest.fixture
def service():
    return ChartService()


class TestBuildOptionList:
    def test_uses_supplied_bars(self, service, ramp_bars):
        option_list = service.build_option_list(ChartRequest(bars=ramp_bars))
        assert isinstance(option_list, OptionList)
        assert len(option_list.model_array) == 30
        assert option_list.model_array[-1].close == 129.0
        assert option_list.model_array[-1].selected_item_list

    def test_mock_series_when_bars_omitted(self, service):
        request = ChartRequest(period=ChartPeriod.ONE_HOUR, mock_count=12, seed=5)
        option_list = service.build_option_list(request)
        times = [bar.time for bar in option_list.model_array]
        assert len(times) == 12
        assert all(b - a == 3_600_000 for a, b in zip(times, times[1:]))
        assert option_list.time == ChartPeriod.ONE_HOUR

    def test_echoes_configuration(self, service, ramp_bars):
        config = IndicatorConfig.default(MainIndicator.BOLL, SubIndicator.RSI)
        request = ChartRequest(
            bars=ramp_bars, config=config, price_precision=3, volume_precision=1
        )
        option_list = service.build_option_list(request)
        assert option_list.primary == MainIndicator.BOLL
        assert option_list.second == SubIndicator.RSI
        assert option_list.price == 3
        assert option_list.volume == 1
        assert option_list.should_scroll_to_end is True
        assert option_list.target_list == config

    def test_default_palette(self, service, ramp_bars):
        option_list = service.build_option_list(ChartRequest(bars=ramp_bars))
        assert option_list.config_list["colorList"] == {
            "increaseColor": settings.increase_color,
            "decreaseColor": settings.decrease_color,
        }

    def test_caller_styling_passes_through(self, service, ramp_bars):
        request = ChartRequest(
            bars=ramp_bars,
            color_list=ColorList(increase_color=1, decrease_color=2),
            config_list={"colorList": {"increaseColor": 9}, "mainFlex": 0.6},
            draw_list={"drawType": 0},
        )
        option_list = service.build_option_list(request)
        assert option_list.config_list == {"colorList": {"increaseColor": 9}, "mainFlex": 0.6}
        assert option_list.draw_list == {"drawType": 0}
        change_row = option_list.model_array[-1].selected_item_list[5]
        assert change_row.color == 1

    def test_empty_series_rejected(self, service):
        with pytest.raises(EmptySeriesError):
            service.build_option_list(ChartRequest(bars=[]))

    def test_calls_are_independent(self, service, ramp_bars):
        first = service.build_option_list(ChartRequest(bars=ramp_bars)).to_json()
        service.build_option_list(ChartRequest(bars=ramp_bars[:5]))
        second = service.build_option_list(ChartRequest(bars=ramp_bars)).to_json()
        assert first == second


class TestServiceContract:
    def test_run_validates_empty_series(self, service):
        with pytest.raises(ServiceError) as exc:
            asyncio.run(service.run(ChartRequest(bars=[])))
        assert exc.value.service_name == "ChartService"

    def test_run_builds(self, service, ramp_bars):
        option_list = asyncio.run(service.run(ChartRequest(bars=ramp_bars)))
        assert len(option_list.model_array) == 30

    def test_singleton(self):
        assert get_chart_service() is get_chart_service()


class TestWireFormat:
    def test_to_json_shape(self, service, ramp_bars):
        payload = json.loads(service.build_option_list(ChartRequest(bars=ramp_bars)).to_json())

        assert set(payload) == {
            "modelArray",
            "shouldScrollToEnd",
            "targetList",
            "price",
            "volume",
            "primary",
            "second",
            "time",
            "configList",
        }
        assert payload["primary"] == 1
        assert payload["second"] == 3
        assert payload["time"] == 1

    def test_target_list_wire(self, service, ramp_bars):
        payload = json.loads(service.build_option_list(ChartRequest(bars=ramp_bars)).to_json())
        target = payload["targetList"]

        assert "primary" not in target
        assert target["bollN"] == "20"
        assert target["macdL"] == "26"
        assert target["kdjM2"] == "3"
        assert target["maList"][0] == {"title": "5", "selected": True, "index": 0}
        assert [slot["selected"] for slot in target["rsiList"]] == [False, False, False]

    def test_bar_wire(self, service, ramp_bars):
        payload = json.loads(service.build_option_list(ChartRequest(bars=ramp_bars)).to_json())
        bar = payload["modelArray"][-1]

        assert bar["id"] == bar["time"]
        assert bar["vol"] == bar["volume"]
        assert bar["dateString"] == bar["selectedItemList"][0]["detail"]
        assert len(bar["maList"]) == 3
        assert bar["maList"][0]["title"] == "5"
        assert len(bar["maVolumeList"]) == 2
        assert "macdDif" in bar
        assert "bollMb" not in bar
        assert "rsiList" not in bar

    def test_draw_list_omitted_when_absent(self, service, ramp_bars):
        payload = json.loads(service.build_option_list(ChartRequest(bars=ramp_bars)).to_json())
        assert "drawList" not in payload

    def test_request_accepts_camel_case(self):
        request = ChartRequest.model_validate(
            {
                "bars": [
                    {"time": 1, "open": 1, "high": 2, "low": 0.5, "close": 1.5, "volume": 10}
                ],
                "pricePrecision": 4,
                "config": {"primary": 2, "second": 4, "bollN": "10"},
            }
        )
        assert request.price_precision == 4
        assert request.config.primary == MainIndicator.BOLL
        assert request.config.boll_n == 10
