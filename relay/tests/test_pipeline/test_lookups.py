"""Tests for forecast and alert lookups against a mocked NWS API."""

import asyncio

import httpx
import pytest
import respx

from relay.ingest.nws_client import NwsClient
from relay.models.errors import NoData, UnsupportedLocation, UpstreamError
from relay.models.weather import Coordinate
from relay.pipeline.lookups import lookup_alerts, lookup_forecast

POINTS_PATH = "/points/39.7456,-104.9994"
FORECAST_PATH = "/gridpoints/BOU/62,61/forecast"
DENVER = Coordinate(39.7456, -104.9994)


def _mock_denver(nws_base: str, load_nws, forecast: dict | None = None) -> None:
    respx.get(nws_base + POINTS_PATH).mock(
        return_value=httpx.Response(200, json=load_nws("nws_points_denver.json"))
    )
    if forecast is None:
        forecast = load_nws("nws_forecast_denver.json")
    respx.get(nws_base + FORECAST_PATH).mock(return_value=httpx.Response(200, json=forecast))


class TestLookupForecast:
    @respx.mock
    def test_success(self, nws: NwsClient, nws_base: str, load_nws):
        _mock_denver(nws_base, load_nws)
        text = asyncio.run(lookup_forecast(nws, DENVER))
        assert text.startswith("Forecast for 39.7456, -104.9994:\n\n")
        assert "This Afternoon:\nTemperature: 64°F\nWind: 10 mph NW\nSunny\n---" in text
        assert "Temperature: 0°F" in text
        assert text.count("---") == 3

    @respx.mock
    def test_calls_are_sequential(self, nws: NwsClient, nws_base: str, load_nws):
        _mock_denver(nws_base, load_nws)
        asyncio.run(lookup_forecast(nws, DENVER))
        urls = [str(call.request.url) for call in respx.calls]
        assert urls == [nws_base + POINTS_PATH, nws_base + FORECAST_PATH]

    @respx.mock
    def test_missing_forecast_url(self, nws: NwsClient, nws_base: str):
        respx.get(nws_base + POINTS_PATH).mock(
            return_value=httpx.Response(200, json={"properties": {"gridId": None}})
        )
        with pytest.raises(UnsupportedLocation, match="39.7456, -104.9994"):
            asyncio.run(lookup_forecast(nws, DENVER))

    @respx.mock
    def test_points_404_is_unsupported(self, nws: NwsClient, nws_base: str):
        respx.get(f"{nws_base}/points/51.5074,-0.1278").mock(
            return_value=httpx.Response(404, json={"title": "Data Unavailable For Requested Point"})
        )
        with pytest.raises(UnsupportedLocation, match="51.5074, -0.1278"):
            asyncio.run(lookup_forecast(nws, Coordinate(51.5074, -0.1278)))

    @respx.mock
    def test_points_server_error(self, nws: NwsClient, nws_base: str):
        respx.get(nws_base + POINTS_PATH).mock(return_value=httpx.Response(500))
        with pytest.raises(UpstreamError):
            asyncio.run(lookup_forecast(nws, DENVER))

    @respx.mock
    def test_forecast_404_is_upstream_error(self, nws: NwsClient, nws_base: str, load_nws):
        respx.get(nws_base + POINTS_PATH).mock(
            return_value=httpx.Response(200, json=load_nws("nws_points_denver.json"))
        )
        respx.get(nws_base + FORECAST_PATH).mock(return_value=httpx.Response(404))
        with pytest.raises(UpstreamError, match="404"):
            asyncio.run(lookup_forecast(nws, DENVER))

    @respx.mock
    def test_no_periods(self, nws: NwsClient, nws_base: str, load_nws):
        _mock_denver(nws_base, load_nws, {"properties": {"periods": []}})
        with pytest.raises(NoData, match="No forecast periods available"):
            asyncio.run(lookup_forecast(nws, DENVER))


class TestLookupAlerts:
    @respx.mock
    def test_active_alerts(self, nws: NwsClient, nws_base: str, load_nws):
        respx.get(f"{nws_base}/alerts", params={"area": "CO"}).mock(
            return_value=httpx.Response(200, json=load_nws("nws_alerts_co.json"))
        )
        text = asyncio.run(lookup_alerts(nws, "CO"))
        assert text.startswith("Active alerts for CO:\n\n")
        assert "Event: Winter Storm Warning\nArea: Rabbit Ears Pass; Park Range" in text
        assert "Headline: No headline" in text
        assert text.count("---") == 2

    @respx.mock
    def test_no_alerts(self, nws: NwsClient, nws_base: str, load_nws):
        respx.get(f"{nws_base}/alerts", params={"area": "WY"}).mock(
            return_value=httpx.Response(200, json=load_nws("nws_alerts_empty.json"))
        )
        assert asyncio.run(lookup_alerts(nws, "WY")) == "No active alerts for WY"

    @respx.mock
    def test_upstream_failure(self, nws: NwsClient, nws_base: str):
        respx.get(f"{nws_base}/alerts", params={"area": "CO"}).mock(
            return_value=httpx.Response(503)
        )
        with pytest.raises(UpstreamError, match="503"):
            asyncio.run(lookup_alerts(nws, "CO"))
