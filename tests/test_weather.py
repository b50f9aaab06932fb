"""Weather proxy: route validation and the OpenWeather client."""

import asyncio

import httpx
import pytest

from farmer_network.domain.ports.weather_client import WeatherUnavailableError
from farmer_network.infrastructure.external import OpenWeatherClient

ONE_CALL = {
    "lat": 57.87,
    "lon": 11.97,
    "timezone": "Europe/Stockholm",
    "current": {"temp": 11.2},
    "hourly": [{"dt": 1, "temp": 11.0}, {"dt": 2, "temp": 10.5}],
}


def _forecast(handler, api_key="k", lat=57.87, lon=11.97):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            client = OpenWeatherClient(http, api_key=api_key, base_url="https://weather.test/onecall")
            return await client.hourly_forecast(lat, lon)

    return asyncio.run(run())


def test_client_returns_hourly_current_timezone():
    seen = {}

    def handler(request):
        seen.update(request.url.params)
        return httpx.Response(200, json=ONE_CALL)

    result = _forecast(handler)
    assert result == {
        "hourly": ONE_CALL["hourly"],
        "current": ONE_CALL["current"],
        "timezone": "Europe/Stockholm",
    }
    assert seen["exclude"] == "minutely,daily,alerts"
    assert seen["units"] == "metric"
    assert seen["appid"] == "k"


def test_client_maps_upstream_failures_to_502():
    with pytest.raises(WeatherUnavailableError) as exc:
        _forecast(lambda request: httpx.Response(401, json={"message": "bad key"}))
    assert exc.value.status_code == 502

    def boom(request):
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(WeatherUnavailableError) as exc:
        _forecast(boom)
    assert exc.value.status_code == 502


def test_client_without_key_never_calls_upstream():
    def handler(request):
        raise AssertionError("should not be called")

    with pytest.raises(WeatherUnavailableError) as exc:
        _forecast(handler, api_key="")
    assert exc.value.status_code == 500
    assert str(exc.value) == "No weather key"


def test_route_validates_coordinates(client):
    assert client.get("/api/weather/hourly?lat=abc&lon=1").status_code == 400
    assert client.get("/api/weather/hourly?lon=1").status_code == 400
    res = client.get("/api/weather/hourly?lat=91&lon=1")
    assert res.status_code == 400
    assert res.json() == {"error": "lat must be between -90 and 90"}


def test_route_reports_missing_key(client):
    res = client.get("/api/weather/hourly?lat=57.8&lon=11.9")
    assert res.status_code == 500
    assert res.json() == {"error": "No weather key"}


def test_liveness_routes(client):
    assert client.get("/").status_code == 200
    assert client.get("/health").json() == {"status": "healthy"}
    assert "message" in client.get("/api/assistant").json()
