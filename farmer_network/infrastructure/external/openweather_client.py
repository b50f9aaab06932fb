"""
OpenWeather One Call client.

Returns only the parts the web client renders: hourly (next 48h), current
conditions and the location's timezone.
"""

import logging
from typing import Any, Optional

import httpx

from farmer_network.config.settings import Config
from farmer_network.domain.ports.weather_client import (
    WeatherClient,
    WeatherUnavailableError,
)

logger = logging.getLogger(__name__)


class OpenWeatherClient(WeatherClient):
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        self._http = http_client
        self._api_key = api_key if api_key is not None else Config.OPENWEATHER_KEY
        self._base_url = base_url or Config.OPENWEATHER_URL

    async def hourly_forecast(self, lat: float, lon: float) -> dict[str, Any]:
        if not self._api_key:
            raise WeatherUnavailableError("No weather key", status_code=500)

        params = {
            "lat": lat,
            "lon": lon,
            "exclude": "minutely,daily,alerts",
            "units": "metric",
            "appid": self._api_key,
        }
        try:
            response = await self._http.get(self._base_url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"[OpenWeather] Upstream returned {e.response.status_code} for ({lat}, {lon})"
            )
            raise WeatherUnavailableError(
                f"Weather provider returned {e.response.status_code}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"[OpenWeather] Request failed for ({lat}, {lon}): {e}")
            raise WeatherUnavailableError("Weather provider unavailable") from e

        return {
            "hourly": data.get("hourly", []),
            "current": data.get("current"),
            "timezone": data.get("timezone"),
        }
