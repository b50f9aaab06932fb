"""
GetHourlyForecast Query - proxies the weather provider for a coordinate.

Coordinates are checked here so the provider is never called with junk.
"""

from dataclasses import dataclass
from typing import Any

from farmer_network.application.common.interfaces import Query, QueryHandler
from farmer_network.domain.exceptions import DomainValidationError
from farmer_network.domain.ports.weather_client import WeatherClient


@dataclass(frozen=True)
class GetHourlyForecastQuery(Query[dict[str, Any]]):
    lat: float
    lon: float


class GetHourlyForecastHandler(QueryHandler[dict[str, Any]]):
    def __init__(self, weather_client: WeatherClient):
        self._weather_client = weather_client

    async def execute(self, query: GetHourlyForecastQuery) -> dict[str, Any]:
        if not -90 <= query.lat <= 90:
            raise DomainValidationError("lat must be between -90 and 90")
        if not -180 <= query.lon <= 180:
            raise DomainValidationError("lon must be between -180 and 180")
        return await self._weather_client.hourly_forecast(query.lat, query.lon)
