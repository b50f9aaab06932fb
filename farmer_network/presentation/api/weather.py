"""
Weather API Router - proxies the hourly forecast so the API key stays server-side.
"""

from logging import getLogger
from typing import Any
from fastapi import APIRouter, HTTPException, Query, status
from dishka.integrations.fastapi import FromDishka, inject
from farmer_network.application.queries.weather import (
    GetHourlyForecastQuery,
    GetHourlyForecastHandler,
)
from farmer_network.domain.exceptions import DomainValidationError
from farmer_network.domain.ports.weather_client import WeatherUnavailableError

logger = getLogger(__name__)

router = APIRouter(prefix="/api/weather", tags=["weather"])


@router.get("/hourly", status_code=status.HTTP_200_OK)
@inject
async def hourly_forecast(
    handler: FromDishka[GetHourlyForecastHandler],
    lat: float = Query(...),
    lon: float = Query(...),
) -> dict[str, Any]:
    """Returns {hourly, current, timezone}."""
    try:
        return await handler.execute(GetHourlyForecastQuery(lat=lat, lon=lon))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except WeatherUnavailableError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e
