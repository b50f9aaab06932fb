"""
Weather Client Port - Interface for the hourly forecast provider.
Implementation: farmer_network/infrastructure/external/openweather_client.py
"""

from abc import ABC, abstractmethod
from typing import Any


class WeatherUnavailableError(Exception):
    """The forecast could not be fetched. Carries the HTTP status to report."""

    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.status_code = status_code


class WeatherClient(ABC):
    @abstractmethod
    async def hourly_forecast(self, lat: float, lon: float) -> dict[str, Any]:
        """Return {"hourly": [...], "current": {...}, "timezone": str}."""
        ...
