"""External service integrations."""

from farmer_network.infrastructure.external.openweather_client import OpenWeatherClient

__all__ = ["OpenWeatherClient"]
