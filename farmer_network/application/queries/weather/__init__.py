"""Weather queries."""

from farmer_network.application.queries.weather.get_hourly_forecast import (
    GetHourlyForecastQuery,
    GetHourlyForecastHandler,
)

__all__ = ["GetHourlyForecastQuery", "GetHourlyForecastHandler"]
