"""JSON entry point for browser hosts.

A page running Pyodide hands :func:`get_weather_data` a JSON request and gets
a JSON document back, so no Python objects have to cross into JavaScript.
"""

import json
import logging
from typing import Optional

from pydantic import BaseModel, ValidationError

from openweathermap_client.errors import WeatherError
from openweathermap_client.location import LocationClient
from openweathermap_client.models import Units, WeatherResponse, ZipLocation
from openweathermap_client.transport import Transport
from openweathermap_client.weather import WeatherClient

logger = logging.getLogger("openweathermap.bridge")


class WeatherRequest(BaseModel):
    zip: str
    country: str
    units: Units = "metric"
    api_key: str


class WeatherResult(BaseModel):
    location: Optional[ZipLocation] = None
    weather: Optional[WeatherResponse] = None
    error: Optional[str] = None


async def get_weather_data(request_json: str, transport: Optional[Transport] = None) -> str:
    """Resolve a zip code and return its current weather as JSON.

    Lookup failures are reported in the ``error`` field of the result. A request
    that cannot be parsed raises ``ValueError``.
    """
    try:
        request = WeatherRequest.model_validate_json(request_json)
    except ValidationError as e:
        raise ValueError(f"Invalid request: {e.error_count()} validation error(s)") from None

    logger.info(f"Weather request for {request.zip}, {request.country}")
    try:
        result = await _fetch(request, transport)
    except (WeatherError, ValueError) as e:
        logger.error(f"Weather lookup failed: {e}")
        result = WeatherResult(error=str(e))
    return result.model_dump_json(by_alias=True)


async def _fetch(request: WeatherRequest, transport: Optional[Transport]) -> WeatherResult:
    location_client = LocationClient(request.api_key, transport=transport)
    try:
        location = await location_client.get_location(request.zip, request.country)
    except WeatherError as e:
        raise _prefixed(e, "Location error") from None
    logger.info(f"Location found: {location.name}")

    weather_client = WeatherClient(request.api_key, units=request.units, transport=transport)
    try:
        weather = await weather_client.get_current_weather(location.to_location())
    except WeatherError as e:
        raise _prefixed(e, "Weather error") from None
    return WeatherResult(location=location, weather=weather)


def _prefixed(error: WeatherError, prefix: str) -> WeatherError:
    return WeatherError(f"{prefix}: {error.detail}")
