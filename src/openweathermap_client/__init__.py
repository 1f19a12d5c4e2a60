"""Typed async client for the OpenWeatherMap API."""

__version__ = "0.1.0"

from openweathermap_client.errors import ApiError, DecodeError, TransportError, WeatherError
from openweathermap_client.location import LocationClient
from openweathermap_client.models import Location, WeatherResponse, ZipLocation
from openweathermap_client.transport import BrowserTransport, HttpxTransport, Transport, TransportResponse
from openweathermap_client.weather import WeatherClient

__all__ = [
    "ApiError",
    "BrowserTransport",
    "DecodeError",
    "HttpxTransport",
    "Location",
    "LocationClient",
    "Transport",
    "TransportError",
    "TransportResponse",
    "WeatherClient",
    "WeatherError",
    "WeatherResponse",
    "ZipLocation",
]
