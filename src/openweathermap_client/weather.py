import asyncio
import logging
from typing import Optional

from openweathermap_client.client import BaseClient
from openweathermap_client.config import WEATHER_URL, Config
from openweathermap_client.models import UNITS, Location, WeatherResponse
from openweathermap_client.transport import Transport, default_transport

logger = logging.getLogger("openweathermap.weather")


class WeatherClient(BaseClient):
    """Client for the current weather endpoint"""

    def __init__(
        self,
        api_key: str,
        *,
        units: str = "metric",
        transport: Optional[Transport] = None,
        base_url: str = WEATHER_URL,
    ) -> None:
        if units not in UNITS:
            raise ValueError(f"Unknown units '{units}', expected one of {', '.join(UNITS)}")
        super().__init__(api_key, transport=transport)
        self.units = units
        self.base_url = base_url

    @classmethod
    def from_config(cls, config: Config, transport: Optional[Transport] = None) -> "WeatherClient":
        return cls(
            config.api_key,
            units=config.units,
            transport=transport or default_transport(timeout=config.timeout),
            base_url=config.weather_url,
        )

    def build_url(self, location: Location) -> str:
        """Request URL for the current weather at ``location``"""
        return self._url(
            self.base_url,
            {
                "lat": repr(location.latitude),
                "lon": repr(location.longitude),
                "units": self.units,
                "mode": "json",
            },
        )

    async def get_current_weather(
        self, location: Location, *, cancel: Optional[asyncio.Event] = None
    ) -> WeatherResponse:
        """Fetch current conditions at ``location``.

        Args:
            location: Coordinates to look up
            cancel: Optional event; setting it abandons the in-flight request

        Raises:
            TransportError: no response was obtained
            ApiError: the provider answered with a non-success status
            DecodeError: the body does not match ``WeatherResponse``
        """
        logger.debug(f"Fetching current weather for ({location.latitude}, {location.longitude})")
        weather = await self._request(self.build_url(location), WeatherResponse, cancel)
        logger.debug(f"Current weather received for {weather.name or 'unnamed location'}")
        return weather
