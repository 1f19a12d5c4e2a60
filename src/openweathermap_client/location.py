import asyncio
import logging
from typing import Optional

from openweathermap_client.client import BaseClient
from openweathermap_client.config import GEOCODING_URL, Config
from openweathermap_client.models import ZipLocation
from openweathermap_client.transport import Transport, default_transport

logger = logging.getLogger("openweathermap.location")


class LocationClient(BaseClient):
    """Resolves a zip/postal code and country to coordinates"""

    def __init__(
        self,
        api_key: str,
        *,
        transport: Optional[Transport] = None,
        base_url: str = GEOCODING_URL,
    ) -> None:
        super().__init__(api_key, transport=transport)
        self.base_url = base_url

    @classmethod
    def from_config(cls, config: Config, transport: Optional[Transport] = None) -> "LocationClient":
        return cls(
            config.api_key,
            transport=transport or default_transport(timeout=config.timeout),
            base_url=config.geocoding_url,
        )

    def build_url(self, zip_code: str, country: str) -> str:
        return self._url(self.base_url, {"zip": f"{zip_code},{country}"})

    async def get_location(
        self, zip_code: str, country: str, *, cancel: Optional[asyncio.Event] = None
    ) -> ZipLocation:
        """Look up the location of ``zip_code`` in ``country`` (ISO 3166-1 alpha-2)"""
        if not zip_code.strip() or not country.strip():
            raise ValueError("zip code and country are required")
        logger.debug(f"Looking up location for {zip_code}, {country}")
        return await self._request(self.build_url(zip_code, country), ZipLocation, cancel)
