from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from openweathermap_client.models import Units

WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
GEOCODING_URL = "https://api.openweathermap.org/geo/1.0/zip"


class Config(BaseSettings):
    """Client settings, read from OPENWEATHERMAP_* environment variables or .env"""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="OPENWEATHERMAP_", extra="ignore")
    api_key: str
    units: Units = "metric"
    timeout: Optional[float] = None
    weather_url: str = WEATHER_URL
    geocoding_url: str = GEOCODING_URL
