from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Units = Literal["standard", "metric", "imperial"]
UNITS = ("standard", "metric", "imperial")


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Location(_Model):
    """Geographic coordinates"""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class ZipLocation(_Model):
    """Result of a zip/postal code lookup"""

    zip: str
    name: str
    lat: float
    lon: float
    country: str

    def to_location(self) -> Location:
        return Location(latitude=self.lat, longitude=self.lon)


class Coord(_Model):
    lon: float
    lat: float


class WeatherCondition(_Model):
    """Condition entry from the ``weather`` list (Rain, Snow, Clouds, ...)"""

    id: int
    main: str
    description: str
    icon: str


class Main(_Model):
    """Temperature, pressure and humidity measurements"""

    temp: float
    feels_like: Optional[float] = None
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None
    pressure: Optional[float] = None
    humidity: Optional[float] = None
    sea_level: Optional[float] = None
    grnd_level: Optional[float] = None


class Wind(_Model):
    speed: float
    deg: Optional[float] = None
    gust: Optional[float] = None


class Clouds(_Model):
    all: float


class Precipitation(_Model):
    """Rain or snow volume in mm for the last one and three hours"""

    one_hour: Optional[float] = Field(None, alias="1h")
    three_hours: Optional[float] = Field(None, alias="3h")


class Sys(_Model):
    type: Optional[int] = None
    id: Optional[int] = None
    country: Optional[str] = None
    sunrise: Optional[int] = None
    sunset: Optional[int] = None


class WeatherResponse(_Model):
    """Current weather payload as returned by the provider"""

    main: Main
    coord: Optional[Coord] = None
    weather: List[WeatherCondition] = Field(default_factory=list)
    base: Optional[str] = None
    visibility: Optional[float] = None
    wind: Optional[Wind] = None
    clouds: Optional[Clouds] = None
    rain: Optional[Precipitation] = None
    snow: Optional[Precipitation] = None
    dt: Optional[int] = None
    sys: Optional[Sys] = None
    timezone: Optional[int] = None
    id: Optional[int] = None
    name: Optional[str] = None
    cod: Optional[int] = None

    @property
    def condition(self) -> Optional[WeatherCondition]:
        """First reported condition, if any"""
        return self.weather[0] if self.weather else None
