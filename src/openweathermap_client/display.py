from typing import Optional

from openweathermap_client.models import WeatherResponse, ZipLocation


def format_temperature(temp: float, units: str) -> str:
    if units == "metric":
        return f"{temp:.1f}°C"
    if units == "imperial":
        return f"{temp:.1f}°F"
    return f"{temp:.1f} K"


def format_speed(speed: float, units: str) -> str:
    if units == "imperial":
        return f"{speed:.1f} mph"
    return f"{speed:.1f} m/s"


def _percent(value: Optional[float]) -> str:
    return "n/a" if value is None else f"{value:g}%"


def describe_weather(response: WeatherResponse, units: str) -> str:
    """Multi-line human readable summary of a weather response"""
    coords = f"({response.coord.lat}, {response.coord.lon})" if response.coord else "n/a"

    wind = "n/a"
    if response.wind:
        wind = format_speed(response.wind.speed, units)
        if response.wind.deg is not None:
            wind = f"{wind} at {response.wind.deg:g}°"

    conditions = "n/a"
    if response.condition:
        conditions = f"{response.condition.main} ({response.condition.description})"

    clouds = _percent(response.clouds.all if response.clouds else None)

    return "\n".join(
        [
            f"Weather in {response.name or 'unknown location'}",
            f"Coordinates: {coords}",
            f"Temperature: {format_temperature(response.main.temp, units)}",
            f"Humidity: {_percent(response.main.humidity)}",
            f"Wind: {wind}",
            f"Clouds: {clouds}",
            f"Conditions: {conditions}",
        ]
    )


def describe_location(location: ZipLocation) -> str:
    return f"{location.name}, {location.country} {location.zip} ({location.lat}, {location.lon})"
