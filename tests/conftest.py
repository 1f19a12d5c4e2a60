import asyncio
import json

import pytest

from openweathermap_client.errors import TransportError
from openweathermap_client.transport import TransportResponse

API_KEY = "s3cr3t-key+/="

LONDON = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
    "base": "stations",
    "main": {
        "temp": 15.2,
        "feels_like": 14.6,
        "temp_min": 13.9,
        "temp_max": 16.4,
        "pressure": 1012,
        "humidity": 70,
    },
    "visibility": 10000,
    "wind": {"speed": 4.63, "deg": 240},
    "clouds": {"all": 75},
    "rain": {"1h": 0.25},
    "dt": 1697544000,
    "sys": {"type": 2, "id": 2075535, "country": "GB", "sunrise": 1697524100, "sunset": 1697562300},
    "timezone": 3600,
    "id": 2643743,
    "name": "London",
    "cod": 200,
}


class FakeTransport:
    """Records requested URLs and plays back canned responses or failures"""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.urls = []

    async def get(self, url):
        self.urls.append(url)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class HangingTransport:
    """Never completes; records whether it was cancelled"""

    def __init__(self):
        self.started = asyncio.Event()
        self.cancelled = False

    async def get(self, url):
        self.started.set()
        try:
            await asyncio.sleep(3600)
        except asyncio.CancelledError:
            self.cancelled = True
            raise


def json_response(payload, status_code=200):
    return TransportResponse(status_code=status_code, content=json.dumps(payload).encode())


@pytest.fixture
def london():
    return LONDON


@pytest.fixture
def refused():
    return TransportError("ConnectError: [Errno 111] Connection refused")
