import copy
import os
import sys

import httpx
import pytest

# Ensure project root is on sys.path so tests can import the gateway modules
# when pytest is invoked from the repository root or other working directories.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from models import ProviderConfig  # noqa: E402
from weather_service import WeatherService  # noqa: E402

WEATHER_PAYLOAD = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [
        {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}
    ],
    "main": {
        "temp": 21.3,
        "feels_like": 20.9,
        "temp_min": 19.8,
        "temp_max": 22.6,
        "pressure": 1015,
        "humidity": 60,
    },
    "visibility": 10000,
    "wind": {"speed": 4.12, "deg": 250},
    "clouds": {"all": 0},
    "dt": 1700000000,
    "sys": {"country": "GB", "sunrise": 1699945200, "sunset": 1699978800},
    "name": "London",
    "cod": 200,
}


def forecast_item(i: int) -> dict:
    dt = 1700006400 + i * 3 * 3600
    hour = (i * 3) % 24
    day = 15 + (i * 3) // 24
    return {
        "dt": dt,
        "main": {
            "temp": 10.0 + i / 10,
            "feels_like": 9.0 + i / 10,
            "temp_min": 8.5,
            "temp_max": 11.5,
            "pressure": 1012,
            "humidity": 70,
        },
        "weather": [
            {"id": 500, "main": "Rain", "description": "light rain", "icon": "10n"}
        ],
        "clouds": {"all": 75},
        "wind": {"speed": 3.6, "deg": 200},
        "visibility": 10000,
        "dt_txt": f"2023-11-{day:02d} {hour:02d}:00:00",
    }


def forecast_payload(count: int = 40) -> dict:
    return {
        "cod": "200",
        "cnt": count,
        "list": [forecast_item(i) for i in range(count)],
        "city": {
            "name": "London",
            "country": "GB",
            "coord": {"lat": 51.5085, "lon": -0.1257},
            "sunrise": 1699945200,
            "sunset": 1699978800,
        },
    }


@pytest.fixture
def weather_payload():
    return copy.deepcopy(WEATHER_PAYLOAD)


@pytest.fixture
def provider_config():
    return ProviderConfig(base_url="https://weather.test/data/2.5", api_key="test-key")


@pytest.fixture
def make_service(provider_config):
    """Build a WeatherService whose outbound calls go to ``handler``."""

    def _make(handler, provider=None):
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler), follow_redirects=True
        )
        return WeatherService(provider or provider_config, client=client)

    return _make
