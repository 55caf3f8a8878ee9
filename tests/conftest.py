import os
import sys
from pathlib import Path
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _test_env(monkeypatch):
    monkeypatch.setenv("WEATHERAPI_KEY", os.getenv("WEATHERAPI_KEY", "test-key"))
    monkeypatch.setenv("WEATHERAPI_BASE_URL", "http://api.weatherapi.com/v1")
    monkeypatch.delenv("WEATHER_CACHE_TTL_SECONDS", raising=False)
    monkeypatch.delenv("WEATHER_LOG_DIR", raising=False)
    monkeypatch.delenv("WEATHER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("WEATHER_FORECAST_DAYS", raising=False)


@pytest.fixture(autouse=True)
def _reset_default_client():
    from weather_service.weather_client import reset_default_client

    reset_default_client()
    yield
    reset_default_client()


@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    if request.node.get_closest_marker("integration") or request.node.get_closest_marker("network"):
        return

    import httpx

    def _boom(*args, **kwargs):
        raise RuntimeError(
            "Network is blocked in unit tests. "
            "Use httpx.MockTransport, mock httpx or mark the test with @pytest.mark.network"
        )

    monkeypatch.setattr(httpx.HTTPTransport, "handle_request", _boom, raising=True)
    monkeypatch.setattr(httpx.AsyncHTTPTransport, "handle_async_request", _boom, raising=True)


class FakeClock:
    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def weather_payload():
    return {
        "location": {
            "name": "Paris",
            "region": "Ile-de-France",
            "country": "France",
            "lat": 48.87,
            "lon": 2.33,
            "localtime": "2026-10-19 14:00",
        },
        "current": {
            "temp_c": 14.0,
            "temp_f": 57.2,
            "condition": {"text": "Partly cloudy", "icon": "//cdn.weatherapi.com/116.png", "code": 1003},
            "wind_kph": 11.2,
            "wind_dir": "SW",
            "humidity": 72,
            "feelslike_c": 12.9,
            "uv": 3.0,
        },
        "forecast": {
            "forecastday": [
                {
                    "date": "2026-10-19",
                    "day": {
                        "maxtemp_c": 16.1,
                        "mintemp_c": 9.4,
                        "avgtemp_c": 12.5,
                        "condition": {"text": "Light rain", "icon": "//cdn.weatherapi.com/296.png", "code": 1183},
                        "daily_chance_of_rain": 80,
                    },
                    "astro": {"sunrise": "08:12 AM", "sunset": "06:48 PM"},
                    "hour": [
                        {
                            "time": "2026-10-19 00:00",
                            "temp_c": 10.2,
                            "condition": {"text": "Clear", "icon": "//cdn.weatherapi.com/113.png", "code": 1000},
                            "chance_of_rain": 0,
                        },
                    ],
                },
                {
                    "date": "2026-10-20",
                    "day": {
                        "maxtemp_c": 18.0,
                        "mintemp_c": 10.0,
                        "avgtemp_c": 14.0,
                        "condition": {"text": "Sunny", "icon": "//cdn.weatherapi.com/113.png", "code": 1000},
                        "daily_chance_of_rain": 0,
                    },
                    "astro": {"sunrise": "08:13 AM", "sunset": "06:46 PM"},
                    "hour": [],
                },
            ]
        },
    }
