import logging
from typing import Any, Dict, Optional

import httpx

from .cache import TTLCache, make_key
from .config import Settings, get_settings
from .models import WeatherData

logger = logging.getLogger(__name__)

DEFAULT_FORECAST_DAYS = 10


class WeatherClientError(Exception):
    pass


class ConfigurationError(WeatherClientError):
    pass


class ProviderError(WeatherClientError):
    """Non-success HTTP status returned by the forecast endpoint."""

    def __init__(self, status_code: int, reason: str):
        super().__init__(f"Weather API error: {reason}")
        self.status_code = status_code
        self.reason = reason


def build_forecast_params(api_key: str, query: str, days: int) -> Dict[str, Any]:
    return {
        "key": api_key,
        "q": query,
        "days": days,
        "aqi": "no",
        "alerts": "no",
    }


class WeatherClient:
    """Forecast fetcher guarded by a TTL cache.

    Concurrent misses for the same key are not coalesced: each one issues
    its own request and the last response to arrive is the one kept.
    """

    def __init__(self, settings: Optional[Settings] = None, cache: Optional[TTLCache] = None,
                 client: Optional[httpx.AsyncClient] = None):
        self.settings = settings or get_settings()
        self.cache = cache if cache is not None else TTLCache(self.settings.cache_ttl_seconds)
        self._client = client

    @property
    def forecast_url(self) -> str:
        return f"{self.settings.weatherapi_base_url}/forecast.json"

    def _ensure_api_key(self) -> str:
        key = self.settings.weatherapi_key
        if not key:
            raise ConfigurationError("WEATHERAPI_KEY is not set in environment")
        return key

    async def get_weather_data(self, query: str, days: int = DEFAULT_FORECAST_DAYS) -> WeatherData:
        key = make_key(query, days)
        entry = self.cache.lookup(key)
        if entry is not None and self.cache.is_fresh(entry):
            logger.info(f"Using cached weather data for {query}")
            return entry.value

        logger.info(f"Fetching fresh weather data for {query}")

        async def _fetch(c: httpx.AsyncClient) -> httpx.Response:
            params = build_forecast_params(self._ensure_api_key(), query, days)
            return await c.get(self.forecast_url, params=params)

        try:
            if self._client is None:
                async with httpx.AsyncClient(follow_redirects=True) as local_client:
                    resp = await _fetch(local_client)
            else:
                resp = await _fetch(self._client)

            if not resp.is_success:
                raise ProviderError(resp.status_code, resp.reason_phrase)

            data: WeatherData = resp.json()
        except Exception as e:
            logger.exception(f"Error fetching weather data for {query}: {e}")
            raise

        self.cache.put(key, data)
        return data

    def clear_cache(self) -> None:
        self.cache.clear()


_default_client: Optional[WeatherClient] = None


def get_default_client() -> WeatherClient:
    global _default_client
    if _default_client is None:
        _default_client = WeatherClient()
    return _default_client


def reset_default_client() -> None:
    global _default_client
    _default_client = None


async def get_weather_data(query: str, days: int = DEFAULT_FORECAST_DAYS) -> WeatherData:
    return await get_default_client().get_weather_data(query, days)


def clear_weather_cache() -> None:
    get_default_client().clear_cache()


def format_weather_message(data: WeatherData) -> str:
    location = data.get("location", {})
    current = data.get("current", {})
    condition = current.get("condition", {})

    place = ", ".join(p for p in (location.get("name"), location.get("country")) if p)
    lines = [
        f"<b>{place or 'Unknown location'}</b>",
        f"{condition.get('text', '')}",
        f"Temperature: <b>{current.get('temp_c', 0):.1f}°C</b>",
        f"Feels like: <b>{current.get('feelslike_c', 0):.1f}°C</b>",
        f"Humidity: {current.get('humidity', '?')}%",
        f"Wind: {current.get('wind_kph', '?')} km/h {current.get('wind_dir', '')}".rstrip(),
        f"UV index: {current.get('uv', '?')}",
    ]
    if location.get("localtime"):
        lines.append(f"Local time: {location['localtime']}")
    return "\n".join(lines)


def format_daily_forecast(data: WeatherData, limit: Optional[int] = None) -> str:
    days = data.get("forecast", {}).get("forecastday", [])
    if limit is not None:
        days = days[:limit]
    if not days:
        return "No forecast data."

    lines = ["<b>Forecast</b>"]
    for fd in days:
        day = fd.get("day", {})
        cond = day.get("condition", {}).get("text", "")
        lines.append(
            f"{fd.get('date')}: {day.get('mintemp_c')}…{day.get('maxtemp_c')}°C, "
            f"{cond}, rain {day.get('daily_chance_of_rain', 0)}%"
        )
    return "\n".join(lines)
