import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = "http://api.weatherapi.com/v1"


@dataclass
class Settings:
    weatherapi_key: Optional[str]
    weatherapi_base_url: str
    cache_ttl_seconds: float
    forecast_days: int
    log_level: str
    log_dir: Optional[str]


def get_settings() -> Settings:
    return Settings(
        weatherapi_key=os.getenv("WEATHERAPI_KEY"),
        weatherapi_base_url=os.getenv("WEATHERAPI_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        cache_ttl_seconds=float(os.getenv("WEATHER_CACHE_TTL_SECONDS", "1800")),
        forecast_days=int(os.getenv("WEATHER_FORECAST_DAYS", "10")),
        log_level=os.getenv("WEATHER_LOG_LEVEL", "INFO"),
        log_dir=os.getenv("WEATHER_LOG_DIR"),
    )
