import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

import httpx

from .config import Settings, get_settings
from .weather_client import (
    WeatherClient,
    WeatherClientError,
    format_daily_forecast,
    format_weather_message,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def setup_logging(settings: Settings) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_dir:
        if not os.path.exists(settings.log_dir):
            os.makedirs(settings.log_dir)
        handlers.append(logging.FileHandler(os.path.join(settings.log_dir, "app.log")))

    level = logging.getLevelName(settings.log_level.upper())
    unknown_level = not isinstance(level, int)
    if unknown_level:
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    if unknown_level:
        logger.warning(f"Unknown WEATHER_LOG_LEVEL {settings.log_level!r}, using INFO")


def parse_args(argv: Optional[List[str]], settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show current weather and forecast for a location.")
    parser.add_argument("query", help="city name, 'lat,lon' pair or any query the provider accepts")
    parser.add_argument("--days", type=int, default=settings.forecast_days, help="forecast horizon in days")
    return parser.parse_args(argv)


async def run(query: str, days: int, client: WeatherClient) -> str:
    data = await client.get_weather_data(query, days)
    return format_weather_message(data) + "\n\n" + format_daily_forecast(data)


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    setup_logging(settings)
    args = parse_args(argv, settings)

    client = WeatherClient(settings=settings)
    try:
        text = asyncio.run(run(args.query, args.days, client))
    except (WeatherClientError, httpx.HTTPError, ValueError) as e:
        print(f"Failed to get weather: {e}", file=sys.stderr)
        return 1
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
