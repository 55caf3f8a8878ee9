from typing import List, TypedDict


class Condition(TypedDict):
    text: str
    icon: str
    code: int


class Location(TypedDict):
    name: str
    region: str
    country: str
    lat: float
    lon: float
    localtime: str


class Current(TypedDict):
    temp_c: float
    temp_f: float
    condition: Condition
    wind_kph: float
    wind_dir: str
    humidity: int
    feelslike_c: float
    uv: float


class Day(TypedDict):
    maxtemp_c: float
    mintemp_c: float
    avgtemp_c: float
    condition: Condition
    daily_chance_of_rain: int


class Astro(TypedDict):
    sunrise: str
    sunset: str


class Hour(TypedDict):
    time: str
    temp_c: float
    condition: Condition
    chance_of_rain: int


class ForecastDay(TypedDict):
    date: str
    day: Day
    astro: Astro
    hour: List[Hour]


class Forecast(TypedDict):
    forecastday: List[ForecastDay]


class WeatherData(TypedDict):
    location: Location
    current: Current
    forecast: Forecast
