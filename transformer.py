from datetime import datetime, timezone
from typing import Iterator, List, Optional, Tuple

from errors import ParseError
from models import (
    Condition,
    ForecastPoint,
    ForecastSeries,
    ProviderClouds,
    ProviderCondition,
    ProviderForecastResponse,
    ProviderWeatherResponse,
    ProviderWind,
    WeatherObservation,
    Wind,
)

FORECAST_POINTS = 40  # 5 days at 3-hour resolution
POINTS_PER_DAY = 8

DEFAULT_EMOJI = "🌤️"
ICON_EMOJI = {
    "01": "☀️",  # clear sky
    "02": "⛅",  # few clouds
    "03": "☁️",  # scattered clouds
    "04": "☁️",  # broken clouds
    "09": "🌧️",  # shower rain
    "10": "🌦️",  # rain
    "11": "⛈️",  # thunderstorm
    "13": "🌨️",  # snow
    "50": "🌫️",  # mist
}


def format_timestamp(timestamp: int) -> str:
    dt = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return dt.strftime("%Y-%m-%d %H:%M:%S UTC")


def weather_emoji(icon: str) -> str:
    """Pick an emoji from the first two characters of an icon code."""
    return ICON_EMOJI.get(icon[:2], DEFAULT_EMOJI)


def primary_condition(conditions: List[Condition]) -> Condition:
    if not conditions:
        raise ParseError("Weather API response has no weather conditions")
    return conditions[0]


def _conditions(weather: List[ProviderCondition]) -> List[Condition]:
    conditions = [
        Condition(id=c.id, category=c.main, description=c.description, icon=c.icon)
        for c in weather
    ]
    primary_condition(conditions)
    return conditions


def _wind(wind: Optional[ProviderWind]) -> Optional[Wind]:
    if wind is None:
        return None
    return Wind(speed=wind.speed, direction=wind.deg, gust=wind.gust)


def _cloudiness(clouds: Optional[ProviderClouds]) -> Optional[int]:
    return clouds.all if clouds is not None else None


def to_observation(payload: ProviderWeatherResponse) -> WeatherObservation:
    """Normalize a current-weather payload into the view model."""
    return WeatherObservation(
        city=payload.name,
        country=payload.sys.country,
        latitude=payload.coord.lat,
        longitude=payload.coord.lon,
        temperature=payload.main.temp,
        feels_like=payload.main.feels_like,
        temp_min=payload.main.temp_min,
        temp_max=payload.main.temp_max,
        humidity=payload.main.humidity,
        pressure=payload.main.pressure,
        conditions=_conditions(payload.weather),
        wind=_wind(payload.wind),
        cloudiness=_cloudiness(payload.clouds),
        visibility=payload.visibility,
        sunrise=payload.sys.sunrise,
        sunset=payload.sys.sunset,
        observed_at=payload.dt,
    )


def to_forecast_series(
    payload: ProviderForecastResponse, limit: int = FORECAST_POINTS
) -> ForecastSeries:
    """Normalize a forecast payload, keeping only the first ``limit`` points."""
    points = [
        ForecastPoint(
            timestamp=item.dt,
            dt_txt=item.dt_txt,
            temperature=item.main.temp,
            feels_like=item.main.feels_like,
            temp_min=item.main.temp_min,
            temp_max=item.main.temp_max,
            humidity=item.main.humidity,
            pressure=item.main.pressure,
            conditions=_conditions(item.weather),
            wind=_wind(item.wind),
            cloudiness=_cloudiness(item.clouds),
            visibility=item.visibility,
        )
        for item in payload.list[:limit]
    ]

    return ForecastSeries(
        city=payload.city.name,
        country=payload.city.country,
        latitude=payload.city.coord.lat,
        longitude=payload.city.coord.lon,
        sunrise=payload.city.sunrise,
        sunset=payload.city.sunset,
        points=points,
    )


def clock_time(point: ForecastPoint) -> str:
    """The "HH:MM" part of a "YYYY-MM-DD HH:MM:SS" timestamp."""
    return point.dt_txt[11:16]


def group_by_day(
    points: List[ForecastPoint], per_day: int = POINTS_PER_DAY
) -> Iterator[Tuple[Optional[int], str, ForecastPoint]]:
    """Yield ``(day, time, point)`` for each point.

    ``day`` is the 1-based day number on the first point of each block of
    ``per_day`` points and ``None`` everywhere else.
    """
    for i, point in enumerate(points):
        day = i // per_day + 1 if i % per_day == 0 else None
        yield day, clock_time(point), point
