from models import (
    ForecastItemJson,
    ForecastJsonResponse,
    ForecastSeries,
    WeatherJsonResponse,
    WeatherObservation,
)
from transformer import format_timestamp, group_by_day, primary_condition, weather_emoji

NO_DATA = "No data"


def weather_json(observation: WeatherObservation) -> WeatherJsonResponse:
    condition = primary_condition(observation.conditions)
    wind = observation.wind

    return WeatherJsonResponse(
        city=observation.city,
        country=observation.country,
        temperature=observation.temperature,
        feels_like=observation.feels_like,
        temp_min=observation.temp_min,
        temp_max=observation.temp_max,
        humidity=observation.humidity,
        pressure=observation.pressure,
        description=condition.description,
        icon=condition.icon,
        wind_speed=wind.speed if wind else None,
        wind_direction=wind.direction if wind else None,
        cloudiness=observation.cloudiness,
        visibility=observation.visibility,
        sunrise=format_timestamp(observation.sunrise),
        sunset=format_timestamp(observation.sunset),
        coordinates=(observation.latitude, observation.longitude),
        timestamp=format_timestamp(observation.observed_at),
    )


def _wind_line(observation: WeatherObservation) -> str:
    wind = observation.wind
    if wind is None:
        return f"💨 Wind: {NO_DATA}"
    if wind.direction is None:
        return f"💨 Wind: {wind.speed:.1f} m/s"
    return f"💨 Wind: {wind.speed:.1f} m/s at {wind.direction}°"


def _visibility_line(observation: WeatherObservation) -> str:
    if observation.visibility is None:
        return f"👁️ Visibility: {NO_DATA}"
    return f"👁️ Visibility: {observation.visibility / 1000:.1f} km"


def _clouds_line(observation: WeatherObservation) -> str:
    if observation.cloudiness is None:
        return f"☁️ Cloudiness: {NO_DATA}"
    return f"☁️ Cloudiness: {observation.cloudiness}%"


def weather_text(observation: WeatherObservation) -> str:
    """Render the current-weather report as plain text."""
    o = observation
    condition = primary_condition(o.conditions)
    emoji = weather_emoji(condition.icon)

    lines = [
        f"{emoji} {o.city} Weather Report {emoji}",
        "",
        f"📍 Location: {o.city}, {o.country}",
        f"🌐 Coordinates: {o.latitude:.2f}°N, {o.longitude:.2f}°E",
        "",
        f"🌡️ Temperature: {o.temperature:.1f}°C (feels like {o.feels_like:.1f}°C)",
        f"📊 Min/Max: {o.temp_min:.1f}°C / {o.temp_max:.1f}°C",
        f"💧 Humidity: {o.humidity}%",
        f"🔽 Pressure: {o.pressure} hPa",
        f"☁️ Conditions: {condition.description}",
        _wind_line(o),
        _visibility_line(o),
        _clouds_line(o),
        "",
        f"🌅 Sunrise: {format_timestamp(o.sunrise)}",
        f"🌇 Sunset: {format_timestamp(o.sunset)}",
        f"⏰ Last Updated: {format_timestamp(o.observed_at)}",
    ]
    return "\n".join(lines)


def forecast_json(series: ForecastSeries) -> ForecastJsonResponse:
    forecasts = []
    for point in series.points:
        condition = primary_condition(point.conditions)
        forecasts.append(
            ForecastItemJson(
                datetime=point.dt_txt,
                temperature=point.temperature,
                feels_like=point.feels_like,
                temp_min=point.temp_min,
                temp_max=point.temp_max,
                humidity=point.humidity,
                pressure=point.pressure,
                description=condition.description,
                icon=condition.icon,
                wind_speed=point.wind.speed if point.wind else None,
                cloudiness=point.cloudiness,
            )
        )

    return ForecastJsonResponse(
        city=series.city, country=series.country, forecasts=forecasts
    )


def forecast_text(series: ForecastSeries) -> str:
    """Render the forecast as plain text, one block of points per day."""
    text = f"🔮 5-Day Forecast for {series.city}, {series.country}\n{'=' * 50}\n\n"

    for day, time, point in group_by_day(series.points):
        if day is not None:
            text += f"\n📅 Day {day} Forecast:\n{'-' * 30}\n"

        condition = primary_condition(point.conditions)
        wind_info = f" | 💨 {point.wind.speed:.1f}m/s" if point.wind else ""
        text += (
            f"{time} {weather_emoji(condition.icon)} | "
            f"{point.temperature:.1f}°C (feels {point.feels_like:.1f}°C) | "
            f"💧{point.humidity}% | {condition.description} {wind_info}\n"
        )

    return text
