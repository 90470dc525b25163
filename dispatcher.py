import logging
from typing import Mapping

from fastapi.responses import JSONResponse, PlainTextResponse, Response

from errors import GatewayError, ValidationError, classify_error
from report_formatter import forecast_json, forecast_text, weather_json, weather_text
from transformer import to_forecast_series, to_observation
from weather_service import WeatherService

logger = logging.getLogger(__name__)


def require_city(params: Mapping[str, str]) -> str:
    city = (params.get("city") or "").strip()
    if not city:
        raise ValidationError()
    return city


def wants_json(params: Mapping[str, str]) -> bool:
    return params.get("format") == "json"


def error_response(exc: GatewayError) -> JSONResponse:
    """Error bodies are always JSON, whatever ``format`` was requested."""
    status_code, body = classify_error(exc)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def get_weather(params: Mapping[str, str], service: WeatherService) -> Response:
    """Current weather for ``params["city"]`` as text or JSON."""
    try:
        city = require_city(params)
        payload = await service.fetch_weather(city)
        observation = to_observation(payload)

        if wants_json(params):
            return JSONResponse(content=weather_json(observation).model_dump(mode="json"))
        return PlainTextResponse(weather_text(observation))
    except GatewayError as e:
        return error_response(e)


async def get_forecast(params: Mapping[str, str], service: WeatherService) -> Response:
    """Five-day forecast for ``params["city"]`` as text or JSON."""
    try:
        city = require_city(params)
        payload = await service.fetch_forecast(city)
        series = to_forecast_series(payload, limit=service.provider.forecast_points)
        logger.info(f"Rendering {len(series.points)} forecast points for {city!r}")

        if wants_json(params):
            return JSONResponse(content=forecast_json(series).model_dump(mode="json"))
        return PlainTextResponse(forecast_text(series))
    except GatewayError as e:
        return error_response(e)
