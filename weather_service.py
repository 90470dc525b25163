import logging
from enum import Enum
from typing import Optional, Union
from urllib.parse import quote

import httpx
import pydantic

from errors import ConfigError, NetworkError, ParseError, UpstreamError
from models import ProviderConfig, ProviderForecastResponse, ProviderWeatherResponse

logger = logging.getLogger(__name__)


class FetchKind(str, Enum):
    WEATHER = "weather"
    FORECAST = "forecast"


RESPONSE_MODELS = {
    FetchKind.WEATHER: ProviderWeatherResponse,
    FetchKind.FORECAST: ProviderForecastResponse,
}


class WeatherService:
    """Talks to the OpenWeatherMap API.

    A single ``httpx.AsyncClient`` is shared by every request and created on
    first use. Each call is made once, without retries, and bounded by the
    configured timeout.
    """

    def __init__(
        self, provider: ProviderConfig, client: Optional[httpx.AsyncClient] = None
    ):
        self.provider = provider
        self._client = client

    @property
    def api_key_configured(self) -> bool:
        return bool(self.provider.api_key)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.provider.timeout_seconds, follow_redirects=True
            )
        return self._client

    async def aclose(self):
        """Close the shared outbound client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Closed weather API client")

    def build_url(self, kind: FetchKind, city: str) -> str:
        """Build the provider URL with a percent-encoded ``city``."""
        if not self.provider.api_key:
            raise ConfigError()

        return (
            f"{self.provider.base_url.rstrip('/')}/{kind.value}"
            f"?q={quote(city, safe='')}"
            f"&appid={quote(self.provider.api_key, safe='')}"
            f"&units={self.provider.units}"
        )

    async def fetch(
        self, kind: FetchKind, city: str
    ) -> Union[ProviderWeatherResponse, ProviderForecastResponse]:
        """Fetch and decode one provider payload."""
        url = self.build_url(kind, city)
        logger.info(f"Fetching {kind.value} data for {city!r}")

        try:
            response = await self._get_client().get(
                url, timeout=self.provider.timeout_seconds
            )
        except httpx.HTTPError as e:
            logger.error(f"Network error while fetching {kind.value} for {city!r}: {e}")
            raise NetworkError()

        if not response.is_success:
            logger.info(
                f"Weather API returned status {response.status_code} for {city!r}"
            )
            raise UpstreamError(response.status_code, city)

        try:
            # strict: numbers sent as strings are a schema mismatch
            return RESPONSE_MODELS[kind].model_validate_json(response.content, strict=True)
        except (ValueError, pydantic.ValidationError) as e:
            logger.error(f"Failed to parse {kind.value} response for {city!r}: {e}")
            if kind is FetchKind.FORECAST:
                raise ParseError("Failed to parse forecast API response")
            raise ParseError()

    async def fetch_weather(self, city: str) -> ProviderWeatherResponse:
        return await self.fetch(FetchKind.WEATHER, city)

    async def fetch_forecast(self, city: str) -> ProviderForecastResponse:
        return await self.fetch(FetchKind.FORECAST, city)
