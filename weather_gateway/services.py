"""
Weather provider client.
Fetches current weather for a city from the GoWeather API.

Usage:
    from weather_gateway.services import get_weather_client

    client = get_weather_client()
    info = await client.fetch_weather("Berlin")
    # Returns: WeatherInfo(temperature="20 °C", wind="5 km/h", description="Partly cloudy")
"""

import json
import logging
from typing import Optional

import httpx

from .errors import (
    UpstreamError,
    UpstreamUnavailableError,
    UpstreamContentTypeError,
    UpstreamReadError,
    UpstreamDecodeError,
)
from .models import WeatherInfo

logger = logging.getLogger(__name__)

# ---------------------------- Config ---------------------------------

WEATHER_API_BASE_URL = "https://goweather.herokuapp.com/weather/"
UPSTREAM_TIMEOUT = 10.0  # seconds
USER_AGENT = {"User-Agent": "WeatherGateway/1.0"}
JSON_CONTENT_TYPE = "application/json"


class WeatherClient:
    """Client for the upstream weather API."""

    def __init__(
        self,
        base_url: str = WEATHER_API_BASE_URL,
        timeout: float = UPSTREAM_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Prefix the city name is appended to
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    async def fetch_weather(self, city_name: str) -> WeatherInfo:
        """
        Fetch weather for a city.

        The city name is appended to the base URL as-is, without escaping.
        The response must carry exactly `Content-Type: application/json`.

        Raises:
            UpstreamUnavailableError: request could not be completed
            UpstreamContentTypeError: response is not declared as JSON
            UpstreamReadError: body could not be read
            UpstreamDecodeError: body is not a weather record
        """
        url = f"{self.base_url}{city_name}"
        logger.debug(f"Fetching weather: {url}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                async with client.stream("GET", url, headers=USER_AGENT) as r:
                    # first header value only, compared literally
                    values = r.headers.get_list("content-type")
                    content_type = values[0] if values else ""
                    if content_type != JSON_CONTENT_TYPE:
                        raise UpstreamContentTypeError(
                            f"expected JSON response, got: {content_type}"
                        )
                    try:
                        body = await r.aread()
                    except httpx.HTTPError as e:
                        raise UpstreamReadError(f"error reading response data: {e}") from e
        except UpstreamError as e:
            logger.warning(f"Weather provider error for {city_name!r}: {e}")
            raise
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Weather provider unreachable for {city_name!r}: {e}")
            raise UpstreamUnavailableError(f"error retrieving weather data: {e}") from e

        try:
            payload = json.loads(body)
            if payload is None:
                return WeatherInfo()
            return WeatherInfo.model_validate(payload)
        except ValueError as e:
            # covers JSONDecodeError, UnicodeDecodeError and pydantic's ValidationError
            logger.warning(f"Weather provider sent bad data for {city_name!r}: {e}")
            raise UpstreamDecodeError(f"error parsing weather data: {e}") from e


# Singleton instance
_weather_client: Optional[WeatherClient] = None


def get_weather_client() -> WeatherClient:
    """Get or create the weather client singleton."""
    global _weather_client
    if _weather_client is None:
        _weather_client = WeatherClient()
    return _weather_client


async def fetch_weather(city_name: str) -> WeatherInfo:
    return await get_weather_client().fetch_weather(city_name)
