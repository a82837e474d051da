"""
Weather Gateway
A single-endpoint FastAPI service that looks up a city's weather upstream
and returns it as {temperature, wind, description}.

Usage:
    python -m weather_gateway [port]

Default port: 8080

Endpoints:
    GET  /city?name=X          - Weather for city X
    POST /city {"name": "X"}   - Same, city taken from the JSON body
    GET  /healthz              - Health check
"""

import logging
import sys
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from .errors import ValidationError, UpstreamError
from .models import CityRequest
from .services import WeatherClient, get_weather_client

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# ---------------------------- Config ---------------------------------

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

# GET and POST are served; the rest are routed here only to be refused
CITY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


async def read_city_request(request: Request) -> CityRequest:
    """Decode a POST body into a CityRequest."""
    try:
        payload = await request.json()
        if payload is None:
            return CityRequest()
        return CityRequest.model_validate(payload)
    except ValueError as e:
        raise ValidationError(f"Error parsing request body: {e}") from e


def create_app(client: Optional[WeatherClient] = None) -> FastAPI:
    """Build the gateway. Pass a client to point it at a different upstream."""
    weather_client = client or get_weather_client()

    app = FastAPI(title="Weather Gateway", version="1.0.0")

    @app.api_route("/city", methods=CITY_METHODS)
    async def city_weather(request: Request):
        if request.method == "GET":
            names = request.query_params.getlist("name")
            city_name = names[0] if names else ""
        elif request.method == "POST":
            try:
                city_name = (await read_city_request(request)).name
            except ValidationError as ve:
                logger.info(f"Rejected /city body: {ve}")
                return PlainTextResponse("Error parsing request body", status_code=400)
        else:
            return PlainTextResponse("Invalid request method", status_code=405)

        try:
            weather = await weather_client.fetch_weather(city_name)
        except UpstreamError as ue:
            return PlainTextResponse(str(ue), status_code=500)

        try:
            return JSONResponse(weather.model_dump())
        except (TypeError, ValueError) as e:
            logger.error(f"Error encoding weather response: {e}")
            return PlainTextResponse("Error generating response", status_code=500)

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    return app


app = create_app()


def main():
    """Main entry point."""
    import uvicorn

    port = DEFAULT_PORT
    if len(sys.argv) > 1:
        try:
            port = int(sys.argv[1])
        except ValueError:
            logger.error(f"Invalid port: {sys.argv[1]}")
            sys.exit(1)

    logger.info(f"Server is started on port {port}!")

    uvicorn.run(app, host=DEFAULT_HOST, port=port, log_level="info")


if __name__ == "__main__":
    main()
