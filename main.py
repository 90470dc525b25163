import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

import dispatcher
from config_loader import load_config
from weather_service import WeatherService

# Configure logging with Docker-friendly format
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(),  # Console output for Docker logs
        (
            logging.FileHandler("/app/logs/weather_api.log")
            if os.path.exists("/app/logs")
            else logging.NullHandler()
        ),
    ],
)
logger = logging.getLogger(__name__)

# Global variables
config = load_config()
weather_service = WeatherService(config.provider)

API_USAGE = (
    "🌦️ Welcome to the Weather API!\n\n"
    "Endpoints:\n"
    "• GET /api/weather?city=YourCity - Current weather\n"
    "• GET /api/forecast?city=YourCity - 5-day forecast\n"
    "• GET /api/weather?city=YourCity&format=json - JSON response"
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    # Startup
    logger.info("Starting weather gateway")
    logger.info(f"Provider: {config.provider.base_url}")
    logger.info(f"API key configured: {weather_service.api_key_configured}")

    yield

    # Shutdown
    logger.info("Shutting down weather gateway")
    await weather_service.aclose()


# Create FastAPI app
app = FastAPI(
    title="Weather API",
    description="OpenWeatherMap current weather and 5-day forecast gateway",
    version="1.0.0",
    lifespan=lifespan,
)


@app.get("/api", response_class=PlainTextResponse)
async def api_root():
    """List the available endpoints."""
    return API_USAGE


@app.get("/api/weather")
async def fetch_weather(request: Request):
    """
    Get current weather for a city.

    Returns a text report, or JSON when called with ``format=json``.
    """
    return await dispatcher.get_weather(dict(request.query_params), weather_service)


@app.get("/api/forecast")
async def fetch_forecast(request: Request):
    """
    Get the 5-day forecast for a city in 3-hour steps.

    Returns a text report grouped by day, or JSON when called with ``format=json``.
    """
    return await dispatcher.get_forecast(dict(request.query_params), weather_service)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "api_key_configured": weather_service.api_key_configured,
        "provider": config.provider.base_url,
    }


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    """Handle general exceptions."""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500, content={"error": "Internal server error", "message": str(exc)}
    )


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting server on {config.server.host}:{config.server.port}")

    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=log_level.lower(),
        access_log=True,
    )
