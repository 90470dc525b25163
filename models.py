from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Tuple


class ServerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: int = 8080


class ProviderConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str = "https://api.openweathermap.org/data/2.5"
    api_key: Optional[str] = None
    units: str = "metric"
    timeout_seconds: float = 10.0
    forecast_points: int = 40
    require_api_key: bool = False


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    server: ServerConfig = ServerConfig()
    provider: ProviderConfig = ProviderConfig()


# Provider (OpenWeatherMap) wire schema


class ProviderCondition(BaseModel):
    id: int
    main: str
    description: str
    icon: str


class ProviderMain(BaseModel):
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    humidity: int
    sea_level: Optional[int] = None
    grnd_level: Optional[int] = None


class ProviderWind(BaseModel):
    speed: float
    deg: Optional[int] = None
    gust: Optional[float] = None


class ProviderClouds(BaseModel):
    all: int


class ProviderSys(BaseModel):
    country: str
    sunrise: int
    sunset: int


class ProviderCoord(BaseModel):
    lon: float
    lat: float


class ProviderWeatherResponse(BaseModel):
    name: str
    main: ProviderMain
    weather: List[ProviderCondition] = Field(min_length=1)
    wind: Optional[ProviderWind] = None
    clouds: Optional[ProviderClouds] = None
    visibility: Optional[int] = None
    dt: int
    sys: ProviderSys
    coord: ProviderCoord


class ProviderForecastItem(BaseModel):
    dt: int
    main: ProviderMain
    weather: List[ProviderCondition] = Field(min_length=1)
    wind: Optional[ProviderWind] = None
    clouds: Optional[ProviderClouds] = None
    visibility: Optional[int] = None
    dt_txt: str


class ProviderForecastCity(BaseModel):
    name: str
    country: str
    coord: ProviderCoord
    sunrise: int
    sunset: int


class ProviderForecastResponse(BaseModel):
    list: List[ProviderForecastItem]
    city: ProviderForecastCity


# View model


class Condition(BaseModel):
    id: int
    category: str
    description: str
    icon: str


class Wind(BaseModel):
    speed: float
    direction: Optional[int] = None
    gust: Optional[float] = None


class WeatherObservation(BaseModel):
    city: str
    country: str
    latitude: float
    longitude: float
    temperature: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int
    pressure: int
    conditions: List[Condition]
    wind: Optional[Wind] = None
    cloudiness: Optional[int] = None
    visibility: Optional[int] = None  # meters
    sunrise: int
    sunset: int
    observed_at: int


class ForecastPoint(BaseModel):
    timestamp: int
    dt_txt: str  # "YYYY-MM-DD HH:MM:SS"
    temperature: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int
    pressure: int
    conditions: List[Condition]
    wind: Optional[Wind] = None
    cloudiness: Optional[int] = None
    visibility: Optional[int] = None


class ForecastSeries(BaseModel):
    city: str
    country: str
    latitude: float
    longitude: float
    sunrise: int
    sunset: int
    points: List[ForecastPoint]


# JSON views


class WeatherJsonResponse(BaseModel):
    city: str
    country: str
    temperature: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int
    pressure: int
    description: str
    icon: str
    wind_speed: Optional[float]
    wind_direction: Optional[int]
    cloudiness: Optional[int]
    visibility: Optional[int]
    sunrise: str
    sunset: str
    coordinates: Tuple[float, float]
    timestamp: str


class ForecastItemJson(BaseModel):
    datetime: str
    temperature: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int
    pressure: int
    description: str
    icon: str
    wind_speed: Optional[float]
    cloudiness: Optional[int]


class ForecastJsonResponse(BaseModel):
    city: str
    country: str
    forecasts: List[ForecastItemJson]


class ErrorResponse(BaseModel):
    error: str
    message: str
    city_searched: Optional[str] = None
