import httpx
import pytest
from fastapi.testclient import TestClient

import main
from conftest import forecast_payload


@pytest.fixture
def client(monkeypatch, make_service, weather_payload):
    def handler(request):
        city = request.url.params["q"]
        if city == "Atlantis":
            return httpx.Response(404, json={"cod": "404", "message": "city not found"})
        if request.url.path.endswith("/forecast"):
            return httpx.Response(200, json=forecast_payload(40))
        return httpx.Response(200, json=weather_payload)

    monkeypatch.setattr(main, "weather_service", make_service(handler))
    with TestClient(main.app) as test_client:
        yield test_client


def test_api_root_lists_endpoints(client):
    response = client.get("/api")
    assert response.status_code == 200
    assert "/api/weather?city=YourCity" in response.text
    assert "/api/forecast?city=YourCity" in response.text


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "api_key_configured": True,
        "provider": main.config.provider.base_url,
    }


def test_weather_text(client):
    response = client.get("/api/weather", params={"city": "London"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "text/plain; charset=utf-8"
    assert "📍 Location: London, GB" in response.text


def test_weather_json(client):
    response = client.get("/api/weather", params={"city": "London", "format": "json"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json()["coordinates"] == [51.5085, -0.1257]


def test_forecast_text(client):
    response = client.get("/api/forecast", params={"city": "London"})
    assert response.status_code == 200
    assert response.text.count("📅 Day") == 5


@pytest.mark.parametrize("path", ["/api/weather", "/api/forecast"])
def test_missing_city(client, path):
    response = client.get(path)
    assert response.status_code == 400
    assert "error" in response.json()


@pytest.mark.parametrize("path", ["/api/weather", "/api/forecast"])
def test_blank_city(client, path):
    response = client.get(path, params={"city": "   ", "format": "text"})
    assert response.status_code == 400
    assert response.headers["content-type"] == "application/json"


def test_unknown_city(client):
    response = client.get("/api/weather", params={"city": "Atlantis"})
    assert response.status_code == 404
    assert response.json()["city_searched"] == "Atlantis"
