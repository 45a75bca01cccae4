import httpx
import pytest

from travel_advisor.core.config import settings
from travel_advisor.models.schemas import NOT_FOUND
from travel_advisor.services.geocoding_service import geocode_address


@pytest.fixture(autouse=True)
def mapbox_token(monkeypatch):
    monkeypatch.setattr(settings, "MAPBOX_TOKEN", "test-token")


def mock_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_geocode_returns_first_match():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"features": [{"center": [2.3522, 48.8566]}, {"center": [0.1, 0.1]}]})

    async with mock_client(handler) as client:
        coords = await geocode_address("Paris, France", client=client)

    assert (coords.lat, coords.lon) == (48.8566, 2.3522)
    assert coords.found
    assert "/Paris%2C%20France.json" in seen[0].url.raw_path.decode()
    assert seen[0].url.params["access_token"] == "test-token"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json={"features": []}),
        httpx.Response(200, json={}),
        httpx.Response(200, json={"features": [{"place_name": "no center"}]}),
        httpx.Response(200, text="<html>"),
        httpx.Response(401, json={"message": "Not Authorized - Invalid Token"}),
        httpx.Response(503),
    ],
)
async def test_geocode_failures_return_the_sentinel(response):
    async with mock_client(lambda request: response) as client:
        coords = await geocode_address("Atlantis", client=client)

    assert coords == NOT_FOUND
    assert (coords.lat, coords.lon) == (0, 0)
    assert not coords.found


@pytest.mark.asyncio
async def test_geocode_network_error_returns_the_sentinel():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with mock_client(handler) as client:
        assert await geocode_address("Paris", client=client) == NOT_FOUND


@pytest.mark.asyncio
async def test_geocode_skips_the_call_without_address_or_token(monkeypatch):
    def handler(request):
        raise AssertionError("no request expected")

    async with mock_client(handler) as client:
        assert await geocode_address("   ", client=client) == NOT_FOUND
        monkeypatch.setattr(settings, "MAPBOX_TOKEN", "")
        assert await geocode_address("Paris", client=client) == NOT_FOUND


def test_geocode_endpoint_never_fails(client, monkeypatch):
    monkeypatch.setattr(settings, "MAPBOX_GEOCODING_URL", "http://127.0.0.1:9/geocoding")

    response = client.get("/api/v1/geocode", params={"address": "Nowhere"})

    assert response.status_code == 200
    assert response.json() == {"lat": 0, "lon": 0}
