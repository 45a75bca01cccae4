import pytest

from travel_advisor.core.config import settings
from travel_advisor.models.booking import BookingResponse
from travel_advisor.models.feedback import ItineraryFeedback
from travel_advisor.models.itinerary import TravelItinerary


@pytest.mark.parametrize("path", ["/api/v1/itinerary", "/api/v1/feedback", "/api/v1/booking"])
def test_fixture_reads_are_byte_identical(client, path):
    first = client.get(path)
    second = client.get(path)

    assert first.status_code == 200
    assert first.content == second.content


def test_fixture_documents_match_the_models(client):
    TravelItinerary.model_validate(client.get("/api/v1/itinerary").json()["itinerary"])
    feedback = client.get("/api/v1/feedback").json()
    ItineraryFeedback.from_payload(feedback["feedback"])
    TravelItinerary.model_validate(feedback["itinerary"])
    BookingResponse.model_validate(client.get("/api/v1/booking").json())


@pytest.mark.parametrize(
    "path, name",
    [("/api/v1/itinerary", "itinerary"), ("/api/v1/feedback", "feedback"), ("/api/v1/booking", "booking response")],
)
def test_missing_fixture_is_a_server_error(client, monkeypatch, tmp_path, path, name):
    monkeypatch.setattr(settings, "FIXTURES_DIR", tmp_path)

    response = client.get(path)

    assert response.status_code == 500
    assert response.json() == {"error": f"Failed to read {name}"}


def test_unparsable_fixture_is_a_server_error(client, monkeypatch, tmp_path):
    (tmp_path / "itinerary.json").write_text("{ not json", encoding="utf-8")
    monkeypatch.setattr(settings, "FIXTURES_DIR", tmp_path)

    response = client.get("/api/v1/itinerary")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to read itinerary"}
