import pytest

from conftest import make_bookings, make_itinerary
from travel_advisor.core.errors import GenerationError, TransportError

TRAVEL_URL = "/api/v1/travel"


def test_generate_itinerary(client, stub_generator, preferences_payload):
    stub_generator.queue(make_itinerary(days=3))

    response = client.post(TRAVEL_URL, json={"action": "generate_itinerary", "preferences": preferences_payload})

    assert response.status_code == 200
    body = response.json()
    assert list(body) == ["itinerary"]
    assert len(body["itinerary"]["itinerary"]) == 3
    assert body["itinerary"]["budgetBreakdown"]["Total Estimated Cost"] == "$956"


def test_generate_itinerary_without_preferences_never_reaches_orchestrator(client, stub_generator):
    response = client.post(TRAVEL_URL, json={"action": "generate_itinerary"})

    assert response.status_code == 400
    assert response.json() == {"error": "Travel preferences are required"}
    assert stub_generator.calls == []


@pytest.mark.parametrize(
    "payload",
    [
        {"action": "book_everything"},
        {"action": "book_everything", "preferences": {"destination": "Paris"}},
        {"preferences": {}},
        {"action": None},
        {"action": 42},
        {},
        [],
        ["generate_itinerary"],
        "generate_itinerary",
    ],
)
def test_invalid_action(client, stub_generator, payload):
    response = client.post(TRAVEL_URL, json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid action"}
    assert stub_generator.calls == []


def test_non_json_body_is_an_invalid_action(client):
    response = client.post(TRAVEL_URL, content=b"action=generate_itinerary")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid action"}


def test_malformed_preferences_report_the_field(client, stub_generator, preferences_payload):
    preferences_payload["personalPreferences"]["energyLevel"] = "frantic"

    response = client.post(TRAVEL_URL, json={"action": "generate_itinerary", "preferences": preferences_payload})

    assert response.status_code == 400
    assert response.json()["error"].startswith("preferences.personalPreferences.energyLevel:")
    assert stub_generator.calls == []


@pytest.mark.parametrize(
    "failure",
    [
        "",
        "{not json",
        GenerationError("model said: sk-secret-details"),
        TransportError("connection refused to api.openai.com"),
        RuntimeError("boom"),
    ],
)
def test_orchestrator_failures_are_opaque(client, stub_generator, preferences_payload, failure):
    stub_generator.queue(failure)

    response = client.post(TRAVEL_URL, json={"action": "generate_itinerary", "preferences": preferences_payload})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_day_count_mismatch_is_a_server_error(client, stub_generator, preferences_payload):
    stub_generator.queue(make_itinerary(days=5))

    response = client.post(TRAVEL_URL, json={"action": "generate_itinerary", "preferences": preferences_payload})

    assert response.status_code == 500


@pytest.mark.parametrize(
    "payload",
    [
        {"action": "get_feedback"},
        {"action": "get_feedback", "itinerary": make_itinerary()},
        {"action": "get_feedback", "feedback": "more museums"},
        {"action": "get_feedback", "itinerary": make_itinerary(), "feedback": "   "},
        {"action": "get_feedback", "itinerary": make_itinerary(), "feedback": {"modifications": [], "generalFeedback": ""}},
    ],
)
def test_get_feedback_requires_itinerary_and_feedback(client, stub_generator, payload):
    response = client.post(TRAVEL_URL, json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Itinerary and feedback are required"}
    assert stub_generator.calls == []


def test_get_feedback_with_structured_feedback(client, stub_generator):
    stub_generator.queue(make_itinerary(activity="Musee Rodin"))
    feedback = {
        "modifications": [{"type": "modify_activity", "day": 1, "details": {"activityIndex": 0}}],
        "generalFeedback": "more museums",
        "budgetAdjustment": {"type": "increase", "amount": 100, "currency": "EUR"},
    }

    response = client.post(
        TRAVEL_URL, json={"action": "get_feedback", "itinerary": make_itinerary(), "feedback": feedback}
    )

    assert response.status_code == 200
    assert response.json()["itinerary"]["itinerary"][0]["activities"][0]["activity"] == "Musee Rodin"
    assert "Budget adjustment: increase by 100 EUR" in stub_generator.calls[0]["user"]


def test_get_feedback_accepts_free_text(client, stub_generator):
    stub_generator.queue(make_itinerary())

    response = client.post(
        TRAVEL_URL, json={"action": "get_feedback", "itinerary": make_itinerary(), "feedback": "slower mornings"}
    )

    assert response.status_code == 200
    assert "General feedback: slower mornings" in stub_generator.calls[0]["user"]


def test_get_feedback_rejects_unknown_day(client, stub_generator):
    feedback = {"modifications": [{"type": "other", "day": 7, "details": {"otherDetails": "?"}}]}

    response = client.post(
        TRAVEL_URL, json={"action": "get_feedback", "itinerary": make_itinerary(days=3), "feedback": feedback}
    )

    assert response.status_code == 400
    assert response.json()["error"].startswith("feedback.modifications.0.day:")
    assert stub_generator.calls == []


def test_simulate_bookings(client, stub_generator, preferences_payload):
    stub_generator.queue(make_bookings())

    response = client.post(
        TRAVEL_URL,
        json={"action": "simulate_bookings", "itinerary": make_itinerary(), "preferences": preferences_payload},
    )

    assert response.status_code == 200
    bookings = response.json()["bookings"]
    assert bookings["totalCost"] == sum(f["price"] for f in bookings["flights"]) + sum(
        h["price"] for h in bookings["hotels"]
    )
    assert "Flying Blue" in stub_generator.calls[0]["user"]


def test_simulate_bookings_requires_itinerary(client, stub_generator):
    response = client.post(TRAVEL_URL, json={"action": "simulate_bookings"})

    assert response.status_code == 400
    assert response.json() == {"error": "Itinerary is required"}
    assert stub_generator.calls == []


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"
    assert client.get("/").status_code == 200
