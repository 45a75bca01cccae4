from conftest import make_bookings, make_itinerary

TRAVEL_URL = "/api/v1/travel"


def test_paris_plan_revise_book(client, stub_generator, preferences_payload):
    stub_generator.queue(
        make_itinerary(days=3),
        make_itinerary(days=3, activity="Musee d'Orsay"),
        make_bookings(flight_prices=(180, 165), hotel_prices=(640,)),
    )

    generated = client.post(TRAVEL_URL, json={"action": "generate_itinerary", "preferences": preferences_payload})
    assert generated.status_code == 200
    itinerary = generated.json()["itinerary"]
    assert [day["date"] for day in itinerary["itinerary"]] == ["2024-06-01", "2024-06-02", "2024-06-03"]

    revised = client.post(
        TRAVEL_URL,
        json={
            "action": "get_feedback",
            "itinerary": itinerary,
            "feedback": {"modifications": [], "generalFeedback": "more museums"},
        },
    )
    assert revised.status_code == 200
    itinerary = revised.json()["itinerary"]
    assert itinerary["itinerary"][0]["activities"][0]["activity"] == "Musee d'Orsay"

    booked = client.post(
        TRAVEL_URL,
        json={"action": "simulate_bookings", "itinerary": itinerary, "preferences": preferences_payload},
    )
    assert booked.status_code == 200
    bookings = booked.json()["bookings"]
    assert bookings["totalCost"] == 985

    exported = client.post("/api/v1/export/pdf", json={"itinerary": itinerary, "bookingResponse": booked.json()})
    assert exported.status_code == 200
    assert exported.content.startswith(b"%PDF")

    assert len(stub_generator.calls) == 3
