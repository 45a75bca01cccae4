import json
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from travel_advisor.api.deps import get_generation_service
from travel_advisor.main import app
from travel_advisor.services.generation_service import GenerationService


class StubGenerationService(GenerationService):
    """Deterministic stand-in for the LLM: replays queued replies and records every call."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def queue(self, *replies):
        self.replies.extend(replies)

    async def complete_json(self, system_prompt, user_prompt):
        self.calls.append({"system": system_prompt, "user": user_prompt})
        if not self.replies:
            raise AssertionError("Generation service called with no reply queued")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, (dict, list)):
            return json.dumps(reply)
        return reply


def make_itinerary(destination="Paris", start="2024-06-01", days=3, activity="Louvre Museum"):
    first = date.fromisoformat(start)
    dates = [(first + timedelta(days=i)).isoformat() for i in range(days)]
    return {
        "traveler": {
            "destination": destination,
            "travelDates": {"start": dates[0], "end": dates[-1]},
            "preferences": {
                "likes": ["museums"],
                "dislikes": [],
                "dietaryRestrictions": "vegetarian",
                "energyLevel": "balanced",
                "travelPace": "packed schedule",
                "budget": 2000,
                "hotelPreferences": {"type": "boutique", "roomPreferences": []},
                "flightPreferences": {"class": "economy", "seatPreferences": "window"},
                "transportationPreferences": {"preferredMethods": ["metro"], "comfortVsCost": "cost"},
                "weatherSensitivity": "",
                "packingHelpNeeded": True,
            },
        },
        "itinerary": [
            {
                "date": d,
                "weather": "Sunny",
                "activities": [
                    {
                        "time": "10:00",
                        "activity": activity,
                        "location": "Rue de Rivoli",
                        "cost": "$22",
                        "transportation": "Metro",
                    }
                ],
            }
            for d in dates
        ],
        "packingList": ["Walking shoes"],
        "budgetBreakdown": {
            "Hotel": "$600",
            "Dining": "$200",
            "Activities": "$66",
            "Transportation": "$40",
            "Miscellaneous": "$50",
            "Total Estimated Cost": "$956",
        },
    }


def make_bookings(flight_prices=(180, 165), hotel_prices=(640,), total=None):
    flights = [
        {
            "airline": "Air France",
            "flightNumber": f"AF10{i}",
            "departure": {"airport": "LHR", "time": "2024-06-01T07:15:00"},
            "arrival": {"airport": "CDG", "time": "2024-06-01T09:30:00"},
            "class": "economy",
            "price": price,
            "loyaltyPoints": 500,
        }
        for i, price in enumerate(flight_prices)
    ]
    hotels = [
        {
            "name": "Hotel Lumiere",
            "type": "boutique",
            "checkIn": "2024-06-01",
            "checkOut": "2024-06-03",
            "roomType": "Double",
            "price": price,
        }
        for price in hotel_prices
    ]
    if total is None:
        total = sum(flight_prices) + sum(hotel_prices)
    return {"flights": flights, "hotels": hotels, "totalCost": total, "estimatedSavings": 40}


@pytest.fixture
def preferences_payload():
    return {
        "destination": "Paris",
        "travelDates": {"arrival": "2024-06-01", "departure": "2024-06-03"},
        "personalPreferences": {
            "activities": {"likes": ["museums", "food", "museums"], "dislikes": ["crowds"]},
            "dietaryRestrictions": [{"type": "vegetarian"}, {"type": "allergy", "details": "peanuts"}],
            "energyLevel": "balanced",
            "travelPace": "packed schedule",
            "budget": {"type": "total", "amount": 2000, "currency": "eur"},
        },
        "hotelPreferences": {"type": "boutique", "loyaltyPrograms": ["Accor Live Limitless"]},
        "flightPreferences": {"class": "economy", "airlineMemberships": ["Flying Blue"], "seatPreferences": ["window"]},
        "transportationPreferences": {"preferredMethods": ["metro", "walking"], "comfortVsCost": "cost"},
        "otherInfo": {"weatherSensitivity": "dislikes rain", "packingHelpNeeded": True},
    }


@pytest.fixture
def itinerary_payload():
    return make_itinerary()


@pytest.fixture
def stub_generator():
    return StubGenerationService()


@pytest.fixture
def client(stub_generator):
    app.dependency_overrides[get_generation_service] = lambda: stub_generator
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
