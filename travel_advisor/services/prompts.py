# travel_advisor/services/prompts.py
"""
Prompt text sent to the generation service.
Every builder returns plain strings; nothing here talks to the network.
"""
import json
from typing import List, Optional

from travel_advisor.models.feedback import ItineraryFeedback, ItineraryModification
from travel_advisor.models.itinerary import TravelItinerary
from travel_advisor.models.preferences import TravelPreferences

ITINERARY_SYSTEM_PROMPT = (
    "You are a highly personalized AI Travel Advisor that creates detailed travel itineraries."
)
REVISION_SYSTEM_PROMPT = (
    "You are a travel itinerary modification system that adjusts plans based on user feedback."
)
BOOKING_SYSTEM_PROMPT = (
    "You are a travel booking simulation system that creates realistic booking scenarios."
)

ITINERARY_SCHEMA = """{
  "traveler": {
    "destination": string,
    "travelDates": {"start": string, "end": string},
    "preferences": {
      "likes": string[],
      "dislikes": string[],
      "dietaryRestrictions": string,
      "energyLevel": string,
      "travelPace": string,
      "budget": number,
      "hotelPreferences": {"type": string, "roomPreferences": string[]},
      "flightPreferences": {"class": string, "seatPreferences": string},
      "transportationPreferences": {"preferredMethods": string[], "comfortVsCost": string},
      "weatherSensitivity": string,
      "packingHelpNeeded": boolean
    }
  },
  "itinerary": [
    {
      "date": string,
      "weather": string,
      "activities": [
        {"time": string, "activity": string, "location": string, "cost": string, "transportation": string}
      ]
    }
  ],
  "packingList": string[],
  "budgetBreakdown": {
    "Hotel": string,
    "Dining": string,
    "Activities": string,
    "Transportation": string,
    "Miscellaneous": string,
    "Total Estimated Cost": string
  }
}"""

BOOKING_SCHEMA = """{
  "flights": [
    {
      "airline": string,
      "flightNumber": string,
      "departure": {"airport": string, "time": string},
      "arrival": {"airport": string, "time": string},
      "class": string,
      "price": number,
      "loyaltyPoints": number
    }
  ],
  "hotels": [
    {
      "name": string,
      "type": string,
      "checkIn": string,
      "checkOut": string,
      "roomType": string,
      "price": number,
      "loyaltyPoints": number
    }
  ],
  "totalCost": number,
  "estimatedSavings": number
}"""


def _join(values: Optional[List[str]], empty: str = "None") -> str:
    return ", ".join(values) if values else empty


def _amount(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _day_rules(dates: List[str]) -> str:
    return (
        f"The \"itinerary\" array must contain exactly {len(dates)} entries, one per day, "
        f"in this order with these ISO dates: {', '.join(dates)}."
    )


def build_itinerary_prompt(prefs: TravelPreferences) -> str:
    personal = prefs.personal_preferences
    budget = personal.budget
    hotel = prefs.hotel_preferences
    flight = prefs.flight_preferences
    transport = prefs.transportation_preferences
    other = prefs.other_info
    dates = [d.isoformat() for d in prefs.trip_dates()]

    dietary = ", ".join(
        f"{d.type} ({d.details})" if d.details else d.type for d in personal.dietary_restrictions
    )

    return f"""You are a highly personalized AI Travel Advisor.
Based on the following preferences, create a detailed travel itinerary:

Destination: {prefs.destination}
Travel Dates: {prefs.travel_dates.arrival.isoformat()} to {prefs.travel_dates.departure.isoformat()} ({len(dates)} days)

Personal Preferences:
- Likes: {_join(personal.activities.likes)}
- Dislikes: {_join(personal.activities.dislikes)}
- Dietary Restrictions: {dietary or 'None'}
- Energy Level: {personal.energy_level}
- Travel Pace: {personal.travel_pace}
- Budget: {_amount(budget.amount)} {budget.currency} ({budget.type})

Hotel Preferences:
- Type: {hotel.type}
- Loyalty Programs: {_join(hotel.loyalty_programs)}
- Room Preferences: {_join(hotel.room_preferences)}

Flight Preferences:
- Class: {flight.travel_class}
- Airline Memberships: {_join(flight.airline_memberships)}
- Seat Preferences: {_join(flight.seat_preferences)}

Transportation Preferences:
- Preferred Methods: {_join(transport.preferred_methods)}
- Comfort vs Cost: {transport.comfort_vs_cost}

Other Info:
- Weather Sensitivity: {other.weather_sensitivity or 'None'}
- Packing Help Needed: {'Yes' if other.packing_help_needed else 'No'}

Please create a detailed day-by-day itinerary including:
1. Daily activities with times and locations
2. Restaurant recommendations that match dietary needs
3. Transportation methods between locations
4. Estimated costs for each activity
5. Weather forecast for the travel dates
6. Packing suggestions based on activities and weather

{_day_rules(dates)}

Format the response as a JSON object matching the TravelItinerary type with the following structure:
{ITINERARY_SCHEMA}"""


def describe_modification(mod: ItineraryModification) -> str:
    """One line of plain language for a requested change, e.g. 'Day 2: adjust timing (activity #1, new time 10:00)'."""
    details = mod.details
    parts = []
    if details.activity_index is not None:
        parts.append(f"activity #{details.activity_index + 1}")
    if details.meal_index is not None:
        parts.append(f"meal #{details.meal_index + 1}")
    if details.transportation_index is not None:
        parts.append(f"transportation #{details.transportation_index + 1}")
    for label, value in (
        ("new time", details.new_time),
        ("new location", details.new_location),
        ("new description", details.new_description),
        ("new restaurant", details.new_restaurant),
        ("new cuisine", details.new_cuisine),
        ("new method", details.new_method),
        ("notes", details.other_details),
    ):
        if value:
            parts.append(f"{label} {value}")
    line = f"Day {mod.day + 1}: {mod.type.replace('_', ' ')}"
    return f"{line} ({', '.join(parts)})" if parts else line


def describe_feedback(feedback: ItineraryFeedback) -> str:
    lines = []
    if feedback.general_feedback and feedback.general_feedback.strip():
        lines.append(f"General feedback: {feedback.general_feedback.strip()}")
    if feedback.budget_adjustment:
        adj = feedback.budget_adjustment
        lines.append(f"Budget adjustment: {adj.type} by {_amount(adj.amount)} {adj.currency}")
    if feedback.time_adjustment:
        adj = feedback.time_adjustment
        lines.append(f"Time adjustment: move activities {_amount(adj.amount)} {adj.unit} {adj.type}")
    if feedback.modifications:
        lines.append("Requested modifications:")
        lines.extend(f"- {describe_modification(m)}" for m in feedback.modifications)
    return "\n".join(lines) if not feedback.is_empty() else "No specific changes requested."


def build_revision_prompt(itinerary: TravelItinerary, feedback: ItineraryFeedback) -> str:
    dates = [d.isoformat() for d in itinerary.expected_dates()]
    return f"""The user has provided feedback on their travel itinerary. Please modify the itinerary based on this feedback:

Original Itinerary:
{json.dumps(itinerary.to_wire(), indent=2)}

User Feedback:
{describe_feedback(feedback)}

Feedback Payload:
{json.dumps(feedback.to_wire(), indent=2)}

Please create an updated itinerary that addresses the user's feedback while maintaining the original preferences and constraints.
Return the complete updated itinerary, not only the changed parts.
Indexes in the feedback payload (`day`, `activityIndex`, `mealIndex`, `transportationIndex`) are 0-based; the plain-language list numbers them from 1.
{_day_rules(dates)}

Format the response as a JSON object matching the TravelItinerary type with the following structure:
{ITINERARY_SCHEMA}"""


def build_booking_prompt(itinerary: TravelItinerary, prefs: Optional[TravelPreferences] = None) -> str:
    traveler = itinerary.traveler
    if prefs is not None:
        flight_class = prefs.flight_preferences.travel_class
        memberships = _join(prefs.flight_preferences.airline_memberships)
        hotel_type = prefs.hotel_preferences.type
        loyalty = _join(prefs.hotel_preferences.loyalty_programs)
    else:
        echoed = traveler.preferences
        flight_class = echoed.flight_preferences.travel_class or "economy"
        memberships = "None"
        hotel_type = echoed.hotel_preferences.type or "any"
        loyalty = "None"

    return f"""Based on the following itinerary, simulate flight and hotel bookings:

Destination: {traveler.destination}
Dates: {traveler.travel_dates.start} to {traveler.travel_dates.end}

Flight Preferences:
- Class: {flight_class}
- Airline Memberships: {memberships}

Hotel Preferences:
- Type: {hotel_type}
- Loyalty Programs: {loyalty}

Please simulate:
1. Flight bookings (including loyalty points if applicable)
2. Hotel bookings (including loyalty points if applicable)
3. Total cost and estimated savings

"totalCost" must equal the sum of every flight and hotel "price".

Format the response as a JSON object with the following structure:
{BOOKING_SCHEMA}"""
