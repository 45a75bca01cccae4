from datetime import date, timedelta
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

BUDGET_KEYS = (
    "Hotel",
    "Dining",
    "Activities",
    "Transportation",
    "Miscellaneous",
    "Total Estimated Cost",
)


def _as_display(value: Any) -> Any:
    # The model sometimes answers 25 where "$25" is expected
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, (int, float)):
        return str(int(value)) if float(value).is_integer() else str(value)
    return value


class _Echo(BaseModel):
    # Generated documents carry extra keys; keep them so a revision round trip loses nothing
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")


class EchoedHotelPreferences(_Echo):
    type: str = ""
    room_preferences: Union[List[str], str] = Field([], alias="roomPreferences")


class EchoedFlightPreferences(_Echo):
    travel_class: str = Field("", alias="class")
    seat_preferences: Union[List[str], str] = Field("", alias="seatPreferences")


class EchoedTransportationPreferences(_Echo):
    preferred_methods: List[str] = Field([], alias="preferredMethods")
    comfort_vs_cost: str = Field("", alias="comfortVsCost")


class TravelerPreferences(_Echo):
    likes: List[str] = []
    dislikes: List[str] = []
    dietary_restrictions: Union[List[str], str] = Field("", alias="dietaryRestrictions")
    energy_level: str = Field("", alias="energyLevel")
    travel_pace: str = Field("", alias="travelPace")
    budget: Union[float, str] = 0
    hotel_preferences: EchoedHotelPreferences = Field(EchoedHotelPreferences(), alias="hotelPreferences")
    flight_preferences: EchoedFlightPreferences = Field(EchoedFlightPreferences(), alias="flightPreferences")
    transportation_preferences: EchoedTransportationPreferences = Field(
        EchoedTransportationPreferences(), alias="transportationPreferences"
    )
    weather_sensitivity: Optional[str] = Field(None, alias="weatherSensitivity")
    packing_help_needed: bool = Field(False, alias="packingHelpNeeded")


class ItineraryDates(_Echo):
    start: str
    end: str


class Traveler(_Echo):
    destination: str
    travel_dates: ItineraryDates = Field(alias="travelDates")
    preferences: TravelerPreferences = TravelerPreferences()


class ItineraryActivity(_Echo):
    time: str
    activity: str
    location: Optional[str] = None
    cost: str = ""
    transportation: str = ""

    @field_validator("cost", mode="before")
    @classmethod
    def cost_as_text(cls, v: Any) -> Any:
        return _as_display(v)


class DayPlan(_Echo):
    date: str
    weather: str = ""
    activities: List[ItineraryActivity]


class BudgetBreakdown(_Echo):
    hotel: str = Field(alias="Hotel")
    dining: str = Field(alias="Dining")
    activities: str = Field(alias="Activities")
    transportation: str = Field(alias="Transportation")
    miscellaneous: str = Field(alias="Miscellaneous")
    total_estimated_cost: str = Field(alias="Total Estimated Cost")

    @field_validator("*", mode="before")
    @classmethod
    def amounts_as_text(cls, v: Any) -> Any:
        return _as_display(v)


class TravelItinerary(_Echo):
    """
    A day-by-day plan as produced by the generation service.
    Replaced wholesale on every revision, never patched in place.
    """

    traveler: Traveler
    itinerary: List[DayPlan]
    packing_list: List[str] = Field(alias="packingList")
    budget_breakdown: BudgetBreakdown = Field(alias="budgetBreakdown")

    def day_count(self) -> int:
        return len(self.itinerary)

    def expected_dates(self) -> List[date]:
        """
        Calendar dates covered by traveler.travelDates, inclusive.
        Raises ValueError when the echoed dates are not ISO dates or are out of order.
        """
        start = date.fromisoformat(self.traveler.travel_dates.start[:10])
        end = date.fromisoformat(self.traveler.travel_dates.end[:10])
        if start > end:
            raise ValueError(f"travel dates out of order: {start} > {end}")
        return [start + timedelta(days=i) for i in range((end - start).days + 1)]

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
