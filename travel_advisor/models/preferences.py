from datetime import date, timedelta
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

EnergyLevel = Literal["relaxed", "balanced", "busy"]
TravelPace = Literal["lots of rest", "packed schedule"]
BudgetType = Literal["total", "per-day"]
ComfortVsCost = Literal["comfort", "cost"]


def _unique(values: List[str]) -> List[str]:
    # Set semantics, first occurrence order kept so prompts stay stable
    seen = set()
    result = []
    for value in values:
        value = value.strip()
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TravelDates(_Frozen):
    arrival: date
    departure: date

    @model_validator(mode="after")
    def check_order(self):
        if self.arrival > self.departure:
            raise ValueError("arrival must be on or before departure")
        return self


class ActivityPreference(_Frozen):
    likes: List[str] = []
    dislikes: List[str] = []

    @field_validator("likes", "dislikes")
    @classmethod
    def dedupe(cls, v: List[str]) -> List[str]:
        return _unique(v)


class DietaryRestriction(_Frozen):
    type: str
    details: Optional[str] = None


class Budget(_Frozen):
    type: BudgetType = "total"
    amount: float = Field(0, ge=0)
    currency: str = "USD"

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("currency code must not be empty")
        return v


class PersonalPreferences(_Frozen):
    activities: ActivityPreference = ActivityPreference()
    dietary_restrictions: List[DietaryRestriction] = Field([], alias="dietaryRestrictions")
    energy_level: EnergyLevel = Field("balanced", alias="energyLevel")
    travel_pace: TravelPace = Field("packed schedule", alias="travelPace")
    budget: Budget = Budget()


class HotelPreference(_Frozen):
    type: str = "any"
    loyalty_programs: Optional[List[str]] = Field(None, alias="loyaltyPrograms")
    room_preferences: Optional[List[str]] = Field(None, alias="roomPreferences")


class FlightPreference(_Frozen):
    travel_class: str = Field("economy", alias="class")
    airline_memberships: Optional[List[str]] = Field(None, alias="airlineMemberships")
    seat_preferences: Optional[List[str]] = Field(None, alias="seatPreferences")


class TransportationPreference(_Frozen):
    preferred_methods: List[str] = Field([], alias="preferredMethods")
    comfort_vs_cost: ComfortVsCost = Field("comfort", alias="comfortVsCost")

    @field_validator("preferred_methods")
    @classmethod
    def dedupe(cls, v: List[str]) -> List[str]:
        return _unique(v)


class OtherInfo(_Frozen):
    weather_sensitivity: Optional[str] = Field(None, alias="weatherSensitivity")
    packing_help_needed: bool = Field(False, alias="packingHelpNeeded")


class TravelPreferences(_Frozen):
    """
    Everything the traveller entered in the planning form.
    The optional sections of the form fall back to neutral defaults.
    """

    destination: str
    travel_dates: TravelDates = Field(alias="travelDates")
    personal_preferences: PersonalPreferences = Field(PersonalPreferences(), alias="personalPreferences")
    hotel_preferences: HotelPreference = Field(HotelPreference(), alias="hotelPreferences")
    flight_preferences: FlightPreference = Field(FlightPreference(), alias="flightPreferences")
    transportation_preferences: TransportationPreference = Field(
        TransportationPreference(), alias="transportationPreferences"
    )
    other_info: OtherInfo = Field(OtherInfo(), alias="otherInfo")

    @field_validator("destination")
    @classmethod
    def non_empty_destination(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("destination must not be empty")
        return v

    def trip_length_days(self) -> int:
        """Inclusive number of days between arrival and departure."""
        return (self.travel_dates.departure - self.travel_dates.arrival).days + 1

    def trip_dates(self) -> List[date]:
        start = self.travel_dates.arrival
        return [start + timedelta(days=i) for i in range(self.trip_length_days())]

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
