from pydantic import BaseModel, ConfigDict, Field
from typing import Literal

from travel_advisor.models.booking import BookingResponse
from travel_advisor.models.itinerary import TravelItinerary

TravelAction = Literal["generate_itinerary", "get_feedback", "simulate_bookings"]

# --- /travel envelopes ---

class ErrorResponse(BaseModel):
    error: str

# --- Geocoding ---

class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float

    @property
    def found(self) -> bool:
        # (0, 0) is the "not found" sentinel, never a real match
        return not (self.lat == 0 and self.lon == 0)

NOT_FOUND = Coordinates(lat=0, lon=0)

# --- Document export ---

class ExportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    itinerary: TravelItinerary
    booking_response: BookingResponse = Field(alias="bookingResponse")
