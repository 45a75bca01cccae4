from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Booking(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class FlightEndpoint(_Booking):
    airport: str
    time: str


class FlightBooking(_Booking):
    airline: str
    flight_number: str = Field(alias="flightNumber")
    departure: FlightEndpoint
    arrival: FlightEndpoint
    travel_class: str = Field(alias="class")
    price: float = Field(ge=0)
    loyalty_points: Optional[int] = Field(None, alias="loyaltyPoints", ge=0)


class HotelBooking(_Booking):
    name: str
    type: str
    check_in: str = Field(alias="checkIn")
    check_out: str = Field(alias="checkOut")
    room_type: str = Field(alias="roomType")
    price: float = Field(ge=0)
    loyalty_points: Optional[int] = Field(None, alias="loyaltyPoints", ge=0)


class BookingSimulation(_Booking):
    flights: List[FlightBooking] = []
    hotels: List[HotelBooking] = []
    total_cost: float = Field(alias="totalCost", ge=0)
    estimated_savings: float = Field(0, alias="estimatedSavings", ge=0)

    def computed_total(self) -> float:
        return round(sum(f.price for f in self.flights) + sum(h.price for h in self.hotels), 2)

    def total_loyalty_points(self) -> int:
        return sum(b.loyalty_points or 0 for b in [*self.flights, *self.hotels])

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class BookingResponse(_Booking):
    """The envelope the client keeps as `bookingResponse`."""

    bookings: BookingSimulation

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
