# travel_advisor/services/pdf_export.py
import re
from typing import Optional

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from travel_advisor.models.booking import BookingSimulation
from travel_advisor.models.itinerary import BUDGET_KEYS, TravelItinerary

_UNSAFE_FILENAME = re.compile(r"[^A-Za-z0-9._-]+")


def export_filename(itinerary: TravelItinerary) -> str:
    """itinerary-<destination>-<start date>.pdf, with anything unsafe in a filename replaced."""
    destination = _UNSAFE_FILENAME.sub("_", itinerary.traveler.destination.strip()).strip("_") or "trip"
    start = _UNSAFE_FILENAME.sub("_", itinerary.traveler.travel_dates.start.strip()) or "undated"
    return f"itinerary-{destination}-{start}.pdf"


def _latin1(text: Optional[str]) -> str:
    # Core PDF fonts only cover latin-1
    return (text or "").replace("–", "-").replace("—", "-").encode("latin-1", "replace").decode("latin-1")


def _money(value: float) -> str:
    return f"${value:,.2f}".replace(".00", "")


class ItineraryDocument(FPDF):
    def section_title(self, title: str) -> None:
        self.ln(4)
        self.set_font("Helvetica", "B", 14)
        self.set_text_color(51, 51, 51)
        self.cell(0, 9, _latin1(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def row(self, label: str, value: str) -> None:
        self.set_font("Helvetica", "", 10)
        self.set_text_color(102, 102, 102)
        self.cell(40, 6, _latin1(label))
        self.set_text_color(51, 51, 51)
        self.multi_cell(0, 6, _latin1(value), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def divider(self) -> None:
        self.set_draw_color(221, 221, 221)
        y = self.get_y() + 1
        self.line(self.l_margin, y, self.w - self.r_margin, y)
        self.ln(3)

    def footer(self) -> None:
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")


def build_itinerary_pdf(itinerary: TravelItinerary, bookings: BookingSimulation) -> bytes:
    """
    Render flights, hotels, the day-by-day plan, booking summary,
    packing list and budget breakdown as a paginated A4 document.
    """
    pdf = ItineraryDocument(format="A4")
    pdf.set_auto_page_break(auto=True, margin=20)
    pdf.set_margins(15, 15, 15)
    pdf.add_page()

    traveler = itinerary.traveler
    pdf.set_font("Helvetica", "B", 22)
    pdf.cell(0, 12, "Travel Itinerary", align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_font("Helvetica", "", 12)
    pdf.set_text_color(102, 102, 102)
    subtitle = f"{traveler.destination} - {traveler.travel_dates.start} to {traveler.travel_dates.end}"
    pdf.cell(0, 8, _latin1(subtitle), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    pdf.section_title("Flight Details")
    if not bookings.flights:
        pdf.row("Flights:", "None booked")
    for flight in bookings.flights:
        pdf.row("Airline:", f"{flight.airline} - {flight.flight_number}")
        pdf.row("Departure:", f"{flight.departure.time} - {flight.departure.airport}")
        pdf.row("Arrival:", f"{flight.arrival.time} - {flight.arrival.airport}")
        pdf.row("Class:", flight.travel_class)
        pdf.row("Price:", _money(flight.price))
        if flight.loyalty_points:
            pdf.row("Loyalty points:", str(flight.loyalty_points))
        pdf.divider()

    pdf.section_title("Hotel Details")
    if not bookings.hotels:
        pdf.row("Hotels:", "None booked")
    for hotel in bookings.hotels:
        pdf.row("Hotel:", hotel.name)
        pdf.row("Type:", hotel.type)
        pdf.row("Room:", hotel.room_type)
        pdf.row("Check-in:", hotel.check_in)
        pdf.row("Check-out:", hotel.check_out)
        pdf.row("Price:", _money(hotel.price))
        if hotel.loyalty_points:
            pdf.row("Loyalty points:", str(hotel.loyalty_points))
        pdf.divider()

    pdf.section_title("Daily Itinerary")
    for index, day in enumerate(itinerary.itinerary, start=1):
        pdf.set_font("Helvetica", "B", 12)
        pdf.set_text_color(51, 51, 51)
        pdf.cell(0, 8, _latin1(f"Day {index} - {day.date}"), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.row("Weather:", day.weather or "n/a")
        for activity in day.activities:
            pdf.row("Time:", activity.time)
            pdf.row("Activity:", activity.activity)
            if activity.location:
                pdf.row("Location:", activity.location)
            pdf.row("Cost:", activity.cost)
            pdf.row("Transportation:", activity.transportation)
            pdf.ln(2)
        pdf.divider()

    pdf.section_title("Booking Summary")
    pdf.row("Total Cost:", _money(bookings.total_cost))
    if bookings.estimated_savings > 0:
        pdf.row("Estimated Savings:", _money(bookings.estimated_savings))
    points = bookings.total_loyalty_points()
    if points:
        pdf.row("Loyalty Points:", str(points))

    pdf.section_title("Packing List")
    pdf.set_font("Helvetica", "", 10)
    for item in itinerary.packing_list:
        pdf.multi_cell(0, 6, _latin1(f"- {item}"), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    pdf.section_title("Budget Breakdown")
    breakdown = itinerary.budget_breakdown.model_dump(by_alias=True)
    for key in BUDGET_KEYS:
        pdf.row(f"{key}:", breakdown[key])

    return bytes(pdf.output())
