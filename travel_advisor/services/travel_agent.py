# travel_advisor/services/travel_agent.py
import json
import logging
import re
from datetime import date
from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from travel_advisor.core.errors import GenerationError, ValidationError
from travel_advisor.models.booking import BookingSimulation
from travel_advisor.models.feedback import ItineraryFeedback
from travel_advisor.models.itinerary import TravelItinerary
from travel_advisor.models.preferences import TravelPreferences
from travel_advisor.services import prompts
from travel_advisor.services.generation_service import GenerationService

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")


def parse_json_object(text: Optional[str]) -> dict:
    """
    Parse the reply of the generation service into a JSON object.
    Raises GenerationError for empty replies, invalid JSON or a non-object document.
    """
    if text is None or not text.strip():
        raise GenerationError("No response from the generation service")
    cleaned = _FENCE.sub("", text.strip())
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise GenerationError(f"Generation service returned invalid JSON: {e.msg}") from e
    if not isinstance(data, dict):
        raise GenerationError("Generation service returned JSON that is not an object")
    return data


def _validate_as(model: Type[ModelT], data: dict, what: str) -> ModelT:
    try:
        return model.model_validate(data)
    except SchemaValidationError as e:
        raise GenerationError(f"Generated {what} does not match the expected shape: {e.error_count()} error(s)") from e


def check_day_entries(itinerary: TravelItinerary, expected: List[date]) -> None:
    """
    One day entry per calendar day of the trip, in order.
    Raises GenerationError on a count or date mismatch.
    """
    if itinerary.day_count() != len(expected):
        raise GenerationError(
            f"Generated itinerary has {itinerary.day_count()} day(s), expected {len(expected)}"
        )
    for index, (day, wanted) in enumerate(zip(itinerary.itinerary, expected)):
        try:
            got = date.fromisoformat(day.date.strip()[:10])
        except ValueError as e:
            raise GenerationError(f"Day {index + 1} has a non-ISO date: {day.date!r}") from e
        if got != wanted:
            raise GenerationError(f"Day {index + 1} is dated {got}, expected {wanted}")


class TravelAgent:
    """
    Serializes trip data into prompts, makes one generation call per action
    and validates the reply. Every result replaces the previous one wholesale.
    """

    def __init__(self, generator: GenerationService):
        self.generator = generator

    async def _generate(self, system_prompt: str, user_prompt: str, what: str) -> dict:
        logger.info("Requesting %s from the generation service", what)
        reply = await self.generator.complete_json(system_prompt, user_prompt)
        return parse_json_object(reply)

    async def generate_itinerary(self, prefs: TravelPreferences) -> TravelItinerary:
        prompt = prompts.build_itinerary_prompt(prefs)
        data = await self._generate(prompts.ITINERARY_SYSTEM_PROMPT, prompt, "itinerary")
        itinerary = _validate_as(TravelItinerary, data, "itinerary")
        check_day_entries(itinerary, prefs.trip_dates())
        logger.info("Generated a %d-day itinerary for %s", itinerary.day_count(), prefs.destination)
        return itinerary

    async def revise_itinerary(
        self, itinerary: TravelItinerary, feedback: ItineraryFeedback
    ) -> TravelItinerary:
        try:
            expected = itinerary.expected_dates()
        except ValueError as e:
            raise ValidationError(str(e), field="itinerary.traveler.travelDates") from e
        for position, mod in enumerate(feedback.modifications):
            if mod.day >= itinerary.day_count():
                raise ValidationError(
                    f"day {mod.day} does not exist in a {itinerary.day_count()}-day itinerary",
                    field=f"feedback.modifications.{position}.day",
                )

        prompt = prompts.build_revision_prompt(itinerary, feedback)
        data = await self._generate(prompts.REVISION_SYSTEM_PROMPT, prompt, "itinerary revision")
        revised = _validate_as(TravelItinerary, data, "itinerary")
        check_day_entries(revised, expected)
        logger.info(
            "Revised itinerary for %s with %d modification(s)",
            revised.traveler.destination,
            len(feedback.modifications),
        )
        return revised

    async def simulate_bookings(
        self, itinerary: TravelItinerary, prefs: Optional[TravelPreferences] = None
    ) -> BookingSimulation:
        prompt = prompts.build_booking_prompt(itinerary, prefs)
        data = await self._generate(prompts.BOOKING_SYSTEM_PROMPT, prompt, "booking simulation")
        bookings = _validate_as(BookingSimulation, data, "booking simulation")

        total = bookings.computed_total()
        if abs(bookings.total_cost - total) > 0.005:
            logger.warning(
                "Booking total %.2f disagrees with the sum of prices %.2f; using the sum",
                bookings.total_cost,
                total,
            )
            bookings = bookings.model_copy(update={"total_cost": total})
        return bookings
