# travel_advisor/services/request_router.py
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from travel_advisor.core.errors import ValidationError
from travel_advisor.models.feedback import ItineraryFeedback
from travel_advisor.models.itinerary import TravelItinerary
from travel_advisor.models.preferences import TravelPreferences
from travel_advisor.models.schemas import TravelAction
from travel_advisor.services.travel_agent import TravelAgent

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

INVALID_ACTION = "Invalid action"


class InvalidActionError(ValidationError):
    def __init__(self):
        super().__init__(INVALID_ACTION)


def _first_error(field: str, error: SchemaValidationError) -> ValidationError:
    first = error.errors()[0]
    location = ".".join(str(part) for part in (field, *first["loc"]))
    return ValidationError(first["msg"], field=location)


def parse_model(model: Type[ModelT], field: str, value: Any) -> ModelT:
    """Validate one envelope field, turning pydantic errors into a field-level ValidationError."""
    try:
        return model.model_validate(value)
    except SchemaValidationError as e:
        raise _first_error(field, e) from e


def parse_feedback(value: Any) -> ItineraryFeedback:
    try:
        return ItineraryFeedback.from_payload(value)
    except SchemaValidationError as e:
        raise _first_error("feedback", e) from e


class RequestRouter:
    """
    Dispatches a /travel envelope {action, preferences?, itinerary?, feedback?}
    to the matching TravelAgent operation.

    Required fields are checked before anything is dispatched, so a bad request
    never reaches the generation service. Orchestrator errors propagate untouched;
    the HTTP layer decides how much of them the caller gets to see.
    """

    def __init__(self, agent: TravelAgent):
        self.agent = agent
        self._handlers: Dict[TravelAction, Callable[[dict], Awaitable[Dict[str, Any]]]] = {
            "generate_itinerary": self._generate_itinerary,
            "get_feedback": self._get_feedback,
            "simulate_bookings": self._simulate_bookings,
        }

    async def dispatch(self, payload: Any) -> Dict[str, Any]:
        action = payload.get("action") if isinstance(payload, dict) else None
        handler = self._handlers.get(action) if isinstance(action, str) else None
        if handler is None:
            raise InvalidActionError()
        logger.info("Dispatching action %s", action)
        return await handler(payload)

    async def _generate_itinerary(self, payload: dict) -> Dict[str, Any]:
        if not payload.get("preferences"):
            raise ValidationError("Travel preferences are required")
        prefs = parse_model(TravelPreferences, "preferences", payload["preferences"])
        itinerary = await self.agent.generate_itinerary(prefs)
        return {"itinerary": itinerary.to_wire()}

    async def _get_feedback(self, payload: dict) -> Dict[str, Any]:
        if not payload.get("itinerary") or not payload.get("feedback"):
            raise ValidationError("Itinerary and feedback are required")
        itinerary = parse_model(TravelItinerary, "itinerary", payload["itinerary"])
        feedback = parse_feedback(payload["feedback"])
        if feedback.is_empty():
            raise ValidationError("Itinerary and feedback are required")
        revised = await self.agent.revise_itinerary(itinerary, feedback)
        return {"itinerary": revised.to_wire()}

    async def _simulate_bookings(self, payload: dict) -> Dict[str, Any]:
        if not payload.get("itinerary"):
            raise ValidationError("Itinerary is required")
        itinerary = parse_model(TravelItinerary, "itinerary", payload["itinerary"])
        prefs: Optional[TravelPreferences] = None
        if payload.get("preferences"):
            prefs = parse_model(TravelPreferences, "preferences", payload["preferences"])
        bookings = await self.agent.simulate_bookings(itinerary, prefs)
        return {"bookings": bookings.to_wire()}
