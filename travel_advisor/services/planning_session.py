# travel_advisor/services/planning_session.py
import logging
from enum import Enum
from typing import Optional

from travel_advisor.core.errors import InvalidTransitionError
from travel_advisor.models.booking import BookingResponse
from travel_advisor.models.feedback import ItineraryFeedback
from travel_advisor.models.itinerary import TravelItinerary
from travel_advisor.models.preferences import TravelPreferences
from travel_advisor.services.session_store import (
    BOOKING_RESPONSE,
    CURRENT_ITINERARY,
    TRAVEL_PREFERENCES,
    InMemorySessionStore,
    SessionStore,
)
from travel_advisor.services.travel_agent import TravelAgent

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    ITINERARY_READY = "itinerary-ready"
    GENERATION_FAILED = "generation-failed"
    REVISING = "revising"
    REVISION_FAILED = "revision-failed"
    BOOKING = "booking"
    BOOKING_CONFIRMED = "booking-confirmed"
    BOOKING_FAILED = "booking-failed"


IN_FLIGHT = {SessionState.GENERATING, SessionState.REVISING, SessionState.BOOKING}

# States holding a usable itinerary
HAS_ITINERARY = {
    SessionState.ITINERARY_READY,
    SessionState.REVISION_FAILED,
    SessionState.BOOKING_CONFIRMED,
    SessionState.BOOKING_FAILED,
}


class PlanningSession:
    """
    One traveller's way through plan -> revise -> book.

    Every transition is an explicit call; nothing is retried. A failed call
    leaves the stored snapshot as it was and re-raises, and a call made while
    another one is still awaiting its reply is refused.
    """

    def __init__(self, agent: TravelAgent, store: Optional[SessionStore] = None):
        self.agent = agent
        self.store = store or InMemorySessionStore()
        self.state = SessionState.ITINERARY_READY if self.store.get(CURRENT_ITINERARY) else SessionState.IDLE

    def _begin(self, target: SessionState, allowed: set) -> None:
        if self.state in IN_FLIGHT:
            raise InvalidTransitionError(f"Cannot start {target.value} while {self.state.value}")
        if self.state not in allowed:
            raise InvalidTransitionError(f"Cannot start {target.value} from {self.state.value}")
        self.state = target

    def _fail(self, state: SessionState) -> None:
        logger.warning("Planning session action failed: %s -> %s", self.state.value, state.value)
        self.state = state

    @property
    def itinerary(self) -> Optional[TravelItinerary]:
        data = self.store.get(CURRENT_ITINERARY)
        return TravelItinerary.model_validate(data) if data else None

    @property
    def booking(self) -> Optional[BookingResponse]:
        data = self.store.get(BOOKING_RESPONSE)
        return BookingResponse.model_validate(data) if data else None

    @property
    def last_preferences(self) -> Optional[TravelPreferences]:
        data = self.store.get(TRAVEL_PREFERENCES)
        return TravelPreferences.model_validate(data) if data else None

    async def generate(self, prefs: TravelPreferences) -> TravelItinerary:
        self._begin(
            SessionState.GENERATING,
            {SessionState.IDLE, SessionState.GENERATION_FAILED, *HAS_ITINERARY},
        )
        try:
            self.store.set(TRAVEL_PREFERENCES, prefs.to_wire())
            itinerary = await self.agent.generate_itinerary(prefs)
        except Exception:
            self._fail(SessionState.GENERATION_FAILED)
            raise
        self.store.set(CURRENT_ITINERARY, itinerary.to_wire())
        # A booking made for the previous plan no longer applies
        self.store.delete(BOOKING_RESPONSE)
        self.state = SessionState.ITINERARY_READY
        return itinerary

    async def revise(self, feedback: ItineraryFeedback) -> TravelItinerary:
        self._begin(SessionState.REVISING, HAS_ITINERARY)
        try:
            revised = await self.agent.revise_itinerary(self.itinerary, feedback)
        except Exception:
            self._fail(SessionState.REVISION_FAILED)
            raise
        self.store.set(CURRENT_ITINERARY, revised.to_wire())
        self.store.delete(BOOKING_RESPONSE)
        self.state = SessionState.ITINERARY_READY
        return revised

    async def book(self) -> BookingResponse:
        self._begin(SessionState.BOOKING, HAS_ITINERARY)
        try:
            bookings = await self.agent.simulate_bookings(self.itinerary, self.last_preferences)
        except Exception:
            self._fail(SessionState.BOOKING_FAILED)
            raise
        response = BookingResponse(bookings=bookings)
        self.store.set(BOOKING_RESPONSE, response.to_wire())
        self.state = SessionState.BOOKING_CONFIRMED
        return response

    def start_new_plan(self) -> None:
        if self.state in IN_FLIGHT:
            raise InvalidTransitionError(f"Cannot start a new plan while {self.state.value}")
        self.store.delete(CURRENT_ITINERARY)
        self.store.delete(BOOKING_RESPONSE)
        self.state = SessionState.IDLE
