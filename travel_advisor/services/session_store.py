from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

# Keys mirrored from the browser's local storage
CURRENT_ITINERARY = "currentItinerary"
BOOKING_RESPONSE = "bookingResponse"
TRAVEL_PREFERENCES = "travelPreferences"

SESSION_KEYS = (CURRENT_ITINERARY, BOOKING_RESPONSE, TRAVEL_PREFERENCES)


class SessionStore(ABC):
    """
    Key-value snapshot of one planning session.

    Lifecycle: `travelPreferences` is written when a plan is requested,
    `currentItinerary` on every successful generation or revision,
    `bookingResponse` on a successful booking. Starting a new plan clears
    the itinerary and booking but keeps the preferences to prefill the form.
    Values are JSON documents (dicts), never model instances.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def set(self, key: str, value: Dict[str, Any]) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        result = {}
        for key in SESSION_KEYS:
            value = self.get(key)
            if value is not None:
                result[key] = value
        return result


class InMemorySessionStore(SessionStore):
    def __init__(self):
        self._data: Dict[str, Dict[str, Any]] = {}

    def _check(self, key: str) -> None:
        if key not in SESSION_KEYS:
            raise KeyError(f"Unknown session key: {key}")

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        self._check(key)
        return self._data.get(key)

    def set(self, key: str, value: Dict[str, Any]) -> None:
        self._check(key)
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._check(key)
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()
