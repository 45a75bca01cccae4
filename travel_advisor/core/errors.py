# travel_advisor/core/errors.py


class TravelAdvisorError(Exception):
    """Base class for every error raised by the travel advisor services."""


class ValidationError(TravelAdvisorError):
    """
    Missing or malformed required input.
    Reported to the caller as a 400 with the message as-is.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(f"{field}: {message}" if field else message)


class GenerationError(TravelAdvisorError):
    """The generation service returned empty, unparsable or inconsistent content."""


class TransportError(TravelAdvisorError):
    """Network failure while reaching an external service."""


class InvalidTransitionError(TravelAdvisorError):
    """A planning session action was requested from a state that does not allow it."""


class FixtureError(TravelAdvisorError):
    """A pre-recorded document is missing, unreadable or not valid JSON."""
