from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ModificationType = Literal[
    "add_activity",
    "remove_activity",
    "modify_activity",
    "add_meal",
    "remove_meal",
    "modify_meal",
    "change_transportation",
    "adjust_timing",
    "change_location",
    "other",
]


class _Feedback(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ModificationDetails(_Feedback):
    activity_index: Optional[int] = Field(None, alias="activityIndex", ge=0)
    meal_index: Optional[int] = Field(None, alias="mealIndex", ge=0)
    transportation_index: Optional[int] = Field(None, alias="transportationIndex", ge=0)
    new_time: Optional[str] = Field(None, alias="newTime")
    new_location: Optional[str] = Field(None, alias="newLocation")
    new_description: Optional[str] = Field(None, alias="newDescription")
    new_restaurant: Optional[str] = Field(None, alias="newRestaurant")
    new_cuisine: Optional[str] = Field(None, alias="newCuisine")
    new_method: Optional[str] = Field(None, alias="newMethod")
    other_details: Optional[str] = Field(None, alias="otherDetails")


class ItineraryModification(_Feedback):
    type: ModificationType
    # 0-based index into TravelItinerary.itinerary
    day: int = Field(ge=0)
    details: ModificationDetails = ModificationDetails()


class BudgetAdjustment(_Feedback):
    type: Literal["increase", "decrease"]
    amount: float = Field(ge=0)
    currency: str = "USD"


class TimeAdjustment(_Feedback):
    type: Literal["earlier", "later"]
    amount: float = Field(ge=0)
    unit: Literal["minutes", "hours"] = "minutes"


class ItineraryFeedback(_Feedback):
    """
    Requested changes to an itinerary.
    The modifications are context for the generation service, not a patch to apply.
    """

    modifications: List[ItineraryModification] = []
    general_feedback: Optional[str] = Field(None, alias="generalFeedback")
    budget_adjustment: Optional[BudgetAdjustment] = Field(None, alias="budgetAdjustment")
    time_adjustment: Optional[TimeAdjustment] = Field(None, alias="timeAdjustment")

    @classmethod
    def from_payload(cls, payload) -> "ItineraryFeedback":
        """Accepts the structured document or a bare free-text comment."""
        if isinstance(payload, str):
            return cls(modifications=[], generalFeedback=payload)
        return cls.model_validate(payload)

    def is_empty(self) -> bool:
        return (
            not self.modifications
            and not (self.general_feedback or "").strip()
            and self.budget_adjustment is None
            and self.time_adjustment is None
        )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
