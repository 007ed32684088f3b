from enum import Enum

from pydantic import BaseModel, ConfigDict


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"


class CategoryKind(str, Enum):
    ENTREE = "entree"
    SIDE = "side"
    ALTERNATIVE = "alternative"


class ExtractedDayMenu(BaseModel):
    """One meal on one date, as read from the feed"""

    model_config = ConfigDict(frozen=True)

    date: str
    meal_type: MealType
    sentence: str


class CalendarDay(BaseModel):
    """A generated day, e.g. ``{"date": "9-6-2021", "label": "Today"}``"""

    model_config = ConfigDict(frozen=True)

    date: str
    label: str


class ScheduleDay(BaseModel):
    """A calendar day with whatever breakfast and lunch sentences the feed provided"""

    model_config = ConfigDict(frozen=True)

    date: str
    label: str
    breakfast: str | None = None
    lunch: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Serialize for consumers; meals without a sentence are left out entirely."""
        return self.model_dump(exclude_none=True)
