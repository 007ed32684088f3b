from .payload import RawCategory, RawDay, RawMealLine, RawMealSession, RawMenuPlan, RawRecipe
from .schedule import CalendarDay, CategoryKind, ExtractedDayMenu, MealType, ScheduleDay

__all__ = [
    "RawRecipe",
    "RawCategory",
    "RawMealLine",
    "RawDay",
    "RawMenuPlan",
    "RawMealSession",
    "MealType",
    "CategoryKind",
    "ExtractedDayMenu",
    "CalendarDay",
    "ScheduleDay",
]
