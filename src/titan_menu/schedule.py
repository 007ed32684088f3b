import logging
from collections.abc import Sequence
from datetime import date, timedelta

from .formatting import has_menu_content
from .models import CalendarDay, ExtractedDayMenu, MealType, ScheduleDay
from .utils import format_date, parse_menu_date

logger = logging.getLogger("titan-menu")

DAY_OF_WEEK = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

MenuIndex = dict[MealType, dict[date, ExtractedDayMenu]]


def upcoming_relative_dates(number_of_days: int = 5, start: date | None = None) -> list[CalendarDay]:
    """Return consecutive days starting at ``start`` (today by default), shaped like this:

    [
      CalendarDay(date="9-6-2021", label="Today"),
      CalendarDay(date="9-7-2021", label="Tomorrow"),
      CalendarDay(date="9-8-2021", label="Wednesday"),
      ...
    ]
    """
    start = start or date.today()

    days = []
    for offset in range(number_of_days):
        current = start + timedelta(days=offset)
        if offset == 0:
            label = "Today"
        elif offset == 1:
            label = "Tomorrow"
        else:
            label = DAY_OF_WEEK[current.weekday()]
        days.append(CalendarDay(date=format_date(current), label=label))
    return days


def days_to_generate(number_of_days: int, buffer_days: int) -> int:
    """Candidate window size: the extra buffer only applies when it is positive."""
    if buffer_days > 0:
        return number_of_days + buffer_days
    return number_of_days


def index_menus(menus: Sequence[Sequence[ExtractedDayMenu]], debug: bool = False) -> MenuIndex:
    """Key extracted menus by meal type and calendar date; the first entry for a date wins."""
    indexed: MenuIndex = {}
    for meal_menus in menus:
        for menu in meal_menus:
            menu_date = parse_menu_date(menu.date)
            if menu_date is None:
                if debug:
                    logger.debug({"message": "Could not parse menu date", "date": menu.date})
                continue
            # Sessions of one meal type that repeat a date keep the earliest session's menu
            indexed.setdefault(menu.meal_type, {}).setdefault(menu_date, menu)
    return indexed


def build_schedule_day(calendar_day: CalendarDay, menus: MenuIndex) -> ScheduleDay:
    day = parse_menu_date(calendar_day.date)
    meals = {}
    for meal_type, menus_by_date in menus.items():
        menu = menus_by_date.get(day)
        if menu is not None:
            meals[meal_type.value] = menu.sentence
    return ScheduleDay(date=calendar_day.date, label=calendar_day.label, **meals)


def select_days(
    number_of_days: int,
    buffer_days: int,
    menus: Sequence[Sequence[ExtractedDayMenu]],
    start: date | None = None,
    debug: bool = False,
) -> list[ScheduleDay]:
    """Attach extracted menus to upcoming calendar days and pick the days to display.

    With a positive ``buffer_days`` the candidate window is ``number_of_days + buffer_days``
    long, days without any menu are dropped and the first ``number_of_days`` remaining days
    are returned (fewer when the feed doesn't have enough). With ``buffer_days == 0`` the
    first ``number_of_days`` calendar days are returned as-is, empty or not.
    """
    indexed = index_menus(menus, debug)
    candidates = [
        build_schedule_day(calendar_day, indexed)
        for calendar_day in upcoming_relative_dates(days_to_generate(number_of_days, buffer_days), start)
    ]

    if buffer_days > 0:
        candidates = [day for day in candidates if has_menu_content(day.breakfast) or has_menu_content(day.lunch)]

    selected = candidates[:number_of_days]
    if debug:
        logger.debug(
            {
                "message": "Selected menu days",
                "requested": number_of_days,
                "buffer_days": buffer_days,
                "dates": [day.date for day in selected],
            }
        )
    return selected
