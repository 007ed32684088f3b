"""Normalizes a raw FamilyMenu response into per-meal lists of dated sentences.

The TitanSchools API can change shape without warning, so this module is the only
place that knows about it. Every nested level is validated on its own: a level that
is missing or malformed is logged and skipped instead of failing the whole response.
"""

import logging
import re
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from .formatting import FormatOptions, format_menu
from .models import ExtractedDayMenu, MealType, RawDay, RawMealSession

logger = logging.getLogger("titan-menu")

SESSIONS_KEY = "FamilyMenuSessions"

# ServingSession values include "Breakfast", "Lunch", "Seamless Summer Lunch" and
# "Seamless Summer Breakfast"; anything that isn't breakfast is served as lunch.
BREAKFAST_PATTERN = re.compile(r"breakfast", re.IGNORECASE)


def classify_session(serving_session: str) -> MealType:
    if BREAKFAST_PATTERN.search(serving_session or ""):
        return MealType.BREAKFAST
    return MealType.LUNCH


def parse_sessions(payload: Any, debug: bool = False) -> list[RawMealSession] | None:
    """Return the validated serving sessions, or None when the response has none."""
    if not isinstance(payload, dict) or SESSIONS_KEY not in payload or not isinstance(payload[SESSIONS_KEY], list):
        if debug:
            logger.warning(
                {"message": "TitanSchools API response did not contain the expected data", "response": payload}
            )
        else:
            logger.warning(
                {
                    "message": "TitanSchools API response did not contain the expected data. "
                    "Set debug to true in the menu config for verbose logs"
                }
            )
        return None

    sessions = []
    for index, raw_session in enumerate(payload[SESSIONS_KEY]):
        try:
            sessions.append(RawMealSession.model_validate(raw_session))
        except ValidationError as e:
            if debug:
                logger.debug({"message": "Skipping malformed serving session", "index": index, "error": str(e)})
    return sessions


def parse_day(raw_day: Any, debug: bool = False) -> RawDay | None:
    """Return the day if it has at least MenuMeals[0].RecipeCategories[0].Recipes[0], else None."""
    try:
        day = RawDay.model_validate(raw_day)
    except ValidationError as e:
        if debug:
            logger.debug({"message": "Skipping malformed menu day", "day": raw_day, "error": str(e)})
        return None

    first_line = day.meal_lines[0] if day.meal_lines else None
    first_category = first_line.recipe_categories[0] if first_line and first_line.recipe_categories else None
    if first_category is None or not first_category.recipes:
        if debug:
            logger.debug(
                {
                    "message": f"No meal data was found in the API response for {day.date}. "
                    "Expected to find MenuMeals[].RecipeCategories[].Recipes",
                    "day": raw_day,
                }
            )
        return None

    return day


def extract_menus_by_date(
    payload: Any,
    categories_to_include: Sequence[str] = (),
    options: FormatOptions | None = None,
    debug: bool = False,
) -> list[list[ExtractedDayMenu]]:
    """Extract one list of dated menu sentences per meal type, e.g.::

        [
          [ExtractedDayMenu(date="1/18/2023", meal_type="breakfast", sentence="..."), ...],
          [ExtractedDayMenu(date="1/18/2023", meal_type="lunch", sentence="..."), ...],
        ]

    Args:
        payload: Decoded JSON body of the FamilyMenu endpoint
        categories_to_include: CategoryName values to keep; empty keeps every category
        options: Sentence formatting options
        debug: Log what was found and what was filtered out

    Returns:
        Lists ordered by the first appearance of each meal type, each in upstream day order.
        An unusable response gives an empty list.
    """
    sessions = parse_sessions(payload, debug)
    if sessions is None:
        return []

    menus: dict[MealType, list[ExtractedDayMenu]] = {}
    for session in sessions:
        meal_type = classify_session(session.serving_session)
        menus_for_meal = menus.setdefault(meal_type, [])

        if not session.menu_plans:
            if debug:
                logger.debug({"message": "Serving session has no menu plans", "session": session.serving_session})
            continue

        for raw_day in session.menu_plans[0].days:
            day = parse_day(raw_day, debug)
            if day is None:
                continue
            menus_for_meal.append(
                ExtractedDayMenu(
                    date=day.date,
                    meal_type=meal_type,
                    sentence=_format_day(day, meal_type, categories_to_include, options, debug),
                )
            )

    extracted = list(menus.values())
    if debug:
        logger.debug(
            {
                "message": "Menus extracted from the TitanSchools API response",
                "menus": [[menu.model_dump(mode="json") for menu in meal] for meal in extracted],
            }
        )
    return extracted


def _format_day(
    day: RawDay,
    meal_type: MealType,
    categories_to_include: Sequence[str],
    options: FormatOptions | None,
    debug: bool,
) -> str:
    # Only used for logging: every category seen on this day and the ones dropped
    seen: list[str] = []
    filtered_out: list[str] = []

    kept = []
    for meal_line in day.meal_lines:
        for category in meal_line.recipe_categories:
            if category.category_name not in seen:
                seen.append(category.category_name)

            if not categories_to_include or category.category_name in categories_to_include:
                kept.append((category.category_name, category.recipe_names))
            elif category.category_name not in filtered_out:
                filtered_out.append(category.category_name)

    if debug:
        message = f"The {meal_type.value} menu for {day.date} contains the following categories: {', '.join(seen)}"
        if filtered_out:
            message += (
                f", but {', '.join(filtered_out)} were filtered out because they're not included "
                "in recipe_categories_to_include."
            )
        logger.debug({"message": message})

    return format_menu(kept, options)
