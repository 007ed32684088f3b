"""
Shared fixtures for titan_menu tests.
"""

from datetime import date

import pytest
from titan_menu.config import MenuSettings

# A Wednesday
TODAY = date(2023, 1, 18)


def make_day(day: str, categories: dict[str, list[str]]) -> dict:
    """Build a FamilyMenu day with a single meal line."""
    return {
        "Date": day,
        "MenuMeals": [
            {
                "MenuMealName": "Meal",
                "RecipeCategories": [
                    {
                        "CategoryName": name,
                        "Recipes": [{"RecipeName": recipe, "RecipeIdentifier": "x"} for recipe in recipes],
                    }
                    for name, recipes in categories.items()
                ],
            }
        ],
    }


def make_session(serving_session: str, days: list[dict]) -> dict:
    return {"ServingSession": serving_session, "MenuPlans": [{"MenuPlanName": "Plan", "Days": days}]}


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def sample_api_response():
    """A FamilyMenu response with breakfast and lunch for 1/18/2023 through 1/20/2023."""
    return {
        "FamilyMenuSessions": [
            make_session(
                "Breakfast",
                [
                    make_day("1/18/2023", {"Main Entree": ["Scrambled Eggs"], "Grain": ["Toast"], "Milk": ["Milk"]}),
                    make_day("1/19/2023", {"Main Entree": ["Pancakes", "with Syrup"], "Fruit": ["Apple"]}),
                    make_day("1/20/2023", {"Entrees": ["Cereal"], "Grain": ["Muffin"]}),
                ],
            ),
            make_session(
                "Lunch",
                [
                    make_day("1/18/2023", {"Entrees": ["Pizza", "Burger"], "Grain": ["Brown Rice"]}),
                    make_day("1/19/2023", {"Entrees": ["Orange Chicken"], "Grain": ["Rice", "Roll"]}),
                    make_day("1/20/2023", {"Entrees": ["Hamburger"], "Vegetable": ["Garden Salad"]}),
                ],
            ),
        ]
    }


@pytest.fixture
def sample_settings():
    """Settings without anything from the environment."""
    return MenuSettings(
        _env_file=None,
        building_id="9017b6ae-a3bc-eb11-a2cb-82fe13669c55",
        district_id="93f76ff0-2eb7-eb11-a2c4-e816644282bd",
        number_of_days_to_display=3,
        buffer_days=0,
    )
