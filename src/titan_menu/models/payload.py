"""Models for the raw FamilyMenu response.

Field aliases match the upstream JSON keys. Unknown keys are ignored and
collections default to empty so that a partially populated payload still
validates; the extractor decides what counts as missing.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Upstream(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class RawRecipe(_Upstream):
    name: str = Field(alias="RecipeName")


class RawCategory(_Upstream):
    category_name: str = Field(alias="CategoryName")
    recipes: list[RawRecipe] = Field(default_factory=list, alias="Recipes")

    @property
    def recipe_names(self) -> list[str]:
        return [recipe.name for recipe in self.recipes]


class RawMealLine(_Upstream):
    recipe_categories: list[RawCategory] = Field(default_factory=list, alias="RecipeCategories")


class RawDay(_Upstream):
    date: str = Field(alias="Date")
    meal_lines: list[RawMealLine] = Field(default_factory=list, alias="MenuMeals")


class RawMenuPlan(_Upstream):
    days: list[Any] = Field(default_factory=list, alias="Days")


class RawMealSession(_Upstream):
    serving_session: str = Field(default="", alias="ServingSession")
    menu_plans: list[RawMenuPlan] = Field(default_factory=list, alias="MenuPlans")
