"""
Meal Planner Models.

Core models for household meal planning:
- Household: the tenant every other row (except Ingredient) belongs to
- Ingredient: global catalogue entry with its canonical unit
- Recipe / RecipeIngredient: what a household cooks, and with what
- PantryItem: what a household has on hand (HAVE / LOW / OUT)
- Person: household member and portion factor
- MealPlan / MealPlanDay / MealPlanItem: plan → dates → meals
"""

from mealplanner.models.household import Household
from mealplanner.models.ingredient import Ingredient
from mealplanner.models.meal_plan import (
    MealPlan,
    MealPlanDay,
    MealPlanItem,
    MealPlanStatus,
    MealType,
)
from mealplanner.models.pantry import Availability, PantryItem
from mealplanner.models.person import Person
from mealplanner.models.recipe import Recipe, RecipeIngredient

__all__ = [
    "Household",
    "Ingredient",
    "Recipe",
    "RecipeIngredient",
    "PantryItem",
    "Availability",
    "Person",
    "MealPlan",
    "MealPlanDay",
    "MealPlanItem",
    "MealPlanStatus",
    "MealType",
]
