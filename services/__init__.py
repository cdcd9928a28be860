"""
Meal Planner Services.

Household-scoped resource access that doesn't belong in models:
- household: default household resolver
- ingredients: global catalogue with case-insensitive names
- recipes: recipes and their atomically written ingredient lines
- pantry: stock levels per ingredient
- people: household members
- meal_plans: plans, days and items (nested, resolved top-down)
"""

from mealplanner.services.household import get_or_create_default_household, rename_household
from mealplanner.services.ingredients import create_ingredient
from mealplanner.services.meal_plans import MealPlanning
from mealplanner.services.recipes import create_recipe, replace_recipe_ingredients

__all__ = [
    "get_or_create_default_household",
    "rename_household",
    "create_ingredient",
    "create_recipe",
    "replace_recipe_ingredients",
    "MealPlanning",
]
