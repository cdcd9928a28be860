"""
Django Meal Planner - Headless household meal-planning data layer.

Households, ingredients, recipes, pantry, people and meal plans, exposed
as a JSON API. Everything except ingredients is scoped to one household.

Usage:
    # urls.py of the host project
    path("api/", include("mealplanner.api.urls")),

    # Direct use from Python
    from mealplanner import get_or_create_default_household, PlannerError

    household = get_or_create_default_household()
    recipe = create_recipe(household, name="Pancakes", servings=4,
                           instructions="Mix. Fry.", ingredients=[...])
"""

from mealplanner.exceptions import PlannerError


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name == "get_or_create_default_household":
        from mealplanner.services.household import get_or_create_default_household

        return get_or_create_default_household
    if name == "create_recipe":
        from mealplanner.services.recipes import create_recipe

        return create_recipe
    if name == "replace_recipe_ingredients":
        from mealplanner.services.recipes import replace_recipe_ingredients

        return replace_recipe_ingredients
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "get_or_create_default_household",
    "create_recipe",
    "replace_recipe_ingredients",
    "PlannerError",
]
__version__ = "0.1.0"
