"""
Recipes and their ingredient lines.

A recipe's line list is always written as a whole, inside one
transaction.atomic() block:

- create_recipe: recipe row + lines
- replace_recipe_ingredients: delete every line, then insert the new list

Any error inside the block (unknown ingredient, missing unit, database
error) rolls everything back, so the stored list is either fully
replaced or untouched.

Usage:
    from mealplanner.services.recipes import create_recipe, replace_recipe_ingredients

    recipe = create_recipe(
        household,
        name="Pancakes",
        servings=4,
        instructions="Mix. Fry.",
        ingredients=[{"ingredient_id": flour.pk, "quantity": 200, "unit": None}],
    )
    recipe = replace_recipe_ingredients(recipe, [])
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from django.db import transaction

from mealplanner.exceptions import (
    IngredientUnitMissing,
    InvalidRequestError,
    NotFoundError,
)
from mealplanner.models import Household, Ingredient, Recipe, RecipeIngredient

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Duplicate ingredientId in ingredients list"
INVALID_REFERENCE_MESSAGE = "One or more ingredientId are invalid"


# ══════════════════════════════════════════════════════════════
# QUERIES
# ══════════════════════════════════════════════════════════════


def list_recipes(household: Household):
    """Recipes of the household, by name, lines loaded."""
    return Recipe.objects.for_household(household).with_ingredients().order_by("name")


def get_recipe(household: Household, recipe_id: str, *, with_ingredients: bool = True) -> Recipe:
    """
    Fetch a recipe of the household.

    A recipe of another household is reported exactly like a missing one.

    Raises:
        NotFoundError: RECIPE_NOT_FOUND
    """
    queryset = Recipe.objects.for_household(household)
    if with_ingredients:
        queryset = queryset.with_ingredients()
    try:
        return queryset.get(pk=recipe_id)
    except Recipe.DoesNotExist:
        raise NotFoundError("RECIPE_NOT_FOUND", "Recipe not found", recipe_id=recipe_id)


def _reload(recipe: Recipe) -> Recipe:
    return Recipe.objects.with_ingredients().get(pk=recipe.pk)


# ══════════════════════════════════════════════════════════════
# LINES
# ══════════════════════════════════════════════════════════════


def _check_duplicates(lines: list[dict]) -> None:
    ingredient_ids = [line["ingredient_id"] for line in lines]
    if len(set(ingredient_ids)) != len(ingredient_ids):
        raise InvalidRequestError("DUPLICATE_INGREDIENT", DUPLICATE_MESSAGE)


def _write_lines(recipe: Recipe, lines: list[dict]) -> list[RecipeIngredient]:
    """
    Insert one RecipeIngredient per line.

    Must run inside an atomic block. Each line is a dict with
    ``ingredient_id``, ``quantity`` and optionally ``unit``; a missing or
    empty unit falls back to the ingredient's canonical unit.
    """
    ingredient_ids = [line["ingredient_id"] for line in lines]
    unit_by_id = dict(
        Ingredient.objects.filter(pk__in=ingredient_ids).values_list("pk", "unit")
    )
    if len(unit_by_id) != len(set(ingredient_ids)):
        missing = sorted(set(ingredient_ids) - set(unit_by_id))
        raise InvalidRequestError(
            "INVALID_INGREDIENT_REFERENCE",
            INVALID_REFERENCE_MESSAGE,
            ingredient_ids=missing,
        )

    rows = []
    for line in lines:
        ingredient_id = line["ingredient_id"]
        unit = line.get("unit") or unit_by_id[ingredient_id]
        if not unit:
            raise IngredientUnitMissing(
                "INGREDIENT_UNIT_MISSING",
                "Ingredient unit missing",
                ingredient_id=ingredient_id,
            )
        rows.append(
            RecipeIngredient(
                recipe=recipe,
                ingredient_id=ingredient_id,
                quantity=line["quantity"],
                unit=unit,
            )
        )

    return RecipeIngredient.objects.bulk_create(rows)


# ══════════════════════════════════════════════════════════════
# WRITES
# ══════════════════════════════════════════════════════════════


def create_recipe(
    household: Household,
    *,
    name: str,
    servings: float,
    instructions: str,
    description: str | None = None,
    notes: str | None = None,
    ingredients: Iterable[dict] = (),
) -> Recipe:
    """
    Create a recipe with its lines, atomically.

    Raises:
        InvalidRequestError: DUPLICATE_INGREDIENT, INVALID_INGREDIENT_REFERENCE
        IngredientUnitMissing: a line has no unit and neither has its ingredient
    """
    lines = list(ingredients)
    _check_duplicates(lines)

    with transaction.atomic():
        recipe = Recipe.objects.create(
            household=household,
            name=name,
            description=description,
            servings=servings,
            instructions=instructions,
            notes=notes,
        )
        _write_lines(recipe, lines)

    logger.info(
        f"Created recipe {recipe.name} with {len(lines)} ingredients",
        extra={"recipe_id": recipe.pk, "household_id": household.pk},
    )
    return _reload(recipe)


def update_recipe(recipe: Recipe, **fields) -> Recipe:
    """Apply a partial update (only the given fields are written)."""
    for attr, value in fields.items():
        setattr(recipe, attr, value)
    recipe.save(update_fields=[*fields, "updated_at"])

    logger.info(
        f"Updated recipe {recipe.pk}",
        extra={"recipe_id": recipe.pk, "fields": sorted(fields)},
    )
    return _reload(recipe)


def replace_recipe_ingredients(recipe: Recipe, ingredients: Iterable[dict]) -> Recipe:
    """
    Replace the whole line list of a recipe, atomically.

    An empty list leaves the recipe without ingredients. On any error the
    previous list is kept.

    Raises:
        InvalidRequestError: DUPLICATE_INGREDIENT, INVALID_INGREDIENT_REFERENCE
        IngredientUnitMissing: a line has no unit and neither has its ingredient
    """
    lines = list(ingredients)
    _check_duplicates(lines)

    with transaction.atomic():
        deleted, _ = RecipeIngredient.objects.filter(recipe=recipe).delete()
        _write_lines(recipe, lines)

    logger.info(
        f"Replaced ingredients of recipe {recipe.pk}",
        extra={"recipe_id": recipe.pk, "removed": deleted, "added": len(lines)},
    )
    return _reload(recipe)


def delete_recipe(recipe: Recipe) -> None:
    """Delete a recipe; lines and meal plan items using it go with it."""
    recipe_id = recipe.pk
    recipe.delete()
    logger.info(f"Deleted recipe {recipe_id}", extra={"recipe_id": recipe_id})
