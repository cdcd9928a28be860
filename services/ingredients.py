"""
Ingredient catalogue.

Names are unique case-insensitively. Two layers enforce it:

1. Application check before the insert, giving the friendly 409 in the
   common case. Names are compared with ``str.lower()`` in Python
   because database case folding (SQLite ``LIKE``) is ASCII-only.
2. The exact-case unique constraint on ``Ingredient.name``. Two creates
   racing past the check end in an IntegrityError, reported as the same 409.

Usage:
    from mealplanner.services.ingredients import create_ingredient

    flour = create_ingredient("Flour", "g")
"""

import logging

from django.db import IntegrityError, transaction

from mealplanner.exceptions import ConflictError
from mealplanner.models import Ingredient

logger = logging.getLogger(__name__)

NAME_TAKEN_MESSAGE = "Ingredient name already exists"


def list_ingredients():
    """All ingredients, sorted by name."""
    return Ingredient.objects.order_by("name")


def name_taken(name: str) -> bool:
    """Case-insensitive existence check, Unicode-aware."""
    key = name.lower()
    names = Ingredient.objects.values_list("name", flat=True)
    return any(existing.lower() == key for existing in names.iterator())


def create_ingredient(name: str, unit: str) -> Ingredient:
    """
    Create an ingredient.

    Args:
        name: Trimmed, non-empty name
        unit: Trimmed, non-empty canonical unit

    Raises:
        ConflictError: INGREDIENT_NAME_TAKEN
    """
    if name_taken(name):
        raise ConflictError("INGREDIENT_NAME_TAKEN", NAME_TAKEN_MESSAGE, name=name)

    try:
        # Savepoint: the failed INSERT must not poison an outer transaction
        with transaction.atomic():
            ingredient = Ingredient.objects.create(name=name, unit=unit)
    except IntegrityError as e:
        logger.warning(f"Ingredient '{name}' hit the unique constraint: {e}")
        raise ConflictError("INGREDIENT_NAME_TAKEN", NAME_TAKEN_MESSAGE, name=name) from e

    logger.info(
        f"Created ingredient {ingredient.name}",
        extra={"ingredient_id": ingredient.pk, "unit": ingredient.unit},
    )
    return ingredient
