"""
Pantry: what a household has on hand.

Uniqueness per (household, ingredient) is left to the database: the insert
runs in a savepoint and an IntegrityError becomes ALREADY_IN_PANTRY.
"""

import logging

from django.db import IntegrityError, transaction

from mealplanner.exceptions import ConflictError, NotFoundError
from mealplanner.models import Availability, Household, Ingredient, PantryItem

logger = logging.getLogger(__name__)


def list_pantry(household: Household):
    """Pantry entries of the household, by ingredient name."""
    return (
        PantryItem.objects.for_household(household)
        .select_related("ingredient")
        .order_by("ingredient__name")
    )


def get_pantry_item(household: Household, item_id: str) -> PantryItem:
    """
    Raises:
        NotFoundError: PANTRY_ITEM_NOT_FOUND (also for other households' items)
    """
    try:
        return (
            PantryItem.objects.for_household(household)
            .select_related("ingredient")
            .get(pk=item_id)
        )
    except PantryItem.DoesNotExist:
        raise NotFoundError("PANTRY_ITEM_NOT_FOUND", "Pantry item not found", item_id=item_id)


def add_to_pantry(
    household: Household,
    ingredient_id: str,
    availability: str = Availability.HAVE,
) -> PantryItem:
    """
    Stock an ingredient.

    Raises:
        NotFoundError: INGREDIENT_NOT_FOUND
        ConflictError: ALREADY_IN_PANTRY
    """
    try:
        ingredient = Ingredient.objects.get(pk=ingredient_id)
    except Ingredient.DoesNotExist:
        raise NotFoundError(
            "INGREDIENT_NOT_FOUND", "ingredientId not found", ingredient_id=ingredient_id
        )

    try:
        with transaction.atomic():
            item = PantryItem.objects.create(
                household=household,
                ingredient=ingredient,
                availability=availability,
            )
    except IntegrityError as e:
        raise ConflictError(
            "ALREADY_IN_PANTRY", "Ingredient already in pantry", ingredient_id=ingredient_id
        ) from e

    logger.info(
        f"Added {ingredient.name} to pantry ({availability})",
        extra={"household_id": household.pk, "pantry_item_id": item.pk},
    )
    return item


def set_availability(item: PantryItem, availability: str) -> PantryItem:
    """Change the stock level of a pantry entry."""
    item.availability = availability
    item.save(update_fields=["availability", "updated_at"])
    logger.info(
        f"Pantry item {item.pk} is now {availability}",
        extra={"pantry_item_id": item.pk},
    )
    return item


def remove_from_pantry(item: PantryItem) -> None:
    item_id = item.pk
    item.delete()
    logger.info(f"Removed pantry item {item_id}", extra={"pantry_item_id": item_id})
