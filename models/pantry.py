"""
PantryItem model.

What the household has on hand, one row per ingredient.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from mealplanner.models.base import HouseholdQuerySet, new_id


class Availability(models.TextChoices):
    """Pantry stock level."""

    HAVE = "HAVE", _("Have")
    LOW = "LOW", _("Low")
    OUT = "OUT", _("Out")


class PantryItem(models.Model):
    """
    Pantry entry for an ingredient.

    Unique per (household, ingredient): the constraint is what turns a
    second insert into a 409, there is no application pre-check.
    """

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=new_id,
        editable=False,
        verbose_name=_("ID"),
    )

    household = models.ForeignKey(
        "mealplanner.Household",
        on_delete=models.CASCADE,
        related_name="pantry_items",
        verbose_name=_("Household"),
    )
    ingredient = models.ForeignKey(
        "mealplanner.Ingredient",
        on_delete=models.PROTECT,
        related_name="pantry_items",
        verbose_name=_("Ingredient"),
    )

    availability = models.CharField(
        max_length=10,
        choices=Availability.choices,
        default=Availability.HAVE,
        verbose_name=_("Availability"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    objects = HouseholdQuerySet.as_manager()

    class Meta:
        db_table = "mealplanner_pantry_item"
        verbose_name = _("Pantry item")
        verbose_name_plural = _("Pantry items")
        ordering = ["ingredient__name"]
        unique_together = [["household", "ingredient"]]

    def __str__(self) -> str:
        return f"{self.ingredient.name}: {self.availability}"
