"""
Ingredient model.

Ingredients are global (not household-scoped) and carry the canonical unit
used when a recipe line does not override it.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from mealplanner.models.base import new_id


class Ingredient(models.Model):
    """
    Ingredient catalogue entry.

    Name uniqueness is case-insensitive. The application checks that before
    inserting; the exact-case unique constraint below is the fallback when
    two creates race past the check.
    """

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=new_id,
        editable=False,
        verbose_name=_("ID"),
    )

    name = models.TextField(
        unique=True,
        verbose_name=_("Name"),
    )
    unit = models.TextField(
        verbose_name=_("Unit"),
        help_text=_("g, kg, ml, pcs..."),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "mealplanner_ingredient"
        verbose_name = _("Ingredient")
        verbose_name_plural = _("Ingredients")
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} ({self.unit})"
