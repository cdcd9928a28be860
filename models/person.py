"""
Person model.

Household members, with how much they eat relative to one serving.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from mealplanner.models.base import HouseholdQuerySet, new_id


class Person(models.Model):
    """Member of a household."""

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
        related_name="people",
        verbose_name=_("Household"),
    )

    name = models.TextField(
        verbose_name=_("Name"),
    )
    portion_factor = models.FloatField(
        default=1.0,
        verbose_name=_("Portion factor"),
        help_text=_("1.0 = one serving"),
    )

    # Internal only, never serialized by the API
    disliked_ingredient_ids = models.JSONField(
        default=list,
        blank=True,
        verbose_name=_("Disliked ingredients"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    objects = HouseholdQuerySet.as_manager()

    class Meta:
        db_table = "mealplanner_person"
        verbose_name = _("Person")
        verbose_name_plural = _("People")
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} (x{self.portion_factor})"
