"""
Household model.

The single-tenant scoping entity: everything except Ingredient belongs to it.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from mealplanner.models.base import new_id


class Household(models.Model):
    """
    Household (tenant).

    One row per deployment in practice: the resolver in
    mealplanner.services.household creates it on first access.
    """

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=new_id,
        editable=False,
        verbose_name=_("ID"),
    )

    name = models.TextField(
        verbose_name=_("Name"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "mealplanner_household"
        verbose_name = _("Household")
        verbose_name_plural = _("Households")
        ordering = ["created_at"]

    def __str__(self) -> str:
        return self.name
