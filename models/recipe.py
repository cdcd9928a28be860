"""
Recipe and RecipeIngredient models.

Recipe = what a household cooks (servings, instructions).
RecipeIngredient = one line of a recipe (ingredient, quantity, unit).
"""

from django.db import models
from django.db.models import Prefetch
from django.utils.translation import gettext_lazy as _

from mealplanner.models.base import HouseholdQuerySet, new_id


class RecipeQuerySet(HouseholdQuerySet):
    """QuerySet for Recipe."""

    def with_ingredients(self):
        """Load lines and their ingredients in two queries, ordered by ingredient name."""
        return self.prefetch_related(
            Prefetch(
                "ingredients",
                queryset=RecipeIngredient.objects.select_related("ingredient").order_by(
                    "ingredient__name"
                ),
            )
        )


class Recipe(models.Model):
    """
    A household recipe.

    Owns an ordered (by ingredient name) collection of RecipeIngredient.
    Deleting a recipe deletes its lines and the meal plan items using it.
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
        related_name="recipes",
        verbose_name=_("Household"),
    )

    name = models.TextField(
        verbose_name=_("Name"),
    )
    description = models.TextField(
        null=True,
        blank=True,
        verbose_name=_("Description"),
    )
    servings = models.FloatField(
        verbose_name=_("Servings"),
        help_text=_("Servings produced by one batch"),
    )
    instructions = models.TextField(
        verbose_name=_("Instructions"),
    )
    notes = models.TextField(
        null=True,
        blank=True,
        verbose_name=_("Notes"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    objects = RecipeQuerySet.as_manager()

    class Meta:
        db_table = "mealplanner_recipe"
        verbose_name = _("Recipe")
        verbose_name_plural = _("Recipes")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["household", "name"], name="mealplanner_recipe_hh_name_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class RecipeIngredient(models.Model):
    """
    One line of a recipe.

    Unit defaults to the ingredient's canonical unit when the caller
    does not give one (resolved in mealplanner.services.recipes).
    """

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=new_id,
        editable=False,
        verbose_name=_("ID"),
    )

    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        related_name="ingredients",
        verbose_name=_("Recipe"),
    )
    ingredient = models.ForeignKey(
        "mealplanner.Ingredient",
        on_delete=models.PROTECT,
        related_name="recipe_lines",
        verbose_name=_("Ingredient"),
    )

    quantity = models.FloatField(
        verbose_name=_("Quantity"),
    )
    unit = models.TextField(
        verbose_name=_("Unit"),
    )

    class Meta:
        db_table = "mealplanner_recipe_ingredient"
        verbose_name = _("Recipe ingredient")
        verbose_name_plural = _("Recipe ingredients")
        ordering = ["ingredient__name"]
        unique_together = [["recipe", "ingredient"]]

    def __str__(self) -> str:
        return f"{self.ingredient.name} ({self.quantity} {self.unit})"
