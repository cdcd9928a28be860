"""
MealPlan, MealPlanDay and MealPlanItem models.

MealPlan = a named plan of a household (draft → active → completed).
MealPlanDay = one calendar date inside a plan.
MealPlanItem = one recipe served at one meal of that day.
"""

from django.db import models
from django.db.models import Prefetch
from django.utils.translation import gettext_lazy as _

from mealplanner.models.base import HouseholdQuerySet, new_id


class MealPlanStatus(models.TextChoices):
    """MealPlan lifecycle status."""

    DRAFT = "draft", _("Draft")
    ACTIVE = "active", _("Active")
    COMPLETED = "completed", _("Completed")


class MealType(models.TextChoices):
    """Meal slot of a day."""

    BREAKFAST = "breakfast", _("Breakfast")
    LUNCH = "lunch", _("Lunch")
    DINNER = "dinner", _("Dinner")
    SNACK = "snack", _("Snack")


class MealPlan(models.Model):
    """
    Meal plan of a household.

    Status: DRAFT → ACTIVE → COMPLETED (any value may be set directly).
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
        related_name="meal_plans",
        verbose_name=_("Household"),
    )

    name = models.TextField(
        verbose_name=_("Name"),
    )

    status = models.CharField(
        max_length=20,
        choices=MealPlanStatus.choices,
        default=MealPlanStatus.DRAFT,
        verbose_name=_("Status"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    objects = HouseholdQuerySet.as_manager()

    class Meta:
        db_table = "mealplanner_meal_plan"
        verbose_name = _("Meal plan")
        verbose_name_plural = _("Meal plans")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.name} [{self.status}]"


class MealPlanDayQuerySet(models.QuerySet):
    """QuerySet for MealPlanDay."""

    def with_items(self):
        """Load items and their recipes in two queries, items by creation time."""
        return self.prefetch_related(
            Prefetch(
                "items",
                queryset=MealPlanItem.objects.select_related("recipe").order_by("created_at"),
            )
        )


class MealPlanDay(models.Model):
    """
    One date of a meal plan.

    Deleting a day deletes its items (FK cascade).
    """

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=new_id,
        editable=False,
        verbose_name=_("ID"),
    )

    meal_plan = models.ForeignKey(
        MealPlan,
        on_delete=models.CASCADE,
        related_name="days",
        verbose_name=_("Meal plan"),
    )

    date = models.DateField(
        verbose_name=_("Date"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    objects = MealPlanDayQuerySet.as_manager()

    class Meta:
        db_table = "mealplanner_meal_plan_day"
        verbose_name = _("Meal plan day")
        verbose_name_plural = _("Meal plan days")
        ordering = ["date"]

    def __str__(self) -> str:
        return f"{self.meal_plan.name} {self.date.isoformat()}"


class MealPlanItem(models.Model):
    """
    Recipe served at one meal of a day.

    The recipe must belong to the plan's household; that is checked
    by mealplanner.services.meal_plans before the row is written.
    """

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=new_id,
        editable=False,
        verbose_name=_("ID"),
    )

    day = models.ForeignKey(
        MealPlanDay,
        on_delete=models.CASCADE,
        related_name="items",
        verbose_name=_("Day"),
    )
    recipe = models.ForeignKey(
        "mealplanner.Recipe",
        on_delete=models.CASCADE,
        related_name="meal_plan_items",
        verbose_name=_("Recipe"),
    )

    meal_type = models.CharField(
        max_length=20,
        choices=MealType.choices,
        verbose_name=_("Meal type"),
    )
    servings = models.FloatField(
        verbose_name=_("Servings"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "mealplanner_meal_plan_item"
        verbose_name = _("Meal plan item")
        verbose_name_plural = _("Meal plan items")
        ordering = ["created_at"]

    def __str__(self) -> str:
        return f"{self.meal_type}: {self.recipe.name} ({self.servings})"
