"""
Meal planning service -- plans, days and items.

Nested resources are resolved top-down: the plan is looked up inside the
household, the day inside the plan, the item inside the day. Each level
that is missing raises its own NotFoundError before anything is written.

All methods are @classmethod, the class is only a namespace.

Usage:
    from mealplanner.services.meal_plans import MealPlanning

    plan = MealPlanning.create_plan(household, "Week 12", MealPlanStatus.DRAFT)
    day = MealPlanning.add_day(plan, date(2024, 3, 18))
    item = MealPlanning.add_item(household, day, recipe.pk, MealType.DINNER, 4)
"""

import logging
from datetime import date

from mealplanner.exceptions import NotFoundError
from mealplanner.models import (
    Household,
    MealPlan,
    MealPlanDay,
    MealPlanItem,
)
from mealplanner.services.recipes import get_recipe

logger = logging.getLogger(__name__)


class MealPlanning:
    """Meal plan, day and item operations."""

    # ══════════════════════════════════════════════════════════════
    # PLANS
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def list_plans(cls, household: Household):
        """Plans of the household, newest first."""
        return MealPlan.objects.for_household(household).order_by("-created_at")

    @classmethod
    def get_plan(cls, household: Household, plan_id: str) -> MealPlan:
        """
        Raises:
            NotFoundError: MEAL_PLAN_NOT_FOUND
        """
        try:
            return MealPlan.objects.for_household(household).get(pk=plan_id)
        except MealPlan.DoesNotExist:
            raise NotFoundError("MEAL_PLAN_NOT_FOUND", "MealPlan not found", plan_id=plan_id)

    @classmethod
    def create_plan(cls, household: Household, name: str, status: str) -> MealPlan:
        plan = MealPlan.objects.create(household=household, name=name, status=status)
        logger.info(
            f"Created meal plan {plan.name} ({plan.status})",
            extra={"household_id": household.pk, "meal_plan_id": plan.pk},
        )
        return plan

    @classmethod
    def update_plan(cls, plan: MealPlan, **fields) -> MealPlan:
        for attr, value in fields.items():
            setattr(plan, attr, value)
        plan.save(update_fields=[*fields, "updated_at"])
        return plan

    @classmethod
    def delete_plan(cls, plan: MealPlan) -> None:
        """Delete a plan with all its days and items."""
        plan_id = plan.pk
        plan.delete()
        logger.info(f"Deleted meal plan {plan_id}", extra={"meal_plan_id": plan_id})

    # ══════════════════════════════════════════════════════════════
    # DAYS
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def list_days(cls, plan: MealPlan):
        """Days of the plan by date, items (with recipe) by creation time."""
        return plan.days.with_items().order_by("date")

    @classmethod
    def get_day(cls, plan: MealPlan, day_id: str) -> MealPlanDay:
        """
        Raises:
            NotFoundError: DAY_NOT_FOUND
        """
        try:
            return MealPlanDay.objects.get(pk=day_id, meal_plan=plan)
        except MealPlanDay.DoesNotExist:
            raise NotFoundError("DAY_NOT_FOUND", "Day not found", plan_id=plan.pk, day_id=day_id)

    @classmethod
    def add_day(cls, plan: MealPlan, day_date: date) -> MealPlanDay:
        day = MealPlanDay.objects.create(meal_plan=plan, date=day_date)
        logger.info(
            f"Added {day_date.isoformat()} to meal plan {plan.pk}",
            extra={"meal_plan_id": plan.pk, "day_id": day.pk},
        )
        return MealPlanDay.objects.with_items().get(pk=day.pk)

    @classmethod
    def delete_day(cls, day: MealPlanDay) -> None:
        """Delete a day; its items are removed by the FK cascade."""
        day_id = day.pk
        day.delete()
        logger.info(f"Deleted meal plan day {day_id}", extra={"day_id": day_id})

    # ══════════════════════════════════════════════════════════════
    # ITEMS
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def get_item(cls, day: MealPlanDay, item_id: str) -> MealPlanItem:
        """
        Raises:
            NotFoundError: ITEM_NOT_FOUND
        """
        try:
            return MealPlanItem.objects.select_related("recipe").get(pk=item_id, day=day)
        except MealPlanItem.DoesNotExist:
            raise NotFoundError("ITEM_NOT_FOUND", "Item not found", day_id=day.pk, item_id=item_id)

    @classmethod
    def add_item(
        cls,
        household: Household,
        day: MealPlanDay,
        recipe_id: str,
        meal_type: str,
        servings: float,
    ) -> MealPlanItem:
        """
        Schedule a recipe at a meal of the day.

        Raises:
            NotFoundError: RECIPE_NOT_FOUND (missing or another household's recipe)
        """
        recipe = get_recipe(household, recipe_id, with_ingredients=False)

        item = MealPlanItem.objects.create(
            day=day,
            recipe=recipe,
            meal_type=meal_type,
            servings=servings,
        )
        logger.info(
            f"Planned {recipe.name} for {meal_type} on day {day.pk}",
            extra={"day_id": day.pk, "item_id": item.pk, "recipe_id": recipe.pk},
        )
        return item

    @classmethod
    def update_item(cls, item: MealPlanItem, **fields) -> MealPlanItem:
        for attr, value in fields.items():
            setattr(item, attr, value)
        item.save(update_fields=[*fields, "updated_at"])
        return item

    @classmethod
    def delete_item(cls, item: MealPlanItem) -> None:
        item_id = item.pk
        item.delete()
        logger.info(f"Deleted meal plan item {item_id}", extra={"item_id": item_id})
