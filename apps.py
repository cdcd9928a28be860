"""
Django Meal Planner app configuration.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class MealPlannerConfig(AppConfig):
    """Meal Planner application configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "mealplanner"
    verbose_name = _("Meal Planner")
