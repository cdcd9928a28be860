"""
Meal Planner Settings.

Supports two formats (dict takes priority):

    # Option 1: Dict
    MEALPLANNER = {
        "DEFAULT_HOUSEHOLD_NAME": "Casa",
    }

    # Option 2: Flat
    MEALPLANNER_DEFAULT_HOUSEHOLD_NAME = "Casa"

All settings have defaults, so no configuration is required.
"""

from django.conf import settings


# ── Defaults ──

DEFAULTS = {
    "DEFAULT_HOUSEHOLD_NAME": "Household",
    "DEFAULT_PORTION_FACTOR": 1.0,
}


# ── Accessors ──

_sentinel = object()


def get_setting(name, default=_sentinel):
    """
    Get a meal planner setting.

    Looks up in order:
    1. MEALPLANNER dict (e.g. MEALPLANNER = {"DEFAULT_HOUSEHOLD_NAME": "..."})
    2. Flat setting (e.g. MEALPLANNER_DEFAULT_HOUSEHOLD_NAME = "...")
    3. DEFAULTS
    """
    planner_dict = getattr(settings, "MEALPLANNER", {})
    if name in planner_dict:
        return planner_dict[name]

    flat_value = getattr(settings, f"MEALPLANNER_{name}", _sentinel)
    if flat_value is not _sentinel:
        return flat_value

    if default is not _sentinel:
        return default

    return DEFAULTS.get(name)


def get_default_household_name() -> str:
    """Return the name given to the household created on first access."""
    return get_setting("DEFAULT_HOUSEHOLD_NAME", DEFAULTS["DEFAULT_HOUSEHOLD_NAME"])


def get_default_portion_factor() -> float:
    """Return the portion factor for people created without one."""
    return float(get_setting("DEFAULT_PORTION_FACTOR", DEFAULTS["DEFAULT_PORTION_FACTOR"]))
