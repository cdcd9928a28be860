"""
Household resolver.

Every household-scoped operation starts here: the first household row is
the tenant, created with the configured default name on first access.

The find-then-create below is not atomic. Two concurrent first requests
can both see an empty table and create two rows; later calls always
resolve to the oldest one.
"""

import logging

from mealplanner.conf import get_default_household_name
from mealplanner.models import Household

logger = logging.getLogger(__name__)


def get_or_create_default_household() -> Household:
    """Return the default household, creating it if the table is empty."""
    household = Household.objects.order_by("created_at").first()
    if household is not None:
        return household

    household = Household.objects.create(name=get_default_household_name())
    logger.info(
        f"Created default household {household.pk}",
        extra={"household_id": household.pk, "household_name": household.name},
    )
    return household


def rename_household(household: Household, name: str) -> Household:
    """Persist a new (already validated) name."""
    household.name = name
    household.save(update_fields=["name", "updated_at"])
    logger.info(f"Renamed household {household.pk}", extra={"household_id": household.pk})
    return household
