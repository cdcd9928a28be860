"""
Shared model helpers.

- new_id: opaque string primary keys (any string is a valid lookup key)
- HouseholdQuerySet: scoping by household, the access-control boundary
"""

import uuid

from django.db import models


def new_id() -> str:
    """Generate a primary key (32-char hex UUID)."""
    return uuid.uuid4().hex


class HouseholdQuerySet(models.QuerySet):
    """QuerySet for models owned by a Household."""

    def for_household(self, household):
        """Rows belonging to the given household only."""
        return self.filter(household=household)
