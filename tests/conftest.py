"""
Shared fixtures for Meal Planner tests.
"""

from datetime import timedelta

import pytest
from rest_framework.test import APIClient

from mealplanner.models import Household, Ingredient
from mealplanner.services.household import get_or_create_default_household


@pytest.fixture
def api_client(db):
    return APIClient()


@pytest.fixture
def household(db):
    """The default household every request resolves to."""
    return get_or_create_default_household()


@pytest.fixture
def other_household(household):
    """A second household; never the default (created later)."""
    other = Household.objects.create(name="Neighbours")
    Household.objects.filter(pk=other.pk).update(
        created_at=household.created_at + timedelta(days=1)
    )
    other.refresh_from_db()
    return other


@pytest.fixture
def flour(db):
    return Ingredient.objects.create(name="Flour", unit="g")


@pytest.fixture
def milk(db):
    return Ingredient.objects.create(name="Milk", unit="ml")


@pytest.fixture
def eggs(db):
    return Ingredient.objects.create(name="Eggs", unit="pcs")
