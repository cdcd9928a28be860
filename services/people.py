"""
People: household members.
"""

import logging

from mealplanner.conf import get_default_portion_factor
from mealplanner.exceptions import NotFoundError
from mealplanner.models import Household, Person

logger = logging.getLogger(__name__)


def list_people(household: Household):
    return Person.objects.for_household(household).order_by("name")


def get_person(household: Household, person_id: str) -> Person:
    """
    Raises:
        NotFoundError: PERSON_NOT_FOUND
    """
    try:
        return Person.objects.for_household(household).get(pk=person_id)
    except Person.DoesNotExist:
        raise NotFoundError("PERSON_NOT_FOUND", "Person not found", person_id=person_id)


def add_person(household: Household, name: str, portion_factor: float | None = None) -> Person:
    """Create a member; portion factor defaults to DEFAULT_PORTION_FACTOR."""
    if portion_factor is None:
        portion_factor = get_default_portion_factor()

    person = Person.objects.create(
        household=household,
        name=name,
        portion_factor=portion_factor,
        disliked_ingredient_ids=[],
    )
    logger.info(
        f"Added person {person.name} (x{person.portion_factor})",
        extra={"household_id": household.pk, "person_id": person.pk},
    )
    return person


def update_person(person: Person, **fields) -> Person:
    for attr, value in fields.items():
        setattr(person, attr, value)
    person.save(update_fields=[*fields, "updated_at"])
    return person


def remove_person(person: Person) -> None:
    person_id = person.pk
    person.delete()
    logger.info(f"Removed person {person_id}", extra={"person_id": person_id})
