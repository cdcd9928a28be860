"""
Tests for the pantry (/api/pantry).
"""

import pytest

from mealplanner.exceptions import ConflictError, NotFoundError
from mealplanner.models import Availability, PantryItem
from mealplanner.services.pantry import add_to_pantry

pytestmark = pytest.mark.urls("mealplanner.tests.test_api_urls")


@pytest.fixture
def flour_stock(household, flour):
    return add_to_pantry(household, flour.pk)


@pytest.fixture
def foreign_stock(other_household, milk):
    return PantryItem.objects.create(household=other_household, ingredient=milk)


class TestAddToPantry:
    def test_defaults_to_have(self, flour_stock):
        assert flour_stock.availability == Availability.HAVE

    def test_same_ingredient_twice_conflicts(self, household, flour, flour_stock):
        with pytest.raises(ConflictError) as exc:
            add_to_pantry(household, flour.pk, Availability.LOW)

        assert exc.value.code == "ALREADY_IN_PANTRY"
        assert PantryItem.objects.count() == 1

    def test_same_ingredient_in_two_households(self, other_household, flour, flour_stock):
        add_to_pantry(other_household, flour.pk)

        assert PantryItem.objects.filter(ingredient=flour).count() == 2

    def test_unknown_ingredient(self, household):
        with pytest.raises(NotFoundError) as exc:
            add_to_pantry(household, "ghost")

        assert exc.value.message == "ingredientId not found"


class TestPantryAPI:
    def test_list_sorted_by_ingredient_name(self, api_client, household, milk, eggs, foreign_stock):
        add_to_pantry(household, milk.pk, Availability.LOW)
        add_to_pantry(household, eggs.pk)

        response = api_client.get("/api/pantry")

        assert response.status_code == 200
        body = response.json()
        assert body["householdId"] == household.pk
        assert [i["ingredient"]["name"] for i in body["items"]] == ["Eggs", "Milk"]
        assert [i["availability"] for i in body["items"]] == ["HAVE", "LOW"]

    def test_create(self, api_client, household, flour):
        response = api_client.post("/api/pantry", {"ingredientId": flour.pk, "availability": "OUT"})

        assert response.status_code == 201
        item = response.json()
        assert item["householdId"] == household.pk
        assert item["ingredientId"] == flour.pk
        assert item["availability"] == "OUT"
        assert item["ingredient"] == {"id": flour.pk, "name": "Flour", "unit": "g"}
        assert set(item) == {
            "id",
            "householdId",
            "ingredientId",
            "availability",
            "createdAt",
            "updatedAt",
            "ingredient",
        }

    def test_create_defaults_to_have(self, api_client, household, flour):
        response = api_client.post("/api/pantry", {"ingredientId": flour.pk})

        assert response.status_code == 201
        assert response.json()["availability"] == "HAVE"

    def test_create_duplicate_is_409(self, api_client, flour, flour_stock):
        response = api_client.post("/api/pantry", {"ingredientId": flour.pk})

        assert response.status_code == 409
        assert response.json() == {"message": "Ingredient already in pantry"}

    def test_create_unknown_ingredient_is_404(self, api_client, household):
        response = api_client.post("/api/pantry", {"ingredientId": "ghost"})

        assert response.status_code == 404
        assert response.json() == {"message": "ingredientId not found"}

    @pytest.mark.parametrize(
        "body, message",
        [
            ({}, "ingredientId must be a string"),
            ({"ingredientId": 12}, "ingredientId must be a string"),
            ({"ingredientId": "x", "availability": "low"}, "availability must be HAVE, LOW, or OUT"),
            ({"ingredientId": "x", "availability": None}, "availability must be HAVE, LOW, or OUT"),
        ],
    )
    def test_create_validation(self, api_client, household, body, message):
        response = api_client.post("/api/pantry", body)

        assert response.status_code == 400
        assert response.json() == {"message": message}

    def test_patch_availability(self, api_client, flour_stock):
        response = api_client.patch(f"/api/pantry/{flour_stock.pk}", {"availability": "LOW"})

        assert response.status_code == 200
        assert response.json()["availability"] == "LOW"
        flour_stock.refresh_from_db()
        assert flour_stock.availability == Availability.LOW

    def test_patch_requires_availability(self, api_client, flour_stock):
        response = api_client.patch(f"/api/pantry/{flour_stock.pk}", {"ingredientId": "x"})

        assert response.status_code == 400
        assert response.json() == {"message": "availability must be HAVE, LOW, or OUT"}

    def test_patch_other_household_is_404(self, api_client, household, foreign_stock):
        response = api_client.patch(f"/api/pantry/{foreign_stock.pk}", {"availability": "LOW"})

        assert response.status_code == 404
        assert response.json() == {"message": "Pantry item not found"}
        foreign_stock.refresh_from_db()
        assert foreign_stock.availability == Availability.HAVE

    def test_delete(self, api_client, flour_stock):
        response = api_client.delete(f"/api/pantry/{flour_stock.pk}")

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert not PantryItem.objects.exists()

    def test_delete_other_household_is_404(self, api_client, household, foreign_stock):
        response = api_client.delete(f"/api/pantry/{foreign_stock.pk}")

        assert response.status_code == 404
        assert PantryItem.objects.filter(pk=foreign_stock.pk).exists()
