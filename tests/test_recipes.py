"""
Tests for recipes (mealplanner.services.recipes and /api/recipes).

Covers the atomic writes: a failed create leaves no recipe row, a failed
replacement leaves the previous ingredient list in place.
"""

from unittest.mock import patch

import pytest
from django.db import DatabaseError

from mealplanner.exceptions import IngredientUnitMissing, InvalidRequestError, NotFoundError
from mealplanner.models import Ingredient, MealPlan, MealPlanDay, MealPlanItem, Recipe, RecipeIngredient
from mealplanner.services.recipes import create_recipe, get_recipe, replace_recipe_ingredients

pytestmark = pytest.mark.urls("mealplanner.tests.test_api_urls")


# ═══════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def pancakes(household, flour, milk):
    return create_recipe(
        household,
        name="Pancakes",
        servings=4,
        instructions="Mix. Fry.",
        ingredients=[
            {"ingredient_id": flour.pk, "quantity": 200, "unit": None},
            {"ingredient_id": milk.pk, "quantity": 300, "unit": "cups"},
        ],
    )


@pytest.fixture
def foreign_recipe(other_household):
    return Recipe.objects.create(
        household=other_household,
        name="Their Soup",
        servings=2,
        instructions="Boil.",
    )


def lines_of(recipe):
    return list(
        RecipeIngredient.objects.filter(recipe=recipe)
        .order_by("ingredient__name")
        .values_list("ingredient__name", "quantity", "unit")
    )


# ═══════════════════════════════════════════════════════════════════
# Service
# ═══════════════════════════════════════════════════════════════════


class TestCreateRecipe:
    def test_unit_defaults_to_ingredient_unit(self, pancakes):
        assert lines_of(pancakes) == [("Flour", 200, "g"), ("Milk", 300, "cups")]

    def test_lines_prefetched_in_name_order(self, pancakes):
        assert [line.ingredient.name for line in pancakes.ingredients.all()] == ["Flour", "Milk"]

    def test_unknown_ingredient_rolls_back(self, household, flour):
        with pytest.raises(InvalidRequestError) as exc:
            create_recipe(
                household,
                name="Bread",
                servings=1,
                instructions="Bake.",
                ingredients=[
                    {"ingredient_id": flour.pk, "quantity": 500},
                    {"ingredient_id": "missing", "quantity": 1},
                ],
            )

        assert exc.value.message == "One or more ingredientId are invalid"
        assert not Recipe.objects.exists()
        assert not RecipeIngredient.objects.exists()

    def test_duplicate_ingredient_is_rejected(self, household, flour):
        with pytest.raises(InvalidRequestError) as exc:
            create_recipe(
                household,
                name="Bread",
                servings=1,
                instructions="Bake.",
                ingredients=[
                    {"ingredient_id": flour.pk, "quantity": 1},
                    {"ingredient_id": flour.pk, "quantity": 2},
                ],
            )

        assert exc.value.code == "DUPLICATE_INGREDIENT"
        assert not Recipe.objects.exists()

    def test_missing_unit_rolls_back(self, household, db):
        unitless = Ingredient.objects.create(name="Salt", unit="")

        with pytest.raises(IngredientUnitMissing):
            create_recipe(
                household,
                name="Brine",
                servings=1,
                instructions="Dissolve.",
                ingredients=[{"ingredient_id": unitless.pk, "quantity": 30, "unit": None}],
            )

        assert not Recipe.objects.exists()


class TestReplaceIngredients:
    def test_replaces_whole_list(self, pancakes, eggs):
        recipe = replace_recipe_ingredients(
            pancakes, [{"ingredient_id": eggs.pk, "quantity": 2}]
        )

        assert lines_of(recipe) == [("Eggs", 2, "pcs")]

    def test_empty_list_clears(self, pancakes):
        recipe = replace_recipe_ingredients(pancakes, [])

        assert list(recipe.ingredients.all()) == []
        assert not RecipeIngredient.objects.filter(recipe=pancakes).exists()

    def test_invalid_reference_keeps_previous_list(self, pancakes, eggs):
        before = lines_of(pancakes)

        with pytest.raises(InvalidRequestError):
            replace_recipe_ingredients(
                pancakes,
                [
                    {"ingredient_id": eggs.pk, "quantity": 2},
                    {"ingredient_id": "missing", "quantity": 1},
                ],
            )

        assert lines_of(pancakes) == before

    def test_missing_unit_keeps_previous_list(self, pancakes):
        before = lines_of(pancakes)
        unitless = Ingredient.objects.create(name="Salt", unit="")

        with pytest.raises(IngredientUnitMissing):
            replace_recipe_ingredients(pancakes, [{"ingredient_id": unitless.pk, "quantity": 1}])

        assert lines_of(pancakes) == before

    def test_database_error_keeps_previous_list(self, pancakes, eggs):
        before = lines_of(pancakes)

        with patch.object(RecipeIngredient.objects, "bulk_create", side_effect=DatabaseError("disk full")):
            with pytest.raises(DatabaseError):
                replace_recipe_ingredients(pancakes, [{"ingredient_id": eggs.pk, "quantity": 2}])

        assert lines_of(pancakes) == before


class TestGetRecipe:
    def test_other_household_is_not_found(self, household, foreign_recipe):
        with pytest.raises(NotFoundError) as exc:
            get_recipe(household, foreign_recipe.pk)

        assert exc.value.code == "RECIPE_NOT_FOUND"


# ═══════════════════════════════════════════════════════════════════
# API
# ═══════════════════════════════════════════════════════════════════


class TestRecipeListAPI:
    def test_list_sorted_with_ingredients(self, api_client, pancakes, household, foreign_recipe):
        Recipe.objects.create(household=household, name="Apple Pie", servings=8, instructions="Bake.")

        response = api_client.get("/api/recipes")

        assert response.status_code == 200
        recipes = response.json()["recipes"]
        assert [r["name"] for r in recipes] == ["Apple Pie", "Pancakes"]
        assert recipes[0]["ingredients"] == []
        assert [line["ingredient"]["name"] for line in recipes[1]["ingredients"]] == ["Flour", "Milk"]

    def test_create(self, api_client, household, flour, milk):
        body = {
            "name": " Pancakes ",
            "servings": 4,
            "instructions": "Mix. Fry.",
            "description": "  ",
            "notes": "Sunday",
            "ingredients": [
                {"ingredientId": milk.pk, "quantity": 300},
                {"ingredientId": flour.pk, "quantity": 200, "unit": "oz"},
            ],
        }

        response = api_client.post("/api/recipes", body)

        assert response.status_code == 201
        recipe = response.json()
        assert recipe["name"] == "Pancakes"
        assert recipe["householdId"] == household.pk
        assert recipe["description"] is None
        assert recipe["notes"] == "Sunday"
        assert recipe["servings"] == 4
        assert recipe["ingredients"][0]["ingredientId"] == flour.pk
        assert recipe["ingredients"][0]["unit"] == "oz"
        assert recipe["ingredients"][0]["ingredient"] == {"id": flour.pk, "name": "Flour", "unit": "g"}
        assert recipe["ingredients"][1]["unit"] == "ml"

    def test_created_recipe_round_trips(self, api_client, household, flour):
        body = {
            "name": "Porridge",
            "servings": 1,
            "instructions": "Stir.",
            "ingredients": [{"ingredientId": flour.pk, "quantity": 50}],
        }
        created = api_client.post("/api/recipes", body).json()

        fetched = api_client.get(f"/api/recipes/{created['id']}").json()

        assert fetched == created

    def test_duplicate_ingredient_creates_nothing(self, api_client, household, flour):
        body = {
            "name": "Bread",
            "servings": 1,
            "instructions": "Bake.",
            "ingredients": [
                {"ingredientId": flour.pk, "quantity": 1},
                {"ingredientId": flour.pk, "quantity": 2},
            ],
        }

        response = api_client.post("/api/recipes", body)

        assert response.status_code == 400
        assert response.json() == {"message": "Duplicate ingredientId in ingredients list"}
        assert not Recipe.objects.exists()

    def test_unknown_ingredient_creates_nothing(self, api_client, household):
        body = {
            "name": "Bread",
            "servings": 1,
            "instructions": "Bake.",
            "ingredients": [{"ingredientId": "nope", "quantity": 1}],
        }

        response = api_client.post("/api/recipes", body)

        assert response.status_code == 400
        assert response.json() == {"message": "One or more ingredientId are invalid"}
        assert not Recipe.objects.exists()

    @pytest.mark.parametrize(
        "override, message",
        [
            ({"servings": 0}, "servings must be a finite number > 0"),
            ({"servings": 10**400}, "servings must be a finite number > 0"),
            ({"name": " ", "servings": 0}, "servings must be a finite number > 0"),
            ({"instructions": " "}, "instructions cannot be empty"),
            ({"ingredients": None}, "ingredients must be an array"),
            ({"ingredients": [{"ingredientId": "x"}]}, "ingredients[].quantity must be a finite number > 0"),
        ],
    )
    def test_create_validation(self, api_client, household, override, message):
        body = {"name": "Bread", "servings": 1, "instructions": "Bake.", "ingredients": [], **override}

        response = api_client.post("/api/recipes", body)

        assert response.status_code == 400
        assert response.json() == {"message": message}


class TestRecipeDetailAPI:
    def test_get(self, api_client, pancakes):
        response = api_client.get(f"/api/recipes/{pancakes.pk}")

        assert response.status_code == 200
        assert response.json()["name"] == "Pancakes"
        assert len(response.json()["ingredients"]) == 2

    def test_get_other_household_is_404(self, api_client, foreign_recipe):
        response = api_client.get(f"/api/recipes/{foreign_recipe.pk}")

        assert response.status_code == 404
        assert response.json() == {"message": "Recipe not found"}

    def test_patch_only_given_fields(self, api_client, pancakes):
        response = api_client.patch(f"/api/recipes/{pancakes.pk}", {"servings": 6, "notes": None})

        assert response.status_code == 200
        body = response.json()
        assert body["servings"] == 6
        assert body["notes"] is None
        assert body["name"] == "Pancakes"
        assert body["instructions"] == "Mix. Fry."
        assert len(body["ingredients"]) == 2

    def test_patch_without_fields(self, api_client, pancakes):
        response = api_client.patch(f"/api/recipes/{pancakes.pk}", {"ingredients": []})

        assert response.status_code == 400
        assert response.json() == {"message": "No updatable fields provided"}

    def test_patch_other_household_is_404(self, api_client, foreign_recipe):
        response = api_client.patch(f"/api/recipes/{foreign_recipe.pk}", {"name": "Mine"})

        assert response.status_code == 404
        foreign_recipe.refresh_from_db()
        assert foreign_recipe.name == "Their Soup"

    def test_delete_cascades_lines_and_meal_plan_items(self, api_client, pancakes, household):
        plan = MealPlan.objects.create(household=household, name="Week", status="draft")
        day = MealPlanDay.objects.create(meal_plan=plan, date="2024-03-18")
        MealPlanItem.objects.create(day=day, recipe=pancakes, meal_type="breakfast", servings=2)

        response = api_client.delete(f"/api/recipes/{pancakes.pk}")

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert not Recipe.objects.filter(pk=pancakes.pk).exists()
        assert not RecipeIngredient.objects.exists()
        assert not MealPlanItem.objects.exists()
        assert MealPlanDay.objects.filter(pk=day.pk).exists()

    def test_delete_other_household_is_404(self, api_client, foreign_recipe):
        response = api_client.delete(f"/api/recipes/{foreign_recipe.pk}")

        assert response.status_code == 404
        assert Recipe.objects.filter(pk=foreign_recipe.pk).exists()


class TestRecipeIngredientsAPI:
    def test_replace(self, api_client, pancakes, eggs):
        response = api_client.patch(
            f"/api/recipes/{pancakes.pk}/ingredients",
            {"ingredients": [{"ingredientId": eggs.pk, "quantity": 3, "unit": ""}]},
        )

        assert response.status_code == 200
        lines = response.json()["ingredients"]
        assert [(line["ingredientId"], line["quantity"], line["unit"]) for line in lines] == [
            (eggs.pk, 3, "pcs")
        ]

    def test_empty_list(self, api_client, pancakes):
        response = api_client.patch(f"/api/recipes/{pancakes.pk}/ingredients", {"ingredients": []})

        assert response.status_code == 200
        assert response.json()["ingredients"] == []
        assert api_client.get(f"/api/recipes/{pancakes.pk}").json()["ingredients"] == []

    def test_invalid_id_keeps_list(self, api_client, pancakes, eggs):
        before = api_client.get(f"/api/recipes/{pancakes.pk}").json()["ingredients"]

        response = api_client.patch(
            f"/api/recipes/{pancakes.pk}/ingredients",
            {
                "ingredients": [
                    {"ingredientId": eggs.pk, "quantity": 3},
                    {"ingredientId": "ghost", "quantity": 1},
                ]
            },
        )

        assert response.status_code == 400
        assert response.json() == {"message": "One or more ingredientId are invalid"}
        assert api_client.get(f"/api/recipes/{pancakes.pk}").json()["ingredients"] == before

    def test_unknown_recipe_checked_before_body(self, api_client, household):
        response = api_client.patch("/api/recipes/ghost/ingredients", {"ingredients": "nope"})

        assert response.status_code == 404
        assert response.json() == {"message": "Recipe not found"}
