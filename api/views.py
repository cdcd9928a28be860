"""
Meal Planner API Views.

One APIView per route. Household-scoped views resolve the default
household once per request; nested resources are looked up top-down
(plan, day, item) before the body is parsed, so a missing parent is a 404
even when the body is also invalid.
"""

from collections.abc import Mapping

from django.utils.functional import cached_property
from rest_framework import status
from rest_framework.exceptions import ParseError, ValidationError
from rest_framework.negotiation import BaseContentNegotiation
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import APIView

from mealplanner.api.exceptions import exception_handler
from mealplanner.api.serializers import (
    HouseholdRenameSerializer,
    HouseholdSerializer,
    IngredientCreateSerializer,
    IngredientSerializer,
    MealPlanDayCreateSerializer,
    MealPlanDaySerializer,
    MealPlanItemCreateSerializer,
    MealPlanItemSerializer,
    MealPlanItemUpdateSerializer,
    MealPlanSerializer,
    MealPlanWriteSerializer,
    PantryCreateSerializer,
    PantryItemSerializer,
    PantryUpdateSerializer,
    PersonSerializer,
    PersonWriteSerializer,
    RecipeCreateSerializer,
    RecipeIngredientsSerializer,
    RecipeSerializer,
    RecipeUpdateSerializer,
)
from mealplanner.services import ingredients, pantry, people, recipes
from mealplanner.services.household import get_or_create_default_household, rename_household
from mealplanner.services.meal_plans import MealPlanning

OK = {"ok": True}


class JSONOnlyNegotiation(BaseContentNegotiation):
    """Parse every body as JSON and answer JSON, whatever the headers say."""

    def select_parser(self, request, parsers):
        return parsers[0]

    def select_renderer(self, request, renderers, format_suffix=None):
        return (renderers[0], renderers[0].media_type)


class PlannerAPIView(APIView):
    """Base view: open access, JSON in and out, ``{"message"}`` errors."""

    authentication_classes = []
    permission_classes = [AllowAny]
    parser_classes = [JSONParser]
    renderer_classes = [JSONRenderer]
    content_negotiation_class = JSONOnlyNegotiation

    def get_exception_handler(self):
        return exception_handler

    @cached_property
    def household(self):
        return get_or_create_default_household()

    def parse(self, serializer_class, *, partial=False) -> dict:
        """
        Validate the request body.

        Returns:
            validated_data, keyed by model attribute names

        Raises:
            ParseError: empty body, no Content-Type, or malformed JSON
            ValidationError: body is not an object, or a field is invalid
        """
        request = self.request
        data = request.data
        if request.stream is None or not request.content_type:
            raise ParseError()
        if not isinstance(data, Mapping):
            raise ValidationError("Body must be an object")

        serializer = serializer_class(data=data, partial=partial)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data


# ══════════════════════════════════════════════════════════════
# HOUSEHOLD / INGREDIENTS
# ══════════════════════════════════════════════════════════════


class HouseholdView(PlannerAPIView):
    """
    GET /api/household
    PUT /api/household  {"name": "The Smiths"}
    """

    def get(self, request):
        return Response(HouseholdSerializer(self.household).data)

    def put(self, request):
        data = self.parse(HouseholdRenameSerializer)
        household = rename_household(self.household, data["name"])
        return Response(HouseholdSerializer(household).data)


class IngredientListView(PlannerAPIView):
    """
    GET  /api/ingredients
    POST /api/ingredients  {"name": "Sugar", "unit": "g"}
    """

    def get(self, request):
        rows = ingredients.list_ingredients()
        return Response({"ingredients": IngredientSerializer(rows, many=True).data})

    def post(self, request):
        data = self.parse(IngredientCreateSerializer)
        ingredient = ingredients.create_ingredient(**data)
        return Response(IngredientSerializer(ingredient).data, status=status.HTTP_201_CREATED)


# ══════════════════════════════════════════════════════════════
# RECIPES
# ══════════════════════════════════════════════════════════════


class RecipeListView(PlannerAPIView):
    """
    GET  /api/recipes
    POST /api/recipes
    {
        "name": "Pancakes",
        "servings": 4,
        "instructions": "Mix. Fry.",
        "ingredients": [{"ingredientId": "...", "quantity": 200, "unit": "g"}]
    }
    """

    def get(self, request):
        rows = recipes.list_recipes(self.household)
        return Response({"recipes": RecipeSerializer(rows, many=True).data})

    def post(self, request):
        data = self.parse(RecipeCreateSerializer)
        recipe = recipes.create_recipe(self.household, **data)
        return Response(RecipeSerializer(recipe).data, status=status.HTTP_201_CREATED)


class RecipeDetailView(PlannerAPIView):
    """
    GET    /api/recipes/{id}
    PATCH  /api/recipes/{id}  (any of name, description, servings, instructions, notes)
    DELETE /api/recipes/{id}
    """

    def get(self, request, recipe_id):
        recipe = recipes.get_recipe(self.household, recipe_id)
        return Response(RecipeSerializer(recipe).data)

    def patch(self, request, recipe_id):
        recipe = recipes.get_recipe(self.household, recipe_id, with_ingredients=False)
        data = self.parse(RecipeUpdateSerializer, partial=True)
        recipe = recipes.update_recipe(recipe, **data)
        return Response(RecipeSerializer(recipe).data)

    def delete(self, request, recipe_id):
        recipe = recipes.get_recipe(self.household, recipe_id, with_ingredients=False)
        recipes.delete_recipe(recipe)
        return Response(OK)


class RecipeIngredientsView(PlannerAPIView):
    """
    PATCH /api/recipes/{id}/ingredients  {"ingredients": [...]}

    Replaces the whole list; ``[]`` clears it.
    """

    def patch(self, request, recipe_id):
        recipe = recipes.get_recipe(self.household, recipe_id, with_ingredients=False)
        data = self.parse(RecipeIngredientsSerializer)
        recipe = recipes.replace_recipe_ingredients(recipe, data["ingredients"])
        return Response(RecipeSerializer(recipe).data)


# ══════════════════════════════════════════════════════════════
# PANTRY / PEOPLE
# ══════════════════════════════════════════════════════════════


class PantryListView(PlannerAPIView):
    """
    GET  /api/pantry
    POST /api/pantry  {"ingredientId": "...", "availability": "HAVE"}
    """

    def get(self, request):
        items = pantry.list_pantry(self.household)
        return Response(
            {
                "householdId": self.household.pk,
                "items": PantryItemSerializer(items, many=True).data,
            }
        )

    def post(self, request):
        data = self.parse(PantryCreateSerializer)
        item = pantry.add_to_pantry(self.household, **data)
        return Response(PantryItemSerializer(item).data, status=status.HTTP_201_CREATED)


class PantryDetailView(PlannerAPIView):
    """
    PATCH  /api/pantry/{id}  {"availability": "LOW"}
    DELETE /api/pantry/{id}
    """

    def patch(self, request, item_id):
        item = pantry.get_pantry_item(self.household, item_id)
        data = self.parse(PantryUpdateSerializer)
        item = pantry.set_availability(item, data["availability"])
        return Response(PantryItemSerializer(item).data)

    def delete(self, request, item_id):
        item = pantry.get_pantry_item(self.household, item_id)
        pantry.remove_from_pantry(item)
        return Response(OK)


class PersonListView(PlannerAPIView):
    """
    GET  /api/people
    POST /api/people  {"name": "Ana", "portionFactor": 0.5}
    """

    def get(self, request):
        rows = people.list_people(self.household)
        return Response(
            {
                "householdId": self.household.pk,
                "people": PersonSerializer(rows, many=True).data,
            }
        )

    def post(self, request):
        data = self.parse(PersonWriteSerializer)
        person = people.add_person(self.household, **data)
        return Response(PersonSerializer(person).data, status=status.HTTP_201_CREATED)


class PersonDetailView(PlannerAPIView):
    """
    PATCH  /api/people/{id}  {"portionFactor": 1.5}
    DELETE /api/people/{id}
    """

    def patch(self, request, person_id):
        person = people.get_person(self.household, person_id)
        data = self.parse(PersonWriteSerializer, partial=True)
        person = people.update_person(person, **data)
        return Response(PersonSerializer(person).data)

    def delete(self, request, person_id):
        person = people.get_person(self.household, person_id)
        people.remove_person(person)
        return Response(OK)


# ══════════════════════════════════════════════════════════════
# MEAL PLANS
# ══════════════════════════════════════════════════════════════


class MealPlanListView(PlannerAPIView):
    """
    GET  /api/mealplans
    POST /api/mealplans  {"name": "Week 12", "status": "draft"}
    """

    def get(self, request):
        plans = MealPlanning.list_plans(self.household)
        return Response(
            {
                "householdId": self.household.pk,
                "mealPlans": MealPlanSerializer(plans, many=True).data,
            }
        )

    def post(self, request):
        data = self.parse(MealPlanWriteSerializer)
        plan = MealPlanning.create_plan(self.household, **data)
        return Response(MealPlanSerializer(plan).data, status=status.HTTP_201_CREATED)


class MealPlanDetailView(PlannerAPIView):
    """
    GET    /api/mealplans/{id}  (plan only, days are a separate resource)
    PATCH  /api/mealplans/{id}  (any of name, status)
    DELETE /api/mealplans/{id}
    """

    def get(self, request, plan_id):
        plan = MealPlanning.get_plan(self.household, plan_id)
        return Response(MealPlanSerializer(plan).data)

    def patch(self, request, plan_id):
        plan = MealPlanning.get_plan(self.household, plan_id)
        data = self.parse(MealPlanWriteSerializer, partial=True)
        plan = MealPlanning.update_plan(plan, **data)
        return Response(MealPlanSerializer(plan).data)

    def delete(self, request, plan_id):
        plan = MealPlanning.get_plan(self.household, plan_id)
        MealPlanning.delete_plan(plan)
        return Response(OK)


class MealPlanDayListView(PlannerAPIView):
    """
    GET  /api/mealplans/{id}/days
    POST /api/mealplans/{id}/days  {"date": "2024-03-18"}
    """

    def get(self, request, plan_id):
        plan = MealPlanning.get_plan(self.household, plan_id)
        days = MealPlanning.list_days(plan)
        return Response(
            {
                "mealPlanId": plan.pk,
                "days": MealPlanDaySerializer(days, many=True).data,
            }
        )

    def post(self, request, plan_id):
        plan = MealPlanning.get_plan(self.household, plan_id)
        data = self.parse(MealPlanDayCreateSerializer)
        day = MealPlanning.add_day(plan, data["date"])
        return Response(MealPlanDaySerializer(day).data, status=status.HTTP_201_CREATED)


class MealPlanDayDetailView(PlannerAPIView):
    """DELETE /api/mealplans/{id}/days/{dayId} (items go with the day)"""

    def delete(self, request, plan_id, day_id):
        plan = MealPlanning.get_plan(self.household, plan_id)
        day = MealPlanning.get_day(plan, day_id)
        MealPlanning.delete_day(day)
        return Response(OK)


class MealPlanItemListView(PlannerAPIView):
    """
    POST /api/mealplans/{id}/days/{dayId}/items
    {"recipeId": "...", "mealType": "dinner", "servings": 4}
    """

    def post(self, request, plan_id, day_id):
        plan = MealPlanning.get_plan(self.household, plan_id)
        day = MealPlanning.get_day(plan, day_id)
        data = self.parse(MealPlanItemCreateSerializer)
        item = MealPlanning.add_item(self.household, day, **data)
        return Response(MealPlanItemSerializer(item).data, status=status.HTTP_201_CREATED)


class MealPlanItemDetailView(PlannerAPIView):
    """
    PATCH  /api/mealplans/{id}/days/{dayId}/items/{itemId}  (any of mealType, servings)
    DELETE /api/mealplans/{id}/days/{dayId}/items/{itemId}
    """

    def _resolve(self, plan_id, day_id, item_id):
        plan = MealPlanning.get_plan(self.household, plan_id)
        day = MealPlanning.get_day(plan, day_id)
        return MealPlanning.get_item(day, item_id)

    def patch(self, request, plan_id, day_id, item_id):
        item = self._resolve(plan_id, day_id, item_id)
        data = self.parse(MealPlanItemUpdateSerializer, partial=True)
        item = MealPlanning.update_item(item, **data)
        return Response(MealPlanItemSerializer(item).data)

    def delete(self, request, plan_id, day_id, item_id):
        item = self._resolve(plan_id, day_id, item_id)
        MealPlanning.delete_item(item)
        return Response(OK)
