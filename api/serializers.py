"""
Meal Planner API Serializers.

Response serializers render models in the camelCase wire shape. Request
serializers validate bodies with the strict fields of ``api.fields`` and
produce snake_case ``validated_data`` ready for the services.
"""

from rest_framework import serializers
from rest_framework.exceptions import ErrorDetail, ValidationError

from mealplanner.api.fields import (
    ChoiceField,
    IngredientListField,
    IsoDateField,
    LineSerializer,
    PositiveNumberField,
    TextField,
    TimestampField,
)
from mealplanner.models import (
    Availability,
    Household,
    Ingredient,
    MealPlan,
    MealPlanDay,
    MealPlanItem,
    MealPlanStatus,
    MealType,
    PantryItem,
    Person,
    Recipe,
    RecipeIngredient,
)


# ══════════════════════════════════════════════════════════════
# RESPONSES
# ══════════════════════════════════════════════════════════════


class HouseholdSerializer(serializers.ModelSerializer):
    class Meta:
        model = Household
        fields = ["id", "name"]


class IngredientSerializer(serializers.ModelSerializer):
    """Catalogue entry."""

    createdAt = TimestampField(source="created_at")
    updatedAt = TimestampField(source="updated_at")

    class Meta:
        model = Ingredient
        fields = ["id", "name", "unit", "createdAt", "updatedAt"]


class IngredientRefSerializer(serializers.ModelSerializer):
    """Ingredient embedded in a recipe line or pantry entry."""

    class Meta:
        model = Ingredient
        fields = ["id", "name", "unit"]


class RecipeIngredientSerializer(serializers.ModelSerializer):
    ingredientId = serializers.CharField(source="ingredient_id", read_only=True)
    ingredient = IngredientRefSerializer(read_only=True)

    class Meta:
        model = RecipeIngredient
        fields = ["id", "ingredientId", "quantity", "unit", "ingredient"]


class RecipeSerializer(serializers.ModelSerializer):
    """Recipe with its lines (expects ``Recipe.objects.with_ingredients()``)."""

    householdId = serializers.CharField(source="household_id", read_only=True)
    createdAt = TimestampField(source="created_at")
    updatedAt = TimestampField(source="updated_at")
    ingredients = RecipeIngredientSerializer(many=True, read_only=True)

    class Meta:
        model = Recipe
        fields = [
            "id",
            "householdId",
            "name",
            "description",
            "servings",
            "instructions",
            "notes",
            "createdAt",
            "updatedAt",
            "ingredients",
        ]


class PantryItemSerializer(serializers.ModelSerializer):
    householdId = serializers.CharField(source="household_id", read_only=True)
    ingredientId = serializers.CharField(source="ingredient_id", read_only=True)
    createdAt = TimestampField(source="created_at")
    updatedAt = TimestampField(source="updated_at")
    ingredient = IngredientRefSerializer(read_only=True)

    class Meta:
        model = PantryItem
        fields = [
            "id",
            "householdId",
            "ingredientId",
            "availability",
            "createdAt",
            "updatedAt",
            "ingredient",
        ]


class PersonSerializer(serializers.ModelSerializer):
    """Household member. Disliked ingredients stay internal."""

    householdId = serializers.CharField(source="household_id", read_only=True)
    portionFactor = serializers.FloatField(source="portion_factor", read_only=True)

    class Meta:
        model = Person
        fields = ["id", "householdId", "name", "portionFactor"]


class MealPlanSerializer(serializers.ModelSerializer):
    householdId = serializers.CharField(source="household_id", read_only=True)
    createdAt = TimestampField(source="created_at")
    updatedAt = TimestampField(source="updated_at")

    class Meta:
        model = MealPlan
        fields = ["id", "householdId", "name", "status", "createdAt", "updatedAt"]


class RecipeRefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Recipe
        fields = ["id", "name"]


class MealPlanItemSerializer(serializers.ModelSerializer):
    dayId = serializers.CharField(source="day_id", read_only=True)
    recipeId = serializers.CharField(source="recipe_id", read_only=True)
    mealType = serializers.CharField(source="meal_type", read_only=True)
    createdAt = TimestampField(source="created_at")
    updatedAt = TimestampField(source="updated_at")
    recipe = RecipeRefSerializer(read_only=True)

    class Meta:
        model = MealPlanItem
        fields = [
            "id",
            "dayId",
            "recipeId",
            "mealType",
            "servings",
            "createdAt",
            "updatedAt",
            "recipe",
        ]


class MealPlanDaySerializer(serializers.ModelSerializer):
    """Day with its items (expects ``MealPlanDay.objects.with_items()``)."""

    mealPlanId = serializers.CharField(source="meal_plan_id", read_only=True)
    createdAt = TimestampField(source="created_at")
    updatedAt = TimestampField(source="updated_at")
    items = MealPlanItemSerializer(many=True, read_only=True)

    class Meta:
        model = MealPlanDay
        fields = ["id", "mealPlanId", "date", "createdAt", "updatedAt", "items"]


# ══════════════════════════════════════════════════════════════
# REQUESTS
# ══════════════════════════════════════════════════════════════


def error_stage(detail) -> int:
    """
    Rank a field's error for ``types_before_blanks`` serializers.

    0: wrong type, missing, not an array
    1: empty after trim
    2: list contents (element errors, duplicates)
    """
    if isinstance(detail, list) and detail and isinstance(detail[0], ErrorDetail):
        return {"blank": 1, "duplicate": 2}.get(detail[0].code, 0)
    return 2


class RequestSerializer(serializers.Serializer):
    """
    Base for request bodies.

    Fields are validated in declaration order and unknown keys are
    ignored. A partial update must carry at least one known field.

    With ``types_before_blanks`` every field's type is checked before any
    field is rejected as empty, and list contents come last.
    """

    types_before_blanks = False

    default_error_messages = {
        "nothing_to_update": "No updatable fields provided",
    }

    def to_internal_value(self, data):
        try:
            return super().to_internal_value(data)
        except ValidationError as exc:
            if not self.types_before_blanks or not isinstance(exc.detail, dict):
                raise
            errors = sorted(exc.detail.items(), key=lambda item: error_stage(item[1]))
            raise ValidationError(dict(errors)) from exc

    def validate(self, attrs):
        if self.partial and not attrs:
            self.fail("nothing_to_update")
        return attrs


class HouseholdRenameSerializer(RequestSerializer):
    name = TextField()


class IngredientCreateSerializer(RequestSerializer):
    types_before_blanks = True

    name = TextField()
    unit = TextField()


class RecipeLineSerializer(LineSerializer):
    ingredientId = TextField(trim=False, allow_blank=True, source="ingredient_id")
    quantity = PositiveNumberField()
    unit = TextField(required=False, allow_null=True, blank_to_null=True)


class RecipeUpdateSerializer(RequestSerializer):
    name = TextField()
    servings = PositiveNumberField()
    instructions = TextField()
    description = TextField(required=False, allow_null=True, blank_to_null=True)
    notes = TextField(required=False, allow_null=True, blank_to_null=True)


class RecipeCreateSerializer(RecipeUpdateSerializer):
    types_before_blanks = True

    ingredients = IngredientListField(child=RecipeLineSerializer())


class RecipeIngredientsSerializer(RequestSerializer):
    ingredients = IngredientListField(child=RecipeLineSerializer())


class PantryCreateSerializer(RequestSerializer):
    ingredientId = TextField(trim=False, allow_blank=True, source="ingredient_id")
    availability = ChoiceField(
        Availability.choices,
        required=False,
        error_messages={"invalid_choice": "availability must be HAVE, LOW, or OUT"},
    )


class PantryUpdateSerializer(RequestSerializer):
    availability = ChoiceField(
        Availability.choices,
        error_messages={"invalid_choice": "availability must be HAVE, LOW, or OUT"},
    )


class PersonWriteSerializer(RequestSerializer):
    name = TextField()
    portionFactor = PositiveNumberField(
        required=False,
        source="portion_factor",
        error_messages={
            "invalid": "portionFactor must be a finite number",
            "not_positive": "portionFactor must be > 0",
        },
    )


class MealPlanWriteSerializer(RequestSerializer):
    name = TextField()
    status = ChoiceField(MealPlanStatus.choices)


class MealPlanDayCreateSerializer(RequestSerializer):
    date = IsoDateField()


class MealPlanItemCreateSerializer(RequestSerializer):
    recipeId = TextField(trim=False, allow_blank=True, source="recipe_id")
    mealType = ChoiceField(MealType.choices, source="meal_type")
    servings = PositiveNumberField()


class MealPlanItemUpdateSerializer(RequestSerializer):
    mealType = ChoiceField(MealType.choices, source="meal_type")
    servings = PositiveNumberField()
