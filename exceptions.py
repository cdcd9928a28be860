"""
Meal Planner Exceptions.

All meal planner domain errors derive from PlannerError for consistent handling.
The API layer maps each subclass to an HTTP status (see mealplanner.api.exceptions).
"""

from typing import Any


class PlannerError(Exception):
    """
    Base exception for all Meal Planner errors.

    Usage:
        raise NotFoundError('RECIPE_NOT_FOUND', 'Recipe not found', recipe_id=pk)

    Attributes:
        code: Error code (RECIPE_NOT_FOUND, INGREDIENT_NAME_TAKEN, etc.)
        message: Human readable message returned to API clients
        details: Additional context as keyword arguments
    """

    def __init__(self, code: str, message: str | None = None, **details: Any):
        self.code = code
        self.message = message or code
        self.details = details
        super().__init__(self.message)

    def as_dict(self) -> dict:
        """Return error as dictionary for API responses."""
        return {"message": self.message}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{type(self).__name__}({self.code}: {details_str})"
        return f"{type(self).__name__}({self.code})"


class NotFoundError(PlannerError):
    """Entity absent, or outside the current household."""


class ConflictError(PlannerError):
    """Uniqueness violation, detected in application code or by the database."""


class InvalidRequestError(PlannerError):
    """Well-formed body that references unknown rows or repeats one."""


class IngredientUnitMissing(PlannerError):
    """
    No unit could be determined for a recipe line.

    Raised inside an atomic block so the whole write is rolled back.
    Not mapped to a status by the API layer (surfaces as a 500).
    """


# Common error codes
# INGREDIENT_NAME_TAKEN: Ingredient name already exists (case-insensitive)
# INGREDIENT_NOT_FOUND: Referenced ingredient does not exist
# INVALID_INGREDIENT_REFERENCE: One or more recipe lines reference unknown ingredients
# DUPLICATE_INGREDIENT: Same ingredient twice in one recipe line list
# INGREDIENT_UNIT_MISSING: No unit given and the ingredient has none
# ALREADY_IN_PANTRY: (household, ingredient) pair already stocked
# RECIPE_NOT_FOUND / PANTRY_ITEM_NOT_FOUND / PERSON_NOT_FOUND
# MEAL_PLAN_NOT_FOUND / DAY_NOT_FOUND / ITEM_NOT_FOUND
