"""
Meal Planner API URLs.

Include this in your project's urlpatterns:

    path("api/", include("mealplanner.api.urls")),

Routes carry no trailing slash (``/api/recipes/{id}/ingredients``).
"""

from django.urls import path

from mealplanner.api import views

urlpatterns = [
    path("household", views.HouseholdView.as_view(), name="household"),
    path("ingredients", views.IngredientListView.as_view(), name="ingredient-list"),
    path("recipes", views.RecipeListView.as_view(), name="recipe-list"),
    path("recipes/<str:recipe_id>", views.RecipeDetailView.as_view(), name="recipe-detail"),
    path(
        "recipes/<str:recipe_id>/ingredients",
        views.RecipeIngredientsView.as_view(),
        name="recipe-ingredients",
    ),
    path("pantry", views.PantryListView.as_view(), name="pantry-list"),
    path("pantry/<str:item_id>", views.PantryDetailView.as_view(), name="pantry-detail"),
    path("people", views.PersonListView.as_view(), name="person-list"),
    path("people/<str:person_id>", views.PersonDetailView.as_view(), name="person-detail"),
    path("mealplans", views.MealPlanListView.as_view(), name="mealplan-list"),
    path("mealplans/<str:plan_id>", views.MealPlanDetailView.as_view(), name="mealplan-detail"),
    path(
        "mealplans/<str:plan_id>/days",
        views.MealPlanDayListView.as_view(),
        name="mealplan-day-list",
    ),
    path(
        "mealplans/<str:plan_id>/days/<str:day_id>",
        views.MealPlanDayDetailView.as_view(),
        name="mealplan-day-detail",
    ),
    path(
        "mealplans/<str:plan_id>/days/<str:day_id>/items",
        views.MealPlanItemListView.as_view(),
        name="mealplan-item-list",
    ),
    path(
        "mealplans/<str:plan_id>/days/<str:day_id>/items/<str:item_id>",
        views.MealPlanItemDetailView.as_view(),
        name="mealplan-item-detail",
    ),
]
