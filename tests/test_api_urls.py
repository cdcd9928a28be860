"""
URL configuration for Meal Planner API tests.

Used as ROOT_URLCONF in test settings and via @pytest.mark.urls.
"""

from django.urls import include, path

urlpatterns = [
    path("api/", include("mealplanner.api.urls")),
]
