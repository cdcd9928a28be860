"""
Meal Planner REST API.

Provides DRF APIViews for:
- Household (read, rename)
- Ingredients (list, create)
- Recipes (CRUD + ingredient list replacement)
- Pantry and People (CRUD)
- Meal plans, days and items (nested CRUD)
"""
