"""
Initial Meal Planner schema.

Creates:
- Household, Ingredient
- Recipe, RecipeIngredient
- PantryItem, Person
- MealPlan, MealPlanDay, MealPlanItem
"""

import django.db.models.deletion
from django.db import migrations, models

import mealplanner.models.base


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        # ══════════════════════════════════════════════════════════════
        # HOUSEHOLD / INGREDIENT
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="Household",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=mealplanner.models.base.new_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.TextField(verbose_name="Name")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
            ],
            options={
                "verbose_name": "Household",
                "verbose_name_plural": "Households",
                "db_table": "mealplanner_household",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="Ingredient",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=mealplanner.models.base.new_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.TextField(unique=True, verbose_name="Name")),
                (
                    "unit",
                    models.TextField(
                        help_text="g, kg, ml, pcs...",
                        verbose_name="Unit",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
            ],
            options={
                "verbose_name": "Ingredient",
                "verbose_name_plural": "Ingredients",
                "db_table": "mealplanner_ingredient",
                "ordering": ["name"],
            },
        ),
        # ══════════════════════════════════════════════════════════════
        # RECIPE
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="Recipe",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=mealplanner.models.base.new_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.TextField(verbose_name="Name")),
                ("description", models.TextField(blank=True, null=True, verbose_name="Description")),
                (
                    "servings",
                    models.FloatField(
                        help_text="Servings produced by one batch",
                        verbose_name="Servings",
                    ),
                ),
                ("instructions", models.TextField(verbose_name="Instructions")),
                ("notes", models.TextField(blank=True, null=True, verbose_name="Notes")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                (
                    "household",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="recipes",
                        to="mealplanner.household",
                        verbose_name="Household",
                    ),
                ),
            ],
            options={
                "verbose_name": "Recipe",
                "verbose_name_plural": "Recipes",
                "db_table": "mealplanner_recipe",
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["household", "name"], name="mealplanner_recipe_hh_name_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="RecipeIngredient",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=mealplanner.models.base.new_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("quantity", models.FloatField(verbose_name="Quantity")),
                ("unit", models.TextField(verbose_name="Unit")),
                (
                    "ingredient",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="recipe_lines",
                        to="mealplanner.ingredient",
                        verbose_name="Ingredient",
                    ),
                ),
                (
                    "recipe",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="ingredients",
                        to="mealplanner.recipe",
                        verbose_name="Recipe",
                    ),
                ),
            ],
            options={
                "verbose_name": "Recipe ingredient",
                "verbose_name_plural": "Recipe ingredients",
                "db_table": "mealplanner_recipe_ingredient",
                "ordering": ["ingredient__name"],
                "unique_together": {("recipe", "ingredient")},
            },
        ),
        # ══════════════════════════════════════════════════════════════
        # PANTRY / PEOPLE
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="PantryItem",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=mealplanner.models.base.new_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "availability",
                    models.CharField(
                        choices=[("HAVE", "Have"), ("LOW", "Low"), ("OUT", "Out")],
                        default="HAVE",
                        max_length=10,
                        verbose_name="Availability",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                (
                    "household",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="pantry_items",
                        to="mealplanner.household",
                        verbose_name="Household",
                    ),
                ),
                (
                    "ingredient",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="pantry_items",
                        to="mealplanner.ingredient",
                        verbose_name="Ingredient",
                    ),
                ),
            ],
            options={
                "verbose_name": "Pantry item",
                "verbose_name_plural": "Pantry items",
                "db_table": "mealplanner_pantry_item",
                "ordering": ["ingredient__name"],
                "unique_together": {("household", "ingredient")},
            },
        ),
        migrations.CreateModel(
            name="Person",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=mealplanner.models.base.new_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.TextField(verbose_name="Name")),
                (
                    "portion_factor",
                    models.FloatField(
                        default=1.0,
                        help_text="1.0 = one serving",
                        verbose_name="Portion factor",
                    ),
                ),
                (
                    "disliked_ingredient_ids",
                    models.JSONField(blank=True, default=list, verbose_name="Disliked ingredients"),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                (
                    "household",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="people",
                        to="mealplanner.household",
                        verbose_name="Household",
                    ),
                ),
            ],
            options={
                "verbose_name": "Person",
                "verbose_name_plural": "People",
                "db_table": "mealplanner_person",
                "ordering": ["name"],
            },
        ),
        # ══════════════════════════════════════════════════════════════
        # MEAL PLAN
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="MealPlan",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=mealplanner.models.base.new_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.TextField(verbose_name="Name")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("draft", "Draft"),
                            ("active", "Active"),
                            ("completed", "Completed"),
                        ],
                        default="draft",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                (
                    "household",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="meal_plans",
                        to="mealplanner.household",
                        verbose_name="Household",
                    ),
                ),
            ],
            options={
                "verbose_name": "Meal plan",
                "verbose_name_plural": "Meal plans",
                "db_table": "mealplanner_meal_plan",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="MealPlanDay",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=mealplanner.models.base.new_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("date", models.DateField(verbose_name="Date")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                (
                    "meal_plan",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="days",
                        to="mealplanner.mealplan",
                        verbose_name="Meal plan",
                    ),
                ),
            ],
            options={
                "verbose_name": "Meal plan day",
                "verbose_name_plural": "Meal plan days",
                "db_table": "mealplanner_meal_plan_day",
                "ordering": ["date"],
            },
        ),
        migrations.CreateModel(
            name="MealPlanItem",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=mealplanner.models.base.new_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "meal_type",
                    models.CharField(
                        choices=[
                            ("breakfast", "Breakfast"),
                            ("lunch", "Lunch"),
                            ("dinner", "Dinner"),
                            ("snack", "Snack"),
                        ],
                        max_length=20,
                        verbose_name="Meal type",
                    ),
                ),
                ("servings", models.FloatField(verbose_name="Servings")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                (
                    "day",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="mealplanner.mealplanday",
                        verbose_name="Day",
                    ),
                ),
                (
                    "recipe",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="meal_plan_items",
                        to="mealplanner.recipe",
                        verbose_name="Recipe",
                    ),
                ),
            ],
            options={
                "verbose_name": "Meal plan item",
                "verbose_name_plural": "Meal plan items",
                "db_table": "mealplanner_meal_plan_item",
                "ordering": ["created_at"],
            },
        ),
    ]
