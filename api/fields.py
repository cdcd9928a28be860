"""
Strict request fields.

DRF's stock fields coerce ("4" becomes 4.0, 12 becomes "12"). The fields
here accept JSON values of the right type only, and every message names the
field the way the client sent it:

    name must be a string
    servings must be a finite number > 0
    ingredients[].quantity must be a finite number > 0

A missing or null required field reports the same message as a wrong type.
"""

import math
import re
from collections.abc import Mapping
from datetime import date, timezone

from rest_framework import serializers

ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class WireNameMixin:
    """Inject ``{name}`` into error messages and fold required/null into one key."""

    missing_key = "invalid"

    @property
    def wire_name(self) -> str:
        # Fields of a serializer used as a ListField child: "ingredients[].unit"
        parent = self.parent
        container = getattr(parent, "parent", None)
        if isinstance(container, serializers.ListField):
            return f"{container.field_name}[].{self.field_name}"
        return self.field_name

    def fail(self, key, **kwargs):
        if key in ("required", "null"):
            key = self.missing_key
        kwargs.setdefault("name", self.wire_name)
        super().fail(key, **kwargs)


class TextField(WireNameMixin, serializers.Field):
    """
    JSON string.

    Args:
        trim: strip surrounding whitespace
        blank_to_null: an empty (after trim) value becomes None instead of an error
        allow_blank: keep empty values as they are
    """

    default_error_messages = {
        "invalid": "{name} must be a string",
        "blank": "{name} cannot be empty",
    }

    def __init__(self, *, trim=True, blank_to_null=False, allow_blank=False, **kwargs):
        self.trim = trim
        self.blank_to_null = blank_to_null
        self.allow_blank = allow_blank
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        value = data.strip() if self.trim else data
        if not value:
            if self.blank_to_null:
                return None
            if not self.allow_blank:
                self.fail("blank")
        return value

    def to_representation(self, value):
        return value


class PositiveNumberField(WireNameMixin, serializers.Field):
    """Finite JSON number > 0. Booleans are not numbers here."""

    default_error_messages = {
        "invalid": "{name} must be a finite number > 0",
        "not_positive": "{name} must be a finite number > 0",
    }

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            self.fail("invalid")
        try:
            finite = math.isfinite(data)
        except OverflowError:
            # int beyond float range, i.e. Infinity once parsed as a double
            finite = False
        if not finite:
            self.fail("invalid")
        if data <= 0:
            self.fail("not_positive")
        return data

    def to_representation(self, value):
        return value


class ChoiceField(WireNameMixin, serializers.ChoiceField):
    """One of a closed set of strings, compared exactly."""

    missing_key = "invalid_choice"
    default_error_messages = {
        "invalid_choice": "{name} must be one of: {choices}",
    }

    def fail(self, key, **kwargs):
        kwargs.setdefault("choices", ", ".join(self.choices))
        super().fail(key, **kwargs)

    def to_internal_value(self, data):
        if not isinstance(data, str) or data not in self.choices:
            self.fail("invalid_choice")
        return data


class IsoDateField(TextField):
    """Calendar date as YYYY-MM-DD. 2024-02-30 is rejected, not rolled over."""

    default_error_messages = {
        "invalid_date": "{name} must be an ISO date (YYYY-MM-DD)",
    }

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        if not ISO_DATE_RE.fullmatch(value):
            self.fail("invalid_date")
        try:
            return date.fromisoformat(value)
        except ValueError:
            self.fail("invalid_date")

    def to_representation(self, value):
        return value.isoformat()


class LineSerializer(serializers.Serializer):
    """
    Element of a list field.

    A non-object element is validated as an empty object, so the client
    gets the first missing field's message instead of a generic one.
    """

    def run_validation(self, data=serializers.empty):
        if not isinstance(data, Mapping):
            data = {}
        return super().run_validation(data)


class IngredientListField(WireNameMixin, serializers.ListField):
    """Recipe lines: an array of objects with distinct ``ingredientId``."""

    missing_key = "not_a_list"
    default_error_messages = {
        "not_a_list": "{name} must be an array",
        "duplicate": "Duplicate ingredientId in ingredients list",
    }

    def to_internal_value(self, data):
        lines = super().to_internal_value(data)
        ingredient_ids = [line["ingredient_id"] for line in lines]
        if len(set(ingredient_ids)) != len(ingredient_ids):
            self.fail("duplicate")
        return lines


class TimestampField(serializers.DateTimeField):
    """Read-only ISO-8601 timestamp in UTC (``Z`` suffix) whatever TIME_ZONE says."""

    def __init__(self, **kwargs):
        kwargs.setdefault("read_only", True)
        kwargs.setdefault("default_timezone", timezone.utc)
        super().__init__(**kwargs)
