"""
API exception handler.

Every error leaves the API as ``{"message": "..."}``:

- PlannerError subclasses -> their mapped status
- malformed or empty body (ParseError) -> 400 "Invalid JSON body"
- ValidationError -> 400 with the first message, in field declaration order
- other APIExceptions (404, 405) -> their status, DRF's detail as message

Anything else (IngredientUnitMissing, database errors) is not handled
here and surfaces as a 500.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import ParseError, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from mealplanner.exceptions import (
    ConflictError,
    InvalidRequestError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    InvalidRequestError: status.HTTP_400_BAD_REQUEST,
}


def first_message(detail) -> str:
    """First leaf of a DRF error detail (dicts and lists keep insertion order)."""
    if isinstance(detail, dict):
        for value in detail.values():
            return first_message(value)
    elif isinstance(detail, list):
        for value in detail:
            return first_message(value)
    return str(detail)


def exception_handler(exc, context):
    for error_class, status_code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_class):
            logger.info(
                f"{exc.code}: {exc.message}",
                extra={"error_code": exc.code, "status": status_code},
            )
            return Response(exc.as_dict(), status=status_code)

    if isinstance(exc, ParseError):
        return Response({"message": "Invalid JSON body"}, status=status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, ValidationError):
        return Response({"message": first_message(exc.detail)}, status=status.HTTP_400_BAD_REQUEST)

    response = drf_exception_handler(exc, context)
    if response is not None:
        detail = response.data.get("detail", "") if isinstance(response.data, dict) else ""
        response.data = {"message": str(detail)}
    return response
