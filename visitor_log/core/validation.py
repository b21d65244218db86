"""
Input validation for visitor sign-in and sign-out.

Validation never stops at the first problem: every failing field is collected
so the form can show all of them at once.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Mapping

from pydantic import ValidationError

from .errors import InvalidVisitorIdError, VisitorNotFoundError, VisitorValidationError
from .models.io import FieldError, VisitorCreate

_VISITOR_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def field_errors_from(errors: Iterable[Mapping[str, Any]]) -> List[FieldError]:
    """Convert pydantic error dicts into :class:`FieldError` entries.

    A leading ``body`` location segment (added by FastAPI for request bodies)
    is dropped so ``("body", "mobile")`` reports as ``mobile``. Errors not tied
    to a named field, such as a JSON decode position, report as ``body``.
    """
    field_errors: List[FieldError] = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        if loc and isinstance(loc[0], str):
            field = ".".join(str(part) for part in loc)
        else:
            field = "body"
        field_errors.append(
            FieldError(field=field, message=str(error.get("msg", "Invalid value")), type=str(error.get("type", "")))
        )
    return field_errors


def validate_sign_in(name: Any, mobile: Any) -> VisitorCreate:
    """
    Validate a sign-in request.

    Args:
        name: Visitor name, 1-100 characters.
        mobile: Mobile number, exactly 10 ASCII digits.

    Returns:
        The validated payload.

    Raises:
        VisitorValidationError: listing every failing field.
    """
    try:
        return VisitorCreate.model_validate({"name": name, "mobile": mobile})
    except ValidationError as e:
        raise VisitorValidationError(field_errors_from(e.errors())) from e


def parse_visitor_id(raw_id: Any) -> int:
    """Parse a visitor identifier taken from a URL path.

    Raises:
        InvalidVisitorIdError: if ``raw_id`` is not an optionally signed run of digits.
        VisitorNotFoundError: if ``raw_id`` is too long to convert; no record has such an id.
    """
    if isinstance(raw_id, bool):
        raise InvalidVisitorIdError(raw_id)
    if isinstance(raw_id, int):
        return raw_id
    if not isinstance(raw_id, str) or _VISITOR_ID_PATTERN.fullmatch(raw_id) is None:
        raise InvalidVisitorIdError(raw_id)
    try:
        return int(raw_id)
    except ValueError:
        raise VisitorNotFoundError(raw_id) from None
