"""
Translation of schema validation failures into field errors.

Pydantic and FastAPI report failures as lists of dicts with a ``loc``
tuple. Clients get an ordered list of ``{field, message}`` where
``field`` is the dotted path inside the request part, or "root" when the
failure concerns the part as a whole. Messages name the field
("name must be at least 2 characters") instead of Pydantic's generic
wording.
"""

from typing import Any, Iterable, Mapping

from app.shared.errors import FieldError

ROOT_FIELD = "root"
REQUEST_PARTS = frozenset({"body", "query", "path", "header", "cookie"})

# Pydantic error type -> message template. Placeholders come from the
# error's ``ctx`` plus ``field``.
FIELD_MESSAGES = {
    "missing": "{field} is required",
    "string_type": "{field} must be a string",
    "string_too_short": "{field} must be at least {min_length} characters",
    "string_too_long": "{field} must be at most {max_length} characters",
    "int_type": "{field} must be an integer",
    "int_parsing": "{field} must be an integer",
    "int_from_float": "{field} must be an integer",
    "greater_than": "{field} must be greater than {gt}",
    "less_than_equal": "{field} must not exceed {le}",
    "enum": "{field} must be one of {expected}",
}
INVALID_EMAIL = "{field} must be a valid email address"


def _field_path(error: Mapping[str, Any]) -> str:
    if error.get("type") == "json_invalid":
        return ROOT_FIELD
    loc = list(error.get("loc") or ())
    if loc and loc[0] in REQUEST_PARTS:
        loc = loc[1:]
    return ".".join(str(part) for part in loc) or ROOT_FIELD


def _message(error: Mapping[str, Any], field: str) -> str:
    error_type = error.get("type")
    ctx = error.get("ctx") or {}
    fallback = str(error.get("msg", "Invalid value"))

    if error_type == "value_error":
        # Custom validators raise ValueError; report their text without
        # Pydantic's "Value error, " prefix. EmailStr reports a reason.
        if "error" in ctx:
            return str(ctx["error"])
        if "reason" in ctx:
            return INVALID_EMAIL.format(field=field)
        return fallback

    template = FIELD_MESSAGES.get(error_type)
    if template is None or field == ROOT_FIELD:
        return fallback
    try:
        return template.format(field=field, **ctx)
    except KeyError:
        return fallback


def to_field_errors(errors: Iterable[Mapping[str, Any]]) -> list[FieldError]:
    """Map Pydantic/FastAPI error dicts to ordered field errors."""
    field_errors = []
    for error in errors:
        field = _field_path(error)
        field_errors.append(FieldError(field=field, message=_message(error, field)))
    return field_errors
