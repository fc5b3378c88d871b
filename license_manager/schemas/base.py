"""Base schema utilities for the bulk import endpoints."""

import re
from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from license_manager.utils.validation import ValidationError

# Integer / Numeric(12, 2) column limits
INT_MAX = 2**31 - 1
_INT_RE = re.compile(r"-?\d{1,12}")


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")


def _blank(v):
    return v is None or (isinstance(v, str) and not v.strip())


def _to_none(v):
    return None if _blank(v) else v


def _integer(v):
    # "12.5", "twelve" and NaN are rejected, not truncated
    if _blank(v):
        return None
    if isinstance(v, bool):
        raise ValueError("must be an integer")
    if isinstance(v, str):
        s = v.strip()
        if _INT_RE.fullmatch(s):
            return int(s)
        if (s[1:] if s.startswith("-") else s).isdecimal():
            raise ValueError("is too large")
        raise ValueError("must be an integer")
    return v


def _count(v):
    return 0 if _blank(v) else _integer(v)


def _text(v):
    if v is None:
        return None
    if isinstance(v, bool) or not isinstance(v, (str, int, float)):
        raise ValueError("must be a string")
    return str(v).strip()


def _optional_text(v):
    return _to_none(_text(v))


def _email(v):
    # Only the "@" check; anything stricter belongs to the mail relay.
    v = _optional_text(v)
    if v is not None and "@" not in v:
        raise ValueError("must be an email address")
    return v


def _date(v):
    """Accepts YYYY-MM-DD or a full ISO timestamp (date part kept)."""
    v = _to_none(v)
    if v is None or isinstance(v, date):
        return v
    if not isinstance(v, str):
        raise ValueError("must be a YYYY-MM-DD date")
    s = v.strip()
    try:
        if len(s) == 10:
            return date.fromisoformat(s)
        return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValueError("must be a YYYY-MM-DD date") from None


def _flag(v):
    v = _to_none(v)
    if v is None:
        return False
    if isinstance(v, str) and v.strip().lower() == "si":
        return True
    return v


def _money(v):
    v = _to_none(v)
    if v is None:
        return Decimal("0")
    if isinstance(v, bool):
        raise ValueError("must be a number")
    if isinstance(v, str) and len(v.strip()) > 32:
        raise ValueError("is too large")
    return v


def required_text(max_len: int):
    return Annotated[str, Field(min_length=1, max_length=max_len), BeforeValidator(_text)]


def optional_text(max_len: int):
    return Annotated[Optional[Annotated[str, Field(max_length=max_len)]], BeforeValidator(_optional_text)]


Id = Annotated[int, Field(ge=1, le=INT_MAX), BeforeValidator(_integer)]
OptionalId = Annotated[Optional[Id], BeforeValidator(_to_none)]
Year = Annotated[int, Field(ge=1900, le=9999), BeforeValidator(_integer)]
OptionalYear = Annotated[Optional[Year], BeforeValidator(_to_none)]
Quantity = Annotated[int, Field(ge=0, le=INT_MAX), BeforeValidator(_integer)]
Count = Annotated[int, Field(ge=0, le=INT_MAX), BeforeValidator(_count)]
Flag = Annotated[bool, BeforeValidator(_flag)]
Money = Annotated[Decimal, Field(ge=0, max_digits=12, decimal_places=2), BeforeValidator(_money)]
OptionalEmail = Annotated[Optional[Annotated[str, Field(max_length=255)]], BeforeValidator(_email)]
OptionalDate = Annotated[Optional[date], BeforeValidator(_date)]


_MESSAGES = {
    "int_type": "must be an integer",
    "int_parsing": "must be an integer",
    "int_from_float": "must be an integer",
    "decimal_type": "must be a number",
    "decimal_parsing": "must be a number",
    "finite_number": "must be a number",
    "decimal_max_digits": "is too large",
    "decimal_whole_digits": "is too large",
    "decimal_max_places": "must have at most {decimal_places} decimal places",
    "less_than_equal": "is too large",
    "less_than": "is too large",
    "bool_type": "must be a boolean",
    "bool_parsing": "must be a boolean",
    "string_type": "must be a string",
    "string_too_long": "must be at most {max_length} characters",
    "list_type": "must be an array",
    "model_type": "expected an object",
    "model_attributes_type": "expected an object",
    "dict_type": "expected an object",
}

_REQUIRED_WHEN_BLANK = {"int_type", "string_type", "string_too_short", "decimal_type"}


def to_validation_error(err: dict) -> ValidationError:
    """One pydantic error entry -> `row N: <field> <message>`."""
    loc = err.get("loc") or ()
    row = loc[0] if loc and isinstance(loc[0], int) else None
    names = [part for part in loc if isinstance(part, str)]
    field = names[0] if names else None
    kind = err["type"]
    ctx = err.get("ctx") or {}
    value = err.get("input")

    if kind == "missing" or (kind in _REQUIRED_WHEN_BLANK and _blank(value)):
        text = "is required"
    elif kind == "value_error":
        text = str(ctx.get("error") or err["msg"])
    elif kind == "greater_than_equal":
        ge = ctx.get("ge")
        if ge == 0 and isinstance(value, int) and not isinstance(value, bool):
            text = "must be a non-negative integer"
        else:
            text = f"must be >= {ge}"
    else:
        text = _MESSAGES.get(kind, err["msg"]).format(**ctx)

    message = f"{field} {text}" if field else text
    return ValidationError(message, field=field, row=row)


def validate_rows(adapter: TypeAdapter, payload, label: str) -> list:
    if not isinstance(payload, list):
        raise ValidationError(f"Invalid data format. Expected an array of {label} objects.")
    try:
        return adapter.validate_python(payload)
    except PydanticValidationError as e:
        raise to_validation_error(e.errors()[0]) from None


def validate_one(schema: type, data):
    if not isinstance(data, dict):
        raise ValidationError("expected an object")
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise to_validation_error(e.errors()[0]) from None
