"""Validation and coercion of raw filter values.

Raw values always arrive as text (query parameters, form data). Each declared
filter type accepts a well defined textual format:

- ``string`` / ``text``: anything.
- ``boolean``: one of ``true, t, 1, yes, y, on`` or ``false, f, 0, no, n, off``,
  case-insensitive.
- ``bigint`` / ``integer``: an optionally signed base-10 integer.
- ``decimal`` / ``float``: an optionally signed number with an optional
  fractional part (``4``, ``-2.5``, ``.75``, ``3.``).
- custom types: whatever the definitions provider accepts.

Surrounding whitespace is ignored for every type but string and text. Custom
type predicates receive the stripped text, the same value the filter gets.
Numbers must also parse to a finite value (very long integers are rejected).
"""

import math
import re
from decimal import Decimal, InvalidOperation

from secure_api_filters.constants.types import (
    FALSE_VALUES,
    INTEGER_TYPES,
    NUMBER_TYPES,
    PRIMITIVE_TYPES,
    TEXT_TYPES,
    TRUE_VALUES,
    FieldType,
)
from secure_api_filters.engine.definitions import get_definitions
from secure_api_filters.exceptions import InvalidArgumentError, InvalidValueError

__all__ = [
    "normalize_field_type",
    "validate_field_type",
    "validate_value",
    "convert_value",
    "is_blank",
]

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
NUMBER_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")


def normalize_field_type(field_type) -> str:
    """Return the plain string name of a field type.

    Args:
        field_type: A FieldType member or a type name.

    Returns:
        str: The type name (e.g., 'integer', 'custom_definition').
    """
    if isinstance(field_type, FieldType):
        return field_type.value
    return str(field_type)


def validate_field_type(field_type) -> str:
    """Check that a filter can be declared with the given type.

    Args:
        field_type: A FieldType member, a primitive type name or the name of a
            custom type exposed by the definitions provider.

    Returns:
        str: The normalized type name.

    Raises:
        InvalidArgumentError: If the type is neither primitive nor custom.
    """
    type_name = normalize_field_type(field_type)
    if type_name in PRIMITIVE_TYPES or get_definitions().has_custom_type(type_name):
        return type_name
    raise InvalidArgumentError(f"{type_name} is not a valid filter type")


def _as_text(raw_value) -> str:
    return str(raw_value).strip()


def _to_number(type_name: str, text: str):
    if type_name in INTEGER_TYPES:
        return int(text)
    if type_name == FieldType.DECIMAL:
        return Decimal(text)
    return float(text)


def _is_number(type_name: str, text: str) -> bool:
    pattern = INTEGER_PATTERN if type_name in INTEGER_TYPES else NUMBER_PATTERN
    if not pattern.match(text):
        return False
    # Numbers the interpreter refuses to parse or that overflow to infinity
    try:
        value = _to_number(type_name, text)
    except (ValueError, InvalidOperation):
        return False
    return not isinstance(value, float) or math.isfinite(value)


def validate_value(field_type, raw_value) -> None:
    """Validate a raw value against a filter type.

    Args:
        field_type: The declared filter type.
        raw_value: The caller supplied value.

    Raises:
        InvalidValueError: If the value does not match the type.
        InvalidArgumentError: If the type is a custom type the definitions
            provider does not know about.
    """
    type_name = normalize_field_type(field_type)

    if type_name in TEXT_TYPES:
        return

    if type_name == FieldType.BOOLEAN:
        valid = _as_text(raw_value).lower() in TRUE_VALUES | FALSE_VALUES
    elif type_name in INTEGER_TYPES or type_name in NUMBER_TYPES:
        valid = _is_number(type_name, _as_text(raw_value))
    else:
        definitions = get_definitions()
        if not definitions.has_custom_type(type_name):
            raise InvalidArgumentError(f"{type_name} is not a valid filter type")
        valid = definitions.invoke_custom_type(type_name, _as_text(raw_value))

    if not valid:
        raise InvalidValueError(raw_value, type_name)


def convert_value(field_type, raw_value):
    """Convert a validated raw value into its native representation.

    Only call this after ``validate_value`` succeeded for the same arguments.

    Args:
        field_type: The declared filter type.
        raw_value: The caller supplied value.

    Returns:
        The value as ``str``, ``bool``, ``int``, ``Decimal`` or ``float``.
        Custom types are handed over as stripped text.
    """
    type_name = normalize_field_type(field_type)

    if type_name in TEXT_TYPES:
        return str(raw_value)
    if type_name == FieldType.BOOLEAN:
        return _as_text(raw_value).lower() in TRUE_VALUES
    if type_name in INTEGER_TYPES or type_name in NUMBER_TYPES:
        return _to_number(type_name, _as_text(raw_value))
    return _as_text(raw_value)


def is_blank(value) -> bool:
    """Check whether a filter value counts as blank.

    None, empty or whitespace-only strings and empty collections are blank.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return not value
    return False
