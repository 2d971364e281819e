"""
Field types understood by the filter engine.
"""

from enum import Enum


class FieldType(str, Enum):
    """Primitive types an API filter can be declared with."""

    BIGINT = "bigint"
    BOOLEAN = "boolean"
    DECIMAL = "decimal"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    TEXT = "text"

    @classmethod
    def values(cls):
        """List the values of the enum."""
        return [e.value for e in cls]


PRIMITIVE_TYPES = frozenset(FieldType.values())

TEXT_TYPES = frozenset({FieldType.STRING.value, FieldType.TEXT.value})
INTEGER_TYPES = frozenset({FieldType.BIGINT.value, FieldType.INTEGER.value})
NUMBER_TYPES = frozenset({FieldType.DECIMAL.value, FieldType.FLOAT.value})

# Compared after stripping and lower-casing the raw value
TRUE_VALUES = frozenset({"true", "t", "1", "yes", "y", "on"})
FALSE_VALUES = frozenset({"false", "f", "0", "no", "n", "off"})

# Django internal field types that can back an attribute filter. Anything else
# (dates, JSON, relations, ...) has to be exposed through a custom filter.
DJANGO_FIELD_TYPES = {
    "CharField": FieldType.STRING.value,
    "SlugField": FieldType.STRING.value,
    "TextField": FieldType.TEXT.value,
    "BigIntegerField": FieldType.BIGINT.value,
    "BigAutoField": FieldType.BIGINT.value,
    "PositiveBigIntegerField": FieldType.BIGINT.value,
    "IntegerField": FieldType.INTEGER.value,
    "SmallIntegerField": FieldType.INTEGER.value,
    "PositiveIntegerField": FieldType.INTEGER.value,
    "PositiveSmallIntegerField": FieldType.INTEGER.value,
    "AutoField": FieldType.INTEGER.value,
    "SmallAutoField": FieldType.INTEGER.value,
    "DecimalField": FieldType.DECIMAL.value,
    "FloatField": FieldType.FLOAT.value,
    "BooleanField": FieldType.BOOLEAN.value,
}
