"""Tests for validating and converting raw filter values."""

from decimal import Decimal

from ddt import data, ddt, unpack
from django.test import SimpleTestCase, override_settings

from secure_api_filters.constants.types import FieldType
from secure_api_filters.engine.validator import (
    convert_value,
    is_blank,
    normalize_field_type,
    validate_field_type,
    validate_value,
)
from secure_api_filters.exceptions import InvalidArgumentError, InvalidValueError


@ddt
class TestValidateValue(SimpleTestCase):
    """Tests for validate_value with primitive types."""

    @data(
        ("string", "John"),
        ("string", "anything at all %"),
        ("text", "  padded  "),
        ("boolean", "true"),
        ("boolean", "FALSE"),
        ("boolean", " Yes "),
        ("boolean", "0"),
        ("boolean", "off"),
        ("integer", "17"),
        ("integer", "-3"),
        ("integer", "+42"),
        ("bigint", "24672467426"),
        ("decimal", "4.26522643"),
        ("decimal", "-0.5"),
        ("decimal", ".75"),
        ("float", "2"),
        ("float", "3."),
    )
    @unpack
    def test_valid_values(self, field_type, value):
        """Test that well formed values pass validation.

        Expected Result:
        - No exception is raised.
        """
        validate_value(field_type, value)

    @data(
        ("boolean", "maybe"),
        ("boolean", "tru"),
        ("integer", "abc"),
        ("integer", "17.5"),
        ("integer", "17abc"),
        ("bigint", "1e10"),
        ("decimal", "abc"),
        ("decimal", "4.2.1"),
        ("float", "1,5"),
        ("float", "-"),
        ("integer", "1" * 5000),
        ("bigint", "-" + "9" * 5000),
        ("float", "1" * 400),
    )
    @unpack
    def test_invalid_values(self, field_type, value):
        """Test that malformed values fail validation.

        Expected Result:
        - InvalidValueError is raised carrying the rejected value.
        """
        with self.assertRaises(InvalidValueError) as ctx:
            validate_value(field_type, value)

        self.assertEqual(ctx.exception.value, value)
        self.assertEqual(ctx.exception.field_type, field_type)

    def test_accepts_field_type_members(self):
        """Test that FieldType members behave like their string names."""
        validate_value(FieldType.INTEGER, "18")
        with self.assertRaises(InvalidValueError):
            validate_value(FieldType.INTEGER, "eighteen")


@ddt
class TestValidateCustomValue(SimpleTestCase):
    """Tests for validate_value with custom types."""

    def test_custom_type_accepts_value(self):
        """Test that a value accepted by the definitions provider passes."""
        validate_value("custom_definition", "Doe")

    def test_custom_type_rejects_value(self):
        """Test that a value rejected by the definitions provider fails.

        Expected Result:
        - InvalidValueError is raised.
        """
        with self.assertRaises(InvalidValueError):
            validate_value("custom_definition", "foo")

    @data(" foo ", "foo\n", "\tfoo")
    def test_custom_type_checks_stripped_value(self, value):
        """Test that surrounding whitespace cannot sneak a rejected value past a custom type.

        Expected Result:
        - InvalidValueError is raised carrying the value as supplied.
        """
        with self.assertRaises(InvalidValueError) as ctx:
            validate_value("custom_definition", value)

        self.assertEqual(ctx.exception.value, value)

    @data("unknown_definition", "_private_definition", "NOT_A_DEFINITION")
    def test_unknown_custom_type(self, field_type):
        """Test that a type missing from the definitions provider is a registration error.

        Expected Result:
        - InvalidArgumentError is raised, not InvalidValueError.
        """
        with self.assertRaises(InvalidArgumentError):
            validate_value(field_type, "Doe")

    @override_settings(SECURE_API_FILTERS_DEFINITIONS=None)
    def test_custom_type_without_provider(self):
        """Test that custom types are unknown when no provider is configured."""
        with self.assertRaises(InvalidArgumentError):
            validate_value("custom_definition", "Doe")


@ddt
class TestConvertValue(SimpleTestCase):
    """Tests for convert_value."""

    @data(
        ("string", "John", "John"),
        ("text", " Some notes ", " Some notes "),
        ("boolean", "true", True),
        ("boolean", " Y ", True),
        ("boolean", "false", False),
        ("boolean", "0", False),
        ("integer", "17", 17),
        ("integer", "-3", -3),
        ("bigint", "24672467426", 24672467426),
        ("decimal", "4.26522643", Decimal("4.26522643")),
        ("float", "2.0", 2.0),
        ("custom_definition", " Doe ", "Doe"),
    )
    @unpack
    def test_convert_value(self, field_type, value, expected):
        """Test that validated values convert to their native representation."""
        converted = convert_value(field_type, value)

        self.assertEqual(converted, expected)
        self.assertIs(type(converted), type(expected))


@ddt
class TestFieldTypes(SimpleTestCase):
    """Tests for validate_field_type and normalize_field_type."""

    @data(*FieldType.values())
    def test_primitive_types_are_valid(self, field_type):
        """Test that every primitive type can be declared."""
        self.assertEqual(validate_field_type(field_type), field_type)

    def test_custom_type_is_valid(self):
        """Test that a custom type exposed by the provider can be declared."""
        self.assertEqual(validate_field_type("custom_definition"), "custom_definition")

    @data("date", "datetime", "json", "")
    def test_unknown_types_are_rejected(self, field_type):
        """Test that unknown types cannot be declared."""
        with self.assertRaises(InvalidArgumentError):
            validate_field_type(field_type)

    def test_normalize_field_type(self):
        """Test that FieldType members are normalized to plain strings."""
        self.assertEqual(normalize_field_type(FieldType.DECIMAL), "decimal")
        self.assertIs(type(normalize_field_type(FieldType.DECIMAL)), str)
        self.assertEqual(normalize_field_type("custom_definition"), "custom_definition")


@ddt
class TestIsBlank(SimpleTestCase):
    """Tests for is_blank."""

    @data(None, "", "   ", "\t\n", [], {}, ())
    def test_blank_values(self, value):
        self.assertTrue(is_blank(value))

    @data("john", " 0 ", "false", 0, False, ["a"])
    def test_present_values(self, value):
        self.assertFalse(is_blank(value))
