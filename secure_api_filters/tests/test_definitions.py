"""Tests for the custom type definitions provider."""

from types import SimpleNamespace

from django.test import SimpleTestCase, override_settings

from secure_api_filters.engine.definitions import Definitions, get_definitions
from secure_api_filters.tests.stubs import definitions as stub_definitions


class TestDefinitions(SimpleTestCase):
    """Tests for the Definitions adapter."""

    def setUp(self):
        super().setUp()
        self.definitions = Definitions(stub_definitions)

    def test_has_custom_type(self):
        """Test that public callables are custom types.

        Expected Result:
        - Public functions are found.
        - Private functions, non callables and missing names are not.
        """
        self.assertTrue(self.definitions.has_custom_type("custom_definition"))
        self.assertTrue(self.definitions.has_custom_type("student_number"))
        self.assertFalse(self.definitions.has_custom_type("_private_definition"))
        self.assertFalse(self.definitions.has_custom_type("NOT_A_DEFINITION"))
        self.assertFalse(self.definitions.has_custom_type("missing"))
        self.assertFalse(self.definitions.has_custom_type(""))

    def test_invoke_custom_type(self):
        """Test that invoking a custom type returns the provider's verdict as a bool."""
        self.assertIs(self.definitions.invoke_custom_type("custom_definition", "Doe"), True)
        self.assertIs(self.definitions.invoke_custom_type("custom_definition", "foo"), False)
        self.assertIs(self.definitions.invoke_custom_type("student_number", "24672467426"), True)
        self.assertIs(self.definitions.invoke_custom_type("student_number", "2467"), False)

    def test_invoke_missing_custom_type(self):
        """Test that invoking an unknown custom type raises AttributeError."""
        with self.assertRaises(AttributeError):
            self.definitions.invoke_custom_type("missing", "Doe")

    def test_empty_provider(self):
        """Test that an adapter without provider knows no custom types."""
        self.assertFalse(Definitions().has_custom_type("custom_definition"))

    def test_object_provider(self):
        """Test that any object exposing callables can be a provider."""
        definitions = Definitions(SimpleNamespace(even=lambda value: int(value) % 2 == 0))

        self.assertTrue(definitions.invoke_custom_type("even", "4"))
        self.assertFalse(definitions.invoke_custom_type("even", "3"))


class TestGetDefinitions(SimpleTestCase):
    """Tests for loading the definitions provider from the settings."""

    def test_loads_module_from_settings(self):
        """Test that the configured module is used as provider."""
        self.assertIs(get_definitions().provider, stub_definitions)

    @override_settings(SECURE_API_FILTERS_DEFINITIONS="secure_api_filters.tests.stubs.definitions.custom_definition")
    def test_loads_object_from_settings(self):
        """Test that the setting may also name an object inside a module."""
        self.assertIs(get_definitions().provider, stub_definitions.custom_definition)

    @override_settings(SECURE_API_FILTERS_DEFINITIONS=stub_definitions)
    def test_accepts_provider_object(self):
        """Test that the setting may hold the provider itself."""
        self.assertIs(get_definitions().provider, stub_definitions)

    @override_settings(SECURE_API_FILTERS_DEFINITIONS=None)
    def test_no_provider_configured(self):
        """Test that an empty provider is returned when nothing is configured."""
        self.assertIsNone(get_definitions().provider)

    @override_settings(SECURE_API_FILTERS_DEFINITIONS="secure_api_filters.tests.stubs.missing_module")
    def test_invalid_path(self):
        """Test that a broken dotted path raises ImportError."""
        with self.assertRaises(ImportError):
            get_definitions()

    @override_settings(SECURE_API_FILTERS_DEFINITIONS="secure_api_filters.tests.stubs.broken_definitions")
    def test_module_failing_to_import(self):
        """Test that the import error of an existing module is reported as is.

        Expected Result:
        - The ModuleNotFoundError of the missing dependency is raised, not a
          lookup error for an attribute of the parent package.
        """
        with self.assertLogs("secure_api_filters.engine.definitions", level="ERROR"):
            with self.assertRaises(ModuleNotFoundError) as ctx:
                get_definitions()

        self.assertEqual(ctx.exception.name, "secure_api_filters_unavailable_dependency")
