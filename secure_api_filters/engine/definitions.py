"""Custom type definitions for API filters.

Besides the primitive types, a filter can be declared with the name of a custom
type. Custom types are plain predicates exposed by a definitions provider: any
module or object whose public callables take the raw value and return whether
it is acceptable. The provider is configured with the
``SECURE_API_FILTERS_DEFINITIONS`` setting::

    # myapp/filter_definitions.py
    def course_code(value):
        return bool(re.match(r"^[A-Z]{2,4}\\d{3}$", value))

    # settings.py
    SECURE_API_FILTERS_DEFINITIONS = "myapp.filter_definitions"
"""

import logging
from importlib import import_module

from django.conf import settings
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


class Definitions:
    """Adapter exposing a definitions provider to the validator.

    Attributes:
        provider: The wrapped module or object, or None when no custom types
            are configured.
    """

    def __init__(self, provider=None):
        self.provider = provider

    def has_custom_type(self, name) -> bool:
        """Check whether the provider defines a custom type.

        Args:
            name: The custom type name.

        Returns:
            bool: True if the provider exposes a public callable with that name.
        """
        if self.provider is None or not name or str(name).startswith("_"):
            return False
        return callable(getattr(self.provider, str(name), None))

    def invoke_custom_type(self, name, raw_value) -> bool:
        """Run the custom type predicate against a raw value.

        Args:
            name: The custom type name.
            raw_value: The caller supplied value.

        Returns:
            bool: Whether the provider accepts the value.

        Raises:
            AttributeError: If the provider does not define the custom type.
        """
        if not self.has_custom_type(name):
            raise AttributeError(f"No custom filter definition named '{name}'")
        return bool(getattr(self.provider, str(name))(raw_value))


def get_definitions() -> Definitions:
    """Return the definitions provider configured in the Django settings.

    The setting is read on every call, so ``override_settings`` is honored.

    Returns:
        Definitions: The configured provider, or an empty one.
    """
    provider_path = getattr(settings, "SECURE_API_FILTERS_DEFINITIONS", None)
    if not provider_path:
        return Definitions()
    if not isinstance(provider_path, str):
        return Definitions(provider_path)
    # The setting may name a module or an object inside a module
    try:
        return Definitions(import_module(provider_path))
    except ImportError as e:
        # Only a missing module at that exact path may be an object path
        if not isinstance(e, ModuleNotFoundError) or e.name != provider_path:
            logger.error(f"Unable to load filter definitions from '{provider_path}': {e}")
            raise
    try:
        return Definitions(import_string(provider_path))
    except ImportError as e:
        logger.error(f"Unable to load filter definitions from '{provider_path}': {e}")
        raise
