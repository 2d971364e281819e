"""
secure_api_filters Django application initialization.
"""

from django.apps import AppConfig


class SecureApiFiltersConfig(AppConfig):
    """
    Configuration for the secure_api_filters Django application.
    """

    name = "secure_api_filters"
    verbose_name = "Secure API filters"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):
        """Apply the default settings of the application."""
        from django.conf import settings  # pylint: disable=import-outside-toplevel

        from secure_api_filters.settings.common import plugin_settings  # pylint: disable=import-outside-toplevel

        plugin_settings(settings)
