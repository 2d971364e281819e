"""Django app configuration for test stubs."""

from django.apps import AppConfig


class StubsConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "secure_api_filters.tests.stubs"
    label = "stubs"
    verbose_name = "Test stubs app"
