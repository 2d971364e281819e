"""
Test settings for secure_api_filters.
"""

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": "default.db",
        "USER": "",
        "PASSWORD": "",
        "HOST": "",
        "PORT": "",
    }
}

INSTALLED_APPS = (
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "rest_framework",
    "secure_api_filters.apps.SecureApiFiltersConfig",
    "secure_api_filters.tests.stubs.apps.StubsConfig",
)

SECRET_KEY = "test-secret-key"

USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

# Custom filter types used by the stub models
SECURE_API_FILTERS_DEFINITIONS = "secure_api_filters.tests.stubs.definitions"
