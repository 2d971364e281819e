"""
Common settings for secure_api_filters.
"""

DEFAULT_IGNORED_PARAMS = ("page", "page_size", "ordering", "format", "search")


def plugin_settings(settings):
    """
    Configure the default settings of the application.
    Values already present in the Django settings are left untouched.

    Args:
        settings: The Django settings object
    """
    # Dotted path to the module (or object) providing custom filter types.
    # See secure_api_filters/engine/definitions.py.
    if not hasattr(settings, "SECURE_API_FILTERS_DEFINITIONS"):
        settings.SECURE_API_FILTERS_DEFINITIONS = None

    # Query parameters the REST framework filter backend never treats as filters,
    # such as pagination and ordering parameters.
    if not hasattr(settings, "SECURE_API_FILTERS_IGNORED_PARAMS"):
        settings.SECURE_API_FILTERS_IGNORED_PARAMS = DEFAULT_IGNORED_PARAMS
