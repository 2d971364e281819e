"""Exceptions raised while declaring or applying API filters.

The host application is responsible for translating these into its own
external representation (e.g. HTTP status codes). See
``secure_api_filters.rest_api.filters`` for the Django REST framework mapping.
"""

__all__ = [
    "SecureApiFiltersError",
    "InvalidArgumentError",
    "BlankValueError",
    "InvalidFilterError",
    "InvalidValueError",
    "ForbiddenFilterError",
]


class SecureApiFiltersError(Exception):
    """Base class for all secure API filter errors."""


class InvalidArgumentError(SecureApiFiltersError, ValueError):
    """Malformed call shape or filter declaration.

    Raised when the filters argument is not a mapping, when an attribute filter
    names an unknown or unsupported field, or when a custom filter names a type
    that is neither primitive nor provided by the definitions module.
    """


class BlankValueError(SecureApiFiltersError):
    """A filter was requested with a blank value."""

    def __init__(self, filter_name=None):
        self.filter_name = filter_name
        if filter_name is None:
            message = "Filter values must not be blank."
        else:
            message = f'The value for filter "{filter_name}" must not be blank.'
        super().__init__(message)


class InvalidFilterError(SecureApiFiltersError):
    """The requested filter name has no registered resolver."""

    def __init__(self, filter_name):
        self.filter_name = filter_name
        super().__init__(f'"{filter_name}" is not a valid filter.')


class InvalidValueError(SecureApiFiltersError):
    """A filter value failed validation against its declared type."""

    def __init__(self, value, field_type=None):
        self.value = value
        self.field_type = field_type
        if field_type is None:
            message = f'"{value}" is not a valid filter value.'
        else:
            message = f'"{value}" is not a valid {field_type} value.'
        super().__init__(message)


class ForbiddenFilterError(SecureApiFiltersError):
    """The caller is not allowed to use the requested filter.

    Predicate builders raise this from their own authorization checks; the
    resolution engine propagates it untouched.
    """

    def __init__(self, filter_name):
        self.filter_name = filter_name
        super().__init__(f'You are not allowed to use the "{filter_name}" filter.')
