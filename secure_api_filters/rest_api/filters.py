"""Django REST framework integration.

SecureApiFilterBackend narrows the queryset of a view with the API filters
declared on its model, taking the filter values from the query string::

    class StudentListView(ListAPIView):
        queryset = Student.objects.all()
        serializer_class = StudentSerializer
        filter_backends = [SecureApiFilterBackend]
        api_filter_ignored_params = ("expand",)

Filter errors are reported the way REST framework reports request errors:
blank values, unknown filters and invalid values become a 400 response and
forbidden filters a 403 response.
"""

import logging

from django.conf import settings
from rest_framework.exceptions import PermissionDenied, ValidationError
from rest_framework.filters import BaseFilterBackend

from secure_api_filters.api.filters import apply_filters
from secure_api_filters.exceptions import (
    BlankValueError,
    ForbiddenFilterError,
    InvalidFilterError,
    InvalidValueError,
)
from secure_api_filters.settings.common import DEFAULT_IGNORED_PARAMS

logger = logging.getLogger(__name__)


class SecureApiFilterBackend(BaseFilterBackend):
    """Filter backend applying the API filters of the queryset model."""

    def get_ignored_params(self, view) -> set[str]:
        """Collect the query parameters that are never treated as filters.

        Args:
            view: The view being served.

        Returns:
            set[str]: The globally ignored parameters plus the ones listed in
                the view's ``api_filter_ignored_params`` attribute.
        """
        ignored = set(getattr(settings, "SECURE_API_FILTERS_IGNORED_PARAMS", DEFAULT_IGNORED_PARAMS))
        ignored.update(getattr(view, "api_filter_ignored_params", ()))
        return ignored

    def get_filters(self, request, view) -> dict:
        """Extract the requested filters from the query string, keeping their order."""
        ignored = self.get_ignored_params(view)
        return {key: value for key, value in request.query_params.items() if key not in ignored}

    def get_filter_context(self, request, view) -> dict:
        """Build the context forwarded to every filter resolver."""
        return {"current_user": request.user, "request": request, "view": view}

    def filter_queryset(self, request, queryset, view):
        """Apply the requested filters to the queryset.

        Raises:
            ValidationError: If a filter is unknown, blank or has an invalid value.
            PermissionDenied: If the user is not allowed to use a filter.
        """
        try:
            return apply_filters(queryset, self.get_filters(request, view), self.get_filter_context(request, view))
        except ForbiddenFilterError as e:
            logger.info(f"Forbidden filter '{e.filter_name}' requested by {request.user}.")
            raise PermissionDenied(str(e)) from e
        except (BlankValueError, InvalidFilterError, InvalidValueError) as e:
            raise ValidationError({"filters": [str(e)]}) from e
