"""Model and queryset mixins exposing API filters.

Models inherit from FilterableModel and list the fields callers may filter on
in ``API_FILTERS``. Custom filters are declared after the class body::

    class Student(FilterableModel):
        first_name = models.CharField(max_length=100)
        gpa = models.FloatField()

        API_FILTERS = ("first_name", "gpa")


    @Student.custom_filter("at_risk", FieldType.BOOLEAN)
    def at_risk(queryset, value, context):
        return queryset.filter(gpa__lt=2.5) if value else queryset.filter(gpa__gte=2.5)


    Student.objects.filter(gpa__gt=1).api_filter({"first_name": "john", "at_risk": "false"})
"""

from typing import Callable, ClassVar, Optional

from django.db import models
from django.db.models.signals import class_prepared
from django.dispatch import receiver

from secure_api_filters.api.filters import (
    apply_filters,
    declare_attribute_filters,
    declare_custom_filter,
    get_filter_registry,
)
from secure_api_filters.engine.registry import FilterRegistry


class FilterableQuerySet(models.QuerySet):
    """QuerySet that can be narrowed with the API filters of its model."""

    def api_filter(self, filters=None, context=None):
        """Apply caller supplied filters to this queryset.

        See ``secure_api_filters.api.filters.apply_filters``.
        """
        return apply_filters(self, filters, context)


class FilterableModel(models.Model):
    """Abstract model that owns a registry of API filters.

    Subclasses get their own registry when they're defined, seeded with the
    filters of their parent model, if any.
    """

    API_FILTERS: ClassVar[tuple] = ()

    objects = FilterableQuerySet.as_manager()

    class Meta:
        abstract = True

    def __init_subclass__(cls, **kwargs):
        """Give every subclass its own filter registry."""
        super().__init_subclass__(**kwargs)
        get_filter_registry(cls)

    @classmethod
    def get_filter_registry(cls) -> FilterRegistry:
        """Return the filter registry of this model."""
        return get_filter_registry(cls)

    @classmethod
    def filters(cls, *names) -> None:
        """Expose model fields as equality filters."""
        declare_attribute_filters(cls, *names)

    @classmethod
    def custom_filter(cls, name, field_type="string", predicate_builder: Optional[Callable] = None):
        """Expose a custom predicate as a filter. Usable as a decorator."""
        return declare_custom_filter(cls, name, field_type, predicate_builder)

    @classmethod
    def api_filter(cls, filters=None, context=None):
        """Apply caller supplied filters to all the records of this model."""
        return apply_filters(cls._default_manager.all(), filters, context)


@receiver(class_prepared)
def declare_api_filters(sender, **kwargs):  # pylint: disable=unused-argument
    """Declare the attribute filters listed in ``API_FILTERS`` once the model fields are ready."""
    if not issubclass(sender, FilterableModel) or sender._meta.abstract:
        return
    names = sender.__dict__.get("API_FILTERS")
    if names:
        declare_attribute_filters(sender, *names)
