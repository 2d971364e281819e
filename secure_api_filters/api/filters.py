"""Filter resolution for querysets.

``apply_filters`` folds every requested filter onto the queryset, left to
right, in the order of the filters mapping. Each resolver receives the
queryset produced by the previous one, so a filter can rely on joins or
annotations introduced by an earlier filter. Django querysets are never
modified in place: every step returns a new queryset and the one passed in by
the caller stays as it was.
"""

import logging
from collections.abc import Mapping
from typing import Callable, Optional

from secure_api_filters.engine.registry import FilterRegistry
from secure_api_filters.engine.validator import is_blank
from secure_api_filters.exceptions import BlankValueError, InvalidArgumentError, InvalidFilterError

__all__ = [
    "apply_filters",
    "get_filter_registry",
    "declare_attribute_filters",
    "declare_custom_filter",
]

logger = logging.getLogger(__name__)

REGISTRY_ATTRIBUTE = "_api_filter_registry"


def get_filter_registry(model) -> FilterRegistry:
    """Return the filter registry of a model, creating it on first use.

    A model that inherits from another filterable model starts with a copy of
    its parent's filters.

    Args:
        model: A Django model class.

    Returns:
        FilterRegistry: The registry owned by ``model``.
    """
    registry = model.__dict__.get(REGISTRY_ATTRIBUTE)
    if registry is None:
        inherited = getattr(model, REGISTRY_ATTRIBUTE, None)
        registry = inherited.copy_for(model) if inherited is not None else FilterRegistry(model)
        setattr(model, REGISTRY_ATTRIBUTE, registry)
    return registry


def declare_attribute_filters(model, *names) -> None:
    """Expose model fields as equality filters.

    Args:
        model: A Django model class.
        *names: Names of bigint, boolean, decimal, integer, float, string or text fields.

    Raises:
        InvalidArgumentError: If a name is not a field of a supported type.
    """
    get_filter_registry(model).register_attribute_filters(*names)


def declare_custom_filter(model, name, field_type="string", predicate_builder: Optional[Callable] = None):
    """Expose a custom predicate as a filter.

    Can be called directly or used as a decorator when the predicate builder
    is omitted::

        @declare_custom_filter(Student, "at_risk", FieldType.BOOLEAN)
        def at_risk(queryset, value, context):
            return queryset.filter(gpa__lt=2.5) if value else queryset.filter(gpa__gte=2.5)

    Args:
        model: A Django model class.
        name: The filter name.
        field_type: A primitive type or a custom type name. Defaults to 'string'.
        predicate_builder: Callable ``(queryset, value, context) -> queryset``.

    Returns:
        The predicate builder, or a decorator when it was omitted.

    Raises:
        InvalidArgumentError: If the type is neither primitive nor custom.
    """
    registry = get_filter_registry(model)

    if predicate_builder is None:

        def _decorator(func):
            registry.register_custom_filter(name, field_type, func)
            return func

        return _decorator

    registry.register_custom_filter(name, field_type, predicate_builder)
    return predicate_builder


def apply_filters(queryset, filters=None, context=None, registry: Optional[FilterRegistry] = None):
    """Narrow a queryset with caller supplied filters.

    Args:
        queryset: The queryset to start from. It is left untouched.
        filters: Mapping of filter name to raw value (e.g., ``request.GET``).
            None or an empty mapping returns all records of ``queryset``.
        context: Arbitrary data forwarded to every resolver (e.g., the current
            user). Defaults to an empty dict.
        registry: The registry to resolve names against. Defaults to the
            registry of ``queryset.model``.

    Returns:
        QuerySet: A new queryset with every filter applied.

    Raises:
        InvalidArgumentError: If ``filters`` is not a mapping.
        BlankValueError: If a filter value is blank.
        InvalidFilterError: If a filter name is not registered.
        InvalidValueError: If a value does not match the filter type.

    Any exception raised by a custom predicate builder (e.g.,
    ForbiddenFilterError) is propagated as is.
    """
    if filters is None or (isinstance(filters, Mapping) and not filters):
        return queryset.all()

    if not isinstance(filters, Mapping):
        raise InvalidArgumentError("The filters argument must be a mapping or None")

    if registry is None:
        registry = get_filter_registry(queryset.model)
    if context is None:
        context = {}

    results = queryset
    for key, value in filters.items():
        name = str(key)
        if is_blank(value):
            raise BlankValueError(name)

        resolver = registry.resolver_for(name)
        if resolver is None:
            logger.info(f"Rejected unknown filter '{name}' on {registry.model.__name__}.")
            raise InvalidFilterError(name)

        logger.debug(f"Applying filter '{name}' on {registry.model.__name__}.")
        results = resolver(results, value, context)
    return results
