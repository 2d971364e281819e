"""
Per-model registry of API filters.

Each filterable model owns a FilterRegistry mapping filter names to resolvers.
A resolver is a callable ``(queryset, raw_value, context) -> queryset`` that
validates the raw value, converts it and narrows the queryset. Registries are
populated while models are being defined and are only read afterwards.
"""

import logging
from typing import Callable, Optional

import attr
from django.db.models.functions import Lower
from django.db.models.lookups import Exact

from secure_api_filters.constants.types import DJANGO_FIELD_TYPES, PRIMITIVE_TYPES, TEXT_TYPES
from secure_api_filters.engine.validator import convert_value, validate_field_type, validate_value
from secure_api_filters.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

ATTRIBUTE_FILTER = "attribute"
CUSTOM_FILTER = "custom"


@attr.define(frozen=True)
class FilterRegistration:
    """A named filter and the resolver that applies it.

    Attributes:
        name: The filter name callers use (e.g., 'first_name').
        field_type: The type raw values are validated against.
        resolver: Callable ``(queryset, raw_value, context) -> queryset``.
        kind: Either 'attribute' or 'custom'.
    """

    name: str
    field_type: str
    resolver: Callable = attr.field(repr=False)
    kind: str = ATTRIBUTE_FILTER


def fields_of(model) -> dict[str, str]:
    """Map the filterable concrete fields of a model to their filter type.

    Args:
        model: A Django model class.

    Returns:
        dict[str, str]: Field name to type name. Fields whose type cannot back
            an attribute filter (dates, relations, ...) are left out.
    """
    fields = {}
    for field in model._meta.concrete_fields:
        field_type = DJANGO_FIELD_TYPES.get(field.get_internal_type())
        if field_type is None:
            continue
        fields[field.name] = field_type
    return fields


def _attribute_resolver(field_name: str, field_type: str) -> Callable:
    """Build the resolver for an attribute filter."""

    def resolve(queryset, raw_value, context):  # pylint: disable=unused-argument
        validate_value(field_type, raw_value)
        if field_type in TEXT_TYPES:
            return queryset.filter(Exact(Lower(field_name), str(raw_value).lower()))
        return queryset.filter(**{field_name: convert_value(field_type, raw_value)})

    return resolve


def _custom_resolver(field_type: str, predicate_builder: Callable) -> Callable:
    """Build the resolver for a custom filter."""

    def resolve(queryset, raw_value, context):
        validate_value(field_type, raw_value)
        return predicate_builder(queryset, convert_value(field_type, raw_value), context)

    return resolve


class FilterRegistry:
    """Mapping of filter names to registrations for a single model.

    Registering an existing name replaces the previous registration, whether it
    was an attribute filter or a custom filter.

    Attributes:
        model: The model class the filters apply to.
    """

    def __init__(self, model, registrations: Optional[dict[str, FilterRegistration]] = None):
        self.model = model
        self._registrations: dict[str, FilterRegistration] = dict(registrations or {})

    def __repr__(self):
        return f"<FilterRegistry {self.model.__name__}: {', '.join(self.names())}>"

    def __contains__(self, name) -> bool:
        return str(name) in self._registrations

    def __iter__(self):
        return iter(self._registrations.values())

    def __len__(self) -> int:
        return len(self._registrations)

    def copy_for(self, model) -> "FilterRegistry":
        """Return a registry for a subclass model that starts with these filters."""
        return FilterRegistry(model, self._registrations)

    def names(self) -> list[str]:
        """List the registered filter names in registration order."""
        return list(self._registrations)

    def get(self, name) -> Optional[FilterRegistration]:
        """Return the registration for a filter name, or None."""
        return self._registrations.get(str(name))

    def resolver_for(self, name) -> Optional[Callable]:
        """Return the resolver for a filter name, or None when it is not registered."""
        registration = self.get(name)
        return registration.resolver if registration else None

    def _add(self, registration: FilterRegistration) -> None:
        if registration.name in self._registrations:
            logger.warning(f"Filter '{registration.name}' on {self.model.__name__} is being redefined.")
        self._registrations[registration.name] = registration
        logger.debug(
            f"Registered {registration.kind} filter '{registration.name}' ({registration.field_type}) "
            f"on {self.model.__name__}."
        )

    def register_attribute_filters(self, *names) -> None:
        """Expose model fields as equality filters.

        String and text fields are compared case-insensitively; every other
        field is compared for equality against the converted value.

        Args:
            *names: Field names to expose.

        Raises:
            InvalidArgumentError: If a name is not a field of a supported type.
        """
        fields = fields_of(self.model)
        for name in names:
            name = str(name)
            field_type = fields.get(name)
            if field_type not in PRIMITIVE_TYPES:
                raise InvalidArgumentError(
                    f'"{name}" is not a valid attribute filter. It must have a datatype of bigint, '
                    "boolean, decimal, integer, float, string or text. The custom_filter method may be helpful."
                )
            self._add(
                FilterRegistration(
                    name=name,
                    field_type=field_type,
                    resolver=_attribute_resolver(name, field_type),
                    kind=ATTRIBUTE_FILTER,
                )
            )

    def register_custom_filter(self, name, field_type="string", predicate_builder: Callable = None) -> None:
        """Expose a custom predicate as a filter.

        The predicate builder receives the queryset accumulated so far, the
        value converted to the declared type and the caller context, and must
        return a new queryset. Whatever it raises reaches the caller untouched,
        which is how authorization guards reject a request.

        Args:
            name: The filter name.
            field_type: A primitive type or a custom type name. Defaults to 'string'.
            predicate_builder: Callable ``(queryset, value, context) -> queryset``.

        Raises:
            InvalidArgumentError: If the type is unknown or the builder is not callable.
        """
        type_name = validate_field_type(field_type)
        if not callable(predicate_builder):
            raise InvalidArgumentError(f'The custom filter "{name}" needs a callable predicate builder')
        self._add(
            FilterRegistration(
                name=str(name),
                field_type=type_name,
                resolver=_custom_resolver(type_name, predicate_builder),
                kind=CUSTOM_FILTER,
            )
        )
