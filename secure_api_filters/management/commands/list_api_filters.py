"""Django management command to list the API filters declared on models.

The command supports:
- Listing the filters of every model that declares any.
- Restricting the output to specific models given as ``app_label.ModelName``.
"""

import click
from django.apps import apps
from django.core.management.base import BaseCommand, CommandError

from secure_api_filters.api.filters import REGISTRY_ATTRIBUTE, get_filter_registry


class Command(BaseCommand):
    """Django management command to list the API filters declared on models.

    Example Usage:
        python manage.py list_api_filters
        python manage.py list_api_filters stubs.Student
    """

    help = "List the API filters declared on models."

    def add_arguments(self, parser) -> None:
        """Add command-line arguments to the argument parser.

        Args:
            parser: The Django argument parser instance to configure.
        """
        parser.add_argument(
            "models",
            nargs="*",
            metavar="app_label.ModelName",
            help="Models to list the filters for. Defaults to every model with filters.",
        )

    def handle(self, *args, **options):
        """Print the filters of the requested models.

        Raises:
            CommandError: If a model does not exist or has no filters.
        """
        if options["models"]:
            models = [self._get_model(label) for label in options["models"]]
        else:
            models = [model for model in apps.get_models() if getattr(model, REGISTRY_ATTRIBUTE, None)]

        if not models:
            self.stdout.write("No models declare API filters.")
            return

        for model in models:
            self.stdout.write(click.style(model._meta.label, bold=True))
            for registration in get_filter_registry(model):
                self.stdout.write(f"  {registration.name} ({registration.kind}, {registration.field_type})")

    def _get_model(self, label):
        """Look up a model that declares filters by its label.

        Args:
            label: The model label (e.g., 'stubs.Student').
        """
        try:
            model = apps.get_model(label)
        except (LookupError, ValueError) as e:
            raise CommandError(f"Unknown model '{label}'") from e
        if not getattr(model, REGISTRY_ATTRIBUTE, None):
            raise CommandError(f"Model '{label}' does not declare any API filters")
        return model
