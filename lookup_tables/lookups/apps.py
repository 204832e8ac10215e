from django.apps import AppConfig


class LookupsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'lookup_tables.lookups'
    label = 'lookups'
    verbose_name = 'Lookup Tables'

    def ready(self):
        """Register system checks for lookup models."""
        from . import checks  # noqa: F401
