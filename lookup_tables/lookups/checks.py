"""
System checks for lookup tables.

The implicit create path relies on the storage layer to reject duplicate
keys, so every lookup model's key column should carry a unique constraint.
"""
from django.apps import apps
from django.core import checks
from django.db.models import UniqueConstraint

from lookup_tables.lookups import registry


def key_column_is_unique(model):
    field = model._meta.get_field(model.key_column)
    if field.unique:
        return True
    if any(tuple(fields) == (field.name,) for fields in model._meta.unique_together):
        return True
    return any(
        isinstance(constraint, UniqueConstraint)
        and tuple(constraint.fields) == (field.name,)
        and constraint.condition is None
        for constraint in model._meta.constraints
    )


def check_lookup_model(model):
    if not registry.is_lookup_model(model) or key_column_is_unique(model):
        return []
    return [
        checks.Warning(
            f"Key column '{model.key_column}' of lookup table {model._meta.label} is not unique.",
            hint="Add unique=True so concurrent implicit creates cannot insert duplicate keys.",
            obj=model,
            id='lookups.W001',
        )
    ]


@checks.register(checks.Tags.models)
def check_lookup_key_columns(app_configs=None, **kwargs):
    if app_configs is None:
        models = apps.get_models()
    else:
        models = [model for app_config in app_configs for model in app_config.get_models()]

    errors = []
    for model in models:
        errors.extend(check_lookup_model(model))
    return errors
