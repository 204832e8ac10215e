"""
Form helpers for lookup tables.

    select_from_lookup('addresses.State', field='description', value='ut')

renders a <select name="state"> whose option values are the row keys and
whose labels are the chosen field.
"""
from django import forms
from django.apps import apps

from lookup_tables.lookups.services import LookupService


def get_lookup_model(table):
    """Accept a model class or an 'app_label.ModelName' string."""
    if isinstance(table, str):
        return apps.get_model(table)
    return table


def lookup_choices(table, field='name'):
    """
    (key, label) pairs for a lookup table, ordered for display.

    Args:
        table: Lookup model or 'app_label.ModelName'
        field: Attribute used as the option label
    """
    model = get_lookup_model(table)
    key_column = model.key_column
    choices = []
    for row in LookupService.get_rows(model):
        label = getattr(row, field)
        choices.append((getattr(row, key_column), '' if label is None else label))
    return choices


def select_from_lookup(table, field='name', value=None, **attrs):
    """
    Render an HTML select box listing a lookup table.

    Args:
        table: Lookup model or 'app_label.ModelName'
        field: Attribute used as the option label
        value: Key to preselect
        attrs: Extra HTML attributes; 'name' overrides the default
            select name (the model name)

    Returns:
        SafeString with the rendered <select>
    """
    model = get_lookup_model(table)
    name = attrs.pop('name', model._meta.model_name)
    widget = forms.Select(attrs=attrs, choices=lookup_choices(model, field))
    return widget.render(name, value)


class LookupChoiceField(forms.ModelChoiceField):
    """
    ModelChoiceField for a lookup table, keyed on its key column.

    Usage:
        class AddressForm(forms.Form):
            state = LookupChoiceField(State)
    """

    def __init__(self, model, **kwargs):
        kwargs.setdefault('to_field_name', model.key_column)
        super().__init__(queryset=LookupService.get_rows(model), **kwargs)
