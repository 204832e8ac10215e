"""
Lookup Foreign Key

A ForeignKey that accepts a human key wherever it accepts a row:

    class Address(models.Model):
        state = LookupForeignKey(State, null=True)

    address = Address(state='UT')
    address.state = 'ga'    # "ga" is created in State when missing

Declaring the field is what registers the lookup relationship; plain
ForeignKey fields are never intercepted.
"""
from django.db import models
from django.db.models.fields.related_descriptors import ForwardManyToOneDescriptor

from lookup_tables.lookups import registry


class LookupForwardDescriptor(ForwardManyToOneDescriptor):
    """
    Forward accessor that resolves string values before assignment.

    Per assignment:
        1. Strings are matched to the referrer's registered lookup model
        2. The row is resolved, or implicitly created when missing
        3. The resolved row is handed to Django's normal assignment; when
           nothing could be resolved the raw string is, and Django raises
           its usual ValueError
    Rows and None are passed through untouched.
    """

    def __set__(self, instance, value):
        if isinstance(value, str):
            value = self.resolve_lookup_value(instance, value)
        super().__set__(instance, value)

    def resolve_lookup_value(self, instance, value):
        from lookup_tables.lookups.services import LookupService

        model = registry.lookup_model_for(type(instance), self.field.related_model)
        if model is None:
            return value

        record = LookupService.find_or_create(model, value)
        return value if record is None else record


class LookupForeignKey(models.ForeignKey):
    """
    ForeignKey to a lookup table.

    Defaults on_delete to PROTECT: lookup rows are shared reference data.
    """
    forward_related_accessor_class = LookupForwardDescriptor

    def __init__(self, to, on_delete=models.PROTECT, **kwargs):
        super().__init__(to, on_delete, **kwargs)

    def contribute_to_related_class(self, cls, related):
        super().contribute_to_related_class(cls, related)
        registry.register_lookup_relationship(self.model, cls, self.name)
