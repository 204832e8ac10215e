"""
Lookup Tables Base Module

Provides the model mixins and managers that lookup tables and their
referrers are built from.

Exports:
    Mixins & Models:
        - LookupMixin: Human-key resolution, equality and display for any model
        - LookupModel: LookupMixin with the standard name/description/enabled/sort_order columns

    Managers & QuerySets:
        - LookupQuerySet / LookupManager: resolve_record(), resolve_attribute(), resolve_entity()
        - LookupReferrerQuerySet / LookupReferrerManager: find_by_lookup_key(), find_by()

Usage Examples:

    from lookup_tables.base import LookupModel, LookupReferrerManager
    from lookup_tables.lookups.fields import LookupForeignKey

    class State(LookupModel):
        pass

    class Address(models.Model):
        state = LookupForeignKey(State, null=True)
        objects = LookupReferrerManager()
"""

from lookup_tables.base.models import (
    LookupMixin,
    LookupModel,
)

from lookup_tables.base.managers import (
    LookupQuerySet,
    LookupManager,
    LookupReferrerQuerySet,
    LookupReferrerManager,
)

__all__ = [
    # Mixins & Models
    'LookupMixin',
    'LookupModel',

    # Managers & QuerySets
    'LookupQuerySet',
    'LookupManager',
    'LookupReferrerQuerySet',
    'LookupReferrerManager',
]
