"""
Lookup Managers Module

Provides managers and querysets for lookup tables and for the models that
reference them.

**Architecture:**
- LookupQuerySet: Key resolution (resolve_record/resolve_attribute/resolve_entity)
  and listing helpers (enabled/ordered/matching)
- LookupReferrerQuerySet: find_by_lookup_key() / find_by() on referring models

Exports:
    QuerySets:
        - LookupQuerySet
        - LookupReferrerQuerySet

    Managers:
        - LookupManager: For LookupMixin models
        - LookupReferrerManager: For models declaring LookupForeignKey fields

Usage:
    from lookup_tables.base import LookupModel
    from lookup_tables.base.managers import LookupReferrerManager
    from lookup_tables.lookups.fields import LookupForeignKey

    class State(LookupModel):
        pass

    class Address(models.Model):
        state = LookupForeignKey(State)
        objects = LookupReferrerManager()

    State.objects.resolve_attribute('UT', 'description')
    Address.objects.find_by_state('ut')
"""
from functools import partial

from django.db import models
from django.db.models import Q

from lookup_tables.base.utils import normalize_accessor, normalize_key
from lookup_tables.lookups import registry
from lookup_tables.lookups.exceptions import UnsupportedAccessor


def _has_field(model, name):
    return any(field.name == name for field in model._meta.concrete_fields)


class LookupQuerySet(models.QuerySet):
    """
    QuerySet for lookup tables.

    Resolution methods never raise for a missing row; they return None.
    They respect any filtering already applied to the queryset, so
    State.objects.enabled().resolve_record('ut') ignores disabled rows.
    """

    def enabled(self):
        """Return only enabled rows (no-op for tables without 'enabled')."""
        if _has_field(self.model, 'enabled'):
            return self.filter(enabled=True)
        return self

    def ordered(self):
        """Order by sort_order (when present), then the key column."""
        ordering = []
        if _has_field(self.model, 'sort_order'):
            ordering.append('sort_order')
        ordering.append(self.model.key_column)
        return self.order_by(*ordering)

    def matching(self, text):
        """Case-insensitive contains match on the key column."""
        return self.filter(**{f'{self.model.key_column}__icontains': text})

    def filter_by_search_params(self, query_params):
        """
        Apply standard list filters from query parameters.

        Args:
            query_params: QueryDict or dict with optional keys:
                - name: Exact key match (case-insensitive, normalized)
                - search: Contains match across the key column and description
                - enabled: 'true'/'false' filter on the enabled flag

        Returns:
            Filtered QuerySet
        """
        queryset = self
        key_column = self.model.key_column

        name = query_params.get('name')
        if name:
            queryset = queryset.filter(**{f'{key_column}__iexact': normalize_key(name)})

        search = query_params.get('search')
        if search:
            condition = Q(**{f'{key_column}__icontains': search})
            if _has_field(self.model, 'description'):
                condition |= Q(description__icontains=search)
            queryset = queryset.filter(condition)

        enabled = query_params.get('enabled')
        if enabled and _has_field(self.model, 'enabled'):
            queryset = queryset.filter(enabled=str(enabled).lower() in ('1', 'true', 'yes'))

        return queryset

    def resolve_record(self, raw_key):
        """
        Find the row whose key column matches ``raw_key``.

        The key is normalized (lower-cased, underscores to spaces) and
        compared case-insensitively.

        Returns:
            The row, or None when no row matches
        """
        if raw_key is None:
            return None
        value = normalize_key(raw_key)
        return (
            self.filter(**{f'{self.model.key_column}__iexact': value})
            .order_by('pk')
            .first()
        )

    def resolve_entity(self, raw_key):
        """Alias of resolve_record(); the 'object' accessor."""
        return self.resolve_record(raw_key)

    def resolve_attribute(self, raw_key, attribute_name):
        """
        Read one attribute of the row matching ``raw_key``.

        Args:
            raw_key: Human key, e.g. 'UT'
            attribute_name: 'id', 'object', or any column of the table

        Returns:
            The attribute value, or None when no row matches

        Raises:
            UnsupportedAccessor: attribute_name is not a column of the table
        """
        attribute = normalize_accessor(attribute_name)
        if attribute == 'object':
            return self.resolve_entity(raw_key)

        attributes = self.model.lookup_attributes
        if attribute not in attributes:
            raise UnsupportedAccessor(self.model, attribute_name)

        record = self.resolve_record(raw_key)
        if record is None:
            return None
        return getattr(record, attributes[attribute])

    def resolve(self, raw_key, field='object'):
        """Generic entry point: resolve_attribute(raw_key, field)."""
        return self.resolve_attribute(raw_key, field)


class LookupManager(models.Manager.from_queryset(LookupQuerySet)):
    """
    Manager for LookupMixin models.

    Usage:
        State.objects.resolve_record('UT')
        State.objects.resolve_attribute('UT', 'id')
        State.objects.enabled().ordered()
    """
    pass


class LookupReferrerQuerySet(models.QuerySet):
    """
    QuerySet for models with LookupForeignKey fields.

    Methods:
        - find_by_lookup_key(parent, raw_key): Rows pointing at the parent row
        - find_by(relationship_name, raw_key): Same, addressed by name
    """

    def _relationship_for(self, parent):
        if isinstance(parent, str):
            relationship = registry.find_relationship(self.model, parent)
            if relationship is None:
                raise UnsupportedAccessor(self.model, f'find_by_{parent}')
            return relationship

        for relationship in registry.lookup_relationships(self.model):
            if relationship.model._meta.db_table == parent._meta.db_table:
                return relationship
        raise UnsupportedAccessor(self.model, f'find_by_{parent._meta.model_name}')

    def find_by_lookup_key(self, parent, raw_key):
        """
        Filter on the foreign key to ``parent`` using a human key.

        Args:
            parent: Lookup model class or relationship name ('state')
            raw_key: Human key of the parent row, e.g. 'UT'

        Returns:
            QuerySet of matching rows; empty when the key does not resolve
        """
        # imported here: services imports this module
        from lookup_tables.lookups.services import LookupService

        relationship = self._relationship_for(parent)
        key = normalize_accessor(raw_key)
        record = LookupService.resolve_record(relationship.model, key)
        if record is None:
            return self.none()

        # filter on the relation so to_field foreign keys compare the right column
        return self.filter(**{relationship.field_name: record})

    def find_by(self, relationship_name, raw_key):
        """find_by_lookup_key() addressed by relationship name."""
        return self.find_by_lookup_key(relationship_name, raw_key)


class LookupReferrerManager(models.Manager.from_queryset(LookupReferrerQuerySet)):
    """
    Manager for models that reference lookup tables.

    Besides find_by()/find_by_lookup_key(), exposes one find_by_<name>
    accessor per lookup relationship:

        Address.objects.find_by_state('UT')
        Message.objects.find_by_message_status('pending')

    Names that are not lookup relationships raise AttributeError as usual.
    """

    def __getattr__(self, name):
        if name.startswith('find_by_'):
            model = self.__dict__.get('model')
            relationship_name = name[len('find_by_'):]
            if model is not None and registry.find_relationship(model, relationship_name):
                return partial(self.get_queryset().find_by, relationship_name)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
