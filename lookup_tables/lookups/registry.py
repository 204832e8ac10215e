"""
Lookup Relationship Registry

Tracks, per referring model, which of its foreign keys point at lookup
tables. Entries are added by LookupForeignKey once Django has resolved the
field's target model, so string references ('addresses.State') work too.

Usage:
    from lookup_tables.lookups import registry

    registry.lookup_models(Address)            # [State, Country]
    registry.find_relationship(Address, 'state')
"""
import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

LookupRelationship = namedtuple('LookupRelationship', ['field_name', 'model'])

# referrer model -> [LookupRelationship, ...]
_relationships = {}


def is_lookup_model(model):
    """A model is a lookup table when it exposes a configured key column."""
    return isinstance(model, type) and getattr(model, 'key_column', None) is not None


def register_lookup_relationship(referrer, parent, field_name=None):
    """
    Record that ``referrer`` has a foreign key (``field_name``) to ``parent``.

    Only parents that are lookup tables are recorded. Any error raised while
    inspecting the parent is logged and treated as "not a lookup
    relationship" so that declaring the field never breaks model loading.

    Returns:
        True when the relationship was registered
    """
    try:
        if not is_lookup_model(parent):
            return False

        entries = _relationships.setdefault(referrer, [])
        relationship = LookupRelationship(field_name or parent._meta.model_name, parent)
        if relationship not in entries:
            entries.append(relationship)
            logger.debug(
                f"Registered lookup relationship {referrer.__name__}.{relationship.field_name} "
                f"-> {parent.__name__}"
            )
        return True
    except Exception as e:
        parent_name = getattr(parent, '__name__', repr(parent))
        logger.warning(
            f"Unable to register lookup relationship to '{parent_name}' "
            f"on {getattr(referrer, '__name__', referrer)}: {e}"
        )
        return False


def lookup_relationships(referrer):
    """All lookup relationships of ``referrer``, including inherited ones."""
    found = []
    for klass in getattr(referrer, '__mro__', (referrer,)):
        for relationship in _relationships.get(klass, ()):
            if relationship not in found:
                found.append(relationship)
    return found


def lookup_models(referrer):
    """Lookup models referenced by ``referrer``, in declaration order."""
    models = []
    for relationship in lookup_relationships(referrer):
        if relationship.model not in models:
            models.append(relationship.model)
    return models


def lookup_model_for(referrer, target):
    """
    Find the registered lookup model whose table is ``target``'s table.

    Returns:
        The lookup model, or None when ``target`` is not one of the
        referrer's lookup tables
    """
    table = target._meta.db_table
    for model in lookup_models(referrer):
        if model._meta.db_table == table:
            return model
    return None


def find_relationship(referrer, name):
    """
    Match a relationship by name, case-insensitive.

    ``name`` may be the foreign key field name ('message_status') or the
    parent's singular model name ('messagestatus').

    Returns:
        LookupRelationship or None
    """
    name = str(name).lower()
    for relationship in lookup_relationships(referrer):
        model_name = relationship.model._meta.model_name
        if name in (relationship.field_name.lower(), model_name) or name.replace('_', '') == model_name:
            return relationship
    return None
