import logging

from django.apps import apps
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from lookup_tables.base.managers import LookupQuerySet
from lookup_tables.base.utils import normalize_key
from lookup_tables.lookups import registry
from lookup_tables.lookups.conf import lookup_settings

logger = logging.getLogger(__name__)


class LookupService:
    @staticmethod
    def lookup_queryset(model_or_queryset):
        """
        Get a LookupQuerySet for a lookup model or an existing queryset.

        Models whose default manager is not a LookupManager still resolve.
        """
        if isinstance(model_or_queryset, LookupQuerySet):
            return model_or_queryset
        if hasattr(model_or_queryset, 'query'):
            queryset = model_or_queryset
        else:
            queryset = model_or_queryset._default_manager.all()
        if isinstance(queryset, LookupQuerySet):
            return queryset
        return LookupQuerySet(model=queryset.model, query=queryset.query.chain(), using=queryset._db)

    @staticmethod
    def resolve_record(model, raw_key):
        """Row matching the human key, or None."""
        return LookupService.lookup_queryset(model).resolve_record(raw_key)

    @staticmethod
    def resolve_entity(model, raw_key):
        return LookupService.lookup_queryset(model).resolve_entity(raw_key)

    @staticmethod
    def resolve_attribute(model, raw_key, attribute_name):
        """Attribute of the row matching the human key, or None. Raises UnsupportedAccessor."""
        return LookupService.lookup_queryset(model).resolve_attribute(raw_key, attribute_name)

    @staticmethod
    def resolve_or_create(model, raw_key):
        """
        Resolve a human key, implicitly creating the row when it is missing.

        The new row only has its key column set, to the normalized key
        (lower-case, underscores as spaces). It is validated with
        full_clean() and inserted inside a savepoint. When validation or the
        insert fails (e.g. a concurrent request created the same key first),
        the key is read once more unless RETRY_READ_ON_CREATE_FAILURE is off.

        Returns:
            (row, created) - row is None when the key could not be resolved
        """
        record = LookupService.resolve_record(model, raw_key)
        if record is not None:
            return record, False

        if raw_key is None or not lookup_settings.IMPLICIT_CREATE:
            logger.debug(f"No {model.__name__} row for key '{raw_key}'")
            return None, False

        value = normalize_key(raw_key)
        candidate = model(**{model.key_column: value})
        try:
            candidate.full_clean()
            with transaction.atomic():
                candidate.save()
        except ValidationError as e:
            logger.info(f"Implicit create of {model.__name__} '{value}' failed validation: {e.messages}")
        except IntegrityError as e:
            logger.info(f"Implicit create of {model.__name__} '{value}' failed on insert: {e}")
        else:
            logger.info(f"Implicitly created {model.__name__} '{value}' (id={candidate.pk})")
            return candidate, True

        if lookup_settings.RETRY_READ_ON_CREATE_FAILURE:
            return LookupService.resolve_record(model, raw_key), False
        return None, False

    @staticmethod
    def find_or_create(model, raw_key):
        """resolve_or_create() without the created flag."""
        record, _ = LookupService.resolve_or_create(model, raw_key)
        return record

    @staticmethod
    def find_by_lookup_key(referrer, parent, raw_key):
        """Referrer rows whose foreign key to ``parent`` matches the human key."""
        return referrer._default_manager.all().find_by_lookup_key(parent, raw_key)

    @staticmethod
    def get_lookup_model(app_label, model_name):
        """
        Get a lookup model by app label and model name.

        Returns:
            The model, or None when it does not exist or is not a lookup table
        """
        try:
            model = apps.get_model(app_label, model_name)
        except LookupError:
            return None
        if not registry.is_lookup_model(model):
            return None
        return model

    @staticmethod
    def get_rows(model, filters=None):
        """
        Get rows for select boxes and list endpoints.

        Only enabled rows are returned when LIST_ONLY_ENABLED is set.
        """
        queryset = LookupService.lookup_queryset(model)
        if lookup_settings.LIST_ONLY_ENABLED:
            queryset = queryset.enabled()
        if filters:
            queryset = queryset.filter_by_search_params(filters)
        return queryset.ordered()
