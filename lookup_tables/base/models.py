import re

from django.db import models
from django.db.models.signals import class_prepared
from django.dispatch import receiver

from lookup_tables.base.managers import LookupManager
from lookup_tables.base.utils import normalize_accessor, normalize_key
from lookup_tables.lookups.conf import lookup_settings


class LookupMixin(models.Model):
    """
    Turns a model into a lookup table addressed by a human key.

    Class attributes:
        - key_column: Column holding the human key (default from
          LOOKUP_TABLES['DEFAULT_KEY_COLUMN'], usually 'name')
        - recognized_attributes: Normalized attribute names resolve_attribute()
          accepts, plus 'id'. Computed once by configure().

    Instance behavior:
        - str(row) is the key value
        - row == 'UT' compares the key case-insensitively
        - row == other_row compares model and primary key
        - row.matches(pattern) for filtering by substring or regex

    Usage:
        class Country(LookupMixin):
            key_column = 'code'
            code = models.CharField(max_length=3, unique=True)

        Country.objects.resolve_attribute('us', 'id')

    Note: configure() runs automatically when a concrete subclass is prepared.
    Call it again to switch the key column.
    """
    key_column = None
    recognized_attributes = frozenset()
    lookup_attributes = {}

    objects = LookupManager()

    class Meta:
        abstract = True

    @classmethod
    def configure(cls, key_column=None):
        """
        Mark the model as a lookup table and compute its recognized attributes.

        Args:
            key_column: Column used as the human key

        Raises:
            FieldDoesNotExist: the key column is not a field of the model
        """
        key_column = key_column or cls.key_column or lookup_settings.DEFAULT_KEY_COLUMN
        cls._meta.get_field(key_column)

        attributes = {}
        for field in cls._meta.concrete_fields:
            attributes[normalize_accessor(field.name)] = field.attname
            attributes[normalize_accessor(field.attname)] = field.attname
        attributes.setdefault('id', 'pk')

        cls.key_column = key_column
        cls.lookup_attributes = attributes
        cls.recognized_attributes = frozenset(attributes)
        return cls

    @property
    def lookup_key(self):
        return getattr(self, self.key_column)

    def __str__(self):
        key = self.lookup_key
        return '' if key is None else str(key)

    def __eq__(self, other):
        if isinstance(other, str):
            key = self.lookup_key
            return key is not None and normalize_key(key) == normalize_key(other)
        return super().__eq__(other)

    __hash__ = models.Model.__hash__

    def matches(self, pattern):
        """
        Match the key against a compiled regex or a case-insensitive substring.
        """
        key = self.lookup_key
        if key is None:
            return False
        if isinstance(pattern, re.Pattern):
            return pattern.search(str(key)) is not None
        if isinstance(pattern, str):
            return pattern.lower() in str(key).lower()
        return False


class LookupModel(LookupMixin):
    """
    Standard lookup table shape.

    Fields:
        - name: Human key (max 50 chars, unique)
        - description: Optional long text
        - enabled: Disabled rows are hidden from select boxes and lists
        - sort_order: Display order

    Usage:
        class State(LookupModel):
            class Meta:
                db_table = 'states'

        State.objects.create(name='ut', description='Utah')
    """
    name = models.CharField(
        max_length=50,
        unique=True,
        help_text="Human key used to reference this row"
    )
    description = models.TextField(null=True, blank=True)
    enabled = models.BooleanField(
        default=True,
        help_text="Disabled rows are hidden from select boxes"
    )
    sort_order = models.IntegerField(
        default=0,
        help_text="Display order"
    )

    class Meta:
        abstract = True
        ordering = ['sort_order', 'name']


@receiver(class_prepared)
def configure_lookup_model(sender, **kwargs):
    """Configure every concrete lookup model as soon as Django prepares it."""
    if issubclass(sender, LookupMixin) and not sender._meta.abstract:
        sender.configure()
