from django.db import models

from lookup_tables.base import LookupMixin, LookupModel, LookupReferrerManager
from lookup_tables.lookups.fields import LookupForeignKey


class State(LookupModel):
    """
    States keyed by abbreviation.

    Examples:
    - name='ut', description='Utah'
    - name='ga', description='Georgia'
    """

    class Meta(LookupModel.Meta):
        db_table = 'states'


class MessageStatus(LookupModel):
    """Delivery status of a message (pending, sent, failed)."""

    class Meta(LookupModel.Meta):
        db_table = 'message_statuses'
        verbose_name_plural = 'message statuses'


class Country(LookupMixin):
    """
    Countries keyed by ISO code instead of name.
    """
    key_column = 'code'

    code = models.CharField(max_length=3, unique=True)
    name = models.CharField(max_length=100, blank=True)

    class Meta:
        db_table = 'countries'
        verbose_name_plural = 'countries'


class Region(models.Model):
    """Plain reference table; not a lookup table."""
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        db_table = 'regions'

    def __str__(self):
        return self.name


class Address(models.Model):
    street = models.CharField(max_length=200, blank=True)
    zip = models.CharField(max_length=10, blank=True)

    state = LookupForeignKey(
        State,
        null=True,
        blank=True,
        related_name='addresses'
    )
    country = LookupForeignKey(
        Country,
        null=True,
        blank=True,
        related_name='addresses'
    )
    # LookupForeignKey to a non-lookup model behaves like a ForeignKey
    region = LookupForeignKey(
        Region,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='addresses'
    )

    objects = LookupReferrerManager()

    class Meta:
        db_table = 'addresses'
        ordering = ['id']

    def __str__(self):
        return f"{self.street} {self.state or ''} {self.zip}".strip()


class Message(models.Model):
    body = models.TextField(blank=True)
    message_status = LookupForeignKey(
        'MessageStatus',
        related_name='messages'
    )

    objects = LookupReferrerManager()

    class Meta:
        db_table = 'messages'
        ordering = ['id']


class Shipment(models.Model):
    """Referrer whose lookup foreign key stores the country code, not its id."""
    reference = models.CharField(max_length=50, blank=True)
    country = LookupForeignKey(
        Country,
        to_field='code',
        null=True,
        blank=True,
        related_name='shipments'
    )

    objects = LookupReferrerManager()

    class Meta:
        db_table = 'shipments'
        ordering = ['id']
