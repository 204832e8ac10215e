from rest_framework import serializers

from .services import LookupService


class LookupRelatedField(serializers.RelatedField):
    """
    Serializer field for a LookupForeignKey that reads and writes human keys.

    Usage:
        class AddressSerializer(serializers.ModelSerializer):
            state = LookupRelatedField(queryset=State.objects.all())

    Incoming keys are resolved like an attribute assignment: missing rows are
    implicitly created unless create=False.
    """
    default_error_messages = {
        'does_not_exist': 'No lookup value matches "{value}".',
        'incorrect_type': 'Incorrect type. Expected a key string, received {data_type}.',
    }

    def __init__(self, create=True, **kwargs):
        self.create = create
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if not isinstance(data, (str, int)) or isinstance(data, bool):
            self.fail('incorrect_type', data_type=type(data).__name__)

        queryset = self.get_queryset()
        record = LookupService.resolve_record(queryset, str(data))
        if record is None and self.create:
            # Created or re-read rows must still satisfy the queryset's filters
            candidate = LookupService.find_or_create(queryset.model, str(data))
            if candidate is not None and queryset.filter(pk=candidate.pk).exists():
                record = candidate

        if record is None:
            self.fail('does_not_exist', value=data)
        return record

    def to_representation(self, value):
        return str(value)


class LookupRowSerializer(serializers.ModelSerializer):
    """Base serializer for lookup rows; see lookup_row_serializer()."""

    key = serializers.SerializerMethodField()

    def get_key(self, obj):
        return obj.lookup_key


def lookup_row_serializer(model):
    """Build a LookupRowSerializer subclass for a lookup model."""
    meta = type('Meta', (), {'model': model, 'fields': '__all__'})
    return type(f'{model.__name__}LookupSerializer', (LookupRowSerializer,), {'Meta': meta})


class ResolveKeySerializer(serializers.Serializer):
    key = serializers.CharField(max_length=255, trim_whitespace=True)
