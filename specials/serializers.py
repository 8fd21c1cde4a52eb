from rest_framework import serializers

from menu.serializers import name_field, price_field, description_field, validate_positive_price
from .models import Special


class SpecialSerializer(serializers.ModelSerializer):
    class Meta:
        model = Special
        fields = [
            'id', 'name', 'price', 'description', 'is_active', 'valid_from',
            'valid_to', 'created_at', 'updated_at', 'deleted_at'
        ]
        read_only_fields = fields


class SpecialWriteSerializer(serializers.Serializer):
    """
    Shape validation for a special. Used with ``partial=True`` for updates,
    where defaults do not apply and at least one field is required.
    """
    name = name_field()
    price = price_field()
    description = description_field()
    is_active = serializers.BooleanField(required=False, default=True)
    valid_from = serializers.DateTimeField(required=False, allow_null=True)
    valid_to = serializers.DateTimeField(required=False, allow_null=True)

    def validate_price(self, value):
        return validate_positive_price(value)

    def validate(self, attrs):
        if self.partial and not attrs:
            raise serializers.ValidationError('At least one field must be provided')

        valid_from = attrs.get('valid_from')
        valid_to = attrs.get('valid_to')
        if valid_from and valid_to and valid_from >= valid_to:
            raise serializers.ValidationError({
                'valid_from': 'valid_from must be before valid_to'
            })
        return attrs
