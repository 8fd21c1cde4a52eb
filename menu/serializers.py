from decimal import Decimal

from rest_framework import serializers

from .models import MenuItem

MAX_PRICE = Decimal('999.99')


def name_field(**kwargs):
    """Shared by menu items and specials: 2-100 characters after trimming"""
    return serializers.CharField(
        min_length=2,
        max_length=100,
        error_messages={
            'min_length': 'Name must be at least 2 characters',
            'max_length': 'Name must be at most 100 characters',
            'blank': 'Name cannot be empty after trimming',
        },
        **kwargs
    )


def price_field(**kwargs):
    """Shared by menu items and specials: positive, at most $999.99"""
    return serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        max_value=MAX_PRICE,
        error_messages={
            'max_value': 'Price must be reasonable (max $999.99)',
            'max_digits': 'Price must be reasonable (max $999.99)',
            'max_whole_digits': 'Price must be reasonable (max $999.99)',
            'max_decimal_places': 'Price must have at most 2 decimal places',
            'invalid': 'Price must be a valid number',
        },
        **kwargs
    )


def description_field(**kwargs):
    """Shared by menu items and specials: 10-500 characters after trimming"""
    return serializers.CharField(
        min_length=10,
        max_length=500,
        error_messages={
            'min_length': 'Description must be at least 10 characters',
            'max_length': 'Description must be at most 500 characters',
            'blank': 'Description cannot be empty after trimming',
        },
        **kwargs
    )


def validate_positive_price(value):
    if value <= 0:
        raise serializers.ValidationError('Price must be a positive number')
    return value


class MenuItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = MenuItem
        fields = ['id', 'name', 'price', 'description', 'created_at', 'updated_at', 'deleted_at']
        read_only_fields = fields


class MenuItemWriteSerializer(serializers.Serializer):
    """
    Shape validation for create (all fields required) and update
    (``partial=True``, at least one field).
    """
    name = name_field()
    price = price_field()
    description = description_field()

    def validate_price(self, value):
        return validate_positive_price(value)

    def validate(self, attrs):
        if self.partial and not attrs:
            raise serializers.ValidationError('At least one field must be provided')
        return attrs


class MenuNameLookupSerializer(serializers.Serializer):
    name = name_field()


class MaxPriceSerializer(serializers.Serializer):
    max_price = serializers.DecimalField(
        max_digits=None,
        decimal_places=None,
        error_messages={'invalid': 'Must be a valid number'},
    )

    def validate_max_price(self, value):
        if value <= 0:
            raise serializers.ValidationError('Must be a positive number')
        return value


class MenuItemDescriptionSerializer(serializers.Serializer):
    description = serializers.CharField(source='describe', read_only=True)
