from rest_framework import serializers
from rest_framework.fields import empty

from .models import StoreHours, WEEKDAYS
from .validators import MAX_LENGTH, validate_hours_format


class HoursField(serializers.CharField):
    """
    Hours of one weekday. The length limit applies to the value as sent,
    the format check and the stored value use the trimmed text.
    """

    def __init__(self, **kwargs):
        kwargs['trim_whitespace'] = False
        super().__init__(**kwargs)

    def run_validation(self, data=empty):
        if isinstance(data, str) and not data.strip():
            self.fail('blank')
        return super().run_validation(data).strip()


def day_field():
    return HoursField(
        required=False,
        max_length=MAX_LENGTH,
        validators=[validate_hours_format],
        error_messages={
            'max_length': f'Hours must be at most {MAX_LENGTH} characters',
            'blank': 'Hours cannot be empty after trimming',
        },
    )


class StoreHoursSerializer(serializers.ModelSerializer):
    class Meta:
        model = StoreHours
        fields = ['id'] + WEEKDAYS
        read_only_fields = fields


class StoreHoursUpdateSerializer(serializers.Serializer):
    monday = day_field()
    tuesday = day_field()
    wednesday = day_field()
    thursday = day_field()
    friday = day_field()
    saturday = day_field()
    sunday = day_field()

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError('At least one day must be provided')
        return attrs
