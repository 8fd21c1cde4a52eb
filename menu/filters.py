import django_filters

from .models import MenuItem


class MenuItemFilter(django_filters.FilterSet):
    max_price = django_filters.NumberFilter(field_name='price', lookup_expr='lte')
    min_price = django_filters.NumberFilter(field_name='price', lookup_expr='gte')
    name = django_filters.CharFilter(field_name='name', lookup_expr='iexact')

    class Meta:
        model = MenuItem
        fields = ['max_price', 'min_price', 'name']
