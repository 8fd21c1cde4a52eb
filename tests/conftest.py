from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from menu.models import MenuItem
from specials.services import specials


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_menu_item(db):
    """Insert a menu item straight into the store, skipping the API"""
    def _make(**overrides):
        fields = {
            'name': 'Test Coffee',
            'price': Decimal('2.99'),
            'description': 'A delicious test coffee item',
        }
        fields.update(overrides)
        return MenuItem.objects.create(**fields)
    return _make


@pytest.fixture
def make_deleted_menu_item(make_menu_item):
    def _make(**overrides):
        overrides.setdefault('deleted_at', timezone.now())
        return make_menu_item(**overrides)
    return _make


@pytest.fixture
def make_special(db):
    """Create a special through the lifecycle so the single-active rule holds"""
    def _make(**overrides):
        fields = {
            'name': 'Test Special',
            'price': Decimal('4.99'),
            'description': 'A delicious test special item',
            'is_active': False,
        }
        fields.update(overrides)
        return specials.create(**fields)
    return _make
