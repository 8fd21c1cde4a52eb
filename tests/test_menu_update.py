"""
Partial updates of menu items.
"""
from decimal import Decimal

import pytest

from menu.models import MenuItem

pytestmark = pytest.mark.django_db


def test_update_changes_only_given_fields(api_client, make_menu_item):
    item = make_menu_item(name='Espresso', price='2.50', description='Strong and bold coffee shot')

    response = api_client.patch(f'/menu/{item.pk}/', {'price': 2.75}, format='json')

    assert response.status_code == 200
    item.refresh_from_db()
    assert item.price == Decimal('2.75')
    assert item.name == 'Espresso'
    assert item.description == 'Strong and bold coffee shot'


def test_update_moves_updated_at_but_not_created_at(api_client, make_menu_item):
    item = make_menu_item()
    created_at, updated_at = item.created_at, item.updated_at

    api_client.patch(f'/menu/{item.pk}/', {'description': 'Now with oat milk by default'}, format='json')

    item.refresh_from_db()
    assert item.created_at == created_at
    assert item.updated_at > updated_at


def test_rename_to_a_taken_name_is_a_conflict(api_client, make_menu_item):
    make_menu_item(name='Espresso')
    latte = make_menu_item(name='Latte')

    response = api_client.patch(f'/menu/{latte.pk}/', {'name': 'espresso'}, format='json')

    assert response.status_code == 409
    assert response.json()['message'] == 'Coffee with this name already exists'
    latte.refresh_from_db()
    assert latte.name == 'Latte'


def test_rename_to_own_name_in_another_case(api_client, make_menu_item):
    item = make_menu_item(name='Espresso')

    response = api_client.patch(f'/menu/{item.pk}/', {'name': 'ESPRESSO'}, format='json')

    assert response.status_code == 200
    assert response.json()['name'] == 'ESPRESSO'


def test_rename_to_name_of_soft_deleted_item(api_client, make_menu_item, make_deleted_menu_item):
    make_deleted_menu_item(name='Espresso')
    latte = make_menu_item(name='Latte')

    response = api_client.patch(f'/menu/{latte.pk}/', {'name': 'Espresso'}, format='json')

    assert response.status_code == 200


def test_update_of_soft_deleted_item_is_not_found(api_client, make_deleted_menu_item):
    item = make_deleted_menu_item(name='Espresso')

    response = api_client.patch(f'/menu/{item.pk}/', {'price': 9}, format='json')

    assert response.status_code == 404
    item.refresh_from_db()
    assert item.price == Decimal('2.99')


def test_update_needs_at_least_one_field(api_client, make_menu_item):
    item = make_menu_item()

    response = api_client.patch(f'/menu/{item.pk}/', {}, format='json')

    assert response.status_code == 400
    assert response.json()['details'] == {'non_field_errors': ['At least one field must be provided']}


def test_update_validates_shape(api_client, make_menu_item):
    item = make_menu_item()

    response = api_client.patch(f'/menu/{item.pk}/', {'price': -1}, format='json')

    assert response.status_code == 400
    assert response.json()['details'] == {'price': ['Price must be a positive number']}


def test_put_is_not_allowed(api_client, make_menu_item):
    item = make_menu_item()

    response = api_client.put(f'/menu/{item.pk}/', {'price': 3}, format='json')

    assert response.status_code == 405
    assert MenuItem.objects.get(pk=item.pk).price == Decimal('2.99')
