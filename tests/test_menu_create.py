"""
Creating menu items.

Covers the happy path, trimming, case-insensitive name conflicts, reuse of
names freed by soft delete and the shape checks on every field.
"""
from decimal import Decimal

import pytest

from menu.models import MenuItem

pytestmark = pytest.mark.django_db


def post_item(api_client, **overrides):
    body = {
        'name': 'Cold Brew',
        'price': 3.25,
        'description': 'Slow steeped for eighteen hours',
    }
    body.update(overrides)
    return api_client.post('/menu/', body, format='json')


def test_create_returns_the_new_item(api_client):
    response = post_item(api_client)

    assert response.status_code == 201
    data = response.json()
    assert data['name'] == 'Cold Brew'
    assert data['price'] == 3.25
    assert data['description'] == 'Slow steeped for eighteen hours'
    assert data['deleted_at'] is None
    assert data['created_at'] is not None
    assert MenuItem.objects.filter(pk=data['id']).exists()


def test_create_trims_text_fields(api_client):
    response = post_item(api_client, name='  Flat White  ', description='   Velvety microfoam on a double shot  ')

    assert response.status_code == 201
    item = MenuItem.objects.get(pk=response.json()['id'])
    assert item.name == 'Flat White'
    assert item.description == 'Velvety microfoam on a double shot'


def test_duplicate_name_is_a_conflict_regardless_of_case(api_client, make_menu_item):
    make_menu_item(name='Espresso')

    response = post_item(api_client, name='ESPRESSO')

    assert response.status_code == 409
    data = response.json()
    assert data['code'] == 'conflict'
    assert data['message'] == 'Coffee with this name already exists'
    assert MenuItem.objects.count() == 1


def test_duplicate_name_after_trimming_is_a_conflict(api_client, make_menu_item):
    make_menu_item(name='Espresso')

    response = post_item(api_client, name='  espresso ')

    assert response.status_code == 409


def test_name_of_soft_deleted_item_can_be_reused(api_client, make_deleted_menu_item):
    make_deleted_menu_item(name='Espresso')

    response = post_item(api_client, name='Espresso')

    assert response.status_code == 201
    assert MenuItem.all_objects.filter(name='Espresso').count() == 2


@pytest.mark.parametrize('field, value, message', [
    ('name', 'A', 'Name must be at least 2 characters'),
    ('name', 'x' * 101, 'Name must be at most 100 characters'),
    ('name', '   ', 'Name cannot be empty after trimming'),
    ('price', 0, 'Price must be a positive number'),
    ('price', -1.5, 'Price must be a positive number'),
    ('price', 1000, 'Price must be reasonable (max $999.99)'),
    ('price', 1e40, 'Price must be reasonable (max $999.99)'),
    ('price', '12345678901234567890.5', 'Price must be reasonable (max $999.99)'),
    ('price', 'cheap', 'Price must be a valid number'),
    ('price', '2.999', 'Price must have at most 2 decimal places'),
    ('description', 'Too short', 'Description must be at least 10 characters'),
    ('description', 'x' * 501, 'Description must be at most 500 characters'),
])
def test_shape_errors_name_the_field(api_client, field, value, message):
    response = post_item(api_client, **{field: value})

    assert response.status_code == 400
    data = response.json()
    assert data['code'] == 'invalid'
    assert data['message'] == 'Validation error'
    assert data['details'][field] == [message]
    assert MenuItem.all_objects.count() == 0


@pytest.mark.parametrize('missing', ['name', 'price', 'description'])
def test_every_field_is_required(api_client, missing):
    body = {'name': 'Cold Brew', 'price': 3.25, 'description': 'Slow steeped for eighteen hours'}
    del body[missing]

    response = api_client.post('/menu/', body, format='json')

    assert response.status_code == 400
    assert missing in response.json()['details']


def test_price_bounds_are_inclusive_at_the_top(api_client):
    response = post_item(api_client, price='999.99')

    assert response.status_code == 201
    assert MenuItem.objects.get().price == Decimal('999.99')
