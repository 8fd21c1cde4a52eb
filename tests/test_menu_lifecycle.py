"""
Soft delete, restore and hard delete of menu items through the API.
"""
import pytest

from menu.models import MenuItem

pytestmark = pytest.mark.django_db


def test_soft_delete_hides_the_item(api_client, make_menu_item):
    item = make_menu_item(name='Espresso')

    response = api_client.delete(f'/menu/{item.pk}/')

    assert response.status_code == 200
    data = response.json()
    assert data['message'] == 'Item soft-deleted successfully'
    assert data['deleted_item']['id'] == item.pk
    assert data['deleted_item']['deleted_at'] is not None
    assert not MenuItem.objects.filter(pk=item.pk).exists()
    assert MenuItem.all_objects.filter(pk=item.pk).exists()


def test_soft_delete_twice_is_not_found(api_client, make_deleted_menu_item):
    item = make_deleted_menu_item()

    response = api_client.delete(f'/menu/{item.pk}/')

    assert response.status_code == 404


def test_hard_delete_of_active_item_is_refused(api_client, make_menu_item):
    item = make_menu_item()

    response = api_client.delete(f'/menu/{item.pk}/hard-delete/')

    assert response.status_code == 400
    data = response.json()
    assert data['code'] == 'still_active'
    assert data['message'] == 'Cannot hard delete active menu item. Menu item must be soft-deleted first'
    assert MenuItem.objects.filter(pk=item.pk).exists()


def test_hard_delete_after_soft_delete(api_client, make_menu_item):
    item = make_menu_item(name='Espresso')
    api_client.delete(f'/menu/{item.pk}/')

    response = api_client.delete(f'/menu/{item.pk}/hard-delete/')

    assert response.status_code == 200
    data = response.json()
    assert data['message'] == 'Item deleted successfully'
    assert data['deleted_item']['name'] == 'Espresso'
    assert not MenuItem.all_objects.filter(pk=item.pk).exists()


def test_hard_deleted_item_cannot_be_restored(api_client, make_deleted_menu_item):
    item = make_deleted_menu_item()
    api_client.delete(f'/menu/{item.pk}/hard-delete/')

    response = api_client.post(f'/menu/{item.pk}/restore/')

    assert response.status_code == 404


def test_hard_delete_of_unknown_item_is_not_found(api_client):
    response = api_client.delete('/menu/999/hard-delete/')

    assert response.status_code == 404
    assert response.json()['message'] == 'Menu item not found'


def test_restore_brings_the_item_back_unchanged(api_client, make_menu_item):
    item = make_menu_item(name='Espresso', price='2.50', description='Strong and bold coffee shot')
    item.refresh_from_db()
    api_client.delete(f'/menu/{item.pk}/')

    response = api_client.post(f'/menu/{item.pk}/restore/')

    assert response.status_code == 200
    data = response.json()
    assert data['message'] == 'Item restored successfully'
    assert data['restored_item']['deleted_at'] is None

    restored = MenuItem.objects.get(pk=item.pk)
    assert (restored.name, restored.price, restored.description) == (item.name, item.price, item.description)
    assert restored.created_at == item.created_at
    assert restored.updated_at > item.updated_at


def test_restore_of_active_item_is_refused(api_client, make_menu_item):
    item = make_menu_item()

    response = api_client.post(f'/menu/{item.pk}/restore/')

    assert response.status_code == 400
    assert response.json()['code'] == 'not_deleted'
    assert response.json()['message'] == 'Menu item is not deleted'


def test_restore_of_unknown_item_is_not_found(api_client):
    response = api_client.post('/menu/999/restore/')

    assert response.status_code == 404


def test_restore_is_refused_when_the_name_was_reused(api_client, make_menu_item, make_deleted_menu_item):
    old = make_deleted_menu_item(name='Espresso')
    make_menu_item(name='ESPRESSO')

    response = api_client.post(f'/menu/{old.pk}/restore/')

    assert response.status_code == 409
    assert response.json()['message'] == 'Coffee with this name already exists'
    assert MenuItem.all_objects.get(pk=old.pk).is_deleted
