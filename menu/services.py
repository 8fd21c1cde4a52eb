from core.lifecycle import LifecycleManager

from .enforcement import ensure_unique_name
from .models import MenuItem


class MenuItemLifecycle(LifecycleManager):
    model = MenuItem
    label = 'Menu item'

    def before_create(self, instance):
        ensure_unique_name(instance.name)

    def before_update(self, instance, changes):
        if 'name' in changes:
            ensure_unique_name(changes['name'], exclude_pk=instance.pk)

    def before_restore(self, instance):
        # the name may have been reused while this item was deleted
        ensure_unique_name(instance.name, exclude_pk=instance.pk)


menu_items = MenuItemLifecycle()


def find_by_name(name):
    return MenuItem.objects.filter(name__iexact=name).first()


def priced_up_to(max_price):
    return MenuItem.objects.filter(price__lte=max_price)
