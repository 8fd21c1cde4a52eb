import logging

from core.exceptions import ShapeInvalid
from core.lifecycle import LifecycleManager

from .enforcement import activate, other_active_specials
from .models import Special

logger = logging.getLogger(__name__)


class SpecialLifecycle(LifecycleManager):
    model = Special
    label = 'Special'

    def before_restore(self, instance):
        # restoring never takes the active flag away from another special
        if instance.is_active and other_active_specials(instance).exists():
            logger.info(f"Special {instance.pk} restored as inactive, another special is active")
            instance.is_active = False

    def save(self, instance):
        if not instance.has_valid_window:
            raise ShapeInvalid({'valid_from': ['valid_from must be before valid_to']})
        if instance.is_active:
            activate(instance)
        else:
            instance.save()


specials = SpecialLifecycle()


def active_specials():
    return Special.objects.filter(is_active=True)
