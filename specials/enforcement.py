"""
At most one special that is not deleted may be active.

``activate`` is the only way a special becomes active: it switches every
other active special off and then saves the given one, inside one
transaction. The partial unique index ``daily_special_single_active`` backs
this up if two writers ever interleave.
"""
import logging

from django.db import transaction
from django.utils import timezone

from .models import Special

logger = logging.getLogger(__name__)


def other_active_specials(special):
    queryset = Special.objects.filter(is_active=True)
    if special.pk is not None:
        queryset = queryset.exclude(pk=special.pk)
    return queryset


def activate(special):
    """Make ``special`` the only active special and persist it (insert or update)."""
    with transaction.atomic():
        deactivated = other_active_specials(special).update(
            is_active=False, updated_at=timezone.now()
        )
        special.is_active = True
        special.save()

    if deactivated:
        logger.info(f"Activated special {special.pk}, deactivated {deactivated} other(s)")
    return special
