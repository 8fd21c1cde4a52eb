import logging

from django.db import transaction

from core.exceptions import NotFound
from .models import StoreHours, WEEKDAYS, CLOSED

logger = logging.getLogger(__name__)


def current_hours():
    return StoreHours.objects.order_by('id').first()


def get_store_hours():
    hours = current_hours()
    if hours is None:
        raise NotFound('Store hours not found')
    return hours


def upsert_store_hours(changes):
    """
    Write the given days onto the store hours record.

    Creates the record on first write, with every day that was not given set
    to ``Closed``. Returns ``(hours, created)`` like ``get_or_create``.
    """
    with transaction.atomic():
        hours = current_hours()
        if hours is None:
            hours = StoreHours.objects.create(
                **{day: changes.get(day, CLOSED) for day in WEEKDAYS}
            )
            logger.info(f"Created store hours with {', '.join(changes)}")
            return hours, True

        for day, value in changes.items():
            setattr(hours, day, value)
        hours.save(update_fields=list(changes))

    logger.info(f"Updated store hours: {', '.join(changes)}")
    return hours, False
