import logging

from core.exceptions import Conflict

from .models import MenuItem

logger = logging.getLogger(__name__)

NAME_CONFLICT_MESSAGE = 'Coffee with this name already exists'


def name_taken(name, exclude_pk=None):
    """True when a menu item that is not deleted already uses ``name`` (case-insensitive)"""
    queryset = MenuItem.objects.filter(name__iexact=name)
    if exclude_pk is not None:
        queryset = queryset.exclude(pk=exclude_pk)
    return queryset.exists()


def ensure_unique_name(name, exclude_pk=None):
    if name_taken(name, exclude_pk=exclude_pk):
        logger.warning(f"Menu item name conflict: {name!r}")
        raise Conflict(NAME_CONFLICT_MESSAGE)
