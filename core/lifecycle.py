"""
Soft-delete lifecycle shared by every soft-deletable record.

A record is in exactly one of three states::

    ACTIVE --soft_delete--> SOFT_DELETED --hard_delete--> GONE
       ^                        |
       +--------restore---------+

Hard delete is only reachable from SOFT_DELETED, so removing a row always
takes two explicit steps. ``update`` only applies to ACTIVE rows.

Subclasses bind the manager to a model and plug invariant checks into the
``before_*`` hooks; the transitions themselves are never reimplemented.
"""
import enum
import logging

from django.db import transaction
from django.utils.text import capfirst

from .exceptions import NotDeleted, NotFound, StillActive

logger = logging.getLogger(__name__)


class LifecycleState(enum.Enum):
    ACTIVE = 'active'
    SOFT_DELETED = 'soft_deleted'
    GONE = 'gone'


class LifecycleManager:
    model = None
    label = None

    def __init__(self, model=None, label=None):
        if model is not None:
            self.model = model
        if label is not None:
            self.label = label
        if self.model is None:
            raise TypeError(f"{type(self).__name__} needs a model")
        if self.label is None:
            self.label = capfirst(self.model._meta.verbose_name)

    # =============== LOOKUPS ===============

    @staticmethod
    def state_of(instance):
        """Classify a row, ``None`` standing for one that does not exist."""
        if instance is None:
            return LifecycleState.GONE
        if instance.is_deleted:
            return LifecycleState.SOFT_DELETED
        return LifecycleState.ACTIVE

    def locate(self, pk):
        """Return ``(state, instance)`` for ``pk``, looking past the visibility filter."""
        instance = self.model.all_objects.filter(pk=pk).first()
        return self.state_of(instance), instance

    def get(self, pk):
        """Visible get: soft-deleted rows are reported as missing."""
        state, instance = self.locate(pk)
        if state is not LifecycleState.ACTIVE:
            raise self.not_found()
        return instance

    def not_found(self):
        return NotFound(f'{self.label} not found')

    # =============== HOOKS ===============

    def before_create(self, instance):
        pass

    def before_update(self, instance, changes):
        pass

    def before_restore(self, instance):
        pass

    def save(self, instance):
        instance.save()

    # =============== TRANSITIONS ===============

    def create(self, **fields):
        with transaction.atomic():
            instance = self.model(**fields)
            self.before_create(instance)
            self.save(instance)
        logger.info(f"Created {self.label.lower()} {instance.pk}")
        return instance

    def update(self, pk, changes):
        with transaction.atomic():
            instance = self.get(pk)
            self.before_update(instance, changes)
            for field, value in changes.items():
                setattr(instance, field, value)
            self.save(instance)
        logger.info(f"Updated {self.label.lower()} {pk}: {', '.join(changes)}")
        return instance

    def soft_delete(self, pk):
        with transaction.atomic():
            instance = self.get(pk)
            instance.mark_deleted()
            instance.save(update_fields=['deleted_at', 'updated_at'])
        logger.info(f"Soft-deleted {self.label.lower()} {pk}")
        return instance

    def restore(self, pk):
        with transaction.atomic():
            state, instance = self.locate(pk)
            if state is LifecycleState.GONE:
                raise self.not_found()
            if state is LifecycleState.ACTIVE:
                raise NotDeleted(f'{self.label} is not deleted')
            self.before_restore(instance)
            instance.mark_restored()
            instance.save()
        logger.info(f"Restored {self.label.lower()} {pk}")
        return instance

    def hard_delete(self, pk):
        """Remove a soft-deleted row for good and return its last snapshot."""
        with transaction.atomic():
            state, instance = self.locate(pk)
            if state is LifecycleState.GONE:
                raise self.not_found()
            if state is LifecycleState.ACTIVE:
                raise StillActive(f'Cannot hard delete active {self.label.lower()}. '
                                  f'{self.label} must be soft-deleted first')
            self.model.all_objects.filter(pk=instance.pk).delete()
        logger.info(f"Hard-deleted {self.label.lower()} {pk}")
        return instance
