from django.db import models
from django.utils import timezone


class TimeStampedModel(models.Model):
    """Base model with created_at and updated_at fields"""
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


# =============== SOFT DELETE ===============

class SoftDeleteQuerySet(models.QuerySet):
    """Queryset that knows which rows are soft-deleted"""

    def alive(self):
        return self.filter(deleted_at__isnull=True)


class VisibleManager(models.Manager.from_queryset(SoftDeleteQuerySet)):
    """Default manager: soft-deleted rows never show up through it"""

    def get_queryset(self):
        return super().get_queryset().alive()


class SoftDeleteModel(TimeStampedModel):
    """
    Base model for records that are soft-deleted before they can be removed.

    ``objects`` only sees rows whose ``deleted_at`` is null. ``all_objects``
    sees every row and is reserved for the restore / hard-delete pathway.
    """
    deleted_at = models.DateTimeField(null=True, blank=True)

    objects = VisibleManager()
    all_objects = SoftDeleteQuerySet.as_manager()

    class Meta:
        abstract = True

    @property
    def is_deleted(self):
        return self.deleted_at is not None

    def mark_deleted(self):
        self.deleted_at = timezone.now()

    def mark_restored(self):
        self.deleted_at = None
