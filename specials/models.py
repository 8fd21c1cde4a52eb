from django.db import models

from core.models import SoftDeleteModel


class Special(SoftDeleteModel):
    """Daily special. At most one special that is not deleted can be active."""
    name = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=5, decimal_places=2)
    description = models.CharField(max_length=500)
    is_active = models.BooleanField(default=True)
    valid_from = models.DateTimeField(null=True, blank=True)
    valid_to = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'daily_special'
        ordering = ['id']
        verbose_name = 'special'
        constraints = [
            models.UniqueConstraint(
                fields=['is_active'],
                condition=models.Q(is_active=True, deleted_at__isnull=True),
                name='daily_special_single_active',
            ),
        ]

    def __str__(self):
        return f"{self.name} ({'active' if self.is_active else 'inactive'})"

    @property
    def has_valid_window(self):
        if self.valid_from is None or self.valid_to is None:
            return True
        return self.valid_from < self.valid_to
