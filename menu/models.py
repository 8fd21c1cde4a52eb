from django.db import models
from django.db.models.functions import Lower

from core.models import SoftDeleteModel


class MenuItem(SoftDeleteModel):
    """Coffee menu item. Names are unique (ignoring case) among items that are not deleted."""
    name = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=5, decimal_places=2)
    description = models.CharField(max_length=500)

    class Meta:
        db_table = 'menu_items'
        ordering = ['id']
        verbose_name = 'menu item'
        constraints = [
            models.UniqueConstraint(
                Lower('name'),
                condition=models.Q(deleted_at__isnull=True),
                name='menu_items_name_ci_unique_alive',
            ),
        ]

    def __str__(self):
        return self.name

    def describe(self):
        return f"{self.name} - {self.description}. Only ${self.price:.2f}!"
