from django.db import models

WEEKDAYS = ['monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday']

CLOSED = 'Closed'


class StoreHours(models.Model):
    """Store-wide opening hours, one free-form text per weekday. A single row is kept."""
    monday = models.CharField(max_length=50)
    tuesday = models.CharField(max_length=50)
    wednesday = models.CharField(max_length=50)
    thursday = models.CharField(max_length=50)
    friday = models.CharField(max_length=50)
    saturday = models.CharField(max_length=50)
    sunday = models.CharField(max_length=50)

    class Meta:
        db_table = 'store_hours'
        verbose_name = 'store hours'
        verbose_name_plural = 'store hours'

    def __str__(self):
        return ', '.join(f"{day.capitalize()}: {getattr(self, day)}" for day in WEEKDAYS)
