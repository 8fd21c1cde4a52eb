from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from hours.models import StoreHours
from hours.services import upsert_store_hours
from menu.enforcement import name_taken
from menu.models import MenuItem
from menu.services import menu_items
from specials.models import Special
from specials.services import specials

MENU = [
    {'name': 'Espresso', 'price': Decimal('2.50'), 'description': 'Strong and bold coffee shot'},
    {'name': 'Latte', 'price': Decimal('3.50'), 'description': 'Smooth espresso with steamed milk'},
    {'name': 'Cappuccino', 'price': Decimal('3.75'), 'description': 'Espresso with foamed milk and cocoa powder'},
]

HOURS = {
    'monday': '6am - 8pm',
    'tuesday': '6am - 8pm',
    'wednesday': '6am - 8pm',
    'thursday': '6am - 8pm',
    'friday': '6am - 9pm',
    'saturday': '7am - 9pm',
    'sunday': '7am - 7pm',
}

SPECIAL = {
    'name': 'Mocha Madness',
    'price': Decimal('4.00'),
    'description': 'Chocolate espresso with whipped cream',
    'is_active': True,
}


class Command(BaseCommand):
    help = 'Load the sample menu, store hours and daily special'

    def add_arguments(self, parser):
        parser.add_argument(
            '--keep',
            action='store_true',
            help='Keep existing rows instead of clearing the tables first',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if not options['keep']:
            MenuItem.all_objects.all().delete()
            Special.all_objects.all().delete()
            StoreHours.objects.all().delete()
            self.stdout.write('Cleared menu items, specials and store hours')

        added = 0
        for item in MENU:
            if name_taken(item['name']):
                self.stdout.write(f"Skipping {item['name']}, already on the menu")
                continue
            menu_items.create(**item)
            added += 1
        upsert_store_hours(HOURS)

        if Special.objects.filter(name__iexact=SPECIAL['name']).exists():
            self.stdout.write(f"Skipping {SPECIAL['name']}, already a special")
            specials_added = 0
        else:
            specials.create(**SPECIAL)
            specials_added = 1

        self.stdout.write(self.style.SUCCESS(
            f"Seeded {added} menu items, store hours and {specials_added} daily special(s)"
        ))
