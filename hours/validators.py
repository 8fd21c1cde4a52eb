"""
Grammar for the free-form opening hours of one weekday.

Accepted notations (case-insensitive, flexible whitespace):

* keywords: ``Closed``, ``Off``, ``24h``, ``24 hours``, ``24/7``, ``open 24 hours``
* 12-hour ranges: ``6am - 8pm``, ``6:00 AM to 8:30 p.m.``
* 24-hour ranges: ``07:00 - 19:00``, ``7.00 - 19.00``
* compact 24-hour ranges: ``0700-1900``

A range separator is ``-``, an en dash, an em dash or ``to``.

Each notation is a separate rule. A rule either accepts the value, rejects it
(the notation matched but a number is out of bounds) or defers to the next
rule. A value no rule accepts is invalid.
"""
import re

from django.core.exceptions import ValidationError

MAX_LENGTH = 50

SEPARATOR = r'\s*(?:-|–|—|to)\s*'
MERIDIEM = r'\s*(?:a\.m\.|p\.m\.|am|pm)'

ACCEPT = True
REJECT = False
DEFER = None


class KeywordRule:
    name = 'keyword'
    pattern = re.compile(
        r'^(?:closed|off|24\s*h(?:ours?)?|24\s*/\s*7|open\s*24\s*hours?)$',
        re.IGNORECASE,
    )

    def check(self, value):
        return ACCEPT if self.pattern.match(value) else DEFER


class RangeRule:
    """A ``start <sep> end`` range whose sides carry an hour and a minute."""

    def __init__(self, name, side, hours):
        self.name = name
        self.hours = hours
        self.pattern = re.compile(rf'^{side}{SEPARATOR}{side}$', re.IGNORECASE)

    def check(self, value):
        match = self.pattern.match(value)
        if match is None:
            return DEFER
        start_hour, start_minute, end_hour, end_minute = match.groups()
        if self.in_bounds(start_hour, start_minute) and self.in_bounds(end_hour, end_minute):
            return ACCEPT
        return REJECT

    def in_bounds(self, hour, minute):
        low, high = self.hours
        return low <= int(hour) <= high and 0 <= int(minute or 0) <= 59


RULES = [
    KeywordRule(),
    RangeRule('12-hour', r'(\d{1,2})(?::(\d{2}))?' + MERIDIEM, hours=(1, 12)),
    RangeRule('24-hour', r'(\d{1,2})[.:](\d{2})', hours=(0, 23)),
    RangeRule('24-hour compact', r'(\d{2})(\d{2})', hours=(0, 23)),
]


def is_valid_hours(value):
    if len(value) > MAX_LENGTH:
        return False
    value = value.strip()
    if not value:
        return False
    for rule in RULES:
        verdict = rule.check(value)
        if verdict is not DEFER:
            return verdict
    return False


def validate_hours_format(value):
    if not is_valid_hours(value):
        raise ValidationError(
            'Hours must be in a valid format (e.g., "6am - 8pm", "07:00 - 19:00", "Closed")',
            code='invalid_hours',
        )
