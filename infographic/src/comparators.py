"""Attribute comparators between two animals.

Each function phrases the comparison from the point of view of
*this* (first person) talking to *other* (second person). Percentages
are always relative to *other*, whichever of the two is larger.
Any Animal works on either side, so a dinosaur can be compared with a
human or with another dinosaur.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from infographic.src.models import Animal, Diet


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    """Format a measurement without a trailing ``.0`` for whole values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_feet(inches: float) -> str:
    """Format a height in inches as feet with two decimals, halves going up."""
    return str(Decimal(inches / 12).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _percent_of(diff: float, reference: float) -> int:
    return round_half_up(100 * diff / reference)


def compare_weight(this: Animal, other: Animal) -> str:
    """Compare the weight of *this* against *other*.

    Args:
        this: Animal speaking.
        other: Animal being addressed.

    Returns:
        Comparison sentence.
    """
    diff = other.weight - this.weight
    if diff > 0:
        return (
            f"At {format_number(this.weight)} lbs, I am about "
            f"{_percent_of(diff, other.weight)}% lighter than you"
        )
    if diff < 0:
        return (
            f"At {format_number(this.weight)} lbs, I am about "
            f"{_percent_of(-diff, other.weight)}% heavier than you"
        )
    return "We have the exact same weight!"


def compare_height(this: Animal, other: Animal) -> str:
    """Compare the height of *this* against *other*.

    The height shown is in feet; the percentage uses inches.

    Args:
        this: Animal speaking.
        other: Animal being addressed.

    Returns:
        Comparison sentence.
    """
    diff = other.height - this.height
    feet = format_feet(this.height)
    if diff > 0:
        return (
            f"At {feet} feet, I am about "
            f"{_percent_of(diff, other.height)}% smaller than you"
        )
    if diff < 0:
        return (
            f"At {feet} feet, I am about "
            f"{_percent_of(-diff, other.height)}% taller than you"
        )
    return "We have the exact same height!"


def compare_diet(this: Animal, other: Animal) -> str:
    """Comment on the diet of *other* from the point of view of *this*.

    Checks run in a fixed order and the first match wins. Pairs not
    covered by the four checks fall through to the shared-food remark.

    Args:
        this: Animal speaking.
        other: Animal being addressed.

    Returns:
        Comparison sentence.
    """
    if this.diet != Diet.HERBIVORE and other.diet == Diet.HERBIVORE:
        return "Really, you don't eat meat ?"
    if this.diet == Diet.HERBIVORE and other.diet != Diet.HERBIVORE:
        return "I think you shouldn't eat meat, you know."
    if this.diet != Diet.CARNIVORE and other.diet == Diet.CARNIVORE:
        return "I think you should try some vegetables, you know !"
    if this.diet == Diet.CARNIVORE and other.diet != Diet.CARNIVORE:
        return "Why do you waste your appetite on vegetables ?"
    return "We like the same food !"
