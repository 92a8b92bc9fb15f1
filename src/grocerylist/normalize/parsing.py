"""Parsing of free-text quantity expressions such as "2 l" or "3 tbsp"."""

import re

from grocerylist.normalize.quantity import Custom, Pieces, Quantity, Volume, Weight
from grocerylist.normalize.units import VolumeUnit, identify_unit

AMOUNT_PATTERN = re.compile(r"^[0-9]+$")


class QuantityParseError(Exception):
    """Base exception for quantity parsing errors."""

    def __init__(self, message: str, token: str | None = None):
        super().__init__(message)
        self.token = token


class ZeroAmountError(QuantityParseError):
    """Raised when the amount is exactly zero."""


class InvalidNumberError(QuantityParseError):
    """Raised when the leading token is not a non-negative integer."""


def parse_amount(token: str) -> int:
    """Parse the numeric part of a quantity expression."""
    if not AMOUNT_PATTERN.match(token):
        raise InvalidNumberError(f"Invalid quantifier/integer: {token}", token=token)

    number = int(token)
    if number == 0:
        raise ZeroAmountError("Invalid amount: 0", token=token)

    return number


def parse_quantity(text: str) -> Quantity:
    """
    Parse a quantity expression into a Quantity.

    Examples:
        "" -> Pieces(1)
        "5" -> Pieces(5)
        "2 l" -> Volume(2, LITER)
        "3 fl oz" -> Volume(3, FLUID_OUNCES)
        "2 packages" -> Custom(2, "packages")

    Raises:
        ZeroAmountError: The amount is 0.
        InvalidNumberError: The amount is not a positive integer.
    """
    parts = text.split()
    if not parts:
        return Pieces(1)

    number = parse_amount(parts[0])
    unit_phrase = " ".join(parts[1:]).lower()

    if not unit_phrase:
        return Pieces(number)

    unit = identify_unit(unit_phrase)
    if unit is None:
        return Custom(number, unit_phrase)
    if isinstance(unit, VolumeUnit):
        return Volume(number, unit)
    return Weight(number, unit)
