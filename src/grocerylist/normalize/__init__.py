"""Quantity model, unit tables and quantity parsing."""

from grocerylist.normalize.parsing import (
    InvalidNumberError,
    QuantityParseError,
    ZeroAmountError,
    parse_quantity,
)
from grocerylist.normalize.quantity import Custom, Pieces, Quantity, Volume, Weight
from grocerylist.normalize.units import VolumeUnit, WeightUnit, identify_unit

__all__ = [
    "Custom",
    "InvalidNumberError",
    "Pieces",
    "Quantity",
    "QuantityParseError",
    "Volume",
    "VolumeUnit",
    "Weight",
    "WeightUnit",
    "ZeroAmountError",
    "identify_unit",
    "parse_quantity",
]
