"""Unit enumerations and synonym tables."""

from enum import Enum


# =============================================================================
# Unit Enumerations
# =============================================================================


class WeightUnit(Enum):
    """Weight units with their display label and factor to grams."""

    KILOGRAM = ("kg", 1000.0)
    GRAM = ("g", 1.0)
    POUNDS = ("lbs", 453.59237)
    OUNCES = ("oz", 28.349523125)

    def __init__(self, label: str, factor: float):
        self.label = label
        self.factor = factor


class VolumeUnit(Enum):
    """Volume units with their display label and factor to milliliters."""

    LITER = ("l", 1000.0)
    DECILITER = ("dl", 100.0)
    CENTILITER = ("cl", 10.0)
    MILLILITER = ("ml", 1.0)
    TABLESPOON = ("tbsp", 15.0)
    TEASPOON = ("tsp", 5.0)
    SPICES = ("krm", 1.0)  # kryddmått, same as ml
    PINTS = ("pints", 473.0)
    CUPS = ("cups", 237.0)
    FLUID_OUNCES = ("fl oz", 29.6)

    def __init__(self, label: str, factor: float):
        self.label = label
        self.factor = factor


# Readable volume steps, largest first
VOLUME_STEPS: tuple[VolumeUnit, ...] = (
    VolumeUnit.LITER,
    VolumeUnit.DECILITER,
    VolumeUnit.CENTILITER,
)


# =============================================================================
# Synonym Tables
# =============================================================================

VOLUME_UNITS: dict[str, VolumeUnit] = {
    # Metric
    "l": VolumeUnit.LITER,
    "liter": VolumeUnit.LITER,
    "liters": VolumeUnit.LITER,
    "litre": VolumeUnit.LITER,
    "litres": VolumeUnit.LITER,
    "dl": VolumeUnit.DECILITER,
    "deciliter": VolumeUnit.DECILITER,
    "deciliters": VolumeUnit.DECILITER,
    "cl": VolumeUnit.CENTILITER,
    "centiliter": VolumeUnit.CENTILITER,
    "centiliters": VolumeUnit.CENTILITER,
    "ml": VolumeUnit.MILLILITER,
    "milliliter": VolumeUnit.MILLILITER,
    "milliliters": VolumeUnit.MILLILITER,
    # Spoons (English and Swedish)
    "tbsp": VolumeUnit.TABLESPOON,
    "tb": VolumeUnit.TABLESPOON,
    "msk": VolumeUnit.TABLESPOON,
    "matsked": VolumeUnit.TABLESPOON,
    "tablespoon": VolumeUnit.TABLESPOON,
    "tablespoons": VolumeUnit.TABLESPOON,
    "tspn": VolumeUnit.TEASPOON,
    "tsp": VolumeUnit.TEASPOON,
    "ts": VolumeUnit.TEASPOON,
    "tsk": VolumeUnit.TEASPOON,
    "tesked": VolumeUnit.TEASPOON,
    "teaspoon": VolumeUnit.TEASPOON,
    "teaspoons": VolumeUnit.TEASPOON,
    "krm": VolumeUnit.SPICES,
    "kryddmått": VolumeUnit.SPICES,
    # US customary
    "p": VolumeUnit.PINTS,
    "pt": VolumeUnit.PINTS,
    "pint": VolumeUnit.PINTS,
    "pints": VolumeUnit.PINTS,
    "cup": VolumeUnit.CUPS,
    "cups": VolumeUnit.CUPS,
    "fl oz": VolumeUnit.FLUID_OUNCES,
    "fluid ounce": VolumeUnit.FLUID_OUNCES,
    "fluid ounces": VolumeUnit.FLUID_OUNCES,
}

WEIGHT_UNITS: dict[str, WeightUnit] = {
    # Metric
    "g": WeightUnit.GRAM,
    "gram": WeightUnit.GRAM,
    "grams": WeightUnit.GRAM,
    "kg": WeightUnit.KILOGRAM,
    "kilogram": WeightUnit.KILOGRAM,
    "kilograms": WeightUnit.KILOGRAM,
    # Imperial
    "oz": WeightUnit.OUNCES,
    "ounce": WeightUnit.OUNCES,
    "ounces": WeightUnit.OUNCES,
    "lb": WeightUnit.POUNDS,
    "lbs": WeightUnit.POUNDS,
    "pound": WeightUnit.POUNDS,
    "pounds": WeightUnit.POUNDS,
}


def identify_unit(unit: str) -> WeightUnit | VolumeUnit | None:
    """
    Look up a unit phrase in the synonym tables.

    Matching is exact after lower-casing and collapsing whitespace, so
    "Fl  Oz" finds FLUID_OUNCES but "fl. oz" does not.
    """
    key = " ".join(unit.lower().split())

    if key in VOLUME_UNITS:
        return VOLUME_UNITS[key]

    if key in WEIGHT_UNITS:
        return WEIGHT_UNITS[key]

    return None
