"""Quantity model: pieces, weights, volumes and custom units."""

from dataclasses import dataclass, replace
from fractions import Fraction

from grocerylist.logging_config import get_logger
from grocerylist.normalize.units import VOLUME_STEPS, VolumeUnit, WeightUnit

logger = get_logger(__name__)


@dataclass(frozen=True)
class Quantity:
    """
    An amount of something, always a positive integer.

    Concrete quantities are one of Pieces, Weight, Volume or Custom. Adding
    two quantities that cannot be combined returns the left operand unchanged.
    """

    amount: int

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(f"Amount must be an integer, got {self.amount!r}")
        if self.amount < 1:
            raise ValueError(f"Amount must be at least 1, got {self.amount}")

    @property
    def unit_label(self) -> str:
        raise NotImplementedError

    def scale(self, ratio: float | Fraction) -> "Quantity":
        """Multiply the amount by ratio, truncating and never going below 1."""
        scaled = max(1, int(self.amount * ratio))
        return replace(self, amount=scaled)

    def readable(self) -> "Quantity":
        """Re-express in the most readable unit without losing exactness."""
        return self

    def _incompatible(self, other: "Quantity") -> "Quantity":
        logger.warning(f"Cannot add {other} to {self}, keeping first")
        return self

    def __str__(self) -> str:
        if self.unit_label:
            return f"{self.amount} {self.unit_label}"
        return str(self.amount)


@dataclass(frozen=True)
class Pieces(Quantity):
    """A plain count without a unit."""

    @property
    def unit_label(self) -> str:
        return ""

    def __add__(self, other: Quantity) -> Quantity:
        if isinstance(other, Pieces):
            return Pieces(self.amount + other.amount)
        return self._incompatible(other)


@dataclass(frozen=True)
class Weight(Quantity):
    """A weight, summed in grams."""

    unit: WeightUnit = WeightUnit.GRAM

    @property
    def unit_label(self) -> str:
        return self.unit.label

    def as_grams(self) -> int:
        return int(self.amount * self.unit.factor)

    def __add__(self, other: Quantity) -> Quantity:
        if isinstance(other, Weight):
            return Weight(self.as_grams() + other.as_grams(), WeightUnit.GRAM)
        return self._incompatible(other)

    def readable(self) -> "Weight":
        grams = self.as_grams()
        if grams % 1000 == 0:
            return Weight(grams // 1000, WeightUnit.KILOGRAM)
        return Weight(grams, WeightUnit.GRAM)


@dataclass(frozen=True)
class Volume(Quantity):
    """A volume, summed in milliliters."""

    unit: VolumeUnit = VolumeUnit.MILLILITER

    @property
    def unit_label(self) -> str:
        return self.unit.label

    def as_milliliters(self) -> int:
        return int(self.amount * self.unit.factor)

    def __add__(self, other: Quantity) -> Quantity:
        if isinstance(other, Volume):
            return Volume(self.as_milliliters() + other.as_milliliters(), VolumeUnit.MILLILITER)
        return self._incompatible(other)

    def readable(self) -> "Volume":
        milliliters = self.as_milliliters()
        for step in VOLUME_STEPS:
            size = int(step.factor)
            if milliliters % size == 0:
                return Volume(milliliters // size, step)
        return Volume(milliliters, VolumeUnit.MILLILITER)


@dataclass(frozen=True)
class Custom(Quantity):
    """An amount of an unrecognized unit, e.g. "2 packages"."""

    label: str

    def __post_init__(self) -> None:
        super().__post_init__()
        # frozen, so bypass __setattr__
        object.__setattr__(self, "label", self.label.strip().lower())

    @property
    def unit_label(self) -> str:
        return self.label

    def __add__(self, other: Quantity) -> Quantity:
        if isinstance(other, Custom) and other.label == self.label:
            return Custom(self.amount + other.amount, self.label)
        return self._incompatible(other)
