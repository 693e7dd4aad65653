"""
Damage model: damage events, per-slot defense adjustments and the enemy's
full defense profile.

An enemy resolves incoming damage through two independent branches computed
from the same raw amount: the catch-all ``any`` slot and the slot matching the
damage element. The smaller of the two results is the damage taken, so a
protective slot (``Percent(0.0)``) zeroes damage whatever the other slot says,
while a slot deliberately worse than normal (``Absolute(-1)``, "takes 1
extra") shifts the result only when it is the smaller branch.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import assert_never

from .enums import ElementType

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Damage:
    """A single damage event"""
    amount: int
    element: ElementType = ElementType.NO_ELEMENT

    @classmethod
    def raw(cls, amount: int) -> Damage:
        """Physical (element-less) damage"""
        return cls(amount=amount, element=ElementType.NO_ELEMENT)

    @property
    def description(self) -> str:
        return f"{self.element.description}/{self.amount}"


# ==================== Defense adjustments ====================


@dataclass(frozen=True, slots=True)
class Normal:
    """Damage passes through unchanged"""

    def adjust(self, raw: int) -> int:
        return raw

    @property
    def description(self) -> str:
        return "Normal"


@dataclass(frozen=True, slots=True)
class Absolute:
    """Shifts damage by a signed defense value.

    Positive values absorb damage, negative values add extra damage:
    ``Absolute(-1)`` turns 10 into 11.
    """
    delta: int

    def adjust(self, raw: int) -> int:
        return raw - self.delta

    @property
    def description(self) -> str:
        return f"{-self.delta:+d}"


@dataclass(frozen=True, slots=True)
class Percent:
    """Multiplies the damage, truncating toward zero"""
    multiplier: float

    def adjust(self, raw: int) -> int:
        return math.trunc(raw * self.multiplier)

    @property
    def description(self) -> str:
        return f"x{self.multiplier:g}"


DamageAdjustment = Normal | Absolute | Percent


def adjust_damage(adjustment: DamageAdjustment, raw: int) -> int:
    """Apply one defense rule to a raw damage amount."""
    if isinstance(adjustment, (Normal, Absolute, Percent)):
        return adjustment.adjust(raw)
    assert_never(adjustment)


@dataclass(frozen=True, slots=True)
class DefenseProps:
    """
    Full enemy defense profile.

    Every slot is always populated; an omitted slot defaults to ``Normal``.
    """
    wind: DamageAdjustment = field(default_factory=Normal)
    land: DamageAdjustment = field(default_factory=Normal)
    water: DamageAdjustment = field(default_factory=Normal)
    any: DamageAdjustment = field(default_factory=Normal)

    def slot_for(self, element: ElementType) -> DamageAdjustment:
        """Return the element-specific slot (NO_ELEMENT has none: Normal)."""
        if element is ElementType.WIND:
            return self.wind
        if element is ElementType.LAND:
            return self.land
        if element is ElementType.WATER:
            return self.water
        if element is ElementType.NO_ELEMENT:
            return Normal()
        assert_never(element)

    def resolve(self, damage: Damage) -> int:
        """
        Compute the damage actually taken.

        Args:
            damage: incoming damage event

        Returns:
            min(any-slot result, element-slot result)
        """
        any_branch = adjust_damage(self.any, damage.amount)
        element_branch = adjust_damage(self.slot_for(damage.element), damage.amount)
        actual = min(any_branch, element_branch)
        logger.debug(
            "Defense resolve %s: any=%d element=%d actual=%d",
            damage.description, any_branch, element_branch, actual,
        )
        return actual

    @property
    def description(self) -> str:
        return (
            f"Wind {self.wind.description}, Land {self.land.description}, "
            f"Water {self.water.description}, Any {self.any.description}"
        )


# ==================== Helpers ====================


def apply_shields(amount: int, shields: list[int] | tuple[int, ...]) -> int:
    """
    Subtract shield values from a damage amount in sequence.

    Each subtraction is clamped at zero, so shields never turn damage into
    healing.
    """
    for shield in shields:
        amount = max(0, amount - shield)
    return amount


def percent_of(hit_points: int, fraction: float) -> int:
    """Floor of ``hit_points * fraction``."""
    return math.floor(hit_points * fraction)
