"""Element and target enums shared by every effect module."""

from enum import Enum


class ElementType(Enum):
    """Damage/affinity tag of a card or a damage event"""

    WIND = "wind"
    LAND = "land"
    WATER = "water"
    NO_ELEMENT = "no_element"  # physical damage; wildcard for cost enchantments

    @property
    def description(self) -> str:
        names = {
            ElementType.WIND: "Wind",
            ElementType.LAND: "Land",
            ElementType.WATER: "Water",
            ElementType.NO_ELEMENT: "No Elem",
        }
        return names[self]

    @property
    def color(self) -> str:
        """Display color used by the terminal UI"""
        colors = {
            ElementType.WIND: "cyan",
            ElementType.LAND: "yellow",
            ElementType.WATER: "blue",
            ElementType.NO_ELEMENT: "white",
        }
        return colors[self]


class EffectTarget(Enum):
    """Which actor a game effect is resolved against"""

    PLAYER = "player"
    ENEMY = "enemy"

    @property
    def description(self) -> str:
        return self.name

    @property
    def is_player(self) -> bool:
        return self is EffectTarget.PLAYER

    @property
    def is_enemy(self) -> bool:
        return self is EffectTarget.ENEMY
