"""
Ready-made effect declarations used by the catalog and by deck files.

Grouped by who declares them: enemy effects, card play effects, enchantment
grants and on-play counter-effects.
"""

from __future__ import annotations

from .damage import Damage
from .effects import (
    Always,
    Conditional,
    DamageEffect,
    Discard,
    GameEffect,
    GrantEnchantment,
    HasCardWithElement,
    LifeAdjPerTurn,
    LifeAdjust,
    PercentDamage,
    PlaysCardWithElement,
    PowerAddPerTurn,
    PowerAdjust,
    ShieldDamage,
    SkipTurn,
    SpellCostAdjust,
    SpellDamageAdjust,
    SpellElementForbidden,
)
from .enemy import enemy_attack
from .enums import ElementType

__all__ = [
    "enemy_attack", "backlash_if_element_present", "thorns_on_element_played",
    "element_damage", "physical_damage", "percent_damage", "heal", "gain_power",
    "skip_enemy_turn", "discard_this_card",
    "spell_cost_adjust", "all_spells_cost_adjust", "power_add_per_turn",
    "shield", "spell_damage_bonus", "heal_per_turn", "spells_forbidden",
    "heal_enemy_on_element_played", "heal_player_on_element_played",
]


# ==================== Enemy effects ====================


def backlash_if_element_present(element: ElementType, amount: int) -> GameEffect:
    """Damage the player while the hand holds a card of the element"""
    return GameEffect.player(
        f"Enemy Backlash Attack ({element.description} Element)",
        Conditional(
            HasCardWithElement(element),
            DamageEffect(Damage(amount=amount, element=element)),
        ),
    )


def thorns_on_element_played(element: ElementType, amount: int) -> GameEffect:
    """Counter-effect: damage the player when a card of the element is played"""
    return GameEffect.player(
        f"Enemy Thorns Attack ({element.description} Element)",
        Conditional(
            PlaysCardWithElement(element),
            DamageEffect(Damage(amount=amount, element=element)),
        ),
    )


def heal_enemy_on_element_played(element: ElementType, amount: int) -> GameEffect:
    """Counter-effect: the enemy heals when a card of the element is played"""
    return GameEffect.enemy(
        f"Enemy Feeds On {element.description}",
        Conditional(PlaysCardWithElement(element), LifeAdjust(amount)),
    )


def heal_player_on_element_played(element: ElementType, amount: int) -> GameEffect:
    """Counter-effect: the player heals when a card of the element is played"""
    return GameEffect.player(
        f"{element.description} Relief",
        Conditional(PlaysCardWithElement(element), LifeAdjust(amount)),
    )


# ==================== Card play effects ====================


def element_damage(element: ElementType, amount: int) -> GameEffect:
    return GameEffect.enemy(
        f"{element.description} Damage",
        Always(DamageEffect(Damage(amount=amount, element=element))),
    )


def physical_damage(amount: int) -> GameEffect:
    return GameEffect.enemy("Physical Damage", Always(DamageEffect(Damage.raw(amount))))


def percent_damage(fraction: float) -> GameEffect:
    return GameEffect.enemy("Percent Damage", Always(PercentDamage(fraction)))


def heal(amount: int) -> GameEffect:
    return GameEffect.player("Heal", Always(LifeAdjust(amount)))


def gain_power(amount: int) -> GameEffect:
    return GameEffect.player("Gain Power", Always(PowerAdjust(amount)))


def skip_enemy_turn() -> GameEffect:
    return GameEffect.enemy("Skip Turn", Always(SkipTurn()))


def discard_this_card() -> GameEffect:
    """Discard marker; bound to the played card's id at resolution"""
    return GameEffect.player("Discard", Discard())


# ==================== Enchantment grants ====================


def _grant(name: str, enchantment) -> GameEffect:
    return GameEffect.player(name, Always(GrantEnchantment(enchantment)))


def spell_cost_adjust(element: ElementType, amount: int) -> GameEffect:
    return _grant(
        f"{element.description} Spells Cost {amount:+d}",
        SpellCostAdjust(element, amount),
    )


def all_spells_cost_adjust(amount: int) -> GameEffect:
    return _grant(
        f"All Spells Cost {amount:+d}",
        SpellCostAdjust(ElementType.NO_ELEMENT, amount),
    )


def power_add_per_turn(amount: int) -> GameEffect:
    return _grant(f"Power {amount:+d} Each Turn", PowerAddPerTurn(amount))


def shield(amount: int) -> GameEffect:
    return _grant(f"Shield {amount}", ShieldDamage(amount))


def spell_damage_bonus(element: ElementType, amount: int) -> GameEffect:
    return _grant(
        f"{element.description} Spells Damage {amount:+d}",
        SpellDamageAdjust(element, amount),
    )


def heal_per_turn(amount: int) -> GameEffect:
    return _grant(f"Heal {amount} Per Turn", LifeAdjPerTurn(amount))


def spells_forbidden(element: ElementType) -> GameEffect:
    return _grant(
        f"{element.description} Spells Forbidden",
        SpellElementForbidden(element),
    )
