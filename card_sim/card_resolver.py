"""
Card-play resolution.

Turns one card request into the ordered effect list it produces:

1. the player's activated enchantments are folded over a working copy of the
   card (cost shifts, extra damage, forbidden elements);
2. playability and affordability are checked, all-or-nothing;
3. the emitted list is the power debit, the card's own play effects (with
   discard markers bound to the card id), then every enemy counter-effect
   fired by playing a card of this element.

The order matters: the turn engine folds the list left to right, so
counter-effects observe whatever the card's own effects already did.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, assert_never

from .card import PlayerCard
from .damage import Damage
from .effects import (
    Always,
    Conditional,
    DamageEffect,
    Discard,
    Enchantment,
    GameEffect,
    LifeAdjPerTurn,
    PowerAddPerTurn,
    PowerAdjust,
    ShieldDamage,
    SpellCostAdjust,
    SpellDamageAdjust,
    SpellElementForbidden,
)

if TYPE_CHECKING:
    from .enemy import Enemy
    from .player import Player

logger = logging.getLogger(__name__)

MIN_ADJUSTED_COST = 1


def apply_enchantment(card: PlayerCard, enchantment: Enchantment) -> PlayerCard:
    """Apply one activated enchantment to a working copy of a card."""
    if isinstance(enchantment, SpellCostAdjust):
        if enchantment.matches(card.element):
            cost = max(MIN_ADJUSTED_COST, card.power_cost + enchantment.amount)
            return replace(card, power_cost=cost)
        return card
    if isinstance(enchantment, SpellDamageAdjust):
        if enchantment.matches(card.element):
            bonus = GameEffect.enemy(
                "Spell Damage Adjust Effect",
                Always(DamageEffect(Damage(amount=enchantment.amount, element=enchantment.element))),
            )
            return card.with_play_effect(bonus)
        return card
    if isinstance(enchantment, SpellElementForbidden):
        if enchantment.matches(card.element):
            return replace(card, can_play=False)
        return card
    if isinstance(enchantment, (PowerAddPerTurn, ShieldDamage, LifeAdjPerTurn)):
        return card
    assert_never(enchantment)


def enchant_card(player: Player, card: PlayerCard) -> PlayerCard:
    """Fold every activated enchantment of the player over the card."""
    for enchantment in player.activated:
        card = apply_enchantment(card, enchantment)
    return card


def bind_play_effects(card: PlayerCard) -> tuple[GameEffect, ...]:
    """The card's play effects with discard markers bound to its id."""
    return tuple(
        GameEffect.player("Discard", Discard(card.id))
        if isinstance(eff.trigger, Discard)
        else eff
        for eff in card.play_card_effects
    )


def counter_effects(enemy: Enemy, card: PlayerCard) -> tuple[GameEffect, ...]:
    """
    Enemy counter-effects fired by playing this specific card.

    Only declarations gated by a play-event condition take part; the
    condition is checked against the card, never the hand. The fired effect
    keeps the target the enemy declared.
    """
    fired: list[GameEffect] = []
    for eff in enemy.player_play_card_effects:
        trigger = eff.trigger
        if not isinstance(trigger, Conditional):
            continue
        if not (trigger.condition.is_play_event and trigger.condition.check_card(card)):
            continue
        logger.info(
            "Player causes counter effect on %s due to casting spell of element %s: %s",
            eff.target.description, card.element.description, trigger.effect.description,
        )
        fired.append(replace(eff, trigger=Always(trigger.effect)))
    return tuple(fired)


def resolve_play(
    player: Player,
    enemy: Enemy,
    card: PlayerCard,
    available_power: int,
) -> tuple[tuple[GameEffect, ...], int]:
    """
    Resolve one card play.

    Args:
        player: the player (source of activated enchantments)
        enemy: the enemy (source of counter-effects)
        card: the card being played
        available_power: power left in this turn's pool

    Returns:
        (effects, power_spent); ``((), 0)`` when the card cannot be played
    """
    if not card.can_play:
        logger.info("Cannot play card: %s", card.name)
        return (), 0

    working = enchant_card(player, card)

    if not working.can_play:
        logger.info("Cannot play card: %s (element forbidden)", card.name)
        return (), 0
    if available_power < working.power_cost:
        logger.info(
            "Cannot play card: %s (cost %d, power %d)",
            card.name, working.power_cost, available_power,
        )
        return (), 0

    logger.info("Play card: %s", working.display_name)
    debit = GameEffect.player("Power Cost", Always(PowerAdjust(-working.power_cost)))
    effects = (debit,) + bind_play_effects(working) + counter_effects(enemy, working)
    return effects, working.power_cost
