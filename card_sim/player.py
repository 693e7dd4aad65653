"""
Player state.

Holds hit points, the carried power reserve, the ordered hand and the
enchantments activated at game start, and resolves incoming triggers against
itself. Every operation returns a new ``Player``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, assert_never

from .card import PlayerCard
from .damage import Damage, apply_shields, percent_of
from .effects import (
    Always,
    Conditional,
    DamageEffect,
    Discard,
    EffectTrigger,
    EffectType,
    Enchantment,
    GameEffect,
    GrantEnchantment,
    LifeAdjPerTurn,
    LifeAdjust,
    PercentDamage,
    PowerAddPerTurn,
    PowerAdjust,
    ShieldDamage,
    SkipTurn,
)
from .exceptions import DuplicateCardError

if TYPE_CHECKING:
    from .enemy import Enemy

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Player:
    """The player side of a match"""

    hit_points: int
    cards: tuple[PlayerCard, ...] = ()
    power_reserve: int = 0
    activated: tuple[Enchantment, ...] = ()

    def __post_init__(self):
        seen: set[str] = set()
        for card in self.cards:
            if card.id in seen:
                raise DuplicateCardError(card.id)
            seen.add(card.id)

    # ==================== Queries ====================

    def find_card(self, card_id: str) -> PlayerCard | None:
        for card in self.cards:
            if card.id == card_id:
                return card
        return None

    @property
    def is_defeated(self) -> bool:
        return self.hit_points <= 0

    def power_for_turn(self, base_grant: int) -> int:
        """Carried reserve + per-turn grant + active PowerAddPerTurn bonuses."""
        bonus = sum(e.amount for e in self.activated if isinstance(e, PowerAddPerTurn))
        return self.power_reserve + base_grant + bonus

    def start_turn_effects(self) -> tuple[GameEffect, ...]:
        """Start-of-turn effects of every card in hand, in hand order"""
        effects: tuple[GameEffect, ...] = ()
        for card in self.cards:
            effects += card.start_turn_effects
        return effects

    def end_turn_effects(self) -> tuple[GameEffect, ...]:
        """One heal per active LifeAdjPerTurn enchantment"""
        return tuple(
            GameEffect.player("Heal", Always(LifeAdjust(e.amount)))
            for e in self.activated
            if isinstance(e, LifeAdjPerTurn)
        )

    @property
    def description(self) -> str:
        enchantments = ", ".join(e.description for e in self.activated)
        return (
            f"HP [{self.hit_points}] Power [{self.power_reserve}]\n"
            f"  * Enchantment Effects [{enchantments}]"
        )

    # ==================== Resolution ====================

    def trigger_effect(self, trigger: EffectTrigger, enemy: Enemy) -> Player:
        """
        Resolve one incoming trigger against this player.

        Args:
            trigger: trigger to resolve
            enemy: opponent, consulted by conditions

        Returns:
            the updated player (``self`` when a condition fails)
        """
        if isinstance(trigger, Always):
            return self.apply_effect(trigger.effect)
        if isinstance(trigger, Conditional):
            cond = trigger.condition
            if cond.check_player(self) and cond.check_enemy(enemy):
                return self.apply_effect(trigger.effect)
            return self
        if isinstance(trigger, Discard):
            logger.info("Discarding %s", trigger.card_id)
            return replace(
                self, cards=tuple(c for c in self.cards if c.id != trigger.card_id)
            )
        assert_never(trigger)

    def apply_effect(self, effect: EffectType) -> Player:
        if isinstance(effect, DamageEffect):
            return self.take_damage(effect.damage)
        if isinstance(effect, LifeAdjust):
            logger.info("Player, %+d HP", effect.amount)
            return replace(self, hit_points=self.hit_points + effect.amount)
        if isinstance(effect, PowerAdjust):
            logger.debug("Player, %+d power", effect.amount)
            return replace(self, power_reserve=self.power_reserve + effect.amount)
        if isinstance(effect, PercentDamage):
            return self.take_damage(Damage.raw(percent_of(self.hit_points, effect.fraction)))
        if isinstance(effect, GrantEnchantment):
            # materialized only by game-start activation
            return self
        if isinstance(effect, SkipTurn):
            return self
        assert_never(effect)

    def take_damage(self, damage: Damage) -> Player:
        shields = [e.amount for e in self.activated if isinstance(e, ShieldDamage)]
        amount = apply_shields(damage.amount, shields)
        logger.info("Player takes damage: %s/%d", damage.element.description, amount)
        return replace(self, hit_points=self.hit_points - amount)
