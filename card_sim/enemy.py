"""
Enemy state.

Besides hit points and defenses the enemy declares several effect lists:
its own start/end-of-turn effects (the end list carries the base attack),
effects imposed at the start of every player turn, counter-effects fired by
the player playing a card of a given element, and global enchantment
declarations activated at game start. ``one_shot_effects`` is the only
transient field: it is drained and cleared every enemy turn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, assert_never

from .damage import Damage, DefenseProps, percent_of
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
    PowerAdjust,
    SkipTurn,
)
from .enums import ElementType

if TYPE_CHECKING:
    from .player import Player

logger = logging.getLogger(__name__)


def enemy_attack(amount: int) -> GameEffect:
    """Base attack: physical damage to the player"""
    return GameEffect.player(
        "Enemy Attack",
        Always(DamageEffect(Damage(amount=amount, element=ElementType.NO_ELEMENT))),
    )


@dataclass(frozen=True, slots=True)
class Enemy:
    """The enemy side of a match"""

    name: str
    hit_points: int
    defense_props: DefenseProps = field(default_factory=DefenseProps)
    skip_next_turn: bool = False
    start_turn_effects: tuple[GameEffect, ...] = ()
    end_turn_effects: tuple[GameEffect, ...] = ()
    one_shot_effects: tuple[GameEffect, ...] = ()
    player_start_turn_effects: tuple[GameEffect, ...] = ()
    player_play_card_effects: tuple[GameEffect, ...] = ()
    enchantments: tuple[GameEffect, ...] = ()
    activated: tuple[Enchantment, ...] = ()

    @classmethod
    def create(
        cls,
        name: str,
        hit_points: int,
        defense_props: DefenseProps | None = None,
        turn_damage: int = 0,
    ) -> Enemy:
        """Build an enemy whose end-of-turn list holds its base attack."""
        end_turn = (enemy_attack(turn_damage),) if turn_damage else ()
        return cls(
            name=name,
            hit_points=hit_points,
            defense_props=defense_props or DefenseProps(),
            end_turn_effects=end_turn,
        )

    # ==================== Builders ====================

    def with_start_turn_effect(self, effect: GameEffect) -> Enemy:
        return replace(self, start_turn_effects=self.start_turn_effects + (effect,))

    def with_end_turn_effect(self, effect: GameEffect) -> Enemy:
        return replace(self, end_turn_effects=self.end_turn_effects + (effect,))

    def with_player_start_turn_effect(self, effect: GameEffect) -> Enemy:
        return replace(
            self, player_start_turn_effects=self.player_start_turn_effects + (effect,)
        )

    def with_player_play_card_effect(self, effect: GameEffect) -> Enemy:
        return replace(
            self, player_play_card_effects=self.player_play_card_effects + (effect,)
        )

    def with_enchantment(self, effect: GameEffect) -> Enemy:
        return replace(self, enchantments=self.enchantments + (effect,))

    # ==================== Turn effects ====================

    @property
    def is_defeated(self) -> bool:
        return self.hit_points <= 0

    def start_turn(self, player: Player) -> tuple[GameEffect, ...]:
        regen = tuple(
            GameEffect.enemy("Enemy Regeneration", Always(LifeAdjust(e.amount)))
            for e in self.activated
            if isinstance(e, LifeAdjPerTurn)
        )
        return self.start_turn_effects + regen

    def end_turn(self, player: Player) -> tuple[GameEffect, ...]:
        return self.end_turn_effects

    def clear_turn_state(self) -> Enemy:
        """Drop the skip flag and the one-shot queue."""
        return replace(self, skip_next_turn=False, one_shot_effects=())

    @property
    def description(self) -> str:
        def _join(effects) -> str:
            return ", ".join(e.description for e in effects)

        return (
            f"{self.name} - HP [{self.hit_points}]\n"
            f"  * Defense [{self.defense_props.description}]\n"
            f"  * Start Turn Effects [{_join(self.start_turn_effects)}]\n"
            f"  * End Turn Effects [{_join(self.end_turn_effects)}]\n"
            f"  * Player Start Turn Effects [{_join(self.player_start_turn_effects)}]\n"
            f"  * Player Play Card Effects [{_join(self.player_play_card_effects)}]\n"
            f"  * Current Enchantments [{_join(self.activated)}]"
        )

    # ==================== Resolution ====================

    def trigger_effect(self, trigger: EffectTrigger, player: Player) -> Enemy:
        """
        Resolve one incoming trigger against this enemy.

        Args:
            trigger: trigger to resolve
            player: opponent, consulted by conditions

        Returns:
            the updated enemy (``self`` when a condition fails)
        """
        if isinstance(trigger, Always):
            return self.apply_effect(trigger.effect)
        if isinstance(trigger, Conditional):
            cond = trigger.condition
            if cond.check_enemy(self) and cond.check_player(player):
                return self.apply_effect(trigger.effect)
            return self
        if isinstance(trigger, Discard):
            # enemies hold no cards
            return self
        assert_never(trigger)

    def apply_effect(self, effect: EffectType) -> Enemy:
        if isinstance(effect, DamageEffect):
            return self.take_damage(effect.damage)
        if isinstance(effect, LifeAdjust):
            logger.info("Enemy, %+d HP", effect.amount)
            return replace(self, hit_points=self.hit_points + effect.amount)
        if isinstance(effect, PercentDamage):
            return self.take_damage(Damage.raw(percent_of(self.hit_points, effect.fraction)))
        if isinstance(effect, SkipTurn):
            logger.info("Enemy has to skip next turn")
            marker = GameEffect.enemy("Skip Turn", Always(SkipTurn()))
            return replace(
                self,
                skip_next_turn=True,
                one_shot_effects=self.one_shot_effects + (marker,),
            )
        if isinstance(effect, PowerAdjust):
            # no power pool on this side
            return self
        if isinstance(effect, GrantEnchantment):
            return self
        assert_never(effect)

    def take_damage(self, damage: Damage) -> Enemy:
        actual = self.defense_props.resolve(damage)
        logger.info(
            "Enemy takes damage: %s/%d (%d actual)",
            damage.element.description, damage.amount, actual,
        )
        return replace(self, hit_points=self.hit_points - actual)
