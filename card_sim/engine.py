"""
Turn engine.

A ``Game`` is an immutable match snapshot. ``start`` activates enchantments
once; ``take_player_turn`` and ``take_enemy_turn`` each build an ordered
effect list and fold it strictly left to right against the (enemy, player)
pair, every step seeing the result of the previous ones, then recompute the
outcome. Both turn operations return the snapshot unchanged once the match
is decided.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field, replace
from typing import assert_never

from .card import PlayerCard
from .card_resolver import resolve_play
from .config import get_config
from .effects import (
    Always,
    Conditional,
    Discard,
    Enchantment,
    GameEffect,
    GrantEnchantment,
)
from .enemy import Enemy
from .enums import EffectTarget
from .player import Player
from .win_checker import GameOutcome, check_game_result

logger = logging.getLogger(__name__)

ActorPair = tuple[Enemy, Player]


# ==================== Fold ====================


def fold_effects(actors: ActorPair, effect: GameEffect) -> ActorPair:
    """Resolve one effect; the actor it does not target passes through."""
    enemy, player = actors
    if effect.target is EffectTarget.PLAYER:
        return enemy, player.trigger_effect(effect.trigger, enemy)
    if effect.target is EffectTarget.ENEMY:
        return enemy.trigger_effect(effect.trigger, player), player
    assert_never(effect.target)


def run_effects(actors: ActorPair, effects: Iterable[GameEffect]) -> ActorPair:
    """Fold a sequence of effects left to right."""
    for effect in effects:
        logger.debug("Resolve %s", effect.description)
        actors = fold_effects(actors, effect)
    return actors


# ==================== Enchantment activation ====================


def activate_enchantments(
    declarations: Iterable[GameEffect],
    enemy: Enemy,
    player: Player,
) -> tuple[tuple[Enchantment, ...], tuple[Enchantment, ...]]:
    """
    Pick the enchantments that activate at game start.

    A declaration activates when it is unconditional or its condition holds
    right now (player side against the starting hand, enemy side through the
    enemy hook).

    Returns:
        (enemy enchantments, player enchantments)
    """
    enemy_side: list[Enchantment] = []
    player_side: list[Enchantment] = []
    for eff in declarations:
        trigger = eff.trigger
        if isinstance(trigger, Discard):
            continue
        if not isinstance(trigger.effect, GrantEnchantment):
            continue
        if isinstance(trigger, Conditional):
            cond = trigger.condition
            holds = cond.check_enemy(enemy) if eff.target.is_enemy else cond.check_player(player)
            if not holds:
                continue
        elif not isinstance(trigger, Always):
            assert_never(trigger)
        if eff.target.is_enemy:
            enemy_side.append(trigger.effect.enchantment)
        else:
            player_side.append(trigger.effect.enchantment)
    return tuple(enemy_side), tuple(player_side)


# ==================== Game ====================


@dataclass(frozen=True, slots=True)
class Game:
    """Match snapshot"""

    enemy: Enemy
    player: Player
    turn_number: int = 1
    outcome: GameOutcome = field(default_factory=GameOutcome.undecided)
    power_per_turn: int = 3

    @classmethod
    def start(cls, enemy: Enemy, player: Player, power_per_turn: int | None = None) -> Game:
        """
        Start a match.

        Scans the enemy's global enchantment declarations and every card's
        game-start effects once; the activated sets never change afterwards.
        """
        if power_per_turn is None:
            power_per_turn = get_config().power_per_turn

        declarations = list(enemy.enchantments)
        for card in player.cards:
            declarations.extend(card.game_start_effects)
        enemy_ench, player_ench = activate_enchantments(declarations, enemy, player)

        logger.info(
            "Game starting with global enchantments: enemy [%s] player [%s]",
            ", ".join(e.description for e in enemy_ench),
            ", ".join(e.description for e in player_ench),
        )
        return cls(
            enemy=replace(enemy, activated=enemy_ench),
            player=replace(player, activated=player_ench),
            turn_number=1,
            outcome=GameOutcome.undecided(),
            power_per_turn=power_per_turn,
        )

    @property
    def is_over(self) -> bool:
        return self.outcome.is_over

    def take_player_turn(self, cards: Iterable[PlayerCard]) -> Game:
        """
        Play one player turn.

        Args:
            cards: cards to attempt, in order; unaffordable, forbidden or
                unknown cards are skipped

        Returns:
            the next snapshot
        """
        if self.is_over:
            logger.debug("Player turn ignored: match already decided")
            return self

        enemy, player = self.enemy, self.player
        pool = player.power_for_turn(self.power_per_turn)
        player = replace(player, power_reserve=pool)

        play_effects: tuple[GameEffect, ...] = ()
        for requested in cards:
            card = player.find_card(requested.id)
            if card is None:
                logger.warning("Card not in hand, skipped: %s", requested.display_name)
                continue
            effects, spent = resolve_play(player, enemy, card, pool)
            pool -= spent
            play_effects += effects

        effects = (
            player.start_turn_effects()
            + enemy.player_start_turn_effects
            + play_effects
            + player.end_turn_effects()
        )
        enemy, player = run_effects((enemy, player), effects)

        outcome = check_game_result(enemy, player, self.turn_number)
        if outcome.is_over:
            logger.info(outcome.message)
        return replace(self, enemy=enemy, player=player, outcome=outcome)

    def take_enemy_turn(self) -> Game:
        """
        Play one enemy turn.

        The one-shot queue resolves first. A pending skip suppresses the
        attack phase. The skip flag and the queue are cleared whatever branch
        was taken, and the turn number advances.
        """
        if self.is_over:
            logger.debug("Enemy turn ignored: match already decided")
            return self

        enemy, player = run_effects((self.enemy, self.player), self.enemy.one_shot_effects)

        if enemy.skip_next_turn:
            logger.info("%s skips its turn", enemy.name)
        else:
            effects = enemy.start_turn(player) + enemy.end_turn(player)
            enemy, player = run_effects((enemy, player), effects)

        outcome = check_game_result(enemy, player, self.turn_number)
        if outcome.is_over:
            logger.info(outcome.message)
        return replace(
            self,
            enemy=enemy.clear_turn_state(),
            player=player,
            outcome=outcome,
            turn_number=self.turn_number + 1,
        )


# ==================== Module-level API ====================


def start(enemy: Enemy, player: Player) -> Game:
    return Game.start(enemy, player)


def take_player_turn(game: Game, cards: Iterable[PlayerCard]) -> Game:
    return game.take_player_turn(cards)


def take_enemy_turn(game: Game) -> Game:
    return game.take_enemy_turn()


def play_match(
    game: Game,
    choose_cards: Callable[[Game], Sequence[PlayerCard] | None],
    max_turns: int | None = None,
) -> Game:
    """
    Alternate player and enemy turns until the match is decided.

    Args:
        game: starting snapshot
        choose_cards: returns the cards to attempt this turn, or None to stop
        max_turns: optional cap on completed turns

    Returns:
        the last snapshot
    """
    while not game.is_over:
        if max_turns is not None and game.turn_number > max_turns:
            break
        cards = choose_cards(game)
        if cards is None:
            logger.info("Match stopped by driver on turn %d", game.turn_number)
            break
        game = game.take_player_turn(cards)
        if not game.is_over:
            game = game.take_enemy_turn()
    return game
