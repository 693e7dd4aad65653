"""Tests for card_sim.engine module: match start, turns and the fold."""

import pytest

from card_sim import catalog
from card_sim import effect_library as fx
from card_sim.card import PlayerCard
from card_sim.config import reset_config
from card_sim.damage import Damage, DefenseProps
from card_sim.effects import (
    Always,
    Conditional,
    DamageEffect,
    Discard,
    GameEffect,
    GrantEnchantment,
    HasCardWithElement,
    LifeAdjPerTurn,
    LifeAdjust,
    ShieldDamage,
    SpellElementForbidden,
)
from card_sim.enemy import Enemy
from card_sim.engine import (
    Game,
    activate_enchantments,
    fold_effects,
    play_match,
    run_effects,
    start,
    take_enemy_turn,
    take_player_turn,
)
from card_sim.enums import ElementType
from card_sim.player import Player
from card_sim.win_checker import GameOutcome, WinResult

WIND = ElementType.WIND
LAND = ElementType.LAND
WATER = ElementType.WATER


def _gust() -> PlayerCard:
    return PlayerCard("Gust", WIND, power_cost=1).with_play_effect(fx.element_damage(WIND, 3))


def _dummy(hp: int = 10, attack: int = 3) -> Enemy:
    return Enemy.create("Dummy", hp, DefenseProps(), turn_damage=attack)


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    monkeypatch.delenv("CARD_SIM_POWER_PER_TURN", raising=False)
    reset_config()
    yield
    reset_config()


# ==================== Fold ====================

class TestFold:
    def test_fold_targets_one_actor(self):
        enemy, player = _dummy(), Player(20)
        hit = GameEffect.enemy("Hit", Always(DamageEffect(Damage(4))))
        new_enemy, new_player = fold_effects((enemy, player), hit)
        assert new_enemy.hit_points == 6
        assert new_player is player

    def test_run_effects_left_to_right(self):
        # the conditional heal sees the card the previous step left in hand
        water = PlayerCard("Stream", WATER, id="w")
        player = Player(10, cards=(water,))
        effects = [
            GameEffect.player(
                "Heal If Water", Conditional(HasCardWithElement(WATER), LifeAdjust(5))
            ),
            GameEffect.player("Discard", Discard("w")),
            GameEffect.player(
                "Heal If Water", Conditional(HasCardWithElement(WATER), LifeAdjust(5))
            ),
        ]
        _, after = run_effects((_dummy(), player), effects)
        assert after.hit_points == 15
        assert after.cards == ()


# ==================== Start ====================

class TestStart:
    def test_initial_snapshot(self):
        game = Game.start(_dummy(), Player(20), power_per_turn=3)
        assert game.turn_number == 1
        assert game.outcome == GameOutcome.undecided()
        assert game.power_per_turn == 3

    def test_module_start_uses_config(self, monkeypatch):
        monkeypatch.setenv("CARD_SIM_POWER_PER_TURN", "5")
        reset_config()
        game = start(_dummy(), Player(20))
        assert game.power_per_turn == 5

    def test_card_enchantments_activate(self):
        suit = catalog.env_suit()
        game = Game.start(_dummy(), Player(20, cards=(suit,)), power_per_turn=3)
        assert game.player.activated == (ShieldDamage(2),)

    def test_enemy_declared_player_enchantment(self):
        enemy = _dummy().with_enchantment(fx.spells_forbidden(WATER))
        game = Game.start(enemy, Player(20), power_per_turn=3)
        assert game.player.activated == (SpellElementForbidden(WATER),)
        assert game.enemy.activated == ()

    def test_enemy_side_enchantment(self):
        regen = GameEffect.enemy("Regen", Always(GrantEnchantment(LifeAdjPerTurn(2))))
        game = Game.start(_dummy().with_enchantment(regen), Player(20), power_per_turn=3)
        assert game.enemy.activated == (LifeAdjPerTurn(2),)

    def test_conditional_declaration_checked_against_starting_hand(self):
        declared = GameEffect.player(
            "Land Shield", Conditional(HasCardWithElement(LAND), GrantEnchantment(ShieldDamage(1)))
        )
        card = PlayerCard("Charm", WIND).with_game_start_effect(declared)
        game = Game.start(_dummy(), Player(20, cards=(card,)), power_per_turn=3)
        assert game.player.activated == ()

        land = PlayerCard("Rock", LAND)
        game = Game.start(_dummy(), Player(20, cards=(card, land)), power_per_turn=3)
        assert game.player.activated == (ShieldDamage(1),)

    def test_activate_enchantments_skips_non_grants(self):
        enemy, player = _dummy(), Player(20)
        declarations = [fx.heal(3), fx.shield(1)]
        assert activate_enchantments(declarations, enemy, player) == ((), (ShieldDamage(1),))


# ==================== Player turn ====================

class TestPlayerTurn:
    def test_reference_scenario(self):
        gust = _gust()
        game = Game.start(_dummy(10, 3), Player(20, cards=(gust,)), power_per_turn=3)
        game = take_player_turn(game, [gust])
        game = take_enemy_turn(game)
        assert game.enemy.hit_points == 7
        assert game.player.hit_points == 17
        assert game.turn_number == 2
        assert game.outcome.result is WinResult.UNDECIDED

    def test_leftover_power_carries_over(self):
        gust = _gust()
        game = Game.start(_dummy(), Player(20, cards=(gust,)), power_per_turn=3)
        game = game.take_player_turn([gust])
        assert game.player.power_reserve == 2
        game = game.take_enemy_turn()
        assert game.player.power_for_turn(game.power_per_turn) == 5

    def test_same_card_played_twice(self):
        gust = _gust()
        game = Game.start(_dummy(), Player(20, cards=(gust,)), power_per_turn=3)
        game = game.take_player_turn([gust, gust])
        assert game.enemy.hit_points == 4
        assert game.player.power_reserve == 1

    def test_unaffordable_card_skipped(self):
        big = PlayerCard("Big", WIND, power_cost=5).with_play_effect(fx.element_damage(WIND, 9))
        game = Game.start(_dummy(), Player(20, cards=(big,)), power_per_turn=3)
        game = game.take_player_turn([big])
        assert game.enemy.hit_points == 10
        assert game.player.power_reserve == 3

    def test_card_not_in_hand_skipped(self):
        game = Game.start(_dummy(), Player(20, cards=(_gust(),)), power_per_turn=3)
        game = game.take_player_turn([_gust()])
        assert game.enemy.hit_points == 10

    def test_requests_resolve_against_turn_start_hand(self):
        # a one-shot card requested twice is paid and resolved twice
        hose = catalog.fire_hose()
        game = Game.start(_dummy(30), Player(20, cards=(hose,)), power_per_turn=4)
        game = game.take_player_turn([hose, hose])
        assert game.enemy.hit_points == 18
        assert game.player.power_reserve == 0
        assert game.player.cards == ()

    def test_simultaneous_knockout(self):
        gust = _gust()
        enemy = _dummy(3).with_player_play_card_effect(fx.thorns_on_element_played(WIND, 1))
        game = Game.start(enemy, Player(1, cards=(gust,)), power_per_turn=3)
        game = game.take_player_turn([gust])
        assert game.enemy.hit_points <= 0
        assert game.player.hit_points <= 0
        assert game.outcome == GameOutcome.enemy_wins(1)

    def test_player_win(self):
        gust = _gust()
        game = Game.start(_dummy(3), Player(20, cards=(gust,)), power_per_turn=3)
        game = game.take_player_turn([gust])
        assert game.outcome == GameOutcome.player_wins(1)

    def test_enchantment_survives_discard(self):
        suit = (
            PlayerCard("Suit", WATER, power_cost=0)
            .with_game_start_effect(fx.shield(2))
            .with_play_effect(fx.discard_this_card())
        )
        game = Game.start(_dummy(10, 3), Player(20, cards=(suit,)), power_per_turn=3)
        game = game.take_player_turn([suit])
        assert game.player.cards == ()
        assert game.player.activated == (ShieldDamage(2),)
        game = game.take_enemy_turn()
        assert game.player.hit_points == 19

    def test_enemy_imposed_start_effects(self):
        stream = PlayerCard("Stream", WATER)
        enemy = _dummy().with_player_start_turn_effect(fx.backlash_if_element_present(WATER, 2))
        game = Game.start(enemy, Player(20, cards=(stream,)), power_per_turn=3)
        game = game.take_player_turn([])
        assert game.player.hit_points == 18

    def test_card_start_turn_effects(self):
        charm = PlayerCard("Charm", LAND).with_start_turn_effect(fx.heal(1))
        game = Game.start(_dummy(), Player(20, cards=(charm,)), power_per_turn=3)
        assert game.take_player_turn([]).player.hit_points == 21

    def test_heal_per_turn_at_end(self):
        game = Game.start(_dummy(), Player(20, cards=(catalog.helis(),)), power_per_turn=3)
        assert game.take_player_turn([]).player.hit_points == 23

    def test_forbidden_element_no_effect(self):
        stream = catalog.stream()
        enemy = _dummy().with_enchantment(fx.spells_forbidden(WATER))
        game = Game.start(enemy, Player(20, cards=(stream,)), power_per_turn=3)
        game = game.take_player_turn([stream])
        assert game.enemy.hit_points == 10
        assert game.player.power_reserve == 3

    def test_snapshot_unchanged(self):
        gust = _gust()
        game = Game.start(_dummy(), Player(20, cards=(gust,)), power_per_turn=3)
        game.take_player_turn([gust])
        assert game.enemy.hit_points == 10
        assert game.player.power_reserve == 0


# ==================== Enemy turn ====================

class TestEnemyTurn:
    def test_attack_and_turn_advance(self):
        game = Game.start(_dummy(10, 4), Player(20), power_per_turn=3)
        game = game.take_enemy_turn()
        assert game.player.hit_points == 16
        assert game.turn_number == 2

    def test_skip_turn(self):
        slip = catalog.time_slip()
        game = Game.start(_dummy(10, 4), Player(20, cards=(slip,)), power_per_turn=3)
        game = game.take_player_turn([slip])
        assert game.enemy.skip_next_turn is True
        assert game.player.cards == ()

        game = game.take_enemy_turn()
        assert game.player.hit_points == 20
        assert game.turn_number == 2
        assert game.enemy.skip_next_turn is False
        assert game.enemy.one_shot_effects == ()

        game = game.take_player_turn([]).take_enemy_turn()
        assert game.player.hit_points == 16

    def test_enemy_regeneration(self):
        regen = GameEffect.enemy("Regen", Always(GrantEnchantment(LifeAdjPerTurn(2))))
        game = Game.start(_dummy(10, 0).with_enchantment(regen), Player(20), power_per_turn=3)
        assert game.take_enemy_turn().enemy.hit_points == 12

    def test_enemy_knocks_out_player(self):
        game = Game.start(_dummy(10, 5), Player(5), power_per_turn=3)
        game = game.take_enemy_turn()
        assert game.outcome == GameOutcome.enemy_wins(1)
        assert game.turn_number == 2


# ==================== Terminal guard ====================

class TestTerminalGuard:
    def test_turns_are_noops_once_decided(self):
        gust = _gust()
        game = Game.start(_dummy(3), Player(20, cards=(gust,)), power_per_turn=3)
        game = game.take_player_turn([gust])
        assert game.is_over
        assert game.take_player_turn([gust]) is game
        assert game.take_enemy_turn() is game


# ==================== play_match ====================

class TestPlayMatch:
    def test_plays_until_decided(self):
        gust = _gust()
        game = Game.start(_dummy(10, 3), Player(20, cards=(gust,)), power_per_turn=3)
        final = play_match(game, lambda g: [gust])
        assert final.outcome == GameOutcome.player_wins(4)
        assert final.player.hit_points == 11

    def test_chooser_can_stop(self):
        game = Game.start(_dummy(), Player(20), power_per_turn=3)
        assert play_match(game, lambda g: None) is game

    def test_max_turns(self):
        game = Game.start(_dummy(10, 1), Player(20), power_per_turn=3)
        final = play_match(game, lambda g: [], max_turns=3)
        assert final.turn_number == 4
        assert final.player.hit_points == 17
        assert not final.is_over
