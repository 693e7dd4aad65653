"""Tests for card_sim.catalog module."""

import pytest

from card_sim import catalog
from card_sim.config import GameConfig
from card_sim.effects import (
    LifeAdjPerTurn,
    PowerAddPerTurn,
    ShieldDamage,
    SpellCostAdjust,
    SpellDamageAdjust,
    SpellElementForbidden,
)
from card_sim.enemy import Enemy
from card_sim.enums import ElementType
from card_sim.exceptions import CatalogError, UnknownEnemyError
from card_sim.win_checker import WinResult

RULES = GameConfig(starting_hit_points=20, power_per_turn=3)


class TestEnemies:
    @pytest.mark.parametrize("slug", sorted(catalog.ENEMIES))
    def test_factory_builds_enemy(self, slug):
        enemy = catalog.get_enemy(slug)
        assert isinstance(enemy, Enemy)
        assert enemy.hit_points > 0
        assert enemy.name
        assert len(enemy.end_turn_effects) == 1

    def test_unknown_enemy(self):
        with pytest.raises(UnknownEnemyError) as exc_info:
            catalog.get_enemy("alien_invasion")
        assert exc_info.value.details["name"] == "alien_invasion"
        assert isinstance(exc_info.value, CatalogError)

    def test_blackout(self):
        enemy = catalog.blackout()
        assert enemy.name == "Electricity Blackout"
        assert enemy.hit_points == 20
        assert len(enemy.player_play_card_effects) == 1

    def test_meltdown_has_two_counters(self):
        assert len(catalog.meltdown().player_play_card_effects) == 2


class TestCards:
    @pytest.mark.parametrize("slug", sorted(catalog.CARDS))
    def test_fresh_ids(self, slug):
        factory = catalog.CARDS[slug]
        assert factory().id != factory().id

    @pytest.mark.parametrize("slug", [
        "env_suit", "power_amp", "helis", "hydro_power",
        "bulldozers", "wind_turbines", "military_aid", "solar_farm",
    ])
    def test_possession_cards_not_playable(self, slug):
        card = catalog.CARDS[slug]()
        assert card.can_play is False
        assert len(card.game_start_effects) == 1

    def test_starter_hand(self):
        names = [c.name for c in catalog.starter_hand()]
        assert names == ["Gust", "Stream", "First Aid", "Fire Hoses"]


class TestNewGame:
    def test_defaults(self):
        game = catalog.new_game(config=RULES)
        assert game.enemy.name == "Electricity Blackout"
        assert game.player.hit_points == 20
        assert len(game.player.cards) == 4
        assert game.power_per_turn == 3

    def test_config_applies(self):
        game = catalog.new_game("floods", config=GameConfig(starting_hit_points=15, power_per_turn=2))
        assert game.player.hit_points == 15
        assert game.power_per_turn == 2

    def test_unknown_slug(self):
        with pytest.raises(UnknownEnemyError):
            catalog.new_game("nope", config=RULES)

    @pytest.mark.parametrize("factory, expected", [
        (catalog.env_suit, ShieldDamage(2)),
        (catalog.power_amp, SpellDamageAdjust(ElementType.NO_ELEMENT, 2)),
        (catalog.helis, LifeAdjPerTurn(3)),
        (catalog.hydro_power, SpellDamageAdjust(ElementType.WATER, 3)),
        (catalog.military_aid, PowerAddPerTurn(1)),
        (catalog.solar_farm, SpellCostAdjust(ElementType.NO_ELEMENT, -1)),
    ])
    def test_possession_enchantments_activate(self, factory, expected):
        game = catalog.new_game("floods", hand=[factory()], config=RULES)
        assert game.player.activated == (expected,)

    def test_avalanche_forbids_water(self):
        stream = catalog.stream()
        game = catalog.new_game("avalanche", hand=[stream], config=RULES)
        assert game.player.activated == (SpellElementForbidden(ElementType.WATER),)
        after = game.take_player_turn([stream])
        assert after.enemy.hit_points == 10


class TestCatalogPlay:
    def test_blackout_thorns_on_water(self):
        stream = catalog.stream()
        game = catalog.new_game("blackout", hand=[stream], config=RULES)
        game = game.take_player_turn([stream])
        assert game.enemy.hit_points == 17
        assert game.player.hit_points == 19

    def test_blackout_resists_wind(self):
        gust = catalog.gust()
        game = catalog.new_game("blackout", hand=[gust], config=RULES)
        assert game.take_player_turn([gust]).enemy.hit_points == 18

    def test_tornado_immune_to_wind(self):
        gust = catalog.gust()
        game = catalog.new_game("tornado", hand=[gust], config=RULES)
        assert game.take_player_turn([gust]).enemy.hit_points == 10

    def test_inside_help_halves_enemy(self):
        card = catalog.inside_help()
        game = catalog.new_game("drought", hand=[card], config=RULES)
        game = game.take_player_turn([card])
        assert game.enemy.hit_points == 13
        assert game.player.cards == ()

    def test_power_surge(self):
        card = catalog.power_surge()
        game = catalog.new_game("floods", hand=[card], config=RULES)
        game = game.take_player_turn([card])
        assert game.player.power_reserve == 5
        assert game.player.cards == ()

    def test_solar_farm_discount(self):
        aid = catalog.first_aid()
        game = catalog.new_game("floods", hand=[catalog.solar_farm(), aid], config=RULES)
        game = game.take_player_turn([aid])
        assert game.player.hit_points == 28
        assert game.player.power_reserve == 2

    def test_power_amplifier_boosts_supply_chains(self):
        chains = catalog.logistics()
        assert chains.element is ElementType.NO_ELEMENT
        game = catalog.new_game("floods", hand=[catalog.power_amp(), chains], config=RULES)
        game = game.take_player_turn([chains])
        assert game.enemy.hit_points == 6

    def test_power_amplifier_ignores_elemental_spells(self):
        gust = catalog.gust()
        game = catalog.new_game("floods", hand=[catalog.power_amp(), gust], config=RULES)
        assert game.take_player_turn([gust]).enemy.hit_points == 9

    def test_military_aid_extra_power(self):
        game = catalog.new_game("floods", hand=[catalog.military_aid()], config=RULES)
        assert game.player.power_for_turn(game.power_per_turn) == 4

    def test_hydro_power_bonus(self):
        stream = catalog.stream()
        game = catalog.new_game("floods", hand=[catalog.hydro_power(), stream], config=RULES)
        assert game.take_player_turn([stream]).enemy.hit_points == 6

    def test_volcano_heals_on_water(self):
        stream = catalog.stream()
        game = catalog.new_game("volcano", hand=[stream], config=RULES)
        game = game.take_player_turn([stream])
        assert game.player.hit_points == 25
        assert game.outcome.result is WinResult.UNDECIDED
