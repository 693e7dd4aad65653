"""
Built-in enemies and cards.

Enemies are disasters with elemental defenses; cards are the responses the
player holds. Every factory returns a fresh value (cards get fresh ids).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from . import effect_library as fx
from .card import PlayerCard
from .config import GameConfig, get_config
from .damage import Absolute, DefenseProps, Normal, Percent
from .enemy import Enemy
from .engine import Game
from .enums import ElementType
from .exceptions import UnknownEnemyError
from .player import Player

logger = logging.getLogger(__name__)

WIND = ElementType.WIND
LAND = ElementType.LAND
WATER = ElementType.WATER
NO_ELEMENT = ElementType.NO_ELEMENT


# ==================== Enemies ====================


def oil_spill() -> Enemy:
    return Enemy.create(
        "Oil Spill", 14,
        DefenseProps(water=Absolute(1), land=Absolute(-1)),
        turn_damage=3,
    )


def typhoon() -> Enemy:
    return Enemy.create(
        "Typhoon", 12,
        DefenseProps(wind=Percent(0.0), land=Absolute(-2)),
        turn_damage=4,
    )


def forest_fire() -> Enemy:
    return Enemy.create(
        "Forest Fire", 8,
        DefenseProps(water=Absolute(1), land=Percent(0.0)),
        turn_damage=8,
    ).with_player_play_card_effect(fx.heal_enemy_on_element_played(WIND, 1))


def landslide() -> Enemy:
    return Enemy.create("Landslide", 20, DefenseProps(any=Absolute(-1)), turn_damage=2)


def avalanche() -> Enemy:
    return Enemy.create("Avalanche", 10, DefenseProps(), turn_damage=7).with_enchantment(
        fx.spells_forbidden(WATER)
    )


def famine() -> Enemy:
    return Enemy.create(
        "Famine", 16, DefenseProps(water=Absolute(2)), turn_damage=5
    ).with_player_play_card_effect(fx.thorns_on_element_played(WIND, 1))


def earthquake() -> Enemy:
    return Enemy.create("Earthquake", 10, DefenseProps(), turn_damage=5).with_enchantment(
        fx.spells_forbidden(LAND)
    )


def volcano() -> Enemy:
    return Enemy.create(
        "Volcano Eruption", 5, DefenseProps(any=Absolute(-1)), turn_damage=8
    ).with_player_play_card_effect(fx.heal_player_on_element_played(WATER, 5))


def floods() -> Enemy:
    return Enemy.create("Floods", 12, DefenseProps(), turn_damage=5)


def drought() -> Enemy:
    return Enemy.create(
        "Drought", 25,
        DefenseProps(water=Absolute(1), land=Percent(0.0)),
        turn_damage=2,
    )


def tornado() -> Enemy:
    return Enemy.create("Tornado", 10, DefenseProps(wind=Percent(0.0)), turn_damage=6)


def meltdown() -> Enemy:
    return (
        Enemy.create("Nuclear Meltdown", 35, DefenseProps(), turn_damage=2)
        .with_player_play_card_effect(fx.thorns_on_element_played(WIND, 2))
        .with_player_play_card_effect(fx.heal_enemy_on_element_played(WIND, 1))
    )


def blackout() -> Enemy:
    return Enemy.create(
        "Electricity Blackout", 20, DefenseProps(wind=Absolute(1)), turn_damage=3
    ).with_player_play_card_effect(fx.thorns_on_element_played(WATER, 1))


ENEMIES: dict[str, Callable[[], Enemy]] = {
    "oil_spill": oil_spill,
    "typhoon": typhoon,
    "forest_fire": forest_fire,
    "landslide": landslide,
    "avalanche": avalanche,
    "famine": famine,
    "earthquake": earthquake,
    "volcano": volcano,
    "floods": floods,
    "drought": drought,
    "tornado": tornado,
    "meltdown": meltdown,
    "blackout": blackout,
}


def get_enemy(slug: str) -> Enemy:
    """Build the enemy registered under ``slug``.

    Raises:
        UnknownEnemyError: no such enemy
    """
    factory = ENEMIES.get(slug)
    if factory is None:
        raise UnknownEnemyError(slug)
    return factory()


# ==================== Starter cards ====================


def gust() -> PlayerCard:
    return PlayerCard(
        "Gust", WIND, power_cost=1, description="Play to cause 3 Wind Damage."
    ).with_play_effect(fx.element_damage(WIND, 3))


def stream() -> PlayerCard:
    return PlayerCard(
        "Stream", WATER, power_cost=1, description="Play to cause 3 Water Damage."
    ).with_play_effect(fx.element_damage(WATER, 3))


def first_aid() -> PlayerCard:
    return PlayerCard(
        "First Aid", LAND, power_cost=2, description="Play to heal 8 hit points."
    ).with_play_effect(fx.heal(8))


# ==================== Special cards ====================
# possession cards: their enchantment activates at game start


def env_suit() -> PlayerCard:
    return PlayerCard(
        "Environmental Suit", WATER,
        description="If you have this card in your hand, take 2 less damage",
    ).with_game_start_effect(fx.shield(2)).cant_play()


def power_amp() -> PlayerCard:
    return PlayerCard(
        "Power Amplifier", WIND,
        description="If you have this card in your hand, element-less spells do 2 more damage",
    ).with_game_start_effect(fx.spell_damage_bonus(NO_ELEMENT, 2)).cant_play()


def helis() -> PlayerCard:
    return PlayerCard(
        "Hospital Helicopters", WIND,
        description="If you have this card in your hand, heal 3 per turn",
    ).with_game_start_effect(fx.heal_per_turn(3)).cant_play()


def hydro_power() -> PlayerCard:
    return PlayerCard(
        "Hydroelectric Power", WATER,
        description="If you have this card in your hand, water spells do 3 more damage",
    ).with_game_start_effect(fx.spell_damage_bonus(WATER, 3)).cant_play()


def bulldozers() -> PlayerCard:
    return PlayerCard(
        "Heavy Bulldozers", LAND,
        description="If you have this card in your hand, land spells do 3 more damage",
    ).with_game_start_effect(fx.spell_damage_bonus(LAND, 3)).cant_play()


def wind_turbines() -> PlayerCard:
    return PlayerCard(
        "Wind Turbines", WIND,
        description="If you have this card in your hand, wind spells do 3 more damage",
    ).with_game_start_effect(fx.spell_damage_bonus(WIND, 3)).cant_play()


def military_aid() -> PlayerCard:
    return PlayerCard(
        "Military Aid", LAND,
        description="If you have this card in your hand, gain 1 extra power each turn",
    ).with_game_start_effect(fx.power_add_per_turn(1)).cant_play()


def solar_farm() -> PlayerCard:
    return PlayerCard(
        "Solar Farm", LAND,
        description="If you have this card in your hand, all spells cost 1 less",
    ).with_game_start_effect(fx.all_spells_cost_adjust(-1)).cant_play()


# one-shot cards: discarded after play


def time_slip() -> PlayerCard:
    return (
        PlayerCard(
            "Time Slip", WIND, power_cost=3,
            description="Discard this card and Skip Enemy Turn",
        )
        .with_play_effect(fx.skip_enemy_turn())
        .with_play_effect(fx.discard_this_card())
    )


def fire_breaks() -> PlayerCard:
    return (
        PlayerCard(
            "Fire Breaks", LAND, power_cost=2,
            description="Discard this card and Deal 6 Land Damage",
        )
        .with_play_effect(fx.element_damage(LAND, 6))
        .with_play_effect(fx.discard_this_card())
    )


def fire_hose() -> PlayerCard:
    return (
        PlayerCard(
            "Fire Hoses", WATER, power_cost=2,
            description="Discard this card and Deal 6 Water Damage",
        )
        .with_play_effect(fx.element_damage(WATER, 6))
        .with_play_effect(fx.discard_this_card())
    )


def jet_blast() -> PlayerCard:
    return (
        PlayerCard(
            "Jet Blast", WIND, power_cost=2,
            description="Discard this card and Deal 6 Wind Damage",
        )
        .with_play_effect(fx.element_damage(WIND, 6))
        .with_play_effect(fx.discard_this_card())
    )


def logistics() -> PlayerCard:
    return (
        PlayerCard(
            "Supply Chains", NO_ELEMENT, power_cost=2,
            description="Discard this card and Deal 4 Physical Damage",
        )
        .with_play_effect(fx.physical_damage(4))
        .with_play_effect(fx.discard_this_card())
    )


def inside_help() -> PlayerCard:
    return (
        PlayerCard(
            "Inside Help", WIND, power_cost=3,
            description="Discard this card and Cut Enemy Health in Half",
        )
        .with_play_effect(fx.percent_damage(0.5))
        .with_play_effect(fx.discard_this_card())
    )


def power_surge() -> PlayerCard:
    return (
        PlayerCard(
            "Power Surge", WATER, power_cost=1,
            description="Discard this card and gain 3 power for next turn",
        )
        .with_play_effect(fx.gain_power(3))
        .with_play_effect(fx.discard_this_card())
    )


CARDS: dict[str, Callable[[], PlayerCard]] = {
    "gust": gust,
    "stream": stream,
    "first_aid": first_aid,
    "env_suit": env_suit,
    "power_amp": power_amp,
    "helis": helis,
    "hydro_power": hydro_power,
    "bulldozers": bulldozers,
    "wind_turbines": wind_turbines,
    "military_aid": military_aid,
    "solar_farm": solar_farm,
    "time_slip": time_slip,
    "fire_breaks": fire_breaks,
    "fire_hose": fire_hose,
    "jet_blast": jet_blast,
    "logistics": logistics,
    "inside_help": inside_help,
    "power_surge": power_surge,
}


def starter_hand() -> list[PlayerCard]:
    """The default hand: Gust, Stream, First Aid, Fire Hoses"""
    return [gust(), stream(), first_aid(), fire_hose()]


def new_game(
    enemy_slug: str = "blackout",
    hand: Iterable[PlayerCard] | None = None,
    config: GameConfig | None = None,
) -> Game:
    """
    Build and start a match against a catalog enemy.

    Args:
        enemy_slug: key in ``ENEMIES``
        hand: player cards (defaults to ``starter_hand()``)
        config: rules configuration (defaults to the global config)

    Returns:
        the starting snapshot
    """
    config = config or get_config()
    enemy = get_enemy(enemy_slug)
    cards = tuple(hand) if hand is not None else tuple(starter_hand())
    player = Player(hit_points=config.starting_hit_points, cards=cards)
    logger.info("New game against %s with %d cards", enemy.name, len(cards))
    return Game.start(enemy, player, power_per_turn=config.power_per_turn)
