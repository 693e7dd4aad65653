"""
Card game simulator core.

A deterministic player-vs-enemy card battle: an effect language (damage,
life/power adjustment, enchantments, conditional triggers, discards) folded
against immutable actor state, one turn at a time.
"""

from .card import PlayerCard
from .card_resolver import resolve_play
from .damage import Absolute, Damage, DefenseProps, Normal, Percent
from .effects import (
    Always, Conditional, DamageEffect, Discard, GameEffect, GrantEnchantment,
    HasCardWithElement, HasNoCardWithElement, LifeAdjPerTurn, LifeAdjust,
    PercentDamage, PlaysCardWithElement, PowerAddPerTurn, PowerAdjust,
    ShieldDamage, SkipTurn, SpellCostAdjust, SpellDamageAdjust, SpellElementForbidden,
)
from .enemy import Enemy
from .engine import Game, play_match, start, take_enemy_turn, take_player_turn
from .enums import EffectTarget, ElementType
from .player import Player
from .win_checker import GameOutcome, WinResult

__version__ = "0.3.0"

__all__ = [
    # effect model
    'ElementType', 'EffectTarget', 'Damage', 'DefenseProps', 'Normal', 'Absolute', 'Percent',
    'HasCardWithElement', 'HasNoCardWithElement', 'PlaysCardWithElement',
    'DamageEffect', 'LifeAdjust', 'PowerAdjust', 'PercentDamage', 'GrantEnchantment', 'SkipTurn',
    'SpellCostAdjust', 'SpellDamageAdjust', 'PowerAddPerTurn', 'ShieldDamage',
    'LifeAdjPerTurn', 'SpellElementForbidden',
    'Always', 'Conditional', 'Discard', 'GameEffect',
    # actors
    'PlayerCard', 'Player', 'Enemy',
    # resolution and turns
    'resolve_play', 'Game', 'GameOutcome', 'WinResult',
    'start', 'take_player_turn', 'take_enemy_turn', 'play_match',
]
