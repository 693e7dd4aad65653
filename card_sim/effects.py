"""
Effect vocabulary.

Tagged variants for conditions, effect payloads, enchantments and triggers,
plus ``GameEffect``, the atomic unit the turn engine folds against the
(enemy, player) pair. Every variant is an immutable dataclass; the unions
``EffectType``, ``Enchantment`` and ``EffectTrigger`` are closed so consumers
can dispatch exhaustively and finish with ``assert_never``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, assert_never

from .damage import Damage
from .enums import EffectTarget, ElementType
from .exceptions import EffectTargetError, InvalidPercentError

if TYPE_CHECKING:
    from .card import PlayerCard
    from .enemy import Enemy
    from .player import Player


# ==================== Conditions ====================


class EffectCondition(ABC):
    """
    Predicate gating a conditional effect.

    Two unrelated families exist. Hand-state conditions query the player's
    live hand (``check_player``); play-event conditions query the card being
    played right now (``check_card``). Each family answers False to the other
    family's question, so the two evaluation paths never mix.
    """

    element: ElementType

    @abstractmethod
    def check_player(self, player: Player) -> bool:
        """Evaluate against the player's current hand"""

    @abstractmethod
    def check_card(self, card: PlayerCard) -> bool:
        """Evaluate against the card currently being played"""

    def check_enemy(self, enemy: Enemy) -> bool:
        """Enemy-side hook; no condition gates on enemy state yet."""
        return True

    @property
    def is_play_event(self) -> bool:
        return False

    @property
    @abstractmethod
    def description(self) -> str:
        ...


@dataclass(frozen=True, slots=True)
class HasCardWithElement(EffectCondition):
    """The hand holds at least one card of the element"""
    element: ElementType

    def check_player(self, player: Player) -> bool:
        return any(card.element == self.element for card in player.cards)

    def check_card(self, card: PlayerCard) -> bool:
        return False

    @property
    def description(self) -> str:
        return f"HAS_ELEMENT [{self.element.description}]"


@dataclass(frozen=True, slots=True)
class HasNoCardWithElement(EffectCondition):
    """The hand holds no card of the element"""
    element: ElementType

    def check_player(self, player: Player) -> bool:
        return all(card.element != self.element for card in player.cards)

    def check_card(self, card: PlayerCard) -> bool:
        return False

    @property
    def description(self) -> str:
        return f"HAS_NO_ELEMENT [{self.element.description}]"


@dataclass(frozen=True, slots=True)
class PlaysCardWithElement(EffectCondition):
    """The card being played is of the element"""
    element: ElementType

    def check_player(self, player: Player) -> bool:
        return False

    def check_card(self, card: PlayerCard) -> bool:
        return card.element == self.element

    @property
    def is_play_event(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return f"PLAYS_SPELL_ELEMENT [{self.element.description}]"


# ==================== Enchantments ====================


@dataclass(frozen=True, slots=True)
class SpellCostAdjust:
    """Shifts the cost of spells of an element (NO_ELEMENT matches all)"""
    element: ElementType
    amount: int

    def matches(self, element: ElementType) -> bool:
        return self.element in (element, ElementType.NO_ELEMENT)

    @property
    def description(self) -> str:
        target = "All" if self.element is ElementType.NO_ELEMENT else self.element.description
        return f"{target} spells cost {self.amount:+d}"


@dataclass(frozen=True, slots=True)
class SpellDamageAdjust:
    """Spells of an element deal extra damage of that element"""
    element: ElementType
    amount: int

    def matches(self, element: ElementType) -> bool:
        return self.element == element

    @property
    def description(self) -> str:
        return f"Spell damage adjust {self.amount} [{self.element.description}]"


@dataclass(frozen=True, slots=True)
class PowerAddPerTurn:
    amount: int

    @property
    def description(self) -> str:
        return f"Power {self.amount:+d} each turn"


@dataclass(frozen=True, slots=True)
class ShieldDamage:
    amount: int

    @property
    def description(self) -> str:
        return f"Damage adjust -{self.amount} on attack"


@dataclass(frozen=True, slots=True)
class LifeAdjPerTurn:
    amount: int

    @property
    def description(self) -> str:
        return f"Each turn, adjust life by {self.amount}"


@dataclass(frozen=True, slots=True)
class SpellElementForbidden:
    element: ElementType

    def matches(self, element: ElementType) -> bool:
        return self.element == element

    @property
    def description(self) -> str:
        return f"{self.element.description} spells forbidden"


Enchantment = (
    SpellCostAdjust
    | SpellDamageAdjust
    | PowerAddPerTurn
    | ShieldDamage
    | LifeAdjPerTurn
    | SpellElementForbidden
)


# ==================== Effect payloads ====================


@dataclass(frozen=True, slots=True)
class DamageEffect:
    damage: Damage

    @property
    def description(self) -> str:
        return f"Damage [{self.damage.description}]"


@dataclass(frozen=True, slots=True)
class LifeAdjust:
    """Adds to hit points, uncapped in both directions"""
    amount: int

    @property
    def description(self) -> str:
        return f"Life {self.amount:+d}"


@dataclass(frozen=True, slots=True)
class PowerAdjust:
    """Adds to the player's power reserve"""
    amount: int

    @property
    def description(self) -> str:
        return f"Power {self.amount:+d}"


@dataclass(frozen=True, slots=True)
class PercentDamage:
    """Element-less damage equal to a fraction of the target's hit points"""
    fraction: float

    def __post_init__(self):
        if not 0.0 <= self.fraction <= 1.0:
            raise InvalidPercentError(self.fraction)

    @property
    def description(self) -> str:
        return f"Damage {self.fraction * 100:g}%"


@dataclass(frozen=True, slots=True)
class GrantEnchantment:
    """Carries an enchantment; only materialized by game-start activation"""
    enchantment: Enchantment

    @property
    def description(self) -> str:
        return f"Enchant [{self.enchantment.description}]"


@dataclass(frozen=True, slots=True)
class SkipTurn:
    @property
    def description(self) -> str:
        return "Skip Turn"


EffectType = (
    DamageEffect | LifeAdjust | PowerAdjust | PercentDamage | GrantEnchantment | SkipTurn
)


# ==================== Triggers ====================


@dataclass(frozen=True, slots=True)
class Always:
    effect: EffectType

    @property
    def description(self) -> str:
        return f"[ALWAYS] {self.effect.description}"


@dataclass(frozen=True, slots=True)
class Conditional:
    condition: EffectCondition
    effect: EffectType

    @property
    def description(self) -> str:
        return f"[COND - {self.condition.description}] {self.effect.description}"


@dataclass(frozen=True, slots=True)
class Discard:
    """Removes a card from the player's hand.

    Declared with an empty id on a card; the resolver binds it to the played
    card's concrete id.
    """
    card_id: str = ""

    @property
    def description(self) -> str:
        return f"Discard card id: {self.card_id}"


EffectTrigger = Always | Conditional | Discard


def trigger_payload(trigger: EffectTrigger) -> EffectType | None:
    """Return the payload a trigger would apply (None for Discard)."""
    if isinstance(trigger, (Always, Conditional)):
        return trigger.effect
    if isinstance(trigger, Discard):
        return None
    assert_never(trigger)


# ==================== GameEffect ====================


@dataclass(frozen=True, slots=True)
class GameEffect:
    """
    Atomic resolvable unit: a named trigger aimed at one actor.

    Raises:
        EffectTargetError: the target cannot receive the payload (discards and
            power changes only reach the player, skips only reach the enemy)
    """
    name: str
    target: EffectTarget
    trigger: EffectTrigger

    def __post_init__(self):
        payload = trigger_payload(self.trigger)
        if isinstance(self.trigger, Discard) and not self.target.is_player:
            raise EffectTargetError(
                f"{self.name}: discard can only target the player",
                effect="Discard", target=self.target.description,
            )
        if isinstance(payload, PowerAdjust) and not self.target.is_player:
            raise EffectTargetError(
                f"{self.name}: power adjustments can only target the player",
                effect="PowerAdjust", target=self.target.description,
            )
        if isinstance(payload, SkipTurn) and not self.target.is_enemy:
            raise EffectTargetError(
                f"{self.name}: skip turn can only target the enemy",
                effect="SkipTurn", target=self.target.description,
            )

    @classmethod
    def player(cls, name: str, trigger: EffectTrigger) -> GameEffect:
        return cls(name=name, target=EffectTarget.PLAYER, trigger=trigger)

    @classmethod
    def enemy(cls, name: str, trigger: EffectTrigger) -> GameEffect:
        return cls(name=name, target=EffectTarget.ENEMY, trigger=trigger)

    @property
    def payload(self) -> EffectType | None:
        return trigger_payload(self.trigger)

    @property
    def description(self) -> str:
        return (
            f"{self.name} - target [{self.target.description}] "
            f"effect [{self.trigger.description}]"
        )
