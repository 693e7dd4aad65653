"""Declarative deck and enemy files (pydantic validation models).

JSON files are validated by the models below, then converted into domain
objects. The validation layer is kept apart from the domain layer:

  - schema violations raise ``pydantic.ValidationError``
  - ``model_config = ConfigDict(extra="forbid")`` rejects unknown fields
  - domain rule violations and unreadable files raise ``CatalogError``

Example card::

    {
      "name": "Gust", "element": "wind", "power_cost": 1,
      "play": [{"target": "enemy",
                "effect": {"kind": "damage", "element": "wind", "amount": 3}}]
    }
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Union, assert_never

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .card import PlayerCard, new_card_id
from .damage import Absolute, Damage, DamageAdjustment, DefenseProps, Normal, Percent
from .effects import (
    Always,
    Conditional,
    DamageEffect,
    Discard,
    EffectCondition,
    EffectType,
    Enchantment,
    GameEffect,
    GrantEnchantment,
    HasCardWithElement,
    HasNoCardWithElement,
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
from .enemy import Enemy
from .enums import EffectTarget, ElementType
from .exceptions import CatalogError, GameError
from .player import Player

ElementName = Literal["wind", "land", "water", "no_element"]


class _Model(BaseModel):
    model_config = ConfigDict(extra="forbid")


# ====================================================================== #
#  Conditions                                                              #
# ====================================================================== #


class ConditionModel(_Model):
    kind: Literal["has_element", "has_no_element", "plays_element"]
    element: ElementName

    def to_domain(self) -> EffectCondition:
        element = ElementType(self.element)
        if self.kind == "has_element":
            return HasCardWithElement(element)
        if self.kind == "has_no_element":
            return HasNoCardWithElement(element)
        if self.kind == "plays_element":
            return PlaysCardWithElement(element)
        assert_never(self.kind)


# ====================================================================== #
#  Enchantments                                                            #
# ====================================================================== #


class SpellCostModel(_Model):
    kind: Literal["spell_cost"]
    element: ElementName = "no_element"
    amount: int


class SpellDamageModel(_Model):
    kind: Literal["spell_damage"]
    element: ElementName
    amount: int


class PowerPerTurnModel(_Model):
    kind: Literal["power_per_turn"]
    amount: int


class ShieldModel(_Model):
    kind: Literal["shield"]
    amount: int = Field(ge=0)


class LifePerTurnModel(_Model):
    kind: Literal["life_per_turn"]
    amount: int


class ForbiddenModel(_Model):
    kind: Literal["element_forbidden"]
    element: ElementName


EnchantmentModel = Annotated[
    Union[
        SpellCostModel, SpellDamageModel, PowerPerTurnModel,
        ShieldModel, LifePerTurnModel, ForbiddenModel,
    ],
    Field(discriminator="kind"),
]


def enchantment_to_domain(model: EnchantmentModel) -> Enchantment:
    if isinstance(model, SpellCostModel):
        return SpellCostAdjust(ElementType(model.element), model.amount)
    if isinstance(model, SpellDamageModel):
        return SpellDamageAdjust(ElementType(model.element), model.amount)
    if isinstance(model, PowerPerTurnModel):
        return PowerAddPerTurn(model.amount)
    if isinstance(model, ShieldModel):
        return ShieldDamage(model.amount)
    if isinstance(model, LifePerTurnModel):
        return LifeAdjPerTurn(model.amount)
    if isinstance(model, ForbiddenModel):
        return SpellElementForbidden(ElementType(model.element))
    assert_never(model)


# ====================================================================== #
#  Effect payloads                                                         #
# ====================================================================== #


class DamagePayload(_Model):
    kind: Literal["damage"]
    amount: int
    element: ElementName = "no_element"


class LifePayload(_Model):
    kind: Literal["life"]
    amount: int


class PowerPayload(_Model):
    kind: Literal["power"]
    amount: int


class PercentDamagePayload(_Model):
    kind: Literal["percent_damage"]
    fraction: float = Field(ge=0.0, le=1.0)


class EnchantmentPayload(_Model):
    kind: Literal["enchantment"]
    enchantment: EnchantmentModel


class SkipTurnPayload(_Model):
    kind: Literal["skip_turn"]


PayloadModel = Annotated[
    Union[
        DamagePayload, LifePayload, PowerPayload,
        PercentDamagePayload, EnchantmentPayload, SkipTurnPayload,
    ],
    Field(discriminator="kind"),
]


def payload_to_domain(model: PayloadModel) -> EffectType:
    if isinstance(model, DamagePayload):
        return DamageEffect(Damage(amount=model.amount, element=ElementType(model.element)))
    if isinstance(model, LifePayload):
        return LifeAdjust(model.amount)
    if isinstance(model, PowerPayload):
        return PowerAdjust(model.amount)
    if isinstance(model, PercentDamagePayload):
        return PercentDamage(model.fraction)
    if isinstance(model, EnchantmentPayload):
        return GrantEnchantment(enchantment_to_domain(model.enchantment))
    if isinstance(model, SkipTurnPayload):
        return SkipTurn()
    assert_never(model)


# ====================================================================== #
#  Game effects                                                            #
# ====================================================================== #


class EffectModel(_Model):
    name: str = ""
    target: Literal["player", "enemy"]
    trigger: Literal["always", "condition", "discard"] = "always"
    condition: ConditionModel | None = None
    effect: PayloadModel | None = None

    @model_validator(mode="after")
    def _check_trigger_fields(self) -> EffectModel:
        if self.trigger == "condition" and self.condition is None:
            raise ValueError("conditional effects need a condition")
        if self.trigger != "condition" and self.condition is not None:
            raise ValueError("condition given for a non-conditional trigger")
        if self.trigger != "discard" and self.effect is None:
            raise ValueError("effect payload is required")
        return self

    def to_domain(self) -> GameEffect:
        target = EffectTarget(self.target)
        if self.trigger == "discard":
            trigger = Discard()
        elif self.trigger == "condition":
            trigger = Conditional(self.condition.to_domain(), payload_to_domain(self.effect))
        else:
            trigger = Always(payload_to_domain(self.effect))
        name = self.name or self.trigger.capitalize()
        return GameEffect(name=name, target=target, trigger=trigger)


def _effects(models: list[EffectModel]) -> tuple[GameEffect, ...]:
    return tuple(m.to_domain() for m in models)


# ====================================================================== #
#  Cards and decks                                                         #
# ====================================================================== #


class CardModel(_Model):
    name: str = Field(min_length=1, max_length=50)
    element: ElementName
    power_cost: int = Field(default=1, ge=0)
    description: str = ""
    can_play: bool = True
    id: str | None = None
    game_start: list[EffectModel] = Field(default_factory=list)
    start_turn: list[EffectModel] = Field(default_factory=list)
    play: list[EffectModel] = Field(default_factory=list)

    def to_domain(self) -> PlayerCard:
        return PlayerCard(
            name=self.name,
            element=ElementType(self.element),
            power_cost=self.power_cost,
            description=self.description,
            can_play=self.can_play,
            id=self.id or new_card_id(),
            game_start_effects=_effects(self.game_start),
            start_turn_effects=_effects(self.start_turn),
            play_card_effects=_effects(self.play),
        )


class DeckModel(_Model):
    hit_points: int | None = Field(default=None, gt=0)
    cards: list[CardModel] = Field(min_length=1)

    def to_player(self, default_hit_points: int) -> Player:
        return Player(
            hit_points=self.hit_points or default_hit_points,
            cards=tuple(c.to_domain() for c in self.cards),
        )


# ====================================================================== #
#  Enemies                                                                 #
# ====================================================================== #


class AdjustmentModel(_Model):
    kind: Literal["normal", "absolute", "percent"] = "normal"
    value: float = 0

    def to_domain(self) -> DamageAdjustment:
        if self.kind == "normal":
            return Normal()
        if self.kind == "absolute":
            return Absolute(int(self.value))
        if self.kind == "percent":
            return Percent(self.value)
        assert_never(self.kind)


class DefenseModel(_Model):
    wind: AdjustmentModel = Field(default_factory=AdjustmentModel)
    land: AdjustmentModel = Field(default_factory=AdjustmentModel)
    water: AdjustmentModel = Field(default_factory=AdjustmentModel)
    any: AdjustmentModel = Field(default_factory=AdjustmentModel)

    def to_domain(self) -> DefenseProps:
        return DefenseProps(
            wind=self.wind.to_domain(),
            land=self.land.to_domain(),
            water=self.water.to_domain(),
            any=self.any.to_domain(),
        )


class EnemyModel(_Model):
    name: str = Field(min_length=1, max_length=50)
    hit_points: int = Field(gt=0)
    defense: DefenseModel = Field(default_factory=DefenseModel)
    turn_damage: int = Field(default=0, ge=0)
    start_turn: list[EffectModel] = Field(default_factory=list)
    end_turn: list[EffectModel] = Field(default_factory=list)
    player_start_turn: list[EffectModel] = Field(default_factory=list)
    player_play_card: list[EffectModel] = Field(default_factory=list)
    enchantments: list[EffectModel] = Field(default_factory=list)

    def to_domain(self) -> Enemy:
        enemy = Enemy.create(
            self.name, self.hit_points, self.defense.to_domain(), self.turn_damage
        )
        for eff in _effects(self.start_turn):
            enemy = enemy.with_start_turn_effect(eff)
        for eff in _effects(self.end_turn):
            enemy = enemy.with_end_turn_effect(eff)
        for eff in _effects(self.player_start_turn):
            enemy = enemy.with_player_start_turn_effect(eff)
        for eff in _effects(self.player_play_card):
            enemy = enemy.with_player_play_card_effect(eff)
        for eff in _effects(self.enchantments):
            enemy = enemy.with_enchantment(eff)
        return enemy


# ====================================================================== #
#  Loaders                                                                 #
# ====================================================================== #


def _read(path: str | Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Cannot read {path}: {exc}", source=str(path)) from exc


def load_deck(path: str | Path) -> DeckModel:
    """Validate a deck file.

    Raises:
        pydantic.ValidationError: schema violation
        CatalogError: unreadable file
    """
    return DeckModel.model_validate_json(_read(path))


def load_player(path: str | Path, default_hit_points: int) -> Player:
    """Load a deck file and build the player holding it."""
    deck = load_deck(path)
    try:
        return deck.to_player(default_hit_points)
    except GameError as exc:
        raise CatalogError(f"Invalid deck {path}: {exc}", source=str(path)) from exc


def load_enemy(path: str | Path) -> Enemy:
    """Load an enemy file.

    Raises:
        pydantic.ValidationError: schema violation
        CatalogError: unreadable file or invalid effect declarations
    """
    model = EnemyModel.model_validate_json(_read(path))
    try:
        return model.to_domain()
    except GameError as exc:
        raise CatalogError(f"Invalid enemy {path}: {exc}", source=str(path)) from exc
