"""Player cards.

A card is immutable; the ``with_*`` builders return a new card with one more
effect declared.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace

from .effects import GameEffect
from .enums import ElementType
from .exceptions import CardDefinitionError


def new_card_id() -> str:
    """Generate a unique card id"""
    return str(uuid.uuid4())


@dataclass(frozen=True, slots=True)
class PlayerCard:
    """A playable card owned by the player.

    Attributes:
        id: unique id within a hand
        name: card name
        element: element of the card
        power_cost: power spent to play it
        description: rules text
        can_play: False for possession-only cards
        game_start_effects: effects scanned once at game start (enchantments)
        start_turn_effects: effects folded at the start of every player turn
        play_card_effects: effects emitted when the card is played
    """

    name: str
    element: ElementType
    power_cost: int = 1
    description: str = ""
    can_play: bool = True
    id: str = field(default_factory=new_card_id)
    game_start_effects: tuple[GameEffect, ...] = ()
    start_turn_effects: tuple[GameEffect, ...] = ()
    play_card_effects: tuple[GameEffect, ...] = ()

    def __post_init__(self):
        if self.power_cost < 0:
            raise CardDefinitionError(
                f"{self.name}: power cost must be >= 0, got {self.power_cost}",
                card_id=self.id,
            )

    def cant_play(self) -> PlayerCard:
        return replace(self, can_play=False)

    def with_cost(self, power_cost: int) -> PlayerCard:
        return replace(self, power_cost=power_cost)

    def with_game_start_effect(self, effect: GameEffect) -> PlayerCard:
        return replace(self, game_start_effects=self.game_start_effects + (effect,))

    def with_start_turn_effect(self, effect: GameEffect) -> PlayerCard:
        return replace(self, start_turn_effects=self.start_turn_effects + (effect,))

    def with_play_effect(self, effect: GameEffect) -> PlayerCard:
        return replace(self, play_card_effects=self.play_card_effects + (effect,))

    @property
    def display_name(self) -> str:
        """Name with element and cost, e.g. ``Gust [Wind, 1]``"""
        return f"{self.name} [{self.element.description}, {self.power_cost}]"
