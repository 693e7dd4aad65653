"""Card game exceptions.

Runtime play failures (unaffordable or forbidden cards) are never raised; they
resolve to "no effect". The classes here cover definition-time validation of
effects, cards and catalog data.
"""

from __future__ import annotations


class GameError(Exception):
    """Base class for every card game error.

    Carries a message plus an optional ``details`` dict describing the
    offending values.
    """

    def __init__(self, message: str, details: dict | None = None):
        """Create the error.

        Args:
            message: error message
            details: extra context (optional)
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== Effect definition errors ====================


class EffectDefinitionError(GameError):
    """An effect was declared with values the engine cannot resolve."""

    def __init__(self, message: str | None = None, effect: str | None = None):
        if message is None:
            message = "Invalid effect definition"
        details = {}
        if effect:
            details["effect"] = effect
        super().__init__(message, details)
        self.effect = effect


class InvalidPercentError(EffectDefinitionError):
    """Percent damage fraction outside [0, 1]."""

    def __init__(self, fraction: float, message: str | None = None):
        if message is None:
            message = f"Percent damage fraction must lie in [0, 1], got {fraction}"
        super().__init__(message, effect="PercentDamage")
        self.fraction = fraction
        self.details["fraction"] = fraction


class EffectTargetError(EffectDefinitionError):
    """A game effect targets an actor that cannot receive its payload."""

    def __init__(
        self,
        message: str | None = None,
        effect: str | None = None,
        target: str | None = None,
    ):
        if message is None:
            message = "Effect payload is incompatible with its target"
        super().__init__(message, effect=effect)
        self.target = target
        if target:
            self.details["target"] = target


# ==================== Card errors ====================


class CardDefinitionError(GameError):
    """A card was declared with invalid values."""

    def __init__(self, message: str | None = None, card_id: str | None = None):
        if message is None:
            message = "Invalid card definition"
        details = {}
        if card_id:
            details["card_id"] = card_id
        super().__init__(message, details)
        self.card_id = card_id


class DuplicateCardError(CardDefinitionError):
    """Two cards in one hand share an id."""

    def __init__(self, card_id: str, message: str | None = None):
        if message is None:
            message = f"Duplicate card id in hand: {card_id}"
        super().__init__(message, card_id=card_id)


# ==================== Catalog errors ====================


class CatalogError(GameError):
    """Catalog data could not be loaded or built."""

    def __init__(self, message: str | None = None, source: str | None = None):
        if message is None:
            message = "Catalog error"
        details = {}
        if source:
            details["source"] = source
        super().__init__(message, details)
        self.source = source


class UnknownEnemyError(CatalogError):
    """No enemy is registered under the requested name."""

    def __init__(self, name: str, message: str | None = None):
        if message is None:
            message = f"Unknown enemy: {name}"
        super().__init__(message)
        self.name = name
        self.details["name"] = name
