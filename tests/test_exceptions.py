"""Tests for card_sim.exceptions module."""

import pytest

from card_sim.exceptions import (
    CardDefinitionError,
    CatalogError,
    DuplicateCardError,
    EffectDefinitionError,
    EffectTargetError,
    GameError,
    InvalidPercentError,
    UnknownEnemyError,
)

# ==================== GameError base ====================

class TestGameError:
    def test_basic(self):
        e = GameError("test")
        assert e.message == "test"
        assert e.details == {}
        assert str(e) == "test"

    def test_with_details(self):
        e = GameError("err", details={"key": "val"})
        assert e.details == {"key": "val"}
        assert str(e) == "err | Details: {'key': 'val'}"

    def test_is_exception(self):
        with pytest.raises(GameError):
            raise GameError("boom")


# ==================== Effect definition errors ====================

class TestEffectDefinitionError:
    def test_defaults(self):
        e = EffectDefinitionError()
        assert e.message == "Invalid effect definition"
        assert e.effect is None
        assert e.details == {}

    def test_with_effect(self):
        e = EffectDefinitionError("bad", effect="Damage")
        assert e.details == {"effect": "Damage"}


class TestInvalidPercentError:
    def test_defaults(self):
        e = InvalidPercentError(1.5)
        assert "1.5" in e.message
        assert e.fraction == 1.5
        assert e.details == {"effect": "PercentDamage", "fraction": 1.5}
        assert isinstance(e, EffectDefinitionError)


class TestEffectTargetError:
    def test_defaults(self):
        e = EffectTargetError()
        assert e.message == "Effect payload is incompatible with its target"
        assert e.target is None

    def test_with_params(self):
        e = EffectTargetError("nope", effect="SkipTurn", target="PLAYER")
        assert e.details == {"effect": "SkipTurn", "target": "PLAYER"}
        assert isinstance(e, GameError)


# ==================== Card errors ====================

class TestCardErrors:
    def test_card_definition_defaults(self):
        e = CardDefinitionError()
        assert e.message == "Invalid card definition"
        assert e.details == {}

    def test_duplicate_card(self):
        e = DuplicateCardError("abc")
        assert e.card_id == "abc"
        assert "abc" in e.message
        assert isinstance(e, CardDefinitionError)


# ==================== Catalog errors ====================

class TestCatalogErrors:
    def test_catalog_error(self):
        e = CatalogError("bad file", source="deck.json")
        assert e.source == "deck.json"
        assert e.details == {"source": "deck.json"}

    def test_unknown_enemy(self):
        e = UnknownEnemyError("kraken")
        assert e.name == "kraken"
        assert e.message == "Unknown enemy: kraken"
        assert e.details == {"name": "kraken"}
        assert isinstance(e, CatalogError)
