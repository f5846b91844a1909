"""
Unit tests for the card catalog and card model.
"""

import pytest

from riftcore.core.exceptions import ConfigurationError
from riftcore.modules.cards import CARD_MAP, CARDS, Card, CardEffect, get_card
from riftcore.modules.cards.models import ENERGY_TYPES, RARITIES
from riftcore.modules.shared.exceptions import NotFoundError

pytestmark = [pytest.mark.unit, pytest.mark.enemy]


class TestCatalog:
    """Test catalog integrity."""

    def test_ids_unique(self):
        assert len(CARD_MAP) == len(CARDS)

    def test_every_energy_has_common_cards(self):
        """Level-1 decks draw commons only, so every archetype needs some."""
        for energy in ENERGY_TYPES:
            assert any(c.energy == energy and c.rarity == "common" for c in CARDS), energy

    def test_agents_have_stats_spells_have_effects(self):
        for card in CARDS:
            if card.is_agent:
                assert card.attack is not None and card.defense is not None
                assert card.effect is None
            else:
                assert card.effect is not None

    def test_get_card(self):
        titan = get_card("overload_titan")
        assert (titan.energy, titan.cost, titan.rarity) == ("volt", 6, "rare")
        assert (titan.attack, titan.defense) == (7, 5)

    def test_get_card_unknown(self):
        with pytest.raises(NotFoundError) as exc_info:
            get_card("missing")
        assert exc_info.value.error_code == "CARD_NOT_FOUND"


class TestCardModel:
    """Test Card validation and serialization."""

    @pytest.mark.parametrize(
        "field,value",
        [("energy", "plasma"), ("type", "spell"), ("rarity", "mythic")],
    )
    def test_rejects_unknown_values(self, field, value):
        kwargs = dict(id="x", name="X", energy="volt", type="agent", cost=1, rarity="common")
        kwargs[field] = value
        with pytest.raises(ConfigurationError) as exc_info:
            Card(**kwargs)
        assert exc_info.value.error_code == "CONFIG_ERROR"
        assert "cards.x" in str(exc_info.value)

    def test_rejects_unknown_effect(self):
        with pytest.raises(ConfigurationError):
            Card("x", "X", "volt", "script", 1, "common", effect=CardEffect("explode", 1))

    def test_to_dict(self):
        data = get_card("patch_routine").to_dict()
        assert data["effect"] == {"type": "heal", "value": 3, "target": "player"}
        assert data["attack"] is None

    def test_rarity_order(self):
        assert RARITIES.index("common") < RARITIES.index("legendary")
