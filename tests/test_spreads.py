"""Tests for the spread registry."""
import logging

import pytest

from tarot_journal import spreads


class TestSpreadData:
    """Build-time invariants of the reference spreads."""

    def test_display_order(self):
        assert [s.id for s in spreads.list_spreads()] == [
            "single",
            "three-card",
            "five-card",
            "celtic-cross",
            "relationship",
            "decision",
        ]

    @pytest.mark.parametrize("spread", spreads.SPREADS, ids=lambda s: s.id)
    def test_card_count_matches_positions(self, spread):
        assert spread.card_count == len(spread.positions)

    @pytest.mark.parametrize("spread", spreads.SPREADS, ids=lambda s: s.id)
    def test_position_ids_unique(self, spread):
        ids = [p.id for p in spread.positions]
        assert len(ids) == len(set(ids))

    @pytest.mark.parametrize("spread", spreads.SPREADS, ids=lambda s: s.id)
    def test_coordinates_normalized(self, spread):
        for p in spread.positions:
            assert 0.0 <= p.x <= 1.0
            assert 0.0 <= p.y <= 1.0

    def test_reference_card_counts(self):
        counts = {s.id: s.card_count for s in spreads.list_spreads()}
        assert counts == {
            "single": 1,
            "three-card": 3,
            "five-card": 5,
            "celtic-cross": 10,
            "relationship": 6,
            "decision": 5,
        }

    def test_three_card_positions(self):
        spread = spreads.get_spread_by_id("three-card")
        assert [(p.id, p.name) for p in spread.positions] == [
            (1, "Past"),
            (2, "Present"),
            (3, "Future"),
        ]


class TestLookups:
    """Lookups and default fallback."""

    def test_unknown_spread_returns_none(self):
        assert spreads.get_spread_by_id("pentagram") is None

    def test_default_spread_is_single(self):
        assert spreads.get_default_spread().id == "single"

    def test_resolve_known_spread(self):
        assert spreads.resolve_spread("decision").id == "decision"

    def test_resolve_none_gives_default(self):
        assert spreads.resolve_spread(None).id == "single"

    def test_resolve_unknown_falls_back_and_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="tarot_journal.spreads"):
            spread = spreads.resolve_spread("threeCard")
        assert spread.id == "single"
        assert "threeCard" in caplog.text

    def test_get_position(self):
        spread = spreads.get_spread_by_id("celtic-cross")
        assert spread.get_position(9).name == "Hopes & Fears"
        assert spread.get_position(11) is None

    def test_to_dict(self):
        data = spreads.get_spread_by_id("single").to_dict()
        assert data["id"] == "single"
        assert data["card_count"] == 1
        assert data["positions"][0] == {
            "id": 1,
            "name": "The Message",
            "description": "The core insight or guidance for your question",
            "x": 0.5,
            "y": 0.5,
        }


class TestIsSpreadAllowed:
    """Membership test used by the entitlement layer."""

    def test_all_sentinel_allows_everything(self):
        assert spreads.is_spread_allowed("celtic-cross", spreads.ALL_SPREADS)

    def test_explicit_allow_list(self):
        allowed = ["single", "three-card"]
        assert spreads.is_spread_allowed("single", allowed)
        assert not spreads.is_spread_allowed("celtic-cross", allowed)

    def test_empty_allow_list_allows_nothing(self):
        assert not spreads.is_spread_allowed("single", [])

    def test_other_strings_are_not_the_sentinel(self):
        assert not spreads.is_spread_allowed("single", "single")
