"""Tests for the draw engine."""
import copy
import random

import pytest

from tarot_journal import tarot_core
from tarot_journal.deck import FULL_DECK
from tarot_journal.spreads import Position, Spread, get_spread_by_id, list_spreads
from tarot_journal.tarot_core import (
    DrawState,
    InvalidParameterError,
    InvalidSpreadError,
    UnknownPositionError,
)


def _spread(card_count, positions=None):
    if positions is None:
        positions = tuple(Position(i + 1, f"P{i + 1}", "", 0.5, 0.5) for i in range(max(card_count, 0)))
    return Spread(id="custom", name="Custom", description="", card_count=card_count, positions=positions)


class TestDraw:
    """draw() structural guarantees."""

    @pytest.mark.parametrize("spread", list_spreads(), ids=lambda s: s.id)
    @pytest.mark.parametrize("seed", [0, 1, 42, "moon"])
    def test_card_count_and_distinct_ids(self, spread, seed):
        d = tarot_core.draw(spread, FULL_DECK, tarot_core.make_rng(seed))
        assert len(d.cards) == spread.card_count
        ids = [dc.card.id for dc in d.cards]
        assert len(set(ids)) == len(ids)

    @pytest.mark.parametrize("spread", list_spreads(), ids=lambda s: s.id)
    def test_positions_are_a_bijection_in_spread_order(self, spread, rng):
        d = tarot_core.draw(spread, FULL_DECK, rng)
        assert [dc.position_id for dc in d.cards] == [p.id for p in spread.positions]

    def test_three_card_scenario(self, three_card, rng):
        d = tarot_core.draw(three_card, FULL_DECK, rng)
        known_ids = {c.id for c in FULL_DECK}
        assert len(d.cards) == 3
        assert {dc.position_id for dc in d.cards} == {1, 2, 3}
        assert len({dc.card.id for dc in d.cards}) == 3
        assert all(dc.card.id in known_ids for dc in d.cards)
        assert all(dc.revealed is False for dc in d.cards)
        assert d.state is DrawState.DRAWN

    def test_same_seed_same_draw(self):
        spread = get_spread_by_id("celtic-cross")
        a = tarot_core.draw(spread, FULL_DECK, tarot_core.make_rng("same"))
        b = tarot_core.draw(spread, FULL_DECK, tarot_core.make_rng("same"))
        assert a == b
        assert [(dc.card.id, dc.reversed, dc.position_id) for dc in a.cards] == [
            (dc.card.id, dc.reversed, dc.position_id) for dc in b.cards
        ]

    def test_str_seed_hashing_is_stable(self):
        assert tarot_core._norm_seed("abc") == tarot_core._norm_seed("abc")
        assert tarot_core._norm_seed("abc") != tarot_core._norm_seed("abd")
        assert tarot_core._norm_seed(5) == 5
        assert tarot_core._norm_seed(None) is None

    def test_bad_seed_type_is_rejected(self):
        with pytest.raises(InvalidParameterError):
            tarot_core.make_rng(1.5)

    def test_reversal_rate_near_default(self):
        spread = get_spread_by_id("single")
        rng = tarot_core.make_rng(2024)
        n = 10_000
        reversed_count = sum(
            tarot_core.draw(spread, FULL_DECK, rng).cards[0].reversed for _ in range(n)
        )
        assert 0.27 <= reversed_count / n <= 0.33

    def test_reversal_probability_is_overridable(self, three_card):
        always = tarot_core.draw(three_card, FULL_DECK, tarot_core.make_rng(1), reversed_probability=1.0)
        never = tarot_core.draw(three_card, FULL_DECK, tarot_core.make_rng(1), reversed_probability=0.0)
        assert all(dc.reversed for dc in always.cards)
        assert not any(dc.reversed for dc in never.cards)
        assert always.reversed_probability == 1.0

    def test_reversal_decided_per_card(self):
        spread = get_spread_by_id("celtic-cross")
        rng = tarot_core.make_rng(99)
        mixed = False
        for _ in range(50):
            flags = {dc.reversed for dc in tarot_core.draw(spread, FULL_DECK, rng).cards}
            if flags == {True, False}:
                mixed = True
                break
        assert mixed

    @pytest.mark.parametrize("p", [-0.1, 1.5])
    def test_invalid_reversal_probability(self, three_card, rng, p):
        with pytest.raises(InvalidParameterError):
            tarot_core.draw(three_card, FULL_DECK, rng, reversed_probability=p)

    def test_question_is_carried(self, three_card, rng):
        d = tarot_core.draw(three_card, FULL_DECK, rng, question="Will it rain?")
        assert d.question == "Will it rain?"

    def test_does_not_touch_global_random(self, three_card, monkeypatch):
        def _boom(*args, **kwargs):
            raise AssertionError("global random used")

        monkeypatch.setattr(random, "random", _boom)
        monkeypatch.setattr(random, "randint", _boom)
        monkeypatch.setattr(random, "shuffle", _boom)
        tarot_core.draw(three_card, FULL_DECK, tarot_core.make_rng(3))


class TestInvalidSpread:
    """draw() refuses impossible spreads."""

    def test_zero_cards(self, rng):
        with pytest.raises(InvalidSpreadError):
            tarot_core.draw(_spread(0), FULL_DECK, rng)

    def test_negative_cards(self, rng):
        with pytest.raises(InvalidSpreadError):
            tarot_core.draw(_spread(-2, positions=()), FULL_DECK, rng)

    def test_more_cards_than_catalog(self, rng):
        with pytest.raises(InvalidSpreadError):
            tarot_core.draw(_spread(200), FULL_DECK, rng)

    def test_more_cards_than_small_catalog(self, rng):
        with pytest.raises(InvalidSpreadError):
            tarot_core.draw(_spread(3), FULL_DECK[:2], rng)

    def test_duplicate_catalog_entries_do_not_count_twice(self, rng):
        pool = [FULL_DECK[0], FULL_DECK[0], FULL_DECK[1]]
        with pytest.raises(InvalidSpreadError):
            tarot_core.draw(_spread(3), pool, rng)

    def test_card_count_mismatch_with_positions(self, rng):
        positions = (Position(1, "A", "", 0.1, 0.1),)
        with pytest.raises(InvalidSpreadError):
            tarot_core.draw(_spread(2, positions=positions), FULL_DECK, rng)

    def test_duplicate_position_ids(self, rng):
        positions = (Position(1, "A", "", 0.1, 0.1), Position(1, "B", "", 0.2, 0.2))
        with pytest.raises(InvalidSpreadError):
            tarot_core.draw(_spread(2, positions=positions), FULL_DECK, rng)

    def test_exactly_catalog_size_is_allowed(self, rng):
        d = tarot_core.draw(_spread(5), FULL_DECK[:5], rng)
        assert sorted(dc.card.id for dc in d.cards) == sorted(c.id for c in FULL_DECK[:5])


class TestReveal:
    """Reveal state machine."""

    def test_reveal_marks_single_position(self, three_card_draw):
        tarot_core.reveal(three_card_draw, 2)
        assert [dc.revealed for dc in three_card_draw.cards] == [False, True, False]
        assert three_card_draw.revealed_count == 1

    def test_reveal_is_idempotent(self, three_card_draw):
        tarot_core.reveal(three_card_draw, 1)
        once = copy.deepcopy(three_card_draw)
        tarot_core.reveal(three_card_draw, 1)
        assert three_card_draw == once

    def test_reveal_returns_same_draw(self, three_card_draw):
        assert tarot_core.reveal(three_card_draw, 1) is three_card_draw

    def test_unknown_position_leaves_state_unchanged(self, three_card_draw):
        tarot_core.reveal(three_card_draw, 3)
        before = copy.deepcopy(three_card_draw)
        with pytest.raises(UnknownPositionError):
            tarot_core.reveal(three_card_draw, 999)
        assert three_card_draw == before

    def test_complete_only_after_every_position(self, three_card_draw):
        for position_id in (3, 1):
            tarot_core.reveal(three_card_draw, position_id)
            assert not tarot_core.is_complete(three_card_draw)
        tarot_core.reveal(three_card_draw, 2)
        assert tarot_core.is_complete(three_card_draw)
        assert three_card_draw.state is DrawState.COMPLETE

    @pytest.mark.parametrize("spread", list_spreads(), ids=lambda s: s.id)
    def test_reveal_all_completes(self, spread, rng):
        d = tarot_core.draw(spread, FULL_DECK, rng)
        tarot_core.reveal_all(d)
        assert tarot_core.is_complete(d)
        assert d.revealed_count == spread.card_count

    def test_complete_is_terminal(self, complete_draw):
        tarot_core.reveal(complete_draw, 1)
        tarot_core.reveal_all(complete_draw)
        assert complete_draw.state is DrawState.COMPLETE


class TestRecord:
    """Hand-off shape for journal and narrative collaborators."""

    def test_to_record(self, complete_draw):
        record = complete_draw.to_record()
        assert record["spread_id"] == "three-card"
        assert record["question"] == "What should I focus on?"
        assert [c["position_name"] for c in record["cards"]] == ["Past", "Present", "Future"]
        first = record["cards"][0]
        assert set(first) == {"card_id", "card_name", "reversed", "position_id", "position_name"}
        assert first["card_id"] == complete_draw.cards[0].card.id
        assert first["reversed"] == complete_draw.cards[0].reversed

    def test_get_by_position(self, three_card_draw):
        assert three_card_draw.get(3).position.name == "Future"
        assert three_card_draw.get(4) is None
