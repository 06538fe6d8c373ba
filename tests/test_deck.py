"""Tests for the static card catalog."""
import pytest

from tarot_journal import deck
from tarot_journal.errors import InvalidParameterError
from tarot_journal.tarot_core import make_rng


class TestCatalogData:
    """Static data checks on the reference deck."""

    def test_deck_has_78_unique_cards(self):
        assert len(deck.FULL_DECK) == 78
        assert len({c.id for c in deck.FULL_DECK}) == 78

    def test_major_arcana_numbered_0_to_21(self):
        majors = deck.list_by_arcana("major")
        assert [c.number for c in majors] == list(range(22))
        assert majors[0].id == "major-0"
        assert majors[0].name == "The Fool"
        assert majors[21].name == "The World"
        assert all(c.suit is None for c in majors)

    def test_each_suit_has_14_cards_with_element(self):
        for suit, element in deck.SUIT_ELEMENTS.items():
            cards = deck.list_by_suit(suit)
            assert len(cards) == 14
            assert [c.number for c in cards] == list(range(1, 15))
            assert all(c.arcana == "minor" for c in cards)
            assert all(c.element == element for c in cards)

    def test_every_card_has_both_meanings_and_keywords(self):
        for card in deck.FULL_DECK:
            assert card.upright_meaning
            assert card.reversed_meaning
            assert card.keywords

    def test_cards_are_immutable(self):
        card = deck.FULL_DECK[0]
        with pytest.raises(AttributeError):
            card.name = "Someone Else"


class TestLookups:
    """get_card_by_id / list_by_* behaviour."""

    def test_get_card_by_id(self):
        card = deck.get_card_by_id("cups-14")
        assert card is not None
        assert card.name == "King of Cups"
        assert card.suit == "cups"

    def test_unknown_card_id_returns_none(self):
        assert deck.get_card_by_id("cups-15") is None
        assert deck.get_card_by_id("") is None

    def test_meaning_follows_orientation(self):
        card = deck.get_card_by_id("major-16")
        assert card.meaning(False) == card.upright_meaning
        assert card.meaning(True) == card.reversed_meaning

    def test_list_by_arcana_minor(self):
        assert len(deck.list_by_arcana("minor")) == 56

    def test_unknown_arcana_or_suit_is_rejected(self):
        with pytest.raises(InvalidParameterError):
            deck.list_by_arcana("lesser")
        with pytest.raises(InvalidParameterError):
            deck.list_by_suit("coins")


class TestRandomCards:
    """get_random_cards selection contract."""

    def test_returns_distinct_cards(self):
        cards = deck.get_random_cards(10, make_rng(7))
        assert len(cards) == 10
        assert len({c.id for c in cards}) == 10

    def test_whole_deck_is_a_permutation(self):
        cards = deck.get_random_cards(78, make_rng(7))
        assert sorted(c.id for c in cards) == sorted(c.id for c in deck.FULL_DECK)

    def test_same_seed_same_cards(self):
        a = deck.get_random_cards(5, make_rng("seed"))
        b = deck.get_random_cards(5, make_rng("seed"))
        assert a == b

    @pytest.mark.parametrize("count", [0, -1, 79])
    def test_out_of_range_count_is_rejected(self, count):
        with pytest.raises(InvalidParameterError):
            deck.get_random_cards(count, make_rng(1))

    def test_shuffle_does_not_mutate_input(self):
        original = list(deck.FULL_DECK[:10])
        shuffled = deck.fisher_yates_shuffle(original, make_rng(3))
        assert original == list(deck.FULL_DECK[:10])
        assert sorted(c.id for c in shuffled) == sorted(c.id for c in original)
