"""Shared fixtures for tarot-journal tests."""
import pytest

from tarot_journal import tarot_core
from tarot_journal.deck import FULL_DECK
from tarot_journal.journal import InMemoryRecordStore, Journal
from tarot_journal.spreads import get_spread_by_id

_ENV_VARS = (
    "GEMINI_TOKEN",
    "GEMINI_MODEL",
    "TAROT_REVERSED_PROBABILITY",
    "TAROT_DEFAULT_TIER",
    "TAROT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test against default settings, whatever the developer's .env says."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def rng():
    return tarot_core.make_rng(1234)


@pytest.fixture
def three_card():
    return get_spread_by_id("three-card")


@pytest.fixture
def three_card_draw(three_card, rng):
    """A fresh, unrevealed three-card draw."""
    return tarot_core.draw(three_card, FULL_DECK, rng, question="What should I focus on?")


@pytest.fixture
def complete_draw(three_card_draw):
    return tarot_core.reveal_all(three_card_draw)


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def journal(store):
    return Journal(store)


@pytest.fixture
def fake_chat():
    """Text-generation stand-in that records its calls."""
    calls = []

    def _chat(prompt, model=None, temperature=0.8, system_prompt=None):
        calls.append({"prompt": prompt, "model": model, "system_prompt": system_prompt})
        return "The cards speak of patience."

    _chat.calls = calls
    return _chat
