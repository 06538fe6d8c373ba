"""
logic.py — Orchestration layer that ties the draw engine to API/UI needs.

Responsibilities:
- Resolve the spread (with default fallback) and gate it by subscription tier
  before any draw happens.
- Perform the draw via tarot_core and serialize it for the UI/API.
- Flatten a completed draw into "position: card - meaning" lines and ask the
  text-generation collaborator for a narrative, falling back to a
  deterministic narrative when that call fails.
- Attach narratives to journal entries.

Notes:
- The draw engine never triggers narrative generation or persistence; this
  module is where completion side effects are decided.
- This module is LLM-provider agnostic at the callsite level; the default
  collaborator is llm.chat() (Gemini), and any callable with the same
  signature can be injected.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from . import tarot_core
from .config import get_settings
from .deck import FULL_DECK, get_card_by_id
from .errors import DrawNotCompleteError, JournalEntryNotFoundError, SpreadNotAllowedError
from .journal import Journal, JournalEntry
from .llm import chat as llm_chat
from .spreads import get_spread_by_id, resolve_spread
from .tiers import can_use_spread, get_tier

logger = logging.getLogger(__name__)

ChatFn = Callable[..., str]
DrawLike = Union[tarot_core.Draw, Mapping[str, Any]]

FALLBACK_OPENING = "Your reading reveals a journey of discovery."
FALLBACK_CLOSING = "Take time to reflect on how these cards speak to your current situation."
EMPTY_NARRATIVE = "The cards hold their wisdom in mystery today."


# -----------------------------------------------------------------------------
# Flattening a draw for the narrative collaborator
# -----------------------------------------------------------------------------

def _as_record(draw: DrawLike) -> Mapping[str, Any]:
    if isinstance(draw, tarot_core.Draw):
        if not tarot_core.is_complete(draw):
            raise DrawNotCompleteError(
                f"Draw has {draw.revealed_count}/{len(draw.cards)} positions revealed"
            )
        return draw.to_record()
    return draw


def _card_line(c: Mapping[str, Any]) -> Tuple[str, str, Optional[str]]:
    """('Past', 'The Tower (Reversed)', meaning-or-None) for one card record."""
    card_text = c["card_name"]
    if c["reversed"]:
        card_text += " (Reversed)"
    card = get_card_by_id(c["card_id"])
    meaning = card.meaning(bool(c["reversed"])) if card else None
    return c["position_name"], card_text, meaning


def describe_draw(draw: DrawLike) -> str:
    """One 'Position: Card (Reversed) - meaning' line per card, in position order."""
    lines: List[str] = []
    for c in _as_record(draw)["cards"]:
        position, card_text, meaning = _card_line(c)
        label = f"{position}: {card_text}"
        lines.append(f"{label} - {meaning}" if meaning else label)
    return "\n".join(lines)


SYSTEM_PROMPT = """You are a wise and compassionate tarot reader with deep knowledge of the Rider-Waite-Smith tradition. You provide insightful, meaningful readings that help people gain clarity and perspective on their lives.

Your readings should:
- Be warm, supportive, and empowering
- Connect the cards meaningfully to create a cohesive narrative
- Acknowledge both challenges and opportunities
- Offer practical wisdom and actionable insights
- Use elegant, mystical language that feels authentic
- Be around 200-300 words

Never be fatalistic or frighten the querent. Focus on growth, potential, and self-empowerment."""


def build_narrative_prompt(draw: DrawLike) -> str:
    """User prompt for the narrative request (SYSTEM_PROMPT goes alongside)."""
    record = _as_record(draw)
    spread = get_spread_by_id(record["spread_id"])
    spread_name = spread.name if spread else record["spread_id"]
    question = (record.get("question") or "").strip() or "General guidance"
    return (
        "Please provide a tarot reading interpretation for the following:\n\n"
        f"Spread Type: {spread_name}\n"
        f"Question: {question}\n\n"
        "Cards drawn:\n"
        f"{describe_draw(record)}\n\n"
        "Weave these cards together into a meaningful narrative that addresses the question "
        "and provides guidance. Connect the positions and cards to tell a cohesive story."
    )


def fallback_narrative(draw: DrawLike) -> str:
    """Deterministic narrative built from the card meanings alone."""
    parts = [FALLBACK_OPENING, ""]
    for c in _as_record(draw)["cards"]:
        position, card_text, meaning = _card_line(c)
        parts.append(f"**{position}**: {card_text}")
        if meaning:
            parts.append(meaning)
        parts.append("")
    parts.append(FALLBACK_CLOSING)
    return "\n".join(parts)


def generate_narrative(
    draw: DrawLike,
    *,
    chat: Optional[ChatFn] = None,
    model: Optional[str] = None,
    temperature: float = 0.8,
) -> Dict[str, Optional[str]]:
    """
    Ask the text-generation collaborator for a narrative.

    Returns {"text", "source", "error"}; source is "llm" or "fallback". A
    failing collaborator never fails the reading: the error is logged and
    recorded and the fallback narrative is used instead.
    """
    record = _as_record(draw)
    prompt = build_narrative_prompt(record)
    chat_fn = chat or llm_chat
    try:
        text = chat_fn(prompt=prompt, model=model, temperature=temperature, system_prompt=SYSTEM_PROMPT)
    except Exception as e:
        logger.exception("Narrative generation failed; using fallback narrative")
        return {
            "text": fallback_narrative(record),
            "source": "fallback",
            "error": f"{type(e).__name__}: {e}",
        }
    if not isinstance(text, str):
        text = str(text)
    if not text.strip():
        text = EMPTY_NARRATIVE
    return {"text": text, "source": "llm", "error": None}


def narrate_entry(
    journal: Journal,
    entry_id: str,
    *,
    chat: Optional[ChatFn] = None,
    model: Optional[str] = None,
) -> JournalEntry:
    """Generate a narrative for a saved reading and attach it (once)."""
    entry = journal.get(entry_id)
    if entry is None:
        raise JournalEntryNotFoundError(f"Journal entry '{entry_id}' not found")
    record = {
        "spread_id": entry.spread_id,
        "question": entry.question,
        "cards": [c.model_dump() for c in entry.cards],
    }
    narrative = generate_narrative(record, chat=chat, model=model)
    return journal.attach_narrative(entry_id, narrative["text"])


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def start_reading(
    spread_id: Optional[str] = None,
    question: Optional[str] = None,
    *,
    seed: Optional[Union[int, str]] = None,
    rng: Optional[random.Random] = None,
    reversed_probability: Optional[float] = None,
    tier: Optional[str] = None,
) -> tarot_core.Draw:
    """
    Resolve + gate + draw. The returned draw has no position revealed yet.

    Raises:
        SpreadNotAllowedError: the tier's allow-list does not contain the spread
    """
    settings = get_settings()
    spread = resolve_spread(spread_id)
    tier_obj = get_tier(tier or settings.default_tier)
    if not can_use_spread(tier_obj, spread.id):
        raise SpreadNotAllowedError(spread.id, tier_obj.key)

    p = settings.reversed_probability if reversed_probability is None else reversed_probability
    return tarot_core.draw(
        spread,
        FULL_DECK,
        rng if rng is not None else tarot_core.make_rng(seed),
        reversed_probability=p,
        question=(question or "").strip() or None,
    )


def serialize_draw(draw: tarot_core.Draw) -> List[Dict[str, Any]]:
    """Card list for UI/API consumers, including display details."""
    cards: List[Dict[str, Any]] = []
    for dc in draw.cards:
        cards.append(
            {
                **dc.to_record(),
                "position_description": dc.position.description,
                "x": dc.position.x,
                "y": dc.position.y,
                "arcana": dc.card.arcana,
                "suit": dc.card.suit,
                "keywords": list(dc.card.keywords),
                "meaning": dc.meaning,
                "revealed": dc.revealed,
            }
        )
    return cards


def perform_reading(
    spread_id: Optional[str] = None,
    question: Optional[str] = None,
    seed: Optional[Union[int, str]] = None,
    reversed_probability: Optional[float] = None,
    tier: Optional[str] = None,
    reveal: bool = True,
    explain_with_llm: bool = False,
    *,
    model: Optional[str] = None,
    temperature: float = 0.8,
    chat: Optional[ChatFn] = None,
) -> Dict[str, Any]:
    """
    Perform a reading and (optionally) generate a narrative.

    A narrative needs every position revealed, so explain_with_llm=True reveals
    the whole draw even when reveal=False.

    Returns a JSON-serializable dict:

        {
          "meta": {"spread": str, "spread_name": str, "requested_spread": str|null,
                   "question": str|null, "seed": int|str|null, "tier": str,
                   "reversed_probability": float, "state": "drawn|complete"},
          "cards": [ {card_id, card_name, reversed, position_id, position_name, ...}, ... ],
          "narrative": {"text": str|null, "source": "llm|fallback"|null, "error": str|null}
        }
    """
    settings = get_settings()
    tier_key = get_tier(tier or settings.default_tier).key
    draw = start_reading(
        spread_id,
        question,
        seed=seed,
        reversed_probability=reversed_probability,
        tier=tier_key,
    )
    if reveal or explain_with_llm:
        tarot_core.reveal_all(draw)

    result: Dict[str, Any] = {
        "meta": {
            "spread": draw.spread.id,
            "spread_name": draw.spread.name,
            "requested_spread": spread_id,
            "question": draw.question,
            "seed": seed,
            "tier": tier_key,
            "reversed_probability": draw.reversed_probability,
            "state": draw.state.value,
        },
        "cards": serialize_draw(draw),
        "narrative": {"text": None, "source": None, "error": None},
    }

    if explain_with_llm:
        result["narrative"] = generate_narrative(draw, chat=chat, model=model, temperature=temperature)

    return result
