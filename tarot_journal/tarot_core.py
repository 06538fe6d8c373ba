# -*- coding: utf-8 -*-
"""
tarot_core.py — Draw engine (shuffle / draw / reveal state)

Responsibilities:
- Produce a Draw for a spread: distinct cards, per-card reversal, index-based
  mapping of cards to positions
- Track progressive reveal of positions until the draw is complete
- Provide reproducible randomness (seed can be int or str; str will be hashed)
- Public API: make_rng / draw / reveal / reveal_all / is_complete

Note:
- This module performs no I/O and never triggers persistence or narrative
  generation; completion side effects belong to the caller (see logic.py).
- Randomness is always injected as a random.Random instance.
"""

from __future__ import annotations

import enum
import hashlib
import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from .deck import Card, fisher_yates_shuffle
from .errors import (
    InvalidParameterError,
    InvalidSpreadError,
    TarotCoreError,
    UnknownPositionError,
)
from .spreads import Position, Spread

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_REVERSED_PROBABILITY",
    "Draw",
    "DrawState",
    "DrawnCard",
    "InvalidParameterError",
    "InvalidSpreadError",
    "TarotCoreError",
    "UnknownPositionError",
    "draw",
    "is_complete",
    "make_rng",
    "reveal",
    "reveal_all",
]


# Probability that a single drawn card comes out reversed. Callers may pass a
# different value per draw (e.g. per spread or per tier).
DEFAULT_REVERSED_PROBABILITY = 0.30


class DrawState(enum.Enum):
    DRAWN = "drawn"
    COMPLETE = "complete"


@dataclass
class DrawnCard:
    """A single card placed in a spread position."""
    card: Card
    reversed: bool
    position: Position
    revealed: bool = False

    @property
    def position_id(self) -> int:
        return self.position.id

    @property
    def meaning(self) -> str:
        return self.card.meaning(self.reversed)

    def to_record(self) -> Dict[str, object]:
        return {
            "card_id": self.card.id,
            "card_name": self.card.name,
            "reversed": self.reversed,
            "position_id": self.position.id,
            "position_name": self.position.name,
        }


@dataclass
class Draw:
    """
    One instantiation of a spread.

    `cards` follows the spread's position order; card identities are pairwise
    distinct and each position id appears exactly once.
    """
    spread: Spread
    cards: List[DrawnCard]
    question: Optional[str] = None
    reversed_probability: float = DEFAULT_REVERSED_PROBABILITY

    def get(self, position_id: int) -> Optional[DrawnCard]:
        for dc in self.cards:
            if dc.position.id == position_id:
                return dc
        return None

    @property
    def revealed_count(self) -> int:
        return sum(1 for dc in self.cards if dc.revealed)

    @property
    def state(self) -> DrawState:
        return DrawState.COMPLETE if is_complete(self) else DrawState.DRAWN

    def to_record(self) -> Dict[str, object]:
        """Hand-off shape for the journal and narrative collaborators."""
        return {
            "spread_id": self.spread.id,
            "question": self.question,
            "cards": [dc.to_record() for dc in self.cards],
        }


# =========================
# RNG
# =========================

def _norm_seed(seed: Optional[Union[int, str]]) -> Optional[int]:
    """
    Normalize seed to int. If str, hash with sha256 and take the first 8 bytes
    as an unsigned 64-bit integer. None stays None.
    """
    if seed is None:
        return None
    if isinstance(seed, bool):
        raise InvalidParameterError("seed must be int | str | None")
    if isinstance(seed, int):
        return seed
    if isinstance(seed, str):
        h = hashlib.sha256(seed.encode("utf-8")).digest()
        return int.from_bytes(h[:8], byteorder="big", signed=False)
    raise InvalidParameterError("seed must be int | str | None")


def make_rng(seed: Optional[Union[int, str]] = None) -> random.Random:
    """Build an independent random source; None seeds from OS entropy."""
    return random.Random(_norm_seed(seed))


# =========================
# Draw
# =========================

def _validate_spread(spread: Spread, pool_size: int) -> None:
    n = spread.card_count
    if not isinstance(n, int) or n <= 0:
        raise InvalidSpreadError(f"Spread '{spread.id}' must request at least one card; got {n}")
    if n > pool_size:
        raise InvalidSpreadError(
            f"Spread '{spread.id}' requests {n} cards but only {pool_size} distinct cards are available"
        )
    if len(spread.positions) != n:
        raise InvalidSpreadError(
            f"Spread '{spread.id}' expects {n} cards but defines {len(spread.positions)} positions"
        )
    ids = [p.id for p in spread.positions]
    if len(set(ids)) != len(ids):
        raise InvalidSpreadError(f"Spread '{spread.id}' has duplicate position ids")


def draw(
    spread: Spread,
    catalog: Sequence[Card],
    rng: random.Random,
    reversed_probability: float = DEFAULT_REVERSED_PROBABILITY,
    question: Optional[str] = None,
) -> Draw:
    """
    Core entry point: shuffle, draw, determine orientation, map positions.

    Args:
        spread: the layout to fill
        catalog: card pool; duplicate ids in the pool are collapsed
        rng: injected random source (use make_rng(seed) for reproducibility)
        reversed_probability: probability of a reversed card in [0, 1]
        question: optional free-text question carried with the draw

    Raises:
        InvalidSpreadError: card count is zero/negative, exceeds the distinct
            cards available, or disagrees with the positions
        InvalidParameterError: reversed_probability outside [0, 1]
    """
    if not (0.0 <= float(reversed_probability) <= 1.0):
        raise InvalidParameterError("reversed_probability must be within [0.0, 1.0]")

    pool: List[Card] = list({c.id: c for c in catalog}.values())
    _validate_spread(spread, len(pool))

    picked = fisher_yates_shuffle(pool, rng)[: spread.card_count]

    cards: List[DrawnCard] = []
    for card, position in zip(picked, spread.positions):
        is_reversed = rng.random() < float(reversed_probability)
        cards.append(DrawnCard(card=card, reversed=is_reversed, position=position))

    result = Draw(
        spread=spread,
        cards=cards,
        question=question or None,
        reversed_probability=float(reversed_probability),
    )
    logger.debug(
        "Drew %d cards for spread %r (%d reversed)",
        len(cards), spread.id, sum(1 for dc in cards if dc.reversed),
    )
    return result


# =========================
# Reveal state
# =========================

def reveal(draw: Draw, position_id: int) -> Draw:
    """Mark one position as revealed. Revealing twice is a no-op."""
    dc = draw.get(position_id)
    if dc is None:
        raise UnknownPositionError(
            f"Position {position_id!r} is not part of spread '{draw.spread.id}'"
        )
    dc.revealed = True
    return draw


def reveal_all(draw: Draw) -> Draw:
    for dc in draw.cards:
        dc.revealed = True
    return draw


def is_complete(draw: Draw) -> bool:
    return bool(draw.cards) and all(dc.revealed for dc in draw.cards)
