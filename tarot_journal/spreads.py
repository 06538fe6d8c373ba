# -*- coding: utf-8 -*-
"""
spreads.py — Spread registry (layouts, positions, entitlement check)

Responsibilities:
- Define the supported spreads in a fixed display order
- Provide read-only lookups and the default-spread fallback
- Answer "is this spread in the allowed list?" for the entitlement layer

Note:
- x / y coordinates are normalized [0, 1] layout hints for renderers only.
- Gating by subscription tier happens in the calling layer, never in the
  draw engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    """One named slot within a spread."""
    id: int
    name: str
    description: str
    x: float
    y: float


@dataclass(frozen=True)
class Spread:
    """Spread definition."""
    id: str
    name: str
    description: str
    card_count: int
    positions: Tuple[Position, ...]

    def get_position(self, position_id: int) -> Optional[Position]:
        for p in self.positions:
            if p.id == position_id:
                return p
        return None

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "card_count": self.card_count,
            "positions": [
                {"id": p.id, "name": p.name, "description": p.description, "x": p.x, "y": p.y}
                for p in self.positions
            ],
        }


def _spread(id: str, name: str, description: str, *positions: Position) -> Spread:
    return Spread(
        id=id,
        name=name,
        description=description,
        card_count=len(positions),
        positions=tuple(positions),
    )


# =========================
# Spread registry
# =========================

SPREADS: Tuple[Spread, ...] = (
    _spread(
        "single",
        "Single Card",
        "A focused answer to a direct question. Perfect for daily guidance or quick insights.",
        Position(1, "The Message", "The core insight or guidance for your question", 0.5, 0.5),
    ),
    _spread(
        "three-card",
        "Past, Present, Future",
        "A classic three-card spread showing the timeline of your situation.",
        Position(1, "Past", "Influences and events that have shaped the current situation", 0.2, 0.5),
        Position(2, "Present", "The current state of affairs and immediate circumstances", 0.5, 0.5),
        Position(3, "Future", "The likely outcome if the current path continues", 0.8, 0.5),
    ),
    _spread(
        "five-card",
        "Five Card Cross",
        "A balanced spread exploring the heart of a matter from multiple angles.",
        Position(1, "Present", "The heart of the matter, your current situation", 0.5, 0.5),
        Position(2, "Past", "What led to this moment", 0.2, 0.5),
        Position(3, "Future", "Where things are heading", 0.8, 0.5),
        Position(4, "Above", "Your conscious desires and goals", 0.5, 0.2),
        Position(5, "Below", "Subconscious influences and hidden factors", 0.5, 0.8),
    ),
    _spread(
        "celtic-cross",
        "Celtic Cross",
        "The most comprehensive spread, revealing all aspects of a complex situation.",
        Position(1, "Present", "The current situation and atmosphere", 0.3, 0.45),
        Position(2, "Challenge", "The immediate obstacle or crossing force", 0.3, 0.55),
        Position(3, "Past", "Recent events that have influenced the situation", 0.15, 0.5),
        Position(4, "Future", "Events coming in the near future", 0.45, 0.5),
        Position(5, "Above", "Your conscious goals and aspirations", 0.3, 0.2),
        Position(6, "Below", "Subconscious influences and hidden foundations", 0.3, 0.8),
        Position(7, "Advice", "Guidance on how to approach the situation", 0.7, 0.85),
        Position(8, "External", "Outside influences and how others see you", 0.7, 0.6),
        Position(9, "Hopes & Fears", "Your deepest hopes and fears about the outcome", 0.7, 0.35),
        Position(10, "Outcome", "The likely outcome on the current path", 0.7, 0.1),
    ),
    _spread(
        "relationship",
        "Relationship",
        "Explore the dynamics between you and another person.",
        Position(1, "You", "Your current feelings and position", 0.25, 0.3),
        Position(2, "Them", "Their feelings and perspective", 0.75, 0.3),
        Position(3, "Connection", "What brings you together", 0.5, 0.4),
        Position(4, "Challenges", "Obstacles in the relationship", 0.5, 0.6),
        Position(5, "Advice", "Guidance for the relationship", 0.35, 0.8),
        Position(6, "Potential", "The relationship's potential outcome", 0.65, 0.8),
    ),
    _spread(
        "decision",
        "Decision",
        "Compare two paths when facing a major choice.",
        Position(1, "The Choice", "The core of your decision", 0.5, 0.2),
        Position(2, "Path A", "The first option and its energy", 0.25, 0.45),
        Position(3, "Path B", "The second option and its energy", 0.75, 0.45),
        Position(4, "Outcome A", "Where Path A leads", 0.25, 0.75),
        Position(5, "Outcome B", "Where Path B leads", 0.75, 0.75),
    ),
)

SPREAD_REGISTRY: Dict[str, Spread] = {s.id: s for s in SPREADS}


def list_spreads() -> List[Spread]:
    """Return all available spreads in display order."""
    return list(SPREADS)


def get_spread_by_id(spread_id: str) -> Optional[Spread]:
    """Get a single spread definition; None if not registered."""
    return SPREAD_REGISTRY.get(spread_id)


def get_default_spread() -> Spread:
    return SPREADS[0]


def resolve_spread(spread_id: Optional[str]) -> Spread:
    """
    Look up a spread, falling back to the default one.

    Unknown ids are expected (e.g. stale journal data referencing a removed
    spread), so they are logged and replaced rather than raised.
    """
    if spread_id is None:
        return get_default_spread()
    spread = get_spread_by_id(spread_id)
    if spread is None:
        default = get_default_spread()
        logger.warning("Unknown spread %r, falling back to %r", spread_id, default.id)
        return default
    return spread


# =========================
# Entitlement check
# =========================

ALL_SPREADS = "all"

AllowedSpreads = Union[str, Iterable[str]]


def is_spread_allowed(spread_id: str, allowed: AllowedSpreads) -> bool:
    """
    Membership test against an allow-list.

    `allowed` is either the ALL_SPREADS sentinel or an iterable of spread ids.
    """
    if isinstance(allowed, str):
        return allowed == ALL_SPREADS
    return spread_id in set(allowed)
