"""
Read-only subscription capability table.

The billing side (checkout, portal, webhooks) lives elsewhere; this module only
exposes what each tier is allowed to do so the calling layer can gate spreads
before asking the draw engine for a reading.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from .spreads import ALL_SPREADS, is_spread_allowed

logger = logging.getLogger(__name__)

UNLIMITED = math.inf


@dataclass(frozen=True)
class Tier:
    key: str
    name: str
    label: str
    price: float
    monthly_readings: float
    monthly_tts: float
    spreads: Union[str, Tuple[str, ...]]
    custom_spreads: bool
    cloud_journal: bool
    advanced_insights: bool
    ad_free: bool
    api_access: bool
    api_calls_per_month: int = 0

    @property
    def is_paid(self) -> bool:
        return self.price > 0


TIERS: Dict[str, Tier] = {
    "free": Tier(
        key="free",
        name="Seeker",
        label="Free",
        price=0.0,
        monthly_readings=5,
        monthly_tts=3,
        spreads=("single", "three-card", "five-card"),
        custom_spreads=False,
        cloud_journal=False,
        advanced_insights=False,
        ad_free=False,
        api_access=False,
    ),
    "plus": Tier(
        key="plus",
        name="Enlightened",
        label="Plus",
        price=7.99,
        monthly_readings=50,
        monthly_tts=50,
        spreads=ALL_SPREADS,
        custom_spreads=False,
        cloud_journal=True,
        advanced_insights=True,
        ad_free=True,
        api_access=False,
    ),
    "pro": Tier(
        key="pro",
        name="Mystic",
        label="Pro",
        price=19.99,
        monthly_readings=UNLIMITED,
        monthly_tts=UNLIMITED,
        spreads=ALL_SPREADS,
        custom_spreads=True,
        cloud_journal=True,
        advanced_insights=True,
        ad_free=True,
        api_access=True,
        api_calls_per_month=1000,
    ),
}

DEFAULT_TIER = "free"


def get_tier(key: Optional[str]) -> Tier:
    """Case-insensitive lookup; unknown or missing keys get the free tier."""
    normalized = (key or DEFAULT_TIER).strip().lower()
    tier = TIERS.get(normalized)
    if tier is None:
        logger.warning("Unknown tier %r, treating as %r", key, DEFAULT_TIER)
        return TIERS[DEFAULT_TIER]
    return tier


def can_use_spread(tier: Tier, spread_id: str) -> bool:
    return is_spread_allowed(spread_id, tier.spreads)


def has_reading_quota(tier: Tier, used_this_month: int) -> bool:
    return used_this_month < tier.monthly_readings
