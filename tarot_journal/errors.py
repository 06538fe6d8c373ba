"""Error classes shared by the catalog, draw engine and journal."""


class TarotCoreError(Exception):
    """Base class for tarot-core errors."""


class InvalidSpreadError(TarotCoreError):
    """Raised when a spread cannot be drawn (empty, over-capacity or malformed)."""


class UnknownPositionError(TarotCoreError):
    """Raised when a position id does not belong to the draw."""


class InvalidParameterError(TarotCoreError):
    """Raised when an input parameter is invalid."""


class DrawNotCompleteError(TarotCoreError):
    """Raised when a draw is used as complete before every position is revealed."""


class SpreadNotAllowedError(TarotCoreError):
    """Raised by the calling layer when a tier does not include the spread."""

    def __init__(self, spread_id: str, tier: str):
        super().__init__(f"Spread '{spread_id}' is not available on the '{tier}' tier.")
        self.spread_id = spread_id
        self.tier = tier


class JournalError(TarotCoreError):
    """Base class for journal errors."""


class JournalEntryNotFoundError(JournalError):
    """Raised when mutating a journal entry that does not exist."""


class NarrativeAlreadyAttachedError(JournalError):
    """Raised when a narrative is attached to an entry that already has one."""
