"""Rule-violation errors raised by the Haus engine.

Every error is a deterministic validation failure. An engine raises before
touching any state, so a rejected command leaves the game exactly as it was.
"""

from __future__ import annotations


class HausError(ValueError):
    """Base class for rejected commands."""

    code = "haus_error"


class InvalidPhase(HausError):
    """Raised when a command does not apply to the current phase."""

    code = "invalid_phase"


class NotYourTurn(HausError):
    """Raised when a seat acts out of turn or is not a participant."""

    code = "not_your_turn"


class IllegalBid(HausError):
    """Raised when a bid is outside the legal-bid set."""

    code = "illegal_bid"


class IllegalCard(HausError):
    """Raised when a card is not owned or not in the legal-card set."""

    code = "illegal_card"


class InvalidExchangeSize(HausError):
    """Raised when an exchange submission does not hold exactly two cards."""

    code = "invalid_exchange_size"


class DuplicateSubmission(HausError):
    """Raised when a seat submits twice in the same phase."""

    code = "duplicate_submission"


class UnknownSeat(HausError):
    """Raised when a seat index is outside 0..3."""

    code = "unknown_seat"
