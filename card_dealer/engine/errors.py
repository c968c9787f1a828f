"""
Error taxonomy shared by the card, deck and codec modules.

Every error is a ValueError subclass carrying an ErrorKind, so callers can
either catch by class or branch on ``err.kind``:

    try:
        deck = decode(data)
    except CardDealerError as err:
        if err.kind is ErrorKind.UNKNOWN_CODE:
            ...
"""

from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    INVALID_RANK = auto()
    INVALID_SUIT = auto()
    INVALID_DECK_CONFIG = auto()
    UNKNOWN_CARD = auto()
    UNKNOWN_CODE = auto()
    SEQUENCE_TOO_LARGE = auto()
    BUFFER_TOO_LARGE = auto()
    TRUNCATED_BUFFER = auto()


class CardDealerError(ValueError):
    """Base class for all card-dealer errors."""

    kind: ErrorKind


# ─── Card identity ────────────────────────────────────────────────────────────

class InvalidRank(CardDealerError):
    kind = ErrorKind.INVALID_RANK


class InvalidSuit(CardDealerError):
    kind = ErrorKind.INVALID_SUIT


class UnknownCard(CardDealerError):
    """A value outside the 52-card canonical domain was given a code."""

    kind = ErrorKind.UNKNOWN_CARD


class UnknownCode(CardDealerError):
    """A 6-bit code that does not name one of the 52 canonical cards."""

    kind = ErrorKind.UNKNOWN_CODE


# ─── Deck construction ────────────────────────────────────────────────────────

class InvalidDeckConfig(CardDealerError):
    kind = ErrorKind.INVALID_DECK_CONFIG


class InvalidRanks(InvalidDeckConfig):
    pass


class InvalidSuits(InvalidDeckConfig):
    pass


# ─── Binary codec ─────────────────────────────────────────────────────────────

class SequenceTooLarge(CardDealerError):
    kind = ErrorKind.SEQUENCE_TOO_LARGE


class BufferTooLarge(CardDealerError):
    kind = ErrorKind.BUFFER_TOO_LARGE


class TruncatedBuffer(CardDealerError):
    """The buffer ends before its size prefix or declared cards do."""

    kind = ErrorKind.TRUNCATED_BUFFER
