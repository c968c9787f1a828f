"""
Card identity: rank/suit domains, the Card value type, and the 6-bit card code.

Ranks (low -> high):  2 3 4 5 6 7 8 9 T J Q K A   -> rank_index 0..12
Suits:                c d h s                     -> suit_index 0..3

Card code (0–51), the wire format of the binary codec:
    code = suit_index * 13 + rank_index
    rank_index = code % 13
    suit_index = code // 13

Codes 52–63 fit in 6 bits but name no card. The mapping is fixed: changing it
breaks every stored deck. Both lookup directions are plain tuples built once
at import time.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Iterable

from .errors import InvalidRank, InvalidSuit, UnknownCard, UnknownCode

CLUBS: str = 'c'
DIAMONDS: str = 'd'
HEARTS: str = 'h'
SPADES: str = 's'

# T = 10, J = Jack, Q = Queen, K = King, A = Ace
RANKS: tuple[str, ...] = ('2', '3', '4', '5', '6', '7', '8', '9', 'T', 'J', 'Q', 'K', 'A')
SUITS: tuple[str, ...] = (CLUBS, DIAMONDS, HEARTS, SPADES)

RANK_INDEX: dict[str, int] = {rank: i for i, rank in enumerate(RANKS)}
SUIT_INDEX: dict[str, int] = {suit: i for i, suit in enumerate(SUITS)}

NUM_CARDS: int = len(RANKS) * len(SUITS)  # 52
CODE_BITS: int = 6
CODE_SPACE: int = 1 << CODE_BITS  # 64


@functools.total_ordering
@dataclass(frozen=True)
class Card:
    """An immutable playing card.

    Equality and hashing use (rank, suit). Ordering is by rank first, then
    suit, and exists only so hands and decks can be sorted deterministically.

    Examples:
        >>> Card('A', 's')
        Card('As')
        >>> Card('A', 's') == make_card('As')
        True
        >>> sorted([Card('2', 's'), Card('2', 'c')])
        [Card('2c'), Card('2s')]
    """
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if not isinstance(self.rank, str) or self.rank not in RANK_INDEX:
            raise InvalidRank(f"Invalid rank: {self.rank!r}")
        if not isinstance(self.suit, str) or self.suit not in SUIT_INDEX:
            raise InvalidSuit(f"Invalid suit: {self.suit!r}")

    @property
    def rank_index(self) -> int:
        return RANK_INDEX[self.rank]

    @property
    def suit_index(self) -> int:
        return SUIT_INDEX[self.suit]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return (self.rank_index, self.suit_index) < (other.rank_index, other.suit_index)

    def __str__(self) -> str:
        return self.rank + self.suit

    def __repr__(self) -> str:
        return f"Card('{self}')"


def make_card(rank: str, suit: str | None = None) -> Card:
    """Build a card from a rank and suit, or from a 2-character token.

    With ``suit`` omitted, ``rank`` is split into its rank and suit characters
    before validation.

    Raises:
        InvalidRank: If the rank is not one of RANKS, or the token is not
            exactly two characters.
        InvalidSuit: If the suit is not one of SUITS.

    Examples:
        >>> make_card('9', 'c')
        Card('9c')
        >>> make_card('9c')
        Card('9c')
        >>> make_card('10c')
        Traceback (most recent call last):
        ...
        card_dealer.engine.errors.InvalidRank: Invalid card token: '10c'
    """
    if suit is None:
        token = str(rank)
        if len(token) != 2:
            raise InvalidRank(f"Invalid card token: {token!r}")
        rank, suit = token[0], token[1]
    return Card(str(rank), str(suit))


def parse_cards(tokens: str | Iterable[str]) -> list[Card]:
    """Parse a whitespace-separated string (or iterable) of card tokens.

    Examples:
        >>> parse_cards('As Td')
        [Card('As'), Card('Td')]
    """
    if isinstance(tokens, str):
        tokens = tokens.split()
    return [make_card(token) for token in tokens]


def cards_to_str(cards: Iterable[Card]) -> str:
    """Join cards into a space-separated string.

    Examples:
        >>> cards_to_str([Card('A', 's'), Card('T', 'd')])
        'As Td'
    """
    return ' '.join(str(card) for card in cards)


# ─── Card code bijection ──────────────────────────────────────────────────────

# CARD_CODES[rank_index][suit_index] -> code
CARD_CODES: tuple[tuple[int, ...], ...] = tuple(
    tuple(suit_index * len(RANKS) + rank_index for suit_index in range(len(SUITS)))
    for rank_index in range(len(RANKS))
)

# CODE_TABLE[code] -> Card, None for the unused codes 52..63
CODE_TABLE: tuple[Card | None, ...] = tuple(
    Card(RANKS[code % len(RANKS)], SUITS[code // len(RANKS)]) if code < NUM_CARDS else None
    for code in range(CODE_SPACE)
)

# Suit-major order, the order of codes 0..51
CANONICAL_CARDS: tuple[Card, ...] = tuple(card for card in CODE_TABLE if card is not None)


def card_code(card: Card) -> int:
    """Return the 6-bit code (0–51) of a card.

    Raises:
        UnknownCard: If ``card`` is not a Card.

    Examples:
        >>> card_code(Card('2', 'c'))
        0
        >>> card_code(Card('A', 's'))
        51
        >>> card_code(Card('T', 'd'))
        21
    """
    if not isinstance(card, Card):
        raise UnknownCard(f"Not a card: {card!r}")
    return CARD_CODES[card.rank_index][card.suit_index]


def card_from_code(code: int) -> Card:
    """Return the card named by a 6-bit code.

    Raises:
        UnknownCode: If ``code`` is not one of the 52 assigned codes.

    Examples:
        >>> card_from_code(0)
        Card('2c')
        >>> card_from_code(51)
        Card('As')
        >>> card_from_code(52)
        Traceback (most recent call last):
        ...
        card_dealer.engine.errors.UnknownCode: Unknown card code: 52
    """
    if isinstance(code, bool) or not isinstance(code, int) or not 0 <= code < NUM_CARDS:
        raise UnknownCode(f"Unknown card code: {code!r}")
    return CODE_TABLE[code]  # type: ignore[return-value]
