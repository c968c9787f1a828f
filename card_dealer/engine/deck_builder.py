"""
Deck construction for standard and custom configurations.

Cards are laid out deck by deck, suit by suit, rank by rank:

    standard52()  ->  2c 3c ... Ac 2d ... As
    standard36()  ->  6c 7c ... Ac 6d ... As   (highest 9 ranks per suit)
"""

from __future__ import annotations

from typing import Sequence

from .cards import RANKS, SUITS, Card
from .deck import Deck
from .errors import InvalidDeckConfig, InvalidRanks, InvalidSuits

HIGHEST: str = 'highest'
LOWEST: str = 'lowest'
ALL_SUITS: str = 'all'


def custom(
    decks: int = 1,
    cards_per_suit: int = 13,
    ranks: str | Sequence[str] = HIGHEST,
    suits: str | Sequence[str] = ALL_SUITS,
) -> Deck:
    """Build a deck from a rank/suit configuration.

    Args:
        decks: Number of copies of the configured deck to stack.
        cards_per_suit: How many ranks to take when ``ranks`` is 'highest'
                        or 'lowest'. Ignored for an explicit rank list.
        ranks: 'highest' (A, K, Q, ... downwards), 'lowest' (2, 3, 4, ...
               upwards) or an explicit list such as ['2', '4', '6', '8', 'T'].
        suits: 'all' (c, d, h, s) or an explicit list such as ['d', 'h'].

    Returns:
        A new unshuffled Deck.

    Raises:
        InvalidRanks: If ``ranks`` is neither a known keyword nor a list.
        InvalidSuits: If ``suits`` is neither a known keyword nor a list.
        InvalidDeckConfig: If ``decks`` is negative or ``cards_per_suit`` is
                           outside 0–13.
        InvalidRank / InvalidSuit: If an explicit list holds an unknown symbol.

    Examples:
        >>> len(custom(decks=2))
        104
        >>> custom(cards_per_suit=9, ranks='lowest', suits=['h'])[-1]
        Card('Th')
    """
    if decks < 0:
        raise InvalidDeckConfig(f"Invalid number of decks: {decks}")
    if not 0 <= cards_per_suit <= len(RANKS):
        raise InvalidDeckConfig(f"Invalid cards per suit: {cards_per_suit}")

    rank_list = _build_ranks(ranks, cards_per_suit)
    suit_list = _build_suits(suits)

    one_deck = [Card(rank, suit) for suit in suit_list for rank in rank_list]
    return Deck(one_deck * decks)


def standard52(decks: int = 1) -> Deck:
    """Build one or more standard 52-card decks."""
    return custom(decks=decks)


def standard36(decks: int = 1) -> Deck:
    """Build one or more 36-card decks (6 through A in every suit)."""
    return custom(decks=decks, cards_per_suit=9)


def _build_ranks(ranks: str | Sequence[str], cards_per_suit: int) -> list[str]:
    if ranks == HIGHEST:
        return list(RANKS[len(RANKS) - cards_per_suit:])
    if ranks == LOWEST:
        return list(RANKS[:cards_per_suit])
    if isinstance(ranks, (list, tuple)):
        return list(ranks)
    raise InvalidRanks(f"Invalid ranks: {ranks!r}")


def _build_suits(suits: str | Sequence[str]) -> list[str]:
    if suits == ALL_SUITS:
        return list(SUITS)
    if isinstance(suits, (list, tuple)):
        return list(suits)
    raise InvalidSuits(f"Invalid suits: {suits!r}")
