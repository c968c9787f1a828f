"""
Deck: an ordered, mutable sequence of cards.

Index 0 is the top of the deck. Duplicates are allowed (multi-deck shoes).
Two decks are equal when they hold the same cards in the same order, which is
the contract the binary codec's round trip relies on.

Shuffling is a numpy permutation driven by a stored seed, so a deck can be
rebuilt and reshuffled into exactly the same order.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

import numpy as np

from .cards import Card, cards_to_str

logger = logging.getLogger(__name__)


class Deck:
    """An ordered list of cards with seeded shuffling and deal/burn bookkeeping.

    Examples:
        >>> from card_dealer.engine.cards import parse_cards
        >>> deck = Deck(parse_cards('As Td 2c'))
        >>> len(deck)
        3
        >>> deck.deal(burn=1)
        [Card('Td')]
        >>> deck.burned_cards
        [Card('As')]
    """

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        self.cards: list[Card] = list(cards) if cards is not None else []
        self.burned_cards: list[Card] = []
        self.seed: int | None = None

    # ─── Sequence protocol ────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index):
        return self.cards[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self.cards == other.cards

    __hash__ = None  # mutable

    @property
    def size(self) -> int:
        return len(self.cards)

    # ─── Operations ───────────────────────────────────────────────────────────

    def shuffle(self, seed: int | None = None) -> Deck:
        """Shuffle the deck in place and return it.

        The first seed used is kept on the deck; later calls reuse it and
        ignore ``seed``. Without any seed, a fresh one is drawn from OS
        entropy and recorded.

        Examples:
            >>> from card_dealer.engine.deck_builder import standard52
            >>> a = standard52().shuffle(42)
            >>> b = standard52().shuffle(42)
            >>> a == b
            True
        """
        candidate = self.seed
        if candidate is None:
            candidate = int(seed) if seed is not None else int(np.random.SeedSequence().entropy)
        # numpy rejects negative seeds; only a usable seed is recorded
        rng = np.random.default_rng(candidate)
        self.seed = candidate
        order = rng.permutation(len(self.cards))
        self.cards = [self.cards[i] for i in order]
        logger.debug("Shuffled %d cards with seed %d", len(self.cards), self.seed)
        return self

    def deal(self, num: int = 1, burn: int = 0) -> list[Card]:
        """Remove and return ``num`` cards from the top, after burning ``burn``.

        Burned cards are appended to ``burned_cards``. Asking for more cards
        than remain returns whatever is left.

        Raises:
            ValueError: If ``num`` or ``burn`` is negative.
        """
        if num < 0 or burn < 0:
            raise ValueError(f"Cannot deal {num} cards with {burn} burned.")
        if burn:
            self.burned_cards.extend(self.cards[:burn])
            del self.cards[:burn]
        dealt = self.cards[:num]
        del self.cards[:num]
        return dealt

    # ─── Conversion ───────────────────────────────────────────────────────────

    def to_list(self) -> list[str]:
        return [str(card) for card in self.cards]

    def to_bytes(self) -> bytes:
        """Encode the deck with the binary codec."""
        from ..codec.binary_deck import encode

        return encode(self)

    @classmethod
    def from_bytes(cls, data: bytes) -> Deck:
        """Decode a deck produced by ``to_bytes``."""
        from ..codec.binary_deck import decode

        return cls(decode(data).cards)

    def __str__(self) -> str:
        return cards_to_str(self.cards)

    def __repr__(self) -> str:
        return f"Deck({len(self.cards)} cards)"
