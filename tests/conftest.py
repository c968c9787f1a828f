"""
Shared pytest fixtures for card-dealer tests.

Provides convenience wrappers around make_card for building known decks.
"""

from __future__ import annotations

import pytest

from card_dealer.engine.cards import make_card
from card_dealer.engine.deck import Deck
from card_dealer.engine.deck_builder import standard52


def deck(*card_strs: str) -> Deck:
    """Build a deck from human-readable card strings.

    Examples:
        >>> deck('As', 'Td').to_list()
        ['As', 'Td']
    """
    return Deck(make_card(s) for s in card_strs)


class SizedStub:
    """Stands in for a deck or buffer that only reports its length."""

    def __init__(self, length: int) -> None:
        self.length = length

    def __len__(self) -> int:
        return self.length

    def __iter__(self):
        raise AssertionError("SizedStub must not be iterated")


@pytest.fixture
def fresh_deck() -> Deck:
    """Return an unshuffled 52-card deck."""
    return standard52()


@pytest.fixture
def shuffled_deck() -> Deck:
    """Return a 52-card deck shuffled with a fixed seed."""
    return standard52().shuffle(1234)


@pytest.fixture
def d():
    """Expose the deck() helper as a fixture for convenience."""
    return deck
