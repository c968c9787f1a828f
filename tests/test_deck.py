"""Tests for card_dealer/engine/deck.py — ordering, equality, shuffling and dealing."""

from __future__ import annotations

import pytest

from card_dealer.engine.cards import Card
from card_dealer.engine.deck import Deck
from card_dealer.engine.deck_builder import standard52
from tests.conftest import deck


class TestDeckSequence:
    def test_empty_by_default(self):
        assert len(Deck()) == 0
        assert Deck().to_list() == []

    def test_size_and_len(self):
        d = deck('As', 'Td', '2c')
        assert len(d) == 3
        assert d.size == 3

    def test_iteration_order(self):
        d = deck('As', 'Td', '2c')
        assert [str(c) for c in d] == ['As', 'Td', '2c']

    def test_indexing(self):
        d = deck('As', 'Td')
        assert d[0] == Card('A', 's')
        assert d[-1] == Card('T', 'd')

    def test_duplicates_allowed(self):
        d = deck('As', 'As')
        assert len(d) == 2

    def test_copies_input(self):
        cards = [Card('A', 's')]
        d = Deck(cards)
        cards.append(Card('K', 's'))
        assert len(d) == 1

    def test_str_and_repr(self):
        d = deck('As', 'Td')
        assert str(d) == 'As Td'
        assert repr(d) == 'Deck(2 cards)'


class TestDeckEquality:
    def test_same_cards_same_order(self):
        assert deck('As', 'Td') == deck('As', 'Td')

    def test_order_sensitive(self):
        assert deck('As', 'Td') != deck('Td', 'As')

    def test_length_sensitive(self):
        assert deck('As') != deck('As', 'As')

    def test_not_equal_to_list(self):
        assert deck('As') != [Card('A', 's')]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Deck())


class TestShuffle:
    def test_returns_self(self, fresh_deck):
        assert fresh_deck.shuffle(1) is fresh_deck

    def test_same_seed_same_order(self):
        assert standard52().shuffle(42) == standard52().shuffle(42)

    def test_different_seed_different_order(self):
        assert standard52().shuffle(1) != standard52().shuffle(2)

    def test_preserves_cards(self, fresh_deck):
        before = sorted(fresh_deck)
        fresh_deck.shuffle(7)
        assert sorted(fresh_deck) == before

    def test_changes_order(self, fresh_deck):
        assert fresh_deck.shuffle(7) != standard52()

    def test_seed_recorded(self, fresh_deck):
        fresh_deck.shuffle(99)
        assert fresh_deck.seed == 99

    def test_random_seed_recorded(self, fresh_deck):
        fresh_deck.shuffle()
        assert isinstance(fresh_deck.seed, int)
        replay = standard52().shuffle(fresh_deck.seed)
        assert replay == fresh_deck

    def test_first_seed_is_kept(self):
        d = standard52().shuffle(5)
        d.shuffle(6)
        assert d.seed == 5
        assert d == standard52().shuffle(5).shuffle(5)

    def test_empty_deck(self):
        assert Deck().shuffle(3) == Deck()

    def test_rejected_seed_is_not_recorded(self, fresh_deck):
        with pytest.raises(ValueError):
            fresh_deck.shuffle(-1)
        assert fresh_deck.seed is None
        assert fresh_deck == standard52()

    def test_shuffle_works_after_rejected_seed(self, fresh_deck):
        with pytest.raises(ValueError):
            fresh_deck.shuffle(-1)
        fresh_deck.shuffle(5)
        assert fresh_deck.seed == 5
        assert fresh_deck == standard52().shuffle(5)


class TestDeal:
    def test_deal_one_by_default(self):
        d = deck('As', 'Td', '2c')
        assert d.deal() == [Card('A', 's')]
        assert d.to_list() == ['Td', '2c']

    def test_deal_several(self):
        d = deck('As', 'Td', '2c')
        assert d.deal(2) == [Card('A', 's'), Card('T', 'd')]
        assert len(d) == 1

    def test_burn_before_deal(self):
        d = deck('As', 'Td', '2c')
        assert d.deal(burn=1) == [Card('T', 'd')]
        assert d.burned_cards == [Card('A', 's')]
        assert d.to_list() == ['2c']

    def test_burns_accumulate(self):
        d = deck('As', 'Td', '2c', '3c')
        d.deal(burn=1)
        d.deal(burn=1)
        assert d.burned_cards == [Card('A', 's'), Card('2', 'c')]
        assert len(d) == 0

    def test_deal_past_end_returns_remaining(self):
        d = deck('As')
        assert d.deal(5) == [Card('A', 's')]
        assert d.deal() == []

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            deck('As').deal(-1)
        with pytest.raises(ValueError):
            deck('As').deal(burn=-1)


class TestBinaryConversion:
    def test_to_bytes(self):
        assert deck('As', 'Td').to_bytes() == b'\x02\xcd\x50'

    def test_from_bytes(self):
        assert Deck.from_bytes(b'\x02\xcd\x50') == deck('As', 'Td')

    def test_from_bytes_keeps_subclass(self, d):
        class Shoe(Deck):
            pass

        shoe = Shoe.from_bytes(d('As', 'Td').to_bytes())
        assert isinstance(shoe, Shoe)
        assert shoe == d('As', 'Td')

    def test_roundtrip_after_deal(self, shuffled_deck):
        shuffled_deck.deal(3, burn=1)
        assert Deck.from_bytes(shuffled_deck.to_bytes()) == shuffled_deck
