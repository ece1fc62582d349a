"""Pytest fixtures for blackjack simulation tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from cmdblackjack.cards import Card, Deck, Rank, Suit
from cmdblackjack.hand import Hand
from cmdblackjack.game import BlackjackGame


def make_hand(*codes: str) -> Hand:
    """Build a hand from card codes like 'AS', 'TD'."""
    hand = Hand()
    for code in codes:
        hand.add_card(Card.from_string(code))
    return hand


def stacked_deck(*codes: str) -> Deck:
    """A deck whose top cards are the given codes, in order."""
    return Deck.stacked([Card.from_string(code) for code in codes])


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def ordered_deck():
    """An unshuffled deck in build order."""
    return Deck()


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """Ace and King."""
    return make_hand("AS", "KH")


@pytest.fixture
def hard_16_hand():
    """Ten and Six."""
    return make_hand("TS", "6H")


@pytest.fixture
def winning_deck():
    """Player gets A-K (21), dealer gets 9-8 (17)."""
    return stacked_deck("AH", "9C", "KS", "8D")


@pytest.fixture
def game(winning_deck):
    """A round over the winning deck."""
    return BlackjackGame(deck=winning_deck)


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=2, max_cards=5):
    """Generate a random hand."""
    cards = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
    hand = Hand()
    for card in cards:
        hand.add_card(card)
    return hand
