"""Card, Deck, and shuffling - immutable card representations."""

import os
import secrets
import time
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterator


class Suit(Enum):
    """Card suits, in deck-building order."""

    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3
    SPADES = 4

    def __str__(self) -> str:
        return SUIT_CODES[self]


class Rank(Enum):
    """Card ranks with blackjack values."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return RANK_CODES[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


RANK_CODES: dict[Rank, str] = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

SUIT_CODES: dict[Suit, str] = {
    Suit.HEARTS: "H",
    Suit.DIAMONDS: "D",
    Suit.CLUBS: "C",
    Suit.SPADES: "S",
}

DECK_SIZE = 52


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a two-character code like 'AS', 'Th', '10D'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {code: rank for rank, code in RANK_CODES.items()}
        rank_map["10"] = Rank.TEN
        suit_map = {code: suit for suit, code in SUIT_CODES.items()}

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def build_deck() -> list[Card]:
    """Return all 52 cards, suits in the outer loop and ranks in the inner."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def entropy_seed() -> int:
    """
    Draw a seed from the operating system's entropy source.

    Falls back to the clock and process id when no OS randomness is available.
    """
    try:
        return secrets.randbits(64)
    except (NotImplementedError, OSError):
        return time.time_ns() ^ (os.getpid() << 32)


def shuffle_deck(cards: list[Card], rng: Random | None = None) -> None:
    """
    Shuffle cards in place with a uniform permutation.

    Args:
        cards: Cards to reorder
        rng: Random number generator; a freshly seeded one is used if omitted
    """
    rng = rng or Random(entropy_seed())
    rng.shuffle(cards)


class Deck:
    """
    A standard 52-card deck.

    Drawing advances a cursor over the cards; nothing is removed.
    """

    def __init__(
        self,
        rng: Random | None = None,
        cards: list[Card] | None = None,
    ) -> None:
        """
        Initialize a new deck.

        Args:
            rng: Random number generator for shuffling
            cards: Preset card order (a stacked deck); canonical order if omitted
        """
        self._rng = rng
        self._cards: list[Card] = []
        self._top: int = 0
        if cards is None:
            self.reset()
        else:
            if len(cards) != DECK_SIZE or len(set(cards)) != DECK_SIZE:
                raise ValueError(f"Deck must hold {DECK_SIZE} distinct cards")
            self._cards = list(cards)

    @classmethod
    def stacked(cls, top: list[Card]) -> "Deck":
        """Build a deck whose first cards are `top`, rest in canonical order."""
        rest = [card for card in build_deck() if card not in top]
        return cls(cards=list(top) + rest)

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self._cards = build_deck()
        self._top = 0

    def shuffle(self) -> None:
        """Shuffle the deck and rewind to the top card."""
        shuffle_deck(self._cards, self._rng)
        self._top = 0

    def draw(self) -> Card:
        """Draw the next card from the top of the deck."""
        if self._top >= len(self._cards):
            raise IndexError("Cannot draw from exhausted deck")
        card = self._cards[self._top]
        self._top += 1
        return card

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards not yet drawn."""
        return len(self._cards) - self._top

    @property
    def cards_dealt(self) -> int:
        """Return the number of cards drawn so far."""
        return self._top
