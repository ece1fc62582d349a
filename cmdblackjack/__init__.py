"""Single-round terminal blackjack simulation - engine is UI-agnostic."""

from cmdblackjack.cards import Card, Deck, Rank, Suit, build_deck, shuffle_deck
from cmdblackjack.hand import GameResult, Hand, hand_value

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "build_deck",
    "shuffle_deck",
    "GameResult",
    "Hand",
    "hand_value",
]
