"""Text rendering of cards, the deck and the table."""

import sys
from dataclasses import replace
from typing import Iterable, Sequence, TextIO

from cmdblackjack.cards import RANK_CODES, SUIT_CODES, Card
from cmdblackjack.config import AppConfig, DisplayConfig, config as default_config
from cmdblackjack.game.events import EventType, GameEvent
from cmdblackjack.hand import GameResult

_DISPLAY = DisplayConfig()

BANNER_LINES = [
    "************************************************************",
    "**                                                        **",
    "**                   ##################                   **",
    "**                   # BLACKJACK GAME #                   **",
    "**                   ##################                   **",
    "**                                                        **",
    "************************************************************",
    "   PLAYER HAND                              DEALER HAND     ",
    "  ==============                           ==============   ",
]


def card_code(card: Card, hidden: bool = False, display: DisplayConfig = _DISPLAY) -> str:
    """
    Return the two-character code for a card, e.g. '2H', 'TS', 'QD'.

    A hidden card renders as a single placeholder glyph. A rank or suit
    with no code renders as '?' on its own.
    """
    if hidden:
        return display.hidden_card
    rank = RANK_CODES.get(card.rank, display.unknown)
    suit = SUIT_CODES.get(card.suit, display.unknown)
    return f"{rank}{suit}"


def deck_dump(cards: Iterable[Card], display: DisplayConfig = _DISPLAY) -> str:
    """Render every card followed by a space, then a newline."""
    return "".join(f"{card_code(card, display=display)} " for card in cards) + "\n"


def banner(display: DisplayConfig = _DISPLAY) -> str:
    """Return the table banner with its column headers."""
    return "".join(f"{display.banner_indent}{line}\n" for line in BANNER_LINES)


def round_display(
    player_hand: Sequence[Card],
    dealer_hand: Sequence[Card],
    player_total: int,
    dealer_total: int,
    display: DisplayConfig = _DISPLAY,
) -> str:
    """
    Render the dealt round.

    Both player cards are face up; only the dealer's first card is shown.
    """
    player = " ".join(card_code(card, display=display) for card in player_hand)
    dealer = " ".join(
        card_code(card, hidden=i > 0, display=display)
        for i, card in enumerate(dealer_hand)
    )
    return (
        f"\t\t\t {player}\t\t\t\t\t{dealer}\n"
        f"PLAYER TOTAL: {player_total}\n"
        f"DEALER TOTAL: {dealer_total}\n"
    )


def fit_display(display: DisplayConfig, encoding: str | None) -> DisplayConfig:
    """Swap in the ASCII placeholder if `encoding` cannot carry the hidden-card glyph."""
    if not encoding:
        return display
    try:
        display.hidden_card.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return replace(display, hidden_card=display.hidden_card_ascii)
    return display


class TableRenderer:
    """Writes the table to a text stream, driven by game events."""

    def __init__(self, out: TextIO | None = None, config: AppConfig | None = None) -> None:
        self.out = out or sys.stdout
        display = (config or default_config).display
        self.display = fit_display(display, getattr(self.out, "encoding", None))

    def draw_table(self) -> None:
        self.out.write(banner(self.display))

    def draw_deck(self, cards: Iterable[Card]) -> None:
        self.out.write(deck_dump(cards, self.display))

    def blank_line(self) -> None:
        self.out.write("\n")

    def draw_result(self, result: GameResult) -> None:
        """Write the result text without a trailing newline."""
        self.out.write(str(result))

    def handle_event(self, event: GameEvent) -> None:
        """Event handler: draw the round once it is resolved."""
        if event.event_type != EventType.ROUND_RESOLVED:
            return
        self.out.write(
            round_display(
                event.data["player_hand"],
                event.data["dealer_hand"],
                event.data["player_total"],
                event.data["dealer_total"],
                self.display,
            )
        )
