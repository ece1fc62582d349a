"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from cmdblackjack.cards import Card
from cmdblackjack.config import RulesConfig

_RULES = RulesConfig()


class GameResult(Enum):
    """Outcome of a round, valued by the text announced to the player."""

    PLAYER_WIN = "YOU WIN!!!"
    DEALER_WIN = "DEALER WIN"
    TIE = "TIE"

    def __str__(self) -> str:
        return self.value


def hand_value(cards: Iterable[Card], rules: RulesConfig = _RULES) -> int:
    """
    Calculate the total of a hand.

    Non-ace cards are summed first. Each ace then counts high if the
    non-ace total plus the high value stays within the limit, low otherwise.
    Every ace is checked against that same non-ace total, so earlier aces
    never influence later ones: A-A is 22 and A-A-9 is 31.

    No bust handling is done here; totals above the limit are returned as-is.
    """
    base = 0
    aces = 0

    for card in cards:
        if card.is_ace:
            aces += 1
        else:
            base += card.value

    total = base
    for _ in range(aces):
        if base + rules.ace_high > rules.blackjack:
            total += rules.ace_low
        else:
            total += rules.ace_high

    return total


def classify(player_total: int, dealer_total: int) -> GameResult:
    """Compare two totals: higher wins, equal ties."""
    if player_total > dealer_total:
        return GameResult.PLAYER_WIN
    if player_total < dealer_total:
        return GameResult.DEALER_WIN
    return GameResult.TIE


@dataclass
class Hand:
    """A blackjack hand with value calculation."""

    cards: list[Card] = field(default_factory=list)
    rules: RulesConfig = field(default=_RULES, repr=False, compare=False)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    @property
    def value(self) -> int:
        """Return the hand total under this hand's rules."""
        return hand_value(self.cards, self.rules)

    @property
    def num_cards(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        return f"{cards_str} ({self.value})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> GameResult:
    """
    Compare player and dealer hands.

    Totals are compared directly; busted hands get no special treatment.
    """
    return classify(player_hand.value, dealer_hand.value)
