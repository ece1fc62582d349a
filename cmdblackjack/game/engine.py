"""Blackjack round engine with state machine."""

from random import Random
from typing import Callable

from transitions import Machine

from cmdblackjack.cards import Card, Deck
from cmdblackjack.config import AppConfig, config as default_config
from cmdblackjack.hand import GameResult, Hand, classify
from cmdblackjack.game.events import EventEmitter, EventType, GameEvent
from cmdblackjack.game.state import GameState

_OUTCOME_EVENTS = {
    GameResult.PLAYER_WIN: EventType.PLAYER_WINS,
    GameResult.DEALER_WIN: EventType.DEALER_WINS,
    GameResult.TIE: EventType.PUSH,
}


class BlackjackGame:
    """
    Single-round blackjack using a state machine.

    The engine is UI-agnostic: it reports progress through events and
    return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal_cards", "source": "initialized", "dest": "dealt"},
        {"trigger": "resolve_round", "source": "dealt", "dest": "resolved"},
    ]

    def __init__(
        self,
        deck: Deck | None = None,
        rng: Random | None = None,
        config: AppConfig | None = None,
    ) -> None:
        """
        Initialize a new round.

        Args:
            deck: Deck to deal from, used in its current order; a freshly
                shuffled deck is created if omitted
            rng: Random number generator for shuffling a fresh deck
            config: Application configuration (uses defaults if not provided)
        """
        self.config = config or default_config
        self.events = EventEmitter()

        if deck is None:
            deck = Deck(rng=rng)
            deck.shuffle()
            self.events.emit_new(EventType.DECK_SHUFFLED)
        self.deck = deck

        self.player_hand = Hand(rules=self.config.rules)
        self.dealer_hand = Hand(rules=self.config.rules)
        self.result: GameResult | None = None

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="initialized",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def deal(self) -> bool:
        """
        Deal the initial hands: player, dealer, player, dealer.

        The dealer's second card is dealt face down.

        Returns:
            True if the cards were dealt
        """
        if self.state != GameState.INITIALIZED:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Cannot deal in current state",
                state=self.state.name,
            )
            return False

        self.events.emit_new(EventType.ROUND_STARTED)

        for i in range(self.config.rules.hand_size):
            self._deal_card_to_hand(self.player_hand)
            self._deal_card_to_hand(self.dealer_hand, face_up=i == 0)

        self.deal_cards()  # Move to dealt
        return True

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card:
        """Deal a card to a hand."""
        card = self.deck.draw()
        hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand="dealer" if hand is self.dealer_hand else "player",
            position=self.deck.cards_dealt - 1,
            face_up=face_up,
        )
        return card

    def resolve(self) -> GameResult | None:
        """
        Compare hand totals and finish the round.

        Returns:
            The round result, or None if the hands have not been dealt
        """
        if self.state != GameState.DEALT:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Cannot resolve in current state",
                state=self.state.name,
            )
            return None

        player_total = self.player_hand.value
        dealer_total = self.dealer_hand.value
        self.result = classify(player_total, dealer_total)

        self.resolve_round()  # Move to resolved

        self.events.emit_new(
            EventType.ROUND_RESOLVED,
            player_hand=list(self.player_hand),
            dealer_hand=list(self.dealer_hand),
            player_total=player_total,
            dealer_total=dealer_total,
            result=self.result,
        )
        self.events.emit_new(
            _OUTCOME_EVENTS[self.result],
            player_total=player_total,
            dealer_total=dealer_total,
        )
        self.events.emit_new(EventType.ROUND_ENDED, result=self.result.name)
        return self.result

    def play(self) -> GameResult | None:
        """Play the round through to resolution and return the result."""
        if self.state == GameState.INITIALIZED:
            self.deal()
        if self.state == GameState.DEALT:
            self.resolve()
        return self.result

    @property
    def is_over(self) -> bool:
        """Check if the round has been resolved."""
        return self.state == GameState.RESOLVED
