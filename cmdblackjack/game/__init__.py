"""Game engine and state management."""

from cmdblackjack.game.events import GameEvent, EventType
from cmdblackjack.game.state import GameState
from cmdblackjack.game.engine import BlackjackGame

__all__ = [
    "GameEvent",
    "EventType",
    "GameState",
    "BlackjackGame",
]
