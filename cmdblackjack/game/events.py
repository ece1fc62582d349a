"""Game events for the event system."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of game events."""

    # Deck events
    DECK_SHUFFLED = auto()
    CARD_DEALT = auto()

    # Round flow events
    ROUND_STARTED = auto()
    ROUND_RESOLVED = auto()
    ROUND_ENDED = auto()

    # Outcome events
    PLAYER_WINS = auto()
    DEALER_WINS = auto()
    PUSH = auto()

    # Error events
    INVALID_ACTION = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable game event.

    Events are the only channel from the engine to the presentation layer.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


# Type alias for event handlers
EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Dispatches round events to subscribers and records them in order.

    Handlers registered for a specific event type run before catch-all
    handlers (registered with ``event_type=None``).
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._log: list[GameEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Register `handler` for `event_type`, or for every event if None."""
        self._handlers.setdefault(event_type, []).append(handler)

    def emit(self, event: GameEvent) -> None:
        """Record the event and hand it to its subscribers."""
        self._log.append(event)
        for key in (event.event_type, None):
            for handler in self._handlers.get(key, []):
                handler(event)

    def emit_new(self, event_type: EventType, **data: Any) -> GameEvent:
        """Build an event from keyword data, emit it and return it."""
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Events emitted so far, oldest first (a copy)."""
        return list(self._log)
