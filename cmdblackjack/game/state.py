"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: INITIALIZED → DEALT → RESOLVED
    """

    # Shuffled deck in hand, nothing dealt
    INITIALIZED = auto()

    # Two cards each for player and dealer
    DEALT = auto()

    # Totals compared, outcome known (terminal)
    RESOLVED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.INITIALIZED: [GameState.DEALT],
    GameState.DEALT: [GameState.RESOLVED],
    GameState.RESOLVED: [],  # Terminal state
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
