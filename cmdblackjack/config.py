"""Configuration for the simulation. Constants only, nothing is read from the environment."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RulesConfig:
    """Round rules."""

    hand_size: int = 2
    blackjack: int = 21
    ace_high: int = 11
    ace_low: int = 1


@dataclass(frozen=True)
class DisplayConfig:
    """Terminal rendering options."""

    hidden_card: str = "▓"  # medium-dark shade block
    hidden_card_ascii: str = "#"  # for streams that cannot encode hidden_card
    unknown: str = "?"
    banner_indent: str = "\t\t\t\t"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    rules: RulesConfig = field(default_factory=RulesConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


# Global configuration instance
config = AppConfig()
