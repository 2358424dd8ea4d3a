"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from blackjack.rules import RuleSet


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    bust_limit: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_BUST_LIMIT", "21"))
    )
    dealer_stands_on: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_DEALER_STANDS_ON", "17"))
    )

    def to_ruleset(self) -> RuleSet:
        """Build the engine rules from this configuration."""
        return RuleSet(bust_limit=self.bust_limit, dealer_stands_on=self.dealer_stands_on)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    seed: int | None = field(default_factory=_parse_seed)

    game: GameConfig = field(default_factory=GameConfig)


# Global configuration instance
config = AppConfig()
