"""Configuration management for the demo."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .models import DEFAULT_BOUND

# Load environment variables from .env file
load_dotenv()


@dataclass
class DemoConfig:
    """Demo configuration parameters."""

    bound: int = DEFAULT_BOUND
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "DemoConfig":
        """Load demo configuration from environment variables."""
        raw_bound = os.getenv("ITERATION_BOUND", str(DEFAULT_BOUND))
        try:
            bound = int(raw_bound)
        except ValueError:
            raise ValueError(f"ITERATION_BOUND must be an integer, got {raw_bound!r}") from None

        return cls(
            bound=bound,
            verbose=os.getenv("VERBOSE", "false").lower() == "true",
        )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.bound, bool) or not isinstance(self.bound, int):
            raise ValueError(f"bound must be an integer, got {self.bound!r}")
        if self.bound < 0:
            raise ValueError("bound must be non-negative")


def get_demo_config() -> DemoConfig:
    """Get demo configuration."""
    return DemoConfig.from_env()
