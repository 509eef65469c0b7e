"""Protocol definitions for dependency inversion."""

from typing import Protocol


class Reporter(Protocol):
    """Protocol for observation callbacks."""

    def __call__(self, value: int, label: str) -> None:
        """Emit one observation."""
        ...
