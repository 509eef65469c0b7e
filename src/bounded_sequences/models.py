"""Production result models for bounded sequences."""

from dataclasses import dataclass
from typing import Dict, Union

DEFAULT_BOUND = 5


@dataclass(frozen=True)
class Value:
    """A produced element of a sequence."""

    value: int

    def to_dict(self) -> Dict:
        """Convert to the iterator protocol record."""
        return {"value": self.value}


@dataclass(frozen=True)
class Done:
    """Signals that no more elements will be produced."""

    def to_dict(self) -> Dict:
        """Convert to the iterator protocol record."""
        return {"done": True}


DONE = Done()

ProductionResult = Union[Value, Done]


class SequenceExhausted(RuntimeError):
    """Raised when a sequence is asked for a value after it reported Done."""
