"""Bounded Sequences - the sync and async iteration protocols, four ways."""

__version__ = "0.1.0"

from .consumer import collect, collect_async, consume_async, consume_sync, report_value
from .counter import BoundedCounter
from .models import DEFAULT_BOUND, DONE, Done, ProductionResult, SequenceExhausted, Value
from .sequences import (
    AsyncCounterIterable,
    CounterIterable,
    async_counter_literal,
    counter_literal,
)

__all__ = [
    # Models
    "DEFAULT_BOUND",
    "DONE",
    "Done",
    "Value",
    "ProductionResult",
    "SequenceExhausted",
    # Counter
    "BoundedCounter",
    # Sequences
    "counter_literal",
    "async_counter_literal",
    "CounterIterable",
    "AsyncCounterIterable",
    # Consumer
    "consume_sync",
    "consume_async",
    "report_value",
    "collect",
    "collect_async",
]
