"""
Four shapes of the same bounded sequence.

Literal shapes are factories returning an iterator over a fresh counter;
class shapes hold the counter as an instance attribute and hand out iterators
bound to it. Both go through the same iterator types, so they can be swapped
freely by a consumer and behave alike once exhausted.
"""

from typing import AsyncIterator, Iterator

from .counter import BoundedCounter
from .models import DEFAULT_BOUND, Done, ProductionResult


class _CounterIterator:
    """Iterator view over a shared BoundedCounter."""

    def __init__(self, counter: BoundedCounter):
        self._counter = counter

    def __iter__(self) -> "_CounterIterator":
        return self

    def __next__(self) -> int:
        result = self._counter.produce_next()
        if isinstance(result, Done):
            raise StopIteration
        return result.value


class _AsyncCounterIterator:
    """Async iterator view over a shared BoundedCounter."""

    def __init__(self, counter: BoundedCounter):
        self._counter = counter

    def __aiter__(self) -> "_AsyncCounterIterator":
        return self

    async def __anext__(self) -> int:
        result = await self._counter.produce_next_async()
        if isinstance(result, Done):
            raise StopAsyncIteration
        return result.value


class CounterIterable:
    """
    Class based iterable over 0 .. bound-1.

    The instance owns the counter, so it can be iterated only once. Starting
    another iteration after exhaustion raises SequenceExhausted.
    """

    def __init__(self, bound: int = DEFAULT_BOUND):
        """
        Initialize the iterable.

        Args:
            bound: Number of values to produce
        """
        self.counter = BoundedCounter(bound)

    def __iter__(self) -> Iterator[int]:
        return _CounterIterator(self.counter)

    def produce_next(self) -> ProductionResult:
        """Produce the next tagged result without the iterator protocol."""
        return self.counter.produce_next()


class AsyncCounterIterable:
    """Class based async iterable over 0 .. bound-1."""

    def __init__(self, bound: int = DEFAULT_BOUND):
        self.counter = BoundedCounter(bound)

    def __aiter__(self) -> AsyncIterator[int]:
        return _AsyncCounterIterator(self.counter)

    async def produce_next_async(self) -> ProductionResult:
        """Produce the next tagged result without the async iterator protocol."""
        return await self.counter.produce_next_async()


def counter_literal(bound: int = DEFAULT_BOUND) -> Iterator[int]:
    """Iterator over 0 .. bound-1."""
    return _CounterIterator(BoundedCounter(bound))


def async_counter_literal(bound: int = DEFAULT_BOUND) -> AsyncIterator[int]:
    """Async iterator over 0 .. bound-1, suspending at every step."""
    return _AsyncCounterIterator(BoundedCounter(bound))
