"""The counting rule shared by every sequence shape."""

import asyncio
import logging

from .models import DEFAULT_BOUND, DONE, ProductionResult, SequenceExhausted, Value

logger = logging.getLogger(__name__)


class BoundedCounter:
    """
    Counts from 0 up to (not including) a bound.

    Single Responsibility: own the counter and decide Value vs Done.
    """

    def __init__(self, bound: int = DEFAULT_BOUND):
        """
        Initialize the counter.

        Args:
            bound: Number of values to produce before Done

        Raises:
            ValueError: If bound is negative or not an integer
        """
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise ValueError(f"bound must be an integer, got {bound!r}")
        if bound < 0:
            raise ValueError("bound must be non-negative")

        self.bound = bound
        self.i = 0
        self._done = False

    @property
    def exhausted(self) -> bool:
        """Whether Done has already been produced."""
        return self._done

    def produce_next(self) -> ProductionResult:
        """
        Produce the next result.

        The counter is incremented on every call, including the one that
        returns Done.

        Returns:
            Value with the current count, or DONE once the bound is reached

        Raises:
            SequenceExhausted: If called again after DONE was returned
        """
        if self._done:
            raise SequenceExhausted(
                f"sequence with bound {self.bound} was already exhausted"
            )

        value = self.i
        self.i += 1

        if value >= self.bound:
            self._done = True
            logger.debug(f"Counter reached bound {self.bound}")
            return DONE

        return Value(value)

    async def produce_next_async(self) -> ProductionResult:
        """Yield once to the event loop, then produce the next result."""
        await asyncio.sleep(0)
        return self.produce_next()
