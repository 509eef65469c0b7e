"""Drive sequences to completion and report every value."""

import logging
from typing import AsyncIterable, Iterable, List

from .protocols import Reporter

logger = logging.getLogger(__name__)


def report_value(value: int, label: str) -> None:
    """Print a single observation."""
    print(f"current value is {value} from iterable type {label}")


def announce(label: str) -> None:
    """Print the start line for a consumer."""
    print(f"starting to iterate over {label}")


def consume_sync(
    sequence: Iterable[int], label: str, report: Reporter = report_value
) -> int:
    """
    Log all values of an iterable and its label.

    Args:
        sequence: Any iterable of integers
        label: Name identifying the sequence variant
        report: Callback invoked once per value

    Returns:
        Number of values observed
    """
    announce(label)
    count = 0
    for value in sequence:
        report(value, label)
        count += 1

    logger.debug(f"Finished iterating over {label}: {count} values")
    return count


async def consume_async(
    sequence: AsyncIterable[int], label: str, report: Reporter = report_value
) -> int:
    """
    Log all values of an async iterable and its label.

    Suspends at every production step, so several consumers started as tasks
    interleave with each other.

    Args:
        sequence: Any async iterable of integers
        label: Name identifying the sequence variant
        report: Callback invoked once per value

    Returns:
        Number of values observed
    """
    announce(label)
    count = 0
    async for value in sequence:
        report(value, label)
        count += 1

    logger.debug(f"Finished iterating over {label}: {count} values")
    return count


def collect(sequence: Iterable[int]) -> List[int]:
    """Drain an iterable into a list."""
    return list(sequence)


async def collect_async(sequence: AsyncIterable[int]) -> List[int]:
    """Drain an async iterable into a list."""
    return [value async for value in sequence]
