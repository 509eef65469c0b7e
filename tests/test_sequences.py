"""Tests for sequences module."""

import asyncio

import pytest

from bounded_sequences.consumer import collect, collect_async
from bounded_sequences.models import DONE, SequenceExhausted, Value
from bounded_sequences.sequences import (
    AsyncCounterIterable,
    CounterIterable,
    async_counter_literal,
    counter_literal,
)


def test_literal_yields_default_sequence():
    """Test that the generator shape yields 0..4 by default."""
    assert collect(counter_literal()) == [0, 1, 2, 3, 4]


def test_class_yields_default_sequence():
    """Test that the class shape yields 0..4 by default."""
    assert collect(CounterIterable()) == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("bound", [0, 1, 3, 10])
def test_all_shapes_agree(bound):
    """Test that all four shapes produce the same values for the same bound."""
    expected = list(range(bound))

    assert collect(counter_literal(bound)) == expected
    assert collect(CounterIterable(bound)) == expected
    assert asyncio.run(collect_async(async_counter_literal(bound))) == expected
    assert asyncio.run(collect_async(AsyncCounterIterable(bound))) == expected


def test_literal_is_lazy():
    """Test that nothing is produced until the generator is advanced."""
    gen = counter_literal(3)
    assert iter(gen) is gen
    assert next(gen) == 0


def test_class_is_not_restartable():
    """Test that iterating an exhausted class instance raises."""
    iterable = CounterIterable(2)
    assert list(iterable) == [0, 1]

    with pytest.raises(SequenceExhausted):
        list(iterable)


def test_class_iterators_share_counter():
    """Test that every iterator handed out shares the instance counter."""
    iterable = CounterIterable(4)
    first = iter(iterable)
    second = iter(iterable)

    assert next(first) == 0
    assert next(second) == 1
    assert next(first) == 2


def test_class_produce_next():
    """Test the tagged-result contract on the class shape."""
    iterable = CounterIterable(1)
    assert iterable.produce_next() == Value(0)
    assert iterable.produce_next() is DONE


def test_async_class_produce_next_async():
    """Test the tagged-result contract on the async class shape."""
    iterable = AsyncCounterIterable(1)

    async def drain():
        return [await iterable.produce_next_async() for _ in range(2)]

    assert asyncio.run(drain()) == [Value(0), DONE]


def test_async_class_is_not_restartable():
    """Test that iterating an exhausted async class instance raises."""
    iterable = AsyncCounterIterable(1)

    async def drain_twice():
        await collect_async(iterable)
        await collect_async(iterable)

    with pytest.raises(SequenceExhausted):
        asyncio.run(drain_twice())


def test_negative_bound_rejected_by_class():
    """Test that the class shape validates its bound at construction."""
    with pytest.raises(ValueError, match="non-negative"):
        CounterIterable(-3)


def test_literal_raises_after_exhaustion():
    """Test that the literal shape refuses to continue after Done, like the class shape."""
    literal = counter_literal(1)
    assert list(literal) == [0]

    with pytest.raises(SequenceExhausted):
        next(literal)

    class_iterator = iter(CounterIterable(1))
    assert list(class_iterator) == [0]

    with pytest.raises(SequenceExhausted):
        next(class_iterator)


def test_async_literal_raises_after_exhaustion():
    """Test that the async literal shape refuses to continue after Done."""
    literal = async_counter_literal(1)

    async def drain_then_next():
        assert await collect_async(literal) == [0]
        await literal.__anext__()

    with pytest.raises(SequenceExhausted):
        asyncio.run(drain_then_next())
