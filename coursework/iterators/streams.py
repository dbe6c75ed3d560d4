"""
Stream-style helpers over arbitrary iterables.

Every helper takes the source iterable as its first argument. Helpers that
return an iterator are generators: nothing is pulled from the source until
the result is iterated, and only as many elements as needed are pulled.

    Eager : for_each, reduce
    Lazy  : peek, map_items, filter_items, indexed, skip_while, skip_some,
            take_while, take_some, integers, range_of

Counting helpers truncate rather than fail: take_some/skip_some on a source
shorter than `count` simply yield whatever is (or is not) left.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

T = TypeVar('T')
R = TypeVar('R')

# ─── Constants ────────────────────────────────────────────────────────────────

# Largest value produced by integers(); mirrors a signed 32-bit int.
MAX_INTEGER: int = 2 ** 31 - 1

# Sentinel returned by next() once a source runs dry.
_EXHAUSTED = object()


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}.")


# ─── Terminal (eager) operations ──────────────────────────────────────────────

def for_each(sequence: Iterable[T], action: Callable[[T], object]) -> None:
    """Call `action` on every element of `sequence`, in order."""
    for item in sequence:
        action(item)


def reduce(sequence: Iterable[T], seed: R, reducer: Callable[[R, T], R]) -> R:
    """Left fold of `sequence` starting from `seed`.

    Examples:
        >>> reduce([1, 2, 3], 10, lambda acc, x: acc + x)
        16
        >>> reduce([], 'empty', lambda acc, x: acc + x)
        'empty'
    """
    acc = seed
    for item in sequence:
        acc = reducer(acc, item)
    return acc


# ─── Intermediate (lazy) operations ───────────────────────────────────────────

def peek(sequence: Iterable[T], action: Callable[[T], object]) -> Iterator[T]:
    """Yield elements unchanged, calling `action` on each as it is pulled."""
    for item in sequence:
        action(item)
        yield item


def map_items(sequence: Iterable[T], mapper: Callable[[T], R]) -> Iterator[R]:
    """
    Examples:
        >>> list(map_items([1, 2, 3], lambda x: x * x))
        [1, 4, 9]
    """
    for item in sequence:
        yield mapper(item)


def filter_items(sequence: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    for item in sequence:
        if predicate(item):
            yield item


def indexed(sequence: Iterable[T]) -> Iterator[tuple[int, T]]:
    """Pair each element with its zero-based position.

    Examples:
        >>> list(indexed('ab'))
        [(0, 'a'), (1, 'b')]
    """
    i = 0
    for item in sequence:
        yield i, item
        i += 1


def skip_while(sequence: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Drop the longest prefix matching `predicate`, then yield everything else.

    Once the first non-matching element is seen the predicate is no longer
    consulted, so later matching elements are kept.

    Examples:
        >>> list(skip_while([1, 2, 5, 1, 2], lambda x: x < 3))
        [5, 1, 2]
    """
    skipping = True
    for item in sequence:
        if skipping and predicate(item):
            continue
        skipping = False
        yield item


def skip_some(sequence: Iterable[T], count: int) -> Iterator[T]:
    """Yield all but the first `count` elements (nothing if there are fewer).

    Raises:
        ValueError: If `count` is negative (raised when iteration starts).
    """
    _check_count(count)
    iterator = iter(sequence)
    for _ in range(count):
        if next(iterator, _EXHAUSTED) is _EXHAUSTED:
            return
    yield from iterator


def take_while(sequence: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Yield elements while `predicate` holds; stop at the first failure.

    Examples:
        >>> list(take_while([1, 2, 5, 1, 2], lambda x: x < 3))
        [1, 2]
    """
    for item in sequence:
        if not predicate(item):
            return
        yield item


def take_some(sequence: Iterable[T], count: int) -> Iterator[T]:
    """Yield at most the first `count` elements.

    A source with fewer than `count` elements is passed through whole.
    The source is never advanced past the `count`-th element, so
    take_some works on infinite iterators.

    Raises:
        ValueError: If `count` is negative (raised when iteration starts).
    """
    _check_count(count)
    if count == 0:
        return
    taken = 0
    for item in sequence:
        yield item
        taken += 1
        if taken == count:
            return


# ─── Sources ──────────────────────────────────────────────────────────────────

def integers(start: int = 0) -> Iterator[int]:
    """Ascending integers from `start` (inclusive) up to MAX_INTEGER.

    Examples:
        >>> list(take_some(integers(5), 3))
        [5, 6, 7]
        >>> list(integers(MAX_INTEGER))
        [2147483647]
    """
    n = start
    while n <= MAX_INTEGER:
        yield n
        n += 1


def range_of(start: int, count: int) -> Iterator[int]:
    """`count` consecutive integers beginning at `start`.

    Examples:
        >>> list(range_of(-2, 4))
        [-2, -1, 0, 1]
    """
    return take_some(integers(start), count)

