"""
Two-key associative container.

A Map2D stores values addressed by an ordered key pair (key1, key2):

    m = Map2D()
    m['row', 'col'] = 42
    m['row', 'col']      -> 42
    m.get_row('row')     -> [('col', 42)]
    m.get_column('col')  -> [('row', 42)]

Storage is a single flat dict keyed by (key1, key2) tuples. Row and column
queries are linear scans over that dict; there are no secondary indexes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

import numpy as np

from coursework.errors import DuplicateKeyPairError, KeyPairNotFoundError

logger = logging.getLogger(__name__)

K1 = TypeVar('K1')
K2 = TypeVar('K2')
V = TypeVar('V')


def _split_keys(keys: object) -> tuple:
    if not isinstance(keys, tuple) or len(keys) != 2:
        raise TypeError(f"Map2D keys must be a (key1, key2) pair, got {keys!r}.")
    return keys


class Map2D(Generic[K1, K2, V]):
    """Mapping from (key1, key2) pairs to values."""

    def __init__(self) -> None:
        self._values: dict[tuple[K1, K2], V] = {}

    # ─── Indexed access ───────────────────────────────────────────────────────

    def __getitem__(self, keys: tuple[K1, K2]) -> V:
        """Return the value stored under (key1, key2).

        Raises:
            KeyPairNotFoundError: If the pair is absent.
            TypeError: If `keys` is not a (key1, key2) tuple.
        """
        key1, key2 = _split_keys(keys)
        try:
            return self._values[(key1, key2)]
        except KeyError:
            raise KeyPairNotFoundError(key1, key2) from None

    def __setitem__(self, keys: tuple[K1, K2], value: V) -> None:
        key1, key2 = _split_keys(keys)
        self._values[(key1, key2)] = value

    def __contains__(self, keys: object) -> bool:
        return keys in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[tuple[K1, K2]]:
        return iter(self._values)

    @property
    def number_of_elements(self) -> int:
        return len(self._values)

    # ─── Views ────────────────────────────────────────────────────────────────

    def get_row(self, key1: K1) -> list[tuple[K2, V]]:
        """All (key2, value) pairs whose first key equals `key1`."""
        return [(k2, v) for (k1, k2), v in self._values.items() if k1 == key1]

    def get_column(self, key2: K2) -> list[tuple[K1, V]]:
        """All (key1, value) pairs whose second key equals `key2`."""
        return [(k1, v) for (k1, k2), v in self._values.items() if k2 == key2]

    def get_elements(self) -> list[tuple[K1, K2, V]]:
        return [(k1, k2, v) for (k1, k2), v in self._values.items()]

    def to_matrix(self, keys1: Iterable[K1], keys2: Iterable[K2]) -> np.ndarray:
        """Return a dense float matrix view of numeric values.

        Rows follow `keys1`, columns follow `keys2`. Absent pairs are np.nan.

        Returns:
            np.ndarray of dtype float64, shape (len(keys1), len(keys2)).

        Examples:
            >>> m = Map2D()
            >>> m[0, 'a'] = 1
            >>> m.to_matrix([0, 1], ['a'])
            array([[ 1.],
                   [nan]])
        """
        rows = list(keys1)
        cols = list(keys2)
        matrix = np.full((len(rows), len(cols)), np.nan)
        for r, k1 in enumerate(rows):
            for c, k2 in enumerate(cols):
                value = self._values.get((k1, k2))
                if value is not None:
                    matrix[r, c] = float(value)  # type: ignore[arg-type]
        return matrix

    # ─── Bulk insertion ───────────────────────────────────────────────────────

    def fill(
        self,
        keys1: Iterable[K1],
        keys2: Iterable[K2],
        generator: Callable[[K1, K2], V],
    ) -> None:
        """Insert generator(k1, k2) for each pair zipped from keys1 and keys2.

        Pairing stops at the shorter sequence. Every pair is checked and every
        value generated before anything is inserted, so a failure leaves the
        map unchanged.

        Raises:
            DuplicateKeyPairError: If a pair is already stored or occurs
                twice in the zipped input.
        """
        pairs = list(zip(keys1, keys2))
        seen: set[tuple[K1, K2]] = set()
        for pair in pairs:
            if pair in self._values or pair in seen:
                raise DuplicateKeyPairError(*pair)
            seen.add(pair)

        generated = [(pair, generator(*pair)) for pair in pairs]
        self._values.update(generated)
        logger.debug("Filled %d key pairs (now %d elements)", len(pairs), len(self._values))

    # ─── Dunder helpers ───────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map2D):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"
