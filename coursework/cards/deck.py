"""
Deck generation from a list of names and a list of seeds.

The deck is the full cross product names × seeds:

    for i, name in enumerate(names):
        for seed in seeds:
            Card(name, seed, i)

It is rebuilt on every access and returned as a frozenset, so callers can
never mutate the factory's output in place.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import InvalidStateError
from .card import Card

logger = logging.getLogger(__name__)


def _as_name_tuple(value: Iterable[str], what: str) -> tuple[str, ...]:
    # A bare string is iterable too, but would be split into characters.
    if isinstance(value, str):
        raise TypeError(f"{what} must be a sequence of strings, not a single string {value!r}.")
    return tuple(value)


class DeckFactory:
    """Builds decks of Cards from configurable name and seed lists.

    Both lists start unset; reading `deck` or `deck_size` before setting
    them raises InvalidStateError.

    Examples:
        >>> factory = DeckFactory()
        >>> factory.names = ['Ace', 'King']
        >>> factory.seeds = ['Hearts', 'Spades']
        >>> factory.deck_size
        4
    """

    def __init__(
        self,
        names: Iterable[str] | None = None,
        seeds: Iterable[str] | None = None,
    ) -> None:
        self._names: tuple[str, ...] | None = None
        self._seeds: tuple[str, ...] | None = None
        if names is not None:
            self.names = names
        if seeds is not None:
            self.seeds = seeds

    @property
    def names(self) -> list[str] | None:
        """Copy of the name list, or None if not set yet."""
        return list(self._names) if self._names is not None else None

    @names.setter
    def names(self, value: Iterable[str]) -> None:
        self._names = _as_name_tuple(value, "names")

    @property
    def seeds(self) -> list[str] | None:
        """Copy of the seed list, or None if not set yet."""
        return list(self._seeds) if self._seeds is not None else None

    @seeds.setter
    def seeds(self, value: Iterable[str]) -> None:
        self._seeds = _as_name_tuple(value, "seeds")

    def _require_lists(self) -> tuple[tuple[str, ...], tuple[str, ...]]:
        if self._names is None or self._seeds is None:
            raise InvalidStateError("Both names and seeds must be set before building a deck.")
        return self._names, self._seeds

    @property
    def deck_size(self) -> int:
        names, seeds = self._require_lists()
        return len(names) * len(seeds)

    @property
    def deck(self) -> frozenset[Card]:
        """Return a freshly generated set of cards.

        Raises:
            InvalidStateError: If names or seeds have not been set.
        """
        names, seeds = self._require_lists()
        cards = frozenset(
            Card(name, seed, i)
            for i, name in enumerate(names)
            for seed in seeds
        )
        logger.debug(
            "Generated deck of %d cards from %d names x %d seeds",
            len(cards), len(names), len(seeds),
        )
        return cards


def create_deck(names: Iterable[str], seeds: Iterable[str]) -> frozenset[Card]:
    """Build a deck in one call.

    Examples:
        >>> from coursework.cards.card import ITALIAN_NAMES, ITALIAN_SEEDS
        >>> len(create_deck(ITALIAN_NAMES, ITALIAN_SEEDS))
        40
    """
    return DeckFactory(names, seeds).deck
