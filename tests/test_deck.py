"""Tests for coursework/cards/deck.py — deck generation from names and seeds."""

from __future__ import annotations

import pytest

from coursework.cards.card import ITALIAN_NAMES, ITALIAN_SEEDS, Card
from coursework.cards.deck import DeckFactory, create_deck
from coursework.errors import InvalidStateError


class TestUnsetLists:
    def test_deck_without_lists_raises(self):
        with pytest.raises(InvalidStateError):
            DeckFactory().deck

    def test_deck_without_seeds_raises(self):
        factory = DeckFactory()
        factory.names = ['Ace']
        with pytest.raises(InvalidStateError, match="seeds"):
            factory.deck

    def test_deck_without_names_raises(self):
        factory = DeckFactory()
        factory.seeds = ['Hearts']
        with pytest.raises(InvalidStateError):
            factory.deck

    def test_deck_size_without_lists_raises(self):
        with pytest.raises(InvalidStateError):
            DeckFactory().deck_size

    def test_invalid_state_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            DeckFactory().deck

    def test_getters_return_none_when_unset(self):
        factory = DeckFactory()
        assert factory.names is None
        assert factory.seeds is None


class TestNamesAndSeeds:
    def test_getter_returns_copy(self):
        factory = DeckFactory(['Ace', 'King'], ['Hearts'])
        names = factory.names
        names.append('Joker')
        assert factory.names == ['Ace', 'King']

    def test_setter_copies_input(self):
        names = ['Ace', 'King']
        factory = DeckFactory(names, ['Hearts'])
        names.append('Joker')
        assert factory.deck_size == 2

    def test_setter_accepts_any_iterable(self):
        factory = DeckFactory()
        factory.names = (n for n in ['Ace', 'King'])
        factory.seeds = ('Hearts',)
        assert factory.names == ['Ace', 'King']
        assert factory.seeds == ['Hearts']

    def test_bare_string_names_rejected(self):
        with pytest.raises(TypeError, match="names"):
            DeckFactory('Ace', ['Hearts'])

    def test_bare_string_seeds_rejected(self):
        factory = DeckFactory(['Ace'], ['Hearts'])
        with pytest.raises(TypeError, match="seeds"):
            factory.seeds = 'Spades'
        assert factory.seeds == ['Hearts']


class TestDeck:
    def test_size_is_product(self, french_factory):
        assert len(french_factory.deck) == 52
        assert french_factory.deck_size == 52

    def test_contains_full_cross_product(self):
        deck = DeckFactory(['Ace', 'King'], ['Hearts', 'Spades']).deck
        assert deck == {
            Card('Ace', 'Hearts', 0),
            Card('Ace', 'Spades', 0),
            Card('King', 'Hearts', 1),
            Card('King', 'Spades', 1),
        }

    def test_ordinal_matches_name_position(self, french_factory):
        names = french_factory.names
        for card in french_factory.deck:
            assert names[card.ordinal] == card.name

    def test_every_seed_per_name(self, french_factory):
        deck = french_factory.deck
        for name in french_factory.names:
            seeds = {card.seed for card in deck if card.name == name}
            assert seeds == set(french_factory.seeds)

    def test_fresh_deck_each_access(self, french_factory):
        first = french_factory.deck
        french_factory.seeds = ['Hearts']
        second = french_factory.deck
        assert len(first) == 52
        assert len(second) == 13

    def test_deck_is_immutable(self, french_factory):
        assert isinstance(french_factory.deck, frozenset)

    def test_duplicate_name_gets_distinct_ordinals(self):
        deck = DeckFactory(['Ace', 'Ace'], ['Hearts']).deck
        assert deck == {Card('Ace', 'Hearts', 0), Card('Ace', 'Hearts', 1)}

    def test_empty_lists_give_empty_deck(self):
        factory = DeckFactory([], ['Hearts'])
        assert factory.deck == frozenset()
        assert factory.deck_size == 0


class TestCreateDeck:
    def test_italian_deck(self):
        deck = create_deck(ITALIAN_NAMES, ITALIAN_SEEDS)
        assert len(deck) == 40
        assert Card('Re', 'Denari', 9) in deck
