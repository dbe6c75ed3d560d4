"""
Card value type and the standard name/seed lists.

A Card is identified by three fields:
    name   : the card's face name, e.g. 'Ace' or 'Asso'
    seed   : the suit name, e.g. 'Hearts' or 'Coppe'
    ordinal: index of `name` in the name list the deck was built from

Two cards are equal only when all three fields match, so the same name at
two different positions of a name list yields two distinct cards.
"""

from __future__ import annotations

from dataclasses import dataclass

# ─── Constants ────────────────────────────────────────────────────────────────

FRENCH_NAMES: list[str] = [
    'Ace', '2', '3', '4', '5', '6', '7', '8', '9', '10', 'Jack', 'Queen', 'King',
]
FRENCH_SEEDS: list[str] = ['Hearts', 'Diamonds', 'Clubs', 'Spades']

ITALIAN_NAMES: list[str] = [
    'Asso', 'Due', 'Tre', 'Quattro', 'Cinque', 'Sei', 'Sette', 'Fante', 'Cavallo', 'Re',
]
ITALIAN_SEEDS: list[str] = ['Bastoni', 'Coppe', 'Denari', 'Spade']


# ─── Card type ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Card:
    """Immutable playing card.

    Frozen (hashable) so a deck can be a plain set of cards.

    Examples:
        >>> str(Card('Ace', 'Spades', 0))
        'Card(Name=Ace, Seed=Spades, Ordinal=0)'
    """
    name: str
    seed: str
    ordinal: int

    @classmethod
    def from_tuple(cls, fields: tuple[str, str, int]) -> Card:
        """Build a card from a (name, seed, ordinal) tuple.

        Examples:
            >>> Card.from_tuple(('Re', 'Denari', 9))
            Card(name='Re', seed='Denari', ordinal=9)
        """
        name, seed, ordinal = fields
        return cls(name, seed, ordinal)

    def __str__(self) -> str:
        return f"{type(self).__name__}(Name={self.name}, Seed={self.seed}, Ordinal={self.ordinal})"
