"""
Exception types shared by the coursework exercises.

    CourseworkError        : base class for everything raised on purpose here
    InvalidStateError      : an object was used before it was ready
    KeyPairNotFoundError   : Map2D lookup of an absent (key1, key2) pair
    DuplicateKeyPairError  : Map2D fill() hit a pair that is already stored

The concrete types also subclass the matching builtin (RuntimeError or
KeyError), so callers catching the builtin keep working.
"""

from __future__ import annotations


class CourseworkError(Exception):
    """Base class for coursework errors."""


class InvalidStateError(CourseworkError, RuntimeError):
    """Raised when an operation is not valid in the object's current state."""


class KeyPairNotFoundError(CourseworkError, KeyError):
    """Raised when a (key1, key2) pair is absent from a Map2D."""

    def __init__(self, key1: object, key2: object) -> None:
        super().__init__((key1, key2))
        self.key1 = key1
        self.key2 = key2

    def __str__(self) -> str:
        return f"No element for key pair ({self.key1!r}, {self.key2!r})."


class DuplicateKeyPairError(CourseworkError, KeyError):
    """Raised when fill() would insert a (key1, key2) pair twice."""

    def __init__(self, key1: object, key2: object) -> None:
        super().__init__((key1, key2))
        self.key1 = key1
        self.key2 = key2

    def __str__(self) -> str:
        return f"Key pair ({self.key1!r}, {self.key2!r}) is already present."
