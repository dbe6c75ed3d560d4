"""
Complex number value type.

A Complex is an immutable (real, imaginary) pair of floats:

    modulus = sqrt(real² + imaginary²)
    phase   = atan2(imaginary, real)

Equality is exact on both components (no tolerance), and every arithmetic
operation returns a new instance. The string form is the classroom one:

    Complex(3, 4)   -> '3 + i4'
    Complex(1.5, -2) -> '1.5 - i2'
"""

from __future__ import annotations

import math
from dataclasses import dataclass


# repr() switches floats to exponent notation from this magnitude on.
_EXPONENT_THRESHOLD: float = 1e16


def _format_number(x: float) -> str:
    """Render a float without a trailing '.0' when it is integral.

    Examples:
        >>> _format_number(7.0)
        '7'
        >>> _format_number(2.25)
        '2.25'
        >>> _format_number(1e20)
        '1e+20'
    """
    if math.isfinite(x) and x.is_integer() and abs(x) < _EXPONENT_THRESHOLD:
        return str(int(x))
    return repr(x)


@dataclass(frozen=True)
class Complex:
    """Immutable complex number.

    Frozen (hashable) so it can be stored in sets and used as a dict key.

    Examples:
        >>> Complex(3, 0).plus(Complex(4, 0))
        Complex(real=7.0, imaginary=0.0)
        >>> str(Complex(1, -2))
        '1 - i2'
    """
    real: float
    imaginary: float

    def __post_init__(self) -> None:
        object.__setattr__(self, 'real', float(self.real))
        object.__setattr__(self, 'imaginary', float(self.imaginary))

    @classmethod
    def from_polar(cls, modulus: float, phase: float) -> Complex:
        """Build a Complex from its modulus and phase (radians)."""
        return cls(modulus * math.cos(phase), modulus * math.sin(phase))

    # ─── Derived values ───────────────────────────────────────────────────────

    @property
    def modulus(self) -> float:
        return math.sqrt(self.real ** 2 + self.imaginary ** 2)

    @property
    def phase(self) -> float:
        return math.atan2(self.imaginary, self.real)

    # ─── Algebra ──────────────────────────────────────────────────────────────

    def complement(self) -> Complex:
        """Return the conjugate (real, -imaginary)."""
        return Complex(self.real, -self.imaginary)

    def plus(self, other: Complex) -> Complex:
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def minus(self, other: Complex) -> Complex:
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    def __add__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> Complex:
        return Complex(-self.real, -self.imaginary)

    def __abs__(self) -> float:
        return self.modulus

    def __eq__(self, other: object) -> bool:
        # Plain float ==, so NaN components never compare equal.
        if not isinstance(other, Complex):
            return NotImplemented
        return self.real == other.real and self.imaginary == other.imaginary

    def __hash__(self) -> int:
        return hash((self.real, self.imaginary))

    def __str__(self) -> str:
        if self.imaginary >= 0:
            return f"{_format_number(self.real)} + i{_format_number(self.imaginary)}"
        return f"{_format_number(self.real)} - i{_format_number(abs(self.imaginary))}"


ZERO: Complex = Complex(0.0, 0.0)
