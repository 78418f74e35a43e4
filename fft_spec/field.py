"""
Prime field GF(q) arithmetic for the number-theoretic transform.

This module provides the field arithmetic the NTT depends on for exactness:
canonical residues, modular inverse via the extended Euclidean algorithm,
square-and-multiply exponentiation and the Legendre symbol.

Elements carry a reference to their (immutable) field. Mixing elements of two
different fields raises FieldMismatchError instead of producing a residue
modulo the wrong prime.
"""

import numbers
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import galois
import numpy as np

from .errors import FieldMismatchError, InvalidExponentError, NotInvertibleError

# Exponents are fixed-width signed integers: [0, 2^127) is the valid range
EXPONENT_BITS = 128
MAX_EXPONENT = (1 << (EXPONENT_BITS - 1)) - 1


def egcd(x: int, y: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean algorithm.

    Returns (g, s, t) such that s*x + t*y = g = gcd(x, y).
    """
    a0, a1, b0, b1 = 1, 0, 0, 1
    while y != 0:
        q, r = divmod(x, y)
        x, y = y, r
        a0, a1 = a1, a0 - q * a1
        b0, b1 = b1, b0 - q * b1
    return x, a0, b0


def is_prime(n: int) -> bool:
    """Trial-division primality test, sufficient for the small moduli used here."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0:
        return False
    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True


def _prime_factors(n: int) -> List[int]:
    """Distinct prime factors of n, ascending."""
    factors = []
    d = 2
    while d * d <= n:
        if n % d == 0:
            factors.append(d)
            while n % d == 0:
                n //= d
        d += 1
    if n > 1:
        factors.append(n)
    return factors


@dataclass(frozen=True)
class PrimeField:
    """
    The field GF(q). Immutable; shared by every element built from it.

    Attributes:
        q: The modulus, intended to be prime
    """
    q: int

    def __post_init__(self):
        if not isinstance(self.q, numbers.Integral) or isinstance(self.q, bool):
            raise TypeError(f"Field modulus must be an int, got {type(self.q).__name__}")
        if self.q <= 1:
            raise ValueError(f"Field modulus must be > 1, got {self.q}")

    def element(self, value: int) -> 'FieldElement':
        return FieldElement(value, self)

    def elements(self, values: Iterable[int]) -> List['FieldElement']:
        return [FieldElement(v, self) for v in values]

    def zero(self) -> 'FieldElement':
        return FieldElement(0, self)

    def one(self) -> 'FieldElement':
        return FieldElement(1, self)

    def random_element(self, rng: Optional[random.Random] = None) -> 'FieldElement':
        """Uniform element of the field (may be zero)."""
        rng = rng or random
        return FieldElement(rng.randrange(0, self.q), self)

    def generator(self) -> 'FieldElement':
        """
        Smallest generator of the multiplicative group GF(q)*.

        g generates GF(q)* iff g^((q-1)/p) != 1 for every prime p | q-1.
        """
        if not is_prime(self.q):
            raise ValueError(f"Generator search needs a prime modulus, got {self.q}")
        order = self.q - 1
        factors = _prime_factors(order)
        for g in range(1, self.q):
            candidate = FieldElement(g, self)
            if all(candidate.mod_pow(order // p).value != 1 for p in factors):
                return candidate
        raise ValueError(f"No generator found for GF({self.q})")

    def root_of_unity(self, n: int) -> 'FieldElement':
        """
        Primitive n-th root of unity: generator^((q-1)/n).

        Args:
            n: Order of the root; must divide q - 1

        Returns:
            omega with omega^n = 1 and no smaller positive power equal to 1
        """
        if n <= 0 or (self.q - 1) % n != 0:
            raise ValueError(f"GF({self.q}) has no primitive {n}-th root of unity")
        return self.generator().mod_pow((self.q - 1) // n)


class FieldElement:
    """Element of GF(q) with residue in [0, q)."""

    __slots__ = ('value', 'field')

    def __init__(self, value: int, field: PrimeField):
        if isinstance(value, FieldElement):
            if value.field != field:
                raise FieldMismatchError(
                    f"Cannot move an element of GF({value.field.q}) into GF({field.q})"
                )
            value = value.value
        elif not isinstance(value, numbers.Integral):
            raise TypeError(f"Field element value must be an int, got {type(value).__name__}")
        self.field = field
        self.value = int(value) % field.q

    # --- Operand handling ---

    def _coerce(self, other, operation: str) -> Optional['FieldElement']:
        if isinstance(other, FieldElement):
            if other.field != self.field:
                raise FieldMismatchError(
                    f"Operation {operation} is only defined for elements in the same field. "
                    f"Got: q={self.field.q}, p={other.field.q}"
                )
            return other
        if isinstance(other, numbers.Integral):
            return FieldElement(other, self.field)
        return None

    def _new(self, value: int) -> 'FieldElement':
        return FieldElement(value, self.field)

    # --- Arithmetic ---

    def __add__(self, other):
        other = self._coerce(other, "add")
        if other is None:
            return NotImplemented
        return self._new(self.value + other.value)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other, "sub")
        if other is None:
            return NotImplemented
        return self._new(self.value - other.value)

    def __rsub__(self, other):
        other = self._coerce(other, "sub")
        if other is None:
            return NotImplemented
        return self._new(other.value - self.value)

    def __mul__(self, other):
        other = self._coerce(other, "mul")
        if other is None:
            return NotImplemented
        return self._new(self.value * other.value)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other, "div")
        if other is None:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other):
        other = self._coerce(other, "div")
        if other is None:
            return NotImplemented
        return other * self.inverse()

    def __neg__(self):
        return self._new(-self.value)

    def __pow__(self, exponent):
        return self.mod_pow(exponent)

    def inverse(self) -> 'FieldElement':
        """
        Multiplicative inverse via the extended Euclidean algorithm.

        The inverse is the second Bezout coefficient of egcd(q, value),
        brought back into [0, q).
        """
        if self.value == 0:
            raise NotInvertibleError(f"Cannot invert zero in GF({self.field.q})")
        g, _, t = egcd(self.field.q, self.value)
        if g != 1:
            raise NotInvertibleError(
                f"{self.value} is not invertible mod {self.field.q} (gcd = {g})"
            )
        return self._new(t)

    def mod_pow(self, exponent: int) -> 'FieldElement':
        """
        Square-and-multiply exponentiation.

        Args:
            exponent: Non-negative int below 2^127

        Returns:
            self^exponent; the identity for exponent 0, including 0^0
        """
        if isinstance(exponent, bool) or not isinstance(exponent, numbers.Integral):
            raise TypeError(f"Exponent must be an int, got {type(exponent).__name__}")
        exponent = int(exponent)
        if exponent < 0:
            raise InvalidExponentError(f"Negative exponent {exponent} is not supported")
        if exponent > MAX_EXPONENT:
            raise InvalidExponentError(
                f"Exponent {exponent} exceeds the {EXPONENT_BITS}-bit signed range"
            )
        q = self.field.q
        result = 1
        base = self.value
        while exponent > 0:
            if exponent & 1:
                result = (result * base) % q
            exponent >>= 1
            base = (base * base) % q
        return self._new(result)

    def legendre_symbol(self) -> int:
        """0 for zero, 1 for a quadratic residue, q - 1 for a non-residue."""
        return self.mod_pow((self.field.q - 1) // 2).value

    # --- Comparison / conversion ---

    def __eq__(self, other):
        if isinstance(other, FieldElement):
            return self.value == other.value and self.field == other.field
        return NotImplemented

    def __hash__(self):
        return hash((self.value, self.field.q))

    def __int__(self):
        return self.value

    def __bool__(self):
        return self.value != 0

    def __str__(self):
        return f"{self.value} mod {self.field.q}"

    def __repr__(self):
        return f"FieldElement({self.value} mod {self.field.q})"


# --- galois interop ---
# galois arrays hold the same canonical residues, so conversion is a copy.


def galois_field(field: PrimeField):
    """galois.GF(q) class for the given field (galois caches the class)."""
    return galois.GF(field.q)


def to_galois(elements: Sequence[FieldElement]):
    """Convert a non-empty list of same-field elements into a galois array."""
    if len(elements) == 0:
        raise ValueError("Cannot infer the field of an empty sequence")
    field = elements[0].field
    for e in elements:
        if e.field != field:
            raise FieldMismatchError(
                f"Cannot convert mixed fields GF({field.q}) and GF({e.field.q})"
            )
    return galois_field(field)([e.value for e in elements])


def from_galois(array, field: Optional[PrimeField] = None) -> List[FieldElement]:
    """Convert a 1D galois array back into FieldElements."""
    characteristic = int(type(array).characteristic)
    if field is None:
        field = PrimeField(characteristic)
    elif characteristic != field.q:
        raise FieldMismatchError(
            f"Cannot convert a GF({characteristic}) array into GF({field.q})"
        )
    return [FieldElement(int(v), field) for v in np.atleast_1d(array)]
