"""
Spectral transforms: complex DFT/FFT and the exact number-theoretic transform.

This package provides:
- Prime field GF(q) arithmetic (extended Euclid inverse, square-and-multiply)
- Forward/inverse NTT over GF(q) (recursive Cooley-Tukey)
- Slow DFT, FFT and inverse FFT over numpy complex arrays

Usage:
    from fft_spec import PrimeField, ntt_fft, intt_fft

    field = PrimeField(5)
    omega = field.element(2)
    values = field.elements([1, 4, 0, 0])
    assert intt_fft(ntt_fft(values, omega), omega) == values
"""

# Errors
from .errors import (
    TransformError,
    FieldMismatchError,
    InvalidLengthError,
    NotInvertibleError,
    InvalidExponentError,
    FieldMismatch,
    InvalidLength,
    NotInvertible,
    InvalidExponent,
)

# Configuration
from .config import TransformConfig, DEFAULT_CONFIG

# Field arithmetic
from .field import (
    PrimeField,
    FieldElement,
    egcd,
    is_prime,
    EXPONENT_BITS,
    galois_field,
    to_galois,
    from_galois,
)

# Field transform
from .ntt import dft_finite_fields, ntt_fft, intt_fft

# Complex transform
from .fft import dtf_slow, fft, ifft

__version__ = "0.1.0"
__all__ = [
    # Errors
    "TransformError",
    "FieldMismatchError",
    "InvalidLengthError",
    "NotInvertibleError",
    "InvalidExponentError",
    "FieldMismatch",
    "InvalidLength",
    "NotInvertible",
    "InvalidExponent",
    # Config
    "TransformConfig",
    "DEFAULT_CONFIG",
    # Field
    "PrimeField",
    "FieldElement",
    "egcd",
    "is_prime",
    "EXPONENT_BITS",
    "galois_field",
    "to_galois",
    "from_galois",
    # NTT
    "dft_finite_fields",
    "ntt_fft",
    "intt_fft",
    # FFT
    "dtf_slow",
    "fft",
    "ifft",
]
