"""Number Theoretic Transform over a prime field GF(q).

Recursive radix-2 Cooley-Tukey over FieldElement lists. Results are exact:
every intermediate value is a canonical residue.
"""

import logging
import numbers
from typing import List, Optional, Sequence, Union

from .config import DEFAULT_CONFIG, TransformConfig
from .errors import FieldMismatchError, InvalidLengthError
from .field import FieldElement

logger = logging.getLogger(__name__)

Entry = Union[FieldElement, int]


# --- Transforms ---

def dft_finite_fields(x: Sequence[FieldElement], omega: FieldElement) -> List[FieldElement]:
    """2-point transform: [x0 + x1, x0 + omega * x1]."""
    # M_jk = omega^(j*k), so y_0 = x_0 + x_1 and y_1 = x_0 + omega * x_1
    return [x[0] + x[1], x[0] + omega * x[1]]


def ntt_fft(
    x: Sequence[Entry],
    omega: FieldElement,
    config: Optional[TransformConfig] = None,
) -> List[FieldElement]:
    """Forward NTT: y_k = sum_j x_j * omega^(j*k).

    Args:
        x: Input of power-of-two length; ints are lifted into omega's field
        omega: Primitive len(x)-th root of unity
        config: Recursion parameters (DEFAULT_CONFIG if None)

    Returns:
        New list of len(x) field elements
    """
    config = config or DEFAULT_CONFIG
    values = _prepare(x, omega)
    return _ntt(values, omega, config.reuse_root)


def intt_fft(
    x: Sequence[Entry],
    omega: FieldElement,
    config: Optional[TransformConfig] = None,
) -> List[FieldElement]:
    """Inverse NTT: forward transform with omega^(-1), scaled by 1/n.

    Raises:
        NotInvertibleError: omega is zero, or n has no inverse mod q
    """
    config = config or DEFAULT_CONFIG
    values = _prepare(x, omega)

    length = FieldElement(len(values), omega.field)
    length_inv = length.inverse()
    omega_inv = omega.inverse()
    logger.debug("length: %s, omega: %s, omega_inv: %s", length, omega, omega_inv)

    res_scaled = _ntt(values, omega_inv, config.reuse_root)
    logger.debug("res before division: %s", res_scaled)

    res = [v * length_inv for v in res_scaled]
    logger.debug("res after division: %s", res)
    return res


def _ntt(x: List[FieldElement], omega: FieldElement, reuse_root: bool) -> List[FieldElement]:
    size = len(x)
    if size == 1:
        return [x[0]]
    if size == 2:
        return dft_finite_fields(x, omega)

    x_even, x_odd = x[0::2], x[1::2]
    logger.debug("even: %s odd: %s", x_even, x_odd)

    # Half-size transforms need a (size/2)-th root: omega^2
    sub_omega = omega if reuse_root else omega * omega
    even = _ntt(x_even, sub_omega, reuse_root)
    odd = _ntt(x_odd, sub_omega, reuse_root)

    half = size // 2
    factors = _precompute_roots(omega, size)
    fst_half_factors, snd_half_factors = factors[:half], factors[half:]
    logger.debug("factor values: %s", factors)

    res = [even[i] + odd[i] * fst_half_factors[i] for i in range(half)]
    res += [even[i] + odd[i] * snd_half_factors[i] for i in range(half)]
    logger.debug("res: %s", res)
    return res


# --- Helpers ---

def _is_power_of_two(size: int) -> bool:
    return size > 0 and (size & (size - 1)) == 0


def _log2(size: int) -> int:
    """Compute log2 of size (must be power of 2)."""
    if not _is_power_of_two(size):
        raise InvalidLengthError(f"size of input must be a power of 2, got {size}")
    return size.bit_length() - 1


def _precompute_roots(omega: FieldElement, n_roots: int) -> List[FieldElement]:
    """Twiddle factors: roots[j] = omega^j for j in [0, n_roots)."""
    return [omega.mod_pow(j) for j in range(n_roots)]


def _prepare(x: Sequence[Entry], omega: FieldElement) -> List[FieldElement]:
    """Validate the length and lift every entry into omega's field."""
    if not isinstance(omega, FieldElement):
        raise TypeError(f"omega must be a FieldElement, got {type(omega).__name__}")
    _log2(len(x))

    values = []
    for i, v in enumerate(x):
        if isinstance(v, FieldElement):
            if v.field != omega.field:
                raise FieldMismatchError(
                    f"Entry {i} is in GF({v.field.q}) but omega is in GF({omega.field.q})"
                )
            values.append(v)
        elif isinstance(v, numbers.Integral):
            values.append(FieldElement(v, omega.field))
        else:
            raise TypeError(f"Entry {i} must be a FieldElement or int, got {type(v).__name__}")
    return values
