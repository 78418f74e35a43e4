"""
Complex discrete Fourier transforms over numpy arrays.

Forward DFT:  X_k = sum_{n=0..N-1} x_n * exp(-i*2*pi*k*n/N)
Inverse DFT:  x_n = 1/N * sum_{k=0..N-1} X_k * exp(i*2*pi*k*n/N)

dtf_slow applies the DFT matrix directly (O(N^2)). fft is the recursive
radix-2 Cooley-Tukey transform (O(N log N)) and falls back to dtf_slow once
the size drops to TransformConfig.fft_base_size.

Results are floating point: fft and dtf_slow agree up to rounding error, not
bit for bit.
"""

import logging
from typing import Optional

import numpy as np

from .config import DEFAULT_CONFIG, TransformConfig
from .errors import InvalidLengthError

logger = logging.getLogger(__name__)


# --- Transforms ---

def dtf_slow(x) -> np.ndarray:
    """Forward DFT as a matrix product: X = M x with M_jk = exp(-i*2*pi*j*k/N).

    Args:
        x: 1D sequence of complex (or real) values, any length

    Returns:
        New complex128 array of the same length
    """
    x = _as_complex_vector(x)
    size = x.shape[0]
    if size == 0:
        return x.copy()

    idx = np.arange(size)
    m = _from_exponential(-2.0 * np.pi * np.outer(idx, idx) / size)
    return m @ x


def fft(x, config: Optional[TransformConfig] = None) -> np.ndarray:
    """Recursive radix-2 FFT.

    Args:
        x: 1D sequence whose length is a power of two
        config: Recursion parameters (DEFAULT_CONFIG if None)

    Returns:
        New complex128 array of the same length
    """
    config = config or DEFAULT_CONFIG
    x = _as_complex_vector(x)
    _log2(x.shape[0])
    return _fft(x, config.fft_base_size)


def ifft(x, config: Optional[TransformConfig] = None) -> np.ndarray:
    """Inverse FFT via conjugation: conj(fft(conj(X))) / N."""
    config = config or DEFAULT_CONFIG
    x = _as_complex_vector(x)
    size = x.shape[0]
    _log2(size)
    return np.conj(_fft(np.conj(x), config.fft_base_size)) / size


def _fft(x: np.ndarray, base_size: int) -> np.ndarray:
    size = x.shape[0]
    if size <= base_size:
        return dtf_slow(x)

    even = _fft(x[0::2], base_size)
    odd = _fft(x[1::2], base_size)

    half = size // 2
    factors = _from_exponential(-2.0 * np.pi * np.arange(size) / size)
    fst_half_factors, snd_half_factors = factors[:half], factors[half:]
    logger.debug("fft size %d: combining halves of %d", size, half)

    return np.concatenate((
        even + odd * fst_half_factors,
        even + odd * snd_half_factors,
    ))


# --- Helpers ---

def _from_exponential(phases: np.ndarray) -> np.ndarray:
    """Points on the unit circle: exp(i * phase)."""
    return np.exp(1j * phases)


def _as_complex_vector(x) -> np.ndarray:
    """View x as a 1D complex128 array (never written to)."""
    arr = np.asarray(x, dtype=np.complex128)
    if arr.ndim != 1:
        raise ValueError(f"Expected 1D sequence, got {arr.ndim}D")
    return arr


def _log2(size: int) -> int:
    """Compute log2 of size (must be power of 2)."""
    if size <= 0 or (size & (size - 1)) != 0:
        raise InvalidLengthError(f"size of input must be a power of 2, got {size}")
    return size.bit_length() - 1
