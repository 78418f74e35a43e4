#!/usr/bin/env python3
"""Time the complex transforms and run the field-transform round trip.

Run with: python -m fft_spec --size 1024
"""

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional

import numpy as np

from .config import DEFAULT_CONFIG, TransformConfig
from .fft import dtf_slow, fft
from .field import PrimeField
from .ntt import intt_fft, ntt_fft
from .test_vectors import get_config, get_input

logger = logging.getLogger(__name__)


def impulse(size: int, position: int) -> np.ndarray:
    """Unit impulse of the given length at position."""
    data = np.zeros(size, dtype=np.complex128)
    data[position] = 1.0
    return data


def time_twice(transform: Callable[[np.ndarray], np.ndarray], size: int) -> float:
    """Run transform on impulses at 0 and 1; return elapsed milliseconds."""
    start = time.perf_counter()
    transform(impulse(size, 0))
    transform(impulse(size, 1))
    return (time.perf_counter() - start) * 1000.0


def ntt_round_trip(q: int, config: TransformConfig) -> bool:
    """Transform the pinned GF(q) vector forward and back; print both results."""
    params = get_config(q)
    field = PrimeField(params['q'])
    omega = field.element(params['omega'])
    values = field.elements(get_input(q))

    output = ntt_fft(values, omega, config)
    result = intt_fft(output, omega, config)
    print(f"NTT over GF({q}), omega = {omega}:")
    print(f"  input:   {[v.value for v in values]}")
    print(f"  forward: {[v.value for v in output]}")
    print(f"  inverse: {[v.value for v in result]}")
    return result == values


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Time the DFT/FFT and check the NTT round trip")
    parser.add_argument("--size", type=int, default=1024, help="Transform length (power of two)")
    parser.add_argument("--config", default=None, help="JSON file with TransformConfig fields")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    if args.size < 2 or args.size & (args.size - 1):
        parser.error(f"--size must be a power of two >= 2, got {args.size}")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = TransformConfig.from_json(args.config) if args.config else DEFAULT_CONFIG
    logger.info("Transform size %d, config %s", args.size, config)

    print("Starting DFT timer")
    elapsed = time_twice(dtf_slow, args.size)
    print(f"Running DFT twice took {elapsed:.0f} milli seconds")

    print("Starting FFT timer")
    elapsed = time_twice(lambda x: fft(x, config), args.size)
    print(f"Running FFT twice took {elapsed:.0f} milli seconds")

    if not ntt_round_trip(5, config):
        logger.error("NTT round trip did not reproduce the input")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
