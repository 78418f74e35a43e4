"""
Transform configuration.

A small frozen dataclass holding the knobs of the recursive transforms, with
helpers to build it from a dict or a JSON file.
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict


@dataclass(frozen=True)
class TransformConfig:
    """
    Recursion parameters shared by the complex and field transforms.

    Attributes:
        fft_base_size: Largest size the complex FFT hands to the O(n^2) DFT
        reuse_root: Pass omega unchanged to the NTT sub-transforms instead
            of omega^2. Only round-trips for sizes <= 2.
    """
    fft_base_size: int = 4
    reuse_root: bool = False

    def __post_init__(self):
        size = self.fft_base_size
        if not isinstance(size, int) or isinstance(size, bool) or size < 1 or size & (size - 1):
            raise ValueError(f"fft_base_size must be a power of two >= 1, got {size!r}")
        if not isinstance(self.reuse_root, bool):
            raise ValueError(f"reuse_root must be a bool, got {self.reuse_root!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TransformConfig':
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_json(cls, path: str) -> 'TransformConfig':
        """Load a config from a JSON object stored at path."""
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with p.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a JSON object: {path}")
        return cls.from_dict(data)


DEFAULT_CONFIG = TransformConfig()
