"""Pytest configuration for fft_spec tests."""

import sys
from pathlib import Path

# Add the repository root to the path so the package imports without installing
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))
