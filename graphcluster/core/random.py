"""
Seed management for reproducibility.

Randomized algorithms (label propagation, k-means) fall back to the global
seed when no explicit seed is configured.
"""

from typing import Optional

import numpy as np

_global_seed: int = 42


def set_seed(seed: int = 42):
    """Set the global random seed used by unseeded algorithms."""
    global _global_seed
    _global_seed = seed


def get_seed() -> int:
    """Get the current global seed."""
    return _global_seed


def get_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Fresh generator for ``seed``, or for the global seed when omitted."""
    return np.random.default_rng(get_seed() if seed is None else seed)
