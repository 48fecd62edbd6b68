"""
Shared random source for measurement.

Measurement is the only non-deterministic step in the simulator. Every
measuring operation accepts an explicit ``rng``; when none is given the
module-level generator below is used. Tests seed it (or pass their own
generator) to get reproducible outcomes.
"""

import numpy as np
from typing import Optional

# Global state
_rng: np.random.Generator = np.random.default_rng()


def get_rng() -> np.random.Generator:
    """Return the shared generator."""
    return _rng


def set_rng(rng: np.random.Generator):
    """Replace the shared generator."""
    global _rng
    _rng = rng


def seed(value: Optional[int] = None):
    """Reseed the shared generator."""
    global _rng
    _rng = np.random.default_rng(value)


def resolve_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """Return ``rng`` if given, otherwise the shared generator."""
    return _rng if rng is None else rng
