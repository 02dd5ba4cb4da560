"""Array backends for the FFT pricer.

NumPy is the default. CuPy is optional: when installed, the samples and the
FFT can run on the GPU, provided the characteristic function accepts CuPy
arrays.
"""

from __future__ import annotations

import numpy as np

try:
    import cupy as cp

    HAS_CUPY = True
except ImportError:  # pragma: no cover - depends on environment
    cp = None
    HAS_CUPY = False

BACKENDS = ("numpy", "cupy")


def get_backend(name: str = "numpy"):
    """Return the array module (``numpy`` or ``cupy``) registered under ``name``."""
    normalized = name.lower()
    if normalized == "cupy":
        if not HAS_CUPY:
            raise ImportError("CuPy not installed. Install with: pip install carrmadan[cuda]")
        return cp
    if normalized != "numpy":
        raise ValueError(f"Unknown backend '{name}'. Expected one of {BACKENDS}.")
    return np


def to_backend(arr, xp, dtype=None):
    """Move cf output (NumPy arrays, scalars or lists) onto the array module ``xp``."""
    if xp is np:
        return np.asarray(arr, dtype=dtype)
    return xp.asarray(to_numpy(arr) if isinstance(arr, list) else arr, dtype=dtype)


def to_numpy(arr):
    """Convert array-like (including CuPy arrays) to a NumPy ndarray."""
    if isinstance(arr, np.ndarray):
        return arr
    if HAS_CUPY and isinstance(arr, cp.ndarray):
        return arr.get()
    return np.asarray(arr)
