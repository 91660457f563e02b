from __future__ import annotations
from typing import Any

import numpy as np


def _need_scipy():
    try:
        import scipy.integrate as integrate
        return integrate
    except ImportError as e:
        raise RuntimeError('Need scipy. Install: pip install "nevanlinna[diagnostics]"') from e


def sum_rule(omega: Any, spectrum: Any) -> float:
    """Integral of the spectral function over omega (1 for a normalised G)."""
    integrate = _need_scipy()
    return float(integrate.trapezoid(np.asarray(spectrum, dtype=float), np.asarray(omega, dtype=float)))


def peak_position(omega: Any, spectrum: Any) -> float:
    omega = np.asarray(omega, dtype=float)
    return float(omega[int(np.argmax(spectrum))])


def max_deviation(spectrum: Any, reference: Any) -> float:
    return float(np.max(np.abs(np.asarray(spectrum) - np.asarray(reference))))
