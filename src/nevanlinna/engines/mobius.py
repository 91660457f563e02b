"""
nevanlinna.engines.mobius
-------------------------
Maps between Nevanlinna space (upper half-plane values) and Schur space
(closed unit disk).

With h = -G (a Nevanlinna function when G is a causal Green's function):
    theta = (h - i) / (h + i)        forward
    h     = i (1 + theta) / (1 - theta)   inverse
"""

from __future__ import annotations
from typing import Any, Iterable, List

from ..core.errors import SingularDataError
from ..numeric.backend import MPBackend
from ..numeric.mpcomplex import MPComplex


def mobius(d: Any, B: MPBackend) -> MPComplex:
    """(-d - i) / (-d + i) for a single function value d; d == i has no image."""
    d = MPComplex.from_value(d, B)
    return (-d - B.i) / (-d + B.i)


def mobius_transform(data: Iterable[Any], B: MPBackend) -> List[MPComplex]:
    out = []
    for k, d in enumerate(data):
        try:
            out.append(mobius(d, B))
        except ZeroDivisionError as e:
            raise SingularDataError(f"sample {k} equals i: Möbius map is singular", index=k) from e
    if not out:
        raise ValueError("Möbius transform needs at least one value")
    return out


def inverse_mobius(theta: MPComplex) -> MPComplex:
    """Back to Nevanlinna space: i (1 + theta) / (1 - theta)."""
    B = theta.backend
    return B.i * (1 + theta) / (1 - theta)


def spectral_value(theta: MPComplex) -> float:
    """(1/pi) Im h(theta), narrowed to float only here."""
    h = inverse_mobius(theta)
    return float(h.imag / theta.backend.pi)
