"""
nevanlinna.engines.continued_fraction
-------------------------------------
Evaluates the interpolant encoded by solved Nodes at arbitrary points.

    [[P, Q], [R, S]] = prod_j E_j(z)
    theta(z) = (P theta_{M+1}(z) + Q) / (R theta_{M+1}(z) + S)
    A(z)     = (1/pi) Im[ i (1 + theta) / (1 - theta) ]

Each query point is independent of every other one; the Nodes are only read.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, Sequence

import numpy as np

from ..core.errors import QueryEvaluationError
from ..core.types import Node
from ..numeric.backend import MPBackend
from ..numeric.matrix2 import Matrix2
from ..numeric.mpcomplex import MPComplex
from .boundary import BoundaryFunction
from .mobius import inverse_mobius, spectral_value
from .schur import elementary_factor

_logger = logging.getLogger(__name__)

FaultPolicy = Literal["raise", "nan"]


def continued_fraction_matrix(z: MPComplex, nodes: Sequence[Node]) -> Matrix2:
    result = Matrix2.identity(z.backend)
    for node in nodes:
        result = result @ elementary_factor(z, node.z, node.phi)
    return result


def evaluate_theta(z: MPComplex, nodes: Sequence[Node], boundary: BoundaryFunction) -> MPComplex:
    """Schur-space value theta(z) of the interpolant."""
    return continued_fraction_matrix(z, nodes).apply(boundary(z))


def _evaluate(
    points: np.ndarray,
    nodes: Sequence[Node],
    boundary: BoundaryFunction,
    B: MPBackend,
    reduce,
    dtype,
    on_fault: FaultPolicy,
) -> np.ndarray:
    if on_fault not in ("raise", "nan"):
        raise ValueError("on_fault must be one of: raise, nan")
    flat = points.reshape(-1)
    out = np.empty(flat.shape, dtype=dtype)
    for i, w in enumerate(flat):
        z = MPComplex.from_value(complex(w), B)
        try:
            out[i] = reduce(evaluate_theta(z, nodes, boundary))
        except ZeroDivisionError as e:
            if on_fault == "raise":
                raise QueryEvaluationError(f"continued fraction is singular at z={complex(w)}", index=i) from e
            _logger.warning("query %d (z=%s): singular continued fraction, result set to NaN", i, complex(w))
            out[i] = np.nan
    return out.reshape(points.shape)


def evaluate_spectral(
    points: Any,
    nodes: Sequence[Node],
    boundary: BoundaryFunction,
    B: MPBackend,
    *,
    on_fault: FaultPolicy = "raise",
) -> np.ndarray:
    """Real spectral function at complex points (same shape as `points`)."""
    pts = np.asarray(points, dtype=complex)
    return _evaluate(pts, nodes, boundary, B, spectral_value, float, on_fault)


def evaluate_nevanlinna(
    points: Any,
    nodes: Sequence[Node],
    boundary: BoundaryFunction,
    B: MPBackend,
    *,
    on_fault: FaultPolicy = "raise",
) -> np.ndarray:
    """Complex Nevanlinna function h(z) = -G(z) at complex points."""
    pts = np.asarray(points, dtype=complex)
    return _evaluate(pts, nodes, boundary, B, lambda t: complex(inverse_mobius(t)), complex, on_fault)
