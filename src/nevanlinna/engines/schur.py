"""
nevanlinna.engines.schur
------------------------
Schur-parameter recursion (Pick-matrix construction).

For step j = 0 .. M-2 every accumulator A_k, k >= j, is right-multiplied by the
elementary factor

    E_j(z_k) = [[ b_j(z_k),              phi_j ],
                [ conj(phi_j) b_j(z_k),  1     ]],   b_j(z) = (z - z_j) / (z - conj(z_j))

and phi_{j+1} is read off the freshly updated A_{j+1}. The accumulator list is
local to one call (single writer, no reader until the Nodes are frozen).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence, Tuple

from ..core.errors import DegenerateMeshError, ShapeMismatchError
from ..core.types import Node
from ..numeric.backend import MPBackend
from ..numeric.matrix2 import Matrix2
from ..numeric.mpcomplex import MPComplex

_logger = logging.getLogger(__name__)


def blaschke(z: MPComplex, zj: MPComplex) -> MPComplex:
    return (z - zj) / (z - zj.conjugate())


def elementary_factor(z: MPComplex, zj: MPComplex, phi: MPComplex) -> Matrix2:
    f = blaschke(z, zj)
    return Matrix2(f, phi, phi.conjugate() * f, phi.backend.one)


def check_mesh(mesh: Sequence[MPComplex]) -> None:
    """Abscissas must lie strictly in the upper half-plane and be pairwise distinct."""
    seen: Dict[Tuple[Any, Any], int] = {}
    for k, z in enumerate(mesh):
        if z.imag < 0:
            raise ValueError(f"abscissa {k} ({complex(z)}) lies in the lower half-plane")
        if not z.imag:
            raise DegenerateMeshError(f"abscissa {k} ({complex(z)}) lies on the real axis", step=k)
        key = (z.real, z.imag)
        if key in seen:
            raise DegenerateMeshError(f"abscissa {k} ({complex(z)}) duplicates abscissa {seen[key]}", step=k)
        seen[key] = k


def schur_parameters(mesh: Sequence[MPComplex], mdata: Sequence[MPComplex], B: MPBackend) -> Tuple[Node, ...]:
    """
    Solve for (phi_j, A_j) given abscissas z_j and Möbius-transformed values m_j.

    Duplicate or real abscissas raise DegenerateMeshError up front; so does an
    exactly vanishing denominator for some phi_{j+1}. A near-cancellation is
    not an error: at too low a precision it surfaces as |phi_j| > 1. Nothing
    is returned on error, a partial node sequence is never valid.
    """
    M = len(mesh)
    if M != len(mdata):
        raise ShapeMismatchError(f"mesh has {M} points but data has {len(mdata)}")
    if M == 0:
        raise ValueError("at least one sample is required")
    check_mesh(mesh)

    abcds: List[Matrix2] = [Matrix2.identity(B) for _ in range(M)]
    phis: List[MPComplex] = [B.zero] * M
    phis[0] = mdata[0]

    for j in range(M - 1):
        zj, phij = mesh[j], phis[j]
        try:
            for k in range(j, M):
                abcds[k] = abcds[k] @ elementary_factor(mesh[k], zj, phij)
        except ZeroDivisionError as e:
            raise DegenerateMeshError(f"singular elementary factor at step {j}", step=j) from e

        A, m = abcds[j + 1], mdata[j + 1]
        den = A.c * m - A.a
        if den.is_zero():
            raise DegenerateMeshError(f"vanishing denominator for phi_{j + 1}", step=j + 1)
        phis[j + 1] = (-A.d * m + A.b) / den

        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug("step %d: |phi_%d| = %s", j, j + 1, B.nstr(abs(phis[j + 1]), 12))

    return tuple(Node(index=k, z=mesh[k], phi=phis[k], abcd=abcds[k]) for k in range(M))
