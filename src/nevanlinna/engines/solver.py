"""
nevanlinna.engines.solver
-------------------------
Orchestrator: owns the solved Node sequence and exposes solve / evaluate.

The working precision is fixed when the solver is built and lives in its own
MPBackend; two solvers with different precisions never interfere.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from ..core.errors import EmptyStateError, ShapeMismatchError
from ..core.types import Node, SolveReport, SolverParams
from ..numeric.backend import MPBackend
from ..numeric.matrix2 import Matrix2
from ..numeric.mpcomplex import MPComplex
from .boundary import BOUNDARIES, BoundaryFunction, BoundaryRegistry
from .continued_fraction import FaultPolicy, evaluate_nevanlinna, evaluate_spectral, evaluate_theta
from .ingest import samples_from_host
from .mobius import mobius_transform
from .schur import check_mesh, schur_parameters

_logger = logging.getLogger(__name__)


class NevanlinnaSolver:
    def __init__(
        self,
        params: Optional[SolverParams] = None,
        *,
        boundary: Optional[BoundaryFunction] = None,
        registry: Optional[BoundaryRegistry] = None,
    ):
        self.params = params if params is not None else SolverParams()
        self.backend = MPBackend(self.params.precision)
        if boundary is None:
            boundary = (registry or BOUNDARIES).make(self.params.boundary, self.backend)
        self.boundary = boundary
        self._nodes: Tuple[Node, ...] = ()

    # -------- solved state (read-only views) --------
    @property
    def precision(self) -> int:
        return self.backend.precision

    @property
    def size(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._nodes

    @property
    def phis(self) -> Tuple[MPComplex, ...]:
        return tuple(n.phi for n in self._nodes)

    @property
    def mesh(self) -> Tuple[MPComplex, ...]:
        return tuple(n.z for n in self._nodes)

    @property
    def abcds(self) -> Tuple[Matrix2, ...]:
        return tuple(n.abcd for n in self._nodes)

    @property
    def max_contraction(self) -> float:
        if not self._nodes:
            return 0.0
        return max(float(abs(n.phi)) for n in self._nodes)

    def noncontractive(self, tol: Optional[float] = None) -> Tuple[int, ...]:
        """Indices j with |phi_j| > 1 + tol: data inconsistent with a causal function (or precision too low)."""
        tol = self.params.contraction_tol if tol is None else tol
        bound = 1 + self.backend.real(tol)
        return tuple(n.index for n in self._nodes if abs(n.phi) > bound)

    def is_contractive(self, tol: Optional[float] = None) -> bool:
        return not self.noncontractive(tol)

    # -------- solve --------
    def solve(self, mesh: Sequence[Any], data: Sequence[Any]) -> SolveReport:
        """
        Build the Schur parameters for samples (mesh[k], data[k]).

        Mismatched lengths raise ShapeMismatchError and leave the current state
        alone. Any later failure (bad abscissa, singular sample, degenerate
        mesh) discards the current state entirely.
        """
        mesh = list(mesh)
        data = list(data)
        if len(mesh) != len(data):
            raise ShapeMismatchError(f"mesh has {len(mesh)} points but data has {len(data)}")
        if not mesh:
            raise ValueError("at least one sample is required")

        B = self.backend
        try:
            z = [MPComplex.from_value(x, B) for x in mesh]
            check_mesh(z)
            m = mobius_transform(data, B)
            nodes = schur_parameters(z, m, B)
        except Exception:
            self._nodes = ()
            raise
        self._nodes = nodes

        report = SolveReport(
            size=self.size,
            precision=self.precision,
            max_contraction=self.max_contraction,
            noncontractive=self.noncontractive(),
        )
        _logger.info("solved %d nodes at %d digits, max |phi| = %.6g", report.size, report.precision, report.max_contraction)
        if not report.is_contractive:
            _logger.warning(
                "%d Schur parameter(s) exceed the unit disk (first at index %d): "
                "data not Pick-consistent or precision too low",
                len(report.noncontractive),
                report.noncontractive[0],
            )
        return report

    def solve_host(self, host: Any) -> SolveReport:
        """Solve from a host frequency-domain object (upper half-plane points only)."""
        mesh, data = samples_from_host(host)
        return self.solve(mesh, data)

    # -------- evaluate --------
    def _require_nodes(self) -> Tuple[Node, ...]:
        if not self._nodes:
            raise EmptyStateError("Empty continuation data. Please run solve(...) first.")
        return self._nodes

    def evaluate(self, grid: Any, eta: float = 0.0, *, on_fault: FaultPolicy = "raise") -> np.ndarray:
        """
        Spectral function on `grid`.

        A real grid is shifted to grid + i*eta; a complex grid is used as given
        (plus i*eta when eta is non-zero). The result has the grid's shape.
        """
        nodes = self._require_nodes()
        g = np.asarray(grid)
        if not np.iscomplexobj(g):
            g = g.astype(float)
        return evaluate_spectral(g + 1j * eta, nodes, self.boundary, self.backend, on_fault=on_fault)

    def evaluate_complex(self, points: Any, *, on_fault: FaultPolicy = "raise") -> np.ndarray:
        nodes = self._require_nodes()
        return evaluate_spectral(points, nodes, self.boundary, self.backend, on_fault=on_fault)

    def evaluate_nevanlinna(self, points: Any, *, on_fault: FaultPolicy = "raise") -> np.ndarray:
        """The continued Nevanlinna function h(z) = -G(z) itself."""
        nodes = self._require_nodes()
        return evaluate_nevanlinna(points, nodes, self.boundary, self.backend, on_fault=on_fault)

    def theta(self, z: Any) -> MPComplex:
        nodes = self._require_nodes()
        return evaluate_theta(MPComplex.from_value(z, self.backend), nodes, self.boundary)
