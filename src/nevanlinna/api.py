from __future__ import annotations

from typing import Any, List

import numpy as np

from .core.types import SolverParams
from .engines.boundary import BOUNDARIES, BoundaryFactory, ConstantBoundary
from .engines.solver import NevanlinnaSolver
from .numeric.backend import DEFAULT_PRECISION


def list_boundaries() -> List[str]:
    return BOUNDARIES.list()

def register_boundary(name: str, factory: BoundaryFactory, *, overwrite: bool = False) -> None:
    BOUNDARIES.register(name, factory, overwrite=overwrite)

def make_solver(
    *,
    precision: int = DEFAULT_PRECISION,
    boundary: str = "zero",
    contraction_tol: float = 1e-10,
) -> NevanlinnaSolver:
    return NevanlinnaSolver(SolverParams(precision=precision, boundary=boundary, contraction_tol=contraction_tol))

def constant_boundary(value: complex) -> BoundaryFactory:
    """Factory for theta_{M+1}(z) = value, ready for register_boundary."""
    def factory(B):
        return ConstantBoundary(B, value)
    return factory

def continue_analytically(
    mesh: Any,
    data: Any,
    grid: Any,
    *,
    eta: float = 0.0,
    precision: int = DEFAULT_PRECISION,
    boundary: str = "zero",
) -> np.ndarray:
    """One-shot solve + evaluate: spectral function of (mesh, data) on grid + i*eta."""
    solver = make_solver(precision=precision, boundary=boundary)
    solver.solve(mesh, data)
    return solver.evaluate(grid, eta)
