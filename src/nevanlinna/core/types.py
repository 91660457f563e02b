from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from ..numeric.matrix2 import Matrix2
from ..numeric.mpcomplex import MPComplex

@dataclass(frozen=True)
class SolverParams:
    """Construction-time options of a NevanlinnaSolver.

    - precision: significant decimal digits of the arbitrary-precision backend
    - boundary: registered name of the boundary function theta_{M+1}
    - contraction_tol: slack allowed above |phi| = 1 before a node is reported
    """
    precision: int = 100
    boundary: str = "zero"
    contraction_tol: float = 1e-10

    def __post_init__(self) -> None:
        if self.precision < 1:
            raise ValueError(f"precision must be a positive digit count, got {self.precision}")
        if self.contraction_tol < 0:
            raise ValueError("contraction_tol must be non-negative")

@dataclass(frozen=True)
class Node:
    """Solved state of one sample: abscissa, Schur parameter and accumulated matrix."""
    index: int
    z: MPComplex
    phi: MPComplex
    abcd: Matrix2

@dataclass(frozen=True)
class SolveReport:
    size: int
    precision: int
    max_contraction: float
    noncontractive: Tuple[int, ...] = ()

    @property
    def is_contractive(self) -> bool:
        return not self.noncontractive
