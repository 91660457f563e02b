"""nevanlinna public API.

Keep this surface small: users should mostly interact with NevanlinnaSolver
and the helpers re-exported here.
"""

from .api import (
    list_boundaries,
    register_boundary,
    make_solver,
    constant_boundary,
    continue_analytically,
)
from .core.errors import (
    NevanlinnaError,
    EmptyStateError,
    ShapeMismatchError,
    DegenerateMeshError,
    QueryEvaluationError,
    UnknownBoundaryError,
    SingularDataError,
)
from .core.types import Node, SolveReport, SolverParams
from .engines.mobius import mobius, mobius_transform, inverse_mobius
from .engines.solver import NevanlinnaSolver
from .numeric import MPBackend, MPComplex, Matrix2

__version__ = "0.1.0"

__all__ = [
    "list_boundaries",
    "register_boundary",
    "make_solver",
    "constant_boundary",
    "continue_analytically",
    "NevanlinnaError",
    "EmptyStateError",
    "ShapeMismatchError",
    "DegenerateMeshError",
    "QueryEvaluationError",
    "UnknownBoundaryError",
    "SingularDataError",
    "Node",
    "SolveReport",
    "SolverParams",
    "mobius",
    "mobius_transform",
    "inverse_mobius",
    "NevanlinnaSolver",
    "MPBackend",
    "MPComplex",
    "Matrix2",
]
