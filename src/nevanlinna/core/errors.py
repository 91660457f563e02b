class NevanlinnaError(Exception):
    """Base error."""

class EmptyStateError(NevanlinnaError):
    """Raised when evaluating a solver that holds no solved nodes."""

class ShapeMismatchError(NevanlinnaError, ValueError):
    """Raised when mesh and data lengths differ."""

class DegenerateMeshError(NevanlinnaError, ArithmeticError):
    """Raised when a Schur parameter cannot be derived (duplicate or real abscissas)."""

    def __init__(self, message: str, *, step: int | None = None):
        super().__init__(message)
        self.step = step

class QueryEvaluationError(NevanlinnaError, ArithmeticError):
    """Raised when the continued fraction cannot be evaluated at one query point."""

    def __init__(self, message: str, *, index: int | None = None):
        super().__init__(message)
        self.index = index

class UnknownBoundaryError(NevanlinnaError, KeyError):
    """Raised for an unregistered boundary function name."""

class SingularDataError(NevanlinnaError, ArithmeticError):
    """Raised for a sample G = i, which has no image under the Möbius map."""

    def __init__(self, message: str, *, index: int | None = None):
        super().__init__(message)
        self.index = index
