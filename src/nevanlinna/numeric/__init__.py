"""Arbitrary-precision numeric layer (mpmath backed)."""

from .backend import MPBackend, DEFAULT_PRECISION
from .mpcomplex import MPComplex
from .matrix2 import Matrix2

__all__ = ["MPBackend", "DEFAULT_PRECISION", "MPComplex", "Matrix2"]
